"""Allergen Service — error taxonomy, converted to JSON responses in main.py."""


class ValidationError(Exception):
    """Missing or malformed request field. Rendered as 400 {message}."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ProviderError(Exception):
    """The LLM call failed. Rendered as 500 {message, error}."""

    status_code = 500

    def __init__(self, message: str, error: str = ""):
        super().__init__(error or message)
        self.message = message
        self.error = error


class RecognitionError(Exception):
    """The image is not a menu. Rendered as a normal 200 reply flagged isLlmError."""

    status_code = 200

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
