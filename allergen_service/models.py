"""Allergen Service — request/response models and transcript messages."""

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict


# ── Wire models ───────────────────────────────────────────────────────────────

class ChatRequest(BaseModel):
    dishName: Optional[str] = None


class ImageChatRequest(BaseModel):
    imageDataUrl: Optional[str] = None


class ChatResponse(BaseModel):
    response: str


class ImageChatResponse(BaseModel):
    response: str
    isLlmError: bool = False


class ErrorResponse(BaseModel):
    message: str
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    service: str


# ── Transcript messages ───────────────────────────────────────────────────────

class _Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def is_user(self) -> bool:
        return False

    @property
    def is_bot(self) -> bool:
        return not self.is_user

    @property
    def is_error(self) -> bool:
        return False

    @property
    def is_image(self) -> bool:
        return False


class TextMessage(_Message):
    kind: Literal["text"] = "text"
    text: str
    sender: Literal["user", "bot"]

    @property
    def is_user(self) -> bool:
        return self.sender == "user"


class ImageMessage(_Message):
    """A photo uploaded by the user, held as a data URL."""

    kind: Literal["image"] = "image"
    image_url: str

    @property
    def is_user(self) -> bool:
        return True

    @property
    def is_image(self) -> bool:
        return True


class ErrorMessage(_Message):
    """A failure shown to the user as a bot bubble."""

    kind: Literal["error"] = "error"
    text: str

    @property
    def is_error(self) -> bool:
        return True


Message = Union[TextMessage, ImageMessage, ErrorMessage]
