import logging

from allergen_service.config import LOG_LEVEL

_FORMAT = "[allergen-service] %(asctime)s %(levelname)s %(name)s: %(message)s"
_configured = False


def _level(name: str) -> int:
    # uvicorn also accepts "trace", which logging has no name for
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.DEBUG


def get_logger(name: str) -> logging.Logger:
    """Module logger sharing one handler and the LOG_LEVEL from config."""
    global _configured
    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root = logging.getLogger("allergen_service")
        root.addHandler(handler)
        root.setLevel(_level(LOG_LEVEL))
        root.propagate = False
        _configured = True
    return logging.getLogger(name)
