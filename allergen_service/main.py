"""
Allergen Service
Handles: dish-name allergen lookups, menu photo allergen extraction
Port: 8000

- Prompts are fixed templates; Gemini does all of the food knowledge
- One provider client, built at startup and injected into the handlers
- Every failure comes back as JSON the chat can render as a bubble
"""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from allergen_service.config import ALLOWED_ORIGINS, HOST, LOG_LEVEL, PORT
from allergen_service.exceptions import ProviderError, RecognitionError, ValidationError
from allergen_service.gemini_client import GeminiClient
from allergen_service.images import parse_data_url
from allergen_service.logger import get_logger
from allergen_service.models import (
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    HealthResponse,
    ImageChatRequest,
    ImageChatResponse,
)
from allergen_service.prompts import (
    IMAGE_APOLOGY,
    MENU_IMAGE_PROMPT,
    NOT_A_MENU_REPLY,
    TEXT_APOLOGY,
    build_dish_prompt,
    is_not_a_menu,
)

logger = get_logger(__name__)

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


# ── App ───────────────────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.provider = GeminiClient()
    logger.info("Started with model %s", app.state.provider.model)
    yield
    await app.state.provider.aclose()


app = FastAPI(title="Allergen Service", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_provider(request: Request) -> GeminiClient:
    return request.app.state.provider


# ── Error handlers ────────────────────────────────────────────────────────────

@app.exception_handler(ValidationError)
async def validation_error(request: Request, exc: ValidationError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"message": "Request body is invalid.", "error": str(exc.errors())})


@app.exception_handler(ProviderError)
async def provider_error(request: Request, exc: ProviderError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message, "error": exc.error})


@app.exception_handler(RecognitionError)
async def recognition_error(request: Request, exc: RecognitionError):
    return JSONResponse(status_code=exc.status_code, content={"response": exc.message, "isLlmError": True})


# ── Endpoints ─────────────────────────────────────────────────────────────────

@app.post("/api/chat", response_model=ChatResponse, responses=ERROR_RESPONSES)
async def chat(body: ChatRequest, provider: GeminiClient = Depends(get_provider)):
    if not body.dishName:
        raise ValidationError("Dish name is required.")

    logger.info("Dish lookup: %r", body.dishName)
    prompt = build_dish_prompt(body.dishName)
    try:
        text = await provider.generate(prompt)
    except Exception as e:
        logger.exception("Error communicating with Gemini")
        raise ProviderError(TEXT_APOLOGY, error=str(e)) from e

    return {"response": text}


@app.post("/api/image-chat", response_model=ImageChatResponse, responses=ERROR_RESPONSES)
async def image_chat(body: ImageChatRequest, provider: GeminiClient = Depends(get_provider)):
    if not body.imageDataUrl:
        raise ValidationError("Image data is required.")

    image = parse_data_url(body.imageDataUrl)
    logger.info("Menu photo: %s, %d base64 chars", image.mime_type, len(image.data))
    try:
        text = await provider.generate(MENU_IMAGE_PROMPT, image=image)
    except Exception as e:
        logger.exception("Error analyzing menu image with Gemini")
        raise ProviderError(IMAGE_APOLOGY, error=str(e)) from e

    if is_not_a_menu(text):
        logger.info("Image was not recognized as a menu")
        raise RecognitionError(NOT_A_MENU_REPLY)

    return {"response": text, "isLlmError": False}


@app.get("/health", response_model=HealthResponse)
async def health():
    return {"status": "ok", "service": "allergen"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("allergen_service.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL)
