from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.schemas import ChatResponse
from src.api.routes import router
from src.core.config import get_settings
from src.core.constants import Messages
from src.llm.client import MissingCredentialError, build_chat_model
from src.relay.completion import CompletionRelay

import logging

settings = get_settings()

# Basic console logging configuration
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s  %(levelname)-7s  %(name)-20s │ %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    settings = get_settings()

    try:
        llm = build_chat_model(settings)
    except MissingCredentialError:
        logger.critical("FATAL ERROR: GROQ_API_KEY is not set. Refusing to start.")
        raise

    app.state.relay = CompletionRelay(llm, default_lang=settings.DEFAULT_LANG)

    logger.info(
        "Starting | env=%s | model=%s | provider=%s",
        settings.ENVIRONMENT,
        settings.CHAT_MODEL.value,
        settings.GROQ_BASE_URL,
    )

    try:
        yield
    finally:
        logger.info("Shutting down")


app = FastAPI(
    title="Health Assistant API",
    description="Health-only chat relay to an OpenAI-compatible provider",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


def _is_missing_query(error: dict) -> bool:
    # Non-object bodies and falsy userQuery values count as a missing query
    loc = tuple(error.get("loc", ()))
    if loc == ("body",):
        return True
    return loc[:2] == ("body", "userQuery") and not error.get("input")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected request body on %s: %s", request.url.path, exc.errors())
    message = Messages.INVALID_BODY
    if any(_is_missing_query(error) for error in exc.errors()):
        message = Messages.MISSING_INPUT

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ChatResponse(error=message).model_dump(exclude_none=True),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "client_ip": request.client.host if request.client else "unknown",
        }
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ChatResponse(error=Messages.INTERNAL_ERROR).model_dump(exclude_none=True),
    )


@app.get("/health", include_in_schema=False)
async def health_check():
    return {"status": "healthy"}


def run() -> None:
    logger.info("Server is running on http://%s:%d", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
