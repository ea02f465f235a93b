import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from . import config
from .routers import translate
from .schemas import ErrorResponse

logger = logging.getLogger("darija_translator")


@asynccontextmanager
async def lifespan(_: FastAPI):
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info("Darija translator starting up (model=%s, upstream=%s)", config.TRANSLATOR_MODEL, config.OLLAMA_CHAT_URL)
    yield
    logger.info("Darija translator shutting down")


app = FastAPI(
    title="Darija Translator API",
    version="0.1.0",
    description="Translate short texts into Moroccan Arabic Darija through a local Ollama chat model",
    lifespan=lifespan,
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return JSONResponse(
        status_code=422,
        content=ErrorResponse(error=f"Invalid request body: {details}").model_dump(),
    )


@app.get("/health", tags=["health"])
def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(translate.router)
