import logging

from fastapi import APIRouter, Body, status
from fastapi.responses import JSONResponse

from .. import config
from ..exceptions import TranslationError
from ..schemas import ErrorResponse, TranslationRequest, TranslationResponse
from ..services import call_ollama_chat, normalize_script, resolve_temperature

logger = logging.getLogger("darija_translator")

TEXT_REQUIRED_MESSAGE = "Le champ 'text' est obligatoire."

router = APIRouter(tags=["translate"])


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post(
    "/translate",
    response_model=TranslationResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def translate(payload: TranslationRequest | None = Body(default=None)) -> TranslationResponse | JSONResponse:
    if payload is None or payload.text is None or not payload.text.strip():
        return error_response(status.HTTP_400_BAD_REQUEST, TEXT_REQUIRED_MESSAGE)

    source_text = payload.text.strip()
    script = normalize_script(payload.script)
    # Any model sent by the caller is ignored.
    model = config.TRANSLATOR_MODEL
    temperature = resolve_temperature(payload.temperature)

    try:
        translation = await call_ollama_chat(source_text, script, model, temperature)
    except TranslationError as exc:
        logger.exception("Translation failed")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Translation failed: {exc}")

    return TranslationResponse(translation=translation)
