from typing import Any

from pydantic import BaseModel, Field


class TranslationRequest(BaseModel):
    text: str | None = None
    # Any value is accepted; anything other than latin/latn falls back to arabic.
    script: Any = Field(default=None, description="arabic (default) or latin")
    temperature: float | None = None


class TranslationResponse(BaseModel):
    translation: str


class ErrorResponse(BaseModel):
    error: str


class ChatMessage(BaseModel):
    role: str
    content: str
