from typing import Any

from fastapi import FastAPI
from pydantic import BaseModel, Field

app = FastAPI(title="OllamaStub", version="0.1.0")


class StubMessage(BaseModel):
    role: str
    content: str


class ChatRequest(BaseModel):
    model: str = Field(..., min_length=1)
    messages: list[StubMessage] = Field(..., min_length=1)
    stream: bool = False
    options: dict[str, Any] = Field(default_factory=dict)


def _requested_script(messages: list[StubMessage]) -> str:
    system = next((m.content for m in messages if m.role == "system"), "")
    return "latin" if "LATIN letters" in system else "arabic"


@app.post("/api/chat")
def chat(payload: ChatRequest) -> dict[str, Any]:
    user = next((m.content for m in reversed(payload.messages) if m.role == "user"), "")
    text = user.split("\n\n", 1)[-1].strip()
    return {
        "model": payload.model,
        "message": {"role": "assistant", "content": f"[darija-{_requested_script(payload.messages)}] {text}"},
        "done": True,
    }
