import logging
from time import perf_counter
from typing import Any

import anyio
import httpx

from . import config
from .exceptions import TransportError, UpstreamError
from .schemas import ChatMessage

logger = logging.getLogger("darija_translator")

ARABIC = "arabic"
LATIN = "latin"

_LATIN_ALIASES = {"latin", "latn"}

SCRIPT_RULES = {
    LATIN: "Write the Darija using LATIN letters (Darija latin).",
    ARABIC: "Write the Darija using ARABIC script (الحروف العربية).",
}


def normalize_script(script: Any) -> str:
    if script is None:
        return ARABIC
    if str(script).strip().lower() in _LATIN_ALIASES:
        return LATIN
    return ARABIC


def resolve_temperature(temperature: float | None) -> float:
    return temperature if temperature is not None else config.DEFAULT_TEMPERATURE


def build_messages(source_text: str, script: str) -> list[ChatMessage]:
    """System message pins the output format and script, user message carries the text."""
    system = (
        "You are a professional translator. "
        "Your job: translate the user text into Moroccan Arabic Darija. "
        f"{SCRIPT_RULES[script]} "
        "Output ONLY the translation, no quotes, no explanations, no extra text."
    )
    user = (
        "Detect the source language automatically and translate this text to Moroccan Arabic Darija:\n\n"
        f"{source_text}"
    )
    return [
        ChatMessage(role="system", content=system),
        ChatMessage(role="user", content=user),
    ]


def build_chat_payload(source_text: str, script: str, model: str, temperature: float) -> dict[str, Any]:
    return {
        "model": model,
        "messages": [message.model_dump() for message in build_messages(source_text, script)],
        "stream": False,
        "options": {"temperature": temperature},
    }


def extract_translation(upstream_response: httpx.Response) -> str:
    # Expected shape: {..., "message": {"role": "assistant", "content": "..."}, "done": true}
    response_body = upstream_response.text
    try:
        root = upstream_response.json()
    except ValueError as exc:
        raise UpstreamError(f"Invalid Ollama response (not JSON): {response_body}") from exc

    if not isinstance(root, dict) or "message" not in root:
        raise UpstreamError(f"Invalid Ollama response ('message' field missing): {response_body}")

    message = root["message"]
    if not isinstance(message, dict):
        raise UpstreamError(f"Invalid Ollama response ('message' is not an object): {response_body}")

    content = message.get("content") or ""
    if not isinstance(content, str):
        raise UpstreamError(f"Invalid Ollama response ('content' is not a string): {response_body}")

    content = content.strip()
    if not content:
        raise UpstreamError(f"Empty translation returned by Ollama. Full response: {response_body}")
    return content


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


async def call_ollama_chat(source_text: str, script: str, model: str, temperature: float) -> str:
    payload = build_chat_payload(source_text, script, model, temperature)
    timeout = httpx.Timeout(config.REQUEST_TIMEOUT_SECONDS, connect=config.CONNECT_TIMEOUT_SECONDS)
    started = perf_counter()

    try:
        # httpx timeouts bound each read separately; fail_after caps the whole exchange.
        with anyio.fail_after(config.REQUEST_TIMEOUT_SECONDS):
            async with httpx.AsyncClient(timeout=timeout) as client:
                upstream_response = await client.post(config.OLLAMA_CHAT_URL, json=payload)
    except TimeoutError as exc:
        raise TransportError(
            f"Ollama API timed out: no complete reply within {config.REQUEST_TIMEOUT_SECONDS:g}s"
        ) from exc
    except httpx.TimeoutException as exc:
        raise TransportError(f"Ollama API timed out: {_describe(exc)}") from exc
    except httpx.HTTPError as exc:
        raise TransportError(f"Failed to reach Ollama API: {_describe(exc)}") from exc

    latency_ms = (perf_counter() - started) * 1000
    logger.info(
        "Ollama chat model=%s script=%s temperature=%s status=%d %dms",
        model,
        script,
        temperature,
        upstream_response.status_code,
        round(latency_ms),
    )

    if upstream_response.status_code != 200:
        raise UpstreamError(
            f"Ollama API status={upstream_response.status_code} body={upstream_response.text}"
        )

    return extract_translation(upstream_response)
