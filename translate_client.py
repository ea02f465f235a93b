import argparse
import os
from typing import Any

import requests

TRANSLATOR_URL = os.getenv("TRANSLATOR_URL", "http://127.0.0.1:8000")


def translate(text: str, script: str = "arabic", temperature: float | None = None) -> str:
    body: dict[str, Any] = {"text": text, "script": script}
    if temperature is not None:
        body["temperature"] = temperature
    response = requests.post(f"{TRANSLATOR_URL}/translate", json=body, timeout=130)
    response.raise_for_status()
    return response.json()["translation"]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Translate text into Moroccan Arabic Darija.")
    parser.add_argument("text")
    parser.add_argument("--script", choices=["arabic", "latin"], default="arabic")
    parser.add_argument("--temperature", type=float, default=None)
    args = parser.parse_args(argv)

    print(translate(args.text, script=args.script, temperature=args.temperature))


if __name__ == "__main__":
    main()
