import os

OLLAMA_CHAT_URL = os.getenv("OLLAMA_CHAT_URL", "http://localhost:11434/api/chat")

# Cloud model: requires `ollama signin` and an Ollama release with cloud model support.
TRANSLATOR_MODEL = os.getenv("TRANSLATOR_MODEL", "deepseek-v3.1:671b-cloud")

DEFAULT_TEMPERATURE = float(os.getenv("TRANSLATOR_DEFAULT_TEMPERATURE", "0.2"))

CONNECT_TIMEOUT_SECONDS = float(os.getenv("OLLAMA_CONNECT_TIMEOUT_SECONDS", "10"))
REQUEST_TIMEOUT_SECONDS = float(os.getenv("OLLAMA_TIMEOUT_SECONDS", "120"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "info")
