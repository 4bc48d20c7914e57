"""
Configuration settings for the resume2portfolio pipeline.

Everything is read from the environment (a local .env is honoured).
The parsing core only needs MIN_TEXT_LENGTH; the LLM settings are used
by the optional refinement stage and are never required.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import os

# Extracted text shorter than this is rejected as unusable
MIN_TEXT_LENGTH = 50

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# LLM Provider Configuration
# Set to "ollama" or "openai"
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "openai").lower()

DEFAULT_MODEL = {
    "ollama": "llama3.1",
    "openai": "gpt-4o-mini",
}

# OpenAI Configuration (optional – refinement is skipped without a key)
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL_PARAMS = {
    "temperature": 0.2,
    "max_tokens": 4096
}

# Ollama Configuration
OLLAMA_BASE_URL = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")


def get_model_for_provider(provider: str = None) -> str:
    """Get the default model for the specified provider."""
    provider = provider or LLM_PROVIDER
    return DEFAULT_MODEL.get(provider, "gpt-4o-mini")


def ai_credentials_configured(provider: str = None) -> bool:
    """True when the configured provider can be called at all."""
    provider = provider or LLM_PROVIDER
    if provider == "openai":
        return bool(OPENAI_API_KEY)
    # a local ollama daemon needs no key
    return provider == "ollama"
