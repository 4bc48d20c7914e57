"""
LLM client abstraction layer to support multiple providers.

Only the optional refinement stage talks to a model; the parsing core
never imports this module's providers unless a refiner asks for one.
"""

from __future__ import annotations
from typing import List, Dict
from abc import ABC, abstractmethod

from . import config

try:
    from ollama import Client as OllamaSDK
except ImportError:
    OllamaSDK = None

try:
    from openai import OpenAI
except ImportError:
    OpenAI = None


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    @abstractmethod
    def chat(self, model: str, messages: List[Dict[str, str]]) -> str:
        """Send a chat request and return the reply text."""


class OllamaClient(LLMClient):
    """Ollama client implementation."""

    def __init__(self, host: str | None = None):
        if OllamaSDK is None:
            raise ImportError("ollama package is required for OllamaClient")
        self.client = OllamaSDK(host=host or config.OLLAMA_BASE_URL)

    def chat(self, model: str, messages: List[Dict[str, str]]) -> str:
        response = self.client.chat(model=model, messages=messages)
        return response.message.content


class OpenAIClient(LLMClient):
    """OpenAI client implementation."""

    def __init__(self, api_key: str | None = None):
        if OpenAI is None:
            raise ImportError("openai package is required for OpenAIClient")

        api_key = api_key or config.OPENAI_API_KEY
        if not api_key:
            raise ValueError("OpenAI API key is required. Set OPENAI_API_KEY environment variable or pass api_key parameter.")

        self.client = OpenAI(api_key=api_key)

    def chat(self, model: str, messages: List[Dict[str, str]]) -> str:
        params = config.OPENAI_MODEL_PARAMS
        response = self.client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=params.get("temperature", 0.2),
            max_tokens=params.get("max_tokens", 4096),
        )
        return response.choices[0].message.content or ""


def get_llm_client(provider: str | None = None) -> LLMClient:
    """Factory function to get the appropriate LLM client based on configuration."""
    provider = (provider or config.LLM_PROVIDER).lower()
    if provider == "openai":
        return OpenAIClient()
    elif provider == "ollama":
        return OllamaClient()
    else:
        raise ValueError(f"Unsupported LLM provider: {provider}")
