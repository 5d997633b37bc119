"""Ollama LLM provider for local development."""

from dataclasses import dataclass

from langchain_core.language_models import BaseChatModel
from langchain_ollama import ChatOllama


@dataclass
class OllamaProvider:
    """Ollama provider for local LLM inference."""

    base_url: str
    model: str
    temperature: float = 0.7

    def get_chat_model(
        self, temperature: float | None = None, max_tokens: int | None = None
    ) -> BaseChatModel:
        """Return Ollama chat model. ``max_tokens`` maps to ``num_predict``."""
        return ChatOllama(
            base_url=self.base_url,
            model=self.model,
            temperature=self.temperature if temperature is None else temperature,
            num_predict=max_tokens,
        )

    @property
    def model_name(self) -> str:
        return self.model

    @property
    def provider_name(self) -> str:
        return "ollama"
