"""LLM provider protocol definition."""

from typing import Protocol, runtime_checkable

from langchain_core.language_models import BaseChatModel


@runtime_checkable
class LLMProvider(Protocol):
    """Protocol for LLM providers."""

    def get_chat_model(
        self, temperature: float | None = None, max_tokens: int | None = None
    ) -> BaseChatModel:
        """Return a LangChain chat model, optionally overriding sampling settings."""
        ...

    @property
    def model_name(self) -> str:
        """Return the model name being used."""
        ...

    @property
    def provider_name(self) -> str:
        """Return the provider name (openai, groq, anthropic, ollama)."""
        ...
