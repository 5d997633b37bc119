"""Anthropic Claude LLM provider."""

from dataclasses import dataclass

from langchain_anthropic import ChatAnthropic
from langchain_core.language_models import BaseChatModel


@dataclass
class AnthropicProvider:
    """Anthropic Claude provider."""

    api_key: str
    model: str = "claude-sonnet-4-20250514"
    temperature: float = 0.7
    max_tokens: int = 1000

    def get_chat_model(
        self, temperature: float | None = None, max_tokens: int | None = None
    ) -> BaseChatModel:
        """Return Anthropic chat model."""
        return ChatAnthropic(
            api_key=self.api_key,
            model=self.model,
            temperature=self.temperature if temperature is None else temperature,
            max_tokens=max_tokens or self.max_tokens,
        )

    @property
    def model_name(self) -> str:
        return self.model

    @property
    def provider_name(self) -> str:
        return "anthropic"
