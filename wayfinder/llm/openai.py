"""OpenAI LLM provider, the default primary."""

from dataclasses import dataclass

from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI


@dataclass
class OpenAIProvider:
    """OpenAI provider."""

    api_key: str
    model: str = "gpt-4o"
    temperature: float = 0.7
    max_tokens: int = 1000
    timeout: int = 60

    def get_chat_model(
        self, temperature: float | None = None, max_tokens: int | None = None
    ) -> BaseChatModel:
        """Return OpenAI chat model."""
        return ChatOpenAI(
            api_key=self.api_key,
            model=self.model,
            temperature=self.temperature if temperature is None else temperature,
            max_tokens=max_tokens or self.max_tokens,
            timeout=self.timeout,
            max_retries=0,
        )

    @property
    def model_name(self) -> str:
        return self.model

    @property
    def provider_name(self) -> str:
        return "openai"
