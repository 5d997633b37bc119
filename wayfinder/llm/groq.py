"""Groq provider through its OpenAI-compatible endpoint."""

from dataclasses import dataclass

from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI

GROQ_BASE_URL = "https://api.groq.com/openai/v1"


@dataclass
class GroqProvider:
    """Groq-hosted open models, used as the fallback provider."""

    api_key: str
    model: str = "llama-3.3-70b-versatile"
    base_url: str = GROQ_BASE_URL
    temperature: float = 0.7
    max_tokens: int = 1000
    timeout: int = 60

    def get_chat_model(
        self, temperature: float | None = None, max_tokens: int | None = None
    ) -> BaseChatModel:
        """Return a ChatOpenAI model pointed at Groq."""
        return ChatOpenAI(
            api_key=self.api_key,
            base_url=self.base_url,
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
        return "groq"
