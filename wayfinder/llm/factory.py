"""LLM provider factory."""

import logging

from wayfinder.config import ProviderName, Settings
from wayfinder.llm.anthropic import AnthropicProvider
from wayfinder.llm.groq import GroqProvider
from wayfinder.llm.ollama import OllamaProvider
from wayfinder.llm.openai import OpenAIProvider
from wayfinder.llm.protocol import LLMProvider

logger = logging.getLogger(__name__)


class LLMFactoryError(Exception):
    """Raised when LLM factory cannot create a provider."""


def create_llm_provider(settings: Settings, provider: ProviderName | None = None) -> LLMProvider:
    """Create an LLM provider based on settings.

    Args:
        settings: Application settings containing provider configuration.
        provider: Provider to build; defaults to ``settings.llm_provider``.

    Returns:
        Configured LLM provider instance.

    Raises:
        LLMFactoryError: If provider cannot be created due to missing config.
    """
    name = provider or settings.llm_provider
    match name:
        case "openai":
            if not settings.openai_api_key:
                raise LLMFactoryError("OPENAI_API_KEY is required for OpenAI provider")
            return OpenAIProvider(
                api_key=settings.openai_api_key,
                model=settings.openai_model,
                temperature=settings.llm_temperature,
            )

        case "groq":
            if not settings.groq_api_key:
                raise LLMFactoryError("GROQ_API_KEY is required for Groq provider")
            return GroqProvider(
                api_key=settings.groq_api_key,
                model=settings.groq_model,
                base_url=settings.groq_base_url,
                temperature=settings.llm_temperature,
            )

        case "anthropic":
            if not settings.anthropic_api_key:
                raise LLMFactoryError("ANTHROPIC_API_KEY is required for Anthropic provider")
            return AnthropicProvider(
                api_key=settings.anthropic_api_key,
                model=settings.anthropic_model,
                temperature=settings.llm_temperature,
            )

        case "ollama":
            return OllamaProvider(
                base_url=settings.ollama_base_url,
                model=settings.ollama_model,
                temperature=settings.llm_temperature,
            )

        case _:
            raise LLMFactoryError(f"Unknown LLM provider: {name}")


def create_provider_chain(settings: Settings) -> list[LLMProvider]:
    """Build every configured provider, primary first.

    Providers whose configuration is incomplete are left out. An empty list
    means no provider can answer.
    """
    providers = []
    for name in settings.provider_chain:
        try:
            providers.append(create_llm_provider(settings, name))
        except LLMFactoryError as e:
            logger.warning("Skipping LLM provider %s: %s", name, e)
    return providers
