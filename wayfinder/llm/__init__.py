"""LLM provider module."""

from wayfinder.llm.anthropic import AnthropicProvider
from wayfinder.llm.chat import ChatReply, ChatService
from wayfinder.llm.factory import LLMFactoryError, create_llm_provider, create_provider_chain
from wayfinder.llm.groq import GroqProvider
from wayfinder.llm.ollama import OllamaProvider
from wayfinder.llm.openai import OpenAIProvider
from wayfinder.llm.protocol import LLMProvider

__all__ = [
    "LLMProvider",
    "create_llm_provider",
    "create_provider_chain",
    "LLMFactoryError",
    "ChatService",
    "ChatReply",
    "OllamaProvider",
    "AnthropicProvider",
    "OpenAIProvider",
    "GroqProvider",
]
