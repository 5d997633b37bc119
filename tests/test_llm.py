"""Tests for LLM providers and the chat service."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from wayfinder.config import Settings
from wayfinder.core.exception import ChatUnavailableError
from wayfinder.core.messages import Message
from wayfinder.llm import (
    AnthropicProvider,
    ChatService,
    GroqProvider,
    LLMFactoryError,
    OllamaProvider,
    OpenAIProvider,
    create_llm_provider,
    create_provider_chain,
)


class TestLLMFactory:
    def test_create_ollama_provider(self):
        provider = create_llm_provider(Settings(llm_provider="ollama"))

        assert isinstance(provider, OllamaProvider)
        assert provider.provider_name == "ollama"

    def test_create_openai_provider(self):
        provider = create_llm_provider(Settings(openai_api_key="sk-test", llm_temperature=0.2))

        assert isinstance(provider, OpenAIProvider)
        assert provider.temperature == 0.2

    def test_create_groq_provider(self):
        provider = create_llm_provider(Settings(groq_api_key="gsk-test"), "groq")

        assert isinstance(provider, GroqProvider)
        assert provider.model_name == "llama-3.3-70b-versatile"

    def test_create_anthropic_provider(self):
        provider = create_llm_provider(Settings(anthropic_api_key="test-key"), "anthropic")

        assert isinstance(provider, AnthropicProvider)
        assert provider.provider_name == "anthropic"

    def test_missing_key_raises(self):
        with pytest.raises(LLMFactoryError, match="OPENAI_API_KEY"):
            create_llm_provider(Settings(openai_api_key=None))

    def test_unknown_provider_raises(self):
        settings = Settings()
        settings.llm_provider = "unknown"  # type: ignore

        with pytest.raises(LLMFactoryError):
            create_llm_provider(settings)


class TestProviderChain:
    def test_primary_then_fallback(self):
        providers = create_provider_chain(Settings(openai_api_key="sk", groq_api_key="gsk"))
        assert [p.provider_name for p in providers] == ["openai", "groq"]

    def test_skips_unconfigured(self):
        providers = create_provider_chain(Settings(openai_api_key=None, groq_api_key="gsk"))
        assert [p.provider_name for p in providers] == ["groq"]

    def test_empty_when_nothing_configured(self):
        assert create_provider_chain(Settings(openai_api_key=None, groq_api_key=None)) == []


def make_provider(name: str, response=None, error: Exception | None = None) -> MagicMock:
    model = MagicMock()
    model.ainvoke = AsyncMock(side_effect=error, return_value=response)
    provider = MagicMock()
    provider.provider_name = name
    provider.model_name = f"{name}-model"
    provider.get_chat_model = MagicMock(return_value=model)
    return provider


class TestChatService:
    async def test_first_provider_answers(self):
        primary = make_provider("openai", AIMessage(content="  Namaste!  "))
        service = ChatService([primary], max_tokens=500, temperature=0.7)

        reply = await service.complete([Message.system("prompt"), Message.user("hi")])

        assert reply.content == "Namaste!"
        assert reply.provider == "openai"
        primary.get_chat_model.assert_called_once_with(temperature=0.7, max_tokens=500)
        sent = primary.get_chat_model.return_value.ainvoke.call_args.args[0]
        assert isinstance(sent[0], SystemMessage)
        assert isinstance(sent[1], HumanMessage)

    async def test_falls_back_on_error(self):
        primary = make_provider("openai", error=RuntimeError("rate limited"))
        fallback = make_provider("groq", AIMessage(content="From Groq"))
        service = ChatService([primary, fallback])

        reply = await service.complete([Message.user("hi")])

        assert reply.provider == "groq"
        assert reply.content == "From Groq"

    async def test_overrides_sampling(self):
        primary = make_provider("openai", AIMessage(content="ok"))
        service = ChatService([primary], max_tokens=500, temperature=0.7)

        await service.complete([Message.user("hi")], temperature=0.3, max_tokens=1500)

        primary.get_chat_model.assert_called_once_with(temperature=0.3, max_tokens=1500)

    async def test_content_blocks_are_flattened(self):
        response = AIMessage(content=[{"type": "text", "text": "Hello "}, {"type": "text", "text": "there"}])
        service = ChatService([make_provider("anthropic", response)])

        reply = await service.complete([Message.user("hi")])
        assert reply.content == "Hello there"

    async def test_all_providers_fail(self):
        service = ChatService([make_provider("openai", error=RuntimeError("down"))])

        with pytest.raises(ChatUnavailableError, match="All LLM providers failed"):
            await service.complete([Message.user("hi")])

    async def test_no_providers(self):
        service = ChatService([])

        assert service.is_available is False
        with pytest.raises(ChatUnavailableError):
            await service.complete([Message.user("hi")])


class TestMessage:
    def test_to_langchain(self):
        assert isinstance(Message.assistant("hello").to_langchain(), AIMessage)
