"""Chat completion with provider fallback."""

import logging
from dataclasses import dataclass

from wayfinder.core.exception import ChatUnavailableError
from wayfinder.core.messages import Message, to_langchain_messages
from wayfinder.llm.protocol import LLMProvider

logger = logging.getLogger(__name__)


@dataclass
class ChatReply:
    """Answer text and the provider that produced it."""

    content: str
    provider: str
    model: str


def _message_text(content: str | list) -> str:
    """Flatten LangChain message content, which may be a list of content blocks."""
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class ChatService:
    """Send a conversation to the first provider that answers.

    Providers are tried once each, in order. There is no retry loop.

    Example:
        service = ChatService([openai_provider, groq_provider], max_tokens=500)
        reply = await service.complete([Message.system(prompt), Message.user("hi")])
    """

    def __init__(
        self,
        providers: list[LLMProvider],
        max_tokens: int = 1000,
        temperature: float | None = None,
    ):
        self.providers = providers
        self.max_tokens = max_tokens
        self.temperature = temperature

    @property
    def is_available(self) -> bool:
        return bool(self.providers)

    async def complete(
        self,
        messages: list[Message],
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> ChatReply:
        """Return the first successful completion.

        Raises:
            ChatUnavailableError: If no provider is configured or all of them fail.
        """
        if not self.providers:
            raise ChatUnavailableError("No LLM provider is configured")

        lc_messages = to_langchain_messages(messages)
        temperature = self.temperature if temperature is None else temperature
        max_tokens = max_tokens or self.max_tokens

        last_error: Exception | None = None
        for provider in self.providers:
            try:
                model = provider.get_chat_model(temperature=temperature, max_tokens=max_tokens)
                response = await model.ainvoke(lc_messages)
            except Exception as e:
                logger.warning(
                    "LLM provider %s (%s) failed: %s",
                    provider.provider_name,
                    provider.model_name,
                    e,
                )
                last_error = e
                continue

            content = _message_text(response.content)
            logger.debug("LLM answer from %s: %d chars", provider.provider_name, len(content))
            return ChatReply(
                content=content.strip(),
                provider=provider.provider_name,
                model=provider.model_name,
            )

        raise ChatUnavailableError("All LLM providers failed") from last_error
