"""Message types for assistant conversations."""

import time
from dataclasses import dataclass, field
from enum import StrEnum

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage


class MessageRole(StrEnum):
    """Message role in conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass
class Message:
    """A message in the conversation."""

    role: MessageRole
    content: str
    timestamp: float = field(default_factory=time.time)

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role=MessageRole.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role=MessageRole.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role=MessageRole.ASSISTANT, content=content)

    def to_langchain(self) -> BaseMessage:
        """Convert to the matching LangChain message type."""
        match self.role:
            case MessageRole.SYSTEM:
                return SystemMessage(content=self.content)
            case MessageRole.USER:
                return HumanMessage(content=self.content)
            case MessageRole.ASSISTANT:
                return AIMessage(content=self.content)
            case _:
                raise ValueError(f"Unknown message role: {self.role}")


def to_langchain_messages(messages: list[Message]) -> list[BaseMessage]:
    """Convert a message list into a LangChain chat payload."""
    return [message.to_langchain() for message in messages]
