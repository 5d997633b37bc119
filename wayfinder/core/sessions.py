"""In-memory conversation sessions with idle eviction.

Sessions are volatile and process-local. Each assistant owns its own
``SessionStore`` (created by the dependency layer), and a ``SessionSweeper``
task started by the application lifespan evicts idle sessions periodically.
"""

import asyncio
import logging
import secrets
import string
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from wayfinder.core.exception import SessionNotFoundError
from wayfinder.core.messages import Message, MessageRole

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_SUFFIX_LENGTH = 9

Clock = Callable[[], float]


@dataclass
class Session:
    """A single conversation buffer."""

    id: str
    created_at: float
    last_activity: float
    messages: list[Message] = field(default_factory=list)

    def touch(self, now: float) -> None:
        self.last_activity = now

    def is_idle(self, now: float, idle_timeout: float) -> bool:
        return now - self.last_activity > idle_timeout


@dataclass
class SessionSummary:
    """Monitoring view of a session."""

    id: str
    message_count: int
    last_activity: float


@dataclass
class SessionStats:
    """Monitoring view of a store."""

    total_sessions: int
    sessions: list[SessionSummary]


class SessionStore:
    """Holds per-conversation message history in memory.

    Messages per session are capped at ``max_messages`` with oldest-first
    trimming. ``history_limit`` bounds how many of the retained messages are
    replayed to the LLM (``None`` replays all of them).

    IDs are never revived: a lookup miss always mints a fresh ID.
    """

    def __init__(
        self,
        prefix: str = "session",
        max_messages: int = 30,
        idle_timeout: float = 15 * 60,
        history_limit: int | None = None,
        clock: Clock = time.time,
    ):
        if max_messages < 1:
            raise ValueError("max_messages must be at least 1")
        self.prefix = prefix
        self.max_messages = max_messages
        self.idle_timeout = idle_timeout
        self.history_limit = history_limit
        self._clock = clock
        self._sessions: dict[str, Session] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def _new_id(self) -> str:
        while True:
            suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_SUFFIX_LENGTH))
            session_id = f"{self.prefix}_{int(self._clock() * 1000)}_{suffix}"
            if session_id not in self._sessions:
                return session_id

    def get(self, session_id: str) -> Session | None:
        """Look up a session without refreshing it."""
        return self._sessions.get(session_id)

    def get_or_create(self, session_id: str | None = None) -> Session:
        """Return the known session for ``session_id`` or mint a new one.

        A known session has its activity refreshed. An unknown or missing ID
        never gets registered as-is; a new ID is generated instead.
        """
        now = self._clock()
        if session_id:
            session = self._sessions.get(session_id)
            if session is not None:
                session.touch(now)
                return session
            logger.debug("Session %s not found, creating new session", session_id)

        session = Session(id=self._new_id(), created_at=now, last_activity=now)
        self._sessions[session.id] = session
        logger.info("Session created: %s", session.id)
        return session

    def add_message(self, session_id: str, role: MessageRole | str, content: str) -> Message:
        """Append a message, trimming the oldest beyond the cap.

        Raises:
            SessionNotFoundError: If the session does not exist (e.g. evicted).
        """
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)

        now = self._clock()
        message = Message(role=MessageRole(role), content=content, timestamp=now)
        session.messages.append(message)
        if len(session.messages) > self.max_messages:
            del session.messages[: len(session.messages) - self.max_messages]
        session.touch(now)
        return message

    def get_conversation_history(self, session_id: str, system_prompt: str) -> list[Message]:
        """Return ``[system, ...recent messages]`` ready for an LLM call."""
        history = [Message.system(system_prompt)]
        session = self._sessions.get(session_id)
        if session is None:
            return history

        session.touch(self._clock())
        recent = session.messages
        if self.history_limit is not None:
            recent = recent[-self.history_limit :] if self.history_limit > 0 else []
        history.extend(Message(role=m.role, content=m.content, timestamp=m.timestamp) for m in recent)
        return history

    def clear(self, session_id: str) -> bool:
        """Drop a session. Returns True if it existed."""
        if self._sessions.pop(session_id, None) is None:
            return False
        logger.info("Session cleared: %s", session_id)
        return True

    def sweep(self, now: float | None = None) -> int:
        """Evict sessions idle beyond the timeout. Returns the number removed."""
        now = self._clock() if now is None else now
        expired = [
            session_id
            for session_id, session in self._sessions.items()
            if session.is_idle(now, self.idle_timeout)
        ]
        for session_id in expired:
            del self._sessions[session_id]

        if expired:
            logger.info(
                "Cleaned up %d inactive %s sessions. Active sessions: %d",
                len(expired),
                self.prefix,
                len(self._sessions),
            )
        return len(expired)

    def stats(self) -> SessionStats:
        return SessionStats(
            total_sessions=len(self._sessions),
            sessions=[
                SessionSummary(
                    id=session.id,
                    message_count=len(session.messages),
                    last_activity=session.last_activity,
                )
                for session in self._sessions.values()
            ],
        )


class SessionSweeper:
    """Background task that periodically sweeps one or more session stores."""

    def __init__(self, stores: Sequence[SessionStore], interval: float = 5 * 60):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.stores = list(stores)
        self.interval = interval
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def run_once(self) -> int:
        """Sweep every store once. Returns the total number evicted."""
        return sum(store.sweep() for store in self.stores)

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            try:
                self.run_once()
            except Exception:
                logger.exception("Session sweep failed")

    def start(self) -> None:
        """Start the sweep loop on the running event loop."""
        if self.is_running:
            return
        self._task = asyncio.create_task(self._run(), name="session-sweeper")
        logger.debug("Session sweeper started (interval %ss)", self.interval)

    async def stop(self) -> None:
        """Cancel the sweep loop and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.debug("Session sweeper stopped")
