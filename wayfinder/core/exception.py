"""Core domain exceptions."""


class WayfinderError(Exception):
    """Base exception for assistant-related errors."""

    pass


class SessionNotFoundError(WayfinderError):
    """Conversation session does not exist or was evicted."""

    def __init__(self, session_id: str):
        super().__init__(f"Session not found: {session_id}")
        self.session_id = session_id


class CourtDirectoryError(WayfinderError):
    """Court directory file is missing or malformed."""

    pass


class ChatUnavailableError(WayfinderError):
    """Every configured LLM provider failed to answer."""

    pass
