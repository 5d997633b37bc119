"""Shared test fixtures."""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENV"] = "development"
for key in ("OPENAI_API_KEY", "GROQ_API_KEY", "ANTHROPIC_API_KEY", "ELEVENLABS_API_KEY", "SERPAPI_API_KEY"):
    os.environ.pop(key, None)

from collections.abc import AsyncGenerator, Generator  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from wayfinder import dependencies  # noqa: E402
from wayfinder.config import Settings, get_settings  # noqa: E402
from wayfinder.core.court_directory import CourtDirectory  # noqa: E402
from wayfinder.core.sessions import SessionStore  # noqa: E402
from wayfinder.db.connection import _get_session_factory, close_db, init_db  # noqa: E402
from wayfinder.llm.chat import ChatReply, ChatService  # noqa: E402

@pytest.fixture(autouse=True)
def reset_state():
    """Reset cached singletons and the database engine between tests."""
    import wayfinder.db.connection as db_conn

    def clear():
        db_conn._engine = None
        db_conn._async_session_factory = None
        get_settings.cache_clear()
        for name in dependencies.__all__:
            getter = getattr(dependencies, name)
            if hasattr(getter, "cache_clear"):
                getter.cache_clear()

    clear()
    yield
    clear()


# Settings Fixtures


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with no external providers configured."""
    return Settings(
        env="development",
        debug=True,
        llm_provider="ollama",
        llm_fallback_provider=None,
    )


@pytest.fixture
def court_directory() -> CourtDirectory:
    return CourtDirectory("config/court_directory.yaml")


# Database Fixtures


@pytest.fixture
async def db() -> AsyncGenerator[AsyncSession, None]:
    """Session on a fresh in-memory database."""
    await init_db()
    async with _get_session_factory()() as session:
        yield session
    await close_db()


# LLM Mocks


def _make_chat(*answers: str) -> MagicMock:
    chat = MagicMock(spec=ChatService)
    chat.complete = AsyncMock(
        side_effect=[ChatReply(content=a, provider="openai", model="gpt-4o") for a in answers]
    )
    return chat


@pytest.fixture
def make_chat():
    """Factory for chat service mocks returning the given answers in order."""
    return _make_chat


@pytest.fixture
def campus_sessions() -> SessionStore:
    return SessionStore(prefix="session", history_limit=20)


@pytest.fixture
def court_sessions() -> SessionStore:
    return SessionStore(prefix="court_session")


# API Fixtures


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """FastAPI test client on a fresh database."""
    from main import app

    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"Authorization": "Bearer admin123"}
