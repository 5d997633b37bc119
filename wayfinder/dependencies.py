"""FastAPI dependency injection."""

from functools import lru_cache

from wayfinder.assistants import CampusAssistant, CourtAssistant
from wayfinder.config import get_settings
from wayfinder.connectors.serpapi import SerpAPIClient
from wayfinder.core.court_directory import CourtDirectory
from wayfinder.core.sessions import SessionStore, SessionSweeper
from wayfinder.db.connection import get_db_session
from wayfinder.llm import ChatService, create_provider_chain
from wayfinder.speech import ElevenLabsClient, OpenAITTSClient, PronunciationDictionary

CAMPUS_MAX_TOKENS = 500
COURT_MAX_TOKENS = 1000

__all__ = [
    "get_settings",
    "get_db_session",
    "get_campus_sessions",
    "get_court_sessions",
    "get_session_sweeper",
    "get_court_directory",
    "get_campus_chat",
    "get_court_chat",
    "get_elevenlabs_client",
    "get_openai_tts_client",
    "get_web_search",
    "get_pronunciations",
    "get_campus_assistant",
    "get_court_assistant",
]


@lru_cache
def get_campus_sessions() -> SessionStore:
    """Get the college assistant's session store."""
    settings = get_settings()
    return SessionStore(
        prefix="session",
        max_messages=settings.session_max_messages,
        idle_timeout=settings.session_idle_timeout_seconds,
        history_limit=settings.college_history_window,
    )


@lru_cache
def get_court_sessions() -> SessionStore:
    """Get the court assistant's session store."""
    settings = get_settings()
    return SessionStore(
        prefix="court_session",
        max_messages=settings.session_max_messages,
        idle_timeout=settings.session_idle_timeout_seconds,
    )


@lru_cache
def get_session_sweeper() -> SessionSweeper:
    """Get the sweeper covering both session stores."""
    settings = get_settings()
    return SessionSweeper(
        [get_campus_sessions(), get_court_sessions()],
        interval=settings.session_sweep_interval_seconds,
    )


@lru_cache
def get_court_directory() -> CourtDirectory:
    """Get cached court directory."""
    return CourtDirectory(get_settings().court_directory_path)


@lru_cache
def get_campus_chat() -> ChatService:
    """Get chat service for the college assistant."""
    settings = get_settings()
    return ChatService(
        create_provider_chain(settings),
        max_tokens=CAMPUS_MAX_TOKENS,
        temperature=settings.llm_temperature,
    )


@lru_cache
def get_court_chat() -> ChatService:
    """Get chat service for the court assistant."""
    settings = get_settings()
    return ChatService(
        create_provider_chain(settings),
        max_tokens=COURT_MAX_TOKENS,
        temperature=settings.llm_temperature,
    )


@lru_cache
def get_elevenlabs_client() -> ElevenLabsClient:
    settings = get_settings()
    return ElevenLabsClient(
        api_key=settings.elevenlabs_api_key,
        timeout=settings.tts_timeout,
        voice_id=settings.elevenlabs_voice_id,
        model_id=settings.elevenlabs_model,
        max_chars=settings.elevenlabs_max_chars,
    )


@lru_cache
def get_openai_tts_client() -> OpenAITTSClient:
    settings = get_settings()
    return OpenAITTSClient(
        api_key=settings.openai_api_key,
        timeout=settings.tts_timeout,
        model=settings.openai_tts_model,
        voice=settings.openai_tts_voice,
        max_chars=settings.openai_tts_max_chars,
    )


@lru_cache
def get_web_search() -> SerpAPIClient:
    settings = get_settings()
    return SerpAPIClient(api_key=settings.serpapi_api_key, timeout=settings.serpapi_timeout)


@lru_cache
def get_pronunciations() -> PronunciationDictionary:
    """Get the runtime pronunciation dictionary."""
    return PronunciationDictionary()


def get_campus_assistant() -> CampusAssistant:
    """Build the college assistant from its cached collaborators."""
    return CampusAssistant(
        settings=get_settings(),
        sessions=get_campus_sessions(),
        chat=get_campus_chat(),
        web_search=get_web_search(),
        pronunciations=get_pronunciations(),
    )


def get_court_assistant() -> CourtAssistant:
    """Build the court assistant from its cached collaborators."""
    return CourtAssistant(
        settings=get_settings(),
        sessions=get_court_sessions(),
        chat=get_court_chat(),
        directory=get_court_directory(),
    )
