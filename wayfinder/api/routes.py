"""College assistant, TTS and monitoring routes."""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession

from wayfinder.api.schemas import (
    AskRequest,
    AskResponse,
    AssistantSessionStats,
    ChatMessageOut,
    HealthResponse,
    SessionInfo,
    SessionStatsResponse,
    TTSRequest,
)
from wayfinder.api.speech import audio_response
from wayfinder.assistants import CampusAssistant
from wayfinder.auth import require_admin
from wayfinder.core.sessions import SessionStore
from wayfinder.db import crud
from wayfinder.db.models import ChatMessage
from wayfinder.dependencies import (
    get_campus_assistant,
    get_campus_sessions,
    get_court_sessions,
    get_db_session,
    get_elevenlabs_client,
    get_openai_tts_client,
    get_pronunciations,
)
from wayfinder.speech import ElevenLabsClient, OpenAITTSClient, PronunciationDictionary

logger = logging.getLogger(__name__)

router = APIRouter()

RECENT_MESSAGES = 50

STARTED_AT = time.monotonic()


# Health & monitoring


@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """Check application health status."""
    return HealthResponse(status="ok", uptime_seconds=int(time.monotonic() - STARTED_AT))


@router.get("/messages", response_model=list[ChatMessageOut], tags=["Chat"])
async def recent_messages(db: AsyncSession = Depends(get_db_session)) -> list[ChatMessageOut]:
    """Return the most recent stored chat messages, newest first."""
    rows = await crud.chat_messages.get_all(
        db, limit=RECENT_MESSAGES, order_by=[ChatMessage.timestamp.desc()]
    )
    return [ChatMessageOut.model_validate(row) for row in rows]


def _store_stats(store: SessionStore) -> AssistantSessionStats:
    stats = store.stats()
    return AssistantSessionStats(
        total_sessions=stats.total_sessions,
        sessions=[
            SessionInfo(id=s.id, message_count=s.message_count, last_activity=s.last_activity)
            for s in stats.sessions
        ],
    )


@router.get(
    "/sessions/stats",
    response_model=SessionStatsResponse,
    dependencies=[Depends(require_admin)],
    tags=["Sessions"],
)
async def session_stats(
    campus: SessionStore = Depends(get_campus_sessions),
    court: SessionStore = Depends(get_court_sessions),
) -> SessionStatsResponse:
    """Report live conversation sessions for both assistants."""
    return SessionStatsResponse(campus=_store_stats(campus), court=_store_stats(court))


# College assistant


@router.post("/ask", response_model=AskResponse, tags=["Chat"])
async def ask(
    request: AskRequest,
    assistant: CampusAssistant = Depends(get_campus_assistant),
    db: AsyncSession = Depends(get_db_session),
) -> AskResponse:
    """Answer a college question.

    If sessionId is provided and still alive, continues that conversation.
    Otherwise a new session is created. Always returns the session ID.
    """
    try:
        result = await assistant.answer(db, request.message, request.session_id, request.language)
    except Exception:
        logger.exception("Ask failed for message: %s...", request.message[:50])
        raise HTTPException(
            status_code=500,
            detail="Service temporarily unavailable. Please try again later.",
        )

    return AskResponse(
        response=result.response,
        session_id=result.session_id,
        message_id=result.message_id,
        intent=result.intent,
        web_search_used=result.web_search_used,
    )


@router.post("/tts", response_class=Response, tags=["Speech"])
async def text_to_speech(
    request: TTSRequest,
    elevenlabs: ElevenLabsClient = Depends(get_elevenlabs_client),
    openai_tts: OpenAITTSClient = Depends(get_openai_tts_client),
    pronunciations: PronunciationDictionary = Depends(get_pronunciations),
) -> Response:
    """Speak an answer with ElevenLabs, falling back to OpenAI."""
    return await audio_response([elevenlabs, openai_tts], request.text, pronunciations)
