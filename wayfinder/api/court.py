"""Court assistant and court TTS routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession

from wayfinder.api.schemas import (
    BuildingImage,
    CourtAskMetadata,
    CourtAskRequest,
    CourtAskResponse,
    TTSRequest,
)
from wayfinder.api.speech import audio_response
from wayfinder.assistants import CourtAssistant
from wayfinder.dependencies import (
    get_court_assistant,
    get_db_session,
    get_elevenlabs_client,
    get_openai_tts_client,
)
from wayfinder.speech import ElevenLabsClient, OpenAITTSClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/court", tags=["Court"])


@router.post("/ask", response_model=CourtAskResponse)
async def court_ask(
    request: CourtAskRequest,
    assistant: CourtAssistant = Depends(get_court_assistant),
    db: AsyncSession = Depends(get_db_session),
) -> CourtAskResponse:
    """Answer a court navigation question."""
    try:
        result = await assistant.answer(db, request.message, request.session_id)
    except Exception:
        logger.exception("Court ask failed for message: %s...", request.message[:50])
        raise HTTPException(
            status_code=500,
            detail="There was an error processing your request. Please try again.",
        )

    return CourtAskResponse(
        response=result.response,
        session_id=result.session_id,
        building_images=[
            BuildingImage(
                id=image.id,
                title=image.title,
                description=image.description,
                image_url=image.image_url,
                room_number=image.room_number,
                building_name=image.building_name,
            )
            for image in result.building_images
        ],
        metadata=CourtAskMetadata(
            has_room_info=result.has_room_info,
            has_building_info=result.has_building_info,
            has_staff_info=result.has_staff_info,
            has_building_images=result.has_building_images,
            is_static_lookup=result.is_static_lookup,
        ),
    )


@router.post("/tts", response_class=Response)
async def court_tts(
    request: TTSRequest,
    elevenlabs: ElevenLabsClient = Depends(get_elevenlabs_client),
) -> Response:
    """Speak a court answer with the ElevenLabs Hinglish voice."""
    return await audio_response([elevenlabs], request.text)


@router.post("/tts-openai", response_class=Response)
async def court_tts_openai(
    request: TTSRequest,
    openai_tts: OpenAITTSClient = Depends(get_openai_tts_client),
) -> Response:
    """Speak a court answer with OpenAI TTS."""
    return await audio_response([openai_tts], request.text)
