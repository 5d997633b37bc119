"""Turn TTS client results into HTTP responses."""

import logging
from collections.abc import Sequence

from fastapi import HTTPException, Response

from wayfinder.speech import (
    PronunciationDictionary,
    TTSClient,
    TTSNotConfiguredError,
    TTSProviderError,
    synthesize_speech,
)

logger = logging.getLogger(__name__)


async def audio_response(
    clients: Sequence[TTSClient],
    text: str,
    pronunciations: PronunciationDictionary | None = None,
) -> Response:
    """Synthesize ``text`` and return it as ``audio/mpeg``.

    Raises:
        HTTPException: 400 for empty text, 500 when TTS is unavailable or fails.
    """
    if not text.strip():
        raise HTTPException(status_code=400, detail="Text cannot be empty")

    try:
        audio, provider = await synthesize_speech(clients, text, pronunciations)
    except TTSNotConfiguredError as e:
        logger.error("TTS request rejected: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
    except TTSProviderError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return Response(
        content=audio,
        media_type="audio/mpeg",
        headers={
            "X-TTS-Provider": provider.value,
            "X-TTS-Mode": "continuous",
            "Cache-Control": "no-cache",
        },
    )
