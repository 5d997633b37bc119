"""Text-to-speech provider clients (ElevenLabs and OpenAI)."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Protocol, runtime_checkable

import httpx

from wayfinder.speech.cleaner import clean_text_for_speech, truncate_for_tts
from wayfinder.speech.normalizer import normalize_text_for_tts
from wayfinder.speech.pronunciation import PronunciationDictionary

logger = logging.getLogger(__name__)

ELEVENLABS_URL = "https://api.elevenlabs.io/v1/text-to-speech/{voice_id}"
OPENAI_SPEECH_URL = "https://api.openai.com/v1/audio/speech"


class TTSError(Exception):
    """Base exception for TTS operations."""


class TTSNotConfiguredError(TTSError):
    """Provider API key is missing."""


class TTSProviderError(TTSError):
    """Provider rejected the request."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TTSProviderName(StrEnum):
    ELEVENLABS = "elevenlabs"
    OPENAI = "openai"


@runtime_checkable
class TTSClient(Protocol):
    """Protocol for speech synthesis clients."""

    @property
    def provider_name(self) -> TTSProviderName: ...

    @property
    def max_chars(self) -> int: ...

    @property
    def is_configured(self) -> bool: ...

    async def synthesize(self, text: str) -> bytes:
        """Return MP3 audio for already prepared text."""
        ...

    async def close(self) -> None: ...


def prepare_speech_text(text: str, max_chars: int) -> str:
    """Clean, normalize and truncate answer text for a TTS provider."""
    cleaned = clean_text_for_speech(text)
    normalized = normalize_text_for_tts(cleaned)
    return truncate_for_tts(normalized, max_chars)


def _error_details(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text
    if isinstance(data, dict):
        detail = data.get("detail") or data.get("message") or data.get("error")
        if detail:
            return detail if isinstance(detail, str) else str(detail)
    return response.text


def map_provider_error(provider: str, status_code: int, details: str) -> TTSProviderError:
    """Translate a provider HTTP failure into a user-facing error."""
    if status_code == 413 or "too long" in details.lower():
        message = "Text too long for TTS provider (max ~5000 chars)"
    elif status_code in (401, 403):
        message = "TTS authentication failed - check API key"
    elif status_code == 429:
        message = "TTS rate limit exceeded - please try again"
    else:
        message = f"{provider} API error ({status_code}): {details}"
    return TTSProviderError(message, status_code=status_code)


@dataclass
class _HTTPSpeechClient:
    """Shared httpx plumbing for TTS clients."""

    api_key: str | None
    timeout: int = 60
    transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False)

    _client: httpx.AsyncClient | None = field(default=None, init=False, repr=False)

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self.transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _post_audio(
        self, provider: str, url: str, headers: dict[str, str], payload: dict[str, Any]
    ) -> bytes:
        if not self.is_configured:
            raise TTSNotConfiguredError("TTS service not configured")

        try:
            response = await self._get_client().post(url, headers=headers, json=payload)
        except httpx.HTTPError as e:
            raise TTSProviderError(f"{provider} request failed: {e}") from e

        if response.is_error:
            details = _error_details(response)
            logger.error("%s TTS failed (%d): %s", provider, response.status_code, details)
            raise map_provider_error(provider, response.status_code, details)

        logger.info("%s TTS generated %d bytes", provider, len(response.content))
        return response.content


@dataclass
class ElevenLabsClient(_HTTPSpeechClient):
    """ElevenLabs multilingual voice, used for Hinglish answers."""

    voice_id: str = "3AMU7jXQuQa3oRvRqUmb"
    model_id: str = "eleven_multilingual_v2"
    max_chars: int = 4500

    @property
    def provider_name(self) -> TTSProviderName:
        return TTSProviderName.ELEVENLABS

    async def synthesize(self, text: str) -> bytes:
        payload = {
            "text": text,
            "model_id": self.model_id,
            "voice_settings": {
                "stability": 0.5,
                "similarity_boost": 0.75,
                "style": 0.3,
                "use_speaker_boost": True,
            },
        }
        headers = {
            "Accept": "audio/mpeg",
            "Content-Type": "application/json",
            "xi-api-key": self.api_key or "",
        }
        return await self._post_audio(
            "ElevenLabs", ELEVENLABS_URL.format(voice_id=self.voice_id), headers, payload
        )


@dataclass
class OpenAITTSClient(_HTTPSpeechClient):
    """OpenAI speech endpoint."""

    model: str = "tts-1"
    voice: str = "ash"
    speed: float = 1.0
    max_chars: int = 4000

    @property
    def provider_name(self) -> TTSProviderName:
        return TTSProviderName.OPENAI

    async def synthesize(self, text: str) -> bytes:
        payload = {"model": self.model, "input": text, "voice": self.voice, "speed": self.speed}
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        return await self._post_audio("OpenAI", OPENAI_SPEECH_URL, headers, payload)


async def synthesize_speech(
    clients: Sequence[TTSClient],
    text: str,
    pronunciations: PronunciationDictionary | None = None,
) -> tuple[bytes, TTSProviderName]:
    """Synthesize with the first configured client that succeeds.

    Text is prepared separately for each client, since limits differ.

    Raises:
        TTSNotConfiguredError: If no client has an API key.
        TTSProviderError: If every configured client failed (the last error).
    """
    configured = [client for client in clients if client.is_configured]
    if not configured:
        raise TTSNotConfiguredError("TTS service not configured")

    last_error: TTSProviderError | None = None
    for client in configured:
        prepared = prepare_speech_text(text, client.max_chars)
        if pronunciations is not None:
            prepared = pronunciations.apply(prepared)
        try:
            return await client.synthesize(prepared), client.provider_name
        except TTSProviderError as e:
            logger.warning("%s TTS failed, trying next provider: %s", client.provider_name, e)
            last_error = e
    raise last_error
