"""Speech output: text preparation and TTS provider clients."""

from wayfinder.speech.chunker import split_text_into_chunks
from wayfinder.speech.cleaner import clean_text_for_speech, truncate_for_tts
from wayfinder.speech.normalizer import normalize_text_for_tts
from wayfinder.speech.pronunciation import PronunciationDictionary, apply_pronunciation_corrections
from wayfinder.speech.tts import (
    ElevenLabsClient,
    OpenAITTSClient,
    TTSClient,
    TTSError,
    TTSNotConfiguredError,
    TTSProviderError,
    TTSProviderName,
    prepare_speech_text,
    synthesize_speech,
)

__all__ = [
    "ElevenLabsClient",
    "OpenAITTSClient",
    "PronunciationDictionary",
    "TTSClient",
    "TTSError",
    "TTSNotConfiguredError",
    "TTSProviderError",
    "TTSProviderName",
    "apply_pronunciation_corrections",
    "clean_text_for_speech",
    "normalize_text_for_tts",
    "prepare_speech_text",
    "split_text_into_chunks",
    "synthesize_speech",
    "truncate_for_tts",
]
