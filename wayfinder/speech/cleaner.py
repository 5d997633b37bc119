"""Markdown stripping and length limiting for speech output."""

import logging
import re

logger = logging.getLogger(__name__)

SENTENCE_BACKOFF_RATIO = 0.8

_MARKDOWN_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"\|"), " "),
    (re.compile(r"---+"), ". "),
    (re.compile(r"#{1,6}\s+"), ""),
    (re.compile(r"\*\*\*(.*?)\*\*\*"), r"\1"),
    (re.compile(r"\*\*(.*?)\*\*"), r"\1"),
    (re.compile(r"\*(.*?)\*"), r"\1"),
    (re.compile(r"__(.*?)__"), r"\1"),
    (re.compile(r"_(.*?)_"), r"\1"),
    (re.compile(r"`(.*?)`"), r"\1"),
    (re.compile(r"\[(.*?)\]\(.*?\)"), r"\1"),
    (re.compile(r"\(https?://[^)]+\)"), ""),
    (re.compile("📊|📌|🎓|⏰|📞|⚖️|✅|❌|🔊|🎯|📧|📍"), ""),
    (re.compile(r"\s+"), " "),
]


def clean_text_for_speech(text: str) -> str:
    """Remove markdown formatting, link targets and emoji from an answer."""
    for pattern, replacement in _MARKDOWN_RULES:
        text = pattern.sub(replacement, text)
    return text.strip()


def truncate_for_tts(text: str, limit: int) -> str:
    """Cut text to at most ``limit`` characters.

    If a sentence ends within the last 20% of the allowed window, the cut
    moves back to just after that sentence end.
    """
    if len(text) <= limit:
        return text

    truncated = text[:limit]
    last_end = max(truncated.rfind("."), truncated.rfind("?"), truncated.rfind("!"))
    if last_end > limit * SENTENCE_BACKOFF_RATIO:
        truncated = text[: last_end + 1]

    logger.warning("TTS text truncated from %d to %d characters", len(text), len(truncated))
    return truncated
