"""Split long answers into TTS-sized chunks."""

import re

DEFAULT_CHUNK_SIZE = 900

_PARAGRAPH_RE = re.compile(r"\n{2,}")
_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]*")
_WHITESPACE_RE = re.compile(r"\s+")


def _split_words(sentence: str, max_chunk_size: int) -> list[str]:
    """Force-split an oversized sentence, breaking at spaces where possible."""
    pieces = []
    start = 0
    while start < len(sentence):
        end = min(start + max_chunk_size, len(sentence))
        if end < len(sentence):
            last_space = sentence.rfind(" ", start, end + 1)
            if last_space > start:
                end = last_space
        piece = sentence[start:end].strip()
        if piece:
            pieces.append(piece)
        start = end
        while start < len(sentence) and sentence[start] == " ":
            start += 1
    return pieces


def split_text_into_chunks(text: str, max_chunk_size: int = DEFAULT_CHUNK_SIZE) -> list[str]:
    """Split text into chunks of at most ``max_chunk_size`` characters.

    Paragraphs (blank-line separated) are kept whole when they fit and merged
    with the previous chunk while the result stays within the limit. Larger
    paragraphs are split on sentence ends, and single sentences that are still
    too long are split on word boundaries.
    """
    if not text or not text.strip():
        return []

    paragraphs = [
        _WHITESPACE_RE.sub(" ", p).strip() for p in _PARAGRAPH_RE.split(text)
    ]
    chunks: list[str] = []

    for para in filter(None, paragraphs):
        if len(para) <= max_chunk_size:
            if chunks and len(chunks[-1]) + len(para) + 1 <= max_chunk_size:
                chunks[-1] += " " + para
            else:
                chunks.append(para)
            continue

        current = ""
        for sentence in _SENTENCE_RE.findall(para) or [para]:
            sentence = sentence.strip()
            combined = f"{current} {sentence}".strip()
            if len(combined) <= max_chunk_size:
                current = combined
                continue
            if current:
                chunks.append(current)
            if len(sentence) <= max_chunk_size:
                current = sentence
            else:
                chunks.extend(_split_words(sentence, max_chunk_size))
                current = ""
        if current:
            chunks.append(current)

    return [chunk for chunk in chunks if chunk]
