"""Text normalization for text-to-speech.

Spells out numbers, years, times, ordinals, acronyms, phone numbers, emails
and URLs so TTS engines pronounce them naturally.

``normalize_text_for_tts`` tokenizes the input in a single pass: one combined
pattern recognizes every token class, earlier classes win when two could
start at the same position, and each token is rendered on its own. Output is
stable under re-normalization.
"""

import re
from collections.abc import Callable

CUSTOM_PRONUNCIATIONS: dict[str, str] = {
    "RKSD": "R K S D",
    "B.Tech": "B Tech",
    "B.Com": "B Com",
    "B.Sc": "B Sc",
    "M.Tech": "M Tech",
    "Ph.D": "P H D",
    "MBA": "M B A",
    "BCA": "B C A",
    "MCA": "M C A",
}

ACRONYM_EXCEPTIONS = frozenset({"USA", "UK", "AI", "IT", "TV", "OK", "AM", "PM"})

ORDINAL_WORDS: dict[int, str] = {
    1: "first", 2: "second", 3: "third", 4: "fourth", 5: "fifth",
    6: "sixth", 7: "seventh", 8: "eighth", 9: "ninth", 10: "tenth",
    11: "eleventh", 12: "twelfth", 13: "thirteenth", 14: "fourteenth", 15: "fifteenth",
    16: "sixteenth", 17: "seventeenth", 18: "eighteenth", 19: "nineteenth", 20: "twentieth",
    30: "thirtieth", 40: "fortieth", 50: "fiftieth", 60: "sixtieth",
    70: "seventieth", 80: "eightieth", 90: "ninetieth",
}

_ONES = [
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
]
_TENS = ["", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety"]

# Token classes in priority order. Inner groups are non-capturing so that
# match.lastgroup always names the class.
TOKEN_PATTERNS: list[tuple[str, str]] = [
    ("URL", r"https?://[A-Za-z0-9.-]+"),
    ("EMAIL", r"[A-Za-z0-9._+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}"),
    ("INTL_PHONE", r"\+\d{1,3}-\d{3,10}(?:-\d{3,7})?"),
    ("PHONE", r"\b\d{10}\b"),
    ("TIME", r"\b\d{1,2}(?::\d{2})?\s*[AaPp][Mm]\b"),
    ("YEAR", r"\b(?:19|20)\d{2}\b"),
    ("ORDINAL", r"\b\d+(?:st|nd|rd|th)\b"),
    ("ACRONYM", r"\b[A-Z]{2,6}\b"),
    ("NUMBER", r"\b\d{1,2}\b"),
]

_TOKEN_RE = re.compile("|".join(f"(?P<{name}>{pattern})" for name, pattern in TOKEN_PATTERNS))
_TIME_PARTS_RE = re.compile(r"(\d{1,2})(?::(\d{2}))?\s*([AaPp][Mm])")
_WHITESPACE_RE = re.compile(r"\s+")


def number_to_words(num: int) -> str:
    """Spell out an integer below one thousand; larger values stay as digits."""
    if num == 0:
        return "zero"
    if num < 0:
        return "minus " + number_to_words(-num)
    if num < 20:
        return _ONES[num]
    if num < 100:
        return _TENS[num // 10] + (" " + _ONES[num % 10] if num % 10 else "")
    if num < 1000:
        rest = num % 100
        return _ONES[num // 100] + " hundred" + (" " + number_to_words(rest) if rest else "")
    return str(num)


def _digits(digits: str) -> str:
    return " ".join(number_to_words(int(d)) for d in digits)


def ordinal_to_words(num: int) -> str | None:
    """Spell out an ordinal below one thousand, e.g. 21 -> "twenty first"."""
    if num in ORDINAL_WORDS:
        return ORDINAL_WORDS[num]
    if num <= 0 or num >= 1000:
        return None
    if num % 100 == 0:
        return number_to_words(num) + "th"
    head = num - num % 100 if num > 100 else 0
    tail = num % 100
    if tail not in ORDINAL_WORDS:
        tens, ones = divmod(tail, 10)
        tail_words = (_TENS[tens] + " " if tens else "") + ORDINAL_WORDS[ones]
    else:
        tail_words = ORDINAL_WORDS[tail]
    return (number_to_words(head) + " " if head else "") + tail_words


def _spell(chars: str) -> str:
    return " ".join(number_to_words(int(c)) if c.isdigit() else c for c in chars)


def render_url(token: str) -> str:
    domain = token.split("://", 1)[1]
    trailing = ""
    while domain.endswith("."):
        domain, trailing = domain[:-1], trailing + "."
    spoken = []
    for part in domain.split("."):
        lower = part.lower()
        if "rksd" in lower:
            remaining = lower.replace("rksd", "", 1)
            spoken.append(("R K S D " + _spell(remaining)).strip())
        elif len(part) <= 3 or lower.isdigit():
            spoken.append(_spell(lower))
        else:
            spoken.append(lower)
    return " dot ".join(spoken) + trailing


def render_email(token: str) -> str:
    local, domain = token.split("@", 1)
    local = (
        local.lower()
        .replace(".", " dot ")
        .replace("_", " underscore ")
        .replace("-", " dash ")
        .replace("+", " plus ")
    )
    domain_spoken = " dot ".join(", ".join(part.lower()) for part in domain.split("."))
    return f"{local} at the rate {domain_spoken}"


def render_intl_phone(token: str) -> str:
    groups = token[1:].split("-")
    return "plus " + ", ".join(_digits(group) for group in groups)


def render_phone(token: str) -> str:
    return _digits(token[:5]) + ", " + _digits(token[5:])


def render_time(token: str) -> str:
    match = _TIME_PARTS_RE.fullmatch(token)
    if match is None:
        return token
    hour, minutes, period = match.groups()
    words = [number_to_words(int(hour))]
    if minutes and int(minutes) != 0:
        words.append(number_to_words(int(minutes)))
    words.append(period.lower())
    return " ".join(words)


def render_year(token: str) -> str:
    year = int(token)
    if 1900 <= year <= 1999:
        last_two = year - 1900
        if last_two == 0:
            return "nineteen hundred"
        if last_two < 10:
            return f"nineteen oh {number_to_words(last_two)}"
        return f"nineteen {number_to_words(last_two)}"
    last_two = year - 2000
    if last_two == 0:
        return "two thousand"
    return f"two thousand {number_to_words(last_two)}"


def render_ordinal(token: str) -> str:
    words = ordinal_to_words(int(re.sub(r"\D", "", token)))
    return words if words is not None else token


def render_acronym(token: str) -> str:
    if token in ACRONYM_EXCEPTIONS:
        return token
    return " ".join(token)


def render_number(token: str) -> str:
    value = int(token)
    if 1 <= value <= 100:
        return number_to_words(value)
    return token


RENDERERS: dict[str, Callable[[str], str]] = {
    "URL": render_url,
    "EMAIL": render_email,
    "INTL_PHONE": render_intl_phone,
    "PHONE": render_phone,
    "TIME": render_time,
    "YEAR": render_year,
    "ORDINAL": render_ordinal,
    "ACRONYM": render_acronym,
    "NUMBER": render_number,
}

_CUSTOM_RE = [
    (re.compile(r"\b" + re.escape(original) + r"\b", re.IGNORECASE), spoken)
    for original, spoken in CUSTOM_PRONUNCIATIONS.items()
]


def apply_custom_pronunciations(text: str) -> str:
    """Replace known institution names and degree abbreviations."""
    for pattern, spoken in _CUSTOM_RE:
        text = pattern.sub(spoken, text)
    return text


def _render_token(match: re.Match[str]) -> str:
    return RENDERERS[match.lastgroup](match.group())


def _render_only(kind: str) -> Callable[[str], str]:
    pattern = re.compile(dict(TOKEN_PATTERNS)[kind])
    renderer = RENDERERS[kind]

    def normalize(text: str) -> str:
        return pattern.sub(lambda m: renderer(m.group()), text)

    normalize.__name__ = f"normalize_{kind.lower()}"
    normalize.__doc__ = f"Render only {kind.lower().replace('_', ' ')} tokens."
    return normalize


normalize_urls = _render_only("URL")
normalize_emails = _render_only("EMAIL")
normalize_years = _render_only("YEAR")
normalize_times = _render_only("TIME")
normalize_ordinals = _render_only("ORDINAL")
normalize_acronyms = _render_only("ACRONYM")
normalize_numbers = _render_only("NUMBER")


def normalize_phone_numbers(text: str) -> str:
    """Render international and ten-digit phone numbers digit by digit."""
    text = _render_only("INTL_PHONE")(text)
    return _render_only("PHONE")(text)


def normalize_text_for_tts(text: str) -> str:
    """Normalize text for natural TTS pronunciation."""
    text = apply_custom_pronunciations(text)
    text = _TOKEN_RE.sub(_render_token, text)
    return _WHITESPACE_RE.sub(" ", text).strip()
