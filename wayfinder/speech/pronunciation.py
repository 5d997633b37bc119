"""Pronunciation corrections applied to assistant answers before TTS."""

import re
from collections.abc import Mapping

_I = re.IGNORECASE

# Applied in order; later rules see the output of earlier ones.
CORRECTION_RULES: list[tuple[re.Pattern[str], str]] = [
    # Degrees
    (re.compile(r"\bB\.?A\b", _I), "Bee A"),
    (re.compile(r"\bM\.?A\b", _I), "Em A"),
    (re.compile(r"\bBCA\b", _I), "Bee See A"),
    (re.compile(r"\bPGDCA\b", _I), "Pee Jee Dee See A"),
    (re.compile(r"\bB\.?Sc\b", _I), "Bee Ess See"),
    (re.compile(r"\bM\.?Sc\b", _I), "Em Ess See"),
    (re.compile(r"\bPh\.?D\b", _I), "Pee Aych Dee"),
    (re.compile(r"\bB\.?Com\b", _I), "Bee Kom"),
    (re.compile(r"\bM\.?Com\b", _I), "Em Kom"),
    # Honorifics
    (re.compile(r"\bMr\.?\s", _I), "Mister "),
    (re.compile(r"\bMrs\.?\s", _I), "Misses "),
    (re.compile(r"\bMs\.?\s", _I), "Miss "),
    (re.compile(r"\bDr\.?\s", _I), "Doctor "),
    (re.compile(r"\bProf\.?\s", _I), "Professor "),
    (re.compile(r"\bSr\.?\s", _I), "Senior "),
    (re.compile(r"\bJr\.?\s", _I), "Junior "),
    (re.compile(r"\bSt\.?\s", _I), "Saint "),
    (re.compile(r"\bSh\.?\s", _I), "Shri "),
    (re.compile(r"\bShri\.?\s", _I), "Shri "),
    (re.compile(r"\bSmt\.?\s", _I), "Shrimati "),
    (re.compile(r"\bKm\.?\s", _I), "Kumari "),
    (re.compile(r"\bKu\.?\s", _I), "Kumari "),
    (re.compile(r"\bCh\.?\s", _I), "Chaudhary "),
    (re.compile(r"\bPt\.?\s", _I), "Pandit "),
    (re.compile(r"\bSwami\.?\s", _I), "Swami "),
    # Initials: "P Sharma" -> "P. Sharma"
    (re.compile(r"\b([A-Z])\.?\s+(?=[A-Z][a-z])"), r"\1. "),
    (re.compile(r"\b(Shri|Doctor|Professor|Mister|Misses|Miss)\s+([A-Z])\.?\s", _I), r"\1 \2. "),
    # Technical
    (re.compile(r"AI/ML", _I), "AI ML"),
    (re.compile(r"\bA\.I\.", _I), "AI"),
    (re.compile(r"\bM\.L\.", _I), "ML"),
    # Academic
    (re.compile(r"\bHOD\b", _I), "Head of Department"),
    (re.compile(r"\bH\.O\.D\.", _I), "Head of Department"),
    (re.compile(r"\bVice[\s-]?Principal\b", _I), "Vice Principal"),
    (re.compile(r"\bV\.P\.", _I), "Vice Principal"),
    (re.compile(r"\bAsst\.?\s", _I), "Assistant "),
    (re.compile(r"\bAsstt\.?\s", _I), "Assistant "),
    (re.compile(r"\bAssociate\s+Prof\.?\s", _I), "Associate Professor "),
    (re.compile(r"\bAsso\.?\s+Prof\.?\s", _I), "Associate Professor "),
    (re.compile(r"\bDept\.?\s", _I), "Department "),
    (re.compile(r"\bUniv\.?\s", _I), "University "),
    (re.compile(r"\bColl\.?\s", _I), "College "),
    (re.compile(r"\bEst\.?\s", _I), "Established "),
    (re.compile(r"\bEstd\.?\s", _I), "Established "),
    # Months
    (re.compile(r"\bJan\.?\s", _I), "January "),
    (re.compile(r"\bFeb\.?\s", _I), "February "),
    (re.compile(r"\bMar\.?\s", _I), "March "),
    (re.compile(r"\bApr\.?\s", _I), "April "),
    (re.compile(r"\bJun\.?\s", _I), "June "),
    (re.compile(r"\bJul\.?\s", _I), "July "),
    (re.compile(r"\bAug\.?\s", _I), "August "),
    (re.compile(r"\bSep\.?\s", _I), "September "),
    (re.compile(r"\bSept\.?\s", _I), "September "),
    (re.compile(r"\bOct\.?\s", _I), "October "),
    (re.compile(r"\bNov\.?\s", _I), "November "),
    (re.compile(r"\bDec\.?\s", _I), "December "),
    # Places
    (re.compile(r"\bHry\.?\s", _I), "Haryana "),
    (re.compile(r"\bKKR\b", _I), "Kurukshetra"),
    (re.compile(r"\bKaithal\b", _I), "Kaithal"),
]


def apply_pronunciation_corrections(text: str, extra: Mapping[str, str] | None = None) -> str:
    """Expand abbreviations that TTS engines read badly.

    Args:
        text: Answer text.
        extra: Additional whole-word replacements, matched case-insensitively.

    Returns:
        Corrected text.
    """
    for pattern, replacement in CORRECTION_RULES:
        text = pattern.sub(replacement, text)

    for original, corrected in (extra or {}).items():
        text = re.sub(r"\b" + re.escape(original) + r"\b", lambda _: corrected, text, flags=_I)

    return text


class PronunciationDictionary:
    """Runtime-extendable word replacements layered over the built-in rules."""

    def __init__(self, corrections: Mapping[str, str] | None = None):
        self._corrections: dict[str, str] = {}
        for original, corrected in (corrections or {}).items():
            self.add(original, corrected)

    def __len__(self) -> int:
        return len(self._corrections)

    def add(self, original: str, corrected: str) -> None:
        self._corrections[original.lower()] = corrected

    def as_dict(self) -> dict[str, str]:
        return dict(self._corrections)

    def apply(self, text: str) -> str:
        return apply_pronunciation_corrections(text, self._corrections)
