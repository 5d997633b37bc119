"""Keyword-based analysis of court assistant queries."""

import re
from dataclasses import asdict, dataclass, field

from wayfinder.core.keywords import contains_any

GREETING_MAX_LENGTH = 30

GREETING_KEYWORDS = ["hello", "hi", "namaste", "namaskar", "hey", "good morning", "good evening"]
COURTROOM_KEYWORDS = ["courtroom", "court room", "room", "court number", "कोर्टरूम", "कमरा"]
BUILDING_KEYWORDS = ["building", "block", "bhawan", "भवन", "इमारत"]
STAFF_KEYWORDS = [
    "judge", "clerk", "officer", "registry", "typist", "staff", "advocate", "lawyer",
    "जज", "अधिकारी", "कर्मचारी",
]
FILE_KEYWORDS = ["file", "case", "document", "petition", "application", "फाइल", "केस", "मामला"]
PROCEDURE_KEYWORDS = [
    "procedure", "process", "how to", "steps", "filing", "submit", "प्रक्रिया", "कैसे",
]
TIMING_KEYWORDS = ["timing", "time", "schedule", "hours", "open", "close", "समय", "खुलने"]
DIRECTION_KEYWORDS = [
    "where", "location", "find", "navigate", "direction", "way", "kaha", "कहां", "कैसे जाएं",
]
IMAGE_KEYWORDS = [
    "show", "image", "photo", "picture", "look like", "dikhao", "दिखाओ", "फोटो", "तस्वीर",
]
LOCATION_IMAGE_KEYWORDS = [
    "submit", "file", "registry", "counter", "office", "desk", "department", "section",
]

IMAGE_LOCATIONS: dict[str, list[str]] = {
    "registry": ["registry", "रजिस्ट्री"],
    "counter": ["counter", "काउंटर"],
    "file": ["file submission", "filing", "फाइल"],
    "courtroom": ["courtroom", "कोर्टरूम"],
    "office": ["office", "कार्यालय"],
    "entrance": ["entrance", "entry", "gate", "प्रवेश"],
    "parking": ["parking", "पार्किंग"],
    "cafeteria": ["cafeteria", "canteen", "कैंटीन"],
    "restroom": ["toilet", "restroom", "washroom", "शौचालय"],
    "library": ["library", "लाइब्रेरी"],
}

ROOM_NUMBER_PATTERNS = [
    re.compile(r"room\s*(?:number|no\.?|#)?\s*(\d+)", re.IGNORECASE),
    re.compile(r"courtroom\s*(\d+)", re.IGNORECASE),
    re.compile(r"कमरा\s*(?:संख्या)?\s*(\d+)"),
]


@dataclass
class CourtQueryTopics:
    """Topic flags detected in a court query."""

    courtrooms: bool = False
    buildings: bool = False
    staff: bool = False
    files: bool = False
    procedures: bool = False
    timings: bool = False
    directions: bool = False
    building_images: bool = False
    general: bool = False
    greeting: bool = False

    def active(self) -> list[str]:
        return [name for name, value in asdict(self).items() if value]


@dataclass
class CourtQueryAnalysis:
    """Result of analyzing a court query."""

    topics: CourtQueryTopics
    entity_mentions: dict[str, str] = field(default_factory=dict)
    needs_detailed_info: bool = False


@dataclass
class CourtFetchStrategy:
    """Which court tables to read, and how many rows of each."""

    fetch_rooms: bool
    fetch_buildings: bool
    fetch_staff: bool
    fetch_files: bool
    fetch_timings: bool
    fetch_settings: bool
    fetch_building_images: bool
    rooms_limit: int
    buildings_limit: int
    staff_limit: int
    files_limit: int
    building_images_limit: int


def extract_room_number(query: str) -> str | None:
    """Pull a room number out of phrases like "room no 21" or "कमरा 5"."""
    text = query.lower()
    for pattern in ROOM_NUMBER_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1)
    return None


def analyze_court_query(query: str) -> CourtQueryAnalysis:
    """Detect which court topics a query is about."""
    text = query.lower()
    topics = CourtQueryTopics()
    entities: dict[str, str] = {}

    if contains_any(text, GREETING_KEYWORDS) and len(text) < GREETING_MAX_LENGTH:
        topics.greeting = True
        return CourtQueryAnalysis(topics=topics, entity_mentions=entities)

    topics.courtrooms = contains_any(text, COURTROOM_KEYWORDS)

    room_number = extract_room_number(text)
    if room_number:
        entities["room_number"] = room_number
        topics.courtrooms = True

    topics.buildings = contains_any(text, BUILDING_KEYWORDS)
    topics.staff = contains_any(text, STAFF_KEYWORDS)
    topics.files = contains_any(text, FILE_KEYWORDS)
    topics.procedures = contains_any(text, PROCEDURE_KEYWORDS)
    topics.timings = contains_any(text, TIMING_KEYWORDS)
    topics.directions = contains_any(text, DIRECTION_KEYWORDS)
    topics.building_images = contains_any(text, IMAGE_KEYWORDS) or (
        topics.directions and contains_any(text, LOCATION_IMAGE_KEYWORDS)
    )

    topics.general = not topics.active()

    return CourtQueryAnalysis(
        topics=topics,
        entity_mentions=entities,
        needs_detailed_info=topics.courtrooms or topics.buildings or topics.staff or topics.files,
    )


def get_court_data_fetch_strategy(analysis: CourtQueryAnalysis) -> CourtFetchStrategy:
    """Map court topic flags to table reads and row limits."""
    topics = analysis.topics
    return CourtFetchStrategy(
        fetch_rooms=topics.courtrooms or topics.directions,
        fetch_buildings=topics.buildings or topics.directions,
        fetch_staff=topics.staff,
        fetch_files=topics.files,
        fetch_timings=topics.timings,
        fetch_settings=topics.general or topics.procedures,
        fetch_building_images=topics.building_images or topics.directions,
        rooms_limit=50 if topics.courtrooms else 20,
        buildings_limit=10 if topics.buildings else 5,
        staff_limit=30 if topics.staff else 10,
        files_limit=20 if topics.files else 5,
        building_images_limit=10 if topics.building_images else 5,
    )


def extract_image_search_keywords(query: str) -> list[str]:
    """Return location categories mentioned in a query, for image matching."""
    text = query.lower()
    return [
        category
        for category, patterns in IMAGE_LOCATIONS.items()
        if contains_any(text, patterns)
    ]
