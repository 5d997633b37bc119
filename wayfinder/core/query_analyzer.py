"""Keyword-based analysis of college assistant queries.

Maps raw user text to topic flags and a plan of which tables to read.
Keyword lists cover English, transliterated Hindi and Devanagari.
"""

from dataclasses import asdict, dataclass, field
from enum import StrEnum

from wayfinder.core.keywords import contains_any

GREETING_MAX_LENGTH = 30
DETAILED_MIN_LENGTH = 50

GREETING_KEYWORDS = [
    "hello", "hi", "namaste", "namaskar", "hey", "good morning", "good evening", "hii", "hiii",
]
COURSE_KEYWORDS = [
    "course", "courses", "degree", "ba", "bsc", "bcom", "ma", "msc", "mcom", "bba", "bca",
    "program", "programme", "stream", "subject", "पाठ्यक्रम", "कोर्स",
]
STAFF_KEYWORDS = [
    "teacher", "professor", "staff", "faculty", "principal", "hod", "head", "lecturer",
    "sir", "madam", "शिक्षक", "टीचर",
]
EVENT_KEYWORDS = [
    "event", "fest", "festival", "function", "celebration", "program", "activity",
    "competition", "seminar", "workshop", "कार्यक्रम", "इवेंट",
]
NOTICE_KEYWORDS = [
    "notice", "notification", "announcement", "update", "circular", "सूचना", "नोटिस",
]
DEPARTMENT_KEYWORDS = ["department", "dept", "विभाग"]
FEE_KEYWORDS = ["fee", "fees", "cost", "price", "charge", "payment", "फीस", "शुल्क"]
FACILITY_KEYWORDS = [
    "library", "lab", "laboratory", "canteen", "hostel", "bus", "transport", "ground",
    "playground", "facility", "facilities", "सुविधा",
]
ADMISSION_KEYWORDS = [
    "admission", "apply", "application", "registration", "enroll", "join", "प्रवेश", "एडमिशन",
]
DETAIL_KEYWORDS = ["detail", "explain", "tell me about", "information", "batao", "बताओ", "विस्तार"]

RELEVANCE_GREETINGS = [
    "hello", "hi", "hey", "namaste", "namaskar", "good morning", "good afternoon",
    "good evening", "thank", "thanks", "bye", "goodbye", "kaise ho", "how are you",
    "what is your name", "aapka naam", "kaun ho", "tum kaun",
]
OFF_TOPIC_KEYWORDS = [
    "prime minister", "pm", "president", "minister", "parliament", "modi", "rahul",
    "cricket score", "match", "football", "ipl", "world cup", "player", "stock market",
    "sensex", "nifty", "share price", "crypto", "bitcoin", "weather", "temperature", "rain",
    "forecast", "movie", "film", "actor", "actress", "bollywood", "recipe", "cooking",
    "food recipe", "news today", "latest news", "breaking news", "train timing", "flight",
    "ticket booking", "pm kaun", "pradhan mantri", "मुख्यमंत्री", "prime minister kon",
]

INTENT_GREETINGS = [
    "hello", "hi", "hey", "namaste", "namaskar", "good morning", "good afternoon",
    "good evening", "thank", "thanks", "dhanyawad", "shukriya", "bye", "goodbye",
    "kaise ho", "how are you", "what is your name", "aapka naam", "kaun ho",
]
PUBLIC_INFO_KEYWORDS = [
    "history", "itihas", "established", "founded", "kab bana", "स्थापना", "affiliation",
    "affiliated", "university", "vishwavidyalaya", "location", "address", "kahan hai",
    "kaha hai", "naac", "ugc", "ranking", "accreditation", "recognition", "courses",
    "degree", "konse courses", "kya courses", "hostel", "sports", "facilities",
    "infrastructure", "campus", "admission process", "kaise admission", "eligibility",
    "contact number", "phone", "email",
]
ADMIN_INFO_KEYWORDS = [
    "principal", "prinsipal", "head", "director", "staff", "teacher", "faculty", "professor",
    "lecturer", "event", "fest", "program", "celebration", "function", "notice",
    "announcement", "सूचना", "घोषणा", "timetable", "time table", "schedule", "class timing",
    "holiday", "छुट्टी", "chutti", "leave", "exam", "परीक्षा", "deadline", "last date", "hod",
    "department head", "dean", "today", "tomorrow", "aaj", "kal", "upcoming", "current",
]

MISSING_INFO_PHRASES = [
    "mujhe nahi pata", "mujhe iska pata nahi", "mere paas", "jaankari nahin", "jankari nahi",
    "information nahi", "i don't know", "i don't have", "i'm not sure", "i am not sure",
    "khed hai", "sorry", "maaf kijiye", "mujhe samajh nahi", "pata nahi hai",
    "jaankari nahi hai",
]


class QueryIntent(StrEnum):
    """Coarse intent of a college query."""

    GREETING = "greeting"
    PUBLIC_INFO = "public_info"
    ADMIN_INFO = "admin_info"
    MIXED = "mixed"


@dataclass
class QueryTopics:
    """Topic flags detected in a college query."""

    courses: bool = False
    staff: bool = False
    events: bool = False
    notices: bool = False
    departments: bool = False
    fees: bool = False
    facilities: bool = False
    admissions: bool = False
    general: bool = False
    greeting: bool = False

    def active(self) -> list[str]:
        return [name for name, value in asdict(self).items() if value]


@dataclass
class QueryAnalysis:
    """Result of analyzing a college query."""

    topics: QueryTopics
    entity_mentions: dict[str, str] = field(default_factory=dict)
    needs_detailed_info: bool = False


@dataclass
class DataFetchStrategy:
    """Which tables to read for a query, and how many rows of each."""

    fetch_courses: bool = False
    fetch_staff: bool = False
    fetch_events: bool = False
    fetch_notices: bool = False
    fetch_departments: bool = False
    fetch_settings: bool = False
    fetch_department_data: bool = False
    courses_limit: int | None = None
    staff_limit: int | None = None
    events_limit: int | None = None
    notices_limit: int | None = None

    @property
    def fetches_anything(self) -> bool:
        return any(
            [
                self.fetch_courses,
                self.fetch_staff,
                self.fetch_events,
                self.fetch_notices,
                self.fetch_departments,
                self.fetch_settings,
                self.fetch_department_data,
            ]
        )


def analyze_query_topics(query: str) -> QueryAnalysis:
    """Detect which college topics a query is about.

    A short query containing a greeting is treated as a pure greeting and
    nothing else is checked. Otherwise every topic test runs independently.
    Fee and admission questions also imply course data.
    """
    text = query.lower()
    topics = QueryTopics()

    if contains_any(text, GREETING_KEYWORDS) and len(text) < GREETING_MAX_LENGTH:
        topics.greeting = True
        return QueryAnalysis(topics=topics, needs_detailed_info=False)

    topics.courses = contains_any(text, COURSE_KEYWORDS)
    topics.staff = contains_any(text, STAFF_KEYWORDS)
    topics.events = contains_any(text, EVENT_KEYWORDS)
    topics.notices = contains_any(text, NOTICE_KEYWORDS)
    topics.departments = contains_any(text, DEPARTMENT_KEYWORDS)

    if contains_any(text, FEE_KEYWORDS):
        topics.fees = True
        topics.courses = True

    topics.facilities = contains_any(text, FACILITY_KEYWORDS)

    if contains_any(text, ADMISSION_KEYWORDS):
        topics.admissions = True
        topics.courses = True

    topics.general = not any(
        [
            topics.courses,
            topics.staff,
            topics.events,
            topics.notices,
            topics.departments,
            topics.fees,
            topics.facilities,
            topics.admissions,
        ]
    )

    needs_detailed_info = contains_any(text, DETAIL_KEYWORDS) or len(text) > DETAILED_MIN_LENGTH
    return QueryAnalysis(topics=topics, needs_detailed_info=needs_detailed_info)


def get_data_fetch_strategy(analysis: QueryAnalysis) -> DataFetchStrategy:
    """Map topic flags to table reads and row limits."""
    topics = analysis.topics

    if topics.greeting:
        return DataFetchStrategy(fetch_settings=True)

    if topics.general:
        return DataFetchStrategy(
            fetch_courses=True,
            fetch_departments=True,
            fetch_settings=True,
            courses_limit=50,
        )

    strategy = DataFetchStrategy(
        fetch_courses=topics.courses or topics.fees or topics.admissions,
        fetch_staff=topics.staff,
        fetch_events=topics.events,
        fetch_notices=topics.notices,
        fetch_departments=topics.departments,
        fetch_settings=topics.facilities,
        fetch_department_data=topics.departments or topics.facilities,
    )

    if analysis.needs_detailed_info:
        strategy.courses_limit, strategy.staff_limit = 100, 50
        strategy.events_limit, strategy.notices_limit = 30, 30
    else:
        strategy.courses_limit, strategy.staff_limit = 50, 30
        strategy.events_limit, strategy.notices_limit = 15, 15

    return strategy


def is_college_relevant(query: str) -> bool:
    """Reject clearly off-topic queries; greetings and ambiguous ones pass."""
    text = query.lower()
    if contains_any(text, RELEVANCE_GREETINGS):
        return True
    return not contains_any(text, OFF_TOPIC_KEYWORDS)


def classify_query_intent(query: str) -> QueryIntent:
    """Heuristic intent classifier. Unknown queries default to admin info."""
    text = query.lower()
    if contains_any(text, INTENT_GREETINGS):
        return QueryIntent.GREETING

    public = contains_any(text, PUBLIC_INFO_KEYWORDS)
    admin = contains_any(text, ADMIN_INFO_KEYWORDS)
    if public and admin:
        return QueryIntent.MIXED
    if public:
        return QueryIntent.PUBLIC_INFO
    return QueryIntent.ADMIN_INFO


def indicates_missing_info(response: str) -> bool:
    """Return True if an assistant answer admits it lacks the information."""
    text = response.lower()
    return any(phrase in text for phrase in MISSING_INFO_PHRASES)
