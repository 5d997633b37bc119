"""Core module - sessions, query analysis, court directory and prompts."""

from wayfinder.core.court_directory import CourtDirectory, LookupKind, LookupResult
from wayfinder.core.court_query_analyzer import (
    CourtFetchStrategy,
    CourtQueryAnalysis,
    analyze_court_query,
    extract_image_search_keywords,
    get_court_data_fetch_strategy,
)
from wayfinder.core.exception import (
    ChatUnavailableError,
    CourtDirectoryError,
    SessionNotFoundError,
    WayfinderError,
)
from wayfinder.core.messages import Message, MessageRole
from wayfinder.core.query_analyzer import (
    DataFetchStrategy,
    QueryAnalysis,
    QueryIntent,
    analyze_query_topics,
    classify_query_intent,
    get_data_fetch_strategy,
    indicates_missing_info,
    is_college_relevant,
)
from wayfinder.core.sessions import Session, SessionStats, SessionStore, SessionSweeper

__all__ = [
    # Sessions
    "Session",
    "SessionStats",
    "SessionStore",
    "SessionSweeper",
    "Message",
    "MessageRole",
    # College analysis
    "QueryAnalysis",
    "QueryIntent",
    "DataFetchStrategy",
    "analyze_query_topics",
    "classify_query_intent",
    "get_data_fetch_strategy",
    "indicates_missing_info",
    "is_college_relevant",
    # Court
    "CourtDirectory",
    "LookupKind",
    "LookupResult",
    "CourtFetchStrategy",
    "CourtQueryAnalysis",
    "analyze_court_query",
    "extract_image_search_keywords",
    "get_court_data_fetch_strategy",
    # Errors
    "WayfinderError",
    "SessionNotFoundError",
    "CourtDirectoryError",
    "ChatUnavailableError",
]
