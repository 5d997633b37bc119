"""Question answering for the college and court assistants."""

from wayfinder.assistants.campus import CampusAnswer, CampusAssistant
from wayfinder.assistants.court import CourtAnswer, CourtAssistant, CourtImage

__all__ = ["CampusAnswer", "CampusAssistant", "CourtAnswer", "CourtAssistant", "CourtImage"]
