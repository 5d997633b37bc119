"""Court directory - static building, room and service lookup loaded from YAML.

Answers common navigation questions deterministically, before any LLM call.
Lookup order is fixed: service keyword, then room number, then building name.
"""

import logging
import re
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from wayfinder.core.exception import CourtDirectoryError
from wayfinder.core.keywords import contains_any, contains_keyword

logger = logging.getLogger(__name__)

ROOM_NUMBER_PATTERNS = [
    re.compile(r"room\s*(?:number|no\.?|#)?\s*(\d+)", re.IGNORECASE),
    re.compile(r"kamra\s*(?:number|no\.?|#)?\s*(\d+)", re.IGNORECASE),
    re.compile(r"(\d+)\s*(?:room|kamra)", re.IGNORECASE),
]


class BuildingMatch(BaseModel):
    """Keyword rule for recognizing a building name in a query."""

    all_of: list[str] = Field(default_factory=list)
    any_of: list[str] = Field(default_factory=list)

    def matches(self, text: str) -> bool:
        if not self.all_of and not self.any_of:
            return False
        if not all(contains_keyword(text, kw) for kw in self.all_of):
            return False
        return not self.any_of or contains_any(text, self.any_of)


class Building(BaseModel):
    """A court building."""

    key: str
    name: str
    image: str
    description: str
    match: BuildingMatch = Field(default_factory=BuildingMatch)
    response_text: str = ""
    spoken_text: str = ""


class Room(BaseModel):
    """A numbered room inside a building."""

    number: int
    building: str
    purpose: str


class Templates(BaseModel):
    """Answer templates for service and room matches."""

    service_response: str = "{purpose} {building} ke Room {room} me hai. {description}"
    service_spoken: str = "{purpose} {building} ke Room {room} me milti hai."
    room_response: str = (
        "Room {room} {building} me hai. Yeh {purpose} ke liye use hota hai. {description}"
    )
    room_spoken: str = "Room {room} {building} me hai. Yeh {purpose} ke liye hai."


class LookupKind(StrEnum):
    SERVICE = "service"
    ROOM = "room"
    BUILDING = "building"


@dataclass
class LookupResult:
    """Outcome of a directory lookup."""

    matched: bool
    kind: LookupKind | None = None
    room_number: int | None = None
    building: Building | None = None
    room: Room | None = None
    response_text: str = ""
    spoken_text: str = ""

    @property
    def image_url(self) -> str | None:
        return self.building.image if self.building else None

    @classmethod
    def no_match(cls) -> "LookupResult":
        return cls(matched=False)


class CourtDirectory:
    """Static court directory loaded from YAML config."""

    def __init__(self, config_path: Path | str = "config/court_directory.yaml"):
        self._buildings: dict[str, Building] = {}
        self._rooms: dict[int, Room] = {}
        self._services: list[tuple[str, int]] = []
        self._templates = Templates()
        self._load_config(Path(config_path))

    def _load_config(self, config_path: Path) -> None:
        """Load buildings, rooms and services from a YAML file."""
        if not config_path.exists():
            raise CourtDirectoryError(f"Court directory not found: {config_path}")

        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        try:
            self._templates = Templates(**config.get("templates", {}))
            for key, data in config.get("buildings", {}).items():
                self._buildings[key] = Building(key=key, **data)
            for number, data in config.get("rooms", {}).items():
                self._rooms[int(number)] = Room(number=int(number), **data)
        except (TypeError, ValueError, ValidationError) as e:
            raise CourtDirectoryError(f"Invalid court directory {config_path}: {e}") from e

        for room in self._rooms.values():
            if room.building not in self._buildings:
                raise CourtDirectoryError(
                    f"Room {room.number} refers to unknown building '{room.building}'"
                )

        services = {str(k).lower(): int(v) for k, v in config.get("services", {}).items()}
        for keyword, number in services.items():
            if number not in self._rooms:
                raise CourtDirectoryError(f"Service '{keyword}' refers to unknown room {number}")
        # Longest keyword first so "copy form" wins over "copy"; ties keep file order.
        self._services = sorted(services.items(), key=lambda item: -len(item[0]))

        logger.debug(
            "Court directory loaded: %d buildings, %d rooms, %d services",
            len(self._buildings),
            len(self._rooms),
            len(self._services),
        )

    @property
    def buildings(self) -> list[Building]:
        return list(self._buildings.values())

    @property
    def rooms(self) -> list[Room]:
        return sorted(self._rooms.values(), key=lambda r: r.number)

    @property
    def services(self) -> dict[str, int]:
        return dict(self._services)

    def get_room(self, number: int) -> Room | None:
        return self._rooms.get(number)

    def get_building(self, key: str) -> Building | None:
        return self._buildings.get(key)

    def _room_result(self, kind: LookupKind, room: Room, response: str, spoken: str) -> LookupResult:
        building = self._buildings[room.building]
        values = {
            "room": room.number,
            "purpose": room.purpose,
            "building": building.name,
            "description": building.description,
        }
        return LookupResult(
            matched=True,
            kind=kind,
            room_number=room.number,
            building=building,
            room=room,
            response_text=response.format(**values),
            spoken_text=spoken.format(**values),
        )

    def match_service(self, query: str) -> LookupResult:
        """Match a service keyword such as "certified copy" to its room."""
        text = query.lower().strip()
        for keyword, number in self._services:
            if contains_keyword(text, keyword):
                return self._room_result(
                    LookupKind.SERVICE,
                    self._rooms[number],
                    self._templates.service_response,
                    self._templates.service_spoken,
                )
        return LookupResult.no_match()

    def match_room_number(self, query: str) -> LookupResult:
        """Match an explicit room number that exists in the directory."""
        text = query.lower()
        for pattern in ROOM_NUMBER_PATTERNS:
            match = pattern.search(text)
            if not match:
                continue
            room = self._rooms.get(int(match.group(1)))
            if room is None:
                return LookupResult.no_match()
            return self._room_result(
                LookupKind.ROOM,
                room,
                self._templates.room_response,
                self._templates.room_spoken,
            )
        return LookupResult.no_match()

    def match_building(self, query: str) -> LookupResult:
        """Match a building by name."""
        text = query.lower()
        for building in self._buildings.values():
            if building.match.matches(text):
                values = {"name": building.name, "description": building.description}
                return LookupResult(
                    matched=True,
                    kind=LookupKind.BUILDING,
                    building=building,
                    response_text=" ".join(building.response_text.format(**values).split()),
                    spoken_text=" ".join(building.spoken_text.format(**values).split()),
                )
        return LookupResult.no_match()

    def lookup(self, query: str) -> LookupResult:
        """Try service, room number and building matching, in that order."""
        for matcher in (self.match_service, self.match_room_number, self.match_building):
            result = matcher(query)
            if result.matched:
                logger.debug("Court lookup matched %s for %r", result.kind, query)
                return result
        return LookupResult.no_match()
