"""Court assistant: static directory first, then a DB-grounded LLM answer."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from wayfinder.config import Settings
from wayfinder.core.court_directory import CourtDirectory, LookupResult
from wayfinder.core.court_query_analyzer import (
    CourtFetchStrategy,
    analyze_court_query,
    extract_image_search_keywords,
    get_court_data_fetch_strategy,
)
from wayfinder.core.exception import ChatUnavailableError, SessionNotFoundError
from wayfinder.core.messages import Message, MessageRole
from wayfinder.core.prompts import CourtContext, build_court_system_prompt
from wayfinder.core.sessions import SessionStore
from wayfinder.db import crud
from wayfinder.llm.chat import ChatService

logger = logging.getLogger(__name__)

APOLOGY = (
    "I apologize, but I'm experiencing technical difficulties. Please try again in a moment."
)
EMPTY_ANSWER = "I apologize, but I couldn't process your request. Please try again."

TIMINGS_LIMIT = 10
SETTINGS_LIMIT = 10
FALLBACK_IMAGES = 3


@dataclass
class CourtImage:
    """Picture shown next to a location answer."""

    id: str
    title: str
    image_url: str
    description: str | None = None
    room_number: str | None = None
    building_name: str | None = None


@dataclass
class CourtAnswer:
    """Result of one court question."""

    response: str
    session_id: str
    building_images: list[CourtImage] = field(default_factory=list)
    has_room_info: bool = False
    has_building_info: bool = False
    has_staff_info: bool = False
    is_static_lookup: bool = False

    @property
    def has_building_images(self) -> bool:
        return bool(self.building_images)


def _image_text(image: Any) -> str:
    fields = (image.title, image.description, image.room_number, image.building_name, image.department)
    return " ".join(str(value) for value in fields if value).lower()


def match_building_images(images: Sequence[Any], keywords: Sequence[str]) -> list[Any]:
    """Keep images mentioning any keyword; fall back to the first few."""
    matching = [
        image
        for image in images
        if any(keyword.lower() in _image_text(image) for keyword in keywords)
    ]
    return matching or list(images[:FALLBACK_IMAGES])


async def fetch_court_context(
    db: AsyncSession, strategy: CourtFetchStrategy, query: str
) -> CourtContext:
    """Read the court tables a fetch strategy asks for."""
    ctx = CourtContext()

    if strategy.fetch_rooms:
        ctx.rooms = await crud.court_rooms.get_all(db, is_active=True, limit=strategy.rooms_limit)
    if strategy.fetch_buildings:
        ctx.buildings = await crud.court_buildings.get_all(
            db, is_active=True, limit=strategy.buildings_limit
        )
    if strategy.fetch_staff:
        ctx.staff = await crud.court_staff.get_all(db, is_active=True, limit=strategy.staff_limit)
    if strategy.fetch_files:
        ctx.files = await crud.court_files.get_all(db, status="active", limit=strategy.files_limit)
    if strategy.fetch_timings:
        ctx.timings = await crud.court_timings.get_all(db, limit=TIMINGS_LIMIT)
    if strategy.fetch_settings:
        rows = await crud.court_settings.get_all(db, limit=SETTINGS_LIMIT)
        ctx.settings = {row.key: row.value for row in rows}
    if strategy.fetch_building_images:
        keywords = extract_image_search_keywords(query)
        if keywords:
            images = await crud.court_building_images.get_all(
                db, limit=strategy.building_images_limit
            )
            ctx.building_images = match_building_images(images, keywords)
        else:
            ctx.building_images = await crud.court_building_images.get_all(
                db, limit=FALLBACK_IMAGES
            )
    return ctx


def _lookup_images(result: LookupResult) -> list[CourtImage]:
    building = result.building
    if building is None:
        return []
    return [
        CourtImage(
            id=f"static-{building.key}",
            title=building.name,
            description=building.description,
            image_url=building.image,
            room_number=str(result.room_number) if result.room_number else None,
            building_name=building.name,
        )
    ]


class CourtAssistant:
    """Answers court navigation questions.

    The static directory answers room, service and building questions
    without touching the LLM. Everything else is answered from the court
    tables. Both turns are recorded in the session after the answer exists.
    """

    def __init__(
        self,
        settings: Settings,
        sessions: SessionStore,
        chat: ChatService,
        directory: CourtDirectory,
    ):
        self.settings = settings
        self.sessions = sessions
        self.chat = chat
        self.directory = directory

    def _remember(self, session_id: str, question: str, answer: str) -> None:
        try:
            self.sessions.add_message(session_id, MessageRole.USER, question)
            self.sessions.add_message(session_id, MessageRole.ASSISTANT, answer)
        except SessionNotFoundError:
            logger.warning("Court session %s vanished before the turn was recorded", session_id)

    async def answer(
        self, db: AsyncSession, message: str, session_id: str | None = None
    ) -> CourtAnswer:
        session = self.sessions.get_or_create(session_id)

        lookup = self.directory.lookup(message)
        if lookup.matched:
            logger.info("Court static lookup matched %s (room %s)", lookup.kind, lookup.room_number)
            self._remember(session.id, message, lookup.response_text)
            return CourtAnswer(
                response=lookup.response_text,
                session_id=session.id,
                building_images=_lookup_images(lookup),
                has_room_info=lookup.room_number is not None,
                has_building_info=lookup.building is not None,
                is_static_lookup=True,
            )

        analysis = analyze_court_query(message)
        strategy = get_court_data_fetch_strategy(analysis)
        logger.info(
            "Court query topics=%s entities=%s",
            analysis.topics.active(),
            analysis.entity_mentions,
        )

        ctx = await fetch_court_context(db, strategy, message)
        system_prompt = build_court_system_prompt(self.settings.court_name, ctx)
        history = self.sessions.get_conversation_history(session.id, system_prompt)
        history.append(Message.user(message))

        try:
            reply = await self.chat.complete(history)
            text = reply.content or EMPTY_ANSWER
        except ChatUnavailableError as e:
            logger.error("Court answer failed: %s", e)
            text = APOLOGY

        self._remember(session.id, message, text)
        return CourtAnswer(
            response=text,
            session_id=session.id,
            building_images=[
                CourtImage(
                    id=str(image.id),
                    title=image.title,
                    description=image.description,
                    image_url=image.image_url,
                    room_number=image.room_number,
                    building_name=image.building_name,
                )
                for image in ctx.building_images
            ],
            has_room_info=bool(ctx.rooms),
            has_building_info=bool(ctx.buildings),
            has_staff_info=bool(ctx.staff),
        )
