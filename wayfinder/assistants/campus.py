"""College assistant: relevance gate, DB-grounded answer, optional web search."""

import logging
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from wayfinder.config import Settings
from wayfinder.connectors.serpapi import SerpAPIClient, WebSearchError
from wayfinder.core.exception import ChatUnavailableError, SessionNotFoundError
from wayfinder.core.messages import Message, MessageRole
from wayfinder.core.prompts import (
    CollegeContext,
    build_college_system_prompt,
    build_web_search_prompt,
    render_college_context,
)
from wayfinder.core.query_analyzer import (
    DataFetchStrategy,
    QueryIntent,
    analyze_query_topics,
    classify_query_intent,
    get_data_fetch_strategy,
    indicates_missing_info,
    is_college_relevant,
)
from wayfinder.core.sessions import SessionStore
from wayfinder.db import crud
from wayfinder.db.models import CollegeSetting, Course, StaffMember
from wayfinder.llm.chat import ChatService
from wayfinder.speech.pronunciation import PronunciationDictionary

logger = logging.getLogger(__name__)

OFF_TOPIC_INTENT = "off_topic"

APOLOGY = (
    "Khed hai, main abhi technical difficulties ka samna kar raha hoon. "
    "Kripya thodi der baad try karein!"
)
EMPTY_ANSWER = "I apologize, but I couldn't process your request. Please try again."

WEB_SEARCH_TEMPERATURE = 0.3
WEB_SEARCH_MAX_TOKENS = 1500
SETTINGS_LIMIT = 30
DEPARTMENT_DATA_LIMIT = 20


def rejection_text(college_name: str) -> str:
    return (
        f"Sorry, main sirf {college_name} ke baare mein information provide kar sakta hoon. "
        "Aap mujhse college, courses, admission, facilities, events, ya staff ke baare mein "
        "kuch bhi pooch sakte hain. Kripya college se related sawaal puchein!"
    )


def no_info_text(college_website: str) -> str:
    return (
        "Sorry, mujhe is baare mein accurate information nahi mili. Kripya college office se "
        f"contact karein ya official website {college_website} check karein."
    )


@dataclass
class CampusAnswer:
    """Result of one college question."""

    response: str
    session_id: str
    intent: str
    message_id: UUID | None = None
    web_search_used: bool = False


async def fetch_college_context(db: AsyncSession, strategy: DataFetchStrategy) -> CollegeContext:
    """Read the tables a fetch strategy asks for."""
    ctx = CollegeContext()

    if strategy.fetch_departments:
        ctx.departments = await crud.departments.get_all(db, is_active=True)
    if strategy.fetch_notices:
        ctx.notices = await crud.list_active_notices(db, limit=strategy.notices_limit)
    if strategy.fetch_events:
        ctx.events = await crud.list_recent_events(db, limit=strategy.events_limit)
    if strategy.fetch_department_data:
        ctx.department_data = await crud.department_data.get_all(db, limit=DEPARTMENT_DATA_LIMIT)
    if strategy.fetch_staff:
        ctx.staff = await crud.staff_members.get_all(
            db, limit=strategy.staff_limit, order_by=[StaffMember.created_at.desc()]
        )
    if strategy.fetch_courses:
        ctx.courses = await crud.courses.get_all(
            db,
            is_active=True,
            limit=strategy.courses_limit,
            order_by=[Course.course_type, Course.course_name],
        )
    if strategy.fetch_settings:
        ctx.settings = await crud.college_settings.get_all(
            db,
            limit=SETTINGS_LIMIT,
            order_by=[CollegeSetting.updated_at.desc()],
        )
    return ctx


class CampusAssistant:
    """Answers college questions for one request at a time.

    Every answer passes through the same steps: session bookkeeping, a
    relevance gate, topic analysis to decide which tables to read, an LLM
    call grounded on those rows and, when the model admits it does not know,
    a web search followed by a second LLM call.
    """

    def __init__(
        self,
        settings: Settings,
        sessions: SessionStore,
        chat: ChatService,
        web_search: SerpAPIClient | None = None,
        pronunciations: PronunciationDictionary | None = None,
    ):
        self.settings = settings
        self.sessions = sessions
        self.chat = chat
        self.web_search = web_search
        self.pronunciations = pronunciations or PronunciationDictionary()

    def _remember(self, session_id: str, role: MessageRole, content: str) -> None:
        try:
            self.sessions.add_message(session_id, role, content)
        except SessionNotFoundError:
            logger.warning("Session %s vanished before %s turn was recorded", session_id, role)

    async def _save(self, db: AsyncSession, role: MessageRole, content: str, language: str) -> UUID:
        row = await crud.chat_messages.create(db, content=content, role=role.value, language=language)
        return row.id

    async def answer(
        self,
        db: AsyncSession,
        message: str,
        session_id: str | None = None,
        language: str = "en",
    ) -> CampusAnswer:
        session = self.sessions.get_or_create(session_id)
        self._remember(session.id, MessageRole.USER, message)
        await self._save(db, MessageRole.USER, message, language)

        if not is_college_relevant(message):
            logger.info("Rejecting off-topic query: %s", message[:80])
            text = self.pronunciations.apply(rejection_text(self.settings.college_name))
            self._remember(session.id, MessageRole.ASSISTANT, text)
            message_id = await self._save(db, MessageRole.ASSISTANT, text, "hi")
            return CampusAnswer(
                response=text,
                session_id=session.id,
                intent=OFF_TOPIC_INTENT,
                message_id=message_id,
            )

        intent = classify_query_intent(message)
        analysis = analyze_query_topics(message)
        strategy = get_data_fetch_strategy(analysis)
        logger.info(
            "College query intent=%s topics=%s detailed=%s",
            intent,
            analysis.topics.active(),
            analysis.needs_detailed_info,
        )

        context = render_college_context(await fetch_college_context(db, strategy))
        system_prompt = build_college_system_prompt(
            self.settings.college_name, self.settings.assistant_name, context
        )
        history = self.sessions.get_conversation_history(session.id, system_prompt)

        web_search_used = False
        try:
            reply = await self.chat.complete(history)
            text = reply.content or EMPTY_ANSWER
        except ChatUnavailableError as e:
            logger.error("College answer failed: %s", e)
            text = APOLOGY
        else:
            if intent != QueryIntent.GREETING and indicates_missing_info(text):
                searched = await self._answer_from_web(message, context, history)
                if searched is not None:
                    text, web_search_used = searched, True

        text = self.pronunciations.apply(text)
        self._remember(session.id, MessageRole.ASSISTANT, text)
        message_id = await self._save(db, MessageRole.ASSISTANT, text, language)

        return CampusAnswer(
            response=text,
            session_id=session.id,
            intent=intent.value,
            message_id=message_id,
            web_search_used=web_search_used,
        )

    async def _answer_from_web(
        self, question: str, context: str, history: list[Message]
    ) -> str | None:
        """Regenerate an answer from web search results.

        Returns None when web search is unavailable, so the first answer stands.
        """
        if self.web_search is None or not self.web_search.is_configured:
            logger.debug("Web search not configured, keeping database answer")
            return None

        try:
            search_info = await self.web_search.search(f"{question} {self.settings.college_name}")
        except WebSearchError as e:
            logger.warning("Web search failed: %s", e)
            return None

        if not search_info:
            return no_info_text(self.settings.college_website)

        prompt = build_web_search_prompt(
            self.settings.college_name,
            self.settings.assistant_name,
            question,
            search_info,
            context,
        )
        try:
            reply = await self.chat.complete(
                [Message.system(prompt), *history[1:]],
                temperature=WEB_SEARCH_TEMPERATURE,
                max_tokens=WEB_SEARCH_MAX_TOKENS,
            )
        except ChatUnavailableError as e:
            logger.warning("Regeneration from web search failed: %s", e)
            return None
        return reply.content or None
