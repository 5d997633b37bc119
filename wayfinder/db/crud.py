"""Generic async CRUD repository.

Every admin resource is a single table, so one repository class parameterized
by model covers create, read, update and delete for all of them.
"""

from collections.abc import Sequence
from datetime import timedelta
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, case, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from wayfinder.db.models import (
    Base,
    ChatMessage,
    CollegeSetting,
    Course,
    CourtBuilding,
    CourtBuildingImage,
    CourtFile,
    CourtRoom,
    CourtSetting,
    CourtStaff,
    CourtTiming,
    Department,
    DepartmentData,
    Event,
    Notice,
    StaffMember,
    utcnow,
)

ModelT = TypeVar("ModelT", bound=Base)

OrderBy = InstrumentedAttribute | ColumnElement


class BaseCRUD(Generic[ModelT]):
    """Generic CRUD operations for one model.

    Example:
        courses = BaseCRUD(Course)
        course = await courses.create(session, course_name="BCA")
        rows = await courses.get_all(session, is_active=True, limit=50)
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    def _select(self, filters: dict[str, Any], where: Sequence[ColumnElement[bool]] = ()):
        stmt = select(self.model)
        for name, value in filters.items():
            stmt = stmt.where(getattr(self.model, name) == value)
        for clause in where:
            stmt = stmt.where(clause)
        return stmt

    async def create(self, session: AsyncSession, **kwargs: Any) -> ModelT:
        """Insert a row and return it with generated fields loaded."""
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        return await session.get(self.model, id)

    async def get_one(self, session: AsyncSession, **filters: Any) -> ModelT | None:
        """Return the first row whose columns equal the given values."""
        result = await session.execute(self._select(filters).limit(1))
        return result.scalar_one_or_none()

    async def get_all(
        self,
        session: AsyncSession,
        *,
        limit: int | None = None,
        offset: int = 0,
        order_by: Sequence[OrderBy] = (),
        where: Sequence[ColumnElement[bool]] = (),
        **filters: Any,
    ) -> Sequence[ModelT]:
        """Return rows matching equality filters and extra clauses.

        Args:
            session: Async database session.
            limit: Maximum number of rows (None for all).
            offset: Number of rows to skip.
            order_by: Columns or ordering expressions.
            where: Additional SQL clauses.
            **filters: Column equality filters.
        """
        stmt = self._select(filters, where).order_by(*order_by).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count(
        self,
        session: AsyncSession,
        *,
        where: Sequence[ColumnElement[bool]] = (),
        **filters: Any,
    ) -> int:
        stmt = select(func.count()).select_from(self._select(filters, where).subquery())
        result = await session.execute(stmt)
        return result.scalar_one()

    async def update(self, session: AsyncSession, instance: ModelT, **kwargs: Any) -> ModelT:
        """Apply field values to a loaded row."""
        for name, value in kwargs.items():
            setattr(instance, name, value)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def update_by_id(self, session: AsyncSession, id: UUID, **kwargs: Any) -> ModelT | None:
        """Update a row by primary key. Returns None if it does not exist."""
        instance = await self.get_by_id(session, id)
        if instance is None:
            return None
        return await self.update(session, instance, **kwargs)

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> bool:
        """Delete a row by primary key. Returns False if it did not exist."""
        result = await session.execute(delete(self.model).where(self.model.id == id))
        return result.rowcount > 0

    async def delete_where(self, session: AsyncSession, **filters: Any) -> int:
        stmt = delete(self.model)
        for name, value in filters.items():
            stmt = stmt.where(getattr(self.model, name) == value)
        result = await session.execute(stmt)
        return result.rowcount

    async def exists(self, session: AsyncSession, **filters: Any) -> bool:
        return await self.get_one(session, **filters) is not None


courses = BaseCRUD(Course)
staff_members = BaseCRUD(StaffMember)
departments = BaseCRUD(Department)
notices = BaseCRUD(Notice)
events = BaseCRUD(Event)
department_data = BaseCRUD(DepartmentData)
college_settings = BaseCRUD(CollegeSetting)
chat_messages = BaseCRUD(ChatMessage)

court_buildings = BaseCRUD(CourtBuilding)
court_rooms = BaseCRUD(CourtRoom)
court_staff = BaseCRUD(CourtStaff)
court_files = BaseCRUD(CourtFile)
court_timings = BaseCRUD(CourtTiming)
court_settings = BaseCRUD(CourtSetting)
court_building_images = BaseCRUD(CourtBuildingImage)


# Shared listings

NOTICE_PRIORITY_RANK = case(
    {"urgent": 0, "high": 1, "normal": 2, "low": 3},
    value=Notice.priority,
    else_=4,
)

RECENT_EVENTS_WINDOW = timedelta(days=7)


async def list_active_notices(session: AsyncSession, limit: int | None = None) -> Sequence[Notice]:
    """Active notices, most urgent first, newest first within a priority."""
    return await notices.get_all(
        session,
        is_active=True,
        limit=limit,
        order_by=[NOTICE_PRIORITY_RANK, Notice.created_at.desc()],
    )


async def list_recent_events(
    session: AsyncSession, limit: int | None = None, newest_first: bool = False
) -> Sequence[Event]:
    """Active events dated from a week ago onwards."""
    order = Event.event_date.desc() if newest_first else Event.event_date.asc()
    return await events.get_all(
        session,
        is_active=True,
        limit=limit,
        where=[Event.event_date >= utcnow() - RECENT_EVENTS_WINDOW],
        order_by=[order],
    )
