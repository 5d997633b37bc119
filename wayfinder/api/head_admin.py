"""Head admin routes: departments, notices, events and department data."""

import logging
import re
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from wayfinder.api.errors import database_errors, get_or_404
from wayfinder.api.schemas import (
    DepartmentCreate,
    DepartmentCreated,
    DepartmentCredentials,
    DepartmentDataList,
    DepartmentDataOut,
    DepartmentEnvelope,
    DepartmentList,
    DepartmentOut,
    DepartmentUpdate,
    EventCreate,
    EventEnvelope,
    EventList,
    EventOut,
    EventUpdate,
    HeadAdminStats,
    NoticeCreate,
    NoticeEnvelope,
    NoticeList,
    NoticeOut,
    NoticeUpdate,
    SuccessResponse,
)
from wayfinder.auth import generate_department_id, generate_password, hash_password, require_admin
from wayfinder.db import crud
from wayfinder.db.models import Department, DepartmentData, Event, Notice, utcnow
from wayfinder.dependencies import get_db_session

logger = logging.getLogger(__name__)

DEPARTMENT_DATA_LIMIT = 50

_NON_SLUG = re.compile(r"[^a-z0-9]+")

router = APIRouter(
    prefix="/head-admin",
    tags=["Head Admin"],
    dependencies=[Depends(require_admin)],
)


def generate_slug(name: str) -> str:
    """URL slug: lowercase, runs of other characters become one dash."""
    return _NON_SLUG.sub("-", name.lower()).strip("-")


@router.get("/stats", response_model=HeadAdminStats)
async def head_admin_stats(db: AsyncSession = Depends(get_db_session)) -> HeadAdminStats:
    with database_errors("fetch stats"):
        return HeadAdminStats(
            total_departments=await crud.departments.count(db),
            active_notices=await crud.notices.count(db, is_active=True),
            upcoming_events=await crud.events.count(db, is_active=True),
        )


# Departments


@router.get("/departments", response_model=DepartmentList)
async def list_departments(db: AsyncSession = Depends(get_db_session)) -> DepartmentList:
    with database_errors("fetch departments"):
        rows = await crud.departments.get_all(db, order_by=[Department.created_at.desc()])
    return DepartmentList(departments=[DepartmentOut.model_validate(row) for row in rows])


@router.post("/departments", response_model=DepartmentCreated)
async def create_department(
    request: DepartmentCreate,
    db: AsyncSession = Depends(get_db_session),
) -> DepartmentCreated:
    """Create a department and return its login credentials.

    The plain password appears only in this response; only its bcrypt hash
    is stored.
    """
    slug = generate_slug(request.name)
    if not slug:
        raise HTTPException(status_code=422, detail="Department name must contain letters or digits")

    department_id = generate_department_id()
    password = generate_password()
    panel_link = f"/department/{slug}"

    with database_errors("create department"):
        if await crud.departments.exists(db, slug=slug):
            raise HTTPException(status_code=409, detail="A department with this name already exists")
        row = await crud.departments.create(
            db,
            **request.model_dump(),
            slug=slug,
            department_id=department_id,
            password=hash_password(password),
            panel_link=panel_link,
        )

    logger.info("Department created: %s (%s)", row.name, department_id)
    return DepartmentCreated(
        department=DepartmentOut.model_validate(row),
        credentials=DepartmentCredentials(
            department_id=department_id,
            password=password,
            panel_link=panel_link,
        ),
    )


@router.put("/departments/{id}", response_model=DepartmentEnvelope)
async def update_department(
    id: UUID,
    request: DepartmentUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> DepartmentEnvelope:
    with database_errors("update department"):
        row = await get_or_404(crud.departments, db, id, "Department")
        row = await crud.departments.update(db, row, **request.model_dump(exclude_unset=True))
    return DepartmentEnvelope(department=DepartmentOut.model_validate(row))


@router.delete("/departments/{id}", response_model=SuccessResponse)
async def delete_department(id: UUID, db: AsyncSession = Depends(get_db_session)) -> SuccessResponse:
    with database_errors("delete department"):
        if not await crud.departments.delete_by_id(db, id):
            raise HTTPException(status_code=404, detail="Department not found")
    return SuccessResponse()


# Notices


@router.get("/notices", response_model=NoticeList)
async def list_notices(db: AsyncSession = Depends(get_db_session)) -> NoticeList:
    with database_errors("fetch notices"):
        rows = await crud.notices.get_all(db, order_by=[Notice.created_at.desc()])
    return NoticeList(notices=[NoticeOut.model_validate(row) for row in rows])


@router.post("/notices", response_model=NoticeEnvelope)
async def create_notice(
    request: NoticeCreate,
    db: AsyncSession = Depends(get_db_session),
) -> NoticeEnvelope:
    with database_errors("create notice"):
        row = await crud.notices.create(db, **request.model_dump(), is_active=True)
    return NoticeEnvelope(notice=NoticeOut.model_validate(row))


@router.put("/notices/{id}", response_model=NoticeEnvelope)
async def update_notice(
    id: UUID,
    request: NoticeUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> NoticeEnvelope:
    with database_errors("update notice"):
        row = await get_or_404(crud.notices, db, id, "Notice")
        row = await crud.notices.update(db, row, **request.model_dump(exclude_unset=True))
    return NoticeEnvelope(notice=NoticeOut.model_validate(row))


@router.delete("/notices/{id}", response_model=SuccessResponse)
async def delete_notice(id: UUID, db: AsyncSession = Depends(get_db_session)) -> SuccessResponse:
    with database_errors("delete notice"):
        if not await crud.notices.delete_by_id(db, id):
            raise HTTPException(status_code=404, detail="Notice not found")
    return SuccessResponse()


# Events


@router.get("/events", response_model=EventList)
async def list_events(db: AsyncSession = Depends(get_db_session)) -> EventList:
    with database_errors("fetch events"):
        rows = await crud.events.get_all(db, order_by=[Event.event_date.desc()])
    return EventList(events=[EventOut.model_validate(row) for row in rows])


@router.post("/events", response_model=EventEnvelope)
async def create_event(
    request: EventCreate,
    db: AsyncSession = Depends(get_db_session),
) -> EventEnvelope:
    """Create an event. Without a date it is dated now."""
    values = request.model_dump()
    values["event_date"] = values["event_date"] or utcnow()
    with database_errors("create event"):
        row = await crud.events.create(db, **values, is_active=True)
    return EventEnvelope(event=EventOut.model_validate(row))


@router.put("/events/{id}", response_model=EventEnvelope)
async def update_event(
    id: UUID,
    request: EventUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> EventEnvelope:
    values = request.model_dump(exclude_unset=True)
    if "event_date" in values and values["event_date"] is None:
        del values["event_date"]
    with database_errors("update event"):
        row = await get_or_404(crud.events, db, id, "Event")
        row = await crud.events.update(db, row, **values)
    return EventEnvelope(event=EventOut.model_validate(row))


@router.delete("/events/{id}", response_model=SuccessResponse)
async def delete_event(id: UUID, db: AsyncSession = Depends(get_db_session)) -> SuccessResponse:
    with database_errors("delete event"):
        if not await crud.events.delete_by_id(db, id):
            raise HTTPException(status_code=404, detail="Event not found")
    return SuccessResponse()


@router.get("/department-data", response_model=DepartmentDataList)
async def list_department_data(db: AsyncSession = Depends(get_db_session)) -> DepartmentDataList:
    """Most recent data entries across all departments."""
    with database_errors("fetch department data"):
        rows = await crud.department_data.get_all(
            db, limit=DEPARTMENT_DATA_LIMIT, order_by=[DepartmentData.created_at.desc()]
        )
    return DepartmentDataList(data=[DepartmentDataOut.model_validate(row) for row in rows])
