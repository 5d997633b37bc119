"""Department panel routes and the public notice and event listings."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from wayfinder.api.errors import database_errors
from wayfinder.api.schemas import (
    DepartmentDataCreate,
    DepartmentDataEnvelope,
    DepartmentDataList,
    DepartmentDataOut,
    DepartmentDataUpdate,
    DepartmentEnvelope,
    DepartmentLoginRequest,
    DepartmentLoginResponse,
    DepartmentOut,
    EventList,
    EventOut,
    NoticeList,
    NoticeOut,
    SuccessResponse,
)
from wayfinder.auth import (
    DepartmentToken,
    create_department_token,
    require_department,
    require_department_access,
    verify_password,
)
from wayfinder.config import Settings
from wayfinder.db import crud
from wayfinder.db.models import DepartmentData
from wayfinder.dependencies import get_db_session, get_settings

logger = logging.getLogger(__name__)

PUBLIC_LIMIT = 20

router = APIRouter(prefix="/department", tags=["Department"])
public_router = APIRouter(prefix="/public", tags=["Public"])


def _data_out(row: DepartmentData) -> DepartmentDataOut:
    return DepartmentDataOut.model_validate(row)


@router.post("/login", response_model=DepartmentLoginResponse)
async def department_login(
    request: DepartmentLoginRequest,
    db: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> DepartmentLoginResponse:
    """Exchange department credentials for a JWT."""
    with database_errors("log in"):
        department = await crud.departments.get_one(
            db, department_id=request.department_id, is_active=True
        )
    if department is None or not verify_password(request.password, department.password):
        logger.warning("Rejected department login for %s", request.department_id)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_department_token(settings, str(department.id), department.slug)
    return DepartmentLoginResponse(department=DepartmentOut.model_validate(department), token=token)


@router.get("/{slug}", response_model=DepartmentEnvelope)
async def get_department(slug: str, db: AsyncSession = Depends(get_db_session)) -> DepartmentEnvelope:
    with database_errors("fetch department"):
        department = await crud.departments.get_one(db, slug=slug)
    if department is None:
        raise HTTPException(status_code=404, detail="Department not found")
    return DepartmentEnvelope(department=DepartmentOut.model_validate(department))


@router.get("/{department_id}/data", response_model=DepartmentDataList)
async def list_department_data(
    department_id: UUID,
    _: DepartmentToken = Depends(require_department_access),
    db: AsyncSession = Depends(get_db_session),
) -> DepartmentDataList:
    with database_errors("fetch department data"):
        rows = await crud.department_data.get_all(
            db, department_id=department_id, order_by=[DepartmentData.created_at.desc()]
        )
    return DepartmentDataList(data=[_data_out(row) for row in rows])


@router.post("/{department_id}/data", response_model=DepartmentDataEnvelope)
async def add_department_data(
    department_id: UUID,
    request: DepartmentDataCreate,
    _: DepartmentToken = Depends(require_department_access),
    db: AsyncSession = Depends(get_db_session),
) -> DepartmentDataEnvelope:
    with database_errors("add department data"):
        row = await crud.department_data.create(
            db,
            department_id=department_id,
            data_type=request.data_type,
            title=request.title,
            content=request.content,
            extra=request.metadata,
        )
    return DepartmentDataEnvelope(data=_data_out(row))


async def _owned_data(db: AsyncSession, id: UUID, auth: DepartmentToken) -> DepartmentData:
    row = await crud.department_data.get_by_id(db, id)
    if row is None or str(row.department_id) != auth.department_id:
        raise HTTPException(status_code=404, detail="Data not found or access denied")
    return row


@router.put("/data/{id}", response_model=DepartmentDataEnvelope)
async def update_department_data(
    id: UUID,
    request: DepartmentDataUpdate,
    auth: DepartmentToken = Depends(require_department),
    db: AsyncSession = Depends(get_db_session),
) -> DepartmentDataEnvelope:
    """Update an entry owned by the authenticated department."""
    values = request.model_dump(exclude_unset=True)
    if "metadata" in values:
        values["extra"] = values.pop("metadata")
    with database_errors("update department data"):
        row = await _owned_data(db, id, auth)
        row = await crud.department_data.update(db, row, **values)
    return DepartmentDataEnvelope(data=_data_out(row))


@router.delete("/data/{id}", response_model=SuccessResponse)
async def delete_department_data(
    id: UUID,
    auth: DepartmentToken = Depends(require_department),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    """Delete an entry owned by the authenticated department."""
    with database_errors("delete department data"):
        row = await _owned_data(db, id, auth)
        await crud.department_data.delete_by_id(db, row.id)
    return SuccessResponse()


@public_router.get("/notices", response_model=NoticeList)
async def public_notices(db: AsyncSession = Depends(get_db_session)) -> NoticeList:
    with database_errors("fetch notices"):
        rows = await crud.list_active_notices(db, limit=PUBLIC_LIMIT)
    return NoticeList(notices=[NoticeOut.model_validate(row) for row in rows])


@public_router.get("/events", response_model=EventList)
async def public_events(db: AsyncSession = Depends(get_db_session)) -> EventList:
    """Active events from a week ago onwards, latest first."""
    with database_errors("fetch events"):
        rows = await crud.list_recent_events(db, limit=PUBLIC_LIMIT, newest_first=True)
    return EventList(events=[EventOut.model_validate(row) for row in rows])
