"""College admin panel routes: courses, staff, departments and settings."""

import logging
import re
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from wayfinder.api.errors import database_errors, get_or_404
from wayfinder.api.schemas import (
    AdminLoginRequest,
    AdminLoginResponse,
    AdminStats,
    CollegeSettingEnvelope,
    CollegeSettingList,
    CollegeSettingOut,
    CollegeSettingUpdate,
    CourseCreate,
    CourseEnvelope,
    CourseList,
    CourseOut,
    CourseUpdate,
    DepartmentList,
    DepartmentOut,
    MessageResponse,
    StaffCreate,
    StaffEnvelope,
    StaffList,
    StaffOut,
    StaffUpdate,
    SuccessResponse,
)
from wayfinder.auth import check_admin_password, require_admin
from wayfinder.config import Settings
from wayfinder.db import crud
from wayfinder.db.models import CollegeSetting, Course, Department, StaffMember
from wayfinder.dependencies import get_db_session, get_settings

logger = logging.getLogger(__name__)

STUDENT_COUNT = 5200

_EMPLOYEE_NUMBER = re.compile(r"EMP-(\d+)")

router = APIRouter(prefix="/admin", tags=["Admin"])

protected = APIRouter(dependencies=[Depends(require_admin)])


@router.post("/login", response_model=AdminLoginResponse)
async def admin_login(
    request: AdminLoginRequest,
    settings: Settings = Depends(get_settings),
) -> AdminLoginResponse:
    """Exchange the admin password for the admin bearer token."""
    if not check_admin_password(settings, request.password):
        logger.warning("Rejected admin login")
        raise HTTPException(status_code=401, detail="Invalid admin password")
    return AdminLoginResponse(token=settings.admin_password)


@protected.get("/stats", response_model=AdminStats)
async def admin_stats(db: AsyncSession = Depends(get_db_session)) -> AdminStats:
    with database_errors("fetch stats"):
        return AdminStats(
            students=STUDENT_COUNT,
            courses=await crud.courses.count(db),
            staff=await crud.staff_members.count(db),
            departments=await crud.departments.count(db),
        )


# Courses


@protected.get("/courses", response_model=CourseList)
async def list_courses(db: AsyncSession = Depends(get_db_session)) -> CourseList:
    with database_errors("fetch courses"):
        rows = await crud.courses.get_all(db, order_by=[Course.created_at.desc()])
    return CourseList(courses=[CourseOut.model_validate(row) for row in rows])


@protected.post("/courses", response_model=CourseEnvelope)
async def create_course(
    request: CourseCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CourseEnvelope:
    with database_errors("create course"):
        row = await crud.courses.create(db, **request.model_dump())
    return CourseEnvelope(course=CourseOut.model_validate(row))


@protected.put("/courses/{course_id}", response_model=CourseEnvelope)
async def update_course(
    course_id: UUID,
    request: CourseUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> CourseEnvelope:
    with database_errors("update course"):
        row = await get_or_404(crud.courses, db, course_id, "Course")
        row = await crud.courses.update(db, row, **request.model_dump(exclude_unset=True))
    return CourseEnvelope(course=CourseOut.model_validate(row))


@protected.delete("/courses/{course_id}", response_model=MessageResponse)
async def delete_course(
    course_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    with database_errors("delete course"):
        if not await crud.courses.delete_by_id(db, course_id):
            raise HTTPException(status_code=404, detail="Course not found")
    return MessageResponse(message="Course deleted successfully")


# Staff


def next_employee_id(existing: list[str]) -> str:
    """Return ``EMP-NNN`` one above the highest existing ``EMP-`` number."""
    numbers = [int(m.group(1)) for e in existing if (m := _EMPLOYEE_NUMBER.search(e))]
    return f"EMP-{max(numbers, default=0) + 1:03d}"


@protected.get("/staff", response_model=StaffList)
async def list_staff(db: AsyncSession = Depends(get_db_session)) -> StaffList:
    with database_errors("fetch staff"):
        rows = await crud.staff_members.get_all(db, order_by=[StaffMember.created_at.desc()])
    return StaffList(staff=[StaffOut.model_validate(row) for row in rows])


@protected.post("/staff", response_model=StaffEnvelope)
async def create_staff(
    request: StaffCreate,
    db: AsyncSession = Depends(get_db_session),
) -> StaffEnvelope:
    """Add a staff member. A taken employee ID is replaced by the next free ``EMP-NNN``."""
    values = request.model_dump()
    with database_errors("create staff member"):
        if await crud.staff_members.exists(db, employee_id=values["employee_id"]):
            rows = await crud.staff_members.get_all(db)
            values["employee_id"] = next_employee_id([row.employee_id for row in rows])
            logger.info("Employee ID taken, assigned %s", values["employee_id"])
        row = await crud.staff_members.create(db, **values)
    return StaffEnvelope(staff=StaffOut.model_validate(row))


@protected.put("/staff/{staff_id}", response_model=StaffEnvelope)
async def update_staff(
    staff_id: UUID,
    request: StaffUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> StaffEnvelope:
    """Update a staff member. Moving to an employee ID another row holds is a 409."""
    values = request.model_dump(exclude_unset=True)
    with database_errors("update staff member"):
        row = await get_or_404(crud.staff_members, db, staff_id, "Staff member")
        new_id = values.get("employee_id")
        if new_id and new_id != row.employee_id:
            if await crud.staff_members.exists(db, employee_id=new_id):
                raise HTTPException(status_code=409, detail="Employee ID already in use")
        row = await crud.staff_members.update(db, row, **values)
    return StaffEnvelope(staff=StaffOut.model_validate(row))


@protected.delete("/staff/{staff_id}", response_model=MessageResponse)
async def delete_staff(
    staff_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    with database_errors("delete staff member"):
        if not await crud.staff_members.delete_by_id(db, staff_id):
            raise HTTPException(status_code=404, detail="Staff member not found")
    return MessageResponse(message="Staff member deleted successfully")


# Departments and settings


@protected.get("/departments", response_model=DepartmentList)
async def list_departments(db: AsyncSession = Depends(get_db_session)) -> DepartmentList:
    with database_errors("fetch departments"):
        rows = await crud.departments.get_all(db, order_by=[Department.created_at.desc()])
    return DepartmentList(departments=[DepartmentOut.model_validate(row) for row in rows])


@protected.get("/college-settings", response_model=CollegeSettingList)
async def list_college_settings(db: AsyncSession = Depends(get_db_session)) -> CollegeSettingList:
    with database_errors("fetch college settings"):
        rows = await crud.college_settings.get_all(
            db, order_by=[CollegeSetting.updated_at.desc()]
        )
    return CollegeSettingList(settings=[CollegeSettingOut.model_validate(row) for row in rows])


@protected.put("/college-settings/{key}", response_model=CollegeSettingEnvelope)
async def put_college_setting(
    key: str,
    request: CollegeSettingUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> CollegeSettingEnvelope:
    """Create or replace the setting stored under ``key``."""
    with database_errors("save college setting"):
        row = await crud.college_settings.get_one(db, key=key)
        if row is None:
            row = await crud.college_settings.create(db, key=key, value=request.value)
        else:
            row = await crud.college_settings.update(db, row, value=request.value)
    return CollegeSettingEnvelope(setting=CollegeSettingOut.model_validate(row))


@protected.delete("/college-settings/{key}", response_model=SuccessResponse)
async def delete_college_setting(
    key: str,
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    with database_errors("delete college setting"):
        if not await crud.college_settings.delete_where(db, key=key):
            raise HTTPException(status_code=404, detail="Setting not found")
    return SuccessResponse()


router.include_router(protected)
