"""API request and response schemas."""

from datetime import datetime
from typing import Any, ClassVar, Literal, Self
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class CamelModel(BaseModel):
    """Accepts and emits the camelCase keys used by the voice clients."""

    model_config = ConfigDict(populate_by_name=True)


class RecordOut(BaseModel):
    """Base for rows returned from the database."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime


class SuccessResponse(BaseModel):
    success: bool = True


class PartialUpdate(BaseModel):
    """Base for PUT bodies. Fields may be omitted, but NOT NULL columns cannot be set to null."""

    non_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_null_required(self) -> Self:
        nulled = [
            name
            for name in self.non_nullable
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if nulled:
            raise ValueError(f"{', '.join(nulled)} cannot be null")
        return self


class MessageResponse(BaseModel):
    message: str


# Health & monitoring


class HealthResponse(CamelModel):
    """Health check response."""

    status: str
    uptime_seconds: int = Field(alias="uptimeSeconds")


class ChatMessageOut(RecordOut):
    content: str
    role: str
    language: str
    timestamp: datetime


class SessionInfo(CamelModel):
    id: str
    message_count: int = Field(alias="messageCount")
    last_activity: float = Field(alias="lastActivity")


class AssistantSessionStats(CamelModel):
    total_sessions: int = Field(alias="totalSessions")
    sessions: list[SessionInfo]


class SessionStatsResponse(BaseModel):
    campus: AssistantSessionStats
    court: AssistantSessionStats


# Assistants


class AskRequest(CamelModel):
    """Question for the college assistant."""

    message: str = Field(min_length=1, max_length=4000)
    language: str = "en"
    session_id: str | None = Field(default=None, alias="sessionId")


class AskResponse(CamelModel):
    response: str
    session_id: str = Field(alias="sessionId")
    message_id: UUID | None = Field(default=None, alias="messageId")
    intent: str
    web_search_used: bool = Field(default=False, alias="webSearchUsed")


class CourtAskRequest(CamelModel):
    """Question for the court assistant."""

    message: str = Field(min_length=1, max_length=4000)
    session_id: str | None = Field(default=None, alias="sessionId")


class BuildingImage(BaseModel):
    id: str
    title: str
    description: str | None = None
    image_url: str
    room_number: str | None = None
    building_name: str | None = None


class CourtAskMetadata(CamelModel):
    has_room_info: bool = Field(default=False, alias="hasRoomInfo")
    has_building_info: bool = Field(default=False, alias="hasBuildingInfo")
    has_staff_info: bool = Field(default=False, alias="hasStaffInfo")
    has_building_images: bool = Field(default=False, alias="hasBuildingImages")
    is_static_lookup: bool = Field(default=False, alias="isStaticLookup")


class CourtAskResponse(CamelModel):
    response: str
    session_id: str = Field(alias="sessionId")
    building_images: list[BuildingImage] = Field(default_factory=list, alias="buildingImages")
    metadata: CourtAskMetadata


class TTSRequest(BaseModel):
    text: str = Field(max_length=20000)


# Auth


class AdminLoginRequest(BaseModel):
    password: str


class AdminLoginResponse(BaseModel):
    success: bool = True
    token: str
    message: str = "Admin login successful"


class DepartmentLoginRequest(BaseModel):
    department_id: str
    password: str


# College admin


class CourseCreate(BaseModel):
    course_name: str = Field(min_length=1)
    course_code: str | None = None
    course_type: str | None = None
    duration: str | None = None
    description: str | None = None
    eligibility: str | None = None
    total_seats: int | None = Field(default=None, ge=0)
    fees_per_year: float | None = Field(default=None, ge=0)
    department_id: UUID | None = None
    is_active: bool = True


class CourseUpdate(PartialUpdate):
    non_nullable = ("course_name", "is_active")

    course_name: str | None = Field(default=None, min_length=1)
    course_code: str | None = None
    course_type: str | None = None
    duration: str | None = None
    description: str | None = None
    eligibility: str | None = None
    total_seats: int | None = Field(default=None, ge=0)
    fees_per_year: float | None = Field(default=None, ge=0)
    department_id: UUID | None = None
    is_active: bool | None = None


class CourseOut(RecordOut):
    course_name: str
    course_code: str | None
    course_type: str | None
    duration: str | None
    description: str | None
    eligibility: str | None
    total_seats: int | None
    fees_per_year: float | None
    department_id: UUID | None
    is_active: bool


class StaffCreate(BaseModel):
    full_name: str = Field(min_length=1)
    employee_id: str = Field(min_length=1)
    department_id: UUID | None = None
    role: str | None = None
    designation: str | None = None
    email: str | None = None
    phone: str | None = None
    qualification: str | None = None
    specialization: str | None = None
    joining_date: str | None = None


class StaffUpdate(PartialUpdate):
    non_nullable = ("full_name", "employee_id")

    full_name: str | None = Field(default=None, min_length=1)
    employee_id: str | None = Field(default=None, min_length=1)
    department_id: UUID | None = None
    role: str | None = None
    designation: str | None = None
    email: str | None = None
    phone: str | None = None
    qualification: str | None = None
    specialization: str | None = None
    joining_date: str | None = None


class StaffOut(RecordOut):
    full_name: str
    employee_id: str
    department_id: UUID | None
    role: str | None
    designation: str | None
    email: str | None
    phone: str | None
    qualification: str | None
    specialization: str | None
    joining_date: str | None


class CollegeSettingUpdate(BaseModel):
    value: Any


class CollegeSettingOut(RecordOut):
    key: str
    value: Any


# Head admin


class DepartmentCreate(BaseModel):
    name: str = Field(min_length=1)
    head_name: str | None = None
    contact_email: str | None = Field(default=None, pattern=EMAIL_PATTERN)
    contact_phone: str | None = None
    description: str | None = None


class DepartmentUpdate(PartialUpdate):
    non_nullable = ("is_active",)

    head_name: str | None = None
    contact_email: str | None = Field(default=None, pattern=EMAIL_PATTERN)
    contact_phone: str | None = None
    description: str | None = None
    is_active: bool | None = None


class DepartmentOut(RecordOut):
    """Department without its password hash."""

    name: str
    slug: str
    department_id: str
    head_name: str | None
    contact_email: str | None
    contact_phone: str | None
    description: str | None
    panel_link: str | None
    is_active: bool


class DepartmentCredentials(BaseModel):
    department_id: str
    password: str
    panel_link: str


class DepartmentCreated(BaseModel):
    department: DepartmentOut
    credentials: DepartmentCredentials


NoticeType = Literal["general", "urgent", "holiday", "exam", "event"]
NoticePriority = Literal["low", "normal", "high", "urgent"]


class NoticeCreate(BaseModel):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    notice_type: NoticeType
    priority: NoticePriority = "normal"
    department_id: UUID | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


class NoticeUpdate(PartialUpdate):
    non_nullable = ("title", "content", "notice_type", "priority", "is_active")

    title: str | None = Field(default=None, min_length=1)
    content: str | None = Field(default=None, min_length=1)
    notice_type: NoticeType | None = None
    priority: NoticePriority | None = None
    department_id: UUID | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    is_active: bool | None = None


class NoticeOut(RecordOut):
    title: str
    content: str
    notice_type: str
    priority: str
    department_id: UUID | None
    start_date: datetime | None
    end_date: datetime | None
    is_active: bool


class EventCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str | None = None
    event_type: str = Field(min_length=1)
    event_date: datetime | None = None
    location: str | None = None
    department_id: UUID | None = None


class EventUpdate(PartialUpdate):
    non_nullable = ("title", "is_active")

    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    event_type: str | None = Field(default=None, min_length=1)
    event_date: datetime | None = None
    location: str | None = None
    department_id: UUID | None = None
    is_active: bool | None = None


class EventOut(RecordOut):
    title: str
    description: str | None
    event_type: str | None
    event_date: datetime
    location: str | None
    department_id: UUID | None
    is_active: bool


class HeadAdminStats(BaseModel):
    total_departments: int
    active_notices: int
    upcoming_events: int


class AdminStats(BaseModel):
    students: int
    courses: int
    staff: int
    departments: int


class CourseList(BaseModel):
    courses: list[CourseOut]


class CourseEnvelope(BaseModel):
    course: CourseOut


class StaffList(BaseModel):
    staff: list[StaffOut]


class StaffEnvelope(BaseModel):
    staff: StaffOut


class DepartmentList(BaseModel):
    departments: list[DepartmentOut]


class DepartmentEnvelope(BaseModel):
    department: DepartmentOut


class CollegeSettingList(BaseModel):
    settings: list[CollegeSettingOut]


class CollegeSettingEnvelope(BaseModel):
    setting: CollegeSettingOut


class NoticeList(BaseModel):
    notices: list[NoticeOut]


class NoticeEnvelope(BaseModel):
    notice: NoticeOut


class EventList(BaseModel):
    events: list[EventOut]


class EventEnvelope(BaseModel):
    event: EventOut


# Department panel


class DepartmentDataCreate(BaseModel):
    data_type: str = Field(min_length=1)
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    metadata: dict[str, Any] | None = None


class DepartmentDataUpdate(PartialUpdate):
    non_nullable = ("title",)

    title: str | None = Field(default=None, min_length=1)
    content: str | None = Field(default=None, min_length=1)
    metadata: dict[str, Any] | None = None


class DepartmentDataOut(RecordOut):
    department_id: UUID
    data_type: str
    title: str
    content: str | None
    metadata: dict[str, Any] | None = Field(default=None, validation_alias="extra")


class DepartmentDataList(BaseModel):
    data: list[DepartmentDataOut]


class DepartmentDataEnvelope(BaseModel):
    data: DepartmentDataOut


class DepartmentLoginResponse(BaseModel):
    department: DepartmentOut
    token: str


# Court admin


class CourtBuildingCreate(BaseModel):
    building_name: str = Field(min_length=1)
    building_code: str | None = None
    description: str | None = None
    total_floors: int | None = Field(default=None, ge=0)
    location_details: str | None = None
    is_active: bool = True


class CourtBuildingUpdate(PartialUpdate):
    non_nullable = ("building_name", "is_active")

    building_name: str | None = Field(default=None, min_length=1)
    building_code: str | None = None
    description: str | None = None
    total_floors: int | None = Field(default=None, ge=0)
    location_details: str | None = None
    is_active: bool | None = None


class CourtBuildingOut(RecordOut):
    building_name: str
    building_code: str | None
    description: str | None
    total_floors: int | None
    location_details: str | None
    is_active: bool


class CourtRoomCreate(BaseModel):
    room_number: str = Field(min_length=1)
    room_name: str | None = None
    room_type: str | None = None
    room_purpose: str | None = None
    floor_number: int | None = None
    incharge_name: str | None = None
    timings: str | None = None
    building_id: UUID | None = None
    is_active: bool = True


class CourtRoomUpdate(PartialUpdate):
    non_nullable = ("room_number", "is_active")

    room_number: str | None = Field(default=None, min_length=1)
    room_name: str | None = None
    room_type: str | None = None
    room_purpose: str | None = None
    floor_number: int | None = None
    incharge_name: str | None = None
    timings: str | None = None
    building_id: UUID | None = None
    is_active: bool | None = None


class CourtRoomOut(RecordOut):
    room_number: str
    room_name: str | None
    room_type: str | None
    room_purpose: str | None
    floor_number: int | None
    incharge_name: str | None
    timings: str | None
    building_id: UUID | None
    is_active: bool


class CourtStaffCreate(BaseModel):
    staff_name: str = Field(min_length=1)
    designation: str | None = None
    department: str | None = None
    specialization: str | None = None
    office_hours: str | None = None
    is_active: bool = True


class CourtStaffUpdate(PartialUpdate):
    non_nullable = ("staff_name", "is_active")

    staff_name: str | None = Field(default=None, min_length=1)
    designation: str | None = None
    department: str | None = None
    specialization: str | None = None
    office_hours: str | None = None
    is_active: bool | None = None


class CourtStaffOut(RecordOut):
    staff_name: str
    designation: str | None
    department: str | None
    specialization: str | None
    office_hours: str | None
    is_active: bool


class CourtAdminStats(BaseModel):
    buildings: int
    rooms: int
    staff: int


class CourtBuildingList(BaseModel):
    buildings: list[CourtBuildingOut]


class CourtBuildingEnvelope(BaseModel):
    success: bool = True
    building: CourtBuildingOut


class CourtRoomList(BaseModel):
    rooms: list[CourtRoomOut]


class CourtRoomEnvelope(BaseModel):
    success: bool = True
    room: CourtRoomOut


class CourtStaffList(BaseModel):
    staff: list[CourtStaffOut]


class CourtStaffEnvelope(BaseModel):
    success: bool = True
    staff: CourtStaffOut
