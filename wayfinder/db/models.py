"""SQLAlchemy models for the college and court data stores.

Column types are dialect-neutral (``Uuid``, ``JSON``) so the same metadata
works on PostgreSQL in deployment and SQLite in tests.
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class RecordMixin:
    """UUID primary key plus creation and update timestamps."""

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )


# College


class Department(RecordMixin, Base):
    __tablename__ = "departments"

    name: Mapped[str] = mapped_column(String(200))
    slug: Mapped[str] = mapped_column(String(200), unique=True, index=True)
    department_id: Mapped[str] = mapped_column(String(32), unique=True, index=True)
    password: Mapped[str] = mapped_column(String(255))
    head_name: Mapped[str | None] = mapped_column(String(200))
    contact_email: Mapped[str | None] = mapped_column(String(200))
    contact_phone: Mapped[str | None] = mapped_column(String(50))
    description: Mapped[str | None] = mapped_column(Text)
    panel_link: Mapped[str | None] = mapped_column(String(255))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)


class Course(RecordMixin, Base):
    __tablename__ = "courses"

    course_name: Mapped[str] = mapped_column(String(200))
    course_code: Mapped[str | None] = mapped_column(String(50))
    course_type: Mapped[str | None] = mapped_column(String(50))
    duration: Mapped[str | None] = mapped_column(String(50))
    description: Mapped[str | None] = mapped_column(Text)
    eligibility: Mapped[str | None] = mapped_column(Text)
    total_seats: Mapped[int | None] = mapped_column(Integer)
    fees_per_year: Mapped[float | None] = mapped_column(Float)
    department_id: Mapped[UUID | None] = mapped_column(
        Uuid, ForeignKey("departments.id", ondelete="SET NULL")
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)


class StaffMember(RecordMixin, Base):
    __tablename__ = "staff_members"

    full_name: Mapped[str] = mapped_column(String(200))
    employee_id: Mapped[str] = mapped_column(String(50), unique=True, index=True)
    department_id: Mapped[UUID | None] = mapped_column(
        Uuid, ForeignKey("departments.id", ondelete="SET NULL")
    )
    role: Mapped[str | None] = mapped_column(String(100))
    designation: Mapped[str | None] = mapped_column(String(200))
    email: Mapped[str | None] = mapped_column(String(200))
    phone: Mapped[str | None] = mapped_column(String(50))
    qualification: Mapped[str | None] = mapped_column(String(200))
    specialization: Mapped[str | None] = mapped_column(String(200))
    joining_date: Mapped[str | None] = mapped_column(String(50))


class Notice(RecordMixin, Base):
    __tablename__ = "notices"

    title: Mapped[str] = mapped_column(String(300))
    content: Mapped[str] = mapped_column(Text)
    notice_type: Mapped[str] = mapped_column(String(20), default="general")
    priority: Mapped[str] = mapped_column(String(20), default="normal")
    department_id: Mapped[UUID | None] = mapped_column(
        Uuid, ForeignKey("departments.id", ondelete="SET NULL")
    )
    start_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    end_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)


class Event(RecordMixin, Base):
    __tablename__ = "events"

    title: Mapped[str] = mapped_column(String(300))
    description: Mapped[str | None] = mapped_column(Text)
    event_type: Mapped[str | None] = mapped_column(String(50))
    event_date: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    location: Mapped[str | None] = mapped_column(String(300))
    department_id: Mapped[UUID | None] = mapped_column(
        Uuid, ForeignKey("departments.id", ondelete="SET NULL")
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)


class DepartmentData(RecordMixin, Base):
    __tablename__ = "department_data"

    department_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("departments.id", ondelete="CASCADE"), index=True
    )
    data_type: Mapped[str] = mapped_column(String(50))
    title: Mapped[str] = mapped_column(String(300))
    content: Mapped[str | None] = mapped_column(Text)
    # "metadata" is reserved on declarative classes
    extra: Mapped[dict[str, Any] | None] = mapped_column("metadata", JSON)


class CollegeSetting(RecordMixin, Base):
    __tablename__ = "college_settings"

    key: Mapped[str] = mapped_column(String(100), unique=True, index=True)
    value: Mapped[Any] = mapped_column(JSON)


class ChatMessage(RecordMixin, Base):
    __tablename__ = "chat_messages"

    content: Mapped[str] = mapped_column(Text)
    role: Mapped[str] = mapped_column(String(20))
    language: Mapped[str] = mapped_column(String(10), default="en")
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)


# Court


class CourtBuilding(RecordMixin, Base):
    __tablename__ = "court_buildings"

    building_name: Mapped[str] = mapped_column(String(200))
    building_code: Mapped[str | None] = mapped_column(String(50))
    description: Mapped[str | None] = mapped_column(Text)
    total_floors: Mapped[int | None] = mapped_column(Integer)
    location_details: Mapped[str | None] = mapped_column(Text)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)


class CourtRoom(RecordMixin, Base):
    __tablename__ = "court_rooms"

    room_number: Mapped[str] = mapped_column(String(20))
    room_name: Mapped[str | None] = mapped_column(String(200))
    room_type: Mapped[str | None] = mapped_column(String(50))
    room_purpose: Mapped[str | None] = mapped_column(Text)
    floor_number: Mapped[int | None] = mapped_column(Integer)
    incharge_name: Mapped[str | None] = mapped_column(String(200))
    timings: Mapped[str | None] = mapped_column(String(100))
    building_id: Mapped[UUID | None] = mapped_column(
        Uuid, ForeignKey("court_buildings.id", ondelete="SET NULL")
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)


class CourtStaff(RecordMixin, Base):
    __tablename__ = "court_staff"

    staff_name: Mapped[str] = mapped_column(String(200))
    designation: Mapped[str | None] = mapped_column(String(200))
    department: Mapped[str | None] = mapped_column(String(200))
    specialization: Mapped[str | None] = mapped_column(String(200))
    office_hours: Mapped[str | None] = mapped_column(String(100))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)


class CourtFile(RecordMixin, Base):
    __tablename__ = "court_files"

    file_number: Mapped[str] = mapped_column(String(100), index=True)
    current_location: Mapped[str | None] = mapped_column(String(200))
    file_type: Mapped[str | None] = mapped_column(String(50))
    status: Mapped[str] = mapped_column(String(20), default="active")


class CourtTiming(RecordMixin, Base):
    __tablename__ = "court_timings"

    facility_name: Mapped[str] = mapped_column(String(200))
    opening_time: Mapped[str | None] = mapped_column(String(20))
    closing_time: Mapped[str | None] = mapped_column(String(20))
    days: Mapped[str | None] = mapped_column(String(100))
    special_notes: Mapped[str | None] = mapped_column(Text)


class CourtSetting(RecordMixin, Base):
    __tablename__ = "court_settings"

    key: Mapped[str] = mapped_column(String(100), unique=True, index=True)
    value: Mapped[Any] = mapped_column(JSON)


class CourtBuildingImage(RecordMixin, Base):
    __tablename__ = "court_building_images"

    title: Mapped[str] = mapped_column(String(300))
    description: Mapped[str | None] = mapped_column(Text)
    image_url: Mapped[str] = mapped_column(String(500))
    room_number: Mapped[str | None] = mapped_column(String(20))
    building_name: Mapped[str | None] = mapped_column(String(200))
    department: Mapped[str | None] = mapped_column(String(200))
    contact_person: Mapped[str | None] = mapped_column(String(200))
