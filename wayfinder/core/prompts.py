"""System prompts and DB context rendering for both assistants."""

import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from itertools import groupby
from typing import Any
from zoneinfo import ZoneInfo

INDIA_TZ = ZoneInfo("Asia/Kolkata")

COURT_ROOMS_IN_PROMPT = 30
COURT_STAFF_IN_PROMPT = 20
COURT_FILES_IN_PROMPT = 10
DEPARTMENT_DATA_IN_PROMPT = 20


@dataclass
class CollegeContext:
    """Rows fetched for a college question. Empty lists are omitted from the prompt."""

    departments: Sequence[Any] = field(default_factory=list)
    notices: Sequence[Any] = field(default_factory=list)
    events: Sequence[Any] = field(default_factory=list)
    department_data: Sequence[Any] = field(default_factory=list)
    staff: Sequence[Any] = field(default_factory=list)
    courses: Sequence[Any] = field(default_factory=list)
    settings: Sequence[Any] = field(default_factory=list)


@dataclass
class CourtContext:
    """Rows fetched for a court question."""

    settings: dict[str, Any] = field(default_factory=dict)
    buildings: Sequence[Any] = field(default_factory=list)
    rooms: Sequence[Any] = field(default_factory=list)
    staff: Sequence[Any] = field(default_factory=list)
    timings: Sequence[Any] = field(default_factory=list)
    files: Sequence[Any] = field(default_factory=list)
    building_images: Sequence[Any] = field(default_factory=list)


def _setting_line(key: str, value: Any) -> str | None:
    if isinstance(value, dict):
        if value.get("title") and value.get("content"):
            return f"{value['title']}: {value['content']}"
        if value.get("content"):
            return f"{key}: {value['content']}"
        if isinstance(value.get("list"), list):
            return f"{key}: {', '.join(map(str, value['list']))}"
        return None
    return f"{key}: {value}"


def render_college_context(ctx: CollegeContext) -> str:
    """Render fetched rows as the plain-text sections the college prompt expects."""
    lines: list[str] = []

    if ctx.departments:
        lines.append("\n=== ACTIVE DEPARTMENTS ===")
        for dept in ctx.departments:
            lines.append(f"{dept.name}: {dept.description or 'No description'}")
            if dept.head_name:
                lines.append(f"  Head: {dept.head_name}")

    if ctx.notices:
        lines.append("\n=== LATEST NOTICES ===")
        for notice in ctx.notices:
            lines.append(f"[{notice.priority.upper()}] {notice.title}: {notice.content}")

    if ctx.events:
        lines.append("\n=== UPCOMING EVENTS ===")
        for event in ctx.events:
            when = event.event_date.strftime("%d %B %Y") if event.event_date else "TBD"
            lines.append(f"{event.title} - {when}: {event.description or 'No description'}")

    if ctx.department_data:
        lines.append("\n=== DEPARTMENT-SPECIFIC INFORMATION ===")
        for item in ctx.department_data[:DEPARTMENT_DATA_IN_PROMPT]:
            lines.append(f"[{item.data_type}] {item.title}: {item.content}")

    if ctx.staff:
        lines.append("\n=== STAFF MEMBERS ===")
        for member in ctx.staff:
            lines.append(
                f"{member.full_name} ({member.employee_id}): {member.designation} - {member.role}"
            )
            if member.email:
                lines.append(f"  Email: {member.email}")
            if member.phone:
                lines.append(f"  Phone: {member.phone}")

    if ctx.courses:
        lines.append(f"\n=== AVAILABLE COURSES (Total: {len(ctx.courses)}) ===")
        by_type = sorted(ctx.courses, key=lambda c: c.course_type or "Other")
        for course_type, group in groupby(by_type, key=lambda c: c.course_type or "Other"):
            group = list(group)
            lines.append(f"\n[{course_type} Courses - {len(group)} available]:")
            for course in group:
                fee = f" - ₹{course.fees_per_year:g}/year" if course.fees_per_year else ""
                seats = f" - {course.total_seats} seats" if course.total_seats else ""
                lines.append(
                    f"{course.course_name} ({course.course_code}): {course.duration}{fee}{seats}"
                )
                if course.description:
                    lines.append(f"  Description: {course.description}")
                if course.eligibility:
                    lines.append(f"  Eligibility: {course.eligibility}")

    if ctx.settings:
        setting_lines = [_setting_line(s.key, s.value) for s in ctx.settings]
        setting_lines = [line for line in setting_lines if line]
        if setting_lines:
            lines.append("\n=== COLLEGE INFORMATION ===")
            lines.extend(setting_lines)

    return "\n".join(lines).strip()


def build_college_system_prompt(
    college_name: str,
    assistant_name: str,
    context: str,
    now: datetime | None = None,
) -> str:
    now = (now or datetime.now(INDIA_TZ)).astimezone(INDIA_TZ)
    today = now.strftime("%A, %d %B %Y")
    current_time = now.strftime("%I:%M %p IST")

    return f"""You are {assistant_name}, the official AI Voice Assistant of {college_name}.
Your role is to be a warm, helpful and professional college representative who assists
students, parents, staff and visitors with accurate information.

CURRENT DATE AND TIME:
Today's Date: {today}
Current Time: {current_time}
(Use this to answer questions about "today", "tomorrow", "this month".)

College Information (PRIMARY SOURCE - use this first):
{context or "No database information matched this question."}

Year to semester mapping:
- "1st year" = 1st or 2nd Semester
- "2nd year" = 3rd or 4th Semester
- "3rd year" = 5th or 6th Semester

NEVER MAKE UP INFORMATION:
- If specific facts (names, dates, people) are not in the College Information above, say
  "Mujhe is baare mein pata nahi hai" or "I don't have this information".
- Never guess names of principals, founders or staff, and never invent dates.

RESPONSE STYLE - professional Hinglish:
- Reply in natural Hinglish, the way students actually speak. Not pure Hindi, not pure English.
- Speak politely and confidently, like a real staff member of {college_name}.
- Never use bullet points, asterisks, numbered lists or heavy formatting. Your answer is spoken aloud.
- When asked about courses, staff or events, mention the total count first, then organize by category.
- If the question is unclear, ask a short follow-up question."""


def build_web_search_prompt(
    college_name: str,
    assistant_name: str,
    question: str,
    search_info: str,
    context: str,
) -> str:
    """Prompt for regenerating an answer from web search results."""
    return f"""You are {assistant_name}, the official AI Assistant of {college_name}.

I just searched Google for "{question}" and received the data below.

=== GOOGLE AI OVERVIEW (PRIMARY SOURCE - USE THIS FIRST) ===
{search_info}

=== Database Information (secondary reference only) ===
{context or "None"}

Rules:
1. The Google section is your primary and most accurate source.
2. Use only information present in the data. Never invent details.
3. If specific numbers or lists are given, state them exactly and completely.
4. If the data is incomplete, say that complete details are on the college website.
5. Answer in professional, conversational Hinglish, in flowing paragraphs without bullet points or asterisks.
6. Do not say "mujhe pata nahi" if the Google data has the answer."""


def build_court_system_prompt(court_name: str, ctx: CourtContext) -> str:
    parts = [
        f"""You are the {court_name} AI Assistant - a professional, helpful and knowledgeable
virtual guide for the {court_name} in Haryana, India.

YOUR ROLE:
- Guide visitors, lawyers, litigants and staff through the court premises
- Provide accurate information about courtroom locations, file tracking and staff
- Answer questions about court procedures, timings and facilities

LANGUAGE:
- Respond in Hinglish (Hindi + English mix) by default, for example
  "Courtroom 5 ground floor par hai."
- If the user writes in pure English or asks for English, respond in English.
- When giving directions, be specific about building, floor and room number.

FORMATTING:
- Never use markdown: no **, *, __, [] or links. Plain text only, simple dashes for lists.
- Your answer is read aloud by a voice assistant.

CURRENT COURT DATA:
"""
    ]

    if ctx.settings:
        parts.append("Court Information:")
        parts.extend(f"- {key}: {json.dumps(value)}" for key, value in ctx.settings.items())
        parts.append("")

    if ctx.buildings:
        parts.append("Court Buildings:")
        for building in ctx.buildings:
            parts.append(f"- {building.building_name} ({building.building_code or 'N/A'})")
            if building.description:
                parts.append(f"  Description: {building.description}")
            if building.total_floors:
                parts.append(f"  Floors: {building.total_floors}")
            if building.location_details:
                parts.append(f"  Location: {building.location_details}")
        parts.append("")

    if ctx.rooms:
        parts.append("Courtrooms & Offices:")
        for room in ctx.rooms[:COURT_ROOMS_IN_PROMPT]:
            parts.append(f"- Room {room.room_number}: {room.room_name or room.room_type}")
            if room.room_purpose:
                parts.append(f"  Purpose: {room.room_purpose}")
            if room.floor_number is not None:
                parts.append(f"  Floor: {room.floor_number}")
            if room.incharge_name:
                parts.append(f"  In-charge: {room.incharge_name}")
            if room.timings:
                parts.append(f"  Timings: {room.timings}")
        parts.append("")

    if ctx.staff:
        parts.append("Court Staff:")
        for person in ctx.staff[:COURT_STAFF_IN_PROMPT]:
            parts.append(f"- {person.staff_name} - {person.designation}")
            if person.department:
                parts.append(f"  Department: {person.department}")
            if person.specialization:
                parts.append(f"  Specialization: {person.specialization}")
            if person.office_hours:
                parts.append(f"  Office Hours: {person.office_hours}")
        parts.append("")

    if ctx.timings:
        parts.append("Court Timings:")
        for timing in ctx.timings:
            parts.append(f"- {timing.facility_name}: {timing.opening_time} - {timing.closing_time}")
            if timing.days:
                parts.append(f"  Days: {timing.days}")
            if timing.special_notes:
                parts.append(f"  Note: {timing.special_notes}")
        parts.append("")

    if ctx.files:
        parts.append("Recent File Locations:")
        for court_file in ctx.files[:COURT_FILES_IN_PROMPT]:
            parts.append(f"- File {court_file.file_number}: {court_file.current_location}")
            if court_file.file_type:
                parts.append(f"  Type: {court_file.file_type}")
            parts.append(f"  Status: {court_file.status}")
        parts.append("")

    if ctx.building_images:
        parts.append("Available Building Images (shown to the user):")
        for image in ctx.building_images:
            parts.append(f"- {image.title}")
            for label, value in (
                ("Description", image.description),
                ("Room", image.room_number),
                ("Building", image.building_name),
                ("Department", image.department),
                ("Contact", image.contact_person),
            ):
                if value:
                    parts.append(f"  {label}: {value}")
        parts.append(
            "When answering a location question with a relevant image, mention that an image is being shown."
        )
        parts.append("")

    parts.append(
        """GUIDELINES:
- For a specific file, room or staff member, give location, timings and contact details.
- Describe locations as building, then floor, then room number.
- If you don't have specific information, say so politely and suggest contacting the court office.
- For legal procedures give general guidance and advise consulting court staff or a lawyer."""
    )
    return "\n".join(parts)
