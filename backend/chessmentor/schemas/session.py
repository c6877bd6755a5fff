"""Session Schemas — booking request and session/schedule responses.

Invariants:
    - BookingCreate ids are non-empty after stripping
    - date/time are passed through unvalidated: the booking core owns
      "missing date/time" vs "invalid date/time"
    - Responses serialize start_time as the stored UTC text (…Z)

Design Decisions:
    - from_domain classmethods keep routes free of field-by-field mapping
"""

from pydantic import BaseModel, Field, field_validator

from chessmentor.core.domain_types import SessionStatus, UserRole, ViewerRole
from chessmentor.core.schedule import CounterpartView
from chessmentor.core.session_record import Participant, Session, format_instant


class BookingCreate(BaseModel):
    """Booking request — participants by id, date and time as entered."""
    coach_id: str = Field(min_length=1, max_length=64)
    student_id: str = Field(min_length=1, max_length=64)
    date: str | None = None
    time: str | None = None

    @field_validator("coach_id", "student_id")
    @classmethod
    def strip_ids(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("participant id cannot be empty or whitespace")
        return v


class SessionResponse(BaseModel):
    """Session response — public-facing session data."""
    id: str
    student_id: str
    coach_id: str
    student_name: str
    coach_name: str
    student_avatar: str
    coach_avatar: str
    start_time: str
    duration: int
    status: SessionStatus

    @classmethod
    def from_domain(cls, session: Session) -> "SessionResponse":
        return cls(
            id=session.id,
            student_id=session.student_id,
            coach_id=session.coach_id,
            student_name=session.student_name,
            coach_name=session.coach_name,
            student_avatar=session.student_avatar,
            coach_avatar=session.coach_avatar,
            start_time=format_instant(session.start_time),
            duration=session.duration,
            status=session.status,
        )


class CounterpartResponse(BaseModel):
    name: str
    avatar: str
    label: str

    @classmethod
    def from_domain(cls, view: CounterpartView) -> "CounterpartResponse":
        return cls(name=view.name, avatar=view.avatar, label=view.label)


class ScheduleEntry(BaseModel):
    """One session as seen by a specific participant."""
    session: SessionResponse
    viewer_role: ViewerRole
    counterpart: CounterpartResponse


class ScheduleResponse(BaseModel):
    participant_id: str
    as_of: str
    upcoming: list[ScheduleEntry]
    past: list[ScheduleEntry]


class ParticipantResponse(BaseModel):
    id: str
    name: str
    avatar_url: str
    role: UserRole

    @classmethod
    def from_domain(cls, participant: Participant) -> "ParticipantResponse":
        return cls(
            id=participant.id,
            name=participant.name,
            avatar_url=participant.avatar_url,
            role=participant.role,
        )
