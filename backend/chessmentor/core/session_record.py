"""Session Record — immutable session and participant values plus document codecs.

Invariants:
    - Session is frozen: this core never mutates a booked session
    - start_time is always timezone-aware and serialized as UTC ISO-8601 with
      millisecond precision and a trailing "Z" (sortable, unambiguous)
    - Document keys are camelCase (studentId, coachId, startTime, ...), matching
      the stored layout; Python attributes are snake_case
    - Display fields (names, avatars) are a snapshot copied at booking time

Design Decisions:
    - Dataclasses over ORM rows: sessions are flat self-contained documents,
      no joins resolved at read time
    - Decoding raises ValueError/KeyError only; the shell decides how to report
      a corrupt record
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from chessmentor.core.domain_types import (
    ParticipantId, SessionId, SessionStatus, UserRole,
)


def format_instant(moment: datetime) -> str:
    """Serialize an aware datetime as UTC ISO-8601, e.g. 2024-07-01T14:30:00.000Z."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_instant(text: str) -> datetime:
    """Parse a stored instant. Naive values are read as UTC."""
    moment = datetime.fromisoformat(text.replace("Z", "+00:00"))
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


@dataclass(frozen=True)
class Participant:
    """A resolved user record, either side of a booking."""
    id: ParticipantId
    name: str
    avatar_url: str = ""
    role: UserRole = UserRole.LEARNER
    email: str | None = None

    @classmethod
    def from_document(cls, doc: dict) -> "Participant":
        return cls(
            id=ParticipantId(doc["id"]),
            name=doc.get("name") or "",
            avatar_url=doc.get("avatarUrl") or "",
            role=UserRole(doc.get("role", UserRole.LEARNER.value)),
            email=doc.get("email"),
        )


@dataclass(frozen=True)
class Session:
    """A booked coaching session between one student and one coach."""
    id: SessionId
    student_id: ParticipantId
    coach_id: ParticipantId
    student_name: str
    coach_name: str
    student_avatar: str
    coach_avatar: str
    start_time: datetime
    duration: int
    status: SessionStatus

    def to_document(self) -> dict:
        return {
            "id": self.id,
            "studentId": self.student_id,
            "coachId": self.coach_id,
            "studentName": self.student_name,
            "coachName": self.coach_name,
            "studentAvatar": self.student_avatar,
            "coachAvatar": self.coach_avatar,
            "startTime": format_instant(self.start_time),
            "duration": self.duration,
            "status": self.status.value,
        }

    @classmethod
    def from_document(cls, doc: dict) -> "Session":
        return cls(
            id=SessionId(doc["id"]),
            student_id=ParticipantId(doc["studentId"]),
            coach_id=ParticipantId(doc["coachId"]),
            student_name=doc.get("studentName") or "",
            coach_name=doc.get("coachName") or "",
            student_avatar=doc.get("studentAvatar") or "",
            coach_avatar=doc.get("coachAvatar") or "",
            start_time=parse_instant(doc["startTime"]),
            duration=int(doc["duration"]),
            status=SessionStatus(doc["status"]),
        )
