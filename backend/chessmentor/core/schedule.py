"""Schedule — merge, classify, and role-aware projection of session records.

Invariants:
    - merge_sessions keeps the FIRST occurrence of each id (student side first)
    - classify: upcoming iff start_time >= as_of (boundary is upcoming)
    - upcoming sorted ascending, past descending; both stable on equal start_time
    - view_as never touches the store; it projects fields already on the Session
    - view_as accepts only STUDENT or COACH; any other role is a ValueError

Design Decisions:
    - as_of is a parameter, never read from a clock here: classification stays
      deterministic under test
    - merge_sessions imposes no order: callers classify or sort as they need
    - Naive as_of is read as UTC so it always compares against aware start times
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable

from chessmentor.core.domain_types import ParticipantId, ViewerRole
from chessmentor.core.session_record import Session


@dataclass
class Schedule:
    """Sessions partitioned around one instant."""
    upcoming: list[Session] = field(default_factory=list)
    past: list[Session] = field(default_factory=list)


@dataclass(frozen=True)
class CounterpartView:
    """The other party of a session, as seen by the viewer."""
    name: str
    avatar: str
    label: str


def merge_sessions(*sides: Iterable[Session]) -> list[Session]:
    """Concatenate result sets and drop repeated ids, keeping the first seen."""
    seen: set[str] = set()
    merged: list[Session] = []
    for side in sides:
        for session in side:
            if session.id in seen:
                continue
            seen.add(session.id)
            merged.append(session)
    return merged


def classify(sessions: Iterable[Session], as_of: datetime) -> Schedule:
    """Partition into upcoming (soonest first) and past (most recent first)."""
    if as_of.tzinfo is None:
        as_of = as_of.replace(tzinfo=timezone.utc)
    upcoming: list[Session] = []
    past: list[Session] = []
    for session in sessions:
        (upcoming if session.start_time >= as_of else past).append(session)
    return Schedule(
        upcoming=sorted(upcoming, key=lambda s: s.start_time),
        past=sorted(past, key=lambda s: s.start_time, reverse=True),
    )


def view_as(session: Session, viewer_role: ViewerRole) -> CounterpartView:
    """Project the counterpart's display fields for the given viewer role."""
    if viewer_role == ViewerRole.STUDENT:
        return CounterpartView(
            name=session.coach_name, avatar=session.coach_avatar, label="Coach",
        )
    if viewer_role == ViewerRole.COACH:
        return CounterpartView(
            name=session.student_name, avatar=session.student_avatar, label="Student",
        )
    raise ValueError(f"unknown viewer role: {viewer_role!r}")


def role_in_session(session: Session, participant_id: ParticipantId) -> ViewerRole:
    """Which side of this session the participant is on (coach wins a tie)."""
    if session.coach_id == participant_id:
        return ViewerRole.COACH
    return ViewerRole.STUDENT
