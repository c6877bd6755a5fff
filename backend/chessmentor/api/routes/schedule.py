"""Schedule Routes — a participant's sessions, raw or classified.

Invariants:
    - /sessions returns the merged, de-duplicated set with no ordering promise
    - /schedule splits around as_of (default: now, UTC) and attaches the
      counterpart as seen from the participant's side of each session
    - The clock is read here, never inside core/

Design Decisions:
    - Viewer role derived per session (a coach may also book as a student)
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query

from chessmentor.api.dependencies import get_schedule_service
from chessmentor.core.domain_types import ParticipantId
from chessmentor.core.schedule import role_in_session, view_as
from chessmentor.core.session_record import Session, format_instant
from chessmentor.schemas.session import (
    CounterpartResponse, ScheduleEntry, ScheduleResponse, SessionResponse,
)
from chessmentor.services.schedule_service import ScheduleQueryService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/participants", tags=["schedule"])


def _entry(session: Session, participant_id: ParticipantId) -> ScheduleEntry:
    role = role_in_session(session, participant_id)
    return ScheduleEntry(
        session=SessionResponse.from_domain(session),
        viewer_role=role,
        counterpart=CounterpartResponse.from_domain(view_as(session, role)),
    )


@router.get("/{participant_id}/sessions", response_model=list[SessionResponse])
async def list_sessions(
    participant_id: str,
    schedule: ScheduleQueryService = Depends(get_schedule_service),
):
    """All sessions where the participant is student or coach (unordered)."""
    sessions = await schedule.list_sessions(participant_id)
    return [SessionResponse.from_domain(s) for s in sessions]


@router.get("/{participant_id}/schedule", response_model=ScheduleResponse)
async def get_schedule(
    participant_id: str,
    as_of: datetime | None = Query(None),
    schedule: ScheduleQueryService = Depends(get_schedule_service),
):
    """Upcoming (soonest first) and past (most recent first) sessions."""
    if as_of is None:
        as_of = datetime.now(timezone.utc)
    elif as_of.tzinfo is None:
        as_of = as_of.replace(tzinfo=timezone.utc)

    result = await schedule.get_schedule(participant_id, as_of)
    pid = ParticipantId(participant_id)
    return ScheduleResponse(
        participant_id=participant_id,
        as_of=format_instant(as_of),
        upcoming=[_entry(s, pid) for s in result.upcoming],
        past=[_entry(s, pid) for s in result.past],
    )
