"""Booking Routes — create a session and fetch one by id.

Invariants:
    - POST validates date/time before resolving participants (zero store
      access on bad input)
    - Errors are raised as ChessMentorError and rendered by the global handlers

Design Decisions:
    - 201 with the created session, including the store-assigned id
"""

import logging

from fastapi import APIRouter, Depends, status

from chessmentor.api.dependencies import get_booking_service, get_schedule_service
from chessmentor.schemas.session import BookingCreate, SessionResponse
from chessmentor.services.booking_service import BookingService
from chessmentor.services.schedule_service import ScheduleQueryService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/sessions", tags=["sessions"])


@router.post(
    "", response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_booking(
    body: BookingCreate,
    bookings: BookingService = Depends(get_booking_service),
):
    """Book a 60-minute session between a coach and a student."""
    session = await bookings.book(
        body.coach_id, body.student_id, body.date, body.time,
    )
    return SessionResponse.from_domain(session)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: str,
    schedule: ScheduleQueryService = Depends(get_schedule_service),
):
    """Get one session by id."""
    return SessionResponse.from_domain(await schedule.get_session(session_id))
