"""Booking Service — turns (coach, student, date, time) into a persisted Session.

Invariants:
    - Date/time validation happens before ANY store access (read or write)
    - Exactly one put() per successful booking; the store assigns the id
    - No retry on StorageError: the caller re-submits deliberately
    - Participant display fields are copied at this instant, never re-fetched

Design Decisions:
    - create_booking takes resolved participants; book() is the id-based entry
      point used by the API and resolves them through ParticipantDirectory
    - Overlapping bookings are all accepted (no availability checks)
"""

import logging
from datetime import timezone, tzinfo

from chessmentor.core.booking_rules import build_session_document, parse_start_time
from chessmentor.core.domain_types import SESSIONS_COLLECTION
from chessmentor.core.repository_protocols import DocumentStore
from chessmentor.core.session_record import Participant, Session
from chessmentor.services.participant_directory import ParticipantDirectory

logger = logging.getLogger(__name__)


class BookingService:
    """Validates and persists new coaching sessions."""

    def __init__(self, store: DocumentStore, tz: tzinfo = timezone.utc):
        self.store = store
        self.tz = tz
        self.directory = ParticipantDirectory(store)

    async def create_booking(
        self, coach: Participant, student: Participant,
        date: str | None, time: str | None,
    ) -> Session:
        """Persist a 60-minute upcoming session. Raises ValidationError or StorageError."""
        start_time = parse_start_time(date, time, self.tz)
        document = build_session_document(coach, student, start_time)

        session_id = await self.store.put(SESSIONS_COLLECTION, document)

        logger.info(
            f"Session booked for {document['startTime']}",
            extra={"session_id": session_id, "participant_id": student.id},
        )
        return Session.from_document({**document, "id": session_id})

    async def book(
        self, coach_id: str, student_id: str, date: str | None, time: str | None,
    ) -> Session:
        """Validate date/time, resolve both participants, then create_booking."""
        parse_start_time(date, time, self.tz)
        coach, student = await self.directory.resolve_booking_parties(
            coach_id, student_id,
        )
        return await self.create_booking(coach, student, date, time)
