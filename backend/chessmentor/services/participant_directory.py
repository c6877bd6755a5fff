"""Participant Directory — resolves user documents into Participant values.

Invariants:
    - Reads only; the users collection is written by the identity layer
    - get_coach returns None unless the stored role is COACH
    - resolve_booking_parties raises ResourceNotFoundError / ParticipantRoleError
      before any session write happens

Design Decisions:
    - Coach and student lookups are independent reads, issued concurrently
"""

import asyncio
import logging

from chessmentor.core.domain_types import (
    USERS_COLLECTION, ParticipantId, UserRole,
)
from chessmentor.core.errors import (
    ErrorContext, ParticipantRoleError, ResourceNotFoundError, StorageError,
)
from chessmentor.core.repository_protocols import DocumentStore
from chessmentor.core.session_record import Participant

logger = logging.getLogger(__name__)


def _decode(doc: dict) -> Participant:
    try:
        return Participant.from_document(doc)
    except (KeyError, ValueError, TypeError) as e:
        raise StorageError(f"Malformed user record: {e}", "decode")


class ParticipantDirectory:
    """Lookups over the users collection."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def get_participant(self, uid: str) -> Participant | None:
        doc = await self.store.get(USERS_COLLECTION, uid)
        return _decode(doc) if doc else None

    async def get_coach(self, uid: str) -> Participant | None:
        participant = await self.get_participant(uid)
        if participant and participant.role == UserRole.COACH:
            return participant
        return None

    async def list_coaches(self) -> list[Participant]:
        docs = await self.store.query(
            USERS_COLLECTION, "role", UserRole.COACH.value,
        )
        return [_decode(d) for d in docs]

    async def resolve_booking_parties(
        self, coach_id: str, student_id: str,
    ) -> tuple[Participant, Participant]:
        """Fetch both sides of a booking. Returns (coach, student)."""
        coach, student = await asyncio.gather(
            self.get_participant(coach_id), self.get_participant(student_id),
        )
        if coach is None:
            raise ResourceNotFoundError(
                "Coach", coach_id,
                ErrorContext(participant_id=ParticipantId(coach_id)),
            )
        if student is None:
            raise ResourceNotFoundError(
                "Student", student_id,
                ErrorContext(participant_id=ParticipantId(student_id)),
            )
        if coach.role != UserRole.COACH:
            logger.warning(
                f"Booking rejected: {coach_id} is not a coach",
                extra={"participant_id": coach_id},
            )
            raise ParticipantRoleError(coach_id, UserRole.COACH.value)
        return coach, student
