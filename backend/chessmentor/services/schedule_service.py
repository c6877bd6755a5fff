"""Schedule Query Service — every session touching one participant, either role.

Invariants:
    - list_sessions issues exactly two equality reads (studentId, coachId),
      concurrently, and merges only after BOTH complete
    - If either read fails the error propagates; partial schedules are never returned
    - No caching: every call re-reads the store
    - Results are de-duplicated by id but NOT ordered; use get_schedule / classify

Design Decisions:
    - Two queries plus client-side union: the store has no OR across fields
    - as_of is supplied by the caller (route reads the clock), keeping the
      classification in core/schedule.py pure
"""

import asyncio
import logging
from datetime import datetime

from chessmentor.core.domain_types import SESSIONS_COLLECTION
from chessmentor.core.errors import ErrorContext, ResourceNotFoundError, StorageError
from chessmentor.core.repository_protocols import DocumentStore
from chessmentor.core.schedule import Schedule, classify, merge_sessions
from chessmentor.core.session_record import Session

logger = logging.getLogger(__name__)


def _decode_all(docs: list[dict]) -> list[Session]:
    try:
        return [Session.from_document(d) for d in docs]
    except (KeyError, ValueError, TypeError) as e:
        raise StorageError(f"Malformed session record: {e}", "decode")


class ScheduleQueryService:
    """Read side of session scheduling."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def list_sessions(self, participant_id: str) -> list[Session]:
        as_student, as_coach = await asyncio.gather(
            self.store.query(SESSIONS_COLLECTION, "studentId", participant_id),
            self.store.query(SESSIONS_COLLECTION, "coachId", participant_id),
        )
        sessions = merge_sessions(_decode_all(as_student), _decode_all(as_coach))
        logger.debug(
            f"Loaded {len(sessions)} session(s) "
            f"({len(as_student)} as student, {len(as_coach)} as coach)",
            extra={"participant_id": participant_id},
        )
        return sessions

    async def get_schedule(self, participant_id: str, as_of: datetime) -> Schedule:
        return classify(await self.list_sessions(participant_id), as_of)

    async def get_session(self, session_id: str) -> Session:
        doc = await self.store.get(SESSIONS_COLLECTION, session_id)
        if doc is None:
            raise ResourceNotFoundError(
                "Session", session_id, ErrorContext(session_id=session_id),
            )
        return _decode_all([doc])[0]
