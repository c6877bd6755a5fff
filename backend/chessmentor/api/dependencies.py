"""Route Dependencies — wires services to the process-wide document store.

Invariants:
    - Services are built per request; they hold no state between calls
    - The store is the only shared resource (pooled by DatabaseSessionManager)

Design Decisions:
    - Overridable via app.dependency_overrides[get_document_store] in tests
"""

from zoneinfo import ZoneInfo

from fastapi import Depends

from chessmentor.config import get_settings
from chessmentor.core.repository_protocols import DocumentStore
from chessmentor.infrastructure.database import DatabaseSessionManager, get_db_manager
from chessmentor.infrastructure.document_store import SqlDocumentStore
from chessmentor.services.booking_service import BookingService
from chessmentor.services.participant_directory import ParticipantDirectory
from chessmentor.services.schedule_service import ScheduleQueryService


def get_document_store(
    manager: DatabaseSessionManager = Depends(get_db_manager),
) -> DocumentStore:
    return SqlDocumentStore(manager)


def get_booking_service(
    store: DocumentStore = Depends(get_document_store),
) -> BookingService:
    return BookingService(store, ZoneInfo(get_settings().booking_timezone))


def get_schedule_service(
    store: DocumentStore = Depends(get_document_store),
) -> ScheduleQueryService:
    return ScheduleQueryService(store)


def get_participant_directory(
    store: DocumentStore = Depends(get_document_store),
) -> ParticipantDirectory:
    return ParticipantDirectory(store)
