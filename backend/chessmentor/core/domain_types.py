"""Domain Types — identity aliases and closed enumerations for scheduling.

Invariants:
    - SessionId and ParticipantId wrap store identifiers; never mix them
    - SESSION_DURATION_MINUTES is the single source of truth for booking length
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON documents without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

SessionId = NewType("SessionId", str)
ParticipantId = NewType("ParticipantId", str)


# ─── Constants ───────────────────────────────────────────────────

SESSIONS_COLLECTION = "sessions"
USERS_COLLECTION = "users"

SESSION_DURATION_MINUTES: int = 60


# ─── Enums ───────────────────────────────────────────────────────

class SessionStatus(str, Enum):
    """Session lifecycle states — maps to the `status` field of a session document.

    Only UPCOMING is ever written. COMPLETED and CANCELLED are valid stored
    values but no operation transitions a session into them.
    """
    UPCOMING = "upcoming"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ViewerRole(str, Enum):
    """Which side of a session the viewer sits on."""
    STUDENT = "student"
    COACH = "coach"


class UserRole(str, Enum):
    """Account roles stored on `users` documents."""
    LEARNER = "LEARNER"
    COACH = "COACH"
    ADMIN = "ADMIN"
