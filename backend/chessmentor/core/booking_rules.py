"""Booking Rules — pure validation and record construction for new sessions.

Invariants:
    - parse_start_time checks presence BEFORE format (missing beats invalid)
    - Accepted input: date "YYYY-MM-DD", time "HH:MM" or "HH:MM:SS"
    - Naive date/time is interpreted in the supplied zone, then stored as UTC
    - build_session_document always writes duration=60 and status="upcoming"
    - Display fields are copied from the participants passed in, never re-fetched

Design Decisions:
    - No overlap or double-booking checks: concurrent bookings for the same
      slot are all accepted
    - student_id == coach_id is not rejected here; the schedule merge
      de-duplicates that case instead
"""

from datetime import datetime, timezone, tzinfo

from chessmentor.core.domain_types import SESSION_DURATION_MINUTES, SessionStatus
from chessmentor.core.errors import ValidationError
from chessmentor.core.session_record import Participant, format_instant

_DATETIME_FORMATS = ("%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S")


def parse_start_time(
    date: str | None, time: str | None, tz: tzinfo = timezone.utc,
) -> datetime:
    """Combine separately supplied date and time into one aware instant.

    Raises ValidationError("missing date/time") when either part is empty and
    ValidationError("invalid date/time") when the combination does not parse.
    """
    if not date or not time:
        raise ValidationError("missing date/time", field="date" if not date else "time")

    combined = f"{date.strip()}T{time.strip()}"
    for fmt in _DATETIME_FORMATS:
        try:
            naive = datetime.strptime(combined, fmt)
        except ValueError:
            continue
        return naive.replace(tzinfo=tz)
    raise ValidationError("invalid date/time", field="date")


def build_session_document(
    coach: Participant, student: Participant, start_time: datetime,
) -> dict:
    """Session document body (no id) ready for a single put()."""
    return {
        "studentId": student.id,
        "coachId": coach.id,
        "studentName": student.name,
        "coachName": coach.name,
        "studentAvatar": student.avatar_url,
        "coachAvatar": coach.avatar_url,
        "startTime": format_instant(start_time),
        "duration": SESSION_DURATION_MINUTES,
        "status": SessionStatus.UPCOMING.value,
    }
