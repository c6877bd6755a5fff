"""Tests for the error hierarchy — codes, statuses, and REST envelope."""

from chessmentor.core.errors import (
    ErrorContext, ParticipantRoleError, ResourceNotFoundError, StorageError,
    ValidationError,
)


def test_validation_error_envelope():
    err = ValidationError("missing date/time", field="time")
    body = err.to_response()["error"]
    assert err.http_status == 400
    assert body["code"] == "VALIDATION_ERROR"
    assert body["message"] == "missing date/time"
    assert body["category"] == "validation"


def test_storage_error_hides_details_from_users():
    err = StorageError("connection refused by 10.0.0.3", "commit")
    body = err.to_response()["error"]
    assert err.http_status == 503
    assert "10.0.0.3" not in body["message"]
    assert "try again later" in body["message"]
    assert err.operation == "commit"


def test_not_found_carries_context():
    err = ResourceNotFoundError("Session", "x1", ErrorContext(session_id="x1"))
    body = err.to_response()["error"]
    assert err.http_status == 404
    assert body["context"]["session_id"] == "x1"


def test_role_error_records_participant():
    err = ParticipantRoleError("S1", "COACH")
    assert err.context.participant_id == "S1"
    assert err.code == "PARTICIPANT_ROLE_MISMATCH"
