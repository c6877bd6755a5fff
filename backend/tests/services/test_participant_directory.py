"""Tests for ParticipantDirectory — user lookups over a fake store."""

import pytest

from chessmentor.core.domain_types import UserRole
from chessmentor.core.errors import (
    ParticipantRoleError, ResourceNotFoundError, StorageError,
)
from chessmentor.services.participant_directory import ParticipantDirectory


@pytest.fixture
def directory(fake_store):
    fake_store.seed(
        "users",
        {"id": "C1", "name": "Magnus", "role": "COACH", "avatarUrl": "c1.png"},
        {"id": "C2", "name": "Judit", "role": "COACH"},
        {"id": "S1", "name": "Beth", "role": "LEARNER"},
        {"id": "A1", "name": "Root", "role": "ADMIN"},
    )
    return ParticipantDirectory(fake_store)


async def test_get_participant(directory):
    p = await directory.get_participant("C1")
    assert p.name == "Magnus"
    assert p.avatar_url == "c1.png"
    assert p.role == UserRole.COACH


async def test_get_unknown_participant_is_none(directory):
    assert await directory.get_participant("nobody") is None


async def test_get_coach_filters_by_role(directory):
    assert (await directory.get_coach("C2")).name == "Judit"
    assert await directory.get_coach("S1") is None
    assert await directory.get_coach("A1") is None


async def test_list_coaches(directory):
    coaches = await directory.list_coaches()
    assert sorted(c.id for c in coaches) == ["C1", "C2"]


async def test_resolve_returns_coach_then_student(directory):
    coach, student = await directory.resolve_booking_parties("C1", "S1")
    assert (coach.id, student.id) == ("C1", "S1")


async def test_resolve_allows_coach_booking_as_student(directory):
    coach, student = await directory.resolve_booking_parties("C1", "C2")
    assert student.role == UserRole.COACH


async def test_resolve_unknown_coach(directory):
    with pytest.raises(ResourceNotFoundError) as exc:
        await directory.resolve_booking_parties("C404", "S1")
    assert exc.value.resource_type == "Coach"


async def test_resolve_rejects_non_coach(directory):
    with pytest.raises(ParticipantRoleError):
        await directory.resolve_booking_parties("A1", "S1")


async def test_bad_role_in_store_is_storage_error(fake_store):
    fake_store.seed("users", {"id": "X", "name": "X", "role": "WIZARD"})
    with pytest.raises(StorageError):
        await ParticipantDirectory(fake_store).get_participant("X")
