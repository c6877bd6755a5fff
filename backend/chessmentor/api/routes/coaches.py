"""Coach Routes — directory lookups used before booking."""

import logging

from fastapi import APIRouter, Depends

from chessmentor.api.dependencies import get_participant_directory
from chessmentor.core.errors import ResourceNotFoundError
from chessmentor.schemas.session import ParticipantResponse
from chessmentor.services.participant_directory import ParticipantDirectory

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/coaches", tags=["coaches"])


@router.get("", response_model=list[ParticipantResponse])
async def list_coaches(
    directory: ParticipantDirectory = Depends(get_participant_directory),
):
    """All users holding the COACH role."""
    return [ParticipantResponse.from_domain(c) for c in await directory.list_coaches()]


@router.get("/{coach_id}", response_model=ParticipantResponse)
async def get_coach(
    coach_id: str,
    directory: ParticipantDirectory = Depends(get_participant_directory),
):
    """One coach profile, or 404 when the id is unknown or not a coach."""
    coach = await directory.get_coach(coach_id)
    if coach is None:
        raise ResourceNotFoundError("Coach", coach_id)
    return ParticipantResponse.from_domain(coach)
