"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from profile_snapshot.interface.dependencies import get_use_case
from profile_snapshot.interface.schemas import ErrorResponse, SnapshotResponse
from profile_snapshot.services.get_snapshot import GetSnapshotUseCase

router = APIRouter()


@router.get(
    "/snapshot/{username}",
    response_model=SnapshotResponse,
    responses={
        404: {"model": ErrorResponse, "description": "User not found"},
        422: {"model": ErrorResponse, "description": "Invalid username"},
        429: {"model": ErrorResponse, "description": "GitHub API rate limit exceeded"},
        502: {"model": ErrorResponse, "description": "GitHub API error or unexpected payload"},
    },
)
async def snapshot(
    username: str,
    use_case: GetSnapshotUseCase = Depends(get_use_case),
) -> SnapshotResponse:
    """Build a snapshot of a GitHub user's public footprint."""
    result = await use_case.execute(username)
    return SnapshotResponse.from_snapshot(result)
