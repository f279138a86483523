"""User goal endpoints."""

from datetime import UTC, date, datetime

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Query,
    Request,
    Response,
    status,
)

from macro_tracker.api.auth import get_container, require_user
from macro_tracker.api.schemas import GoalsRequest
from macro_tracker.api.serializers import serialize_goal, serialize_progress
from macro_tracker.domain.models import UserRecord

router = APIRouter(prefix="/api/user-goals", tags=["goals"])


@router.get("")
async def get_goals(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return the user's daily goals."""
    goals = get_container(request).goal_service.get_goals(user.id)
    if goals is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Goals not found"
        )
    return serialize_goal(goals)


@router.post("")
async def save_goals(
    body: GoalsRequest,
    request: Request,
    response: Response,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Create or update the user's daily goals."""
    goals, created = get_container(request).goal_service.upsert_goals(
        user.id, body.protein_goal, body.carbs_goal, body.fat_goal
    )
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return serialize_goal(goals)


@router.get("/progress")
async def goal_progress(
    request: Request,
    day: date | None = Query(default=None, alias="date"),
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Return the day's totals against the user's goals."""
    resolved_day = day or datetime.now(tz=UTC).date()
    progress = get_container(request).goal_service.get_progress(user.id, resolved_day)
    if progress is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Goals not found"
        )
    return serialize_progress(progress)
