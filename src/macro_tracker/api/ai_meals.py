"""AI meal suggestion endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, status

from macro_tracker.api.auth import get_container, require_user
from macro_tracker.api.schemas import AIMealCreateRequest
from macro_tracker.api.serializers import serialize_ai_request, serialize_meal
from macro_tracker.domain.models import UserRecord

router = APIRouter(prefix="/api/ai-meals", tags=["ai-meals"])


@router.post("")
async def create_ai_meal(
    body: AIMealCreateRequest,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Generate a meal suggestion and store the request."""
    if not body.prompt.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Prompt is required"
        )
    macro_needs = body.macro_needs.to_domain() if body.macro_needs else None
    ai_request = await get_container(request).ai_meal_service.generate(
        user.id, body.prompt, macro_needs
    )
    return serialize_ai_request(ai_request)


@router.get("")
async def list_ai_meals(
    request: Request, user: UserRecord = Depends(require_user)
) -> list[dict[str, object]]:
    """List the user's meal suggestions."""
    requests = get_container(request).ai_meal_service.list_requests(user.id)
    return [serialize_ai_request(item) for item in requests]


@router.post("/{request_id}/save")
async def save_ai_meal(
    request_id: UUID, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Save a suggestion as one of the user's meals."""
    meal = get_container(request).ai_meal_service.save_as_meal(user.id, request_id)
    if meal is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Request not found or already saved",
        )
    return serialize_meal(meal)
