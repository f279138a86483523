"""Meal endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from macro_tracker.api.auth import get_container, require_user
from macro_tracker.api.schemas import MealCreateRequest, MealUpdateRequest
from macro_tracker.api.serializers import serialize_meal
from macro_tracker.domain.models import UserRecord

router = APIRouter(prefix="/api/meals", tags=["meals"])

_NOT_FOUND = "Meal not found"


@router.get("")
async def list_meals(
    request: Request,
    q: str | None = None,
    user: UserRecord = Depends(require_user),
) -> list[dict[str, object]]:
    """List the user's meals, optionally filtered by name."""
    meals = get_container(request).meal_service.list_meals(user.id, q)
    return [serialize_meal(meal) for meal in meals]


@router.get("/favorites")
async def list_favorites(
    request: Request, user: UserRecord = Depends(require_user)
) -> list[dict[str, object]]:
    """List the user's favorite meals."""
    meals = get_container(request).meal_service.list_favorites(user.id)
    return [serialize_meal(meal) for meal in meals]


@router.get("/{meal_id}")
async def get_meal(
    meal_id: UUID, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return one meal."""
    meal = get_container(request).meal_service.get_meal(user.id, meal_id)
    if meal is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return serialize_meal(meal)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_meal(
    body: MealCreateRequest,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Create a meal."""
    meal = get_container(request).meal_service.create_meal(user.id, body.model_dump())
    return serialize_meal(meal)


@router.put("/{meal_id}")
async def update_meal(
    meal_id: UUID,
    body: MealUpdateRequest,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Update the fields sent in the body."""
    changes = {
        key: value
        for key, value in body.model_dump(exclude_unset=True).items()
        if value is not None or key == "image_url"
    }
    meal = get_container(request).meal_service.update_meal(user.id, meal_id, changes)
    if meal is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return serialize_meal(meal)


@router.delete("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal(
    meal_id: UUID, request: Request, user: UserRecord = Depends(require_user)
) -> Response:
    """Delete a meal."""
    if not get_container(request).meal_service.delete_meal(user.id, meal_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{meal_id}/toggle-favorite")
async def toggle_favorite(
    meal_id: UUID, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Flip a meal's favorite flag."""
    meal = get_container(request).meal_service.toggle_favorite(user.id, meal_id)
    if meal is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return serialize_meal(meal)
