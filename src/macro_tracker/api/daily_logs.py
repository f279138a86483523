"""Daily log and statistics endpoints."""

from datetime import UTC, date, datetime
from uuid import UUID

from fastapi import (
    APIRouter,
    Body,
    Depends,
    HTTPException,
    Query,
    Request,
    Response,
    status,
)

from macro_tracker.api.auth import get_container, require_user
from macro_tracker.api.schemas import DailyLogRequest, LogMealRequest, MealEntryPayload
from macro_tracker.api.serializers import serialize_log, serialize_period
from macro_tracker.domain.models import UserRecord

router = APIRouter(prefix="/api", tags=["daily-logs"])

_MISSING_MEAL_ID = "Meal entry requires meal_id"


@router.get("/daily-logs")
async def get_daily_logs(
    request: Request,
    day: date | None = Query(default=None, alias="date"),
    start_date: date | None = Query(default=None, alias="startDate"),
    end_date: date | None = Query(default=None, alias="endDate"),
    user: UserRecord = Depends(require_user),
) -> dict[str, object] | list[dict[str, object]] | None:
    """Return the log for a date, or the logs in a date range."""
    service = get_container(request).daily_log_service
    if day is not None:
        log = service.get_log(user.id, day)
        return serialize_log(log) if log else None
    if start_date is not None and end_date is not None:
        logs = service.list_logs(user.id, start_date, end_date)
        return [serialize_log(log) for log in logs]
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="A date or a startDate/endDate range is required",
    )


@router.post("/daily-logs")
async def save_daily_log(
    body: DailyLogRequest,
    request: Request,
    response: Response,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Create the log for a date or replace its entries."""
    if any(entry.meal_id is None for entry in body.meal_entries):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=_MISSING_MEAL_ID
        )
    entries = [entry.to_domain() for entry in body.meal_entries]
    log, created = get_container(request).daily_log_service.upsert_log(
        user.id, body.date, entries
    )
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return serialize_log(log)


@router.post("/daily-logs/log-meal")
async def log_meal(
    body: LogMealRequest,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Add a saved meal to the log for a date."""
    log = get_container(request).daily_log_service.log_meal(
        user.id, body.meal_id, body.date, body.time, body.servings
    )
    if log is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Meal not found"
        )
    return serialize_log(log)


@router.post("/daily-logs/{log_id}/add-meal")
async def add_meal(
    log_id: UUID,
    request: Request,
    entry: MealEntryPayload | None = Body(default=None),
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Append a meal entry to a log."""
    if entry is None or entry.meal_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=_MISSING_MEAL_ID
        )
    log = get_container(request).daily_log_service.add_entry(
        user.id, log_id, entry.to_domain()
    )
    if log is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Daily log not found"
        )
    return serialize_log(log)


@router.post("/daily-logs/{log_id}/remove-meal/{index}")
async def remove_meal(
    log_id: UUID,
    index: int,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Remove the meal entry at a position."""
    log = get_container(request).daily_log_service.remove_entry(user.id, log_id, index)
    if log is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Daily log or meal entry not found",
        )
    return serialize_log(log)


@router.get("/stats/weekly")
async def weekly_stats(
    request: Request,
    end_date: date | None = Query(default=None, alias="endDate"),
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Return daily totals and averages for the last seven days."""
    resolved_end = end_date or datetime.now(tz=UTC).date()
    summary = get_container(request).stats_service.get_period(user.id, resolved_end)
    return serialize_period(summary)
