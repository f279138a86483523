"""Supabase repository for daily logs."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from macro_tracker.domain.daily_logs import DailyLog, MealEntry
from macro_tracker.domain.nutrition import MacroProfile
from macro_tracker.services.daily_logs import DailyLogRepository

_COLUMNS = (
    "id, user_id, date, meal_entries, total_protein, total_carbs, total_fat, "
    "total_calories"
)


@dataclass
class SupabaseDailyLogRepository(DailyLogRepository):
    """Supabase implementation for daily logs; entries live in a JSON column."""

    client: Client

    def get_log(self, log_id: UUID) -> DailyLog | None:
        """Return a log by id."""
        response = (
            self.client.table("daily_logs")
            .select(_COLUMNS)
            .eq("id", str(log_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_log(response.data[0])

    def get_log_by_date(self, user_id: UUID, day: date) -> DailyLog | None:
        """Return the user's log for a date."""
        response = (
            self.client.table("daily_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_log(response.data[0])

    def list_logs(self, user_id: UUID, start: date, end: date) -> list[DailyLog]:
        """Return logs between two dates, inclusive."""
        response = (
            self.client.table("daily_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [_parse_log(row) for row in response.data or []]

    def create_log(
        self,
        user_id: UUID,
        day: date,
        entries: list[MealEntry],
        totals: MacroProfile,
    ) -> DailyLog:
        """Create a log row and return it."""
        response = (
            self.client.table("daily_logs")
            .insert(
                {
                    "user_id": str(user_id),
                    "date": day.isoformat(),
                    **_entries_payload(entries, totals),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create daily log")
        return _parse_log(response.data[0])

    def update_log(
        self, log_id: UUID, entries: list[MealEntry], totals: MacroProfile
    ) -> DailyLog | None:
        """Replace a log's entries and totals."""
        response = (
            self.client.table("daily_logs")
            .update(_entries_payload(entries, totals))
            .eq("id", str(log_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_log(response.data[0])


def _entries_payload(
    entries: list[MealEntry], totals: MacroProfile
) -> dict[str, object]:
    return {
        "meal_entries": [
            {
                "meal_id": str(entry.meal_id),
                "time": entry.time,
                "servings": entry.servings,
                "protein": entry.protein,
                "carbs": entry.carbs,
                "fat": entry.fat,
                "calories": entry.calories,
            }
            for entry in entries
        ],
        "total_protein": totals.protein,
        "total_carbs": totals.carbs,
        "total_fat": totals.fat,
        "total_calories": totals.calories,
    }


def _parse_entry(row: dict[str, object]) -> MealEntry:
    return MealEntry(
        meal_id=UUID(str(row["meal_id"])),
        time=str(row.get("time", "")),
        servings=float(row.get("servings", 1.0)),
        protein=float(row.get("protein", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        fat=float(row.get("fat", 0.0)),
        calories=float(row.get("calories", 0.0)),
    )


def _parse_log(row: dict[str, object]) -> DailyLog:
    return DailyLog(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        date=date.fromisoformat(str(row["date"])),
        meal_entries=[_parse_entry(entry) for entry in row.get("meal_entries") or []],
        total_protein=float(row.get("total_protein", 0.0)),
        total_carbs=float(row.get("total_carbs", 0.0)),
        total_fat=float(row.get("total_fat", 0.0)),
        total_calories=float(row.get("total_calories", 0.0)),
    )
