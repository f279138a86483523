"""Statistics over daily logs."""

from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from macro_tracker.domain.daily_logs import DailyLog, DailyTotals
from macro_tracker.services.daily_logs import DailyLogRepository

DEFAULT_PERIOD_DAYS = 7


@dataclass
class PeriodSummary:
    """Aggregated totals for a period; averages cover logged days only."""

    start: date
    end: date
    daily: list[DailyTotals]
    avg_protein: int
    avg_carbs: int
    avg_fat: int
    avg_calories: int


@dataclass
class StatsService:
    """Service for computing per-day totals over a window."""

    repository: DailyLogRepository

    def get_period(
        self, user_id: UUID, end_day: date, days: int = DEFAULT_PERIOD_DAYS
    ) -> PeriodSummary:
        """Return daily totals and averages for the days ending at end_day."""
        days = max(days, 1)
        start = end_day - timedelta(days=days - 1)
        logs = self.repository.list_logs(user_id, start, end_day)
        return _aggregate_period(start, days, logs)


def _aggregate_period(start: date, days: int, logs: list[DailyLog]) -> PeriodSummary:
    by_day = {log.date: log for log in logs}
    daily = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        log = by_day.get(day)
        if log is None:
            daily.append(DailyTotals(day=day, protein=0, carbs=0, fat=0, calories=0))
            continue
        daily.append(
            DailyTotals(
                day=day,
                protein=log.total_protein,
                carbs=log.total_carbs,
                fat=log.total_fat,
                calories=log.total_calories,
            )
        )

    logged_days = max(len(by_day), 1)
    return PeriodSummary(
        start=start,
        end=start + timedelta(days=days - 1),
        daily=daily,
        avg_protein=round(sum(entry.protein for entry in daily) / logged_days),
        avg_carbs=round(sum(entry.carbs for entry in daily) / logged_days),
        avg_fat=round(sum(entry.fat for entry in daily) / logged_days),
        avg_calories=round(sum(entry.calories for entry in daily) / logged_days),
    )
