"""Daily log service.

A daily log caches the sum of its entries' macros. Every mutation goes
through ``compute_totals`` so the cached totals always equal the entries.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.daily_logs import DailyLog, MealEntry
from macro_tracker.domain.nutrition import ZERO_MACROS, MacroProfile
from macro_tracker.services.meals import MealService

_logger = logging.getLogger(__name__)


class DailyLogRepository(Protocol):
    """Persistence interface for daily logs."""

    def get_log(self, log_id: UUID) -> DailyLog | None:
        """Return a log by id, if present."""

    def get_log_by_date(self, user_id: UUID, day: date) -> DailyLog | None:
        """Return the user's log for a date, if present."""

    def list_logs(self, user_id: UUID, start: date, end: date) -> list[DailyLog]:
        """Return the user's logs between two dates, inclusive."""

    def create_log(
        self,
        user_id: UUID,
        day: date,
        entries: list[MealEntry],
        totals: MacroProfile,
    ) -> DailyLog:
        """Create a log and return it."""

    def update_log(
        self, log_id: UUID, entries: list[MealEntry], totals: MacroProfile
    ) -> DailyLog | None:
        """Replace a log's entries and totals."""


@dataclass
class DailyLogService:
    """Service that keeps daily logs and their totals consistent."""

    repository: DailyLogRepository
    meal_service: MealService

    def get_log(self, user_id: UUID, day: date) -> DailyLog | None:
        """Return the user's log for a date."""
        return self.repository.get_log_by_date(user_id, day)

    def list_logs(self, user_id: UUID, start: date, end: date) -> list[DailyLog]:
        """Return logs in a date range, oldest first."""
        if end < start:
            return []
        logs = self.repository.list_logs(user_id, start, end)
        return sorted(logs, key=lambda log: log.date)

    def upsert_log(
        self, user_id: UUID, day: date, entries: list[MealEntry]
    ) -> tuple[DailyLog, bool]:
        """Create the log for a date, or replace its entries.

        Returns the log and whether it was created.
        """
        totals = compute_totals(entries)
        existing = self.repository.get_log_by_date(user_id, day)
        if existing is not None:
            updated = self.repository.update_log(existing.id, list(entries), totals)
            if updated is not None:
                return updated, False
        created = self.repository.create_log(user_id, day, list(entries), totals)
        return created, True

    def add_entry(
        self, user_id: UUID, log_id: UUID, entry: MealEntry
    ) -> DailyLog | None:
        """Append an entry to a log and recompute totals."""
        log = self._owned_log(user_id, log_id)
        if log is None:
            return None
        entries = [*log.meal_entries, entry]
        return self.repository.update_log(log_id, entries, compute_totals(entries))

    def remove_entry(
        self, user_id: UUID, log_id: UUID, index: int
    ) -> DailyLog | None:
        """Remove the entry at a position and recompute totals."""
        log = self._owned_log(user_id, log_id)
        if log is None or index < 0 or index >= len(log.meal_entries):
            return None
        entries = [*log.meal_entries[:index], *log.meal_entries[index + 1 :]]
        return self.repository.update_log(log_id, entries, compute_totals(entries))

    def log_meal(  # noqa: PLR0913
        self,
        user_id: UUID,
        meal_id: UUID,
        day: date,
        time: str,
        servings: float = 1.0,
    ) -> DailyLog | None:
        """Add a saved meal to the log for a date, creating the log if needed."""
        meal = self.meal_service.get_meal(user_id, meal_id)
        if meal is None:
            return None
        portion = meal.macros.scaled(servings)
        entry = MealEntry(
            meal_id=meal.id,
            time=time,
            servings=servings,
            protein=portion.protein,
            carbs=portion.carbs,
            fat=portion.fat,
            calories=portion.calories,
        )
        log = self.repository.get_log_by_date(user_id, day)
        if log is None:
            created, _ = self.upsert_log(user_id, day, [entry])
            _logger.info("Created daily log %s for %s", created.id, day)
            return created
        return self.add_entry(user_id, log.id, entry)

    def _owned_log(self, user_id: UUID, log_id: UUID) -> DailyLog | None:
        log = self.repository.get_log(log_id)
        if log is None or log.user_id != user_id:
            return None
        return log


def compute_totals(entries: list[MealEntry]) -> MacroProfile:
    """Sum the macros of all entries."""
    total = ZERO_MACROS
    for entry in entries:
        total = total + entry.macros
    return total
