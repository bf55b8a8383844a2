"""Daily food logging."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.food_logs import FoodLog, Meal

_logger = logging.getLogger(__name__)


class FoodLogRepository(Protocol):
    """Persistence interface for food logs."""

    def get_log(self, user_id: UUID, log_date: date) -> FoodLog | None:
        """Return the user's log for the day, if present."""

    def save_log(self, log: FoodLog) -> FoodLog:
        """Insert or update a log and return the stored version."""

    def list_logs(self, user_id: UUID, start: date, end: date) -> list[FoodLog]:
        """Return logs with start <= date <= end, oldest first."""


@dataclass
class FoodLogService:
    """Appends meals to daily logs and queries date ranges."""

    repository: FoodLogRepository

    def log_meal(
        self, user_id: UUID, meal: Meal, log_date: date | None = None
    ) -> FoodLog:
        """Add a meal to the user's log for the day, creating it if needed."""
        day = log_date or today()
        log = self.repository.get_log(user_id, day) or FoodLog(
            id=None, user_id=user_id, log_date=day
        )
        updated = replace(
            log,
            meals=[*log.meals, meal],
            daily_totals=log.daily_totals.add(meal),
        )
        saved = self.repository.save_log(updated)
        _logger.info(
            "Logged %s for %s on %s", meal.meal_time.value, user_id, saved.log_date
        )
        return saved

    def list_logs(
        self, user_id: UUID, start: date | None = None, end: date | None = None
    ) -> list[FoodLog]:
        """Return logs in an inclusive date range.

        With no dates the range is today. A start date alone selects that
        single day. An end date alone runs from today to that date.
        """
        if start is None and end is None:
            start = end = today()
        elif start is None:
            start = today()
        elif end is None:
            end = start
        return self.repository.list_logs(user_id, start, end)


def today() -> date:
    """Return the current UTC date."""
    return datetime.now(tz=UTC).date()
