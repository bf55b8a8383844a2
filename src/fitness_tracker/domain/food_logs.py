"""Domain models for daily food logs."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from uuid import UUID


class MealTime(str, Enum):
    """Time-of-day slot for a logged meal."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class Meal:
    """A single logged meal with its macros."""

    name: str
    food_name: str
    calories: float
    protein: float
    carbs: float
    fats: float
    meal_time: MealTime = MealTime.SNACK


@dataclass(frozen=True)
class MacroTotals:
    """Running macro totals for a day."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0

    def add(self, meal: Meal) -> "MacroTotals":
        """Return new totals with the meal's macros added."""
        return MacroTotals(
            calories=self.calories + (meal.calories or 0),
            protein=self.protein + (meal.protein or 0),
            carbs=self.carbs + (meal.carbs or 0),
            fats=self.fats + (meal.fats or 0),
        )


@dataclass(frozen=True)
class FoodLog:
    """All meals a user logged on one day."""

    id: UUID | None
    user_id: UUID
    log_date: date
    meals: list[Meal] = field(default_factory=list)
    daily_totals: MacroTotals = field(default_factory=MacroTotals)
