"""Supabase repository for daily food logs."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.food_logs import FoodLog, MacroTotals, Meal, MealTime
from fitness_tracker.services.food_logs import FoodLogRepository

_COLUMNS = "id, user_id, log_date, meals, daily_totals"


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for food logs."""

    client: Client

    def get_log(self, user_id: UUID, log_date: date) -> FoodLog | None:
        """Return the log for a user and day."""
        response = (
            self.client.table("food_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("log_date", log_date.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_log(response.data[0])

    def save_log(self, log: FoodLog) -> FoodLog:
        """Insert a new log or update meals and totals of an existing one."""
        payload = {
            "meals": [_serialize_meal(meal) for meal in log.meals],
            "daily_totals": _serialize_totals(log.daily_totals),
        }
        table = self.client.table("food_logs")
        if log.id is None:
            payload.update(
                {"user_id": str(log.user_id), "log_date": log.log_date.isoformat()}
            )
            response = table.insert(payload).execute()
        else:
            response = table.update(payload).eq("id", str(log.id)).execute()
        if not response.data:
            raise RuntimeError("Failed to save food log")
        return _parse_log(response.data[0])

    def list_logs(self, user_id: UUID, start: date, end: date) -> list[FoodLog]:
        """Return logs in the inclusive date range."""
        response = (
            self.client.table("food_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("log_date", start.isoformat())
            .lte("log_date", end.isoformat())
            .order("log_date", desc=False)
            .execute()
        )
        return [_parse_log(row) for row in response.data or []]


def _serialize_meal(meal: Meal) -> dict[str, object]:
    return {
        "name": meal.name,
        "food_name": meal.food_name,
        "calories": meal.calories,
        "protein": meal.protein,
        "carbs": meal.carbs,
        "fats": meal.fats,
        "meal_time": meal.meal_time.value,
    }


def _serialize_totals(totals: MacroTotals) -> dict[str, float]:
    return {
        "calories": totals.calories,
        "protein": totals.protein,
        "carbs": totals.carbs,
        "fats": totals.fats,
    }


def _parse_log(row: dict[str, object]) -> FoodLog:
    totals = row.get("daily_totals") or {}
    return FoodLog(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        log_date=date.fromisoformat(str(row["log_date"])[:10]),
        meals=[_parse_meal(meal) for meal in row.get("meals") or []],
        daily_totals=MacroTotals(
            calories=float(totals.get("calories", 0.0)),
            protein=float(totals.get("protein", 0.0)),
            carbs=float(totals.get("carbs", 0.0)),
            fats=float(totals.get("fats", 0.0)),
        ),
    )


def _parse_meal(raw: dict[str, object]) -> Meal:
    return Meal(
        name=str(raw.get("name") or ""),
        food_name=str(raw.get("food_name") or ""),
        calories=float(raw.get("calories", 0.0)),
        protein=float(raw.get("protein", 0.0)),
        carbs=float(raw.get("carbs", 0.0)),
        fats=float(raw.get("fats", 0.0)),
        meal_time=MealTime(raw.get("meal_time") or MealTime.SNACK),
    )
