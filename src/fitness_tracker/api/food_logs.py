"""Food log endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request, status

from fitness_tracker.api.deps import get_current_user
from fitness_tracker.api.schemas import FoodLogRequest  # noqa: TC001
from fitness_tracker.domain.accounts import TokenClaims  # noqa: TC001
from fitness_tracker.domain.food_logs import FoodLog

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(prefix="/api", tags=["food-logs"])


@router.post("/food-log", status_code=status.HTTP_201_CREATED)
def log_food(
    body: FoodLogRequest,
    request: Request,
    user: TokenClaims = Depends(get_current_user),
) -> dict[str, object]:
    """Append a meal to the caller's log for the given day."""
    container: AppContainer = request.app.state.container
    food_log = container.food_log_service.log_meal(
        user.user_id, body.meal.to_meal(), body.log_date
    )
    return {"message": "Food logged successfully", "foodLog": serialize_log(food_log)}


@router.get("/food-logs")
def list_food_logs(
    request: Request,
    start_date: date | None = Query(default=None, alias="startDate"),
    end_date: date | None = Query(default=None, alias="endDate"),
    user: TokenClaims = Depends(get_current_user),
) -> dict[str, object]:
    """Return the caller's logs in a date range, today by default."""
    container: AppContainer = request.app.state.container
    logs = container.food_log_service.list_logs(user.user_id, start_date, end_date)
    return {"foodLogs": [serialize_log(log) for log in logs]}


def serialize_log(log: FoodLog) -> dict[str, object]:
    """JSON view of a daily food log."""
    return {
        "id": str(log.id) if log.id else None,
        "userId": str(log.user_id),
        "date": log.log_date.isoformat(),
        "meals": [
            {
                "name": meal.name,
                "foodName": meal.food_name,
                "calories": meal.calories,
                "protein": meal.protein,
                "carbs": meal.carbs,
                "fats": meal.fats,
                "mealTime": meal.meal_time.value,
            }
            for meal in log.meals
        ],
        "dailyTotals": {
            "calories": log.daily_totals.calories,
            "protein": log.daily_totals.protein,
            "carbs": log.daily_totals.carbs,
            "fats": log.daily_totals.fats,
        },
    }
