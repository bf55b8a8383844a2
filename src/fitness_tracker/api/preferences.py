"""User preference endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from fitness_tracker.api.deps import get_current_user
from fitness_tracker.api.schemas import PreferencesUpdateRequest  # noqa: TC001
from fitness_tracker.domain.accounts import Account, TokenClaims  # noqa: TC001

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(prefix="/api/user-preferences", tags=["preferences"])


@router.get("")
def get_preferences(
    request: Request,
    user: TokenClaims = Depends(get_current_user),
) -> dict[str, object]:
    """Return the caller's preferences and nutrition targets."""
    container: AppContainer = request.app.state.container
    account = container.preferences_service.get(user.user_id)
    return {"user": serialize_preferences(account)}


@router.put("")
def update_preferences(
    body: PreferencesUpdateRequest,
    request: Request,
    user: TokenClaims = Depends(get_current_user),
) -> dict[str, object]:
    """Update preferences and recompute nutrition targets."""
    container: AppContainer = request.app.state.container
    account = container.preferences_service.update(user.user_id, body.to_changes())
    return {
        "message": "User preferences updated successfully",
        "user": serialize_preferences(account),
    }


def serialize_preferences(account: Account) -> dict[str, object]:
    """Account view including body metrics and daily needs."""
    preferences = account.preferences
    targets = account.targets
    return {
        "name": account.name,
        "email": account.email,
        "weight": preferences.weight_kg,
        "height": preferences.height_cm,
        "age": preferences.age_years,
        "gender": preferences.gender.value,
        "activityLevel": preferences.activity_level.value,
        "dietType": preferences.diet_type.value,
        "fitnessGoals": list(preferences.fitness_goals),
        "dailyCalorieNeeds": targets.daily_calories,
        "dailyProteinNeeds": targets.daily_protein_g,
        "dailyCarbsNeeds": targets.daily_carbs_g,
        "dailyFatsNeeds": targets.daily_fats_g,
    }
