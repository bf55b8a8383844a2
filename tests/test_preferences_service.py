"""Tests for preferences service."""

from uuid import uuid4

import pytest

from fitness_tracker.api.errors import status_for
from fitness_tracker.domain.accounts import UserPreferences
from fitness_tracker.domain.errors import AccountNotFound, InvalidPreferences
from fitness_tracker.domain.nutrition import (
    ActivityLevel,
    DietType,
    Gender,
    NutritionTargets,
)
from fitness_tracker.services.accounts import AccountService
from fitness_tracker.services.preferences import PreferencesService, to_profile
from tests.conftest import InMemoryAccountRepository


@pytest.fixture
def service(account_repository: InMemoryAccountRepository) -> PreferencesService:
    return PreferencesService(account_repository)


def test_new_account_has_default_preferences(
    account_service: AccountService, service: PreferencesService
) -> None:
    account = account_service.register("Alice", "alice@example.com", "secret123")

    preferences = service.get(account.account.id).preferences

    assert preferences.gender == Gender.OTHER
    assert preferences.activity_level == ActivityLevel.MODERATELY_ACTIVE
    assert preferences.diet_type == DietType.NON_VEGETARIAN
    assert preferences.fitness_goals == ("weight maintenance",)


def test_partial_update_does_not_compute_targets(
    account_service: AccountService, service: PreferencesService
) -> None:
    account = account_service.register("Alice", "alice@example.com", "secret123")

    updated = service.update(account.account.id, {"weight_kg": 70})

    assert updated.preferences.weight_kg == 70
    assert updated.targets.daily_calories == 0


def test_complete_update_computes_targets(
    account_service: AccountService, service: PreferencesService
) -> None:
    account = account_service.register("Alice", "alice@example.com", "secret123")

    updated = service.update(
        account.account.id,
        {
            "weight_kg": 70,
            "height_cm": 175,
            "age_years": 30,
            "gender": Gender.MALE,
            "activity_level": ActivityLevel.SEDENTARY,
            "fitness_goals": [],
        },
    )

    assert updated.targets == NutritionTargets(
        daily_calories=1979,
        daily_protein_g=112,
        daily_carbs_g=259,
        daily_fats_g=55,
    )
    assert service.get(account.account.id).targets.daily_calories == 1979


def test_later_update_recomputes(
    account_service: AccountService, service: PreferencesService
) -> None:
    user_id = account_service.register(
        "Alice", "alice@example.com", "secret123"
    ).account.id
    service.update(
        user_id,
        {
            "weight_kg": 70,
            "height_cm": 175,
            "age_years": 30,
            "gender": Gender.MALE,
            "activity_level": ActivityLevel.SEDENTARY,
        },
    )

    updated = service.update(user_id, {"fitness_goals": ["weight loss"]})

    assert updated.targets.daily_calories == round(1978.5 * 0.85)
    assert updated.targets.daily_protein_g == 140


def test_unknown_account(service: PreferencesService) -> None:
    with pytest.raises(AccountNotFound):
        service.get(uuid4())


def test_to_profile_defaults_empty_goals_to_maintenance() -> None:
    profile = to_profile(UserPreferences(weight_kg=70, fitness_goals=()))

    assert profile.fitness_goals == frozenset({"weight maintenance"})


def test_unknown_preference_field_is_rejected(
    account_service: AccountService, service: PreferencesService
) -> None:
    account = account_service.register("Alice", "alice@example.com", "secret123")

    with pytest.raises(InvalidPreferences, match="shoe_size"):
        service.update(account.account.id, {"weight_kg": 70, "shoe_size": 42})

    assert service.get(account.account.id).preferences.weight_kg == 0


def test_invalid_preferences_map_to_bad_request() -> None:
    assert status_for(InvalidPreferences()) == 400
