"""User preferences and stored nutrition targets."""

import logging
from dataclasses import dataclass, replace
from uuid import UUID

from fitness_tracker.domain.accounts import Account, UserPreferences
from fitness_tracker.domain.errors import AccountNotFound, InvalidPreferences
from fitness_tracker.domain.nutrition import DEFAULT_FITNESS_GOALS, NutritionProfile
from fitness_tracker.services import nutrition
from fitness_tracker.services.accounts import AccountRepository

_logger = logging.getLogger(__name__)

_PREFERENCE_FIELDS = frozenset(
    {
        "weight_kg",
        "height_cm",
        "age_years",
        "gender",
        "activity_level",
        "diet_type",
        "fitness_goals",
    }
)


@dataclass
class PreferencesService:
    """Reads and updates preferences, recomputing nutrition targets."""

    repository: AccountRepository

    def get(self, user_id: UUID) -> Account:
        """Return the account holding the preferences."""
        account = self.repository.get_by_id(user_id)
        if account is None:
            raise AccountNotFound()
        return account

    def update(self, user_id: UUID, changes: dict[str, object]) -> Account:
        """Merge preference changes and refresh targets when possible."""
        account = self.get(user_id)
        unknown = set(changes) - _PREFERENCE_FIELDS
        if unknown:
            raise InvalidPreferences(f"Unknown preference fields: {sorted(unknown)}")
        updates = dict(changes)
        if "fitness_goals" in updates:
            updates["fitness_goals"] = tuple(updates["fitness_goals"] or ())
        preferences = replace(account.preferences, **updates)
        account = replace(account, preferences=preferences)

        if preferences.is_complete:
            profile = nutrition.validate_profile(to_profile(preferences))
            account = replace(account, targets=nutrition.compute(profile))
            _logger.info(
                "Recomputed nutrition targets for account %s: %s kcal",
                account.id,
                account.targets.daily_calories,
            )
        return self.repository.save_account(account)


def to_profile(preferences: UserPreferences) -> NutritionProfile:
    """Build a calculator profile from stored preferences."""
    return NutritionProfile(
        weight_kg=preferences.weight_kg,
        height_cm=preferences.height_cm,
        age_years=preferences.age_years,
        gender=preferences.gender,
        activity_level=preferences.activity_level,
        diet_type=preferences.diet_type,
        fitness_goals=frozenset(preferences.fitness_goals or DEFAULT_FITNESS_GOALS),
    )
