"""Supabase-backed account repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.accounts import Account, UserPreferences
from fitness_tracker.domain.nutrition import (
    DEFAULT_FITNESS_GOALS,
    ActivityLevel,
    DietType,
    Gender,
    NutritionTargets,
)
from fitness_tracker.services.accounts import AccountRepository

_COLUMNS = (
    "id, name, email, password_hash, weight, height, age, gender, "
    "activity_level, diet_type, fitness_goals, daily_calorie_needs, "
    "daily_protein_needs, daily_carbs_needs, daily_fats_needs"
)


@dataclass
class SupabaseAccountRepository(AccountRepository):
    """Supabase implementation for account persistence."""

    client: Client

    def get_by_id(self, user_id: UUID) -> Account | None:
        """Return the account with the id, if present."""
        response = (
            self.client.table("accounts")
            .select(_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_account(response.data[0])
        return None

    def get_by_email(self, email: str) -> Account | None:
        """Return the account registered with the email, if present."""
        response = (
            self.client.table("accounts")
            .select(_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_account(response.data[0])
        return None

    def create_account(self, name: str, email: str, password_hash: str) -> Account:
        """Insert a new account row with default preferences."""
        payload = {"name": name, "email": email, "password_hash": password_hash}
        payload.update(_serialize_preferences(UserPreferences()))
        response = self.client.table("accounts").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create account in Supabase")
        return _parse_account(response.data[0])

    def save_account(self, account: Account) -> Account:
        """Write every mutable account column."""
        payload = {
            "name": account.name,
            "email": account.email,
            "password_hash": account.password_hash,
            **_serialize_preferences(account.preferences),
            "daily_calorie_needs": account.targets.daily_calories,
            "daily_protein_needs": account.targets.daily_protein_g,
            "daily_carbs_needs": account.targets.daily_carbs_g,
            "daily_fats_needs": account.targets.daily_fats_g,
        }
        response = (
            self.client.table("accounts")
            .update(payload)
            .eq("id", str(account.id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update account in Supabase")
        return _parse_account(response.data[0])


def _serialize_preferences(preferences: UserPreferences) -> dict[str, object]:
    return {
        "weight": preferences.weight_kg,
        "height": preferences.height_cm,
        "age": preferences.age_years,
        "gender": preferences.gender.value,
        "activity_level": preferences.activity_level.value,
        "diet_type": preferences.diet_type.value,
        "fitness_goals": list(preferences.fitness_goals),
    }


def _parse_account(row: dict[str, object]) -> Account:
    goals = row.get("fitness_goals")
    preferences = UserPreferences(
        weight_kg=float(row.get("weight") or 0),
        height_cm=float(row.get("height") or 0),
        age_years=int(row.get("age") or 0),
        gender=Gender(row.get("gender") or Gender.OTHER),
        activity_level=ActivityLevel(
            row.get("activity_level") or ActivityLevel.MODERATELY_ACTIVE
        ),
        diet_type=DietType(row.get("diet_type") or DietType.NON_VEGETARIAN),
        fitness_goals=(
            tuple(str(goal) for goal in goals)
            if isinstance(goals, list)
            else DEFAULT_FITNESS_GOALS
        ),
    )
    targets = NutritionTargets(
        daily_calories=int(row.get("daily_calorie_needs") or 0),
        daily_protein_g=int(row.get("daily_protein_needs") or 0),
        daily_carbs_g=int(row.get("daily_carbs_needs") or 0),
        daily_fats_g=int(row.get("daily_fats_needs") or 0),
    )
    return Account(
        id=UUID(str(row["id"])),
        name=str(row.get("name") or ""),
        email=str(row.get("email") or ""),
        password_hash=str(row.get("password_hash") or ""),
        preferences=preferences,
        targets=targets,
    )
