"""Domain models for accounts and their preferences."""

from dataclasses import dataclass, field
from uuid import UUID

from fitness_tracker.domain.nutrition import (
    DEFAULT_FITNESS_GOALS,
    EMPTY_TARGETS,
    ActivityLevel,
    DietType,
    Gender,
    NutritionTargets,
)


@dataclass(frozen=True)
class UserPreferences:
    """Body metrics and diet preferences stored on an account."""

    weight_kg: float = 0
    height_cm: float = 0
    age_years: int = 0
    gender: Gender = Gender.OTHER
    activity_level: ActivityLevel = ActivityLevel.MODERATELY_ACTIVE
    diet_type: DietType = DietType.NON_VEGETARIAN
    fitness_goals: tuple[str, ...] = DEFAULT_FITNESS_GOALS

    @property
    def is_complete(self) -> bool:
        """True when every metric needed for a nutrition profile is set."""
        return bool(self.weight_kg and self.height_cm and self.age_years)


@dataclass(frozen=True)
class Account:
    """Represents a registered account."""

    id: UUID
    name: str
    email: str
    password_hash: str
    preferences: UserPreferences = field(default_factory=UserPreferences)
    targets: NutritionTargets = EMPTY_TARGETS


@dataclass(frozen=True)
class TokenClaims:
    """Verified access token contents."""

    user_id: UUID
    name: str
    email: str
