"""Nutrition domain models."""

from dataclasses import dataclass, field
from enum import Enum


class _LenientEnum(str, Enum):
    """String enum that also accepts underscore or hyphen spellings."""

    @classmethod
    def _missing_(cls, value: object) -> "_LenientEnum | None":
        if not isinstance(value, str):
            return None
        normalized = _normalize(value)
        for member in cls:
            if _normalize(member.value) == normalized:
                return member
        return None


def _normalize(value: str) -> str:
    return value.strip().lower().replace("_", " ").replace("-", " ")


class Gender(_LenientEnum):
    """Gender used for the BMR constant."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ActivityLevel(_LenientEnum):
    """Self-reported daily activity level."""

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly active"
    MODERATELY_ACTIVE = "moderately active"
    VERY_ACTIVE = "very active"
    EXTREMELY_ACTIVE = "extremely active"


class DietType(_LenientEnum):
    """Dietary pattern."""

    VEGETARIAN = "vegetarian"
    NON_VEGETARIAN = "non-vegetarian"
    VEGAN = "vegan"


class FitnessGoal(str, Enum):
    """Goals recognized by the calculator. Other goal strings mean maintenance."""

    WEIGHT_LOSS = "weight loss"
    MUSCLE_GAIN = "muscle gain"


DEFAULT_FITNESS_GOALS = ("weight maintenance",)


@dataclass(frozen=True)
class NutritionProfile:
    """Body metrics and preferences used to compute daily targets."""

    weight_kg: float
    height_cm: float
    age_years: int
    gender: Gender
    activity_level: ActivityLevel
    diet_type: DietType
    fitness_goals: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class NutritionTargets:
    """Daily calorie and macronutrient targets."""

    daily_calories: int
    daily_protein_g: int
    daily_carbs_g: int
    daily_fats_g: int


EMPTY_TARGETS = NutritionTargets(
    daily_calories=0, daily_protein_g=0, daily_carbs_g=0, daily_fats_g=0
)
