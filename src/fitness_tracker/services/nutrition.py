"""Daily calorie and macronutrient needs calculator."""

import math
from collections.abc import Mapping
from types import MappingProxyType

from fitness_tracker.domain.errors import InvalidProfile
from fitness_tracker.domain.nutrition import (
    ActivityLevel,
    DietType,
    FitnessGoal,
    Gender,
    NutritionProfile,
    NutritionTargets,
)

ACTIVITY_MULTIPLIERS: Mapping[ActivityLevel, float] = MappingProxyType(
    {
        ActivityLevel.SEDENTARY: 1.2,
        ActivityLevel.LIGHTLY_ACTIVE: 1.375,
        ActivityLevel.MODERATELY_ACTIVE: 1.55,
        ActivityLevel.VERY_ACTIVE: 1.725,
        ActivityLevel.EXTREMELY_ACTIVE: 1.9,
    }
)
DEFAULT_ACTIVITY_MULTIPLIER = 1.2

# Calorie adjustment, checked in order. First match wins.
GOAL_CALORIE_FACTORS: tuple[tuple[FitnessGoal, float], ...] = (
    (FitnessGoal.WEIGHT_LOSS, 0.85),
    (FitnessGoal.MUSCLE_GAIN, 1.1),
)

# Protein grams per kg, checked in order. First match wins.
GOAL_PROTEIN_PER_KG: tuple[tuple[FitnessGoal, float], ...] = (
    (FitnessGoal.MUSCLE_GAIN, 2.2),
    (FitnessGoal.WEIGHT_LOSS, 2.0),
)
MAINTENANCE_PROTEIN_PER_KG = 1.6

FAT_CALORIE_SHARE = 0.25
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9

PLANT_BASED_DIETS = frozenset({DietType.VEGETARIAN, DietType.VEGAN})
PLANT_PROTEIN_FACTOR = 0.9
PLANT_CARBS_FACTOR = 1.1

_MALE_BMR_OFFSET = 5
_OTHER_BMR_OFFSET = -161


def bmr(profile: NutritionProfile) -> float:
    """Base metabolic rate using the Mifflin-St Jeor equation."""
    base = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age_years
    if profile.gender == Gender.MALE:
        return base + _MALE_BMR_OFFSET
    return base + _OTHER_BMR_OFFSET


def activity_multiplier(level: ActivityLevel | str) -> float:
    """Return the TDEE multiplier for an activity level."""
    try:
        resolved = ActivityLevel(level)
    except ValueError:
        return DEFAULT_ACTIVITY_MULTIPLIER
    return ACTIVITY_MULTIPLIERS.get(resolved, DEFAULT_ACTIVITY_MULTIPLIER)


def compute(profile: NutritionProfile) -> NutritionTargets:
    """Compute daily calorie and macro targets for a profile.

    Pure and deterministic. Inputs are assumed validated; degenerate values
    produce well-defined numbers, including negative carbs.
    """
    goals = {
        goal.value if isinstance(goal, FitnessGoal) else goal
        for goal in profile.fitness_goals
    }

    tdee = bmr(profile) * activity_multiplier(profile.activity_level)
    tdee *= _first_match(goals, GOAL_CALORIE_FACTORS, 1.0)

    protein = profile.weight_kg * _first_match(
        goals, GOAL_PROTEIN_PER_KG, MAINTENANCE_PROTEIN_PER_KG
    )
    fats = (tdee * FAT_CALORIE_SHARE) / KCAL_PER_G_FAT
    carbs = (
        tdee - protein * KCAL_PER_G_PROTEIN - fats * KCAL_PER_G_FAT
    ) / KCAL_PER_G_CARBS

    if profile.diet_type in PLANT_BASED_DIETS:
        protein *= PLANT_PROTEIN_FACTOR
        carbs *= PLANT_CARBS_FACTOR

    return NutritionTargets(
        daily_calories=round_half_up(tdee),
        daily_protein_g=round_half_up(protein),
        daily_carbs_g=round_half_up(carbs),
        daily_fats_g=round_half_up(fats),
    )


def validate_profile(profile: NutritionProfile) -> NutritionProfile:
    """Reject profiles with non-positive body metrics."""
    problems = [
        name
        for name, value in (
            ("weight_kg", profile.weight_kg),
            ("height_cm", profile.height_cm),
            ("age_years", profile.age_years),
        )
        if value <= 0
    ]
    if problems:
        raise InvalidProfile(f"Must be positive: {', '.join(problems)}")
    return profile


def _first_match(
    goals: set[str], table: tuple[tuple[FitnessGoal, float], ...], default: float
) -> float:
    for goal, value in table:
        if goal.value in goals:
            return value
    return default


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going toward +infinity."""
    return math.floor(value + 0.5)
