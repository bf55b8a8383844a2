"""Request bodies accepted by the HTTP API."""

from datetime import date, datetime
from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator

from fitness_tracker.domain.food_logs import Meal, MealTime
from fitness_tracker.domain.nutrition import ActivityLevel, DietType, Gender
from fitness_tracker.domain.workouts import Exercise, WorkoutDay, WorkoutPlanDraft

Name = Annotated[str, Field(min_length=4, max_length=20)]
Email = Annotated[str, Field(min_length=10, max_length=30)]
Password = Annotated[str, Field(min_length=6, max_length=20)]


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


def _check_email(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(str(exc)) from exc
    return value


class RegisterRequest(_CamelModel):
    """Body for POST /register."""

    name: Name
    email: Email
    password: Password

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, value: str | None) -> str | None:
        return _check_email(value)


class LoginRequest(_CamelModel):
    """Body for POST /login."""

    email: str
    password: str


class ProfileUpdateRequest(_CamelModel):
    """Body for PUT /profile."""

    name: Name
    email: Email | None = None
    current_password: Password | None = Field(default=None, alias="currentPassword")
    new_password: Password | None = Field(default=None, alias="newPassword")

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, value: str | None) -> str | None:
        return _check_email(value)


class PreferencesUpdateRequest(_CamelModel):
    """Body for PUT /api/user-preferences. Every field is optional."""

    weight: float | None = Field(default=None, ge=20, le=300)
    height: float | None = Field(default=None, ge=100, le=250)
    age: int | None = Field(default=None, ge=13, le=100)
    gender: Gender | None = None
    activity_level: ActivityLevel | None = Field(default=None, alias="activityLevel")
    diet_type: DietType | None = Field(default=None, alias="dietType")
    fitness_goals: list[str] | None = Field(default=None, alias="fitnessGoals")

    def to_changes(self) -> dict[str, object]:
        """Return only the fields the client sent, keyed by preference name."""
        renamed = {
            "weight": "weight_kg",
            "height": "height_cm",
            "age": "age_years",
        }
        return {
            renamed.get(key, key): value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class ExerciseSchema(_CamelModel):
    id: str
    name: str
    muscle: str
    gif_url: str
    description1: str
    description2: str
    sets: float | None = None
    reps: float | None = None


class WorkoutDaySchema(_CamelModel):
    name: str
    exercises: list[ExerciseSchema]


class WorkoutPlanRequest(_CamelModel):
    """Body for creating or replacing a workout plan."""

    name: str = Field(min_length=3, max_length=50)
    description: str | None = Field(default=None, max_length=200)
    days: list[WorkoutDaySchema]

    def to_draft(self) -> WorkoutPlanDraft:
        """Convert the request into a domain draft."""
        return WorkoutPlanDraft(
            name=self.name,
            description=self.description,
            days=[
                WorkoutDay(
                    name=day.name,
                    exercises=[
                        Exercise(**exercise.model_dump())
                        for exercise in day.exercises
                    ],
                )
                for day in self.days
            ],
        )


class MealSchema(_CamelModel):
    name: str
    food_name: str = Field(alias="foodName")
    calories: float
    protein: float
    carbs: float
    fats: float
    meal_time: MealTime | None = Field(default=None, alias="mealTime")

    def to_meal(self) -> Meal:
        return Meal(
            name=self.name,
            food_name=self.food_name,
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fats=self.fats,
            meal_time=self.meal_time or MealTime.SNACK,
        )


class FoodLogRequest(_CamelModel):
    """Body for POST /api/food-log."""

    log_date: date | None = Field(default=None, alias="date")
    meal: MealSchema

    @field_validator("log_date", mode="before")
    @classmethod
    def parse_log_date(cls, value: object) -> object:
        # Accept full timestamps and keep only the calendar day.
        if isinstance(value, str) and value:
            try:
                return datetime.fromisoformat(value).date()
            except ValueError:
                return value
        return value
