"""Domain models for workout plans."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class Exercise:
    """An exercise entry inside a workout day."""

    id: str
    name: str
    muscle: str
    gif_url: str
    description1: str
    description2: str
    sets: float | None = None
    reps: float | None = None


@dataclass(frozen=True)
class WorkoutDay:
    """A named training day with its exercises."""

    name: str
    exercises: list[Exercise] = field(default_factory=list)


@dataclass(frozen=True)
class WorkoutPlanDraft:
    """User-supplied plan content, before it is persisted."""

    name: str
    description: str | None
    days: list[WorkoutDay]


@dataclass(frozen=True)
class WorkoutPlan:
    """A persisted workout plan owned by a user."""

    id: UUID
    user_id: UUID
    name: str
    description: str | None
    days: list[WorkoutDay]
    created_at: datetime
