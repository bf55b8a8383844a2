"""Workout plan endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from fitness_tracker.api.deps import get_current_user
from fitness_tracker.api.schemas import WorkoutPlanRequest  # noqa: TC001
from fitness_tracker.domain.accounts import TokenClaims  # noqa: TC001
from fitness_tracker.domain.workouts import WorkoutDay, WorkoutPlan

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(prefix="/api/workout-plans", tags=["workout-plans"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_plan(
    body: WorkoutPlanRequest,
    request: Request,
    user: TokenClaims = Depends(get_current_user),
) -> dict[str, object]:
    """Create a workout plan for the caller."""
    container: AppContainer = request.app.state.container
    plan = container.workout_plan_service.create(user.user_id, body.to_draft())
    return serialize_plan(plan)


@router.get("")
def list_plans(
    request: Request, user: TokenClaims = Depends(get_current_user)
) -> list[dict[str, object]]:
    """Return all of the caller's workout plans."""
    container: AppContainer = request.app.state.container
    plans = container.workout_plan_service.list_plans(user.user_id)
    return [serialize_plan(plan) for plan in plans]


@router.get("/{plan_id}")
def get_plan(
    plan_id: UUID, request: Request, user: TokenClaims = Depends(get_current_user)
) -> dict[str, object]:
    """Return one workout plan."""
    container: AppContainer = request.app.state.container
    return serialize_plan(container.workout_plan_service.get(user.user_id, plan_id))


@router.put("/{plan_id}")
def update_plan(
    plan_id: UUID,
    body: WorkoutPlanRequest,
    request: Request,
    user: TokenClaims = Depends(get_current_user),
) -> dict[str, object]:
    """Replace the content of a workout plan."""
    container: AppContainer = request.app.state.container
    plan = container.workout_plan_service.update(
        user.user_id, plan_id, body.to_draft()
    )
    return serialize_plan(plan)


@router.delete("/{plan_id}")
def delete_plan(
    plan_id: UUID, request: Request, user: TokenClaims = Depends(get_current_user)
) -> dict[str, str]:
    """Delete a workout plan."""
    container: AppContainer = request.app.state.container
    container.workout_plan_service.delete(user.user_id, plan_id)
    return {"message": "Workout plan deleted successfully"}


def serialize_plan(plan: WorkoutPlan) -> dict[str, object]:
    """JSON view of a workout plan."""
    return {
        "id": str(plan.id),
        "userId": str(plan.user_id),
        "name": plan.name,
        "description": plan.description,
        "days": [_serialize_day(day) for day in plan.days],
        "createdAt": plan.created_at.isoformat(),
    }


def _serialize_day(day: WorkoutDay) -> dict[str, object]:
    return {
        "name": day.name,
        "exercises": [
            {
                "id": exercise.id,
                "name": exercise.name,
                "muscle": exercise.muscle,
                "gif_url": exercise.gif_url,
                "description1": exercise.description1,
                "description2": exercise.description2,
                "sets": exercise.sets,
                "reps": exercise.reps,
            }
            for exercise in day.exercises
        ],
    }
