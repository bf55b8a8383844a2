"""Workout plan management."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.errors import WorkoutPlanNotFound
from fitness_tracker.domain.workouts import WorkoutPlan, WorkoutPlanDraft

_logger = logging.getLogger(__name__)


class WorkoutPlanRepository(Protocol):
    """Persistence interface for workout plans."""

    def create_plan(self, user_id: UUID, draft: WorkoutPlanDraft) -> WorkoutPlan:
        """Create a plan and return it."""

    def list_plans(self, user_id: UUID) -> list[WorkoutPlan]:
        """Return every plan owned by the user."""

    def get_plan(self, user_id: UUID, plan_id: UUID) -> WorkoutPlan | None:
        """Return the user's plan by id, if present."""

    def update_plan(
        self, user_id: UUID, plan_id: UUID, draft: WorkoutPlanDraft
    ) -> WorkoutPlan | None:
        """Replace a plan's content and return it, or None if missing."""

    def delete_plan(self, user_id: UUID, plan_id: UUID) -> bool:
        """Delete a plan. Return True when a row was removed."""


@dataclass
class WorkoutPlanService:
    """CRUD for workout plans, always scoped to the owner."""

    repository: WorkoutPlanRepository

    def create(self, user_id: UUID, draft: WorkoutPlanDraft) -> WorkoutPlan:
        """Persist a new plan for the user."""
        plan = self.repository.create_plan(user_id, draft)
        _logger.info("Created workout plan %s for %s", plan.id, user_id)
        return plan

    def list_plans(self, user_id: UUID) -> list[WorkoutPlan]:
        """Return the user's plans."""
        return self.repository.list_plans(user_id)

    def get(self, user_id: UUID, plan_id: UUID) -> WorkoutPlan:
        """Return one of the user's plans."""
        plan = self.repository.get_plan(user_id, plan_id)
        if plan is None:
            raise WorkoutPlanNotFound()
        return plan

    def update(
        self, user_id: UUID, plan_id: UUID, draft: WorkoutPlanDraft
    ) -> WorkoutPlan:
        """Replace the content of one of the user's plans."""
        plan = self.repository.update_plan(user_id, plan_id, draft)
        if plan is None:
            raise WorkoutPlanNotFound()
        return plan

    def delete(self, user_id: UUID, plan_id: UUID) -> None:
        """Delete one of the user's plans."""
        if not self.repository.delete_plan(user_id, plan_id):
            raise WorkoutPlanNotFound()
        _logger.info("Deleted workout plan %s for %s", plan_id, user_id)
