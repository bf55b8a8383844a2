"""Supabase repository for workout plans."""

from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.workouts import (
    Exercise,
    WorkoutDay,
    WorkoutPlan,
    WorkoutPlanDraft,
)
from fitness_tracker.services.workouts import WorkoutPlanRepository

_COLUMNS = "id, user_id, name, description, days, created_at"


@dataclass
class SupabaseWorkoutPlanRepository(WorkoutPlanRepository):
    """Supabase implementation for workout plans."""

    client: Client

    def create_plan(self, user_id: UUID, draft: WorkoutPlanDraft) -> WorkoutPlan:
        """Insert a plan row and return it."""
        response = (
            self.client.table("workout_plans")
            .insert(
                {
                    "user_id": str(user_id),
                    "created_at": datetime.now(tz=UTC).isoformat(),
                    **_serialize_draft(draft),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create workout plan")
        return _parse_plan(response.data[0])

    def list_plans(self, user_id: UUID) -> list[WorkoutPlan]:
        """Return the user's plans, oldest first."""
        response = (
            self.client.table("workout_plans")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_plan(row) for row in response.data or []]

    def get_plan(self, user_id: UUID, plan_id: UUID) -> WorkoutPlan | None:
        """Return a plan when it belongs to the user."""
        response = (
            self.client.table("workout_plans")
            .select(_COLUMNS)
            .eq("id", str(plan_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_plan(response.data[0])

    def update_plan(
        self, user_id: UUID, plan_id: UUID, draft: WorkoutPlanDraft
    ) -> WorkoutPlan | None:
        """Replace plan content when it belongs to the user."""
        response = (
            self.client.table("workout_plans")
            .update(_serialize_draft(draft))
            .eq("id", str(plan_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_plan(response.data[0])

    def delete_plan(self, user_id: UUID, plan_id: UUID) -> bool:
        """Delete a plan when it belongs to the user."""
        response = (
            self.client.table("workout_plans")
            .delete()
            .eq("id", str(plan_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _serialize_draft(draft: WorkoutPlanDraft) -> dict[str, object]:
    return {
        "name": draft.name,
        "description": draft.description,
        "days": [asdict(day) for day in draft.days],
    }


def _parse_plan(row: dict[str, object]) -> WorkoutPlan:
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else datetime.min.replace(tzinfo=UTC)
    )
    return WorkoutPlan(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name") or ""),
        description=row.get("description"),
        days=[_parse_day(day) for day in row.get("days") or []],
        created_at=created_at,
    )


def _parse_day(raw: dict[str, object]) -> WorkoutDay:
    return WorkoutDay(
        name=str(raw.get("name") or ""),
        exercises=[_parse_exercise(item) for item in raw.get("exercises") or []],
    )


def _parse_exercise(raw: dict[str, object]) -> Exercise:
    return Exercise(
        id=str(raw.get("id") or ""),
        name=str(raw.get("name") or ""),
        muscle=str(raw.get("muscle") or ""),
        gif_url=str(raw.get("gif_url") or ""),
        description1=str(raw.get("description1") or ""),
        description2=str(raw.get("description2") or ""),
        sets=raw.get("sets"),
        reps=raw.get("reps"),
    )
