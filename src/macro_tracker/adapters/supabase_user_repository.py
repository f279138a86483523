"""Supabase-backed user and goal repositories."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from macro_tracker.domain.models import UserGoal, UserRecord
from macro_tracker.services.goals import GoalRepository
from macro_tracker.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""
        response = (
            self.client.table("users")
            .select("id, username, password_hash")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with the given username, if present."""
        response = (
            self.client.table("users")
            .select("id, username, password_hash")
            .eq("username", username)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, username: str, password_hash: str) -> UserRecord:
        """Create a new user row and return it."""
        response = (
            self.client.table("users")
            .insert({"username": username, "password_hash": password_hash})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])


@dataclass
class SupabaseGoalRepository(GoalRepository):
    """Supabase implementation for user goals."""

    client: Client

    def get_goals(self, user_id: UUID) -> UserGoal | None:
        """Return the user's goals, if set."""
        response = (
            self.client.table("user_goals")
            .select("id, user_id, protein_goal, carbs_goal, fat_goal")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_goal(response.data[0])
        return None

    def create_goals(
        self, user_id: UUID, protein: float, carbs: float, fat: float
    ) -> UserGoal:
        """Create a goal row and return it."""
        response = (
            self.client.table("user_goals")
            .insert(
                {
                    "user_id": str(user_id),
                    "protein_goal": protein,
                    "carbs_goal": carbs,
                    "fat_goal": fat,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user goals")
        return _parse_goal(response.data[0])

    def update_goals(
        self, goal_id: UUID, protein: float, carbs: float, fat: float
    ) -> UserGoal | None:
        """Update a goal row and return it."""
        response = (
            self.client.table("user_goals")
            .update({"protein_goal": protein, "carbs_goal": carbs, "fat_goal": fat})
            .eq("id", str(goal_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_goal(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        username=str(row["username"]),
        password_hash=str(row.get("password_hash", "")),
    )


def _parse_goal(row: dict[str, object]) -> UserGoal:
    return UserGoal(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        protein_goal=float(row.get("protein_goal", 0.0)),
        carbs_goal=float(row.get("carbs_goal", 0.0)),
        fat_goal=float(row.get("fat_goal", 0.0)),
    )
