"""Domain models for users and their goals."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    username: str
    password_hash: str


@dataclass(frozen=True)
class UserGoal:
    """Daily macro targets for a user, in grams."""

    id: UUID
    user_id: UUID
    protein_goal: float
    carbs_goal: float
    fat_goal: float

    @property
    def calories_goal(self) -> float:
        return self.protein_goal * 4 + self.carbs_goal * 4 + self.fat_goal * 9
