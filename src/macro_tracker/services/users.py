"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.models import UserRecord
from macro_tracker.services.passwords import hash_password, verify_password

_logger = logging.getLogger(__name__)


class UsernameTakenError(Exception):
    """Raised when registering a username that already exists."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Username already exists: {username}")
        self.username = username


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with the given username, if present."""

    def create_user(self, username: str, password_hash: str) -> UserRecord:
        """Create and return a new user record."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def register(self, username: str, password: str) -> UserRecord:
        """Create a user with a hashed password."""
        if self.repository.get_by_username(username) is not None:
            raise UsernameTakenError(username)
        user = self.repository.create_user(username, hash_password(password))
        _logger.info("Registered user %s", user.id)
        return user

    def authenticate(self, username: str, password: str) -> UserRecord | None:
        """Return the user when the credentials match."""
        user = self.repository.get_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            return None
        return user

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return a user by id."""
        return self.repository.get_user(user_id)

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return a user by username."""
        return self.repository.get_by_username(username)
