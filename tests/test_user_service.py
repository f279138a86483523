"""Tests for user service."""

import pytest

from macro_tracker.adapters.memory_repositories import InMemoryUserRepository
from macro_tracker.services.users import UsernameTakenError, UserService


def test_register_hashes_password() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)

    user = service.register("alice", "secret")

    assert user.username == "alice"
    assert user.password_hash != "secret"
    assert repository.get_by_username("alice") == user


def test_register_rejects_taken_username() -> None:
    service = UserService(InMemoryUserRepository())
    service.register("alice", "secret")

    with pytest.raises(UsernameTakenError):
        service.register("alice", "other")


def test_authenticate_checks_password() -> None:
    service = UserService(InMemoryUserRepository())
    user = service.register("bob", "hunter2")

    assert service.authenticate("bob", "hunter2") == user
    assert service.authenticate("bob", "wrong") is None
    assert service.authenticate("nobody", "hunter2") is None
