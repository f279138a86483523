"""Session authentication endpoints and dependencies."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse

from macro_tracker.api.schemas import CredentialsRequest
from macro_tracker.api.serializers import serialize_user
from macro_tracker.domain.models import UserRecord  # noqa: TC001
from macro_tracker.services.users import UsernameTakenError

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

SESSION_USER_KEY = "user_id"

router = APIRouter(prefix="/api", tags=["auth"])

_logger = logging.getLogger(__name__)


def get_container(request: Request) -> AppContainer:
    """Return the app's dependency container."""
    return request.app.state.container


def require_user(request: Request) -> UserRecord:
    """Return the session user or reject the request."""
    container = get_container(request)
    raw_user_id = request.session.get(SESSION_USER_KEY)
    user = None
    if raw_user_id:
        try:
            user = container.user_service.get_user(UUID(raw_user_id))
        except ValueError:
            user = None
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated"
        )
    return user


@router.post("/users", status_code=status.HTTP_201_CREATED)
async def create_user(body: CredentialsRequest, request: Request) -> dict[str, object]:
    """Create a user without starting a session."""
    container = get_container(request)
    try:
        user = container.user_service.register(body.username, body.password)
    except UsernameTakenError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="Username already exists"
        ) from exc
    return serialize_user(user)


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(body: CredentialsRequest, request: Request) -> dict[str, object]:
    """Register a user and log them in."""
    container = get_container(request)
    try:
        user = container.user_service.register(body.username, body.password)
    except UsernameTakenError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Username already exists"
        ) from exc
    request.session[SESSION_USER_KEY] = str(user.id)
    return serialize_user(user)


@router.post("/login")
async def login(body: CredentialsRequest, request: Request) -> dict[str, object]:
    """Start a session for valid credentials."""
    container = get_container(request)
    user = container.user_service.authenticate(body.username, body.password)
    if user is None:
        _logger.info("Failed login attempt for %s", body.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials"
        )
    request.session[SESSION_USER_KEY] = str(user.id)
    return serialize_user(user)


@router.post("/logout")
async def logout(request: Request) -> JSONResponse:
    """End the current session."""
    request.session.clear()
    return JSONResponse({"status": "ok"})


@router.get("/user")
async def current_user(user: UserRecord = Depends(require_user)) -> dict[str, object]:
    """Return the logged-in user."""
    return serialize_user(user)
