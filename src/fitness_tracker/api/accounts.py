"""Registration, login and profile endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status

from fitness_tracker.api.deps import get_current_user
from fitness_tracker.api.schemas import (  # noqa: TC001
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
)
from fitness_tracker.domain.accounts import Account, TokenClaims  # noqa: TC001

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(tags=["accounts"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, request: Request) -> dict[str, object]:
    """Create an account and return a token for it."""
    container: AppContainer = request.app.state.container
    result = container.account_service.register(
        name=body.name, email=body.email, password=body.password
    )
    return {
        "message": "You are signed in",
        "token": result.token,
        "user": serialize_user(result.account),
    }


@router.post("/login")
def login(body: LoginRequest, request: Request) -> dict[str, object]:
    """Exchange email and password for a token."""
    container: AppContainer = request.app.state.container
    result = container.account_service.login(email=body.email, password=body.password)
    return {
        "message": "Login Successful",
        "token": result.token,
        "user": serialize_user(result.account),
    }


@router.put("/profile")
def update_profile(
    body: ProfileUpdateRequest,
    request: Request,
    user: TokenClaims = Depends(get_current_user),
) -> dict[str, object]:
    """Update the caller's name, email or password."""
    container: AppContainer = request.app.state.container
    account = container.account_service.update_profile(
        user.user_id,
        name=body.name,
        email=body.email,
        current_password=body.current_password,
        new_password=body.new_password,
    )
    return {
        "message": "Profile updated successfully",
        "user": serialize_user(account),
    }


def serialize_user(account: Account) -> dict[str, str]:
    """Public view of an account."""
    return {"name": account.name, "email": account.email}
