"""Shared FastAPI dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from fitness_tracker.domain.accounts import TokenClaims  # noqa: TC001
from fitness_tracker.domain.errors import AuthenticationRequired

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> TokenClaims:
    """Resolve the bearer token into verified claims."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationRequired()
    container: AppContainer = request.app.state.container
    return container.token_service.verify(credentials.credentials)
