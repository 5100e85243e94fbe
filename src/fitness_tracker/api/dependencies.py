"""Request-scoped dependencies shared by the routers."""

from uuid import UUID

from fastapi import Depends, Header, Request

from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.errors import NotAuthorizedError


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


async def require_user(
    authorization: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> UUID:
    """Resolve the bearer token into the caller's user id."""
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise NotAuthorizedError()
    user_id = container.identity_provider.resolve_user_id(token.strip())
    if user_id is None:
        raise NotAuthorizedError("Invalid or expired access token")
    return user_id
