"""Resolution of bearer tokens to user ids."""

from typing import Protocol
from uuid import UUID


class IdentityProvider(Protocol):
    """Interface to the external authentication system."""

    def resolve_user_id(self, access_token: str) -> UUID | None:
        """Return the user id behind a token, or None if it is not valid."""
