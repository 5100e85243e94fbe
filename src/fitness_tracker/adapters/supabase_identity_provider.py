"""Supabase Auth token resolution."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from fitness_tracker.services.identity import IdentityProvider

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Resolve access tokens through Supabase Auth."""

    client: Client

    def resolve_user_id(self, access_token: str) -> UUID | None:
        """Return the Supabase user id for an access token."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as exc:
            _logger.info("Rejected access token: %s", exc)
            return None
        if response is None or response.user is None:
            return None
        return UUID(response.user.id)
