"""HTTP client for the goals API, used by the goal wizard."""

from dataclasses import dataclass

import httpx

from fitness_tracker.wizard.goal_wizard import GoalClient


class GoalApiError(Exception):
    """Error envelope returned by the goals API."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


@dataclass
class HttpxGoalClient(GoalClient):
    """HTTPX-backed goals API client."""

    base_url: str
    access_token: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str, access_token: str) -> "HttpxGoalClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            access_token=access_token,
            http_client=httpx.AsyncClient(),
        )

    async def create_goal(self, payload: dict[str, object]) -> dict[str, object]:
        """POST a goal and return the created record."""
        response = await self.http_client.post(
            f"{self.base_url}/api/goals",
            json=payload,
            headers={"Authorization": f"Bearer {self.access_token}"},
            timeout=15,
        )
        if response.is_error:
            error = _error_from(response)
            if error is not None:
                raise error
            response.raise_for_status()
        return response.json()["data"]

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _error_from(response: httpx.Response) -> GoalApiError | None:
    try:
        body = response.json()
    except ValueError:
        return None
    error = body.get("error") if isinstance(body, dict) else None
    if not isinstance(error, dict):
        return None
    return GoalApiError(
        code=str(error.get("code", "SERVER_ERROR")),
        message=str(error.get("message", "Request failed")),
    )
