"""
icanhazdadjoke API client.
"""

from shared.errors import ExternalServiceError
from .base_client import UpstreamClient


class DadJokeClient(UpstreamClient):
    """Client for icanhazdadjoke.com."""

    service_name = "dad_joke"
    api_label = "Dad Joke API"

    async def get_random_joke(self) -> str:
        """Fetch a random dad joke."""
        # Without the Accept header the API answers with an HTML page.
        data = await self._get_json("/", headers={"Accept": "application/json"})
        if not isinstance(data, dict) or "joke" not in data:
            raise ExternalServiceError(self.service_name, "Invalid Dad Joke API response")
        return data["joke"]
