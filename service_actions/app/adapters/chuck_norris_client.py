"""
Chuck Norris jokes API client.
"""

from typing import Any, Dict, List

from shared.errors import ExternalServiceError
from .base_client import UpstreamClient


class ChuckNorrisClient(UpstreamClient):
    """Client for api.chucknorris.io."""

    service_name = "chuck_norris"
    api_label = "Chuck Norris API"

    async def get_random_joke(self) -> Dict[str, Any]:
        """Fetch a random joke as ``{joke, iconUrl}``."""
        data = await self._get_json("/jokes/random")
        return self._to_joke(data)

    async def get_joke_by_category(self, category: str) -> Dict[str, Any]:
        """Fetch a random joke from the given category."""
        data = await self._get_json("/jokes/random", params={"category": category})
        return self._to_joke(data)

    async def get_categories(self) -> List[str]:
        """Fetch all joke categories."""
        data = await self._get_json("/jokes/categories")
        if not isinstance(data, list):
            raise ExternalServiceError(self.service_name, "Invalid Chuck Norris API response")
        return data

    def _to_joke(self, data: Any) -> Dict[str, Any]:
        if not isinstance(data, dict) or "value" not in data:
            raise ExternalServiceError(self.service_name, "Invalid Chuck Norris API response")
        return {"joke": data["value"], "iconUrl": data.get("icon_url")}
