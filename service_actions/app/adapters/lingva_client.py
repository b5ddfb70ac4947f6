"""
Lingva translation API client.
"""

from urllib.parse import quote

from shared.errors import ExternalServiceError
from .base_client import UpstreamClient


class LingvaClient(UpstreamClient):
    """Client for the Lingva Translate API."""

    service_name = "lingva"
    api_label = "Lingva API"

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """Translate ``text`` and return the translated string."""
        path = "/api/v1/{}/{}/{}".format(
            quote(source_lang, safe=""),
            quote(target_lang, safe=""),
            quote(text, safe=""),
        )
        data = await self._get_json(path)
        if not isinstance(data, dict) or "translation" not in data:
            raise ExternalServiceError(self.service_name, "Invalid translation response")
        return data["translation"]
