"""
MyMemory translation API client.
"""

from typing import Any, Dict

from shared.errors import ExternalServiceError
from .base_client import UpstreamClient


class MyMemoryClient(UpstreamClient):
    """Client for api.mymemory.translated.net."""

    service_name = "mymemory"
    api_label = "MyMemory API"

    async def translate(self, text: str, source_lang: str, target_lang: str) -> Dict[str, Any]:
        """Translate ``text``; returns ``{translatedText, match}``."""
        data = await self._get_json(
            "/get",
            params={"q": text, "langpair": f"{source_lang}|{target_lang}"}
        )

        response_data = data.get("responseData") if isinstance(data, dict) else None
        if not isinstance(response_data, dict) or not response_data.get("translatedText"):
            self.logger.warning("Translation payload missing translatedText", text_length=len(text))
            raise ExternalServiceError(self.service_name, "Invalid translation response")

        return {
            "translatedText": response_data["translatedText"],
            "match": response_data.get("match") or 0,
        }
