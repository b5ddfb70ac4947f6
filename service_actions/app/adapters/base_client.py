"""
Common plumbing for upstream API clients.
"""

from typing import Any, Dict, Optional

import httpx

from shared.logging import get_logger
from shared.errors import ExternalServiceError


class UpstreamClient:
    """Thin JSON-over-HTTP client for a single third-party API.

    A fresh ``httpx.AsyncClient`` is opened per call. Failures are never
    retried; every non-2xx status, transport error or undecodable body is
    raised as ``ExternalServiceError``.
    """

    service_name = "upstream"
    api_label = "Upstream API"

    def __init__(
        self,
        base_url: str,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.transport = transport
        self.logger = get_logger(f"actions.{self.service_name}_client")

    async def _get_json(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Issue a GET request and decode the JSON body."""
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, params=params, headers=headers)
        except httpx.HTTPError as exc:
            reason = str(exc) or exc.__class__.__name__
            self.logger.error("Upstream request failed", url=url, error=reason)
            raise ExternalServiceError(self.service_name, f"{self.api_label} error: {reason}") from exc

        if not response.is_success:
            self.logger.error(
                "Upstream returned error status",
                url=url,
                status_code=response.status_code,
                response=response.text[:500]
            )
            raise ExternalServiceError(
                self.service_name,
                f"{self.api_label} error: {response.reason_phrase}"
            )

        try:
            data = response.json()
        except ValueError as exc:
            self.logger.error("Upstream returned invalid JSON", url=url)
            raise ExternalServiceError(self.service_name, f"Invalid {self.api_label} response") from exc

        self.logger.debug("Upstream response received", url=url, status_code=response.status_code)
        return data
