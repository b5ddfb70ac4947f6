"""
Shared-secret authentication for the Actions Gateway.
"""

import secrets
from typing import Optional

from fastapi import Request

from shared.logging import get_logger
from shared.errors import AuthenticationError


API_KEY_HEADER = "x-api-key"


class ApiKeyAuthenticator:
    """Checks the ``x-api-key`` header against a single configured secret."""

    def __init__(self, api_key: str):
        self.api_key = api_key
        self.logger = get_logger("actions.auth_middleware")

    def is_valid(self, received: Optional[str]) -> bool:
        if received is None:
            return False
        return secrets.compare_digest(received.encode("utf-8"), self.api_key.encode("utf-8"))

    def authenticate_request(self, request: Request) -> None:
        """Raise ``AuthenticationError`` unless the request carries the secret."""
        received = request.headers.get(API_KEY_HEADER)
        if self.is_valid(received):
            return

        self.logger.warning(
            "Rejected request with invalid API key",
            method=request.method,
            path=request.url.path,
            api_key_present=received is not None,
        )
        raise AuthenticationError(received=received, expected=self.api_key)
