"""
Cross-cutting domain helpers for the Actions Gateway.
"""

from .auth_middleware import ApiKeyAuthenticator, API_KEY_HEADER
from .models import EchoRequest, ExecuteRequest

__all__ = ["ApiKeyAuthenticator", "API_KEY_HEADER", "EchoRequest", "ExecuteRequest"]
