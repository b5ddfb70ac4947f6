"""
Request models for the actions endpoints.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class ExecuteRequest(BaseModel):
    """Body of ``POST /actions/execute``."""

    model_config = ConfigDict(extra="ignore")

    tool: Optional[str] = None
    params: Optional[Dict[str, Any]] = None
    message: Optional[str] = None


class EchoRequest(BaseModel):
    """Body of ``POST /actions/echo``; everything except ``message`` is ignored."""

    model_config = ConfigDict(extra="ignore")

    message: Optional[Any] = None
