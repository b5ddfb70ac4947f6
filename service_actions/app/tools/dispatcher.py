"""
Tool dispatcher: resolves a tool, runs its handler and normalizes the outcome.
"""

import time
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Optional, TYPE_CHECKING

from shared.errors import ErrorKind, GatewayException, ToolExecutionError, ToolNotFoundError
from shared.logging import get_logger
from shared.timestamps import format_iso, utc_now
from .registry import ToolRegistry

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


NO_MESSAGE = "No message provided"


def failure_message(exc: BaseException) -> str:
    if isinstance(exc, GatewayException):
        return exc.message
    return str(exc) or exc.__class__.__name__


def classify_failure(exc: BaseException) -> ErrorKind:
    """Decide whether a handler failure is the caller's fault.

    Tagged errors carry their own kind. Untagged errors fall back to the
    legacy rule: a message containing "required" is a validation error.
    """
    kind = getattr(exc, "kind", None)
    if isinstance(kind, ErrorKind):
        return kind
    if "required" in failure_message(exc):
        return ErrorKind.VALIDATION
    return ErrorKind.UPSTREAM


@dataclass
class ExecutionResult:
    """Successful tool execution envelope."""

    tool: str
    description: str
    original_message: str
    result: Any
    timestamp: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tool": self.tool,
            "description": self.description,
            "originalMessage": self.original_message,
            "result": self.result,
            "timestamp": self.timestamp,
        }


class ToolDispatcher:
    """Executes registered tools on behalf of the HTTP surface."""

    def __init__(
        self,
        registry: ToolRegistry,
        *,
        metrics: Optional["MetricsCollector"] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.registry = registry
        self.metrics = metrics
        self._clock = clock
        self.logger = get_logger("actions.dispatcher")

    async def execute(
        self,
        tool_name: Optional[str],
        params: Optional[Dict[str, Any]] = None,
        message: Optional[str] = None,
    ) -> ExecutionResult:
        """Run ``tool_name`` with ``params``.

        Raises ``ToolNotFoundError`` for unknown tools (the handler is never
        invoked) and ``ToolExecutionError`` when the handler fails.
        """
        descriptor = self.registry.lookup(tool_name)
        if descriptor is None:
            self.logger.warning("Tool not found", tool=tool_name)
            raise ToolNotFoundError(tool_name, self.registry.names())

        start_time = time.perf_counter()
        try:
            result = await descriptor.handler(params or {})
        except Exception as exc:
            duration = time.perf_counter() - start_time
            kind = classify_failure(exc)
            error = ToolExecutionError(descriptor.name, failure_message(exc), kind)
            self.logger.error(
                "Tool execution failed",
                tool=descriptor.name,
                kind=kind.value,
                status_code=error.status_code,
                error=error.message,
            )
            self._record(descriptor.name, kind.value, duration)
            raise error from exc

        duration = time.perf_counter() - start_time
        self._record(descriptor.name, "success", duration)
        self.logger.info("Tool executed", tool=descriptor.name, duration_ms=round(duration * 1000, 2))

        return ExecutionResult(
            tool=descriptor.name,
            description=descriptor.description,
            original_message=message or NO_MESSAGE,
            result=result,
            timestamp=format_iso(self._clock()),
        )

    def _record(self, tool: str, outcome: str, duration: float) -> None:
        if self.metrics:
            self.metrics.record_tool_execution(tool, outcome, duration)
