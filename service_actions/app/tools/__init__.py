"""
Tool registry and dispatch.
"""

from .registry import ToolDescriptor, ToolRegistry, ToolHandler
from .dispatcher import ExecutionResult, ToolDispatcher, NO_MESSAGE, classify_failure, failure_message
from .handlers import ToolHandlers, build_default_registry, translation_cache_key

__all__ = [
    "ToolDescriptor",
    "ToolRegistry",
    "ToolHandler",
    "ExecutionResult",
    "ToolDispatcher",
    "NO_MESSAGE",
    "classify_failure",
    "failure_message",
    "ToolHandlers",
    "build_default_registry",
    "translation_cache_key",
]
