"""
Tool registry for the Actions Gateway.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional

from shared.logging import get_logger


ToolHandler = Callable[[Dict[str, Any]], Awaitable[Any]]


@dataclass(frozen=True)
class ToolDescriptor:
    """A registered tool: its name, description and async handler."""

    name: str
    description: str
    handler: ToolHandler

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "description": self.description}


class ToolRegistry:
    """Append-only mapping from tool name to descriptor.

    Tools are registered once during startup; ``freeze`` closes the
    registry so the set stays fixed for the lifetime of the process.
    Iteration order is registration order.
    """

    def __init__(self):
        self._tools: Dict[str, ToolDescriptor] = {}
        self._frozen = False
        self.logger = get_logger("actions.tool_registry")

    def register(self, name: str, description: str, handler: ToolHandler) -> ToolDescriptor:
        """Register a tool."""
        if self._frozen:
            raise RuntimeError(f"Tool registry is frozen; cannot register '{name}'")
        if name in self._tools:
            raise ValueError(f"Tool '{name}' is already registered")

        descriptor = ToolDescriptor(name=name, description=description, handler=handler)
        self._tools[name] = descriptor
        self.logger.debug("Tool registered", tool=name)
        return descriptor

    def freeze(self) -> "ToolRegistry":
        """Disallow further registrations."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, name: Optional[str]) -> Optional[ToolDescriptor]:
        """Resolve a tool by name."""
        if not isinstance(name, str):
            return None
        return self._tools.get(name)

    def list_all(self) -> List[Dict[str, str]]:
        """List ``{name, description}`` for every tool in registration order."""
        return [descriptor.to_dict() for descriptor in self._tools.values()]

    def names(self) -> List[str]:
        return list(self._tools)

    def __len__(self) -> int:
        return len(self._tools)
