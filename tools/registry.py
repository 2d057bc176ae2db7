# =============================================================================
# tools/registry.py  -  Tool descriptors and the read-only tool catalog
# =============================================================================
#
# A ToolDescriptor binds everything needed to serve one tool:
#
#   arguments  the pydantic model that validates the caller's input
#   path/query how validated arguments become one TMDB GET request
#   project    how the TMDB response becomes the compact tool result
#
# The ToolRegistry is built once at startup and never changes afterwards.
# It is passed into the Dispatcher explicitly instead of living in a
# module-level global, so every test can build its own catalog.
# =============================================================================

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Iterable, Iterator, Optional

from core.models import QueryParam
from core.schemas import ToolArguments, input_schema

Projector = Callable[[dict[str, Any], ToolArguments], dict[str, Any]]


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    arguments: type[ToolArguments]
    path: str
    project: Projector
    query: tuple[QueryParam, ...] = ()

    @property
    def input_schema(self) -> dict[str, Any]:
        return input_schema(self.arguments)

    def catalog_entry(self) -> dict[str, Any]:
        """The {name, description, inputSchema} triple shown to MCP clients."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


class ToolRegistry:
    """Immutable name -> ToolDescriptor catalog, in registration order."""

    def __init__(self, descriptors: Iterable[ToolDescriptor]):
        tools: dict[str, ToolDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.name in tools:
                raise ValueError(f"Duplicate tool name: {descriptor.name!r}")
            tools[descriptor.name] = descriptor
        self._tools = MappingProxyType(tools)

    def descriptors(self) -> list[ToolDescriptor]:
        return list(self._tools.values())

    def resolve(self, name: Any) -> Optional[ToolDescriptor]:
        """Look a tool up by name.  Unknown names (including '') give None."""
        if not isinstance(name, str):
            return None
        return self._tools.get(name)

    def catalog(self) -> list[dict[str, Any]]:
        return [descriptor.catalog_entry() for descriptor in self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolDescriptor]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)
