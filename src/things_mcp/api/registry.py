from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from fastmcp.tools import FunctionTool


@dataclass(frozen=True)
class ApiFunction:
    name: str
    func: Callable[..., Any]
    description: str
    category: str
    tags: tuple[str, ...]

    def to_function_tool(self) -> FunctionTool:
        return FunctionTool.from_function(
            self.func,
            name=self.name,
            description=self.description,
            tags=set(self.tags),
        )

    @property
    def parameter_schema(self) -> Dict[str, Any]:
        """JSON schema of the tool arguments, as published to MCP clients."""

        return self.to_function_tool().parameters

    def as_tool(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "tags": list(self.tags),
            "inputSchema": self.parameter_schema,
        }


REGISTRY: Dict[str, ApiFunction] = {}


def register_api(
    name: str,
    *,
    description: str,
    category: str,
    tags: Optional[Iterable[str]] = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if name in REGISTRY:
            raise ValueError(f"Tool '{name}' is already registered.")
        REGISTRY[name] = ApiFunction(
            name=name,
            func=func,
            description=description,
            category=category,
            tags=tuple(tags or ()),
        )
        return func

    return decorator


def get_api_functions() -> List[ApiFunction]:
    return list(REGISTRY.values())


def call_api(name: str, **kwargs: Any) -> Any:
    """Invoke a registered tool handler directly, bypassing the MCP transport."""

    if name not in REGISTRY:
        raise KeyError(f"Tool '{name}' is not registered.")
    return REGISTRY[name].func(**kwargs)
