"""
Confluence Bridge - Tool Registry

Typed table of the tools this service offers. Dispatch front ends (the MCP
server and the HTTP API) look tools up here; the pipeline itself knows
nothing about dispatch.

Patterns Applied:
- Registry pattern: name -> ToolSpec, populated at import time
- Dependency injection: handlers receive a ToolContext instead of reaching
  for globals
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from confluence_bridge.core.exceptions import ToolNotFoundError
from confluence_bridge.core.logging import get_logger
from confluence_bridge.tools.models import ToolOutput

if TYPE_CHECKING:
    import httpx

    from confluence_bridge.core.config import Settings
    from confluence_bridge.pipeline.pacing import SleeperProtocol

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ToolContext:
    """Collaborators available to a tool handler for one invocation.

    Attributes:
        http_client: Pooled client to reuse; handlers open their own when None
        settings: Settings to use; resolved from the environment when None
        sleeper: Pacing sleeper; asyncio-backed when None
    """

    http_client: httpx.AsyncClient | None = None
    settings: Settings | None = None
    sleeper: SleeperProtocol | None = None


ToolHandler = Callable[[Any, ToolContext], Awaitable[ToolOutput]]


@dataclass(frozen=True, slots=True)
class ToolSpec:
    """A registered tool.

    Attributes:
        name: Tool name as exposed to callers
        description: Caller-facing description
        input_model: Pydantic model validating the arguments
        handler: Coroutine receiving the validated input and a ToolContext
        invalid_input_message: Text returned when the arguments fail validation
    """

    name: str
    description: str
    input_model: type[BaseModel]
    handler: ToolHandler
    invalid_input_message: str

    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema()


TOOL_REGISTRY: dict[str, ToolSpec] = {}


def register_tool(spec: ToolSpec) -> ToolSpec:
    """Add a tool to the registry.

    Raises:
        ValueError: If a tool with the same name is already registered
    """
    if spec.name in TOOL_REGISTRY:
        raise ValueError(f"Tool already registered: {spec.name}")
    TOOL_REGISTRY[spec.name] = spec
    return spec


def get_tool(name: str) -> ToolSpec:
    """Look up a tool by name.

    Raises:
        ToolNotFoundError: If no tool has that name
    """
    try:
        return TOOL_REGISTRY[name]
    except KeyError:
        raise ToolNotFoundError(name) from None


async def invoke_tool(
    name: str,
    arguments: Mapping[str, Any] | None,
    context: ToolContext | None = None,
) -> ToolOutput:
    """Validate arguments and run a tool.

    Argument validation failures are rendered as the tool's invalid input
    text; the handler is not called.

    Raises:
        ToolNotFoundError: If no tool has that name
    """
    spec = get_tool(name)
    try:
        params = spec.input_model.model_validate(dict(arguments or {}))
    except ValidationError as e:
        logger.warning("tool_input_invalid", tool=name, errors=e.error_count())
        return ToolOutput.from_text(spec.invalid_input_message)

    return await spec.handler(params, context or ToolContext())
