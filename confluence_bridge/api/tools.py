"""
Confluence Bridge - Tool API Routes

GET  /v1/tools        - list registered tools with their input schemas
POST /v1/tools/{name} - invoke a tool; always answers with one text block

Patterns Applied:
- FastAPI router pattern
- Pydantic request/response models
- Pooled httpx client taken from app.state (opened in the lifespan handler)
"""

from typing import Any

from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel

from confluence_bridge.core.exceptions import ToolNotFoundError
from confluence_bridge.tools import TOOL_REGISTRY, ToolContext, ToolOutput, invoke_tool

tools_router = APIRouter(prefix="/v1", tags=["tools"])


class ToolInfo(BaseModel):
    """Description of a registered tool."""

    name: str
    description: str
    input_schema: dict[str, Any]


@tools_router.get("/tools", response_model=list[ToolInfo])
async def list_tools() -> list[ToolInfo]:
    """List every registered tool."""
    return [
        ToolInfo(
            name=spec.name,
            description=spec.description,
            input_schema=spec.input_schema(),
        )
        for spec in TOOL_REGISTRY.values()
    ]


@tools_router.post("/tools/{name}", response_model=ToolOutput)
async def call_tool(name: str, arguments: dict[str, Any], request: Request) -> ToolOutput:
    """Invoke a tool by name.

    Args:
        name: Registered tool name
        arguments: Tool arguments, e.g. {"state": "confluence deployment guide"}

    Returns:
        ToolOutput with exactly one text block

    Raises:
        HTTPException: 404 when the tool is unknown
    """
    context = ToolContext(http_client=getattr(request.app.state, "http_client", None))
    try:
        return await invoke_tool(name, arguments, context)
    except ToolNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
