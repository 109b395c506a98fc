from __future__ import annotations

import logging

from fastmcp.server import FastMCP

from ..api import get_api_functions

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Things MCP server drives the Things app on macOS through its URL scheme. "
    "Tools open Things to show lists, create, update and complete to-dos and projects, and search. "
    "Results only confirm that macOS accepted the request; nothing is read back from Things."
)


def build_mcp_server() -> FastMCP:
    tools = []
    for api_function in get_api_functions():
        logger.debug("Registering MCP tool: %s", api_function.name)
        tools.append(api_function.to_function_tool())
    return FastMCP(
        name="things-mcp",
        instructions=INSTRUCTIONS,
        tools=tools,
    )


def run_mcp_server(transport: str = "stdio", host: str = "127.0.0.1", port: int = 8765) -> None:
    server = build_mcp_server()
    if transport == "stdio":
        server.run("stdio")
    else:
        server.run("streamable-http", host=host, port=port)
