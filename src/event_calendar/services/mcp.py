from __future__ import annotations

import logging

from fastmcp import FastMCP

from ..api import get_api_functions

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Event calendar tools. Add and remove events by unique name and query them by "
    "name, type, exact start time, location, or calendar month. Omitted filters match every event."
)


def build_mcp_server() -> FastMCP:
    server = FastMCP(name="event-calendar", instructions=INSTRUCTIONS)
    for api_function in get_api_functions():
        logger.debug("Registering MCP tool: %s", api_function.name)
        server.tool(
            api_function.func,
            name=api_function.name,
            description=api_function.description,
            tags=set(api_function.tags),
        )
    return server


def run_mcp_server(host: str = "127.0.0.1", port: int = 8765) -> None:
    server = build_mcp_server()
    server.run(transport="http", host=host, port=port)
