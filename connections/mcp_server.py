
import asyncio
import json
from typing import Any, Dict, List

# MCP over stdio, for agents that want the same lookup the HTTP relay offers.
# Requires the `mcp` python package (modelcontextprotocol)

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool
from pydantic import ValidationError

from .config import settings
from .errors import RelayError
from .gemini_client import extract_text
from .models import RelayRequest
from .relay import relay_query

TOOL_NAME = "find_connections"

server = Server("connections-relay")


def _text(payload) -> List[TextContent]:
    if not isinstance(payload, str):
        payload = json.dumps(payload)
    return [TextContent(type="text", text=payload)]


@server.list_tools()
async def list_tools() -> List[Tool]:
    return [
        Tool(
            name=TOOL_NAME,
            description="Match a free-text request against the users table and return the matching people.",
            inputSchema=RelayRequest.model_json_schema(),
        )
    ]


@server.call_tool()
async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
    if name != TOOL_NAME:
        return _text({"error": "unknown tool"})
    try:
        q = RelayRequest(**(arguments or {}))
    except ValidationError as e:
        return _text({"error": str(e)})
    if not q.userPrompt.strip():
        return _text({"error": "userPrompt is required"})

    missing = settings.missing_secrets()
    if missing:
        return _text({"error": "Server configuration error", "missing": missing})
    try:
        result = await asyncio.to_thread(relay_query, q.userPrompt, settings)
    except RelayError as e:
        return _text({"error": str(e)})
    return _text(extract_text(result) or "No matches found.")


async def main():
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


if __name__ == "__main__":
    asyncio.run(main())
