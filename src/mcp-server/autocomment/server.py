"""
AUTOCOMMENT MCP Server - Main Server Module

Entry point for the MCP server.

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.
"""

import sys
import asyncio
from typing import List, Dict, Any, Optional

try:
    from mcp.server import Server
    from mcp.server.stdio import stdio_server
    from mcp.types import (
        Tool, TextContent, Resource, Prompt, PromptMessage, PromptArgument, GetPromptResult
    )
except ImportError:
    print("MCP package not installed. Run: pip install mcp", file=sys.stderr)
    sys.exit(1)

from .config import VERSION, ACTION_ID, logger
from .classifier import rule_names
from .tools import get_tool_definitions
from .handlers import handle_tool_call


# =============================================================================
# MCP Server Instance
# =============================================================================
server = Server("autocomment")


# =============================================================================
# Tool Registration
# =============================================================================
@server.list_tools()
async def list_tools() -> List[Tool]:
    return await get_tool_definitions()


@server.call_tool()
async def call_tool(name: str, args: Dict[str, Any]) -> List[TextContent]:
    return await handle_tool_call(name, args)


# =============================================================================
# Resources
# =============================================================================
@server.list_resources()
async def list_resources() -> List[Resource]:
    return [Resource(
        uri="autocomment://rules",
        name="Classification Rules",
        description="Classification rules in priority order",
        mimeType="text/plain"
    )]


@server.read_resource()
async def read_resource(uri: str) -> str:
    if str(uri) == "autocomment://rules":
        return "\n".join(f"{i}. {name}" for i, name in enumerate(rule_names(), 1)) + "\n6. generic"
    return "Unknown resource"


# =============================================================================
# Prompts
# =============================================================================
@server.list_prompts()
async def list_prompts() -> List[Prompt]:
    return [
        Prompt(
            name="comment",
            description="Add a descriptive comment above a line of a file",
            arguments=[
                PromptArgument(name="file", description="File to annotate", required=True),
                PromptArgument(name="line", description="1-based line number", required=True)
            ]
        )
    ]


def _user_message(text: str) -> PromptMessage:
    return PromptMessage(role="user", content=TextContent(type="text", text=text))


@server.get_prompt()
async def get_prompt(name: str, arguments: Optional[Dict[str, Any]] = None) -> GetPromptResult:
    if name == "comment":
        file = arguments.get("file", "") if arguments else ""
        line = arguments.get("line", "1") if arguments else "1"
        return GetPromptResult(messages=[_user_message(
            f"1. autocomment_file(file=\"{file}\", line={line}, dry_run=true) - preview\n"
            f"2. autocomment_file(file=\"{file}\", line={line}) - insert"
        )])
    return GetPromptResult(messages=[_user_message(f"Unknown: {name}")])


# =============================================================================
# Main Entry Point
# =============================================================================
async def main():
    """Start the MCP server."""
    logger.info(f"Autocomment MCP Server v{VERSION} starting ({ACTION_ID})...")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())

    logger.info("Autocomment MCP Server shutdown complete")


def run():
    """Entry point for console script."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
