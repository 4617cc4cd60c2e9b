"""
AUTOCOMMENT MCP Server - Tool Definitions

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.
"""

from typing import List

from mcp.types import Tool


async def get_tool_definitions() -> List[Tool]:
    return [
        Tool(
            name="autocomment_classify",
            description="Classify one line of code (function, variable, class, import/export, control flow) and show the comment it would get",
            inputSchema={
                "type": "object",
                "properties": {
                    "line": {"type": "string", "description": "Line of source code"}
                },
                "required": ["line"]
            }
        ),
        Tool(
            name="autocomment_generate",
            description="Plan a descriptive comment above a line or a selection. Returns the text to insert and the new caret position",
            inputSchema={
                "type": "object",
                "properties": {
                    "line_number": {"type": "integer", "minimum": 1, "description": "1-based caret line or selection start line"},
                    "line_text": {"type": "string", "description": "Full content of that line"},
                    "column": {"type": "integer", "minimum": 1, "default": 1, "description": "1-based caret column or selection start column"},
                    "selected_text": {"type": "string", "description": "Selected text including line breaks; omit for caret mode"}
                },
                "required": ["line_number", "line_text"]
            }
        ),
        Tool(
            name="autocomment_file",
            description="Insert a descriptive comment above a line (or line range) of a file",
            inputSchema={
                "type": "object",
                "properties": {
                    "file": {"type": "string", "description": "File path, relative to working_dir or absolute"},
                    "line": {"type": "integer", "minimum": 1, "description": "1-based target line"},
                    "end_line": {"type": "integer", "minimum": 1, "description": "Last line of a range selection"},
                    "working_dir": {"type": "string", "description": "Base directory for relative paths; the file must resolve inside it"},
                    "dry_run": {"type": "boolean", "default": False, "description": "Preview without writing"}
                },
                "required": ["file", "line"]
            }
        ),
    ]
