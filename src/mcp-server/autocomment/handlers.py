"""
AUTOCOMMENT MCP Server - Tool Handlers

Contains: handle_tool_call and one handler per tool

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.
"""

import json
from typing import Any, Awaitable, Callable, Dict, List, Optional

from mcp.types import TextContent

from .action import auto_comment_action, plan_for_caret, plan_for_selection
from .buffer import TextBuffer
from .classifier import classify
from .config import logger
from .exceptions import AutocommentError, ToolInputError
from .synthesizer import synthesize
from .utils import resolve_target_file


def _text(message: str) -> List[TextContent]:
    return [TextContent(type="text", text=message)]


def _require_str(args: Dict[str, Any], key: str) -> str:
    value = args.get(key)
    if not isinstance(value, str):
        raise ToolInputError(f"'{key}' must be a string")
    return value


def _optional_int(args: Dict[str, Any], key: str, default: Optional[int] = None) -> Optional[int]:
    value = args.get(key, default)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ToolInputError(f"'{key}' must be a positive integer")
    return value


def _require_int(args: Dict[str, Any], key: str) -> int:
    value = _optional_int(args, key)
    if value is None:
        raise ToolInputError(f"'{key}' is required")
    return value


# =============================================================================
# Handlers
# =============================================================================
async def handle_classify(args: Dict[str, Any]) -> List[TextContent]:
    result = classify(_require_str(args, "line").strip())
    payload = result.to_dict()
    payload["comment"] = synthesize(result)
    return _text(json.dumps(payload))


async def handle_generate(args: Dict[str, Any]) -> List[TextContent]:
    line_number = _require_int(args, "line_number")
    line_text = _require_str(args, "line_text")
    column = _optional_int(args, "column", 1)
    selected_text = args.get("selected_text")

    if selected_text:
        if not isinstance(selected_text, str):
            raise ToolInputError("'selected_text' must be a string")
        plan = plan_for_selection(line_number, column, selected_text, line_text)
    else:
        plan = plan_for_caret(line_number, column, line_text)

    return _text(json.dumps(plan.to_dict()))


async def handle_file(args: Dict[str, Any]) -> List[TextContent]:
    file_arg = _require_str(args, "file")
    line = _require_int(args, "line")
    end_line = _optional_int(args, "end_line")
    dry_run = bool(args.get("dry_run", False))

    path = resolve_target_file(file_arg, args.get("working_dir"))
    buffer = await TextBuffer.load(path)

    if end_line is not None and end_line > line:
        buffer.select_lines(line, end_line)
    else:
        buffer.set_position(line, 1)

    plan = auto_comment_action.run_and_apply(buffer)
    comment = plan.text.strip()

    if dry_run:
        return _text(f"Preview {path.name}:{line}: {comment}")

    await buffer.save(path)
    logger.info(f"Commented {path}:{line}: {comment}")
    return _text(f"Inserted {path.name}:{line}: {comment}")


HANDLERS: Dict[str, Callable[[Dict[str, Any]], Awaitable[List[TextContent]]]] = {
    "autocomment_classify": handle_classify,
    "autocomment_generate": handle_generate,
    "autocomment_file": handle_file,
}


async def handle_tool_call(name: str, args: Optional[Dict[str, Any]]) -> List[TextContent]:
    """Dispatch a tool call; failures come back as 'Error: ...' text."""
    handler = HANDLERS.get(name)
    if handler is None:
        return _text(f"Unknown tool: {name}")

    try:
        return await handler(args or {})
    except AutocommentError as e:
        logger.warning(f"{name} failed: {e}")
        return _text(f"Error: {e}")
    except Exception as e:
        logger.exception(f"{name} crashed")
        return _text(f"Error: {e}")
