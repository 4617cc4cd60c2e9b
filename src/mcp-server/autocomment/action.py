"""
AUTOCOMMENT MCP Server - Auto Comment Action Module

Contains: EditorHost port, plan_for_caret, plan_for_selection, AutoCommentAction

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.

The action never mutates the host. It reads a line or a selection through
the EditorHost port and returns an InsertionPlan; applying the plan is the
host's job (see run_and_apply for hosts that want it done in one call).

Usage:
    from autocomment.action import AutoCommentAction
    from autocomment.buffer import TextBuffer

    buffer = TextBuffer.from_text("function add(a, b) {\\n  return a + b;\\n}")
    plan = AutoCommentAction().run(buffer)
    buffer.apply_plan(plan)
"""

from typing import Optional, Protocol

from .aggregator import aggregate, split_lines
from .classifier import classify
from .config import ACTION_ID, ACTION_KEYBINDING, ACTION_LABEL, logger
from .models import InsertionPlan, Selection
from .placement import plan
from .synthesizer import synthesize


class EditorHost(Protocol):
    """What the action needs from a text-editing host."""

    def has_model(self) -> bool: ...

    def is_writable(self) -> bool: ...

    def get_selection(self) -> Optional[Selection]: ...

    def get_line_content(self, line_number: int) -> str: ...

    def get_value_in_range(self, selection: Selection) -> str: ...

    def apply_plan(self, plan: InsertionPlan) -> None: ...


def plan_for_caret(caret_line: int, caret_column: int, line_text: str) -> InsertionPlan:
    """Comment the line under the caret. The caret column does not affect the result."""
    comment = synthesize(classify(line_text.strip()))
    logger.debug(f"Caret {caret_line}:{caret_column} -> {comment!r}")
    return plan(caret_line, line_text, comment)


def plan_for_selection(
    start_line: int,
    start_column: int,
    selected_text: str,
    line_text: Optional[str] = None
) -> InsertionPlan:
    """
    Comment a selection, placing the comment above its first line.

    Args:
        start_line: 1-based line where the selection starts
        start_column: 1-based column where the selection starts
        selected_text: Verbatim selected text including line breaks
        line_text: Full content of the start line, used for indentation.
            When omitted, the first selected line stands in for it if the
            selection starts at column 1; otherwise no indentation is used.

    Returns:
        InsertionPlan for the host to apply
    """
    lines = split_lines(selected_text)
    result = aggregate(lines)
    comment = synthesize(result, result.total_lines)

    if line_text is None:
        line_text = lines[0] if start_column == 1 else ""

    logger.debug(f"Selection at {start_line}:{start_column} ({result.total_lines} lines) -> {comment!r}")
    return plan(start_line, line_text, comment)


class AutoCommentAction:
    """
    Generate a descriptive comment above the caret line or the selection.

    Registered by hosts under ACTION_ID with ACTION_KEYBINDING.
    """

    id = ACTION_ID
    label = ACTION_LABEL
    keybinding = ACTION_KEYBINDING

    def run(self, host: Optional[EditorHost]) -> Optional[InsertionPlan]:
        """Compute the plan for the host's current state; None means nothing to do."""
        if host is None or not host.has_model():
            logger.debug("No active model, skipping")
            return None
        if not host.is_writable():
            logger.debug("Model is read-only, skipping")
            return None

        selection = host.get_selection()
        if selection is None or selection.is_empty:
            line = selection.start_line if selection else 1
            column = selection.start_column if selection else 1
            return plan_for_caret(line, column, host.get_line_content(line))

        return plan_for_selection(
            selection.start_line,
            selection.start_column,
            host.get_value_in_range(selection),
            host.get_line_content(selection.start_line),
        )

    def run_and_apply(self, host: Optional[EditorHost]) -> Optional[InsertionPlan]:
        """Compute the plan and have the host apply it."""
        result = self.run(host)
        if result is not None:
            host.apply_plan(result)
        return result


auto_comment_action = AutoCommentAction()
