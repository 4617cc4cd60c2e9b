"""
AUTOCOMMENT MCP Server - Placement Engine Module

Computes the insertion text for a comment and the caret position after
the host applies it.

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.
"""

from .config import COMMENT_PREFIX, LINE_TERMINATOR
from .models import InsertionPlan, SourceLine


def leading_indentation(raw_text: str) -> str:
    """Whitespace before the first non-whitespace character; empty for blank lines."""
    return SourceLine.from_raw(raw_text).leading_indentation


def plan(target_line_index: int, target_line_raw_text: str, comment: str) -> InsertionPlan:
    """
    Plan a comment insertion directly above the target line.

    The comment reuses the target line's indentation and the caret lands
    at the end of the inserted comment. Calling this twice for the same
    line yields two stacked comments.

    Args:
        target_line_index: 1-based line number the comment goes above
        target_line_raw_text: Full, untrimmed content of that line
        comment: Comment body without delimiter

    Returns:
        InsertionPlan for the host to apply
    """
    indentation = leading_indentation(target_line_raw_text)
    comment_text = f"{COMMENT_PREFIX}{comment}"

    return InsertionPlan(
        insert_at_line=target_line_index,
        text=f"{indentation}{comment_text}{LINE_TERMINATOR}",
        new_caret_line=target_line_index,
        new_caret_column=len(indentation) + len(comment_text) + 1,
    )
