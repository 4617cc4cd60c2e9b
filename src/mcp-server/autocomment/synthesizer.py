"""
AUTOCOMMENT MCP Server - Comment Synthesizer Module

Turns a classification (single line) or a tally (selection) into a short
comment body. Comment delimiters are added later by the placement engine.

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.
"""

from typing import Optional, Union

from .models import AggregateResult, Category, ClassificationResult, ControlFlowKind

GENERIC_COMMENT = "TODO: Add description"
IMPORT_EXPORT_COMMENT = "Module import/export"
SELECTED_BLOCK_COMMENT = "Selected code block"

# category -> (label with identifier, label without identifier)
_NAMED_LABELS = {
    Category.FUNCTION: ("Function", "Function definition"),
    Category.VARIABLE: ("Variable", "Variable declaration"),
    Category.TYPE_DECLARATION: ("Class", "Class definition"),
}


def _pluralize(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count > 1 else ''}"


def describe_line(result: ClassificationResult) -> str:
    """Comment text for one classified line."""
    if result.category in _NAMED_LABELS:
        label, fallback = _NAMED_LABELS[result.category]
        return f"{label}: {result.identifier}" if result.identifier else fallback

    if result.category is Category.IMPORT_EXPORT:
        return IMPORT_EXPORT_COMMENT

    if result.category is Category.CONTROL_FLOW:
        kind = result.control_flow_kind or ControlFlowKind.GENERIC
        return f"{kind.value} statement"

    return GENERIC_COMMENT


def describe_selection(result: AggregateResult, line_count: Optional[int] = None) -> str:
    """
    Comment text for a selected span.

    A one-line span only keeps its precise label when it is a function;
    everything else reads as a selected block. Function counts take
    priority over variable counts.
    """
    if line_count is None:
        line_count = result.total_lines

    if line_count == 1:
        single = result.single_line
        if single is not None and single.category is Category.FUNCTION:
            return describe_line(single)
        if single is None and result.function_count > 0:
            return describe_line(ClassificationResult(Category.FUNCTION))
        return SELECTED_BLOCK_COMMENT

    if result.function_count > 0:
        return f"Code block with {_pluralize(result.function_count, 'function')}"
    if result.variable_count > 0:
        return f"Code block with {_pluralize(result.variable_count, 'variable')}"
    return f"Code block ({line_count} lines)"


def synthesize(
    result: Union[ClassificationResult, AggregateResult],
    context_line_count: Optional[int] = None
) -> str:
    """
    Produce the comment body for a classification or a tally.

    Args:
        result: ClassificationResult for a single point, AggregateResult for a selection
        context_line_count: Line count of the selection; defaults to result.total_lines

    Returns:
        Comment text without the comment delimiter
    """
    if isinstance(result, AggregateResult):
        return describe_selection(result, context_line_count)
    return describe_line(result)
