"""
AUTOCOMMENT MCP Server - Selection Aggregator Module

Reduces the per-line classifications of a multi-line span to tallies.

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.
"""

from typing import Sequence, Union

from .classifier import classify
from .models import AggregateResult, Category


def split_lines(text: str) -> list:
    """Split selected text on line breaks; a trailing break yields a final empty line."""
    return text.split("\n")


def aggregate(lines: Union[str, Sequence[str]]) -> AggregateResult:
    """
    Classify every line of a span and count functions and variables.

    Args:
        lines: Either the verbatim selected text or its lines.

    Returns:
        AggregateResult; total_lines includes blank lines.
    """
    if isinstance(lines, str):
        lines = split_lines(lines)

    results = [classify(line.strip()) for line in lines]
    function_count = sum(1 for r in results if r.category is Category.FUNCTION)
    variable_count = sum(1 for r in results if r.category is Category.VARIABLE)

    return AggregateResult(
        function_count=function_count,
        variable_count=variable_count,
        total_lines=len(results),
        single_line=results[0] if len(results) == 1 else None,
    )
