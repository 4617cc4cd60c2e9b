"""
AUTOCOMMENT MCP Server - Data Models

Contains: Category, ControlFlowKind, SourceLine, ClassificationResult,
AggregateResult, InsertionPlan, Selection

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.

Every model is built, consumed and discarded within a single invocation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Category(str, Enum):
    """Syntactic category of a classified line."""
    FUNCTION = "Function"
    VARIABLE = "Variable"
    TYPE_DECLARATION = "TypeDeclaration"
    IMPORT_EXPORT = "ImportExport"
    CONTROL_FLOW = "ControlFlow"
    GENERIC = "Generic"


class ControlFlowKind(str, Enum):
    """Kind of control-flow statement; the value is the comment label."""
    CONDITIONAL = "Conditional"
    LOOP = "Loop"
    SWITCH = "Switch"
    ERROR_HANDLING = "Error handling"
    GENERIC = "Control flow"


@dataclass(frozen=True)
class SourceLine:
    """A line fetched from the host buffer."""
    raw_text: str
    trimmed_text: str
    leading_indentation: str

    @classmethod
    def from_raw(cls, raw_text: Optional[str]) -> "SourceLine":
        raw_text = raw_text or ""
        trimmed = raw_text.strip()
        if not trimmed:
            indentation = ""
        else:
            indentation = raw_text[:len(raw_text) - len(raw_text.lstrip())]
        return cls(raw_text=raw_text, trimmed_text=trimmed, leading_indentation=indentation)


@dataclass(frozen=True)
class ClassificationResult:
    """
    Outcome of classifying one line.

    identifier is only set for Function, Variable and TypeDeclaration;
    control_flow_kind only for ControlFlow. rule names the rule that
    matched (None for the Generic fallback).
    """
    category: Category = Category.GENERIC
    identifier: Optional[str] = None
    control_flow_kind: Optional[ControlFlowKind] = None
    rule: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "identifier": self.identifier,
            "control_flow_kind": self.control_flow_kind.value if self.control_flow_kind else None,
            "rule": self.rule,
        }


@dataclass(frozen=True)
class AggregateResult:
    """
    Tally of classifications over a span of lines.

    single_line holds the classification of the only line of a one-line
    span and stays None for longer spans.
    """
    function_count: int = 0
    variable_count: int = 0
    total_lines: int = 0
    single_line: Optional[ClassificationResult] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "function_count": self.function_count,
            "variable_count": self.variable_count,
            "total_lines": self.total_lines,
        }


@dataclass(frozen=True)
class InsertionPlan:
    """Text to insert at column 1 of insert_at_line, and where the caret goes (1-based)."""
    insert_at_line: int
    text: str
    new_caret_line: int
    new_caret_column: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "insert_at_line": self.insert_at_line,
            "text": self.text,
            "new_caret_line": self.new_caret_line,
            "new_caret_column": self.new_caret_column,
        }


@dataclass(frozen=True)
class Selection:
    """Host selection, 1-based and end-exclusive on the column."""
    start_line: int
    start_column: int
    end_line: int
    end_column: int

    @property
    def is_empty(self) -> bool:
        return self.start_line == self.end_line and self.start_column == self.end_column

    @classmethod
    def caret(cls, line: int, column: int = 1) -> "Selection":
        return cls(line, column, line, column)
