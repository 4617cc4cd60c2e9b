"""
AUTOCOMMENT MCP Server

Heuristic comment generation: classify a line or selection, synthesize a
short description, and plan its insertion above the code.

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.
"""

from .config import VERSION
from .models import (
    Category, ControlFlowKind, SourceLine, ClassificationResult,
    AggregateResult, InsertionPlan, Selection
)
from .classifier import classify
from .aggregator import aggregate
from .synthesizer import synthesize
from .placement import plan
from .action import AutoCommentAction, plan_for_caret, plan_for_selection

__version__ = VERSION

__all__ = [
    "Category", "ControlFlowKind", "SourceLine", "ClassificationResult",
    "AggregateResult", "InsertionPlan", "Selection",
    "classify", "aggregate", "synthesize", "plan",
    "AutoCommentAction", "plan_for_caret", "plan_for_selection",
]
