"""
AUTOCOMMENT MCP Server - Line Classifier Module

Classifies one trimmed line of source text into a syntactic category
(function, variable, type, import/export, control flow, generic) using
heuristic patterns covering C-like, Java/C#-like and Python-like code.

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.

Usage:
    from autocomment.classifier import classify

    result = classify("function calculateSum(a, b) {")
    # ClassificationResult(category=Category.FUNCTION, identifier='calculateSum', ...)

The heuristics are approximate on purpose. False positives and negatives
are expected; every rule is named so a misclassification can be traced
to the rule that produced it.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from .models import Category, ClassificationResult, ControlFlowKind


# =============================================================================
# Shared Fragments
# =============================================================================
# Words that never act as a type or a name in the typed/bare-call forms
_KEYWORDS = (
    r'if|else|elif|for|while|do|switch|case|try|catch|except|finally|with|return|'
    r'new|throw|raise|assert|lambda|await|yield|typeof|delete|'
    r'class|interface|struct|enum|import|export|from|require'
)
_RESERVED = r'(?:' + _KEYWORDS + r')'
_NOT_A_NAME = r'(?:' + _KEYWORDS + r'|function|async|def|static|public|private|protected)'
_VISIBILITY = r'(?:(?:public|private|protected)\s+)?'
_PRIMITIVES = r'(?:var|let|const|int|string|boolean|double|float|char)'

_I = re.IGNORECASE


def _any(patterns: Tuple[re.Pattern, ...]) -> Callable[[str], bool]:
    return lambda line: any(p.match(line) for p in patterns)


def _first_capture(patterns: Tuple[re.Pattern, ...]) -> Callable[[str], Optional[str]]:
    def extract(line: str) -> Optional[str]:
        for pattern in patterns:
            match = pattern.search(line)
            if match:
                return match.group(1)
        return None
    return extract


# =============================================================================
# Function
# =============================================================================
FUNCTION_PATTERNS = (
    re.compile(r'^function\s+\w+', _I),
    re.compile(r'^function\s*\(', _I),
    re.compile(r'^function\s*\*', _I),
    re.compile(r'^async\s+function\b', _I),
    re.compile(r'^export\s+(?:default\s+)?(?:async\s+)?function\b', _I),
    re.compile(r'^\w+\s*:\s*(?:async\s+)?function\b', _I),
    re.compile(r'^const\s+\w+\s*=\s*(?:async\s*)?\(', _I),
    # Bare definition form; a call statement ending in ';' is an invocation
    re.compile(r'^(?!' + _RESERVED + r'\b)\w+\s*\((?!.*;\s*$)', _I),
    # C-family method: [visibility] [static] ReturnType name(
    re.compile(r'^' + _VISIBILITY + r'(?:static\s+)?(?!' + _RESERVED + r'\b)[\w<>]+\s+(?!'
               + _RESERVED + r'\b)\w+\s*\(', _I),
    re.compile(r'^def\s+\w+\s*\(', _I),
)

FUNCTION_NAME_CAPTURES = (
    re.compile(r'\bfunction\b\s*\*?\s*(\w+)', _I),
    re.compile(r'^(\w+)\s*:\s*(?:async\s+)?function\b', _I),
    re.compile(r'\bconst\s+(\w+)\s*=', _I),
    re.compile(r'\b(?!' + _NOT_A_NAME + r'\b)(\w+)\s*\(', _I),
    re.compile(r'[\w<>]+\s+(?!' + _NOT_A_NAME + r'\b)(\w+)\s*\(', _I),
    re.compile(r'\bdef\s+(\w+)\s*\(', _I),
)

is_function_declaration = _any(FUNCTION_PATTERNS)
extract_function_name = _first_capture(FUNCTION_NAME_CAPTURES)


# =============================================================================
# Variable
# =============================================================================
VARIABLE_PATTERNS = (
    re.compile(r'^' + _PRIMITIVES + r'\s+\w+', _I),
    re.compile(r'^' + _VISIBILITY + r'(?:static\s+)?(?!' + _RESERVED + r'\b)[\w<>]+\s+\w+\s*[=;]', _I),
)

VARIABLE_NAME_CAPTURES = (
    re.compile(r'\b' + _PRIMITIVES + r'\s+(\w+)', _I),
    re.compile(r'[\w<>]+\s+(\w+)\s*[=;]', _I),
)

is_variable_declaration = _any(VARIABLE_PATTERNS)
extract_variable_name = _first_capture(VARIABLE_NAME_CAPTURES)


# =============================================================================
# Type Declaration
# =============================================================================
TYPE_PATTERNS = (
    re.compile(r'^(?:class|interface|struct|enum)\s+\w+', _I),
    re.compile(r'^' + _VISIBILITY + r'(?:abstract\s+)?class\s+\w+', _I),
)

TYPE_NAME_CAPTURES = (
    re.compile(r'\b(?:class|interface|struct|enum)\s+(\w+)', _I),
)

is_type_declaration = _any(TYPE_PATTERNS)
extract_type_name = _first_capture(TYPE_NAME_CAPTURES)


# =============================================================================
# Import / Export
# =============================================================================
IMPORT_EXPORT_PATTERNS = (
    re.compile(r'^(?:import|export|from|require)\s', _I),
    re.compile(r'^require\s*\(', _I),
)

is_import_export = _any(IMPORT_EXPORT_PATTERNS)


# =============================================================================
# Control Flow
# =============================================================================
CONTROL_FLOW_PATTERN = re.compile(
    r'^(else\s+if|if|else|for|while|do|switch|case|try|catch|finally)\s*[({]', _I
)

CONTROL_FLOW_KINDS = {
    'if': ControlFlowKind.CONDITIONAL,
    'for': ControlFlowKind.LOOP,
    'while': ControlFlowKind.LOOP,
    'switch': ControlFlowKind.SWITCH,
    'try': ControlFlowKind.ERROR_HANDLING,
}


def is_control_flow(line: str) -> bool:
    return CONTROL_FLOW_PATTERN.match(line) is not None


def get_control_flow_kind(line: str) -> ControlFlowKind:
    """Map the leading keyword to its kind; unlisted keywords are generic control flow."""
    match = CONTROL_FLOW_PATTERN.match(line)
    if not match:
        return ControlFlowKind.GENERIC
    keyword = re.sub(r'\s+', ' ', match.group(1).lower())
    return CONTROL_FLOW_KINDS.get(keyword, ControlFlowKind.GENERIC)


# =============================================================================
# Rule Chain
# =============================================================================
@dataclass(frozen=True)
class ClassificationRule:
    """A named (predicate, extractor) pair producing one category."""
    name: str
    category: Category
    predicate: Callable[[str], bool]
    extractor: Optional[Callable[[str], Any]] = None

    def build(self, line: str) -> ClassificationResult:
        value = self.extractor(line) if self.extractor else None
        if self.category is Category.CONTROL_FLOW:
            return ClassificationResult(self.category, control_flow_kind=value, rule=self.name)
        return ClassificationResult(self.category, identifier=value, rule=self.name)


# Order is the priority: the first matching rule wins
RULES: Tuple[ClassificationRule, ...] = (
    ClassificationRule("function", Category.FUNCTION, is_function_declaration, extract_function_name),
    ClassificationRule("variable", Category.VARIABLE, is_variable_declaration, extract_variable_name),
    ClassificationRule("type_declaration", Category.TYPE_DECLARATION, is_type_declaration, extract_type_name),
    ClassificationRule("import_export", Category.IMPORT_EXPORT, is_import_export),
    ClassificationRule("control_flow", Category.CONTROL_FLOW, is_control_flow, get_control_flow_kind),
)


def classify(trimmed_text: Optional[str]) -> ClassificationResult:
    """
    Classify a single line of source text.

    Args:
        trimmed_text: The line with surrounding whitespace removed. Leading
            whitespace is stripped again, so raw lines are accepted too.

    Returns:
        The result of the first matching rule, or a Generic result.
    """
    line = trimmed_text.strip() if isinstance(trimmed_text, str) else ""
    if not line:
        return ClassificationResult()

    for rule in RULES:
        if rule.predicate(line):
            return rule.build(line)
    return ClassificationResult()


def rule_names() -> Tuple[str, ...]:
    """Rule names in evaluation order."""
    return tuple(rule.name for rule in RULES)
