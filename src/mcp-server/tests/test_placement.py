"""
Tests for autocomment.placement module.
"""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from autocomment.models import InsertionPlan, SourceLine
from autocomment.placement import plan, leading_indentation


class TestLeadingIndentation:
    """Tests for indentation detection."""

    @pytest.mark.parametrize("raw,expected", [
        ("    const x = 1;", "    "),
        ("\t\treturn;", "\t\t"),
        ("  \t mixed", "  \t "),
        ("noindent", ""),
        ("", ""),
        ("      ", ""),
    ])
    def test_indentation(self, raw, expected):
        """Test prefix extraction, blank lines included."""
        assert leading_indentation(raw) == expected

    def test_source_line(self):
        """Test the derived SourceLine fields."""
        line = SourceLine.from_raw("   let a = 1;  ")
        assert line.trimmed_text == "let a = 1;"
        assert line.leading_indentation == "   "
        assert line.raw_text == "   let a = 1;  "


class TestPlan:
    """Tests for plan()."""

    def test_indented_variable(self):
        """Test the four-space indented example."""
        result = plan(5, "    const x = 1;", "Variable: x")
        assert result.text == "    // Variable: x\n"
        assert result.insert_at_line == 5
        assert result.new_caret_line == 5
        assert result.new_caret_column == 4 + len("// Variable: x") + 1

    def test_no_indentation(self):
        """Test a flush-left line."""
        result = plan(1, "class Animal {", "Class: Animal")
        assert result == InsertionPlan(
            insert_at_line=1,
            text="// Class: Animal\n",
            new_caret_line=1,
            new_caret_column=len("// Class: Animal") + 1,
        )

    def test_blank_target_line(self):
        """Test that a whitespace-only line contributes no indentation."""
        result = plan(2, "        ", "TODO: Add description")
        assert result.text == "// TODO: Add description\n"

    def test_not_idempotent(self):
        """Test that two invocations give two identical insertions."""
        first = plan(3, "  foo()", "Function: foo")
        second = plan(3, "  foo()", "Function: foo")
        assert first == second
        assert first.text.count("\n") == 1
