"""
Tests for autocomment.action module.

Tests cover:
- plan_for_caret / plan_for_selection with plain strings
- AutoCommentAction against TextBuffer and a bare host stub
- No-op conditions (no model, read-only)
- Stacked comments on repeated invocation
"""

import pytest
from pathlib import Path
from unittest.mock import MagicMock

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from autocomment.action import AutoCommentAction, plan_for_caret, plan_for_selection
from autocomment.buffer import TextBuffer
from autocomment.config import ACTION_ID, ACTION_LABEL
from autocomment.models import Selection


# =============================================================================
# Pure entry points
# =============================================================================
class TestPlanForCaret:
    """Tests for plan_for_caret."""

    def test_function_line(self):
        """Test commenting a function declaration."""
        result = plan_for_caret(1, 1, "function calculateSum(a, b) {")
        assert result.text == "// Function: calculateSum\n"
        assert result.insert_at_line == 1

    def test_caret_column_irrelevant(self):
        """Test that the caret column does not change the plan."""
        assert plan_for_caret(4, 1, "  let a = 1;") == plan_for_caret(4, 9, "  let a = 1;")

    def test_generic_line(self):
        """Test the TODO fallback."""
        assert plan_for_caret(2, 1, "    return a + b;").text == "    // TODO: Add description\n"


class TestPlanForSelection:
    """Tests for plan_for_selection."""

    def test_block(self):
        """Test the if-block selection."""
        text = "if (condition) {\n    doSomething();\n}"
        result = plan_for_selection(1, 1, text)
        assert result.text == "// Code block (3 lines)\n"

    def test_indentation_from_line_text(self):
        """Test that the start line provides the indentation."""
        text = "let a = 1;\n    let b = 2;"
        result = plan_for_selection(7, 5, text, "    let a = 1;")
        assert result.text == "    // Code block with 2 variables\n"
        assert result.insert_at_line == 7
        assert result.new_caret_column == 4 + len("// Code block with 2 variables") + 1

    def test_indentation_derived_at_column_one(self):
        """Test indentation taken from the selection when it starts at column 1."""
        result = plan_for_selection(1, 1, "  function a() {\n  }")
        assert result.text.startswith("  // Code block with 1 function")

    def test_no_indentation_mid_line_without_line_text(self):
        """Test that a mid-line selection without line text gets no indentation."""
        result = plan_for_selection(1, 3, "function a() {")
        assert result.text == "// Function: a\n"


# =============================================================================
# AutoCommentAction
# =============================================================================
class TestAutoCommentAction:
    """Tests for AutoCommentAction.run / run_and_apply."""

    def test_metadata(self):
        """Test registration metadata."""
        action = AutoCommentAction()
        assert action.id == ACTION_ID == "editor.action.autoComment"
        assert action.label == ACTION_LABEL

    def test_caret_on_function(self):
        """Test the function example through a buffer."""
        buffer = TextBuffer.from_text("function calculateSum(a, b) {\n    return a + b;\n}")
        buffer.set_position(1, 1)

        AutoCommentAction().run_and_apply(buffer)

        assert buffer.lines[0] == "// Function: calculateSum"
        assert buffer.lines[1] == "function calculateSum(a, b) {"
        assert buffer.position == (1, len("// Function: calculateSum") + 1)

    def test_caret_on_variable(self):
        """Test the variable example through a buffer."""
        buffer = TextBuffer.from_text('const userName = "John Doe";')
        AutoCommentAction().run_and_apply(buffer)
        assert buffer.lines[0] == "// Variable: userName"

    def test_selection(self):
        """Test the if-block selection through a buffer."""
        buffer = TextBuffer.from_text("if (condition) {\n    doSomething();\n}")
        buffer.set_selection(Selection(1, 1, 3, 2))

        AutoCommentAction().run_and_apply(buffer)

        assert buffer.lines[0] == "// Code block (3 lines)"
        assert buffer.line_count == 4

    def test_indented_caret(self):
        """Test that the comment keeps the target line's indentation."""
        buffer = TextBuffer.from_text("function f() {\n    const x = 1;\n}")
        buffer.set_position(2, 7)

        plan = AutoCommentAction().run_and_apply(buffer)

        assert buffer.lines[1] == "    // Variable: x"
        assert buffer.lines[2] == "    const x = 1;"
        assert buffer.position == (2, plan.new_caret_column)

    def test_run_does_not_mutate(self):
        """Test that run() only returns a plan."""
        buffer = TextBuffer.from_text("class Animal {\n}")
        before = list(buffer.lines)
        plan = AutoCommentAction().run(buffer)
        assert plan.text == "// Class: Animal\n"
        assert buffer.lines == before
        assert buffer.edit_count == 0

    def test_twice_stacks_comments(self):
        """Test that invoking twice inserts two comments."""
        buffer = TextBuffer.from_text("let a = 1;")
        action = AutoCommentAction()
        action.run_and_apply(buffer)
        buffer.set_position(2, 1)
        action.run_and_apply(buffer)
        assert buffer.lines == ["// Variable: a", "// Variable: a", "let a = 1;"]

    def test_no_host(self):
        """Test that a missing host is a no-op."""
        assert AutoCommentAction().run(None) is None
        assert AutoCommentAction().run_and_apply(None) is None

    def test_no_model(self):
        """Test that a host without a model is a no-op."""
        host = MagicMock()
        host.has_model.return_value = False

        assert AutoCommentAction().run_and_apply(host) is None
        host.get_line_content.assert_not_called()
        host.apply_plan.assert_not_called()

    def test_read_only(self):
        """Test that a read-only buffer is left untouched."""
        buffer = TextBuffer.from_text("let a = 1;", writable=False)
        assert AutoCommentAction().run_and_apply(buffer) is None
        assert buffer.lines == ["let a = 1;"]

    def test_host_without_selection(self):
        """Test a host that reports no selection at all."""
        host = MagicMock()
        host.has_model.return_value = True
        host.is_writable.return_value = True
        host.get_selection.return_value = None
        host.get_line_content.return_value = "def main():"

        plan = AutoCommentAction().run(host)

        host.get_line_content.assert_called_once_with(1)
        assert plan.text == "// Function: main\n"
