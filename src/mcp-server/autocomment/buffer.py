"""
AUTOCOMMENT MCP Server - Text Buffer Module

In-memory host for the auto comment action. Holds lines, caret and
selection, applies insertion plans, and loads/saves files with async I/O.

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.
"""

from pathlib import Path
from typing import List, Optional, Tuple

import aiofiles

from .config import EDIT_SOURCE, LINE_TERMINATOR, logger
from .exceptions import InvalidPositionError
from .models import InsertionPlan, Selection


class TextBuffer:
    """
    Line-based text model implementing the EditorHost port.

    Lines are stored without terminators; eol is restored on output.
    Positions are 1-based like editor hosts.
    """

    def __init__(self, lines: Optional[List[str]] = None, eol: str = "\n", writable: bool = True):
        self.lines: List[str] = list(lines) if lines else [""]
        self.eol = eol
        self.writable = writable
        self.selection: Selection = Selection.caret(1, 1)
        self.edit_count = 0

    @classmethod
    def from_text(cls, text: str, writable: bool = True) -> "TextBuffer":
        eol = "\r\n" if "\r\n" in text else "\n"
        return cls(text.split(eol), eol=eol, writable=writable)

    @property
    def text(self) -> str:
        return self.eol.join(self.lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def position(self) -> Tuple[int, int]:
        return self.selection.start_line, self.selection.start_column

    # =========================================================================
    # EditorHost port
    # =========================================================================
    def has_model(self) -> bool:
        return True

    def is_writable(self) -> bool:
        return self.writable

    def get_selection(self) -> Optional[Selection]:
        return self.selection

    def get_line_content(self, line_number: int) -> str:
        self._check_line(line_number)
        return self.lines[line_number - 1]

    def get_value_in_range(self, selection: Selection) -> str:
        self._check_line(selection.start_line)
        self._check_line(selection.end_line)

        start = selection.start_column - 1
        end = selection.end_column - 1
        if selection.start_line == selection.end_line:
            return self.lines[selection.start_line - 1][start:end]

        parts = [self.lines[selection.start_line - 1][start:]]
        parts.extend(self.lines[selection.start_line:selection.end_line - 1])
        parts.append(self.lines[selection.end_line - 1][:end])
        return "\n".join(parts)

    def apply_plan(self, plan: InsertionPlan) -> None:
        """Insert the plan text at column 1 of its line as one edit, then move the caret."""
        self._check_line(plan.insert_at_line)

        index = plan.insert_at_line - 1
        inserted = plan.text.split(LINE_TERMINATOR)
        # The last fragment is whatever follows the final terminator on the target line
        merged = inserted[:-1] + [inserted[-1] + self.lines[index]]
        self.lines[index:index + 1] = merged
        self.edit_count += 1
        logger.debug(f"[{EDIT_SOURCE}] inserted {len(inserted) - 1} line(s) at {plan.insert_at_line}")

        self.set_position(plan.new_caret_line, plan.new_caret_column)

    # =========================================================================
    # Caret / selection
    # =========================================================================
    def set_position(self, line: int, column: int) -> None:
        self._check_line(line)
        self.selection = Selection.caret(line, column)

    def set_selection(self, selection: Selection) -> None:
        self._check_line(selection.start_line)
        self._check_line(selection.end_line)
        self.selection = selection

    def select_lines(self, start_line: int, end_line: int) -> Selection:
        """Select whole lines start_line..end_line inclusive."""
        self._check_line(end_line)
        selection = Selection(start_line, 1, end_line, len(self.lines[end_line - 1]) + 1)
        self.set_selection(selection)
        return selection

    def _check_line(self, line_number: int) -> None:
        if not 1 <= line_number <= len(self.lines):
            raise InvalidPositionError(
                f"Line {line_number} out of range (1-{len(self.lines)})"
            )

    # =========================================================================
    # File I/O
    # =========================================================================
    @classmethod
    async def load(cls, path: Path) -> "TextBuffer":
        async with aiofiles.open(path, "r", encoding="utf-8", newline="") as f:
            content = await f.read()
        return cls.from_text(content)

    async def save(self, path: Path) -> None:
        async with aiofiles.open(path, "w", encoding="utf-8", newline="") as f:
            await f.write(self.text)
