"""
AUTOCOMMENT MCP Server - Utilities Module

Contains: Target file resolution and path safety checks

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.
"""

from pathlib import Path
from typing import Optional

from .config import MAX_FILE_SIZE_BYTES
from .exceptions import FileAccessError


def is_path_safe(file_path: str, working_dir: str) -> bool:
    """
    Check that a path stays inside the working directory.

    Relative paths are joined onto working_dir; absolute paths are taken
    as given. Symlinks are resolved before the containment check, so a
    link inside the directory that points outside it is rejected.
    """
    if not file_path:
        return False

    try:
        root = Path(working_dir).resolve()
        target = (root / file_path).resolve()
        target.relative_to(root)
        return True
    except (OSError, ValueError):
        return False


def resolve_target_file(file_path: str, working_dir: Optional[str] = None) -> Path:
    """
    Resolve a file for annotation.

    With working_dir, the resolved file must lie inside it. Without one,
    relative paths are confined to the current directory and absolute
    paths are used as-is.
    Raises FileAccessError for escapes, missing files and oversized files.
    """
    base = working_dir or str(Path.cwd())
    path = Path(file_path)
    confined = working_dir is not None or not path.is_absolute()
    if confined and not is_path_safe(file_path, base):
        raise FileAccessError(f"Path escapes working directory: {file_path}")

    if not path.is_absolute():
        path = Path(base) / path

    try:
        path = path.resolve()
        if not path.is_file():
            raise FileAccessError(f"File not found: {file_path}")
        size = path.stat().st_size
    except OSError as e:
        raise FileAccessError(f"Cannot access {file_path}: {e}") from e

    if size > MAX_FILE_SIZE_BYTES:
        raise FileAccessError(f"File too large ({size} bytes, max {MAX_FILE_SIZE_BYTES}): {file_path}")
    return path
