"""
AUTOCOMMENT MCP Server - Exceptions Module

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.
"""


class AutocommentError(Exception):
    """Base class for errors reported back through the tool surface."""


class ToolInputError(AutocommentError):
    """A tool was called with missing or malformed arguments."""


class FileAccessError(AutocommentError):
    """A target file is missing, too large, or outside the working directory."""


class InvalidPositionError(AutocommentError):
    """A line number does not exist in the buffer."""
