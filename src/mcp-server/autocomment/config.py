"""
AUTOCOMMENT MCP Server - Configuration Module

Contains: Version, comment constants, action metadata, logger setup

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.
"""

import os
import sys
import logging

VERSION = "1.0.0"

# =============================================================================
# Comment Format
# =============================================================================
COMMENT_PREFIX = "// "
LINE_TERMINATOR = "\n"

# =============================================================================
# Action Metadata (host registration)
# =============================================================================
ACTION_ID = "editor.action.autoComment"
ACTION_LABEL = "Generate Comment"
ACTION_KEYBINDING = "Alt+G"
EDIT_SOURCE = "auto-comment"

# =============================================================================
# File Tool Limits
# =============================================================================
MAX_FILE_SIZE_BYTES = int(os.environ.get("AUTOCOMMENT_MAX_FILE_SIZE", 2 * 1024 * 1024))

# =============================================================================
# Logging
# =============================================================================
# stdout carries the MCP stdio stream, so logs go to stderr
LOG_LEVEL = os.environ.get("AUTOCOMMENT_LOG_LEVEL", "INFO").upper()

logger = logging.getLogger("autocomment")
if not logger.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter("%(asctime)s [%(name)s] %(levelname)s: %(message)s"))
    logger.addHandler(_handler)
logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
