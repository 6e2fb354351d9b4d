"""
Centralized configuration for the MCP proof-of-concept server.

All magic values, server identity, and constants in one place.
Supports environment variable overrides for deployment flexibility.
"""

from __future__ import annotations

import logging
import os
import sys

# -----------------------------------------------------------------------------
# Server Configuration
# -----------------------------------------------------------------------------

SERVER_NAME = "mcp-poc"
SERVER_VERSION = "0.1.0"
MCP_PROTOCOL_VERSION = "2024-11-05"

# -----------------------------------------------------------------------------
# HTTP Transport
# -----------------------------------------------------------------------------

HTTP_HOST = os.environ.get("MCP_POC_HOST", "127.0.0.1")
HTTP_PORT = int(os.environ.get("MCP_POC_PORT", "8000"))

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------

LOG_LEVEL = os.environ.get("MCP_POC_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """
    Route log records to stderr at the given level.

    Stdout is reserved: the stdio transport writes MCP frames there.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


# -----------------------------------------------------------------------------
# Operation Constants
# -----------------------------------------------------------------------------

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

GREETING_TEMPLATE = "Hello, {name}! Welcome to the MCP server."

# Weekday, month and AM/PM come from strftime; day and 12-hour clock are
# rendered without zero padding.
TIME_FORMAT = "{weekday}, {month} {day}, {year} at {hour}:{minute:02d}:{second:02d} {meridiem}"
