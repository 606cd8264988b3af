"""Configuration constants and .env loading.

WHY: Centralizes the few tunable values so they are easy to find and
override: the logging level, the selector the CLI extracts by default,
the output formats it produces, and the wrapper tag used while
rendering markup.

HOW: python-dotenv loads the .env file on import. Constants are
module-level values with environment-variable overrides.

RULES:
- The core engine reads nothing from here except RENDER_WRAPPER_TAG
  (through the markup renderer); everything else is CLI tooling
- All overridable values use the RICH_CONTENT_ prefix
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("RICH_CONTENT_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def resolve_log_level(name: str | None = None) -> int:
    """Map a level name ("DEBUG", "info", ...) to a logging constant.

    Unknown names fall back to WARNING rather than failing start-up.
    """
    level = logging.getLevelName((name or LOG_LEVEL).upper())
    return level if isinstance(level, int) else logging.WARNING


# ---------------------------------------------------------------------------
# Extraction and rendering
# ---------------------------------------------------------------------------

DEFAULT_SELECTOR = os.getenv("RICH_CONTENT_DEFAULT_SELECTOR", "body")
"""CSS selector the CLI extracts when --selector is not given."""

RENDER_WRAPPER_TAG = "div"
"""Temporary root element used while serializing a sequence with lxml."""

DEFAULT_FORMATS = [
    f.strip()
    for f in os.getenv("RICH_CONTENT_DEFAULT_FORMATS", "markup,text").split(",")
    if f.strip()
]
"""Formatter keys the CLI runs when --formats is not given."""
