"""Configuration defaults and .env loading.

WHY: A handful of knobs (input encoding, read chunk size, log level,
shuffle seed) should be adjustable per machine or per shell session
without editing code or repeating CLI flags.

HOW: python-dotenv loads the .env file on import. Plain defaults are
module-level constants. Values that can be malformed (seed, read size,
log level) are parsed on demand by load_*() helpers that raise
ValueError with a message naming the variable, so callers can report
them instead of crashing at import time. check_encoding() validates
encoding names for both the CLI and the HTTP API.

RULES:
- Default encoding is latin-1: one byte is one character, bytes pass
  through unchanged
- Only text encodings are accepted (rot13, hex, base64 ... are rejected)
- Read size must be an integer >= 1
- Seed is optional; None means a fresh unseeded RNG per run
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import codecs
import logging
import os
from typing import Optional

from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()

DEFAULT_ENCODING = os.getenv("JUMBLER_ENCODING", "latin-1")
"""Encoding used to turn input bytes into characters (and back)."""

DEFAULT_READ_SIZE = 4096
"""Maximum number of characters requested from the source per read."""


def check_encoding(name: str) -> str:
    """Validate a text encoding name.

    RULES:
    - Unknown names raise ValueError
    - Codecs that are not str <-> bytes (rot13, hex, zlib) raise ValueError
    - Returns the name unchanged on success
    """
    try:
        info = codecs.lookup(name)
    except LookupError:
        raise ValueError("Unknown encoding '{}'.".format(name)) from None
    if not getattr(info, "_is_text_encoding", True):
        raise ValueError("Unknown encoding '{}': not a text encoding.".format(name))
    return name


def load_seed() -> Optional[int]:
    """Load the shuffle seed from the environment.

    RULES:
    - Unset or blank JUMBLER_SEED returns None
    - Raises ValueError if the value is not an integer
    """
    raw = os.getenv("JUMBLER_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            "JUMBLER_SEED must be an integer, got '{}'.".format(raw)
        ) from None


def load_read_size() -> int:
    """Load the read chunk size from JUMBLER_READ_SIZE.

    RULES:
    - Unset or blank returns DEFAULT_READ_SIZE
    - Raises ValueError if the value is not an integer >= 1
    """
    raw = os.getenv("JUMBLER_READ_SIZE", "").strip()
    if not raw:
        return DEFAULT_READ_SIZE
    try:
        size = int(raw)
    except ValueError:
        size = 0
    if size < 1:
        raise ValueError(
            "JUMBLER_READ_SIZE must be an integer >= 1, got '{}'.".format(raw)
        )
    return size


def load_log_level() -> int:
    """Load the logging level from JUMBLER_LOG_LEVEL (default WARNING).

    Raises ValueError if the name is not a standard logging level.
    """
    raw = os.getenv("JUMBLER_LOG_LEVEL", "").strip().upper() or "WARNING"
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ValueError(
            "JUMBLER_LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, "
            "CRITICAL, got '{}'.".format(raw)
        )
    return level
