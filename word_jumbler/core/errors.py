"""Exception types raised by the jumbler engine.

WHY: Callers (CLI, HTTP API) need to tell a broken input stream apart
from a broken output stream so they can report the right thing, and
both apart from programming errors.

HOW: A small hierarchy under JumblerError. The engine wraps the
underlying OSError/ValueError with ``raise ... from exc`` so the
original cause stays on ``__cause__``.

RULES:
- Both failures are terminal for the current run; no retry, no salvage
- The engine only signals failure; formatting messages is the caller's job
"""


class JumblerError(Exception):
    """Base class for all jumbler errors."""


class ReadFailure(JumblerError):
    """Raised when the source stream fails mid-read."""


class WriteFailure(JumblerError):
    """Raised when the sink rejects a write.

    Applies to every write path, plain pass-through and the jumble
    flush alike.
    """
