"""Word Jumbler: streaming interior-letter shuffler.

WHY: Text with shuffled word interiors ("Aoccdrnig to a rscheearch...") is
still readable, which makes it handy for demos, reading experiments and
test fixtures. Input can be arbitrarily large, so the transform has to run
as a single forward pass that never holds more than one word in memory.

HOW: Three layers: the core engine (a finite-state transducer over a
character stream), the CLI (file or stdin/stdout selection, exit codes),
and a small HTTP API. Each layer is independently testable.

RULES:
- The engine only sees a readable text source and a writable text sink
- First and last letters of every word stay in place
- Non-alphabetic characters never move
- Output length always equals input length
"""

from word_jumbler.core.engine import JumblerFSM, RunStats, jumble_text
from word_jumbler.core.errors import JumblerError, ReadFailure, WriteFailure

__version__ = "0.1.0"

__all__ = [
    "JumblerFSM",
    "RunStats",
    "jumble_text",
    "JumblerError",
    "ReadFailure",
    "WriteFailure",
]
