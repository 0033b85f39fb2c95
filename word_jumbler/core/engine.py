"""Streaming jumbler engine: the execute-then-transition FSM.

WHY: Shuffling word interiors needs to know where a word ends, but the
input may be an endless pipe. The engine decides each character's fate
as soon as the *next* character is known, so it runs in a single pass
and never holds more than one word in memory.

HOW: JumblerFSM keeps the current State and the last character read.
For every new character it first executes the action of the current
state on the previous character, then stores the new character and
transitions. After the real stream ends a None sentinel goes through
the same loop, followed by one last execute, so a word ending exactly
at end of stream is still flushed.

Actions per state:
  START      no-op
  NON_ALPHA  write the character
  FIRST_CHAR write the character (first letter is never moved)
  NTH_CHAR   append the character to the pending buffer
  JUMBLE     shuffle the buffer interior, write buffer + boundary, clear

RULES:
- The pending buffer holds the word's letters after the first one, up to
  and including its last letter, never the boundary character
- The buffer's final entry (the word's last letter) is never shuffled
- The None sentinel is never written, so output length == input length
- The sink is flushed before every read, so output never waits on input
- Every sink write failure raises WriteFailure, every source failure
  raises ReadFailure; nothing is swallowed
"""

from __future__ import annotations

import io
import logging
import random
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

from word_jumbler.config import DEFAULT_READ_SIZE
from word_jumbler.core.errors import ReadFailure, WriteFailure
from word_jumbler.core.states import State, next_state

logger = logging.getLogger(__name__)


@dataclass
class RunStats:
    """Counters collected during one JumblerFSM.run() call.

    Attributes:
        chars_read: Characters consumed from the source (sentinel excluded).
        chars_written: Characters written to the sink.
        words_seen: Maximal alphabetic runs encountered.
        words_jumbled: Words with at least two interior letters to permute.
    """

    chars_read: int = 0
    chars_written: int = 0
    words_seen: int = 0
    words_jumbled: int = 0


class JumblerFSM:
    """Finite-state transducer that shuffles the interior of every word.

    WHY: One object owns the sink, the RNG, the pending buffer and the
    state, so a run is a plain sequential loop with no shared state.

    HOW: Construct with a writable text sink, then call run() with a
    readable text source. The sink is bound for the engine's lifetime;
    run() may be called again and starts from a fresh START state.

    Args:
        sink: Object with a ``write(str)`` method.
        rng: Object with a ``randint(a, b)`` method. Defaults to a new
             ``random.Random``.
        seed: Seed for a new ``random.Random``. Mutually exclusive with rng.
        read_size: Maximum characters requested per ``source.read()``.

    Raises:
        ValueError: If both rng and seed are given, or read_size < 1.
    """

    def __init__(
        self,
        sink: Any,
        rng: Optional[Any] = None,
        seed: Optional[int] = None,
        read_size: int = DEFAULT_READ_SIZE,
    ) -> None:
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both.")
        if read_size < 1:
            raise ValueError("read_size must be at least 1, got {}.".format(read_size))

        self._sink = sink
        self._rng = rng if rng is not None else random.Random(seed)
        self._read_size = read_size

        self.state = State.START
        self.lastchar: Optional[str] = None
        self._chars: List[str] = []
        self._stats = RunStats()

    def run(self, source: Any) -> RunStats:
        """Consume ``source`` to exhaustion and write the jumbled stream.

        Args:
            source: Object with a ``read(n)`` method returning ``str``
                    (empty string at end of stream).

        Returns:
            RunStats for this run.

        Raises:
            ReadFailure: The source raised while reading.
            WriteFailure: The sink raised while writing.
        """
        self.state = State.START
        self.lastchar = None
        self._chars.clear()
        self._stats = RunStats()

        for char in self._read_chars(source):
            self._execute()
            self.lastchar = char
            self.state = next_state(self.state, char)
        self._execute()
        self._flush()

        logger.debug(
            "Run finished: %d chars read, %d written, %d words (%d jumbled)",
            self._stats.chars_read,
            self._stats.chars_written,
            self._stats.words_seen,
            self._stats.words_jumbled,
        )
        return self._stats

    def _read_chars(self, source: Any) -> Iterator[Optional[str]]:
        """Yield every character of ``source``, then a single None.

        The sink is flushed before each read so everything decided so far
        is visible while the source blocks.
        """
        while True:
            self._flush()
            try:
                chunk = source.read(self._read_size)
            except (OSError, ValueError) as exc:
                raise ReadFailure(
                    "Failed to read input after {} characters: {}".format(
                        self._stats.chars_read, exc
                    )
                ) from exc
            if not chunk:
                break
            self._stats.chars_read += len(chunk)
            yield from chunk
        yield None

    def _execute(self) -> None:
        """Run the action of the current state on ``lastchar``."""
        state = self.state
        if state is State.START:
            return
        if state is State.NON_ALPHA:
            self._write(self.lastchar)
        elif state is State.FIRST_CHAR:
            self._stats.words_seen += 1
            self._write(self.lastchar)
        elif state is State.NTH_CHAR:
            self._chars.append(self.lastchar)
        elif state is State.JUMBLE:
            if self._jumble():
                self._stats.words_jumbled += 1
            self._write("".join(self._chars))
            self._write(self.lastchar)
            self._chars.clear()

    def _jumble(self) -> bool:
        """Shuffle the pending buffer in place, keeping its last entry.

        Partial Fisher-Yates over the interior letters. Returns True if
        there were at least two interior letters to permute.
        """
        chars = self._chars
        interior = len(chars) - 1
        if interior <= 1:
            return False
        for i in range(interior - 1):
            j = self._rng.randint(i, interior - 1)
            chars[i], chars[j] = chars[j], chars[i]
        return True

    def _flush(self) -> None:
        flush = getattr(self._sink, "flush", None)
        if flush is None:
            return
        try:
            flush()
        except (OSError, ValueError) as exc:
            raise WriteFailure(
                "Failed to flush output after {} characters: {}".format(
                    self._stats.chars_written, exc
                )
            ) from exc

    def _write(self, text: Optional[str]) -> None:
        # None is the end-of-stream sentinel and never reaches the sink
        if not text:
            return
        try:
            self._sink.write(text)
        except (OSError, ValueError) as exc:
            raise WriteFailure(
                "Failed to write output after {} characters: {}".format(
                    self._stats.chars_written, exc
                )
            ) from exc
        self._stats.chars_written += len(text)


def jumble_text(
    text: str,
    seed: Optional[int] = None,
    rng: Optional[Any] = None,
) -> str:
    """Jumble an in-memory string and return the result.

    Convenience wrapper for callers that already hold the whole text
    (HTTP requests, tests). Streams through the same engine as run().
    """
    sink = io.StringIO()
    JumblerFSM(sink, rng=rng, seed=seed).run(io.StringIO(text))
    return sink.getvalue()
