"""Command-line interface for the word jumbler.

WHY: The jumbler is mostly used as a Unix filter (``cat essay.txt |
python -m word_jumbler``) or on named files. The CLI is the collaborator
that picks the source and sink, hands them to the engine, and maps every
failure to an exit status.

HOW: argparse accepts optional input/output paths, a seed and an
encoding. Stdout is rewrapped as text with the chosen encoding and no
newline translation; stdin is read through AvailableTextReader so
piped input is processed as it arrives. Files are opened the same way.
The output file is created before the input file is opened. Errors go
to stderr as ``Error: ...`` lines.

RULES:
- Default input is stdin, default output is stdout
- Default encoding is latin-1: each byte is one character and every
  byte is written back unchanged (only reordered within words)
- --encoding utf-8 switches to codepoint-oriented jumbling
- Newlines are never translated
- Exit codes: 0 = success, 1 = open/read/write/config error, 130 = Ctrl-C
- Python 3.9 compatible: no match/case, no X | Y unions
"""

from __future__ import annotations

import argparse
import codecs
import contextlib
import io
import logging
import sys
from typing import Any, List, Optional

from word_jumbler import __version__
from word_jumbler.config import (
    DEFAULT_ENCODING,
    DEFAULT_READ_SIZE,
    check_encoding,
    load_log_level,
    load_read_size,
    load_seed,
)
from word_jumbler.core.engine import JumblerFSM
from word_jumbler.core.errors import JumblerError

logger = logging.getLogger(__name__)


def _error(msg: str) -> None:
    """Print an error message to stderr so stdout stays clean for output."""
    print("Error: {}".format(msg), file=sys.stderr, flush=True)


def _wrap_std_stream(stream: Any, encoding: str, stack: contextlib.ExitStack) -> Any:
    """Rewrap a standard stream's binary buffer with ``encoding``.

    WHY: sys.stdin/sys.stdout decode with the locale encoding and
    translate newlines. Byte-faithful output needs control over both.

    HOW: Builds a TextIOWrapper around ``stream.buffer`` and registers a
    detach on the exit stack so the real standard stream is never closed.
    Streams without a binary buffer (already replaced by the caller) are
    returned unchanged.
    """
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        return stream

    stream.flush()
    wrapper = io.TextIOWrapper(buffer, encoding=encoding, newline="", write_through=True)

    def _release() -> None:
        wrapper.flush()
        wrapper.detach()

    stack.callback(_release)
    return wrapper


class AvailableTextReader:
    """Text source that returns whatever input is available, without waiting.

    WHY: TextIOWrapper.read(n) on a pipe blocks until n characters have
    arrived, so an interactive ``word_jumbler`` would print nothing until
    EOF. Pipes should behave like the line they were fed.

    HOW: Each read() does one ``read1()`` on the binary buffer and feeds
    the bytes through an incremental decoder, which carries partial
    multi-byte sequences over to the next read.

    RULES:
    - Never translates newlines
    - Returns "" only at end of stream
    - A truncated multi-byte sequence at EOF raises UnicodeDecodeError
    """

    def __init__(self, buffer: Any, encoding: str) -> None:
        self._read = getattr(buffer, "read1", buffer.read)
        self._decoder = codecs.getincrementaldecoder(encoding)()
        self._eof = False

    def read(self, size: int = -1) -> str:
        if size is None or size < 1:
            size = DEFAULT_READ_SIZE
        while not self._eof:
            data = self._read(size)
            if not data:
                self._eof = True
                return self._decoder.decode(b"", final=True)
            text = self._decoder.decode(data)
            if text:
                return text
        return ""


def _stdin_source(encoding: str) -> Any:
    """Wrap stdin's binary buffer; text-only replacements are used as-is."""
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        return sys.stdin
    return AvailableTextReader(buffer, encoding)


def _run(args: argparse.Namespace) -> None:
    """Open the streams, run the engine, and map failures to exit codes."""
    try:
        check_encoding(args.encoding)
        seed = args.seed if args.seed is not None else load_seed()
        read_size = load_read_size()
    except ValueError as e:
        _error(str(e))
        sys.exit(1)

    with contextlib.ExitStack() as stack:
        # Output file is created before the input is opened
        if args.output_file:
            try:
                sink = stack.enter_context(
                    open(args.output_file, "w", encoding=args.encoding, newline="")
                )
            except OSError as e:
                _error("Cannot create output file '{}': {}".format(
                    args.output_file, e.strerror or e))
                sys.exit(1)
        else:
            sink = _wrap_std_stream(sys.stdout, args.encoding, stack)

        if args.input_file:
            try:
                source = stack.enter_context(
                    open(args.input_file, "r", encoding=args.encoding, newline="")
                )
            except OSError as e:
                _error("Cannot open input file '{}': {}".format(
                    args.input_file, e.strerror or e))
                sys.exit(1)
        else:
            source = _stdin_source(args.encoding)

        fsm = JumblerFSM(sink, seed=seed, read_size=read_size)
        try:
            stats = fsm.run(source)
        except JumblerError as e:
            _error(str(e))
            sys.exit(1)

    logger.info(
        "Jumbled %d of %d words (%d characters)",
        stats.words_jumbled,
        stats.words_seen,
        stats.chars_written,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separate from main() so tests can inspect the parser directly.
    """
    parser = argparse.ArgumentParser(
        prog="word_jumbler",
        description="Shuffle the interior letters of every word, keeping the "
                    "first and last letters and all non-letters in place.",
    )

    parser.add_argument(
        "-i", "--input-file",
        default=None,
        help="File to read (default: standard input).",
    )

    parser.add_argument(
        "-o", "--output-file",
        default=None,
        help="File to create and write (default: standard output).",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the shuffle RNG, for reproducible output "
             "(default: $JUMBLER_SEED, else random).",
    )

    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help="Character encoding of input and output (default: %(default)s, "
             "which treats every byte as one character).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log run statistics to stderr.",
    )

    parser.add_argument(
        "-V", "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        level = logging.DEBUG if args.verbose else load_log_level()
    except ValueError as e:
        _error(str(e))
        sys.exit(1)

    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        _run(args)
    except KeyboardInterrupt:
        _error("Cancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
