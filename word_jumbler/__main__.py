"""Package entry point for ``python -m word_jumbler``.

WHY: Users run the jumbler as ``python -m word_jumbler -i in.txt`` or as
a filter in a shell pipeline (``cat in.txt | python -m word_jumbler``).

HOW: Delegates to the CLI's main(), which exits non-zero on failure.
"""

from word_jumbler.cli import main

if __name__ == "__main__":
    main()
