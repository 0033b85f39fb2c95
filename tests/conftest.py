"""Shared fixtures and helpers for the word_jumbler test suite.

WHY: Most engine tests check the same invariants (length, pass-through,
first/last letter fixpoints, interior multiset) against different inputs.
Centralizing the word splitter and the fake RNG/stream objects keeps the
test modules short and consistent.

HOW: Plain helper functions for the invariants, small stand-in classes
for RNGs and failing streams, and pytest fixtures exposing sample text.

RULES:
- Words are split with str.isalpha(), the same predicate the engine uses
- Fake RNGs are deterministic so exact outputs can be asserted
"""

import itertools
from collections import Counter
from typing import List, Tuple

import pytest


SAMPLE_PARAGRAPH = (
    "According to a researcher at Cambridge University, it doesn't matter "
    "in what order the letters in a word are, the only important thing is "
    "that the first and last letter be at the right place.\n"
    "Tabs\tand  double  spaces, digits 12345 and symbols #@! stay put."
)


def split_runs(text: str) -> List[Tuple[bool, str]]:
    """Split text into (is_word, run) pairs using str.isalpha()."""
    return [
        (is_word, "".join(group))
        for is_word, group in itertools.groupby(text, key=str.isalpha)
    ]


def assert_valid_jumble(original: str, jumbled: str) -> None:
    """Assert every jumbler invariant holds for one input/output pair."""
    assert len(jumbled) == len(original)

    for index, char in enumerate(original):
        if not char.isalpha():
            assert jumbled[index] == char, "non-letter moved at {}".format(index)

    in_runs = split_runs(original)
    out_runs = split_runs(jumbled)
    assert [w for w, _ in in_runs] == [w for w, _ in out_runs]

    for (is_word, before), (_, after) in zip(in_runs, out_runs):
        if not is_word:
            assert before == after
            continue
        assert after[0] == before[0]
        assert after[-1] == before[-1]
        assert Counter(after[1:-1]) == Counter(before[1:-1])
        if len(before) <= 3:
            assert after == before


class MaxRng:
    """RNG stand-in whose randint() always returns the upper bound."""

    def __init__(self):
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return b


class MinRng:
    """RNG stand-in whose randint() always returns the lower bound (no swaps)."""

    def randint(self, a, b):
        return a


class RecordingSink:
    """Sink that records every write call separately."""

    def __init__(self):
        self.writes = []

    def write(self, text):
        self.writes.append(text)
        return len(text)

    def getvalue(self):
        return "".join(self.writes)


class FailingSink(RecordingSink):
    """Sink that raises OSError once ``fail_after`` writes have succeeded."""

    def __init__(self, fail_after):
        super().__init__()
        self.fail_after = fail_after

    def write(self, text):
        if len(self.writes) >= self.fail_after:
            raise OSError(28, "No space left on device")
        return super().write(text)


class FailingSource:
    """Source that returns ``data`` in one chunk, then raises OSError."""

    def __init__(self, data):
        self._data = data
        self._served = False

    def read(self, size=-1):
        if not self._served:
            self._served = True
            return self._data
        raise OSError(5, "Input/output error")


@pytest.fixture
def sample_paragraph():
    return SAMPLE_PARAGRAPH

