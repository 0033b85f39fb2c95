"""State enum and transition table for the jumbler FSM.

WHY: The jumbler is a five-state machine whose only input is "is the
next character a letter?". Keeping the states and the table in one
place makes the machine easy to audit against its diagram.

HOW: State is a plain Enum. _TRANSITIONS maps (state, is_alpha) to the
next state; next_state() is a dict lookup.

RULES:
- START is only ever the initial state
- The end-of-stream sentinel (None) classifies as non-alphabetic
- No state is terminal; the stream ending drives termination
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Dict, Optional, Tuple


class State(Enum):
    """Current position of the FSM relative to the word being read."""

    START = auto()
    FIRST_CHAR = auto()
    NTH_CHAR = auto()
    JUMBLE = auto()
    NON_ALPHA = auto()


_TRANSITIONS: Dict[Tuple[State, bool], State] = {
    (State.START, True): State.FIRST_CHAR,
    (State.START, False): State.NON_ALPHA,
    (State.FIRST_CHAR, True): State.NTH_CHAR,
    (State.FIRST_CHAR, False): State.NON_ALPHA,
    (State.NTH_CHAR, True): State.NTH_CHAR,
    (State.NTH_CHAR, False): State.JUMBLE,
    (State.JUMBLE, True): State.FIRST_CHAR,
    (State.JUMBLE, False): State.NON_ALPHA,
    (State.NON_ALPHA, True): State.FIRST_CHAR,
    (State.NON_ALPHA, False): State.NON_ALPHA,
}


def is_alpha(char: Optional[str]) -> bool:
    """Classify one character; the None sentinel is never alphabetic."""
    return char is not None and char.isalpha()


def next_state(state: State, char: Optional[str]) -> State:
    """Return the state that follows ``state`` after reading ``char``.

    Args:
        state: The current FSM state.
        char: A single character, or None for end of stream.

    Returns:
        The next State according to the transition table.
    """
    return _TRANSITIONS[(state, is_alpha(char))]
