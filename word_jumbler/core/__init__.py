"""Core state machine, engine and error types.

WHY: The core package is the stable heart of the jumbler, the FSM that
classifies characters, buffers word interiors and flushes them shuffled.
The CLI and HTTP layers are thin wrappers around it.

HOW: states.py defines the State enum and its transition table,
engine.py drives the execute-then-transition loop over a stream,
errors.py holds the exception taxonomy.

RULES:
- No I/O selection here; callers hand in an open source and sink
- No global state; every JumblerFSM owns its buffer and RNG
"""
