"""HTTP API for the word jumbler.

WHY: Tools that cannot spawn a subprocess (web front-ends, workflow
automation) still want jumbled text. A tiny HTTP service exposes the
same engine over POST.

HOW: app.py defines the FastAPI app, models.py the pydantic response
schemas. Run with ``word-jumbler-api`` or ``uvicorn word_jumbler.server.app:app``.

RULES:
- One fresh engine per request, no state shared between requests
- Request and response bodies are raw bytes in the requested encoding
"""
