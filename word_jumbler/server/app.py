"""FastAPI application exposing the jumbler over HTTP.

WHY: Clients that cannot pipe through the CLI can POST text and get the
jumbled text back, with the same byte-faithful semantics as the CLI.

HOW: POST /jumble reads the raw request body, decodes it with the
requested encoding through a TextIOWrapper, runs a fresh JumblerFSM
into a StringIO, and re-encodes the result. GET /health is a liveness
check.

RULES:
- Default encoding is latin-1 (each byte is one character)
- Unknown or non-text encodings and undecodable bodies are 400 errors
- Response length in bytes equals request length for single-byte encodings
- Run statistics are returned in X-Jumbler-* headers
"""

from __future__ import annotations

import io
import logging
from typing import Annotated, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import Response

from word_jumbler import __version__
from word_jumbler.config import DEFAULT_ENCODING, check_encoding
from word_jumbler.core.engine import JumblerFSM
from word_jumbler.core.errors import ReadFailure
from word_jumbler.server.models import ErrorResponse, HealthResponse

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Word Jumbler API",
    description=(
        "Shuffle the interior letters of every word in a text while keeping "
        "first and last letters, punctuation, digits and whitespace in place."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Endpoints: Jumble
# ---------------------------------------------------------------------------


@app.post(
    "/jumble",
    tags=["jumble"],
    summary="Jumble a text",
    description="Send the text as the raw request body; receive the jumbled text.",
    response_class=Response,
    responses={
        200: {"content": {"text/plain": {}}, "description": "Jumbled text"},
        400: {"model": ErrorResponse, "description": "Unknown encoding or undecodable body"},
    },
)
async def jumble(
    request: Request,
    seed: Annotated[
        Optional[int],
        Query(description="Seed for the shuffle RNG, for reproducible output."),
    ] = None,
    encoding: Annotated[
        str,
        Query(description="Encoding of the request and response bodies."),
    ] = DEFAULT_ENCODING,
) -> Response:
    try:
        check_encoding(encoding)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    body = await request.body()
    source = io.TextIOWrapper(io.BytesIO(body), encoding=encoding, newline="")
    sink = io.StringIO()

    try:
        stats = JumblerFSM(sink, seed=seed).run(source)
    except ReadFailure as exc:
        logger.warning("Rejected %d-byte body: %s", len(body), exc)
        raise HTTPException(status_code=400, detail=str(exc))

    return Response(
        content=sink.getvalue().encode(encoding),
        media_type="text/plain; charset={}".format(encoding),
        headers={
            "X-Jumbler-Words": str(stats.words_seen),
            "X-Jumbler-Jumbled": str(stats.words_jumbled),
        },
    )


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the word-jumbler-api console script."""
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
