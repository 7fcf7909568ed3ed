"""Cross-cutting request handling: access logging and fault recovery."""

import logging
import time

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


async def log_access(request: Request, call_next):
    """Log method, path, status and latency of every request."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000

    client = request.client.host if request.client else "-"
    logger.info(
        '"%s %s" from %s - %d in %.2fms',
        request.method,
        request.url.path,
        client,
        response.status_code,
        elapsed_ms,
    )
    return response


async def recover_faults(request: Request, call_next):
    """Turn an unhandled handler exception into a 500 so the process keeps serving."""
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error serving %s %s", request.method, request.url.path)
        return PlainTextResponse("Internal Server Error", status_code=500)


def install_middleware(app: FastAPI) -> None:
    """
    Wrap every route of ``app`` with recovery, then access logging.

    The last middleware added runs outermost, so access logging sees the
    500 produced by recovery.
    """

    app.middleware("http")(recover_faults)
    app.middleware("http")(log_access)
