"""
Exception handlers shared by both applications.

Store failures are not retried: any ``sqlite3.Error`` escaping a
service is logged with its traceback and answered with a plain-text
500 response.
"""

import logging
import sqlite3

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


async def database_error_handler(request: Request, exc: sqlite3.Error) -> PlainTextResponse:
    logger.error("Query error on %s %s", request.method, request.url.path, exc_info=exc)
    return PlainTextResponse("database error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the handlers above to ``app``."""
    app.add_exception_handler(sqlite3.Error, database_error_handler)
