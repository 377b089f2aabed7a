"""
Static front-end routes.

Each service serves a single page (``/``) and its script
(``/app.js``) verbatim from its own directory below the configured
static root.
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse


def build_static_router(static_dir: str) -> APIRouter:
    """Return a router serving ``index.html`` and ``app.js`` from ``static_dir``."""
    base = Path(static_dir)
    router = APIRouter()

    @router.get("/", include_in_schema=False)
    def index() -> FileResponse:
        return FileResponse(base / "index.html", media_type="text/html")

    @router.get("/app.js", include_in_schema=False)
    def app_js() -> FileResponse:
        return FileResponse(base / "app.js", media_type="application/javascript")

    return router
