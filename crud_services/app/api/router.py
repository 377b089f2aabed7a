"""
Top‑level routers of both services.

Each service mounts its endpoint router under ``/api`` and the static
front end at the root.  When new endpoints are added, include their
routers here.
"""

from fastapi import APIRouter

from .endpoints import pelanggan, static, todos


def build_pelanggan_router(static_dir: str) -> APIRouter:
    router = APIRouter()
    router.include_router(static.build_static_router(static_dir))
    router.include_router(pelanggan.router, prefix="/api", tags=["pelanggan"])
    return router


def build_todo_router(static_dir: str) -> APIRouter:
    router = APIRouter()
    router.include_router(static.build_static_router(static_dir))
    router.include_router(todos.router, prefix="/api", tags=["todos"])
    return router
