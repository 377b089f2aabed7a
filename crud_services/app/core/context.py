"""
Per-application state.

Every service owns one context object, created when the application
starts and stored on ``app.state.context``.  The context holds the
store connection and the lock that serializes all handler bodies; the
todo context additionally holds the write-through cache of the todo
table.  Endpoints receive the context through ``Depends(get_context)``.
"""

import sqlite3
import threading
from dataclasses import dataclass, field
from typing import Dict

from fastapi import Request

from crud_services.app.schemas.todo import TodoRead


@dataclass
class PelangganContext:
    """State of the customer service."""

    conn: sqlite3.Connection
    lock: threading.Lock = field(default_factory=threading.Lock)

    def close(self) -> None:
        with self.lock:
            self.conn.close()


@dataclass
class TodoContext:
    """State of the todo service.

    ``cache`` mirrors the whole ``todos`` table keyed by id.  It is only
    read or written while ``lock`` is held, and always after the
    matching store write has been committed.
    """

    conn: sqlite3.Connection
    lock: threading.Lock = field(default_factory=threading.Lock)
    cache: Dict[int, TodoRead] = field(default_factory=dict)

    def close(self) -> None:
        with self.lock:
            self.conn.close()
            self.cache.clear()


def get_context(request: Request):
    """FastAPI dependency returning the context of the running app."""
    return request.app.state.context
