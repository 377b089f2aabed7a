"""
Service layer for todo items.

The todo table is mirrored in ``TodoContext.cache``.  Reads are served
from the cache only; every mutation commits to the store first and
updates the cache afterwards, both under the context lock.  If the
store write raises, the cache is left untouched, so the two never
diverge between requests.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from crud_services.app.core.context import TodoContext
from crud_services.app.schemas.todo import TodoRead

logger = logging.getLogger(__name__)


class TodoService:
    """Operations on the ``todos`` table and its in-memory mirror."""

    @classmethod
    def load_cache(cls, ctx: TodoContext) -> int:
        """Fill the cache from a full scan of the table.

        Returns the number of cached items.
        """
        with ctx.lock:
            rows = ctx.conn.execute("SELECT id, text, completed FROM todos ORDER BY id").fetchall()
            ctx.cache.clear()
            for row in rows:
                todo = cls._row_to_todo(row)
                ctx.cache[todo.id] = todo
            size = len(ctx.cache)
        logger.info("Loaded %d todos into cache", size)
        return size

    @classmethod
    def list_todos(cls, ctx: TodoContext) -> List[TodoRead]:
        """Return every cached todo ordered by id."""
        with ctx.lock:
            return [ctx.cache[todo_id] for todo_id in sorted(ctx.cache)]

    @classmethod
    def create_todo(cls, ctx: TodoContext, text: str) -> TodoRead:
        """Insert a todo, cache it and return it."""
        with ctx.lock:
            with ctx.conn:
                cursor = ctx.conn.execute(
                    "INSERT INTO todos (text, completed) VALUES (?, 0)",
                    (text,),
                )
            todo = TodoRead(id=cursor.lastrowid, text=text, completed=False)
            ctx.cache[todo.id] = todo
        logger.info("Created todo %s", todo.id)
        return todo

    @classmethod
    def toggle_todo(cls, ctx: TodoContext, todo_id: int) -> Optional[TodoRead]:
        """Flip the ``completed`` flag of a todo.

        Returns the updated todo, or ``None`` if the id is not cached.
        """
        with ctx.lock:
            current = ctx.cache.get(todo_id)
            if current is None:
                return None
            completed = not current.completed
            with ctx.conn:
                ctx.conn.execute(
                    "UPDATE todos SET completed = ? WHERE id = ?",
                    (int(completed), todo_id),
                )
            updated = current.model_copy(update={"completed": completed})
            ctx.cache[todo_id] = updated
        logger.info("Toggled todo %s to completed=%s", todo_id, completed)
        return updated

    @classmethod
    def delete_todo(cls, ctx: TodoContext, todo_id: int) -> bool:
        """Delete a todo from the store and the cache.

        Returns ``True`` if it existed.  Unknown ids are a no-op.
        """
        with ctx.lock:
            with ctx.conn:
                cursor = ctx.conn.execute("DELETE FROM todos WHERE id = ?", (todo_id,))
            existed = ctx.cache.pop(todo_id, None) is not None
        if cursor.rowcount:
            logger.info("Deleted todo %s", todo_id)
        return existed

    @staticmethod
    def _row_to_todo(row: sqlite3.Row) -> TodoRead:
        return TodoRead(id=row["id"], text=row["text"], completed=bool(row["completed"]))
