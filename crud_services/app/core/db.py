"""
SQLite integration for both services.

Each service keeps exactly one connection open for its whole lifetime.
``open_database`` creates that connection, and the ``init_*_db``
functions create the schema idempotently.  The customer table is
seeded with synthetic rows the first time it is found empty.
"""

import logging
import os
import sqlite3

from crud_services.app.services.seed import seed_pelanggan

logger = logging.getLogger(__name__)

PELANGGAN_SCHEMA = """
CREATE TABLE IF NOT EXISTS pelanggan (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    nama TEXT,
    alamat TEXT
);
CREATE INDEX IF NOT EXISTS idx_nama ON pelanggan(nama);
CREATE INDEX IF NOT EXISTS idx_alamat ON pelanggan(alamat);
"""

TODO_SCHEMA = """
CREATE TABLE IF NOT EXISTS todos (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    text TEXT NOT NULL,
    completed INTEGER NOT NULL DEFAULT 0
);
"""


def get_database_path(db_url: str) -> str:
    """Resolve ``db_url`` to an absolute path.

    Absolute paths are returned unchanged; relative ones are resolved
    against the current working directory.  The special name
    ``:memory:`` is passed through as is.
    """
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    return os.path.abspath(db_url)


def open_database(db_url: str) -> sqlite3.Connection:
    """Open the long-lived connection of a service.

    The connection is shared by the worker threads that serve requests,
    so thread affinity checks are disabled; callers serialize access
    with the context lock.  Rows are returned as ``sqlite3.Row`` for
    access by column name.  WAL journaling with ``synchronous=NORMAL``
    keeps writes durable without an fsync per commit.
    """
    db_path = get_database_path(db_url)
    conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA synchronous=NORMAL")
    logger.info("Opened database %s", db_path)
    return conn


def init_pelanggan_db(conn: sqlite3.Connection, seed_count: int = 1000) -> None:
    """Create the customer table and indexes, seeding it when empty."""
    conn.executescript(PELANGGAN_SCHEMA)
    conn.commit()

    (count,) = conn.execute("SELECT COUNT(*) FROM pelanggan").fetchone()
    if count == 0 and seed_count > 0:
        seed_pelanggan(conn, count=seed_count)


def init_todo_db(conn: sqlite3.Connection) -> None:
    """Create the todo table if it does not exist."""
    conn.executescript(TODO_SCHEMA)
    conn.commit()
