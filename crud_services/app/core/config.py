"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so both
services start without any configuration at all.  Tests construct a
``Settings`` instance explicitly and pass it to the application
factories instead of touching the environment.
"""

import os
from dataclasses import dataclass
from pathlib import Path

# Front-end files shipped with the package.
DEFAULT_STATIC_DIR = str(Path(__file__).resolve().parent.parent / "static")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "CRUD Services")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file; console logging is always enabled.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    pelanggan_port: int = int(os.getenv("PELANGGAN_PORT", "8080"))
    todo_port: int = int(os.getenv("TODO_PORT", "8081"))

    # Paths of the SQLite files.  Relative paths are resolved against
    # the current working directory by the ``db`` module.
    pelanggan_database_url: str = os.getenv("PELANGGAN_DATABASE_URL", "data.db")
    todo_database_url: str = os.getenv("TODO_DATABASE_URL", "todos.db")

    # Number of synthetic customers inserted when the table is empty.
    seed_count: int = int(os.getenv("SEED_COUNT", "1000"))

    static_dir: str = os.getenv("STATIC_DIR", DEFAULT_STATIC_DIR)


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
