import pytest
from fastapi.testclient import TestClient

from crud_services.app.core.config import Settings
from crud_services.app.main import create_pelanggan_app, create_todo_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        log_level="WARNING",
        log_file="",
        pelanggan_database_url=str(tmp_path / "pelanggan.db"),
        todo_database_url=str(tmp_path / "todos.db"),
        seed_count=0,
    )


@pytest.fixture
def pelanggan_client(settings):
    """Customer service on an empty table."""
    app = create_pelanggan_app(settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def todo_client(settings):
    app = create_todo_app(settings)
    with TestClient(app) as client:
        yield client
