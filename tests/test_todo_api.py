import sqlite3
from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient

from crud_services.app.main import create_todo_app
from crud_services.app.services.todo_service import TodoService


def add(client, text):
    response = client.get("/api/add", params={"text": text})
    assert response.status_code == 200
    return response.json()


def store_rows(settings):
    conn = sqlite3.connect(settings.todo_database_url)
    try:
        rows = conn.execute("SELECT id, text, completed FROM todos ORDER BY id").fetchall()
    finally:
        conn.close()
    return [{"id": i, "text": t, "completed": bool(c)} for i, t, c in rows]


def test_index_is_served(todo_client):
    response = todo_client.get("/")
    assert response.status_code == 200
    assert "<h1>Todo</h1>" in response.text
    assert "/api/toggle" in todo_client.get("/app.js").text


def test_empty_list(todo_client):
    response = todo_client.get("/api/todos")
    assert response.status_code == 200
    assert response.json() == []


def test_add_returns_new_item(todo_client):
    todo = add(todo_client, "Beli susu")
    assert todo == {"id": todo["id"], "text": "Beli susu", "completed": False}
    assert todo_client.get("/api/todos").json() == [todo]


@pytest.mark.parametrize("params", [{}, {"text": ""}])
def test_add_requires_text(todo_client, params):
    response = todo_client.get("/api/add", params=params)
    assert response.status_code == 400
    assert todo_client.get("/api/todos").json() == []


def test_ids_increase(todo_client):
    first = add(todo_client, "a")
    second = add(todo_client, "b")
    assert second["id"] > first["id"]


def test_listing_is_ordered_by_id(todo_client):
    created = [add(todo_client, text) for text in ("c", "a", "b")]
    assert todo_client.get("/api/todos").json() == created


def test_toggle_twice_restores_original(todo_client, settings):
    todo = add(todo_client, "Cuci piring")
    once = todo_client.get("/api/toggle", params={"id": todo["id"]})
    assert once.status_code == 200
    assert once.json()["completed"] is True
    assert store_rows(settings)[0]["completed"] is True

    twice = todo_client.get("/api/toggle", params={"id": todo["id"]}).json()
    assert twice == todo
    assert store_rows(settings) == [todo]


def test_toggle_unknown_id_is_not_found(todo_client):
    response = todo_client.get("/api/toggle", params={"id": 12345})
    assert response.status_code == 404


@pytest.mark.parametrize("params", [{}, {"id": "abc"}])
def test_toggle_requires_valid_id(todo_client, params):
    assert todo_client.get("/api/toggle", params=params).status_code == 400


def test_delete_then_delete_again(todo_client, settings):
    keep = add(todo_client, "keep")
    gone = add(todo_client, "gone")
    first = todo_client.get("/api/delete", params={"id": gone["id"]})
    assert first.status_code == 204
    assert first.content == b""
    assert todo_client.get("/api/todos").json() == [keep]
    assert store_rows(settings) == [keep]

    second = todo_client.get("/api/delete", params={"id": gone["id"]})
    assert second.status_code == 204
    assert todo_client.get("/api/toggle", params={"id": gone["id"]}).status_code == 404


@pytest.mark.parametrize("params", [{}, {"id": "abc"}, {"id": "42"}])
def test_delete_ignores_unknown_or_malformed_ids(todo_client, params):
    add(todo_client, "x")
    assert todo_client.get("/api/delete", params=params).status_code == 204
    assert len(todo_client.get("/api/todos").json()) == 1


def test_cache_matches_store_after_mixed_operations(todo_client, settings):
    items = [add(todo_client, f"todo {n}") for n in range(6)]
    todo_client.get("/api/toggle", params={"id": items[0]["id"]})
    todo_client.get("/api/toggle", params={"id": items[3]["id"]})
    todo_client.get("/api/toggle", params={"id": items[3]["id"]})
    todo_client.get("/api/delete", params={"id": items[1]["id"]})
    todo_client.get("/api/delete", params={"id": items[4]["id"]})
    add(todo_client, "late")

    assert todo_client.get("/api/todos").json() == store_rows(settings)


def test_cache_is_loaded_from_store_on_startup(settings):
    with TestClient(create_todo_app(settings)) as client:
        first = add(client, "persisted")
        client.get("/api/toggle", params={"id": first["id"]})
        add(client, "second")

    with TestClient(create_todo_app(settings)) as client:
        todos = client.get("/api/todos").json()
    assert todos == store_rows(settings)
    assert todos[0] == {"id": first["id"], "text": "persisted", "completed": True}


def test_failed_store_write_leaves_cache_untouched(settings):
    app = create_todo_app(settings)
    with TestClient(app) as client:
        todo = add(client, "stay")
        app.state.context.conn.execute("DROP TABLE todos")

        assert client.get("/api/add", params={"text": "lost"}).status_code == 500
        response = client.get("/api/toggle", params={"id": todo["id"]})
        assert response.status_code == 500
        assert response.text == "database error"
        assert client.get("/api/todos").json() == [todo]


def test_concurrent_creates_get_unique_ids(todo_client, settings):
    ctx = todo_client.app.state.context

    with ThreadPoolExecutor(max_workers=8) as pool:
        created = list(pool.map(lambda n: TodoService.create_todo(ctx, f"job {n}"), range(100)))

    ids = [todo.id for todo in created]
    assert len(set(ids)) == 100
    assert sorted(ids) == [todo.id for todo in TodoService.list_todos(ctx)]
    assert [todo.model_dump() for todo in TodoService.list_todos(ctx)] == store_rows(settings)


def test_out_of_range_ids_are_ignored(todo_client):
    todo = add(todo_client, "safe")
    huge = "99999999999999999999"
    assert todo_client.get("/api/delete", params={"id": huge}).status_code == 204
    assert todo_client.get("/api/delete", params={"id": "-" + huge}).status_code == 204
    assert todo_client.get("/api/toggle", params={"id": huge}).status_code == 400
    assert todo_client.get("/api/todos").json() == [todo]


@pytest.mark.parametrize("raw", [" 1", "1_0", "1.0", "0x1"])
def test_toggle_rejects_non_decimal_ids(todo_client, raw):
    add(todo_client, "one")
    assert todo_client.get("/api/toggle", params={"id": raw}).status_code == 400
