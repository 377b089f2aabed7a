import json
from unittest import mock

import requests

from crud_services.client import PelangganClient, TodoClient


def make_response(status_code, body=None, text=None):
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://testserver/api"
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = (text or "").encode("utf-8")
    return response


def make_session(response):
    session = mock.Mock(spec=requests.Session)
    session.get.return_value = response
    return session


def test_list_pelanggan_sends_query_and_drops_empty_filters():
    envelope = {"data": [], "total": 0, "filtered": 0, "page": 2, "limit": 5}
    session = make_session(make_response(200, envelope))
    client = PelangganClient(base_url="http://svc/", session=session)

    data, error = client.list_pelanggan(page=2, limit=5, search_nama="Budi")

    assert error is None
    assert data == envelope
    session.get.assert_called_once_with(
        "http://svc/api/data",
        params={"page": 2, "limit": 5, "sort": "id", "order": "asc", "search_nama": "Budi"},
        timeout=15,
    )


def test_add_pelanggan_reports_validation_error():
    session = make_session(make_response(400, {"detail": "nama dan alamat wajib diisi"}))
    client = PelangganClient(base_url="http://svc", session=session)

    data, error = client.add_pelanggan("", "Jl. A")

    assert data is None
    assert error == {"status_code": 400, "message": "nama dan alamat wajib diisi"}


def test_delete_returns_no_data():
    session = make_session(make_response(204))
    data, error = PelangganClient(base_url="http://svc", session=session).delete_pelanggan(7)
    assert (data, error) == (None, None)
    session.get.assert_called_once_with("http://svc/api/delete", params={"id": 7}, timeout=15)


def test_toggle_unknown_todo():
    session = make_session(make_response(404, {"detail": "todo not found"}))
    data, error = TodoClient(base_url="http://svc", session=session).toggle_todo(99)
    assert data is None
    assert error["status_code"] == 404
    assert error["message"] == "todo not found"


def test_server_error_uses_plain_text_body():
    session = make_session(make_response(500, text="database error"))
    data, error = TodoClient(base_url="http://svc", session=session).add_todo("x")
    assert data is None
    assert error == {"status_code": 500, "message": "database error"}


def test_connection_error_is_reported():
    session = mock.Mock(spec=requests.Session)
    session.get.side_effect = requests.ConnectionError("refused")
    todos, error = TodoClient(base_url="http://svc", session=session).list_todos()
    assert todos == []
    assert error == {"status_code": None, "message": "refused"}
