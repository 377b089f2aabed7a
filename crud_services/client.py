"""HTTP clients for the customer and todo services.

Both services expose their operations as ``GET`` requests with query
parameters.  The clients below wrap those endpoints with the
``requests`` library:

* :class:`PelangganClient` – :meth:`~PelangganClient.list_pelanggan`,
  :meth:`~PelangganClient.add_pelanggan`,
  :meth:`~PelangganClient.delete_pelanggan`.
* :class:`TodoClient` – :meth:`~TodoClient.list_todos`,
  :meth:`~TodoClient.add_todo`, :meth:`~TodoClient.toggle_todo`,
  :meth:`~TodoClient.delete_todo`.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is ``None`` and ``error`` is a dictionary
with keys ``status_code`` and ``message``.  Failures are logged and
never raised.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class _BaseClient:
    """Shared request handling for both service clients."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Root URL of the service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _get(self, path: str, params: Dict[str, Any] | None = None) -> Result:
        """Send a ``GET`` request and decode the JSON body, if any.

        Args:
            path: Path relative to :attr:`base_url` (e.g. ``/api/data``).
            params: Query parameters; ``None`` values are dropped.
        """
        url = f"{self.base_url}{path}"
        query = {k: v for k, v in (params or {}).items() if v is not None}
        try:
            logger.debug("Sending GET request to %s", url)
            response = self.session.get(url, params=query, timeout=self.timeout)
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}


class PelangganClient(_BaseClient):
    """Client for the customer browser service."""

    def list_pelanggan(
        self,
        *,
        page: int = 1,
        limit: int = 10,
        sort: str = "id",
        order: str = "asc",
        search_nama: Optional[str] = None,
        search_alamat: Optional[str] = None,
    ) -> Result:
        """Fetch one page of customers.

        Returns the decoded ``{data, total, filtered, page, limit}``
        envelope.
        """
        return self._get(
            "/api/data",
            {
                "page": page,
                "limit": limit,
                "sort": sort,
                "order": order,
                "search_nama": search_nama,
                "search_alamat": search_alamat,
            },
        )

    def add_pelanggan(self, nama: str, alamat: str) -> Result:
        """Create a customer and return the stored record."""
        return self._get("/api/add", {"nama": nama, "alamat": alamat})

    def delete_pelanggan(self, pelanggan_id: int) -> Result:
        """Delete a customer.  ``data`` is always ``None``."""
        return self._get("/api/delete", {"id": pelanggan_id})


class TodoClient(_BaseClient):
    """Client for the todo service."""

    def list_todos(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._get("/api/todos")
        return data or [], error

    def add_todo(self, text: str) -> Result:
        return self._get("/api/add", {"text": text})

    def toggle_todo(self, todo_id: int) -> Result:
        """Flip the completion flag; ``error["status_code"]`` is 404 for unknown ids."""
        return self._get("/api/toggle", {"id": todo_id})

    def delete_todo(self, todo_id: int) -> Result:
        return self._get("/api/delete", {"id": todo_id})
