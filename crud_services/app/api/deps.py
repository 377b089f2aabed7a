"""
Shared request-parameter helpers.

Identifiers arrive as raw query-string values so that the endpoints
decide how to treat missing or malformed ones instead of FastAPI
answering with a 422.
"""

from typing import Optional

from crud_services.app.services.query_builder import MAX_SQL_INT, parse_int


def parse_id(value: Optional[str]) -> Optional[int]:
    """Return ``value`` as an ``int``.

    ``None`` is returned if it is missing, not a plain decimal integer,
    or outside the signed 64-bit range no stored row can have.
    """
    number = parse_int(value)
    if number is None or not -MAX_SQL_INT - 1 <= number <= MAX_SQL_INT:
        return None
    return number
