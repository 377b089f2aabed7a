"""
Endpoint modules.

Each module defines an ``APIRouter`` for one service (or for the
static front end).  They are assembled in ``api/router.py``.
"""
