"""
Application package for the two services.

Both services share the same layout: configuration, database access
and logging live in ``core``, request/response models in ``schemas``,
business logic in ``services`` and HTTP routes in ``api``.  The
application factories are defined in ``main``.
"""

from .main import create_pelanggan_app, create_todo_app  # noqa: F401
