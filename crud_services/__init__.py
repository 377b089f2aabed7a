"""
Top‑level package for the customer browser and todo services.

The applications live in the ``app`` subpackage and can be imported
with fully qualified names such as ``crud_services.app.main``.  A
small HTTP client for both services is provided in
``crud_services.client``.
"""

__all__ = []
