"""
API package containing the routers of both services.

``router`` exposes one aggregated router per service; endpoint modules
live in ``endpoints``.
"""
