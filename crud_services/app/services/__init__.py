"""
Service layer.

Each service encapsulates the logic for one table.  Services receive
the application context explicitly and never reach for module-level
connections.
"""
