"""
Pydantic schema definitions for API payloads.

Schemas are separated from the database rows so that the API
representation stays independent from persistence.
"""
