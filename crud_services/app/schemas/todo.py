"""Pydantic schema for todo items."""

from pydantic import BaseModel, Field


class TodoRead(BaseModel):
    """A todo item as stored, cached and returned by the API."""

    id: int
    text: str = Field(..., examples=["Beli susu"])
    completed: bool = False
