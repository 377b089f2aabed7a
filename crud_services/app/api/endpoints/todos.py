"""
Todo endpoints.

Like the customer service, every route is a ``GET`` with query
parameters.  Listing is served from the in-memory cache.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from crud_services.app.api.deps import parse_id
from crud_services.app.core.context import TodoContext, get_context
from crud_services.app.schemas.todo import TodoRead
from crud_services.app.services.todo_service import TodoService

router = APIRouter()


@router.get("/todos", response_model=List[TodoRead])
def list_todos(ctx: TodoContext = Depends(get_context)) -> List[TodoRead]:
    """Return every todo, ordered by id."""
    return TodoService.list_todos(ctx)


@router.get("/add", response_model=TodoRead)
def add_todo(
    text: str = Query(""),
    ctx: TodoContext = Depends(get_context),
) -> TodoRead:
    """Create a todo.  ``text`` must be non-empty."""
    if text == "":
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="text wajib diisi")
    return TodoService.create_todo(ctx, text)


@router.get("/toggle", response_model=TodoRead)
def toggle_todo(
    raw_id: Optional[str] = Query(None, alias="id"),
    ctx: TodoContext = Depends(get_context),
) -> TodoRead:
    """Flip the completion flag of a todo.

    Returns 400 if ``id`` is missing or not an integer and 404 if no
    todo has that id.
    """
    todo_id = parse_id(raw_id)
    if todo_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid id")
    todo = TodoService.toggle_todo(ctx, todo_id)
    if todo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="todo not found")
    return todo


@router.get("/delete", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_todo(
    raw_id: Optional[str] = Query(None, alias="id"),
    ctx: TodoContext = Depends(get_context),
) -> Response:
    """Delete a todo.  Unknown or malformed ids are ignored."""
    todo_id = parse_id(raw_id)
    if todo_id is not None:
        TodoService.delete_todo(ctx, todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
