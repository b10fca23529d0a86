from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from ..models import Todo
from ..repositories import TodoRepository, parse_todo_id
from ..schemas import TodoCreate, TodoUpdate

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
)

_ERROR_RESPONSES = {
    400: {"description": "Invalid UUID format or invalid request body"},
    404: {"description": "Todo not found"},
    500: {"description": "Failed to save todos"},
}


def _get_repo(request: Request) -> TodoRepository:
    """
    Dependency returning the repository created at application startup.
    """
    return request.app.state.repository


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[Todo],
    summary="List Todos",
    description="Return every todo in insertion order.",
)
def list_todos(repo: TodoRepository = Depends(_get_repo)) -> List[Todo]:
    """
    List all todos.
    """
    return repo.list()


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=Todo,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description=(
        "Create a new Todo item. The server assigns 'id' and 'created_at'; "
        "client-supplied values for those fields are ignored."
    ),
    responses={
        201: {"description": "Todo created successfully"},
        400: _ERROR_RESPONSES[400],
        500: _ERROR_RESPONSES[500],
    },
)
def create_todo(payload: TodoCreate, repo: TodoRepository = Depends(_get_repo)) -> Todo:
    """
    Create a new Todo.
    """
    return repo.create(payload)


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}",
    response_model=Todo,
    summary="Get Todo",
    description="Get a single Todo item by ID.",
    responses={
        200: {"description": "Todo found"},
        400: _ERROR_RESPONSES[400],
        404: _ERROR_RESPONSES[404],
    },
)
def get_todo(todo_id: str, repo: TodoRepository = Depends(_get_repo)) -> Todo:
    """
    Retrieve a single Todo item by its ID.
    """
    return repo.get(parse_todo_id(todo_id))


# PUBLIC_INTERFACE
@router.put(
    "/{todo_id}",
    response_model=Todo,
    summary="Update Todo",
    description=(
        "Partially update a Todo item. Only fields present in the body are changed; "
        "setting 'completed' also sets or clears 'completed_at'."
    ),
    responses={
        200: {"description": "Todo updated"},
        **_ERROR_RESPONSES,
    },
)
def update_todo(todo_id: str, payload: TodoUpdate, repo: TodoRepository = Depends(_get_repo)) -> Todo:
    """
    Partial update of a Todo item.
    """
    return repo.update(parse_todo_id(todo_id), payload)


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete Todo",
    description="Delete a Todo item by ID.",
    responses={
        204: {"description": "Todo deleted"},
        **_ERROR_RESPONSES,
    },
)
def delete_todo(todo_id: str, repo: TodoRepository = Depends(_get_repo)) -> Response:
    """
    Delete a Todo. Returns 204 on success, 404 if not found.
    """
    repo.delete(parse_todo_id(todo_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
