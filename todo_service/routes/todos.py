"""
Todo endpoints. All of them sit behind the authorization gate.
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List

from .. import tasks
from ..dependencies import get_task_store, get_current_user_id
from ..schemas import TodoCreate, TodoUpdate, TodoOut, ErrorResponse
from ..stores import TaskStore

router = APIRouter(
    prefix="/todos",
    tags=["Todos"],
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.get("", response_model=List[TodoOut])
def list_todos(user_id: str = Depends(get_current_user_id), store: TaskStore = Depends(get_task_store)):
    return tasks.list_tasks(store, user_id)


@router.post(
    "",
    response_model=TodoOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def create_todo(
    payload: TodoCreate,
    user_id: str = Depends(get_current_user_id),
    store: TaskStore = Depends(get_task_store),
):
    return tasks.create_task(store, user_id, payload.title, payload.description)


@router.put(
    "/{todo_id}",
    response_model=TodoOut,
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_todo(
    todo_id: str,
    payload: TodoUpdate,
    user_id: str = Depends(get_current_user_id),
    store: TaskStore = Depends(get_task_store),
):
    # Only the keys the client actually sent take part in the update
    return tasks.update_task(store, user_id, todo_id, payload.model_dump(exclude_unset=True))


@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def delete_todo(
    todo_id: str,
    user_id: str = Depends(get_current_user_id),
    store: TaskStore = Depends(get_task_store),
):
    tasks.delete_task(store, user_id, todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
