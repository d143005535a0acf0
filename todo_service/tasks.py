"""
Task operations. Every mutation goes through `is_owner` before touching the
store, and the store write itself is conditional on the owner as well.
"""
from typing import Optional, List
import logging

from .models import Todo
from .stores import TaskStore
from .errors import Forbidden, TaskNotFound, ValidationError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "completed")


def is_owner(user_id: str, task: Todo) -> bool:
    return task.user_id == user_id


def _require_title(title: Optional[str]) -> str:
    if title is None or not title.strip():
        raise ValidationError("Title is required")
    return title


def _load_owned(store: TaskStore, user_id: str, task_id: str) -> Todo:
    task = store.get(task_id)
    if task is None:
        raise TaskNotFound()
    if not is_owner(user_id, task):
        logger.warning("Ownership check failed: user_id=%s task_id=%s", user_id, task_id)
        raise Forbidden("You do not have access to this todo")
    return task


def list_tasks(store: TaskStore, user_id: str) -> List[Todo]:
    return store.list_for_owner(user_id)


def create_task(store: TaskStore, user_id: str, title: Optional[str], description: Optional[str] = None) -> Todo:
    title = _require_title(title)
    return store.add(user_id=user_id, title=title, description=description)


def update_task(store: TaskStore, user_id: str, task_id: str, fields: dict) -> Todo:
    """
    Apply a partial update to a todo owned by `user_id`.

    Args:
        store: Task store
        user_id: Authenticated identity
        task_id: Todo to update
        fields: Any subset of title, description, completed. Keys that are
                absent leave the stored value unchanged.

    Returns:
        The updated todo

    Raises:
        TaskNotFound: if the todo does not exist
        Forbidden: if the todo belongs to someone else
        ValidationError: if title is blank or completed is not a boolean
    """
    task = _load_owned(store, user_id, task_id)

    values = {key: fields[key] for key in UPDATABLE_FIELDS if key in fields}
    if "title" in values:
        _require_title(values["title"])
    if "completed" in values and not isinstance(values["completed"], bool):
        raise ValidationError("Completed must be true or false")
    if not values:
        return task

    updated = store.update_owned(task_id, user_id, values)
    if updated is None:
        # Removed between the ownership check and the write
        raise TaskNotFound()
    return updated


def delete_task(store: TaskStore, user_id: str, task_id: str) -> None:
    _load_owned(store, user_id, task_id)
    if not store.delete_owned(task_id, user_id):
        raise TaskNotFound()
