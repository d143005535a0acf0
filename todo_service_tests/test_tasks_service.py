"""
Task component tests against the in-memory store.
"""
import pytest

from todo_service import tasks
from todo_service.errors import Forbidden, TaskNotFound, ValidationError

from .fakes import FakeTaskStore, FakeTodo


@pytest.fixture
def store():
    return FakeTaskStore()


def test_is_owner():
    todo = FakeTodo(user_id="alice", title="t")
    assert tasks.is_owner("alice", todo)
    assert not tasks.is_owner("bob", todo)


def test_create_sets_owner_and_defaults(store):
    todo = tasks.create_task(store, "alice", "Buy milk")
    assert todo.user_id == "alice"
    assert todo.completed is False
    assert todo.description is None
    assert tasks.list_tasks(store, "alice") == [todo]
    assert tasks.list_tasks(store, "bob") == []


@pytest.mark.parametrize("title", [None, "", "  \t"])
def test_create_rejects_missing_title(store, title):
    with pytest.raises(ValidationError):
        tasks.create_task(store, "alice", title)
    assert store.todos == {}


def test_update_writes_are_conditional_on_owner(store):
    todo = tasks.create_task(store, "alice", "Buy milk")
    tasks.update_task(store, "alice", todo.id, {"completed": True})
    assert store.writes == [("update", todo.id, "alice")]


def test_update_ignores_unknown_fields(store):
    todo = tasks.create_task(store, "alice", "Buy milk")
    updated = tasks.update_task(store, "alice", todo.id, {"user_id": "bob", "id": "x", "title": "Tea"})
    assert updated.user_id == "alice"
    assert updated.id == todo.id
    assert updated.title == "Tea"


def test_update_with_no_fields_returns_task_untouched(store):
    todo = tasks.create_task(store, "alice", "Buy milk")
    assert tasks.update_task(store, "alice", todo.id, {}) is todo
    assert store.writes == []


def test_update_rejects_non_boolean_completed(store):
    todo = tasks.create_task(store, "alice", "Buy milk")
    with pytest.raises(ValidationError):
        tasks.update_task(store, "alice", todo.id, {"completed": None})


def test_forbidden_never_reaches_the_store(store):
    todo = tasks.create_task(store, "alice", "Buy milk")
    with pytest.raises(Forbidden):
        tasks.update_task(store, "bob", todo.id, {"title": "mine"})
    with pytest.raises(Forbidden):
        tasks.delete_task(store, "bob", todo.id)
    assert store.writes == []
    assert store.todos[todo.id].title == "Buy milk"


def test_not_found_checked_before_ownership(store):
    with pytest.raises(TaskNotFound):
        tasks.update_task(store, "bob", "missing", {"completed": True})
    with pytest.raises(TaskNotFound):
        tasks.delete_task(store, "bob", "missing")


def test_task_removed_between_check_and_write(store):
    todo = tasks.create_task(store, "alice", "Buy milk")

    class VanishingStore(FakeTaskStore):
        def update_owned(self, task_id, user_id, values):
            return None

        def delete_owned(self, task_id, user_id):
            return False

    racing = VanishingStore()
    racing.todos[todo.id] = todo
    with pytest.raises(TaskNotFound):
        tasks.update_task(racing, "alice", todo.id, {"completed": True})
    with pytest.raises(TaskNotFound):
        tasks.delete_task(racing, "alice", todo.id)


def test_delete_twice(store):
    todo = tasks.create_task(store, "alice", "Buy milk")
    tasks.delete_task(store, "alice", todo.id)
    with pytest.raises(TaskNotFound):
        tasks.delete_task(store, "alice", todo.id)


def test_ownership_checked_before_field_validation(store):
    todo = tasks.create_task(store, "alice", "Buy milk")
    with pytest.raises(Forbidden):
        tasks.update_task(store, "bob", todo.id, {"title": ""})
    assert store.todos[todo.id].title == "Buy milk"


def test_missing_task_checked_before_field_validation(store):
    with pytest.raises(TaskNotFound):
        tasks.update_task(store, "alice", "missing", {"completed": None})
