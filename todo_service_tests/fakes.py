"""
In-memory stand-ins for UserStore and TaskStore.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional
import uuid

from todo_service.errors import DuplicateEmail


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class FakeUser:
    email: str
    password: str
    name: str
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class FakeTodo:
    user_id: str
    title: str
    description: Optional[str] = None
    completed: bool = False
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)


class FakeUserStore:
    def __init__(self):
        self.users: Dict[str, FakeUser] = {}

    def get(self, user_id: str) -> Optional[FakeUser]:
        return self.users.get(user_id)

    def get_by_email(self, email: str) -> Optional[FakeUser]:
        return next((u for u in self.users.values() if u.email == email), None)

    def add(self, email: str, password_hash: str, name: str) -> FakeUser:
        if self.get_by_email(email):
            raise DuplicateEmail()
        user = FakeUser(email=email, password=password_hash, name=name)
        self.users[user.id] = user
        return user


class FakeTaskStore:
    """
    Records every conditional write so tests can assert the owner was part
    of the WHERE clause.
    """

    def __init__(self):
        self.todos: Dict[str, FakeTodo] = {}
        self.writes: List[tuple] = []

    def list_for_owner(self, user_id: str) -> List[FakeTodo]:
        return [t for t in self.todos.values() if t.user_id == user_id]

    def get(self, task_id: str) -> Optional[FakeTodo]:
        return self.todos.get(task_id)

    def add(self, user_id: str, title: str, description: Optional[str]) -> FakeTodo:
        todo = FakeTodo(user_id=user_id, title=title, description=description)
        self.todos[todo.id] = todo
        return todo

    def update_owned(self, task_id: str, user_id: str, values: dict) -> Optional[FakeTodo]:
        self.writes.append(("update", task_id, user_id))
        todo = self.todos.get(task_id)
        if todo is None or todo.user_id != user_id:
            return None
        for key, value in values.items():
            setattr(todo, key, value)
        todo.updated_at = datetime.utcnow()
        return todo

    def delete_owned(self, task_id: str, user_id: str) -> bool:
        self.writes.append(("delete", task_id, user_id))
        todo = self.todos.get(task_id)
        if todo is None or todo.user_id != user_id:
            return False
        del self.todos[task_id]
        return True
