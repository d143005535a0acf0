"""
Persistence boundary for users and todos.

Each store wraps one SQLAlchemy session handed to it by the caller, so the
components above never touch the engine or a global session.
"""
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from datetime import datetime
from typing import Optional, List

from .models import User, Todo
from .errors import DuplicateEmail


class UserStore:
    """Credential store. Email uniqueness is enforced by the `users` table."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def add(self, email: str, password_hash: str, name: str) -> User:
        """
        Insert a new user.

        Raises:
            DuplicateEmail: if the unique constraint on email rejects the row
        """
        user = User(email=email, password=password_hash, name=name)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateEmail() from e
        self.db.refresh(user)
        return user


class TaskStore:
    """Todo store. Mutations are conditional on both id and owner."""

    def __init__(self, db: Session):
        self.db = db

    def list_for_owner(self, user_id: str) -> List[Todo]:
        return self.db.query(Todo).filter(Todo.user_id == user_id).all()

    def get(self, task_id: str) -> Optional[Todo]:
        return self.db.query(Todo).filter(Todo.id == task_id).first()

    def add(self, user_id: str, title: str, description: Optional[str]) -> Todo:
        todo = Todo(user_id=user_id, title=title, description=description, completed=False)
        self.db.add(todo)
        self.db.commit()
        self.db.refresh(todo)
        return todo

    def update_owned(self, task_id: str, user_id: str, values: dict) -> Optional[Todo]:
        """
        Apply `values` with a single `UPDATE ... WHERE id = ? AND user_id = ?`.

        Returns:
            The refreshed todo, or None if no row matched
        """
        values = dict(values, updated_at=datetime.utcnow())
        matched = (
            self.db.query(Todo)
            .filter(Todo.id == task_id, Todo.user_id == user_id)
            .update(values, synchronize_session=False)
        )
        self.db.commit()
        if not matched:
            return None
        return self.get(task_id)

    def delete_owned(self, task_id: str, user_id: str) -> bool:
        """
        Delete with a single `DELETE ... WHERE id = ? AND user_id = ?`.

        Returns:
            True if a row was removed
        """
        removed = (
            self.db.query(Todo)
            .filter(Todo.id == task_id, Todo.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return removed > 0
