"""
Pytest configuration for Todo service tests.

Points the service at a throwaway sqlite file before the app is imported.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test_todo.db")

import pytest
from fastapi.testclient import TestClient

from todo_service.main import app
from todo_service.db import Base, engine


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture(autouse=True)
def reset_database():
    # Drop all tables and recreate them before each test
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    app.dependency_overrides.clear()
