"""
Tests for the todo_service package.

- HTTP-level tests run the FastAPI app through TestClient on a sqlite file
- Component tests drive `auth` and `tasks` with the fake stores in `fakes.py`
"""
