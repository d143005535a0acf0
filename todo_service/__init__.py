"""
todo_service package

Core backend for the multi-user Todo REST service.
It includes:

- FastAPI application (`main.py`)
- SQLAlchemy models, stores and database integration (`models.py`, `stores.py`, `db.py`)
- Password hashing, registration and login (`auth.py`)
- JWT issuance and verification (`tokens.py`)
- Task operations with ownership checks (`tasks.py`)
- Pydantic schemas (`schemas.py`)
"""
