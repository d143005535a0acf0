"""
FastAPI dependencies: store providers and the authorization gate.
"""
from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session
from typing import Optional
import logging

from .db import get_db
from .stores import UserStore, TaskStore
from .tokens import verify_token
from .errors import InvalidToken, Unauthenticated

logger = logging.getLogger(__name__)


def get_user_store(db: Session = Depends(get_db)) -> UserStore:
    return UserStore(db)


def get_task_store(db: Session = Depends(get_db)) -> TaskStore:
    return TaskStore(db)


def get_current_user_id(
    request: Request,
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
) -> str:
    """
    Resolve the caller's identity from `Authorization: Bearer <token>`.

    Missing headers, malformed headers and rejected tokens all surface as
    the same `Unauthenticated`; the distinguishing reason is only logged.
    On success the id is also attached to `request.state.user_id`.
    """
    if not authorization:
        logger.warning("Rejected request to %s: missing authorization header", request.url.path)
        raise Unauthenticated(reason="missing_header")

    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        logger.warning("Rejected request to %s: malformed authorization header", request.url.path)
        raise Unauthenticated(reason="malformed_header")

    try:
        user_id = verify_token(token)
    except InvalidToken as exc:
        logger.warning("Rejected request to %s: token %s", request.url.path, exc.reason)
        raise Unauthenticated(reason=exc.reason) from exc

    request.state.user_id = user_id
    return user_id
