"""
Event logger utility for authentication events.

Writes one line per event to stdout and, when LOG_DIR is configured, to
auth_events.log. Passwords are never passed in and never written.
"""
from datetime import datetime
from fastapi import Request
from typing import Optional
import sys
import logging
import os

from ..config import settings

logger = logging.getLogger(__name__)


ALLOWED_EVENT_TYPES = {
    "register",
    "login_success",
    "login_failure",
    "profile_lookup",
}


def _configure_handlers() -> None:
    if logger.handlers:
        return
    logger.addHandler(logging.StreamHandler(sys.stdout))
    if settings.LOG_DIR:
        # Continue with stdout only if the directory cannot be created
        try:
            os.makedirs(settings.LOG_DIR, exist_ok=True)
            logger.addHandler(logging.FileHandler(os.path.join(settings.LOG_DIR, "auth_events.log")))
        except OSError as e:
            print(f"WARNING: Could not set up file logging: {e}", file=sys.stderr)
    formatter = logging.Formatter("%(asctime)s %(levelname)s:%(message)s")
    for handler in logger.handlers:
        handler.setFormatter(formatter)
    logger.setLevel(logging.INFO)
    logger.propagate = False


def client_ip(request: Request) -> Optional[str]:
    """Client address, falling back to the first X-Forwarded-For entry."""
    ip_address = None
    if request.client:
        ip_address = request.client.host
    if not ip_address and request.headers.get("x-forwarded-for"):
        ip_address = request.headers.get("x-forwarded-for").split(",")[0].strip()
    return ip_address


def log_auth_event(
    event_type: str,
    request: Request,
    user_id: Optional[str] = None,
    email: Optional[str] = None,
) -> None:
    """
    Log an authentication event.

    Args:
        event_type: One of: register, login_success, login_failure, profile_lookup
        request: FastAPI Request object
        user_id: Id of the user involved, when known
        email: Email the client supplied, when relevant

    Raises:
        ValueError: If event_type is invalid
    """
    if event_type not in ALLOWED_EVENT_TYPES:
        raise ValueError(
            f"Invalid event_type '{event_type}'. Must be one of: {', '.join(sorted(ALLOWED_EVENT_TYPES))}"
        )

    _configure_handlers()
    logger.info(
        "AUTH %s user_id=%s email=%s ip=%s user_agent=%s timestamp=%s",
        event_type,
        user_id,
        email,
        client_ip(request),
        request.headers.get("user-agent"),
        datetime.utcnow().isoformat()
    )
