"""
Token service: signed, time-limited identity tokens (JWT).

Expiry is the only invalidation mechanism; there is no revocation list.
"""
from datetime import datetime, timedelta, timezone
import jwt

from .config import settings
from .errors import InvalidToken


def issue_token(user_id: str) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "iat": now,
        "exp": now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_token(token: str) -> str:
    """
    Check signature and expiry and return the embedded user id.

    Raises:
        InvalidToken: with `reason` set to one of expired, bad_signature,
                      malformed or missing_subject
    """
    try:
        data = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise InvalidToken("Token has expired", reason="expired") from exc
    except jwt.InvalidSignatureError as exc:
        raise InvalidToken(reason="bad_signature") from exc
    except jwt.MissingRequiredClaimError as exc:
        raise InvalidToken(reason="missing_subject") from exc
    except jwt.InvalidTokenError as exc:
        raise InvalidToken(reason="malformed") from exc

    user_id = data.get("sub")
    if not user_id:
        raise InvalidToken(reason="missing_subject")
    return user_id
