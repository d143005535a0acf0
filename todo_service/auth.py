from passlib.context import CryptContext
from typing import Tuple
import logging

from .models import User
from .stores import UserStore
from .tokens import issue_token
from .errors import DuplicateEmail, InvalidCredentials, UserNotFound, ValidationError

logger = logging.getLogger(__name__)

# Use pbkdf2_sha256 to avoid external bcrypt backend issues in some environments
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def register(users: UserStore, email: str, password: str, name: str) -> Tuple[str, User]:
    """
    Create a user and issue its first token.

    Args:
        users: Credential store
        email: Login email, must not be registered yet
        password: Plaintext password, only its hash is persisted
        name: Display name

    Returns:
        Tuple of (token, user)

    Raises:
        ValidationError: if any field is blank
        DuplicateEmail: if the email is already registered
    """
    if not email or not email.strip() or not password or not name or not name.strip():
        raise ValidationError("Email, password and name are required")

    if users.get_by_email(email):
        raise DuplicateEmail()

    # The store re-checks uniqueness on insert for concurrent registrations
    user = users.add(email=email, password_hash=hash_password(password), name=name)
    logger.info("Registered user_id=%s", user.id)
    return issue_token(user.id), user


def login(users: UserStore, email: str, password: str) -> Tuple[str, User]:
    """
    Verify credentials and issue a fresh token.

    Unknown email and wrong password raise the same error after the same
    amount of hashing work.

    Raises:
        InvalidCredentials: if the email is unknown or the password is wrong
    """
    user = users.get_by_email(email)
    if user is None:
        pwd_context.dummy_verify()
        raise InvalidCredentials()
    if not verify_password(password, user.password):
        raise InvalidCredentials()
    return issue_token(user.id), user


def get_profile(users: UserStore, user_id: str) -> User:
    user = users.get(user_id)
    if user is None:
        raise UserNotFound()
    return user
