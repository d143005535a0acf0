"""
Error taxonomy for the Todo service.

Components raise these; `error_handlers` turns them into JSON responses.
"""
from fastapi import status


class TodoServiceError(Exception):
    """Base class for every error the service reports to clients."""

    code = "INTERNAL_ERROR"
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "An unexpected error occurred"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> dict:
        return {"error": self.code, "message": self.message}


class ValidationError(TodoServiceError):
    code = "VALIDATION_ERROR"
    http_status = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request data"


class DuplicateEmail(TodoServiceError):
    code = "DUPLICATE_EMAIL"
    http_status = status.HTTP_400_BAD_REQUEST
    default_message = "Email already registered"


class InvalidCredentials(TodoServiceError):
    code = "INVALID_CREDENTIALS"
    http_status = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"


class Unauthenticated(TodoServiceError):
    """
    Raised by the authorization gate. `reason` tells missing headers apart
    from bad tokens in logs; clients always see the same message.
    """

    code = "UNAUTHENTICATED"
    http_status = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"

    def __init__(self, message: str = None, reason: str = "unknown"):
        super().__init__(message)
        self.reason = reason


class InvalidToken(TodoServiceError):
    code = "INVALID_TOKEN"
    http_status = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid token"

    def __init__(self, message: str = None, reason: str = "malformed"):
        super().__init__(message)
        self.reason = reason


class Forbidden(TodoServiceError):
    code = "FORBIDDEN"
    http_status = status.HTTP_403_FORBIDDEN
    default_message = "You do not have access to this resource"


class NotFound(TodoServiceError):
    code = "NOT_FOUND"
    http_status = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class TaskNotFound(NotFound):
    default_message = "Todo not found"


class UserNotFound(NotFound):
    default_message = "User not found"


class InternalError(TodoServiceError):
    pass
