"""
Registration, login and profile endpoints.
"""
from fastapi import APIRouter, Depends, Request, status

from .. import auth
from ..dependencies import get_user_store, get_current_user_id
from ..errors import InvalidCredentials
from ..schemas import UserCreate, UserLogin, UserOut, AuthResponse, ErrorResponse
from ..stores import UserStore
from ..utils.event_logger import log_auth_event

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def register(payload: UserCreate, request: Request, users: UserStore = Depends(get_user_store)):
    token, user = auth.register(users, payload.email, payload.password, payload.name)
    log_auth_event("register", request, user_id=user.id, email=user.email)
    return AuthResponse(message="Registration successful", token=token, user=UserOut.model_validate(user))


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def login(credentials: UserLogin, request: Request, users: UserStore = Depends(get_user_store)):
    try:
        token, user = auth.login(users, credentials.email, credentials.password)
    except InvalidCredentials:
        log_auth_event("login_failure", request, email=credentials.email)
        raise
    log_auth_event("login_success", request, user_id=user.id, email=user.email)
    return AuthResponse(message="Login successful", token=token, user=UserOut.model_validate(user))


@router.get(
    "/profile",
    response_model=UserOut,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def profile(
    request: Request,
    user_id: str = Depends(get_current_user_id),
    users: UserStore = Depends(get_user_store),
):
    user = auth.get_profile(users, user_id)
    log_auth_event("profile_lookup", request, user_id=user.id)
    return user
