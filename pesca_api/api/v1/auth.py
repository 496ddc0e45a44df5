"""Registration, JWT login and the authenticated user's profile."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from pesca_api.api.deps import get_auth_service, get_current_user, get_user_store, require_admin
from pesca_api.schemas.auth import (
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserListItem,
    UserOut,
    UsersListResponse,
)
from pesca_api.services.auth import AuthService, InvalidCredentialsError, UsernameTakenError
from pesca_api.services.stores import UserStore

router = APIRouter()


@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> UserOut:
    """Create a customer account. Returns 409 if the username is already taken."""
    try:
        return auth.register(body)
    except UsernameTakenError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> TokenResponse:
    """
    Authenticate with username and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <access_token>
    """
    try:
        return auth.login(body.username, body.password)
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


@router.get("/me", response_model=UserOut)
def me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    users: Annotated[UserStore, Depends(get_user_store)],
) -> UserOut:
    """Profile of the user the bearer token belongs to."""
    return UserOut.model_validate(users.get(current_user.id))


@router.get("/users", response_model=UsersListResponse)
def list_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    users: Annotated[UserStore, Depends(get_user_store)],
) -> UsersListResponse:
    """List all users (admin only)."""
    return UsersListResponse(
        users=[UserListItem.model_validate(u) for u in users.list_all()]
    )
