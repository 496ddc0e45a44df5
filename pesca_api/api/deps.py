"""Request dependencies: service wiring and the bearer-token session filter."""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from pesca_api.core.config import Settings
from pesca_api.core.database import get_db
from pesca_api.core.security import ROLE_ADMIN, InvalidTokenError, TokenService
from pesca_api.schemas.auth import CurrentUser
from pesca_api.services.auth import AuthService
from pesca_api.services.pedidos import PedidoService
from pesca_api.services.stores import PedidoStore, UserStore

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_user_store(db: Annotated[Session, Depends(get_db)]) -> UserStore:
    return UserStore(db)


def get_auth_service(
    users: Annotated[UserStore, Depends(get_user_store)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> AuthService:
    return AuthService(users, tokens, bcrypt_rounds=settings.BCRYPT_ROUNDS)


def get_pedido_service(db: Annotated[Session, Depends(get_db)]) -> PedidoService:
    return PedidoService(PedidoStore(db))


def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    users: Annotated[UserStore, Depends(get_user_store)],
) -> CurrentUser:
    """
    Session filter: require a valid Bearer JWT and return the current user.
    Raises 401 if the token is missing, invalid, expired, or its user is gone.
    The resolved user is also stored on request.state.user.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")
    try:
        claims = tokens.validate(credentials.credentials)
    except InvalidTokenError as e:
        logger.debug("Rejected bearer token on %s: %s", request.url.path, e)
        raise _unauthorized("Invalid or expired token")

    user = users.get(claims.user_id)
    if user is None:
        raise _unauthorized("User not found")

    current = CurrentUser(id=user.id, username=user.username, role=user.role)
    request.state.user = current
    return current


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require authenticated user with role 'admin'. Raises 403 for non-admin."""
    if current_user.role != ROLE_ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user
