"""Pydantic request/response schemas."""

from pesca_api.schemas.auth import (
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserListItem,
    UserOut,
    UsersListResponse,
)
from pesca_api.schemas.health import HealthResponse
from pesca_api.schemas.pedido import PedidoCreate, PedidoOut

__all__ = [
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "PedidoCreate",
    "PedidoOut",
    "RegisterRequest",
    "TokenResponse",
    "UserListItem",
    "UserOut",
    "UsersListResponse",
]
