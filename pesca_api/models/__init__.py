"""SQLAlchemy ORM models."""

from pesca_api.models.base import Base
from pesca_api.models.pedido import Pedido
from pesca_api.models.user import User

__all__ = ["Base", "Pedido", "User"]
