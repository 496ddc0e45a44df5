"""ORM model for orders (pedidos) placed by users."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from pesca_api.models.base import Base


class Pedido(Base):
    """One product bought by one user at checkout. Owned by exactly one user."""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )
    product = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    user = relationship("User", back_populates="pedidos")
