"""Thin persistence stores over a SQLAlchemy session for users and pedidos."""

from decimal import Decimal

from sqlalchemy.orm import Session

from pesca_api.models import Pedido, User


class UserStore:
    """Credential store: lookup and insert of user rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        return self.session.get(User, user_id)

    def get_by_username(self, username: str) -> User | None:
        return self.session.query(User).filter(User.username == username).first()

    def exists(self, username: str) -> bool:
        return self.get_by_username(username) is not None

    def add(self, user: User) -> User:
        """Insert and commit; rolls back and re-raises on failure (e.g. duplicate username)."""
        self.session.add(user)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(user)
        return user

    def list_all(self) -> list[User]:
        return self.session.query(User).order_by(User.id).all()


class PedidoStore:
    """Order store: every read is scoped to one owning user."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, user_id: int, product: str, price: Decimal) -> Pedido:
        pedido = Pedido(user_id=user_id, product=product, price=price)
        self.session.add(pedido)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(pedido)
        return pedido

    def list_by_user(self, user_id: int) -> list[Pedido]:
        return (
            self.session.query(Pedido)
            .filter(Pedido.user_id == user_id)
            .order_by(Pedido.id)
            .all()
        )
