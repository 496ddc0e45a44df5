"""Unit tests for AuthService and PedidoService with mocked stores."""

import unittest
from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError

from pesca_api.core.security import TokenService, hash_password
from pesca_api.models import Pedido, User
from pesca_api.schemas.auth import CurrentUser, RegisterRequest
from pesca_api.schemas.pedido import PedidoCreate
from pesca_api.services.auth import AuthService, InvalidCredentialsError, UsernameTakenError
from pesca_api.services.pedidos import PedidoService


def _register(username: str = "joao") -> RegisterRequest:
    return RegisterRequest(
        username=username,
        password="anzol-secreto-123",
        first_name="João",
        last_name="Pescador",
        email="Joao@Example.com",
    )


def _stored_user(user: User) -> User:
    """Simulate what the store returns after insert."""
    user.id = 1
    user.created_at = datetime.now(UTC)
    return user


class TestAuthServiceRegister(unittest.TestCase):
    def setUp(self) -> None:
        self.users = MagicMock()
        self.service = AuthService(self.users, TokenService("service-test-secret-thirty-two-bytes"), bcrypt_rounds=4)

    def test_taken_username_raises_without_insert(self) -> None:
        self.users.exists.return_value = True
        with self.assertRaises(UsernameTakenError):
            self.service.register(_register())
        self.users.add.assert_not_called()

    def test_integrity_error_on_insert_is_a_conflict(self) -> None:
        self.users.exists.return_value = False
        self.users.add.side_effect = IntegrityError("INSERT", {}, Exception("UNIQUE"))
        with self.assertRaises(UsernameTakenError):
            self.service.register(_register())

    def test_new_user_gets_user_role_and_hashed_password(self) -> None:
        self.users.exists.return_value = False
        self.users.add.side_effect = _stored_user
        out = self.service.register(_register())
        stored = self.users.add.call_args.args[0]
        self.assertEqual(stored.role, "user")
        self.assertNotEqual(stored.password_hash, "anzol-secreto-123")
        self.assertEqual(out.email, "joao@example.com")
        self.assertEqual(out.id, 1)


class TestAuthServiceLogin(unittest.TestCase):
    def setUp(self) -> None:
        self.users = MagicMock()
        self.tokens = TokenService("service-test-secret-thirty-two-bytes", expire_minutes=15)
        self.service = AuthService(self.users, self.tokens, bcrypt_rounds=4)

    def test_unknown_user_raises(self) -> None:
        self.users.get_by_username.return_value = None
        with self.assertRaises(InvalidCredentialsError):
            self.service.login("ninguem", "qualquer-coisa")

    def test_wrong_password_raises(self) -> None:
        self.users.get_by_username.return_value = User(
            id=3, username="joao", role="user", password_hash=hash_password("certa-123", rounds=4)
        )
        with self.assertRaises(InvalidCredentialsError):
            self.service.login("joao", "errada-123")

    def test_valid_credentials_issue_token(self) -> None:
        self.users.get_by_username.return_value = User(
            id=3, username="joao", role="admin", password_hash=hash_password("certa-123", rounds=4)
        )
        response = self.service.login("joao", "certa-123")
        self.assertEqual(response.expires_in, 900)
        claims = self.tokens.validate(response.access_token)
        self.assertEqual((claims.user_id, claims.role), (3, "admin"))


class TestPedidoService(unittest.TestCase):
    def setUp(self) -> None:
        self.store = MagicMock()
        self.service = PedidoService(self.store)
        self.user = CurrentUser(id=4, username="maria", role="user")

    def test_create_passes_owner_and_returns_dto(self) -> None:
        self.store.add.return_value = Pedido(
            id=10,
            user_id=4,
            product="Carretilha",
            price=Decimal("420.00"),
            created_at=datetime.now(UTC),
        )
        out = self.service.create(self.user, PedidoCreate(product="Carretilha", price="420.00"))
        self.store.add.assert_called_once_with(user_id=4, product="Carretilha", price=Decimal("420.00"))
        self.assertEqual(out.id, 10)
        self.assertNotIsInstance(out, Pedido)

    def test_list_for_user_without_pedidos_is_empty(self) -> None:
        self.store.list_by_user.return_value = []
        self.assertEqual(self.service.list_for(self.user), [])
        self.store.list_by_user.assert_called_once_with(4)


if __name__ == "__main__":
    unittest.main()
