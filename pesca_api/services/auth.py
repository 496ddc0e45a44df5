"""Registration and login: credential checks and token issuance."""

import logging

from sqlalchemy.exc import IntegrityError

from pesca_api.core.security import (
    BCRYPT_ROUNDS,
    ROLE_USER,
    TokenService,
    hash_password,
    verify_password,
)
from pesca_api.models import User
from pesca_api.schemas.auth import RegisterRequest, TokenResponse, UserOut
from pesca_api.services.stores import UserStore

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Base class for registration/login failures."""


class UsernameTakenError(AuthError):
    def __init__(self, username: str) -> None:
        super().__init__(f"Username '{username}' is already registered.")
        self.username = username


class InvalidCredentialsError(AuthError):
    def __init__(self) -> None:
        super().__init__("Invalid username or password.")


class AuthService:
    """Registers customers and exchanges valid credentials for a session token."""

    def __init__(
        self,
        users: UserStore,
        tokens: TokenService,
        bcrypt_rounds: int = BCRYPT_ROUNDS,
    ) -> None:
        self.users = users
        self.tokens = tokens
        self.bcrypt_rounds = bcrypt_rounds

    def register(self, data: RegisterRequest) -> UserOut:
        """Create a 'user'-role account. Raises UsernameTakenError on duplicates."""
        if self.users.exists(data.username):
            logger.info("Registration rejected: username=%s already taken", data.username)
            raise UsernameTakenError(data.username)

        user = User(
            username=data.username,
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            password_hash=hash_password(data.password, rounds=self.bcrypt_rounds),
            role=ROLE_USER,
        )
        try:
            user = self.users.add(user)
        except IntegrityError as e:
            # Lost a race with a concurrent registration of the same username
            raise UsernameTakenError(data.username) from e

        logger.info("User registered: id=%s username=%s", user.id, user.username)
        return UserOut.model_validate(user)

    def login(self, username: str, password: str) -> TokenResponse:
        """Verify credentials and issue a token. Raises InvalidCredentialsError."""
        user = self.users.get_by_username(username.strip())
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Login failed for username=%s", username)
            raise InvalidCredentialsError()

        token = self.tokens.issue(user.id, user.username, user.role)
        logger.info("Login succeeded: id=%s username=%s", user.id, user.username)
        return TokenResponse(
            access_token=token,
            token_type="bearer",
            expires_in=self.tokens.expires_in,
        )
