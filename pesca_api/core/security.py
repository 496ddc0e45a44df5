"""Password hashing and JWT issuance/validation for authentication."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from pesca_api.core.config import Settings

# Bcrypt cost (rounds); overridden by settings.BCRYPT_ROUNDS.
BCRYPT_ROUNDS = 12

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLES = (ROLE_USER, ROLE_ADMIN)


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


class InvalidTokenError(Exception):
    """Token is malformed, badly signed, expired or carries unusable claims."""


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    username: str
    role: str
    issued_at: datetime
    expires_at: datetime


class TokenService:
    """
    Issues and validates signed session tokens.

    Holds only the signing secret, algorithm and validity window; built once at
    startup and shared by every request.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 60) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._expire = timedelta(minutes=expire_minutes)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
            expire_minutes=settings.JWT_EXPIRE_MINUTES,
        )

    @property
    def expires_in(self) -> int:
        """Validity window in seconds."""
        return int(self._expire.total_seconds())

    def issue(
        self,
        user_id: int,
        username: str,
        role: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a JWT with sub (user id), username, role, iat and exp."""
        now = datetime.now(UTC)
        expire = now + (expires_delta if expires_delta is not None else self._expire)
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "username": username,
            "role": role,
            "iat": now,
            "exp": expire,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def validate(self, token: str) -> TokenClaims:
        """
        Verify signature and expiry and return the embedded claims.
        Raises InvalidTokenError on any failure.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.PyJWTError as e:
            raise InvalidTokenError("Invalid token") from e

        role = payload.get("role")
        username = payload.get("username")
        if role not in ROLES or not isinstance(username, str) or not username:
            raise InvalidTokenError("Invalid token payload")
        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError) as e:
            raise InvalidTokenError("Invalid token payload") from e

        return TokenClaims(
            user_id=user_id,
            username=username,
            role=role,
            issued_at=datetime.fromtimestamp(payload["iat"], UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )
