"""
Create a user (the only way to create an admin). Run from project root:
  python -m pesca_api.scripts.create_user USERNAME PASSWORD EMAIL [role]
Example:
  python -m pesca_api.scripts.create_user admin your-secure-password admin@loja.com admin
"""
import argparse
import logging
import sys

from dotenv import load_dotenv
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from pesca_api.core.config import get_settings
from pesca_api.core.database import build_engine, build_session_factory
from pesca_api.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    ROLES,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
    hash_password,
)
from pesca_api.models import Base, User
from pesca_api.schemas.auth import RegisterRequest
from pesca_api.services.stores import UserStore

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    parser = argparse.ArgumentParser(description="Create a Pesca API user.")
    parser.add_argument("username", help=f"Username ({USERNAME_MIN_LEN}-{USERNAME_MAX_LEN} chars, no spaces)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("email", help="Contact e-mail")
    parser.add_argument("role", nargs="?", default="user", choices=list(ROLES))
    parser.add_argument("--first-name", help="Display first name (defaults to the username)")
    parser.add_argument("--last-name", default="")
    args = parser.parse_args(argv)

    try:
        data = RegisterRequest(
            username=args.username,
            password=args.password,
            first_name=args.first_name or args.username,
            last_name=args.last_name,
            email=args.email,
        )
    except ValidationError as e:
        for err in e.errors():
            print(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}", file=sys.stderr)
        return 1

    load_dotenv()
    settings = get_settings()
    engine = build_engine(settings)
    if settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
    db = build_session_factory(engine)()
    try:
        users = UserStore(db)
        if users.exists(data.username):
            print(f"User '{data.username}' already exists.", file=sys.stderr)
            return 1
        users.add(
            User(
                username=data.username,
                first_name=data.first_name,
                last_name=data.last_name,
                email=data.email,
                password_hash=hash_password(data.password, rounds=settings.BCRYPT_ROUNDS),
                role=args.role,
            )
        )
    except IntegrityError:
        print(f"User '{data.username}' already exists.", file=sys.stderr)
        return 1
    finally:
        db.close()
        engine.dispose()

    logger.info("Created user '%s' with role '%s'.", data.username, args.role)
    return 0


if __name__ == "__main__":
    sys.exit(main())
