"""Tests for the create_user CLI against a temporary SQLite file."""

import importlib
import os
import tempfile
import unittest
from unittest.mock import patch

from helpers import make_settings
from pesca_api.core.database import build_engine, build_session_factory
from pesca_api.core.security import verify_password
from pesca_api.models import Base, User
from pesca_api.scripts import create_user


class TestCreateUser(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        url = "sqlite:///" + os.path.join(tmp.name, "pesca.db")
        self.settings = make_settings(DATABASE_URL=url)
        patcher = patch.object(create_user, "get_settings", return_value=self.settings)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _fetch(self, username: str) -> User | None:
        engine = build_engine(self.settings)
        Base.metadata.create_all(bind=engine)
        db = build_session_factory(engine)()
        try:
            return db.query(User).filter(User.username == username).first()
        finally:
            db.close()
            engine.dispose()

    def test_creates_admin(self) -> None:
        code = create_user.main(["chefe", "senha-do-chefe", "chefe@example.com", "admin"])
        self.assertEqual(code, 0)
        user = self._fetch("chefe")
        self.assertIsNotNone(user)
        self.assertEqual(user.role, "admin")
        self.assertTrue(verify_password("senha-do-chefe", user.password_hash))

    def test_duplicate_username_fails(self) -> None:
        self.assertEqual(create_user.main(["chefe", "senha-do-chefe", "chefe@example.com"]), 0)
        self.assertEqual(create_user.main(["chefe", "outra-senha-1", "x@example.com"]), 1)

    def test_first_name_defaults_to_username(self) -> None:
        self.assertEqual(create_user.main(["maria", "senha-da-maria", "maria@example.com"]), 0)
        user = self._fetch("maria")
        self.assertEqual(user.first_name, "maria")
        self.assertEqual(user.role, "user")

    def test_first_name_flag_is_stored(self) -> None:
        code = create_user.main(["chefe", "senha-do-chefe", "chefe@example.com", "admin", "--first-name", "Carlos"])
        self.assertEqual(code, 0)
        self.assertEqual(self._fetch("chefe").first_name, "Carlos")

    def test_logging_is_configured_only_when_run(self) -> None:
        with patch("logging.basicConfig") as basic_config:
            create_user.main(["chefe", "senha-do-chefe", "chefe@example.com"])
        basic_config.assert_called_once()

    def test_short_password_fails(self) -> None:
        self.assertEqual(create_user.main(["chefe", "curta", "chefe@example.com"]), 1)
        self.assertIsNone(self._fetch("chefe"))


class TestCreateUserImport(unittest.TestCase):
    def test_import_leaves_logging_untouched(self) -> None:
        with patch("logging.basicConfig") as basic_config:
            importlib.reload(create_user)
        basic_config.assert_not_called()


if __name__ == "__main__":
    unittest.main()
