"""Unit tests for the create_account and check_db operator scripts."""

import unittest
from contextlib import redirect_stderr, redirect_stdout
from datetime import datetime, timezone
from io import StringIO
from unittest.mock import MagicMock, patch

from fakes import InMemoryAccountStore
from sqlalchemy.exc import OperationalError

from mayastory.core.config import Settings
from mayastory.core.exceptions import StoreNotConfiguredError
from mayastory.scripts import check_db, create_account
from mayastory.services.account_store import AccountRecord


class TestCreateAccount(unittest.TestCase):
    def setUp(self) -> None:
        self.store = InMemoryAccountStore()
        patches = [
            patch.object(create_account, "SessionLocal", return_value=MagicMock()),
            patch.object(create_account, "SqlAccountStore", return_value=self.store),
            patch.object(
                create_account,
                "get_settings",
                return_value=Settings(_env_file=None, BCRYPT_ROUNDS=4),
            ),
        ]
        for p in patches:
            p.start()
            self.addCleanup(p.stop)

    def run_main(self, *argv: str) -> tuple[int, str, str]:
        out, err = StringIO(), StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = create_account.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_creates_account(self) -> None:
        code, out, _ = self.run_main("Sora", "secret1", "--email", "sora@example.com")
        self.assertEqual(code, 0)
        self.assertIn("Created account 'Sora'", out)
        self.assertEqual(self.store.accounts["Sora"]["email"], "sora@example.com")

    def test_duplicate_fails(self) -> None:
        self.run_main("Sora", "secret1")
        code, _, err = self.run_main("Sora", "other12")
        self.assertEqual(code, 1)
        self.assertIn("Username already exists", err)

    def test_invalid_input_fails(self) -> None:
        code, _, err = self.run_main("ab", "secret1")
        self.assertEqual(code, 1)
        self.assertIn("Username must be 3-13 characters", err)

    def test_missing_database_url(self) -> None:
        with patch.object(create_account, "SessionLocal", side_effect=StoreNotConfiguredError()):
            code, _, err = self.run_main("Sora", "secret1")
        self.assertEqual(code, 1)
        self.assertIn("DATABASE_URL", err)


class TestCheckDb(unittest.TestCase):
    def setUp(self) -> None:
        p = patch.object(check_db, "dispose_engine")
        p.start()
        self.addCleanup(p.stop)

    def test_not_configured(self) -> None:
        with patch.object(check_db, "SessionLocal", side_effect=StoreNotConfiguredError()):
            self.assertEqual(check_db.main([]), 1)

    def test_unreachable(self) -> None:
        session = MagicMock()
        with patch.object(check_db, "SessionLocal", return_value=session), patch.object(
            check_db,
            "fetch_store_time",
            side_effect=OperationalError("SELECT NOW()", {}, Exception("refused")),
        ):
            self.assertEqual(check_db.main([]), 1)
        session.close.assert_called_once()

    def test_reports_existing_account(self) -> None:
        session = MagicMock()
        store = MagicMock()
        store.find_by_name.return_value = AccountRecord(id=3, password_hash="h", banned=0)
        with patch.object(check_db, "SessionLocal", return_value=session), patch.object(
            check_db, "fetch_store_time", return_value=datetime.now(timezone.utc)
        ), patch.object(check_db, "accounts_table_exists", return_value=True), patch.object(
            check_db, "SqlAccountStore", return_value=store
        ):
            with self.assertLogs(check_db.logger, level="INFO") as logs:
                self.assertEqual(check_db.main(["Sora"]), 0)
        store.find_by_name.assert_called_once_with("Sora")
        self.assertTrue(any("account id 3" in line for line in logs.output))

    def test_missing_table(self) -> None:
        with patch.object(check_db, "SessionLocal", return_value=MagicMock()), patch.object(
            check_db, "fetch_store_time", return_value=datetime.now(timezone.utc)
        ), patch.object(check_db, "accounts_table_exists", return_value=False):
            self.assertEqual(check_db.main([]), 0)


if __name__ == "__main__":
    unittest.main()
