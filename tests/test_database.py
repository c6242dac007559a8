"""Unit tests for mayastory.core.database: session release, pool disposal, and app shutdown."""

import unittest
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from mayastory.core import database
from mayastory.core.config import Settings
from mayastory.main import app


class TestGetDb(unittest.TestCase):
    """get_db closes the session on every exit path."""

    def test_closes_after_normal_exit(self) -> None:
        session = MagicMock()
        with patch.object(database, "SessionLocal", return_value=session):
            gen = database.get_db()
            self.assertIs(next(gen), session)
            with self.assertRaises(StopIteration):
                next(gen)
        session.close.assert_called_once()

    def test_closes_after_handler_error(self) -> None:
        session = MagicMock()
        with patch.object(database, "SessionLocal", return_value=session):
            gen = database.get_db()
            next(gen)
            with self.assertRaises(RuntimeError):
                gen.throw(RuntimeError("query failed"))
        session.close.assert_called_once()


class TestDisposeEngine(unittest.TestCase):
    """dispose_engine drains a created pool and forgets the cached engine."""

    def setUp(self) -> None:
        database.get_sessionmaker.cache_clear()
        database.get_engine.cache_clear()
        self.addCleanup(database.get_sessionmaker.cache_clear)
        self.addCleanup(database.get_engine.cache_clear)
        configured = Settings(_env_file=None, DATABASE_URL="postgresql://u:p@db:5432/maya")
        p = patch.object(database, "get_settings", return_value=configured)
        p.start()
        self.addCleanup(p.stop)

    def test_disposes_cached_engine_and_clears_caches(self) -> None:
        engine = MagicMock()
        with patch.object(database, "create_engine", return_value=engine) as mock_create:
            self.assertIs(database.get_engine(), engine)
            database.dispose_engine()
        mock_create.assert_called_once()
        engine.dispose.assert_called_once()
        self.assertEqual(database.get_engine.cache_info().currsize, 0)
        self.assertEqual(database.get_sessionmaker.cache_info().currsize, 0)

    def test_noop_when_engine_never_created(self) -> None:
        with patch.object(database, "create_engine") as mock_create:
            database.dispose_engine()
        mock_create.assert_not_called()

    def test_relaxed_tls_requires_ssl_without_verification(self) -> None:
        relaxed = Settings(
            _env_file=None,
            DATABASE_URL="postgresql://u:p@db:5432/maya",
            DATABASE_SSL_NO_VERIFY=True,
        )
        with patch.object(database, "get_settings", return_value=relaxed), patch.object(
            database, "create_engine", return_value=MagicMock()
        ) as mock_create:
            database.get_engine()
        self.assertEqual(mock_create.call_args.kwargs["connect_args"], {"sslmode": "require"})


class TestLifespan(unittest.TestCase):
    """Leaving the app lifespan drains the connection pool."""

    def test_shutdown_disposes_engine(self) -> None:
        with patch("mayastory.main.dispose_engine") as mock_dispose:
            with TestClient(app) as client:
                client.get("/health")
                mock_dispose.assert_not_called()
            mock_dispose.assert_called_once()


if __name__ == "__main__":
    unittest.main()
