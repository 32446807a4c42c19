"""Tests for the storage connector: connect retries, statements, shutdown."""

import logging

import pytest
from sqlalchemy.exc import OperationalError

from event_planner.core.database import StorageConnector
from event_planner.core.exceptions import DatabaseException


def flaky_open(connector, failures):
    """Make ``_open`` fail ``failures`` times before delegating to the real one."""
    real_open = connector._open
    calls = {"count": 0}

    def _open(url):
        calls["count"] += 1
        if calls["count"] <= failures:
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))
        return real_open(url)

    connector._open = _open
    return calls


class TestConnect:

    def test_connects_and_creates_session_factory(self, settings):
        connector = StorageConnector(settings)
        connector.connect()
        try:
            assert connector.is_connected
            with connector.session() as db:
                assert db.bind is connector.engine
        finally:
            connector.shutdown()

    def test_retries_with_fixed_delay_until_success(self, settings):
        settings.connect_retry_delay = 5.0
        settings.connect_max_attempts = 0
        sleeps = []
        connector = StorageConnector(settings, sleep=sleeps.append)
        calls = flaky_open(connector, failures=3)

        connector.connect()
        try:
            assert calls["count"] == 4
            assert sleeps == [5.0, 5.0, 5.0]
            assert connector.is_connected
        finally:
            connector.shutdown()

    def test_backoff_multiplies_delay(self, settings):
        settings.connect_retry_delay = 1.0
        settings.connect_retry_backoff = 2.0
        settings.connect_max_attempts = 10
        sleeps = []
        connector = StorageConnector(settings, sleep=sleeps.append)
        flaky_open(connector, failures=3)

        connector.connect()
        try:
            assert sleeps == [1.0, 2.0, 4.0]
        finally:
            connector.shutdown()

    def test_gives_up_after_max_attempts(self, settings):
        settings.connect_max_attempts = 3
        sleeps = []
        connector = StorageConnector(settings, sleep=sleeps.append)
        calls = flaky_open(connector, failures=100)

        with pytest.raises(DatabaseException) as exc_info:
            connector.connect()

        assert calls["count"] == 3
        assert len(sleeps) == 2
        assert isinstance(exc_info.value.__cause__, OperationalError)
        assert not connector.is_connected

    def test_each_failure_is_logged(self, settings, caplog):
        connector = StorageConnector(settings, sleep=lambda _: None)
        flaky_open(connector, failures=2)

        with caplog.at_level(logging.ERROR, logger="CORE_DATABASE"):
            connector.connect()
        connector.shutdown()

        failures = [r for r in caplog.records if "Database connection failed" in r.getMessage()]
        assert len(failures) == 2

    def test_connect_is_idempotent(self, connector):
        engine = connector.engine
        connector.connect()
        assert connector.engine is engine


class TestExecute:

    def test_write_reports_rowcount_and_lastrowid(self, connector):
        result = connector.execute(
            "INSERT INTO users (firebase_uid, email, username, created_at, updated_at) "
            "VALUES (:uid, :email, :username, CURRENT_TIMESTAMP, CURRENT_TIMESTAMP)",
            {"uid": "abc", "email": "a@example.com", "username": "a"},
        )
        assert result.rowcount == 1
        assert result.lastrowid == 1

    def test_read_returns_rows_as_mappings(self, connector):
        connector.execute(
            "INSERT INTO users (firebase_uid, email, username, created_at, updated_at) "
            "VALUES ('abc', 'a@example.com', 'a', CURRENT_TIMESTAMP, CURRENT_TIMESTAMP)"
        )
        result = connector.execute(
            "SELECT id, username FROM users WHERE firebase_uid = :uid", {"uid": "abc"}
        )
        assert result.rows == [{"id": 1, "username": "a"}]

    def test_rejected_statement_raises_database_exception(self, connector):
        with pytest.raises(DatabaseException) as exc_info:
            connector.execute("SELECT * FROM no_such_table")
        assert exc_info.value.message == "Database query failed"
        assert "no_such_table" not in exc_info.value.message

    def test_unconnected_connector_is_unavailable(self, settings):
        connector = StorageConnector(settings)
        with pytest.raises(DatabaseException):
            connector.execute("SELECT 1")
        with pytest.raises(DatabaseException):
            with connector.session():
                pass


class TestHealthAndShutdown:

    def test_health_reports_healthy_when_connected(self, connector):
        assert connector.health()["status"] == "healthy"

    def test_health_reports_unhealthy_when_disconnected(self, settings):
        health = StorageConnector(settings).health()
        assert health["status"] == "unhealthy"
        assert health["error"] == "Database connection is not available"

    def test_shutdown_releases_pool(self, settings):
        connector = StorageConnector(settings)
        connector.connect()
        connector.shutdown()
        assert connector.engine is None
        assert not connector.is_connected
        # second call is a no-op
        connector.shutdown()

    def test_close_error_is_logged_not_raised(self, settings, caplog):
        connector = StorageConnector(settings)
        connector.connect()
        real_engine = connector.engine

        class BrokenEngine:
            def dispose(self):
                raise RuntimeError("socket already closed")

        connector.engine = BrokenEngine()
        with caplog.at_level(logging.ERROR, logger="CORE_DATABASE"):
            connector.shutdown()
        real_engine.dispose()

        assert connector.engine is None
        assert any("Error closing database" in r.getMessage() for r in caplog.records)
