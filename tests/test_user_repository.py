"""Tests for login-or-register identity resolution."""

import pytest
from sqlalchemy.exc import OperationalError

from event_planner.core.exceptions import DatabaseException, ValidationException
from event_planner.models import User
from event_planner.repositories.user_repository import UserRepository, username_from_email


class TestLoginOrRegister:

    def test_first_login_registers_user(self, db_session):
        repo = UserRepository(db_session)

        user = repo.login_or_register("uid-1", "jane.doe@example.com")

        assert user.id is not None
        assert user.username == "jane.doe"
        assert user.email == "jane.doe@example.com"
        assert db_session.query(User).count() == 1

    def test_second_login_returns_same_identity(self, db_session):
        """Identity resolution is keyed on the UID only; a new email changes nothing."""
        repo = UserRepository(db_session)
        first = repo.login_or_register("uid-1", "jane.doe@example.com")

        second = repo.login_or_register("uid-1", "someone.else@example.org")

        assert second.id == first.id
        assert second.username == "jane.doe"
        assert second.email == "jane.doe@example.com"
        assert db_session.query(User).count() == 1

    def test_distinct_uids_get_distinct_users(self, db_session):
        repo = UserRepository(db_session)
        a = repo.login_or_register("uid-a", "a@example.com")
        b = repo.login_or_register("uid-b", "b@example.com")
        assert a.id != b.id

    @pytest.mark.parametrize("firebase_uid,email", [
        ("", "a@example.com"),
        ("uid-1", ""),
        (None, "a@example.com"),
        ("uid-1", None),
    ])
    def test_missing_arguments_are_rejected(self, db_session, firebase_uid, email):
        repo = UserRepository(db_session)
        with pytest.raises(ValidationException) as exc_info:
            repo.login_or_register(firebase_uid, email)
        assert exc_info.value.message == "Missing firebaseUid or email"
        assert db_session.query(User).count() == 0

    def test_concurrent_registration_returns_winner(self, db_session, monkeypatch):
        """A lost insert race falls back to the row the other request created."""
        winner = User(firebase_uid="uid-race", email="first@example.com", username="first")
        db_session.add(winner)
        db_session.commit()

        repo = UserRepository(db_session)
        real_lookup = repo.get_by_firebase_uid
        lookups = {"count": 0}

        def stale_then_real(firebase_uid):
            lookups["count"] += 1
            if lookups["count"] == 1:
                return None
            return real_lookup(firebase_uid)

        monkeypatch.setattr(repo, "get_by_firebase_uid", stale_then_real)

        user = repo.login_or_register("uid-race", "second@example.com")

        assert user.id == winner.id
        assert user.username == "first"
        assert db_session.query(User).count() == 1

    def test_lookup_failure_is_storage_error(self, db_session, monkeypatch):
        def broken_query(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("gone away"))

        monkeypatch.setattr(db_session, "query", broken_query)
        repo = UserRepository(db_session)

        with pytest.raises(DatabaseException) as exc_info:
            repo.login_or_register("uid-1", "a@example.com")
        assert exc_info.value.message == "Database query failed"


@pytest.mark.parametrize("email,expected", [
    ("jane.doe@example.com", "jane.doe"),
    ("a@b@c", "a"),
    ("no-at-sign", "no-at-sign"),
    ("@example.com", ""),
])
def test_username_is_local_part_of_email(email, expected):
    assert username_from_email(email) == expected
