"""
User Repository

Resolves an external identity token to a user record, registering the
user on first sight.
"""

from typing import Optional
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from event_planner.models.user import User
from event_planner.repositories.base import BaseRepository
from event_planner.core.exceptions import DatabaseException, ValidationException

logger = logging.getLogger("USER_REPOSITORY")


def username_from_email(email: str) -> str:
    return email.split("@", 1)[0]


class UserRepository(BaseRepository[User]):
    """Repository for user records."""

    def __init__(self, db: Session):
        super().__init__(User, db)

    def get_by_firebase_uid(self, firebase_uid: str) -> Optional[User]:
        try:
            return self.db.query(User).filter(User.firebase_uid == firebase_uid).first()
        except SQLAlchemyError as e:
            raise DatabaseException("Database query failed") from e

    def login_or_register(self, firebase_uid: str, email: str) -> User:
        """
        Return the user for ``firebase_uid``, creating it on first login.

        An existing user is returned unchanged even if ``email`` differs.
        Two concurrent first logins race on the unique ``firebase_uid``
        constraint; the loser re-reads the winner's row.

        Raises:
            ValidationException: If either argument is empty
            DatabaseException: If the lookup or insert fails
        """
        if not firebase_uid or not email:
            raise ValidationException("Missing firebaseUid or email")

        existing = self.get_by_firebase_uid(firebase_uid)
        if existing is not None:
            return existing

        user = User(
            firebase_uid=firebase_uid,
            email=email,
            username=username_from_email(email),
        )
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            logger.info(f"Registered user {user.id} ({user.username})")
            return user
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Concurrent registration for {firebase_uid}, re-reading existing user")
            winner = self.get_by_firebase_uid(firebase_uid)
            if winner is None:
                raise DatabaseException("Failed to register user") from e
            return winner
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseException("Failed to register user") from e
