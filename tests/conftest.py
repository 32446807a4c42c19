"""
Pytest fixtures for the Event Planner API.

Every test gets a fresh in-memory SQLite database. The ``StaticPool`` used
for ``sqlite://`` URLs keeps one shared connection, so the schema created
here is visible to every session handed out by the connector.
"""

import pytest
from fastapi.testclient import TestClient

from event_planner.core.config import Settings
from event_planner.core.database import StorageConnector
from event_planner.main import create_app
from event_planner.models import Base, User

TEST_DATABASE_URL = "sqlite://"
TEST_FIREBASE_UID = "firebase-uid-123"
TEST_EMAIL = "jane.doe@example.com"


@pytest.fixture
def settings():
    return Settings(
        database_url=TEST_DATABASE_URL,
        connect_retry_delay=0,
        connect_max_attempts=3,
        _env_file=None,
    )


@pytest.fixture
def connector(settings):
    """A connected connector with the schema in place."""
    connector = StorageConnector(settings, sleep=lambda _: None)
    connector.connect()
    Base.metadata.create_all(bind=connector.engine)
    yield connector
    connector.shutdown()


@pytest.fixture
def db_session(connector):
    with connector.session() as db:
        yield db


@pytest.fixture
def user(db_session):
    user = User(firebase_uid=TEST_FIREBASE_UID, email=TEST_EMAIL, username="jane.doe")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def client(settings):
    """Client running the full app lifespan against its own in-memory database."""
    connector = StorageConnector(settings, sleep=lambda _: None)
    app = create_app(settings, connector)
    with TestClient(app) as client:
        yield client
