"""Shared test fixtures.

Each test gets its own in-memory SQLite database with the schema created
and the sentinel rows seeded.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from arcade.db.database import create_db_engine, get_db, init_db
from arcade.db.drivers import get_driver
from arcade.main import create_app
from arcade.storage import ItemStorage, LinkStorage, PlayerStorage, RoomStorage, UserStorage


@pytest.fixture()
def engine():
    """In-memory SQLite engine shared by every session of one test."""
    db_engine = create_db_engine("sqlite://", poolclass=StaticPool)
    init_db(db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def db_session(session_factory) -> Session:
    """Raw database session for direct DB assertions."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


# === Storage ===


@pytest.fixture()
def players(db_session, engine) -> PlayerStorage:
    return PlayerStorage(db_session, get_driver(engine))


@pytest.fixture()
def rooms(db_session, engine) -> RoomStorage:
    return RoomStorage(db_session, get_driver(engine))


@pytest.fixture()
def items(db_session, engine) -> ItemStorage:
    return ItemStorage(db_session, get_driver(engine))


@pytest.fixture()
def links(db_session, engine) -> LinkStorage:
    return LinkStorage(db_session, get_driver(engine))


@pytest.fixture()
def users(db_session, engine) -> UserStorage:
    return UserStorage(db_session, get_driver(engine))


# === HTTP ===


@pytest.fixture()
def app(engine, session_factory):
    """Application wired to the test database."""
    application = create_app(engine)

    def _override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    application.dependency_overrides[get_db] = _override_get_db
    return application


@pytest.fixture()
def client(app) -> TestClient:
    """FastAPI TestClient; entering it runs the application lifespan."""
    with TestClient(app) as test_client:
        yield test_client
