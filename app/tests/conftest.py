import random

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.main import create_app
from app.db.Models.models import Base
from app.db.Connection import database
from app.db.repository import MappingRepository
from app.core.config import Settings


# Create in-memory SQLite database for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"
TEST_BASE_URL = "http://localhost:8080"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@pytest.fixture
def db_engine():
    """Creates a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def repository(db_engine):
    return MappingRepository(database.build_session_factory(db_engine))


@pytest.fixture
def test_settings():
    return Settings(
        DATABASE_URL=SQLALCHEMY_TEST_DATABASE_URL,
        BASE_URL=TEST_BASE_URL,
        CORS_ALLOWED_ORIGINS=["http://localhost:3000"],
    )


@pytest.fixture
def app(db_engine, test_settings):
    return create_app(settings=test_settings, engine=db_engine, rng=random.Random(1234))


@pytest.fixture
def client(app):
    """Creates a test client bound to the in-memory database."""
    yield TestClient(app)


@pytest.fixture
def sample_urls():
    """Provides sample URLs for testing."""
    return [
        "https://example.com/test1",
        "https://google.com/search?q=test",
        "https://github.com/user/repo",
    ]
