"""Pytest configuration and fixtures."""

import os

# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"].replace("/chirpy", "/chirpy_test")
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

# Must be set before chirpy builds its engine and password context
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.pop("PLATFORM", None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from chirpy.config import Settings, get_settings  # noqa: E402
from chirpy.database import Base, engine, get_db  # noqa: E402
from chirpy.main import app  # noqa: E402

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override and a zeroed hit counter."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.state.metrics.reset()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def dev_platform():
    """Run the app as if PLATFORM=dev were set."""
    app.dependency_overrides[get_settings] = lambda: Settings(platform="dev")
    yield
    app.dependency_overrides.pop(get_settings, None)


@pytest.fixture
def user(client):
    """Register a user and return the response body."""
    response = client.post(
        "/api/users",
        json={"email": "test@example.com", "password": "testpass123"},
    )
    assert response.status_code == 201
    return response.json()
