"""Pytest configuration and fixtures."""

import os

# Must be set before codetrack reads its settings
os.environ.setdefault("CODETRACK_DATABASE_URL", "sqlite:///./test.db")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from codetrack.api.dependencies import get_password_context  # noqa: E402
from codetrack.database import Base, get_db, make_engine  # noqa: E402
from codetrack.main import app  # noqa: E402
from codetrack.queries import Queries  # noqa: E402
from codetrack.services.accounts import AccountService  # noqa: E402

SQLALCHEMY_DATABASE_URL = os.environ["CODETRACK_DATABASE_URL"]
engine = make_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

ALICE_EMAIL = "alice@example.com"
ALICE_PASSWORD = "secret1"


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    from codetrack import models  # noqa: F401

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
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def accounts(db):
    """Account service bound to the test session."""
    return AccountService(Queries(db), get_password_context())


@pytest.fixture
def credentials():
    """Login payload for the default test account."""
    return {"email": ALICE_EMAIL, "password": ALICE_PASSWORD}


@pytest.fixture
def registered(client, credentials):
    """Register alice and return her credentials."""
    response = client.post("/api/accounts/register", json=credentials)
    assert response.status_code == 200
    return credentials


@pytest.fixture
def logged_in(client, registered):
    """Log alice in; the client's cookie jar now holds her session."""
    response = client.post("/api/accounts/login", json=registered)
    assert response.status_code == 200
    return registered
