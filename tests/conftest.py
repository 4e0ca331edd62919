"""Shared test fixtures and configuration."""
import os

# Point the application engine at SQLite before anything imports schoolvote.db
os.environ["DATABASE_URL"] = "sqlite://"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from schoolvote.main import app  # noqa: E402
from schoolvote.db.base import Base  # noqa: E402
from schoolvote.api.deps import get_db  # noqa: E402
from schoolvote.core import config  # noqa: E402
from schoolvote.core.security import create_session_token  # noqa: E402
from tests.utils import make_user  # noqa: E402


SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(autouse=True)
def disable_rate_limiting_for_tests(request):
    """Disable rate limiting for all tests except rate limiting tests."""
    from schoolvote.core.rate_limit import limiter

    if "rate_limit" in request.keywords:
        limiter.reset()
        limiter.enabled = True
        yield
        limiter.reset()
    else:
        limiter.enabled = False
        yield
        limiter.enabled = True


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh database for each test."""
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Create a new database session for a test."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with a test database."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def client_for(client):
    """
    Factory for additional clients logged in as a given user.

    All clients share the test database; each has its own cookie jar.
    """
    opened = []

    def _make(user):
        test_client = TestClient(app)
        test_client.cookies.set(config.settings.SESSION_COOKIE_NAME, create_session_token(user))
        opened.append(test_client)
        return test_client

    yield _make
    for test_client in opened:
        test_client.close()


@pytest.fixture
def admin_user(db_session):
    return make_user(db_session, name="Admin", reference_number="ADMIN-1", is_admin=True,
                     school_level=None, grade_level=None)


@pytest.fixture
def student(db_session):
    """An elementary grade 4 student who has not voted yet."""
    return make_user(db_session, name="Maria Clara", reference_number="2025-0001",
                     school_level="elementary", grade_level=4)


@pytest.fixture
def admin_client(client_for, admin_user):
    """Create a test client with the admin session cookie already set."""
    return client_for(admin_user)


@pytest.fixture
def student_client(client_for, student):
    return client_for(student)
