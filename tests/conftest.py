"""
Shared test fixtures.

Sets up an isolated test database so tests never touch
the real database. Tables are created before and dropped
after every test, so each test starts from an empty store.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from account_system.main import app
from account_system.models import AccountUser
from account_system.models.base import Base, get_db


# SQLite keeps the tests free of external database infrastructure.
TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop them after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Provide a database session for direct service testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def make_user(db_session):
    """
    Factory for users.

    Users are owned by an external identity service, so
    tests insert them directly.
    """
    def _make_user(name="Pororo"):
        user = AccountUser(name=name)
        db_session.add(user)
        db_session.commit()
        return user

    return _make_user


@pytest.fixture
def client(db_session):
    """
    Provide a test client with the test database.

    We override the get_db dependency so the FastAPI app
    uses our test session instead of the real database.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
