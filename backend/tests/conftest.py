import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from taskboard.db.session import Database
from taskboard.main import create_app


@pytest.fixture
def db():
    """Fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    database = Database("sqlite://", engine=engine)
    yield database
    database.dispose()


@pytest.fixture
def session(db):
    db.init_db()
    with db.session() as s:
        yield s


@pytest.fixture
def client(db):
    app = create_app(database=db, configure_logging=False)
    with TestClient(app) as test_client:
        yield test_client
