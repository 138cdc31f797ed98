import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from mapping_dashboard.main import app
from mapping_dashboard.db.base import Base
from mapping_dashboard.db.sample_data import load_sample_data
from mapping_dashboard.db.session import get_db, make_engine
from mapping_dashboard.db.store import MappingStore

engine = make_engine("sqlite://")
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def db_session():
    """
    Fresh in-memory database per test, loaded with the sample dataset.

    Everything a test does happens in one session, so request handlers and the
    test body see the same rows without committing.
    """
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    load_sample_data(session)
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def store(db_session):
    return MappingStore(db_session)


@pytest.fixture(autouse=True)
def override_get_db(db_session):
    def _get_db_override():
        yield db_session

    app.dependency_overrides[get_db] = _get_db_override
    yield
    app.dependency_overrides.clear()


@pytest.fixture()
def client():
    return TestClient(app)


@pytest.fixture()
def session_factory():
    """Session factory bound to the test database, for tests that run the real get_db."""
    return TestingSessionLocal
