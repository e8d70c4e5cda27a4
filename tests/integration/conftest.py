"""
Integration test fixtures. Overrides get_db (in-memory DB) and get_clock (settable time) for API tests.
"""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


@pytest.fixture
def override_get_db():
    """Create in-memory engine and session factory for API tests, with the catalog seeded."""
    from portal.config import Base
    import portal.models  # noqa: F401
    from portal.seed_data import LEARNING_PATHS
    from portal.services.catalog_service import CatalogService

    # StaticPool: sync routes run in a worker thread and must see the same in-memory DB
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    seed_db = TestingSessionLocal()
    try:
        CatalogService(seed_db).seed(LEARNING_PATHS)
    finally:
        seed_db.close()

    def _get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    return _get_db


@pytest.fixture
def api_client(override_get_db, clock):
    """FastAPI TestClient with in-memory DB and the shared fake clock."""
    from fastapi.testclient import TestClient
    from portal.api import app
    from portal.config import get_db
    from portal.services.progress_service import get_clock
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(override_get_db):
    """Insert a user directly and return its id."""
    from portal.models.models import User
    from portal.utils.jwt import get_password_hash

    def _make(email: str, password: str = "pass123", *, role: str = "student", **fields) -> int:
        db_gen = override_get_db()
        db = next(db_gen)
        try:
            user = User(email=email, hashed_password=get_password_hash(password), role=role, **fields)
            db.add(user)
            db.commit()
            db.refresh(user)
            return int(user.id)
        finally:
            db.close()

    return _make


@pytest.fixture
def login(api_client):
    """Log in and return Authorization headers."""
    def _login(email: str, password: str = "pass123") -> dict:
        response = api_client.post("/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}
    return _login
