import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test_taskmanager.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from taskmanager.main import app
from taskmanager.database import Base, engine, SessionLocal


# Recreate all tables for each test
@pytest.fixture(autouse=True)
def setup_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def sign_in(client):
    """Sign in ``email`` and return (email, auth headers)."""
    def _sign_in(email="a@x.com"):
        r = client.post("/user", json={"email": email})
        assert r.status_code == 200
        return email, {"Authorization": f"Bearer {r.json()['token']}"}
    return _sign_in
