import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-key")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from infrastructure.database import Base, get_db  # noqa: E402
from domain.entities.company_entity import Company  # noqa: E402,F401
from domain.entities.unit_entity import Unit  # noqa: E402,F401
from domain.entities.user_entity import User  # noqa: E402,F401
from domain.entities.asset_entity import Asset  # noqa: E402,F401
from application.use_cases.security import create_access_token  # noqa: E402
from main import app  # noqa: E402

# b"\x89PNG\r\n\x1a\n"
BASE64_IMAGE = "data:image/png;base64,iVBORw0KGgo="

SAMPLE = {
    "companies": {
        "name": "Teste Company",
        "description": "Company for testing",
        "cnpj": "00155513000171",
        "active": True,
    },
    "units": {
        "name": "Teste Unit",
        "company": 1,
    },
    "users": {
        "name": "Teste User",
        "email": "user@teste.com.br",
        "role": "admin",
        "username": "teste-user",
        "password": "teste123",
        "company": 1,
    },
    "assets": {
        "name": "Teste Asset",
        "healthscore": 42,
        "status": "inOperation",
        "serialnumber": "3phMw9nm",
        "image": BASE64_IMAGE,
        "description": "Asset for testing",
        "user": 1,
        "unit": 1,
        "company": 1,
    },
}


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def make_headers():
    def _make_headers(id=1, role="admin", company=None, name="Test User"):
        token = create_access_token(id=id, name=name, role=role, company=company)
        return {"x-access-token": token}

    return _make_headers


@pytest.fixture()
def admin_headers(make_headers):
    return make_headers()
