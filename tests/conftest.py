import os

# Phải đặt trước khi import app: core.database đọc DATABASE_URL lúc import
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.database import get_db
from main import app
from models import Base
from services.regulation_service import regulation_cache


def _memory_engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def engine():
    engine = _memory_engine()
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def broken_session():
    """Session trên CSDL chưa tạo bảng: mọi truy vấn đều lỗi."""
    engine = _memory_engine()
    session = sessionmaker(bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture(autouse=True)
def reset_regulation_cache():
    regulation_cache.reset()
    yield
    regulation_cache.reset()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def patient_payload():
    return {
        "name": "Nguyễn Văn An",
        "gender": "Nam",
        "date_of_birth": "1990-05-01",
        "address": "12 Lê Lợi, Quận 1",
        "phone_number": "0901234567",
    }


@pytest.fixture
def create_patient(client, patient_payload):
    def _create(**overrides):
        response = client.post("/api/patients", json={**patient_payload, **overrides})
        assert response.status_code == 201, response.text
        return response.json()
    return _create


@pytest.fixture
def create_examination(client):
    def _create(patient, medicines=None, **overrides):
        payload = {
            "patient_id": patient["id"],
            "patient_name": patient["name"],
            "symptoms": "Sốt, đau họng",
            "diagnosis": "Viêm họng",
            "medicines": medicines if medicines is not None else [],
            **overrides,
        }
        response = client.post("/api/examinations", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _create
