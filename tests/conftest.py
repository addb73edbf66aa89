import os
import tempfile

# Antes de importar la app: base en memoria y logs/uploads en un directorio temporal
_TMP_DIR = tempfile.mkdtemp(prefix="nomadiq-tests-")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_DIR"] = _TMP_DIR
os.environ["UPLOAD_DIR"] = os.path.join(_TMP_DIR, "uploads")

from typing import Optional

import pytest
from fastapi import Header, HTTPException
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
from main import app
from models.User import User
from utils.auth import get_current_uid

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def fake_current_uid(authorization: Optional[str] = Header(default=None)) -> str:
    # En tests el "token" es directamente el uid: "Bearer uid-ana"
    parts = (authorization or "").split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        raise HTTPException(status_code=401, detail="Token requerido")
    return parts[1]


def auth(uid: str) -> dict:
    return {"Authorization": f"Bearer {uid}"}


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_current_uid] = fake_current_uid
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def ana(db):
    user = User(firebase_uid="uid-ana", name="Ana", email="ana@example.com")
    db.add(user)
    db.commit()
    return auth("uid-ana")


@pytest.fixture
def bruno(db):
    user = User(firebase_uid="uid-bruno", name="Bruno", email="bruno@example.com")
    db.add(user)
    db.commit()
    return auth("uid-bruno")


@pytest.fixture
def admin(db):
    user = User(firebase_uid="uid-admin", name="Admin", email="admin@example.com", role="admin")
    db.add(user)
    db.commit()
    return auth("uid-admin")


@pytest.fixture
def destination(client, ana):
    resp = client.post(
        "/destinations/",
        json={
            "name": "Bariloche",
            "country": "Argentina",
            "summary": "Lagos, montañas y chocolate en la Patagonia.",
            "lat": -41.13,
            "lng": -71.31,
            "tags": ["nieve", "montaña"],
        },
        headers=ana,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.fixture
def trip(client, ana):
    resp = client.post(
        "/trips/",
        json={
            "title": "Viaje a Bariloche",
            "start_date": "2025-07-15",
            "end_date": "2025-07-17",
            "budget": 600,
            "interests": ["nieve", "gastronomía"],
        },
        headers=ana,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()
