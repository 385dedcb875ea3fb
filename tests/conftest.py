import os

# La app se importa contra una base en memoria, nunca contra el archivo local
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core import database
from app.main import app


@pytest.fixture
def engine():
    engine = database.configure_engine(
        create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    )
    database.init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def client(db):
    app.dependency_overrides[database.get_db] = lambda: db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def crear(client):
    """POST a /api/{entidad} que falla si la respuesta no es 201."""

    def _crear(entidad: str, payload: dict) -> dict:
        response = client.post(f"/api/{entidad}", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _crear


@pytest.fixture
def usuario(crear):
    persona = crear("Person", {"name": "Ana Gómez", "email": "ana@sena.edu.co"})
    return crear("User", {
        "person_id": persona["id"],
        "username": "agomez",
        "email": "ana@sena.edu.co",
        "password": "Secreta123",
    })
