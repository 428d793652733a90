# tests/conftest.py
from __future__ import annotations

import os

# DB in-memory pentru teste; setat ÎNAINTE de importul aplicației (settings/engine se citesc la import)
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ.setdefault("SQLALCHEMY_CREATE_ALL", "0")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from product_api import models  # noqa: F401
from product_api.database import Base, SessionLocal, engine
from product_api.main import app


@pytest.fixture(autouse=True)
def _tables():
    """Schema curată pentru fiecare test."""
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
def client() -> TestClient:
    # context manager => rulează și lifespan-ul (startup/shutdown)
    with TestClient(app) as c:
        yield c
