import os

# アプリのimport前にテスト用の設定にする
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ.pop("ADMIN_TOKEN", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401
from database import Base, get_db
from main import app
from seed import seed_prefectures, seed_regions


@pytest.fixture
def engine():
    """テストごとに空のインメモリSQLite"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    """地方・都道府県を投入済みのセッション（駅は空）"""
    session = session_factory()
    seed_regions(session)
    seed_prefectures(session)
    yield session
    session.close()


@pytest.fixture
def client(db, session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client():
    """DBに接続できない状態のクライアント"""
    broken_engine = create_engine("sqlite:////nonexistent-dir/unreachable.db")
    BrokenSession = sessionmaker(autocommit=False, autoflush=False, bind=broken_engine)

    def override_get_db():
        session = BrokenSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
    broken_engine.dispose()


@pytest.fixture
def create_station(client):
    def _create(name, location, **extra):
        response = client.post("/api/stations", json={"name": name, "location": location, **extra})
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_place(client):
    def _create(kind, name, station, **extra):
        body = {"name": name, "googleMapsUrl": f"https://maps.google.com/?q={name}", "station": station}
        body.update(extra)
        response = client.post(f"/api/{kind}", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
