import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from database.connection import build_engine, create_tables, get_db
from main import app


@pytest.fixture
def db_session_factory():
    engine = build_engine("sqlite://")
    create_tables(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    engine.dispose()


@pytest.fixture
def db(db_session_factory):
    session = db_session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session_factory):
    def override_get_db():
        session = db_session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def category(client):
    response = client.post("/api/categories", json={"name": "Kitchen", "description": "Cookware"})
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def other_category(client):
    response = client.post("/api/categories", json={"name": "Books", "description": "Reading"})
    assert response.status_code == 201
    return response.json()["data"]


def make_product(client, category_id, **fields):
    payload = {"title": "Mug", "price": 9.99, "categoryId": category_id}
    payload.update(fields)
    response = client.post("/api/products", json=payload)
    assert response.status_code == 201, response.json()
    return response.json()["data"]
