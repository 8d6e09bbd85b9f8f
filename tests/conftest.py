import pytest
from fastapi.testclient import TestClient

from game_catalog import main
from game_catalog.store import GameStore


@pytest.fixture
def store(monkeypatch):
    """A freshly seeded store installed behind the API for one test."""
    fresh = GameStore.seeded()
    monkeypatch.setattr(main, "game_store", fresh)
    return fresh


@pytest.fixture
def client(store):
    with TestClient(main.app) as c:
        yield c


@pytest.fixture
def new_game():
    return {"name": "Test", "genre": "Test", "price": 9.99, "releaseDate": "2020-01-01"}
