import json

import pytest
from fastapi.testclient import TestClient

import api.main as api_main
from api.main import app
from catalog.schema import Item
from catalog.store import Catalog
from engine_core.config import get_config


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "healthy", "items": 5}


def test_similar_items(client):
    res = client.get("/items/5/similar")
    assert res.status_code == 200
    body = res.json()
    assert body["query_id"] == 5
    assert body["k"] == 5
    assert [r["item_id"] for r in body["results"]] == [4, 3, 2, 1]
    assert body["results"][-1]["percent"] == 56


def test_similar_items_k(client):
    res = client.get("/items/1/similar", params={"k": 2})
    assert res.status_code == 200
    assert len(res.json()["results"]) == 2


def test_similar_unknown_item(client):
    res = client.get("/items/999/similar")
    assert res.status_code == 404
    assert "999" in res.json()["detail"]


def test_similar_k_bounds(client):
    assert client.get("/items/1/similar", params={"k": -1}).status_code == 422
    too_big = get_config().max_top_k + 1
    assert client.get("/items/1/similar", params={"k": too_big}).status_code == 400


def test_similar_length_mismatch(client):
    # the loader refuses mismatched ratings, so install a hand-built catalog
    api_main.catalog = Catalog(items=[
        Item(id=1, title="a", rating=(1, 2)),
        Item(id=2, title="b", rating=(3, 4, 5)),
    ])
    res = client.get("/items/1/similar")
    assert res.status_code == 422
    assert "Malformed catalog data" in res.json()["detail"]


def test_items_and_keys(client):
    items = client.get("/items", params={"limit": 2}).json()
    assert [i["title"] for i in items] == ["Brooklyn 99", "Rush Hour 2"]
    assert client.get("/items/4").json()["rating"] == [4.0, 10.0]
    assert client.get("/items/404").status_code == 404
    assert client.get("/keys").json() == [
        {"title": "Comedy", "weight": 3.0},
        {"title": "Action", "weight": 2.0},
    ]


def test_queries_are_logged(client, isolated_logs):
    client.get("/items/5/similar")
    entries = json.loads(next(isolated_logs.glob("*.json")).read_text(encoding="utf-8"))
    types = [e["type"] for e in entries]
    assert types == ["catalog_loaded", "similar_query"]
    assert entries[-1]["payload"]["returned"] == 4
