import pytest
from fastapi.testclient import TestClient

from wingo.api.main import app
from wingo.api import routes
from wingo.config import settings
from wingo.db.base import get_session
from wingo.sources import FetchError


@pytest.fixture
def client(session, source, sink):
    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[routes.get_source] = lambda: source
    app.dependency_overrides[routes.get_sink] = lambda: sink
    # no context manager: lifespan (scheduler) stays off
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_home(client):
    r = client.get("/")
    assert r.status_code == 200 and r.text == "Wingo backend running"

def test_tick_and_listings(client, source):
    for i, n in enumerate([7, 8, 9, 2]):
        source.push(f"p{i}", n)
        assert client.post("/api/engine/tick").json()["processed"] is True
    assert client.post("/api/engine/tick").json() == {"processed": False, "result": None}

    live = client.get("/api/live").json()
    assert [d["period"] for d in live] == ["p3", "p2", "p1", "p0"]
    assert live[0]["symbol"] == "Small"

    pred = client.get("/api/prediction").json()
    assert len(pred) == 1 and pred[0]["period"] == "p3" and pred[0]["decision"] == "WAIT"

    pats = client.get("/api/patterns", params={"pattern_type": "Break-Breaker"}).json()
    assert pats == [{"pattern_type": "Break-Breaker", "sequence": "SBBB", "occurred": 1, "success": 0}]

    streaks = client.get("/api/streaks").json()
    assert streaks == [{"start": "p0", "end": "p2", "symbol": "B", "length": 3}]

def test_live_limit(client, source):
    for i in range(25):
        source.push(f"{i:04d}", i % 10)
        client.post("/api/engine/tick")
    assert len(client.get("/api/live").json()) == 20

def test_empty_prediction(client):
    assert client.get("/api/prediction").json() == []

def test_draw_lookup(client, source):
    source.push("20240001", 4)
    client.post("/api/engine/tick")
    assert client.get("/api/draws/20240001").json()["number"] == 4
    assert client.get("/api/draws/404404").status_code == 404
    assert client.get("/api/draws/bad period!").status_code == 400

def test_tick_fetch_failure(client):
    class Down:
        def fetch_latest(self):
            raise FetchError("unreachable")
    app.dependency_overrides[routes.get_source] = lambda: Down()
    assert client.post("/api/engine/tick").status_code == 502

def test_tick_requires_key(client, source, monkeypatch):
    monkeypatch.setattr(settings, "api_key", "secret")
    source.push("1", 1)
    assert client.post("/api/engine/tick").status_code == 401
    assert client.post("/api/engine/tick", headers={"X-API-Key": "secret"}).status_code == 200
