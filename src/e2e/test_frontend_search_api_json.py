import pytest
from search_engine import config as CFG
from search_engine.engine import Engine
from frontend.web import app as flask_app


@pytest.fixture
def client():
    import frontend.web as webmod
    webmod._engine = Engine.from_labelled(CFG.DEMO_CORPUS)
    yield flask_app.test_client()
    webmod._engine = None


@pytest.mark.e2e
def test_search_api_json(client):
    rv = client.get("/api/search?q=fox")
    assert rv.status_code == 200
    data = rv.get_json()
    assert [r["label"] for r in data] == ["document1", "document3"]
    for key in ("document", "label", "score", "rank"):
        assert key in data[0]


@pytest.mark.e2e
def test_search_api_empty_and_unmatched(client):
    assert client.get("/api/search?q=").get_json() == []
    assert client.get("/api/search?q=zebra").get_json() == []


@pytest.mark.e2e
def test_health_and_home(client):
    data = client.get("/health").get_json()
    assert data == {"ok": True, "documents": 3}
    r = client.get("/")
    assert r.status_code == 200
    assert "/api/search" in r.data.decode("utf-8")
