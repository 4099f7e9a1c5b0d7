import pytest
from fastapi.testclient import TestClient

from api.routes import analyses as analyses_routes
from main import app


class FakeTask:
    def __init__(self):
        self.queued = []

    def delay(self, url):
        self.queued.append(url)
        return type("Queued", (), {"id": "task-123"})()


class FakeResult:
    def __init__(self, state, info=None, result=None):
        self.state = state
        self.info = info
        self.result = result


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def fake_task(monkeypatch):
    task = FakeTask()
    monkeypatch.setattr(analyses_routes, "run_page_analysis", task)
    return task


def use_result(monkeypatch, result: FakeResult) -> None:
    monkeypatch.setattr(analyses_routes, "AsyncResult", lambda task_id, app=None: result)


def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["service"] == "factorscope"
    assert len(response.json()["factors"]) == 10
    assert response.json()["factors"][0] == "AI.1.1"


def test_root(client):
    assert client.get("/").json()["docs"] == "/docs"


def test_queue_analysis(client, fake_task):
    response = client.post("/api/v1/analyses", json={"url": "https://example.com/blog/post"})

    assert response.status_code == 202
    body = response.json()
    assert body["task_id"] == "task-123"
    assert body["status"] == "queued"
    assert fake_task.queued == [body["url"]]
    assert body["url"].startswith("https://example.com/blog/post")


def test_queue_rejects_invalid_url(client, fake_task):
    response = client.post("/api/v1/analyses", json={"url": "not a url"})
    assert response.status_code == 422
    assert fake_task.queued == []


def test_status_while_running(client, monkeypatch):
    progress = {
        "stage_id": "S.1.1",
        "percent_complete": 58,
        "message": "Heading Hierarchy: 80/100",
        "educational_text": "Headings outline the page.",
    }
    use_result(monkeypatch, FakeResult("PROGRESS", info=progress))

    body = client.get("/api/v1/analyses/task-123").json()
    assert body["status"] == "progress"
    assert body["progress"]["percent_complete"] == 58
    assert body["result"] is None


def test_status_when_complete(client, monkeypatch):
    factor = {
        "factor_id": "AI.1.1",
        "factor_name": "HTTPS Security",
        "pillar": "AI",
        "phase": "instant",
        "score": 100,
        "confidence": 100,
        "weight": 1.0,
        "evidence": ["Site uses HTTPS protocol"],
        "recommendations": [],
        "processing_time_ms": 1,
    }
    outcome = {
        "factors": [factor],
        "overall_score": 100,
        "processing_time_ms": 12,
        "success": True,
        "error": None,
    }
    use_result(monkeypatch, FakeResult("SUCCESS", result=outcome))

    body = client.get("/api/v1/analyses/task-123").json()
    assert body["status"] == "success"
    assert body["result"]["overall_score"] == 100
    assert body["result"]["factors"][0]["factor_id"] == "AI.1.1"


def test_status_when_failed(client, monkeypatch):
    use_result(monkeypatch, FakeResult("FAILURE", info=RuntimeError("worker lost")))

    body = client.get("/api/v1/analyses/task-123").json()
    assert body["status"] == "failure"
    assert body["error"] == "worker lost"


def test_status_when_pending(client, monkeypatch):
    use_result(monkeypatch, FakeResult("PENDING"))

    body = client.get("/api/v1/analyses/unknown").json()
    assert body["status"] == "pending"
    assert body["progress"] is None
