import uuid

import pytest
from fastapi.testclient import TestClient

from course_forge.api.deps import get_saved_content_service
from course_forge.api.main import create_app
from course_forge.application.services import SavedContentService
from course_forge.boundary.store import InMemoryResultStore

DIAGRAM = {
    "imageUrl": "https://storage.example/overview.png",
    "createEraserFileUrl": "https://app.eraser.io/new?requestId=1",
    "diagrams": [{"diagramType": "mind-map", "code": "A > B"}],
}


@pytest.fixture
def client():
    app = create_app()
    service = SavedContentService(store=InMemoryResultStore())
    app.dependency_overrides[get_saved_content_service] = lambda: service
    return TestClient(app)


@pytest.fixture
def result_json(generation_result):
    return generation_result.model_dump(mode="json", by_alias=True)


def save(client, result_json, **extra):
    response = client.post("/api/v1/saved-contents", json={"data": result_json, **extra})
    assert response.status_code == 201
    return response.json()


def test_save_and_get(client, result_json):
    saved = save(client, result_json, diagrams={"overview": DIAGRAM})

    assert saved["title"] == "Intro to Linear Algebra"
    assert isinstance(saved["timestamp"], int)
    assert saved["diagrams"]["overview"] == DIAGRAM

    response = client.get(f"/api/v1/saved-contents/{saved['id']}")

    assert response.status_code == 200
    assert response.json()["data"] == result_json


def test_list_newest_first(client, result_json):
    first = save(client, result_json, title="first")
    second = save(client, result_json, title="second")

    response = client.get("/api/v1/saved-contents")

    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == [second["id"], first["id"]]


def test_delete_preserves_order(client, result_json):
    ids = [save(client, result_json, title=f"item-{i}")["id"] for i in range(3)]

    response = client.delete(f"/api/v1/saved-contents/{ids[1]}")

    assert response.status_code == 204
    remaining = [item["id"] for item in client.get("/api/v1/saved-contents").json()]
    assert remaining == [ids[2], ids[0]]


def test_get_missing_returns_404(client):
    response = client.get(f"/api/v1/saved-contents/{uuid.uuid4()}")
    assert response.status_code == 404


def test_delete_missing_returns_404(client):
    response = client.delete(f"/api/v1/saved-contents/{uuid.uuid4()}")
    assert response.status_code == 404


def test_blank_title_returns_400(client, result_json):
    response = client.post("/api/v1/saved-contents", json={"data": result_json, "title": "  "})
    assert response.status_code == 400


def test_unknown_diagram_key_returns_400(client, result_json):
    response = client.post(
        "/api/v1/saved-contents",
        json={"data": result_json, "diagrams": {"chapter-42": DIAGRAM}},
    )
    assert response.status_code == 400
