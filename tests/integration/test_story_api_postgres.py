"""Story API against a real PostgreSQL database."""

import pytest
from fastapi.testclient import TestClient

from story_service.api.config import Settings
from story_service.api.database.db import Database
from story_service.api.main import create_app

VALID_BODY = {"title": "A", "content": "B", "createdBy": "C", "status": "draft"}


@pytest.fixture
def created_ids():
    return []


@pytest.fixture
def client(test_database_url, created_ids):
    settings = Settings(database_url=test_database_url)
    app = create_app(settings, Database(test_database_url))

    with TestClient(app) as client:
        yield client
        for story_id in created_ids:
            client.delete(f"/story/{story_id}")


@pytest.mark.requires_database
class TestStoryLifecycle:
    def test_create_update_delete(self, client, created_ids):
        created = client.post("/story", json=VALID_BODY)
        assert created.status_code == 201
        story = created.json()
        created_ids.append(story["id"])

        updated = client.put(f"/story/{story['id']}", json={"status": "published"})
        assert updated.status_code == 200
        assert updated.json()["title"] == "A"

        fetched = client.get(f"/story/{story['id']}")
        assert fetched.json()["status"] == "published"
        assert fetched.json()["createdAt"] == story["createdAt"]

        deleted = client.delete(f"/story/{story['id']}")
        assert deleted.status_code == 200
        assert client.get(f"/story/{story['id']}").status_code == 404

    def test_list_contains_created_stories(self, client, created_ids):
        ids = set()
        for n in range(3):
            story = client.post("/story", json={**VALID_BODY, "title": f"Story {n}"}).json()
            created_ids.append(story["id"])
            ids.add(story["id"])

        listed = {story["id"] for story in client.get("/story").json()}

        assert ids <= listed

    def test_malformed_id(self, client):
        assert client.get("/story/not-a-uuid").status_code == 400
        assert client.delete("/story/not-a-uuid").status_code == 500
