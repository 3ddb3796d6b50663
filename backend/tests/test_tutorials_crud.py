"""
End-to-end tests for the tutorials API against an in-memory database.
"""
from fastapi.testclient import TestClient
from sqlalchemy import inspect

from constants import HTTPStatus
from database import engine


def _create(client, title, description=None, published=False):
    response = client.post(
        "/tutorials",
        json={"title": title, "description": description, "published": published}
    )
    assert response.status_code == HTTPStatus.CREATED
    return response.json()


class TestTutorialCrud:

    def test_create_assigns_id_and_defaults(self, client):
        response = client.post("/tutorials", json={"title": "Java"})

        assert response.status_code == HTTPStatus.CREATED
        body = response.json()
        assert body["id"] > 0
        assert body["title"] == "Java"
        assert body["description"] is None
        assert body["published"] is False

    def test_create_blank_title_is_rejected(self, client):
        response = client.post("/tutorials", json={"title": "   "})

        assert response.status_code == HTTPStatus.BAD_REQUEST
        assert "blank" in response.json()["detail"]

    def test_create_missing_title_is_unprocessable(self, client):
        response = client.post("/tutorials", json={"description": "no title"})

        assert response.status_code == HTTPStatus.UNPROCESSABLE_ENTITY

    def test_get_by_id(self, client):
        created = _create(client, "Python", "Learn Python", True)

        response = client.get(f"/tutorials/{created['id']}")

        assert response.status_code == HTTPStatus.OK
        assert response.json() == created

    def test_get_unknown_id_returns_not_found(self, client):
        response = client.get("/tutorials/999")

        assert response.status_code == HTTPStatus.NOT_FOUND
        assert response.json()["detail"] == "Tutorial 999 not found"

    def test_update_replaces_fields(self, client):
        created = _create(client, "Draft", "todo")

        response = client.put(
            f"/tutorials/{created['id']}",
            json={"title": "Final", "description": "done", "published": True}
        )

        assert response.status_code == HTTPStatus.OK
        assert response.json() == {
            "id": created["id"],
            "title": "Final",
            "description": "done",
            "published": True,
        }
        assert client.get(f"/tutorials/{created['id']}").json()["title"] == "Final"

    def test_update_unknown_id_returns_not_found(self, client):
        response = client.put("/tutorials/42", json={"title": "Nothing"})

        assert response.status_code == HTTPStatus.NOT_FOUND

    def test_delete_removes_tutorial(self, client):
        created = _create(client, "Temporary")

        response = client.delete(f"/tutorials/{created['id']}")

        assert response.status_code == HTTPStatus.NO_CONTENT
        assert client.get(f"/tutorials/{created['id']}").status_code == HTTPStatus.NOT_FOUND

    def test_delete_unknown_id_returns_not_found(self, client):
        response = client.delete("/tutorials/7")

        assert response.status_code == HTTPStatus.NOT_FOUND

    def test_delete_all(self, client):
        _create(client, "One")
        _create(client, "Two")

        response = client.delete("/tutorials")

        assert response.status_code == HTTPStatus.NO_CONTENT
        assert client.get("/tutorials").status_code == HTTPStatus.NO_CONTENT


class TestTutorialListing:

    def test_empty_store_returns_no_content(self, client):
        response = client.get("/tutorials")

        assert response.status_code == HTTPStatus.NO_CONTENT
        assert response.content == b""

    def test_listing_filters(self, client):
        java = _create(client, "Java", "Learn Java programming", True)
        python = _create(client, "Python", "Learn Python programming", False)
        javascript = _create(client, "JavaScript", "Learn JavaScript programming", True)

        everything = client.get("/tutorials").json()
        assert [t["id"] for t in everything] == [java["id"], python["id"], javascript["id"]]

        by_title = client.get("/tutorials", params={"title": "java"}).json()
        assert [t["title"] for t in by_title] == ["Java", "JavaScript"]

        published = client.get("/tutorials", params={"title": "published"}).json()
        assert [t["id"] for t in published] == [java["id"], javascript["id"]]

        drafts = client.get("/tutorials", params={"published": "false"}).json()
        assert [t["id"] for t in drafts] == [python["id"]]

        combined = client.get("/tutorials", params={"title": "script", "published": "true"}).json()
        assert [t["id"] for t in combined] == [javascript["id"]]

        assert client.get("/tutorials", params={"title": "Ruby"}).status_code == HTTPStatus.NO_CONTENT

    def test_title_wildcards_are_literal(self, client):
        _create(client, "100% Python")
        _create(client, "Python basics")

        response = client.get("/tutorials", params={"title": "100%"})

        assert response.status_code == HTTPStatus.OK
        assert [t["title"] for t in response.json()] == ["100% Python"]

    def test_published_endpoint(self, client):
        _create(client, "Hidden", published=False)
        assert client.get("/tutorials/published").status_code == HTTPStatus.NO_CONTENT

        visible = _create(client, "Visible", published=True)
        response = client.get("/tutorials/published")

        assert response.status_code == HTTPStatus.OK
        assert response.json() == [visible]


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == HTTPStatus.OK
    assert response.json()["status"] == "ok"


def test_startup_creates_schema(app):
    with TestClient(app) as started:
        assert started.get("/health").status_code == HTTPStatus.OK

    assert "tutorials" in inspect(engine).get_table_names()
