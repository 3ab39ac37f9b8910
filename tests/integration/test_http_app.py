"""
Integration tests for the FastAPI app serving the GraphQL schema.

Tests cover:
- Health endpoint
- Queries and mutations over HTTP
- Error payloads
- Settings controlling seed data and mount path
"""

import pytest
from fastapi.testclient import TestClient

from blog.blogql_server.api import create_app
from blog.blogql_server.config import Settings
from blog.blogql_server.engine import Engine
from blog.blogql_server.store import Collection

SEARCH_USERS = "query Users($q: String) { users(query: $q) { name } }"

CREATE_POST = """
mutation CreatePost($data: CreatePostInput!) {
    createPost(data: $data) { id }
}
"""


class TestHttpApp:
    """Tests for create_app with demo data."""

    @pytest.fixture
    def client(self):
        app = create_app(Settings(seed_demo_data=True))
        with TestClient(app) as client:
            yield client

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body == {"status": "healthy", "service": "blogql"}

    def test_query(self, client):
        response = client.post(
            "/graphql",
            json={"query": SEARCH_USERS, "variables": {"q": "ike"}},
        )

        assert response.status_code == 200
        assert response.json()["data"] == {"users": [{"name": "Mike"}]}

    def test_mutation_then_query(self, client):
        data = {"title": "Thriller", "body": "Night", "published": True, "author": "3"}
        created = client.post(
            "/graphql",
            json={"query": CREATE_POST, "variables": {"data": data}},
        ).json()
        post_id = created["data"]["createPost"]["id"]

        response = client.post(
            "/graphql",
            json={"query": '{ posts(query: "thriller") { id author { name } } }'},
        )

        assert response.json()["data"]["posts"] == [{"id": post_id, "author": {"name": "Mike"}}]

    def test_domain_error_payload(self, client):
        """Domain errors come back with code and details in extensions."""
        data = {"title": "T", "body": "B", "published": True, "author": "42"}
        response = client.post(
            "/graphql",
            json={"query": CREATE_POST, "variables": {"data": data}},
        )

        body = response.json()
        assert body["data"] is None
        assert body["errors"][0]["message"] == "User not found"
        assert body["errors"][0]["extensions"]["code"] == "USER_NOT_FOUND"
        assert body["errors"][0]["extensions"]["details"] == {"user_id": "42"}


class TestHttpAppSettings:
    """Tests for settings-driven app behaviour."""

    def test_unseeded_app_starts_empty(self):
        app = create_app(Settings(seed_demo_data=False))

        with TestClient(app) as client:
            response = client.post("/graphql", json={"query": "{ users { id } }"})

        assert response.json()["data"] == {"users": []}

    def test_custom_path_and_engine(self):
        """An injected engine is served at the configured path."""
        engine = Engine.create(seed=True)
        app = create_app(Settings(graphql_path="/api/graphql"), engine=engine)

        with TestClient(app) as client:
            client.post("/api/graphql", json={"query": 'mutation { deleteUser(id: "1") { id } }'})

        assert engine.store.count(Collection.USERS) == 2
        assert engine.store.count(Collection.POSTS) == 2

    def test_invalid_settings_rejected(self):
        with pytest.raises(ValueError, match="BLOGQL_GRAPHQL_PATH"):
            create_app(Settings(graphql_path="graphql"))
