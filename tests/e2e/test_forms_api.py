"""End-to-end tests for comments, contact and newsletter endpoints."""

import pytest
from fastapi.testclient import TestClient

from blog.interface.api.app import create_app
from tests.di import build_test_container

SLUG = "como-criar-apis-restful-nodejs-express"


@pytest.fixture
def client():
    """Create test client with production stores."""
    app_instance = create_app(container=build_test_container(unmock={"persistence"}))
    return TestClient(app_instance)


class TestComments:
    """Tests for /api/comments."""

    def test_get_requires_post_slug(self, client):
        response = client.get("/api/comments")

        assert response.status_code == 400
        assert response.json()["detail"] == "postSlug obrigatorio"

    def test_seeded_comments_newest_first(self, client):
        body = client.get("/api/comments", params={"postSlug": SLUG}).json()

        assert [c["author"] for c in body["comments"]] == [
            "Pedro Santos",
            "Maria Silva",
        ]

    def test_post_then_list(self, client):
        response = client.post(
            "/api/comments",
            json={"postSlug": SLUG, "author": "  Ana ", "content": " Muito util! "},
        )

        assert response.status_code == 201
        comment = response.json()["comment"]
        assert comment["author"] == "Ana"
        assert comment["content"] == "Muito util!"
        assert comment["postSlug"] == SLUG

        listed = client.get("/api/comments", params={"postSlug": SLUG}).json()
        assert listed["comments"][0]["id"] == comment["id"]

    def test_post_validation_reasons(self, client):
        response = client.post(
            "/api/comments",
            json={"postSlug": SLUG, "author": "A", "content": "Muito util!"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == ["Nome deve ter pelo menos 2 caracteres."]

    def test_post_missing_fields(self, client):
        response = client.post("/api/comments", json={"postSlug": SLUG})

        assert response.status_code == 400
        assert response.json()["detail"] == ["Campos obrigatorios: nome e comentario."]

    def test_post_unknown_article(self, client):
        response = client.post(
            "/api/comments",
            json={"postSlug": "nao-existe", "author": "Ana", "content": "Muito util!"},
        )

        assert response.status_code == 404


class TestContact:
    """Tests for /api/contact."""

    def test_success(self, client):
        response = client.post(
            "/api/contact",
            json={
                "name": "Ana",
                "email": "ana@example.com",
                "subject": "Proposta",
                "message": "Vamos conversar sobre um projeto?",
            },
        )

        assert response.status_code == 200
        assert response.json()["message"] == (
            "Mensagem enviada com sucesso! Responderei o mais breve possivel."
        )

    def test_reports_every_reason(self, client):
        response = client.post("/api/contact", json={"name": "Ana"})

        assert response.status_code == 400
        assert len(response.json()["detail"]) == 3


class TestNewsletter:
    """Tests for /api/newsletter."""

    def test_subscribe_and_duplicate(self, client):
        first = client.post("/api/newsletter", json={"email": "dev@example.com"})
        second = client.post("/api/newsletter", json={"email": "dev@example.com"})

        assert first.status_code == 200
        assert second.status_code == 409
        assert second.json()["detail"] == "Este email ja esta inscrito."

    def test_invalid_email(self, client):
        response = client.post("/api/newsletter", json={"email": "invalido"})

        assert response.status_code == 400
        assert response.json()["detail"] == ["Email invalido."]
