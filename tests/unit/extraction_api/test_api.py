"""Tests for the extraction_api HTTP surface."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from extract_content.models import ExtractedRecord
from extraction_api.config import AppConfig, get_config
from extraction_api.dependencies import get_extractor, get_store
from extraction_api.main import create_app
from extraction_api.routers import extraction as extraction_module
from store_content.store_content import StorageError

API_KEY = "test-secret"


class FakeExtractor:
    def __init__(self) -> None:
        self.calls = 0

    def extract(self, content: str, article: Any) -> ExtractedRecord:
        self.calls += 1
        return ExtractedRecord(title="t", summary="s")


class FakeStore:
    def __init__(self, fail_on: set[Any] | None = None) -> None:
        self.stored: list[Any] = []
        self.fail_on = fail_on or set()

    def store(self, article: Any, record: ExtractedRecord) -> None:
        if article.get("id") in self.fail_on:
            raise StorageError("Supabase storage error: rejected")
        self.stored.append(article)


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(
        supabase_url="https://db.example.com",
        supabase_service_role_key="service",
        openai_api_key="sk-test",
        extraction_api_key=API_KEY,
    )


@pytest.fixture
def extractor() -> FakeExtractor:
    return FakeExtractor()


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def app(config: AppConfig, extractor: FakeExtractor, store: FakeStore):
    app = create_app()
    app.dependency_overrides[get_config] = lambda: config
    app.dependency_overrides[get_extractor] = lambda: extractor
    app.dependency_overrides[get_store] = lambda: store
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


def _post(client: TestClient, body: Any, key: str | None = API_KEY):
    headers = {"x-api-key": key} if key is not None else {}
    return client.post("/api/trigger-content-extraction", json=body, headers=headers)


class TestAuth:
    def test_missing_key_returns_401(self, client: TestClient) -> None:
        response = _post(client, {"articles": [{"content": "x"}]}, key=None)
        assert response.status_code == 401
        assert response.json() == {"error": "Missing API key. Please provide x-api-key header."}

    def test_wrong_key_returns_403(self, client: TestClient) -> None:
        response = _post(client, {"articles": [{"content": "x"}]}, key="wrong")
        assert response.status_code == 403
        assert response.json() == {"error": "Invalid API key"}

    @pytest.mark.parametrize("key", [None, API_KEY, "wrong"])
    def test_unconfigured_secret_returns_500(
        self, client: TestClient, config: AppConfig, key: str | None
    ) -> None:
        config.extraction_api_key = None
        response = _post(client, {"articles": [{"content": "x"}]}, key=key)
        assert response.status_code == 500
        assert response.json() == {"error": "Server configuration error: API key not configured"}

    def test_auth_checked_before_body(self, client: TestClient) -> None:
        response = _post(client, {"articles": []}, key=None)
        assert response.status_code == 401


class TestRequestValidation:
    def test_empty_articles_returns_400(self, client: TestClient) -> None:
        response = _post(client, {"articles": []})
        assert response.status_code == 400
        assert response.json() == {"error": "No articles provided for extraction."}

    @pytest.mark.parametrize("body", [{}, {"articles": "nope"}, {"articles": None}, [1, 2]])
    def test_invalid_articles_returns_400(self, client: TestClient, body: Any) -> None:
        response = _post(client, body)
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body. Expected an array of articles."}

    def test_unparsable_body_returns_400(self, client: TestClient) -> None:
        response = client.post(
            "/api/trigger-content-extraction",
            content=b"{not json",
            headers={"x-api-key": API_KEY, "content-type": "application/json"},
        )
        assert response.status_code == 400


class TestTriggerContentExtraction:
    def test_single_article_success(
        self, client: TestClient, extractor: FakeExtractor, store: FakeStore
    ) -> None:
        response = _post(client, {"articles": [{"id": "a1", "content": "Some text"}]})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "Content extraction completed successfully"
        assert data["processed"] == 1
        assert data["result"] == {"processed": 1, "successful": 1, "failed": 0, "errors": []}
        assert data["timestamp"]
        assert extractor.calls == 1
        assert len(store.stored) == 1

    def test_partial_failure_is_reported(self, client: TestClient, store: FakeStore) -> None:
        store.fail_on = {"a2"}
        articles = [
            {"id": "a1", "content": "one"},
            {"id": "a2", "content": "two"},
            {"id": "a3", "content": "three"},
        ]

        response = _post(client, {"articles": articles})

        assert response.status_code == 200
        result = response.json()["result"]
        assert result["processed"] == 3
        assert result["successful"] == 2
        assert result["failed"] == 1
        assert result["errors"] == [
            {"articleId": "a2", "error": "Supabase storage error: rejected"}
        ]

    def test_integer_article_id_keeps_its_type(self, client: TestClient, store: FakeStore) -> None:
        store.fail_on = {2}
        articles = [{"id": 1, "content": "one"}, {"id": 2, "content": "two"}]

        response = _post(client, {"articles": articles})

        assert response.status_code == 200
        assert response.json()["result"]["errors"] == [
            {"articleId": 2, "error": "Supabase storage error: rejected"}
        ]

    def test_missing_content_reported_per_article(
        self, client: TestClient, extractor: FakeExtractor
    ) -> None:
        response = _post(client, {"articles": [{"title": "no body"}]})

        assert response.status_code == 200
        assert response.json()["result"]["errors"] == [
            {"articleId": "article_1", "error": "Article missing content field"}
        ]
        assert extractor.calls == 0

    def test_unexpected_failure_returns_500_envelope(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def explode(articles, extractor, store):
            raise RuntimeError("pipeline exploded")

        monkeypatch.setattr(extraction_module, "process_articles", explode)

        response = _post(client, {"articles": [{"content": "x"}]})

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "Content extraction failed"
        assert data["message"] == "pipeline exploded"
        assert data["timestamp"]

    def test_unconfigured_clients_return_500(self, config: AppConfig) -> None:
        app = create_app()
        app.dependency_overrides[get_config] = lambda: config
        client = TestClient(app)

        response = _post(client, {"articles": [{"content": "x"}]})

        assert response.status_code == 500
        assert response.json()["error"].startswith("Server configuration error")

    @pytest.mark.parametrize(
        "body, message",
        [
            ({"articles": []}, "No articles provided for extraction."),
            ({"articles": "nope"}, "Invalid request body. Expected an array of articles."),
        ],
    )
    def test_body_checked_before_client_configuration(
        self, config: AppConfig, body: Any, message: str
    ) -> None:
        app = create_app()
        app.dependency_overrides[get_config] = lambda: config
        client = TestClient(app)

        response = _post(client, body)

        assert response.status_code == 400
        assert response.json() == {"error": message}


class TestHealth:
    def test_reports_presence(self, client: TestClient, config: AppConfig) -> None:
        config.openai_api_key = None

        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["environment"] == {"store": True, "model": False, "apiKey": True}
        assert "sk-test" not in response.text
        assert API_KEY not in response.text


class TestRootAndNotFound:
    def test_root_is_live(self, client: TestClient) -> None:
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "live"
        assert data["message"] == "Content Extraction API is running"
        assert data["version"] == "1.0.0"
        assert data["timestamp"]

    def test_unknown_path_returns_404(self, client: TestClient) -> None:
        response = client.get("/api/does-not-exist")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_wrong_method_returns_404(self, client: TestClient) -> None:
        response = client.get("/api/trigger-content-extraction")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}
