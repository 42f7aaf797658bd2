import pytest
from fastapi.testclient import TestClient

from ats_scorer.models.settings import ScoringSettings
from ats_scorer.utils.config import get_settings


@pytest.fixture
def test_app():
    from fastapi import FastAPI
    from ats_scorer.routers import score
    from ats_scorer.middleware.error_handlers import register_exception_handlers

    app = FastAPI()
    app.include_router(score.router, prefix="/score")
    register_exception_handlers(app)
    return app


@pytest.fixture
def client(test_app):
    return TestClient(test_app)


class TestScoreRouter:
    """Test cases for the scoring router"""

    def test_score_empty_documents(self, client):
        """Empty texts are valid input and still produce a full report"""
        response = client.post("/score", json={"resume_text": "", "job_description": ""})

        assert response.status_code == 200
        data = response.json()
        assert data["readability"] == 50
        assert data["formatting"] == 60
        assert data["grammar_score"] == 98
        assert data["matched_keywords"] == []
        assert data["missing_keywords"] == []
        assert data["grammar_issues"][0]["type"] == "formatting"

    def test_score_report_fields(self, client):
        payload = {
            "resume_text": "SKILLS\nPython, Docker\nEXPERIENCE\nBuilt Python services.",
            "job_description": "Python engineer with Docker and Kubernetes",
        }
        response = client.post("/score", json=payload)

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {
            "total", "similarity", "readability", "completeness", "formatting", "grammar_score",
            "grammar_issues", "matched_keywords", "missing_keywords", "keyword_match_percentage",
        }
        assert "kubernetes" in data["missing_keywords"]
        assert "python" in data["matched_keywords"]

    def test_score_invalid_payload(self, client):
        response = client.post("/score", json={"resume_text": 123})
        assert response.status_code == 422

    def test_score_text_too_long(self, test_app, client):
        test_app.dependency_overrides[get_settings] = lambda: ScoringSettings(max_document_chars=10)

        response = client.post("/score", json={"resume_text": "x" * 11, "job_description": ""})

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"]["details"]["field"] == "resume_text"

    def test_grammar_endpoint(self, client):
        response = client.post("/score/grammar", json={"text": "SKILLS\nI is a developer"})

        assert response.status_code == 200
        data = response.json()
        assert data["score"] == 97
        assert data["total_issues"] == 1
        assert data["issues"][0]["severity"] == "high"

    def test_keywords_endpoint(self, client):
        response = client.post("/score/keywords", json={
            "resume_text": "Python and Docker",
            "job_description": "python docker kubernetes terraform",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["matched_keywords"] == ["python", "docker"]
        assert data["keyword_match_percentage"] == 50

    def test_settings_endpoint(self, client, monkeypatch):
        monkeypatch.delenv("SCORE_WEIGHT_SIMILARITY", raising=False)
        response = client.get("/score/settings")

        assert response.status_code == 200
        assert response.json()["keywords"]["jd_top_n"] == ScoringSettings().keywords.jd_top_n


class TestApplication:
    """Test cases for the assembled application"""

    @pytest.fixture
    def app_client(self):
        from ats_scorer.main import app
        return TestClient(app)

    def test_health(self, app_client):
        response = app_client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_score_adds_tracking_headers(self, app_client):
        response = app_client.post("/api/score", json={"resume_text": "SKILLS", "job_description": "skills"})

        assert response.status_code == 200
        assert "X-Request-ID" in response.headers
        assert "X-Processing-Time" in response.headers

    def test_invalid_body_uses_error_format(self, app_client):
        response = app_client.post("/api/score", json={"resume_text": 123})

        assert response.status_code == 422
        data = response.json()
        assert data["success"] is False
        assert data["status_code"] == 422
        assert data["error"] == "Validation failed"
        assert data["validation_errors"]
        assert data["request_id"] == response.headers["X-Request-ID"]

    def test_unknown_route_uses_error_format(self, app_client):
        response = app_client.get("/api/nope")

        assert response.status_code == 404
        data = response.json()
        assert data["success"] is False
        assert data["status_code"] == 404
        assert data["message"] == "Not Found"
        assert data["request_id"] == response.headers["X-Request-ID"]
