"""
Tests for the FastAPI surface. The orchestrator is injected with stub
providers before the app starts.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from detection.api import app
from detection.orchestrator import DetectionOrchestrator


@pytest.fixture
def client(make_stub, make_success):
    app.state.orchestrator = DetectionOrchestrator([
        make_stub("openai", result=make_success(
            "openai", 65, models=["gpt-4"], patterns=["high lexical consistency"], sentences=[(0, 62.0)],
        )),
        make_stub("anthropic", result=make_success("anthropic", 72, models=["claude-3"])),
        make_stub("huggingface", error=RuntimeError("offline")),
    ])
    with TestClient(app) as test_client:
        yield test_client
    app.state.orchestrator = None


def test_analyze_returns_fused_result(client):
    response = client.post(
        "/api/v1/detection/analyze",
        json={"content": "This text was possibly generated.", "options": {"language": "en"}},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["ai_probability"] == 68.5
    assert body["confidence_score"] == 100.0
    assert sorted(body["detected_models"]) == ["claude-3", "gpt-4"]
    assert body["analysis_details"]["pattern_matches"] == ["high lexical consistency"]
    assert body["analysis_details"]["sentence_scores"] == [{"index": 0, "score": 62.0}]
    assert body["analysis_details"]["linguistic_markers"] == []


def test_analyze_options_are_optional(client):
    response = client.post("/api/v1/detection/analyze", json={"content": "hello"})
    assert response.status_code == 200


def test_analyze_rejects_empty_content(client):
    response = client.post("/api/v1/detection/analyze", json={"content": ""})
    assert response.status_code == 422


def test_analyze_rejects_missing_content(client):
    response = client.post("/api/v1/detection/analyze", json={"options": {}})
    assert response.status_code == 422


def test_health_lists_providers(client):
    response = client.get("/api/v1/detection/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert [p["name"] for p in body["providers"]] == ["openai", "anthropic", "huggingface"]


def test_providers_endpoint(client):
    response = client.get("/api/v1/detection/providers")
    assert response.status_code == 200
    assert len(response.json()["providers"]) == 3


def test_root(client):
    assert client.get("/").json()["analyze"] == "/api/v1/detection/analyze"


def test_lifespan_builds_orchestrator_from_environment(monkeypatch):
    for flag in ("ENABLE_OPENAI_DETECTOR", "ENABLE_ANTHROPIC_DETECTOR", "ENABLE_HF_DETECTOR"):
        monkeypatch.setenv(flag, "false")
    app.state.orchestrator = None
    try:
        with TestClient(app) as test_client:
            health = test_client.get("/api/v1/detection/health").json()
            assert health["status"] == "degraded"
            assert {p["status"] for p in health["providers"]} == {"disabled"}

            body = test_client.post("/api/v1/detection/analyze", json={"content": "a" * 500}).json()
            assert body["ai_probability"] == 27.0
            assert body["confidence_score"] == 60.0
    finally:
        app.state.orchestrator = None
