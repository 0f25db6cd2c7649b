"""
Tests for the HTTP adapter.
"""
import pytest
from fastapi.testclient import TestClient

from sarkari.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


def test_rejects_short_text(client):
    res = client.post("/api/parse-job-rules", json={"rawText": "too short"})
    assert res.status_code == 400
    assert "at least 50 characters" in res.json()["detail"]


def test_rejects_missing_text(client):
    res = client.post("/api/parse-job-rules", json={})
    assert res.status_code == 400


def test_parses_notice(client, ssc_cgl_notice):
    res = client.post("/api/parse-job-rules", json={"rawText": ssc_cgl_notice})
    assert res.status_code == 200
    data = res.json()["parsedData"]
    assert data["type"] == "job"
    assert data["department"] == "Staff Selection Commission"
    assert data["selectionProcess"] == ["Written Exam", "Interview"]
    assert data["physicalEligibility"] == []
    assert "state" not in data


def test_parses_pasted_html(client):
    html = (
        "<h2>Railway Group D Recruitment 2026</h2>"
        "<table><tr><td>Vacancy Details</td></tr>"
        "<tr><td>Track Maintainer</td><td>12000</td></tr></table>"
    )
    res = client.post("/api/parse-job-rules", json={"rawText": html})
    assert res.status_code == 200
    data = res.json()["parsedData"]
    assert data["title"] == "Railway Group D Recruitment 2026"
    assert data["vacancyDetails"] == [
        {"postName": "Track Maintainer", "totalPost": "12000", "eligibility": ""}
    ]


def test_unexpected_failure_is_500(client, monkeypatch, ssc_cgl_notice):
    def boom(text):
        raise RuntimeError("boom")

    monkeypatch.setattr("sarkari.api.router.parse_job_notification", boom)
    res = client.post("/api/parse-job-rules", json={"rawText": ssc_cgl_notice})
    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to parse job notification. Please try again."


def test_length_checked_after_html_flattening(client):
    html = "<p><span><b>Hi</b></span></p>" * 5
    assert len(html) > 50
    res = client.post("/api/parse-job-rules", json={"rawText": html})
    assert res.status_code == 400
