import sys
import unittest
from dataclasses import replace
from pathlib import Path
from unittest.mock import patch

from fastapi import FastAPI
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.api.v1.health import router as health_router  # noqa: E402
from app.core.config import settings  # noqa: E402
from app.main import app, serve  # noqa: E402


def test_routes_are_registered() -> None:
    paths = {route.path for route in app.routes}

    assert "/v1/health" in paths
    assert "/v1/ats/score" in paths


def test_health_endpoint_returns_healthy() -> None:
    test_app = FastAPI()
    test_app.include_router(health_router, prefix="/v1")
    client = TestClient(test_app)

    response = client.get("/v1/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["vocabularies"]["hard_skills"] >= 80
    assert body["vocabularies"]["soft_skills"] >= 25


def test_serve_runs_the_app_with_uvicorn() -> None:
    with patch("app.main.uvicorn.run") as run:
        serve()

    run.assert_called_once_with(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


class ATSScoreApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)
        cls.payload = {
            "resume": {
                "summary": "Data engineer focused on reliable batch and streaming pipelines for analytics teams.",
                "experience": [
                    {
                        "title": "Data Engineer",
                        "company": "Acme",
                        "bullets": ["Built Spark jobs in Python", "Modeled warehouse tables in SQL"],
                    }
                ],
                "skills": ["Python", "SQL", "Spark", "Airflow", "dbt"],
                "education": [{"degree": "BS", "field": "Statistics", "institution": "State University"}],
            },
            "job_description": "Data Engineer with Python and SQL. Bachelor's degree required. Strong communication.",
            "job_title": "Data Engineer",
        }

    def test_score_contract_shape(self):
        response = self.client.post("/v1/ats/score", json=self.payload)
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertIsInstance(body["overall"], int)
        self.assertIn(body["rating"], {"strong", "fair", "weak"})
        self.assertEqual(
            set(body["breakdown"]),
            {"keywords", "hard_skills", "job_title", "education", "format", "soft_skills"},
        )
        self.assertEqual(body["breakdown"]["keywords"]["max"], 40)
        self.assertEqual(body["breakdown"]["hard_skills"]["matches"], ["python", "sql"])
        self.assertEqual(body["breakdown"]["job_title"]["relevance"], "high")
        self.assertEqual(body["breakdown"]["education"]["status"], "meets")
        self.assertLessEqual(len(body["suggestions"]), 5)
        self.assertEqual(
            body["overall"],
            sum(dimension["score"] for dimension in body["breakdown"].values()),
        )

    def test_missing_fields_return_400(self):
        for field in ("resume", "job_description", "job_title"):
            payload = dict(self.payload)
            payload.pop(field)
            response = self.client.post("/v1/ats/score", json=payload)
            self.assertEqual(response.status_code, 400, field)
            self.assertIn("Missing required fields", response.json()["detail"])

    def test_blank_title_returns_400(self):
        response = self.client.post("/v1/ats/score", json=dict(self.payload, job_title="   "))
        self.assertEqual(response.status_code, 400)

    def test_oversized_job_description_returns_413(self):
        limited = replace(settings, ats_max_job_description_chars=20)
        with patch("app.api.v1.ats.settings", limited):
            response = self.client.post("/v1/ats/score", json=self.payload)
        self.assertEqual(response.status_code, 413)

    def test_unexpected_failure_returns_500(self):
        with patch("app.api.v1.ats.calculate_ats_score", side_effect=ValueError("boom")):
            response = self.client.post("/v1/ats/score", json=self.payload)
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["detail"], "Failed to calculate ATS score")

    def test_wrong_types_return_422(self):
        payload = dict(self.payload, resume={"experience": "not a list"})
        response = self.client.post("/v1/ats/score", json=payload)
        self.assertEqual(response.status_code, 422)


if __name__ == "__main__":
    unittest.main()
