#!/usr/bin/env python3
"""
Unit tests for the assessment and rubric endpoints.

Covers the draft -> completed workflow over HTTP and the status codes of
each domain error.
"""

import unittest
import uuid

from fastapi.testclient import TestClient

from core.vetting.rubric import load_rubric_definition
from database.repositories import CandidateRepository, RubricRepository
from web.backend.app import app
from web.backend.config import get_project_root, get_rubric
from web.backend.dependencies import get_db
from tests import make_session_factory


class AssessmentApiTestCase(unittest.TestCase):
    """Full app on an in-memory database seeded with the project rubric and one candidate."""

    def setUp(self):
        self.engine, self.SessionLocal = make_session_factory()

        session = self.SessionLocal()
        RubricRepository(session).seed(load_rubric_definition(str(get_project_root() / "rubric.yaml")))
        candidate = CandidateRepository(session).create_candidate(
            {'name': 'Mary', 'phone': '+254712345678', 'status': 'PENDING'}
        )
        session.commit()
        self.candidate_id = str(candidate.id)
        session.close()

        def override_get_db():
            session = self.SessionLocal()
            try:
                yield session
            finally:
                session.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app, raise_server_exceptions=False)
        self.rubric = get_rubric()

    def tearDown(self):
        app.dependency_overrides.clear()
        self.engine.dispose()

    def _start(self):
        response = self.client.post(
            "/api/assessments",
            json={"candidate_id": self.candidate_id, "interview_date": "2025-06-01"}
        )
        self.assertEqual(response.status_code, 201)
        return response.json()["id"]

    def _answer(self, assessment_id, criterion_id, score, **extra):
        return self.client.put(
            f"/api/assessments/{assessment_id}/responses/{criterion_id}",
            json=dict(extra, score=score)
        )


class TestRubricEndpoint(AssessmentApiTestCase):

    def test_get_rubric(self):
        response = self.client.get("/api/rubric")
        self.assertEqual(response.status_code, 200)

        data = response.json()
        self.assertEqual([p["id"] for p in data["pillars"]], list(self.rubric.pillars))
        self.assertAlmostEqual(sum(p["weight"] for p in data["pillars"]), 1.0)
        supervision = data["pillars"][0]["criteria"][0]
        self.assertEqual(supervision["id"], "cc_supervision")
        self.assertTrue(supervision["critical"])
        self.assertIn("5", supervision["guidance"])


class TestAssessmentWorkflow(AssessmentApiTestCase):

    def test_start_assessment(self):
        assessment_id = self._start()
        data = self.client.get(f"/api/assessments/{assessment_id}").json()

        self.assertEqual(data["status"], "draft")
        self.assertEqual(data["candidate_id"], self.candidate_id)
        self.assertEqual(data["interview_date"], "2025-06-01")
        self.assertEqual(data["responses"], [])
        self.assertEqual(data["summary"]["total"], len(self.rubric.criteria))
        self.assertFalse(data["summary"]["is_complete"])

    def test_save_response_returns_summary(self):
        assessment_id = self._start()
        response = self._answer(assessment_id, "cc_development", 5, notes="Clear routine")
        self.assertEqual(response.status_code, 200)

        summary = response.json()["summary"]
        child_care = next(p for p in summary["pillars"] if p["pillar_id"] == "child_care")
        self.assertEqual(child_care["score"], 100.0)
        self.assertEqual(child_care["category"], "Advanced")
        self.assertEqual(summary["answered"], 1)

        detail = self.client.get(f"/api/assessments/{assessment_id}").json()
        self.assertEqual(detail["responses"][0]["notes"], "Clear routine")
        self.assertEqual(detail["responses"][0]["version"], 1)
        self.assertEqual(detail["summary"], summary)

    def test_complete_workflow(self):
        assessment_id = self._start()
        for criterion_id in self.rubric.criteria:
            self.assertEqual(self._answer(assessment_id, criterion_id, 4).status_code, 200)

        response = self.client.post(f"/api/assessments/{assessment_id}/complete")
        self.assertEqual(response.status_code, 200)

        data = response.json()
        self.assertEqual(data["status"], "completed")
        self.assertAlmostEqual(data["summary"]["overall_percentage"], 80.0)
        self.assertTrue(data["summary"]["onboard_recommendation"])

        detail = self.client.get(f"/api/assessments/{assessment_id}").json()
        self.assertEqual(detail["status"], "completed")
        self.assertIsNotNone(detail["completed_at"])

        # Completed assessments are read-only
        response = self._answer(assessment_id, "cc_supervision", 1)
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["type"], "AssessmentClosedError")

    def test_incomplete_completion_is_400(self):
        assessment_id = self._start()
        self._answer(assessment_id, "cc_supervision", 5)

        response = self.client.post(f"/api/assessments/{assessment_id}/complete")
        self.assertEqual(response.status_code, 400)

        data = response.json()
        self.assertFalse(data["success"])
        self.assertEqual(data["type"], "AssessmentIncompleteError")
        self.assertEqual(len(data["unanswered"]), len(self.rubric.criteria) - 1)
        self.assertNotIn("cc_supervision", data["unanswered"])

        detail = self.client.get(f"/api/assessments/{assessment_id}").json()
        self.assertEqual(detail["status"], "draft")


class TestAssessmentErrors(AssessmentApiTestCase):

    def test_invalid_uuid_is_400(self):
        response = self.client.get("/api/assessments/not-a-uuid")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["type"], "HTTPException")

    def test_unknown_assessment_is_404(self):
        response = self.client.get(f"/api/assessments/{uuid.uuid4()}")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["type"], "AssessmentNotFoundError")

    def test_unknown_candidate_is_404(self):
        response = self.client.post("/api/assessments", json={"candidate_id": str(uuid.uuid4())})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["type"], "CandidateNotFoundError")

    def test_unknown_criterion_is_404(self):
        assessment_id = self._start()
        response = self._answer(assessment_id, "no_such_question", 3)
        self.assertEqual(response.status_code, 404)

    def test_score_out_of_range_is_422(self):
        assessment_id = self._start()
        response = self._answer(assessment_id, "cc_supervision", 6)
        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["type"], "InvalidResponseScoreError")

    def test_stale_write_is_409(self):
        assessment_id = self._start()
        self._answer(assessment_id, "cc_supervision", 3, expected_version=0)
        self._answer(assessment_id, "cc_supervision", 4, expected_version=1)

        response = self._answer(assessment_id, "cc_supervision", 2, expected_version=1)
        self.assertEqual(response.status_code, 409)

        data = response.json()
        self.assertEqual(data["type"], "StaleResponseError")
        self.assertIn("unsaved_summary", data)
        self.assertTrue(data["unsaved_summary"]["has_critical_failure"])

        detail = self.client.get(f"/api/assessments/{assessment_id}").json()
        self.assertEqual(detail["responses"][0]["score"], 4)


if __name__ == '__main__':
    unittest.main()
