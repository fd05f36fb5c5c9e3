#!/usr/bin/env python3
"""
Unit tests for AssessmentService against an in-memory database.

Covers:
- Starting a draft for an existing candidate
- Recording responses and the live summary
- Round trip: stored responses recompute to the same scores
- Completion gate, terminal completed state
- Last-writer protection with expected_version
- Persistence failure carrying the computed summary
"""

import unittest
import uuid
from datetime import date, datetime, timezone
from unittest.mock import patch

from core.errors import (
    AssessmentClosedError, AssessmentIncompleteError, AssessmentNotFoundError,
    CandidateNotFoundError, CriterionNotFoundError, InvalidResponseScoreError,
    PersistError, StaleResponseError
)
from core.vetting.models import AssessmentStatus
from core.vetting.rubric import rubric_from_dict
from core.vetting.service import AssessmentService
from database.repositories import AssessmentRepository, CandidateRepository, RubricRepository
from tests import SAMPLE_RUBRIC, SAMPLE_CRITERIA, make_session_factory

NOW = datetime(2025, 6, 1, 10, 0, tzinfo=timezone.utc)


class TestAssessmentService(unittest.TestCase):

    def setUp(self):
        self.engine, self.SessionLocal = make_session_factory()
        self.session = self.SessionLocal()

        RubricRepository(self.session).seed(SAMPLE_RUBRIC)
        self.candidates = CandidateRepository(self.session)
        self.candidate = self.candidates.create_candidate(
            {'name': 'Mary', 'phone': '+254712345678', 'status': 'PENDING'}
        )
        self.session.commit()

        self.assessments = AssessmentRepository(self.session)
        self.service = AssessmentService(
            self.assessments,
            self.candidates,
            rubric_from_dict(SAMPLE_RUBRIC),
            clock=lambda: NOW
        )
        self.assessment = self.service.start_assessment(self.candidate.id, date(2025, 6, 1))

    def tearDown(self):
        self.session.close()
        self.engine.dispose()

    def _answer_all(self, score=5):
        for cid in SAMPLE_CRITERIA:
            self.service.record_response(self.assessment.id, cid, score)

    def test_start_assessment(self):
        self.assertEqual(self.assessment.status, AssessmentStatus.DRAFT)
        assessment, summary = self.service.get_assessment(self.assessment.id)
        self.assertEqual(assessment.candidate_id, self.candidate.id)
        self.assertEqual(assessment.interview_date, date(2025, 6, 1))
        self.assertEqual(assessment.responses, {})
        self.assertEqual(summary.overall_percentage, 0.0)

    def test_start_for_unknown_candidate(self):
        with self.assertRaises(CandidateNotFoundError):
            self.service.start_assessment(uuid.uuid4())

    def test_record_response_returns_live_summary(self):
        summary = self.service.record_response(self.assessment.id, 's_first_aid', 5, notes="Knows CPR")
        self.assertAlmostEqual(summary.pillar('safety').score, 100.0)
        self.assertAlmostEqual(summary.overall_percentage, 60.0)
        self.assertEqual(summary.answered, 1)

        row = self.assessments.get_assessment(self.assessment.id)
        self.assertAlmostEqual(float(row.overall_percentage), 60.0)
        self.assertAlmostEqual(float(row.aggregate_score), 3.0)
        self.assertEqual(row.pillar_scores['safety']['category'], 'Advanced')

        stored = self.assessments.get_response(self.assessment.id, 's_first_aid')
        self.assertEqual(stored.score, 5)
        self.assertEqual(stored.notes, "Knows CPR")
        self.assertEqual(stored.version, 1)

    def test_round_trip(self):
        scores = {'s_supervision': 4, 's_first_aid': 3, 's_hygiene': 5, 'a_honesty': 2}
        last = None
        for cid, score in scores.items():
            last = self.service.record_response(self.assessment.id, cid, score)

        assessment, reread = self.service.get_assessment(self.assessment.id)
        self.assertEqual({cid: r.score for cid, r in assessment.responses.items()}, scores)
        self.assertEqual(reread.to_dict(), last.to_dict())

    def test_edit_replaces_previous_answer(self):
        self.service.record_response(self.assessment.id, 'a_honesty', 2)
        summary = self.service.record_response(self.assessment.id, 'a_honesty', 4)
        self.assertAlmostEqual(summary.pillar('attitude').score, 80.0)
        self.assertEqual(self.assessments.get_response(self.assessment.id, 'a_honesty').version, 2)
        self.assertEqual(len(self.assessments.get_responses(self.assessment.id)), 1)

    def test_clearing_a_score(self):
        self.service.record_response(self.assessment.id, 'a_honesty', 4)
        summary = self.service.record_response(self.assessment.id, 'a_honesty', None)
        self.assertEqual(summary.answered, 0)
        self.assertEqual(summary.overall_percentage, 0.0)

    def test_invalid_score(self):
        with self.assertRaises(InvalidResponseScoreError):
            self.service.record_response(self.assessment.id, 'a_honesty', 6)
        self.assertIsNone(self.assessments.get_response(self.assessment.id, 'a_honesty'))

    def test_unknown_criterion(self):
        with self.assertRaises(CriterionNotFoundError):
            self.service.record_response(self.assessment.id, 'nope', 3)

    def test_unknown_assessment(self):
        with self.assertRaises(AssessmentNotFoundError):
            self.service.record_response(uuid.uuid4(), 'a_honesty', 3)

    def test_complete_rejected_when_incomplete(self):
        for cid in SAMPLE_CRITERIA[:-1]:
            self.service.record_response(self.assessment.id, cid, 5)

        with self.assertRaises(AssessmentIncompleteError) as ctx:
            self.service.complete_assessment(self.assessment.id)

        self.assertEqual(ctx.exception.unanswered, ['a_punctuality'])
        row = self.assessments.get_assessment(self.assessment.id)
        self.assertEqual(row.status, 'draft')
        self.assertIsNone(row.completed_at)

    def test_complete(self):
        self._answer_all(5)
        summary = self.service.complete_assessment(self.assessment.id)
        self.assertTrue(summary.onboard_recommendation)
        self.assertAlmostEqual(summary.overall_percentage, 100.0)

        assessment, _ = self.service.get_assessment(self.assessment.id)
        self.assertEqual(assessment.status, AssessmentStatus.COMPLETED)
        self.assertIsNotNone(assessment.completed_at)

    def test_completed_assessment_is_read_only(self):
        self._answer_all(4)
        self.service.complete_assessment(self.assessment.id)

        with self.assertRaises(AssessmentClosedError):
            self.service.record_response(self.assessment.id, 'a_honesty', 1)
        with self.assertRaises(AssessmentClosedError):
            self.service.complete_assessment(self.assessment.id)
        self.assertEqual(self.assessments.get_response(self.assessment.id, 'a_honesty').score, 4)

    def test_critical_failure_persisted(self):
        self._answer_all(5)
        summary = self.service.record_response(self.assessment.id, 's_supervision', 1)
        self.assertTrue(summary.has_critical_failure)
        self.assertFalse(summary.onboard_recommendation)
        row = self.assessments.get_assessment(self.assessment.id)
        self.assertTrue(row.has_critical_failure)
        self.assertFalse(row.onboard_recommendation)

    def test_expected_version_matches(self):
        self.service.record_response(self.assessment.id, 'a_honesty', 3, expected_version=0)
        self.service.record_response(self.assessment.id, 'a_honesty', 4, expected_version=1)
        self.assertEqual(self.assessments.get_response(self.assessment.id, 'a_honesty').score, 4)

    def test_stale_write_rejected(self):
        self.service.record_response(self.assessment.id, 'a_honesty', 3)  # version 1
        self.service.record_response(self.assessment.id, 'a_honesty', 4)  # version 2, another interviewer

        with self.assertRaises(StaleResponseError) as ctx:
            self.service.record_response(self.assessment.id, 'a_honesty', 1, expected_version=1)

        self.assertIsInstance(ctx.exception, PersistError)
        self.assertAlmostEqual(ctx.exception.result.pillar('attitude').score, 20.0)
        stored = self.assessments.get_response(self.assessment.id, 'a_honesty')
        self.assertEqual((stored.score, stored.version), (4, 2))

    def test_persist_failure_carries_summary(self):
        with patch.object(self.assessments, 'save_summary', side_effect=PersistError("disk full")):
            with self.assertRaises(PersistError) as ctx:
                self.service.record_response(self.assessment.id, 's_first_aid', 5)

        self.assertAlmostEqual(ctx.exception.result.overall_percentage, 60.0)
        self.assertIsNone(self.assessments.get_response(self.assessment.id, 's_first_aid'))


if __name__ == '__main__':
    unittest.main()
