#!/usr/bin/env python3
"""
Unit tests for the additive qualification score.
"""

import unittest

from core.config_loader import EligibilityConfig, ExperienceBand
from core.eligibility.models import EligibilityFacts
from core.eligibility.scoring import calculate_score, conduct_points, experience_points, referee_points


class TestScoreComponents(unittest.TestCase):

    def setUp(self):
        self.config = EligibilityConfig()

    def test_experience_bands(self):
        for years, expected in [(0, 0), (3, 0), (4, 25), (5, 30), (6, 35), (9, 35), (10, 40), (25, 40)]:
            with self.subTest(years=years):
                self.assertEqual(experience_points(years, self.config), expected)

    def test_bands_order_independent(self):
        config = EligibilityConfig(experience_bands=[
            ExperienceBand(min_years=4, points=25),
            ExperienceBand(min_years=10, points=40),
        ])
        self.assertEqual(experience_points(12, config), 40)
        self.assertEqual(experience_points(7, config), 25)

    def test_conduct_points(self):
        self.assertEqual(conduct_points("Valid Certificate", self.config), 20)
        self.assertEqual(conduct_points("Application Receipt", self.config), 10)
        self.assertEqual(conduct_points("Expired", self.config), 0)
        self.assertEqual(conduct_points("None", self.config), 0)

    def test_referee_points(self):
        self.assertEqual(referee_points(0, self.config), 0)
        self.assertEqual(referee_points(1, self.config), 20)
        self.assertEqual(referee_points(2, self.config), 25)


class TestCalculateScore(unittest.TestCase):

    def setUp(self):
        self.config = EligibilityConfig()

    def test_reference_example(self):
        facts = EligibilityFacts(kenya_years=10, referee_count=1, has_referees=True, has_good_conduct=True, age=35)
        score, components = calculate_score(facts, "Valid Certificate", self.config)
        self.assertEqual(score, 80)
        self.assertEqual(components, {'experience': 40, 'conduct': 20, 'referees': 20})

    def test_maximum_is_85(self):
        facts = EligibilityFacts(kenya_years=30, referee_count=2)
        score, _ = calculate_score(facts, "Valid Certificate", self.config)
        self.assertEqual(score, 85)

    def test_empty_input_scores_zero(self):
        score, _ = calculate_score(EligibilityFacts(), "None", self.config)
        self.assertEqual(score, 0)


if __name__ == '__main__':
    unittest.main()
