#!/usr/bin/env python3
"""
Unit tests for the six dimension scorers.
"""

import math
import unittest

from core.config_loader import ScoringConfig, DimensionMaxima
from core.scorer.dimensions import (
    score_geography, score_budget, score_style, score_experience, score_quality, score_features,
    score_dimensions,
)
from core.scorer.models import Candidate, ProjectProfile, Dimension
from tests import consultant_record, project_profile_data


def _candidate(**overrides) -> Candidate:
    return Candidate.from_record(consultant_record(**overrides))


def _profile(**overrides) -> ProjectProfile:
    return ProjectProfile.from_mapping(project_profile_data(**overrides))


class TestGeography(unittest.TestCase):
    """Geographic Relevance: exact home region, service area, macro-region, partner, nationwide."""

    def setUp(self):
        self.config = ScoringConfig()

    def test_home_region_is_full_points(self):
        raw, details = score_geography(_candidate(), _profile(), self.config)
        self.assertEqual(raw, 20)
        self.assertEqual(details["match"], "home_region")

    def test_region_codes_are_case_insensitive(self):
        raw, _ = score_geography(_candidate(hq_state="ca"), _profile(region="ca"), self.config)
        self.assertEqual(raw, 20)

    def test_service_area_partial_credit(self):
        candidate = _candidate(hq_state="NY", service_areas=["ny", "ca"])
        raw, details = score_geography(candidate, _profile(), self.config)
        self.assertEqual(raw, 16)
        self.assertEqual(details["match"], "service_area")

    def test_same_macro_region(self):
        candidate = _candidate(hq_state="OR", service_areas=["OR", "WA"])
        raw, details = score_geography(candidate, _profile(), self.config)
        self.assertEqual(raw, 12)
        self.assertEqual(details["region"], "west")

    def test_partner_credit(self):
        candidate = _candidate(hq_state="NY", service_areas=["NY"], verification_status="partner")
        raw, details = score_geography(candidate, _profile(), self.config)
        self.assertEqual(raw, 8)
        self.assertEqual(details["match"], "partner")

    def test_nationwide_marker(self):
        candidate = _candidate(hq_state="NY", service_areas=["NATIONAL"])
        raw, details = score_geography(candidate, _profile(), self.config)
        self.assertEqual(raw, 6)
        self.assertEqual(details["match"], "nationwide")

    def test_many_service_areas_count_as_nationwide(self):
        candidate = _candidate(hq_state="NY", service_areas=["NY", "NJ", "CT", "MA", "FL"])
        raw, _ = score_geography(candidate, _profile(region="TX"), self.config)
        self.assertEqual(raw, 6)

    def test_no_overlap_is_zero(self):
        candidate = _candidate(hq_state="NY", service_areas=["NY"])
        raw, _ = score_geography(candidate, _profile(region="TX"), self.config)
        self.assertEqual(raw, 0)

    def test_no_project_region_is_zero(self):
        raw, details = score_geography(_candidate(), _profile(region=None), self.config)
        self.assertEqual(raw, 0)
        self.assertEqual(details["reason"], "no project region")

    def test_partial_credit_never_exceeds_max(self):
        config = ScoringConfig(geography_service_area_points=50)
        candidate = _candidate(hq_state="NY", service_areas=["CA"])
        raw, _ = score_geography(candidate, _profile(), config)
        self.assertEqual(raw, 20)


class TestBudget(unittest.TestCase):
    """Budget Alignment: full inside the range, linear decay outside it."""

    def setUp(self):
        self.config = ScoringConfig()

    def test_within_range(self):
        raw, details = score_budget(_candidate(), _profile(), self.config)
        self.assertEqual(raw, 25)
        self.assertTrue(details["in_range"])

    def test_range_bounds_are_inclusive(self):
        raw, _ = score_budget(_candidate(min_budget=10_000_000), _profile(), self.config)
        self.assertEqual(raw, 25)
        raw, _ = score_budget(_candidate(max_budget=10_000_000), _profile(), self.config)
        self.assertEqual(raw, 25)

    def test_below_candidate_minimum_decays(self):
        candidate = _candidate(min_budget=12_000_000, max_budget=20_000_000)
        raw, details = score_budget(candidate, _profile(), self.config)
        self.assertAlmostEqual(details["deviation"], 0.2)
        self.assertAlmostEqual(raw, 25 * (1 - 0.2 / 0.75))

    def test_above_candidate_maximum_decays(self):
        candidate = _candidate(min_budget=1_000_000, max_budget=5_000_000)
        raw, _ = score_budget(candidate, _profile(), self.config)
        self.assertAlmostEqual(raw, 25 * (1 - 0.5 / 0.75))

    def test_far_outside_range_floors_at_zero(self):
        candidate = _candidate(min_budget=100_000, max_budget=1_000_000)
        raw, _ = score_budget(candidate, _profile(), self.config)
        self.assertEqual(raw, 0)

    def test_no_project_budget_is_zero(self):
        raw, _ = score_budget(_candidate(), _profile(total_budget=None), self.config)
        self.assertEqual(raw, 0)

    def test_missing_candidate_range_is_unbounded(self):
        candidate = _candidate(min_budget=None, max_budget=None)
        raw, _ = score_budget(candidate, _profile(), self.config)
        self.assertEqual(raw, 25)

    def test_inverted_range_is_swapped(self):
        candidate = _candidate(min_budget=15_000_000, max_budget=5_000_000)
        with self.assertLogs("core.scorer.dimensions", level="WARNING"):
            raw, _ = score_budget(candidate, _profile(), self.config)
        self.assertEqual(raw, 25)

    def test_decay_span_is_configurable(self):
        config = ScoringConfig(budget_decay_span=0.4)
        candidate = _candidate(min_budget=12_000_000, max_budget=20_000_000)
        raw, _ = score_budget(candidate, _profile(), config)
        self.assertAlmostEqual(raw, 25 * (1 - 0.2 / 0.4))


class TestStyleAndFeatures(unittest.TestCase):
    """Style and Feature dimensions are proportional tag overlaps."""

    def setUp(self):
        self.config = ScoringConfig()

    def test_full_style_overlap(self):
        raw, details = score_style(_candidate(), _profile(), self.config)
        self.assertEqual(raw, 20)
        self.assertEqual(details["matched"], ["contemporary"])

    def test_partial_style_overlap(self):
        raw, _ = score_style(_candidate(), _profile(style_tags=["Contemporary", "Traditional"]), self.config)
        self.assertEqual(raw, 10)

    def test_style_tags_compare_case_insensitively(self):
        raw, _ = score_style(_candidate(specialties=["CONTEMPORARY"]), _profile(style_tags=["contemporary"]), self.config)
        self.assertEqual(raw, 20)

    def test_no_style_tags_is_exactly_zero(self):
        raw, details = score_style(_candidate(), _profile(style_tags=[]), self.config)
        self.assertEqual(raw, 0)
        self.assertEqual(details["requested"], 0)

    def test_features_full_and_partial(self):
        raw, _ = score_features(_candidate(), _profile(), self.config)
        self.assertEqual(raw, 10)
        raw, _ = score_features(_candidate(), _profile(required_features=["pool", "theater"]), self.config)
        self.assertEqual(raw, 5)

    def test_no_required_features_is_zero(self):
        raw, _ = score_features(_candidate(), _profile(required_features=None), self.config)
        self.assertEqual(raw, 0)


class TestExperienceAndQuality(unittest.TestCase):

    def setUp(self):
        self.config = ScoringConfig()

    def test_experience_brackets(self):
        cases = [(25, 15), (20, 15), (19, 12), (12, 12), (11, 9), (8, 9), (7, 6), (5, 6), (4, 3), (0, 3)]
        for years, expected in cases:
            with self.subTest(years=years):
                raw, _ = score_experience(_candidate(years_experience=years), _profile(), self.config)
                self.assertEqual(raw, expected)

    def test_missing_or_negative_experience_is_floor(self):
        for years in (None, -3, "unknown"):
            with self.subTest(years=years):
                raw, _ = score_experience(_candidate(years_experience=years), _profile(), self.config)
                self.assertEqual(raw, 3)

    def test_quality_from_rating(self):
        raw, _ = score_quality(_candidate(avg_rating=4.5), _profile(), self.config)
        self.assertAlmostEqual(raw, 18)

    def test_missing_rating_is_neutral(self):
        raw, details = score_quality(_candidate(avg_rating=None), _profile(), self.config)
        self.assertEqual(raw, 10)
        self.assertIsNone(details["rating"])

    def test_zero_rating_scores_zero(self):
        raw, _ = score_quality(_candidate(avg_rating=0), _profile(), self.config)
        self.assertEqual(raw, 0)

    def test_out_of_scale_ratings_are_clamped(self):
        raw, _ = score_quality(_candidate(avg_rating=9), _profile(), self.config)
        self.assertEqual(raw, 20)
        raw, _ = score_quality(_candidate(avg_rating=-2), _profile(), self.config)
        self.assertEqual(raw, 0)


class TestClamping(unittest.TestCase):
    """Every raw score stays within [0, max] whatever the inputs."""

    ADVERSARIAL = [
        {"years_experience": 10 ** 9, "avg_rating": 1e6, "min_budget": -5, "max_budget": -10},
        {"years_experience": -10 ** 9, "avg_rating": -1e6, "min_budget": float("nan"), "max_budget": float("inf")},
        {"years_experience": "lots", "avg_rating": "five", "min_budget": "cheap", "max_budget": None},
        {"specialties": ["contemporary"] * 50, "portfolio": [{"features": ["pool"] * 50}]},
    ]

    def test_raw_within_bounds(self):
        config = ScoringConfig()
        profiles = [_profile(), _profile(total_budget=-1), _profile(region="", style_tags=[], required_features=[])]
        for overrides in self.ADVERSARIAL:
            for profile in profiles:
                scores = score_dimensions(_candidate(**overrides), profile, config)
                for score in scores:
                    with self.subTest(dimension=score.dimension, overrides=overrides):
                        self.assertFalse(math.isnan(score.raw))
                        self.assertGreaterEqual(score.raw, 0)
                        self.assertLessEqual(score.raw, score.max_points)

    def test_negative_maxima_are_corrected(self):
        config = ScoringConfig(maxima=DimensionMaxima(geography=-5))
        with self.assertLogs("core.scorer.dimensions", level="WARNING"):
            scores = score_dimensions(_candidate(), _profile(), config)
        geography = next(s for s in scores if s.dimension == Dimension.GEOGRAPHY)
        self.assertEqual(geography.raw, 0)
        self.assertEqual(geography.max_points, 0)

    def test_dimensions_in_fixed_order(self):
        scores = score_dimensions(_candidate(), _profile(), ScoringConfig())
        self.assertEqual([s.dimension for s in scores], list(Dimension))


if __name__ == '__main__':
    unittest.main()
