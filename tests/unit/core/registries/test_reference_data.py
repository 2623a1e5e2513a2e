#!/usr/bin/env python3
"""
Unit tests for consultant reference data and display labels.
"""

import unittest

from core.registries.consultants import Discipline, STATE_REGIONS, TASTE_STYLE_MAP, region_of
from core.registries.labels import LabelConcern, label_for
from core.scorer.models import MatchTier


class TestDiscipline(unittest.TestCase):

    def test_parse(self):
        self.assertEqual(Discipline.parse("architect"), Discipline.ARCHITECT)
        self.assertEqual(Discipline.parse(" PM "), Discipline.PROJECT_MANAGER)
        self.assertEqual(Discipline.parse(Discipline.GENERAL_CONTRACTOR), Discipline.GENERAL_CONTRACTOR)
        self.assertIsNone(Discipline.parse("plumber"))
        self.assertIsNone(Discipline.parse(None))


class TestRegions(unittest.TestCase):

    def test_region_of(self):
        self.assertEqual(region_of("CA"), "west")
        self.assertEqual(region_of(" ny"), "northeast")
        self.assertIsNone(region_of("HI"))
        self.assertIsNone(region_of(""))

    def test_states_belong_to_one_region(self):
        seen = {}
        for name, states in STATE_REGIONS.items():
            for state in states:
                self.assertNotIn(state, seen, f"{state} in {seen.get(state)} and {name}")
                seen[state] = name

    def test_taste_map_has_three_bands(self):
        for axis, bands in TASTE_STYLE_MAP.items():
            with self.subTest(axis=axis):
                self.assertEqual(set(bands), {"low", "mid", "high"})


class TestLabels(unittest.TestCase):

    def test_known_labels(self):
        self.assertEqual(label_for(LabelConcern.DISCIPLINE, "pm"), "Project Manager")
        self.assertEqual(label_for("dimension", "budget"), "Budget Alignment")
        self.assertEqual(label_for(LabelConcern.MATCH_TIER, MatchTier.TOP_MATCH), "Top Match")
        self.assertEqual(label_for(LabelConcern.DISCIPLINE, Discipline.INTERIOR_DESIGNER), "Interior Designer")

    def test_fallback(self):
        self.assertEqual(label_for(LabelConcern.DIMENSION, "acoustics"), "Acoustics")
        self.assertEqual(label_for(LabelConcern.SIZE_CLASS, None), "")

    def test_every_concern_has_a_table(self):
        for concern in LabelConcern:
            self.assertNotEqual(label_for(concern, "zz"), "")


if __name__ == '__main__':
    unittest.main()
