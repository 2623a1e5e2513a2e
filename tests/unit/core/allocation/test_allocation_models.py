#!/usr/bin/env python3
"""
Unit tests for selection and settings parsing from stored documents.
"""

import unittest

from core.allocation import SizeClass, CirculationMode, SpaceSelection, ProgramSettings
from core.registries.spaces import BASEMENT_LEVEL


class TestSizeClass(unittest.TestCase):

    def test_parse(self):
        self.assertEqual(SizeClass.parse(None), SizeClass.MEDIUM)
        self.assertEqual(SizeClass.parse(""), SizeClass.MEDIUM)
        self.assertEqual(SizeClass.parse("s"), SizeClass.SMALL)
        self.assertEqual(SizeClass.parse("Large"), SizeClass.LARGE)
        self.assertEqual(SizeClass.parse(SizeClass.MEDIUM), SizeClass.MEDIUM)

    def test_parse_rejects_unknown(self):
        with self.assertRaises(ValueError):
            SizeClass.parse("XL")


class TestSpaceSelection(unittest.TestCase):

    def test_from_mapping_intake_keys(self):
        selection = SpaceSelection.from_mapping("WINE", {
            "included": True,
            "size": "large",
            "level": -1,
            "customSF": "180",
            "kycSource": "mustHave",
            "features": ["tasting table"],
        })
        self.assertEqual(selection.size, SizeClass.LARGE)
        self.assertEqual(selection.level, BASEMENT_LEVEL)
        self.assertEqual(selection.custom_area, 180)
        self.assertEqual(selection.source, "mustHave")
        self.assertEqual(selection.features, ("tasting table",))

    def test_from_mapping_defaults(self):
        selection = SpaceSelection.from_mapping("FOY", {})
        self.assertTrue(selection.included)
        self.assertEqual(selection.size, SizeClass.MEDIUM)
        self.assertIsNone(selection.level)
        self.assertIsNone(selection.custom_area)

    def test_from_mapping_string_flags(self):
        for raw, expected in (("false", False), ("No", False), ("0", False), (0, False),
                              ("true", True), ("yes", True), (1, True), (None, True)):
            with self.subTest(raw=raw):
                self.assertIs(SpaceSelection.from_mapping("FOY", {"included": raw}).included, expected)

    def test_with_changes_leaves_original(self):
        original = SpaceSelection("GR")
        changed = original.with_changes(size=SizeClass.LARGE, included=False)
        self.assertEqual(original.size, SizeClass.MEDIUM)
        self.assertTrue(original.included)
        self.assertFalse(changed.included)

    def test_to_dict_round_trip(self):
        selection = SpaceSelection("PRI", size=SizeClass.SMALL, level=2, notes="Ocean view")
        self.assertEqual(SpaceSelection.from_mapping("PRI", selection.to_dict()), selection)


class TestProgramSettings(unittest.TestCase):

    def test_from_mapping_intake_keys(self):
        settings = ProgramSettings.from_mapping({
            "targetSF": 12000,
            "programTier": "10k",
            "deltaPct": 15,
            "lockToTarget": True,
            "hasBasement": True,
        })
        self.assertEqual(settings.target_area, 12000)
        self.assertEqual(settings.program_tier, "10k")
        self.assertAlmostEqual(settings.size_delta, 0.15)
        self.assertEqual(settings.circulation_mode, CirculationMode.BALANCE_TO_TARGET)
        self.assertTrue(settings.has_basement)

    def test_from_mapping_falls_back_to_defaults(self):
        defaults = ProgramSettings(target_area=15000, program_tier="15k", circulation_pct=0.14)
        settings = ProgramSettings.from_mapping({"target_area": 16000}, defaults)
        self.assertEqual(settings.target_area, 16000)
        self.assertEqual(settings.program_tier, "15k")
        self.assertEqual(settings.circulation_pct, 0.14)
        self.assertEqual(settings.circulation_mode, CirculationMode.FIXED_PERCENTAGE)

    def test_lock_to_target_false(self):
        settings = ProgramSettings.from_mapping({"lockToTarget": False})
        self.assertEqual(settings.circulation_mode, CirculationMode.FIXED_PERCENTAGE)

    def test_string_flags(self):
        settings = ProgramSettings.from_mapping({"lockToTarget": "false", "hasBasement": "false"})
        self.assertEqual(settings.circulation_mode, CirculationMode.FIXED_PERCENTAGE)
        self.assertFalse(settings.has_basement)

        settings = ProgramSettings.from_mapping({"lockToTarget": "true", "hasBasement": "yes"})
        self.assertEqual(settings.circulation_mode, CirculationMode.BALANCE_TO_TARGET)
        self.assertTrue(settings.has_basement)

    def test_zero_variance_fraction_is_kept(self):
        defaults = ProgramSettings(target_area=15000, variance_warning_fraction=0.25)
        settings = ProgramSettings.from_mapping({"variance_warning_fraction": 0}, defaults)
        self.assertEqual(settings.variance_warning_fraction, 0.0)

        settings = ProgramSettings.from_mapping({}, defaults)
        self.assertEqual(settings.variance_warning_fraction, 0.25)

    def test_unknown_mode_rejected(self):
        with self.assertRaises(ValueError):
            ProgramSettings.from_mapping({"circulation_mode": "whatever"})

    def test_to_dict(self):
        data = ProgramSettings(target_area=10000, program_tier="10k").to_dict()
        self.assertEqual(data["circulation_mode"], "fixed_percentage")
        self.assertIsNone(data["circulation_pct"])


if __name__ == '__main__':
    unittest.main()
