#!/usr/bin/env python3
"""
Unit tests for the Allocation Calculator: per-space areas, circulation and totals.
"""

import unittest

from core.allocation import (
    SizeClass, CirculationMode, SpaceSelection, ProgramSettings,
    calculate_space_area, calculate_circulation, calculate_program_totals, check_variance,
)
from core.exceptions import DuplicateSpaceError, UnknownSpaceError, UnknownTierError, SpaceNotOfferedError
from core.registries.spaces import BASEMENT_LEVEL, get_spaces_for_tier


class TestCalculateSpaceArea(unittest.TestCase):

    def test_medium_is_base_area(self):
        self.assertEqual(calculate_space_area("FOY", "10k"), 350)
        self.assertEqual(calculate_space_area("FOY", "15k"), 420)
        self.assertEqual(calculate_space_area("FOY", "20k"), 500)

    def test_small_and_large_apply_delta(self):
        self.assertEqual(calculate_space_area("FOY", "15k", SizeClass.SMALL), 378)
        self.assertEqual(calculate_space_area("FOY", "15k", SizeClass.LARGE), 462)
        self.assertEqual(calculate_space_area("GR", "15k", "L", size_delta=0.2), 720)

    def test_results_are_whole_units(self):
        area = calculate_space_area("PWD", "10k", SizeClass.SMALL, size_delta=0.15)
        self.assertEqual(area, 51)

    def test_custom_area_bypasses_tier_and_size(self):
        """A custom area is used verbatim, even where the tier offers no base area."""
        for tier in ("10k", "15k", "20k"):
            for size in SizeClass:
                with self.subTest(tier=tier, size=size):
                    self.assertEqual(calculate_space_area("SAL", tier, size, custom_area=275), 275)

    def test_not_offered_at_tier(self):
        with self.assertRaises(SpaceNotOfferedError) as ctx:
            calculate_space_area("SAL", "10k")
        self.assertEqual(ctx.exception.code, "SAL")
        self.assertEqual(ctx.exception.tier, "10k")

    def test_unknown_tier_and_space(self):
        with self.assertRaises(UnknownTierError):
            calculate_space_area("FOY", "12k")
        with self.assertRaises(UnknownSpaceError):
            calculate_space_area("NOPE", "15k")

    def test_out_of_range_delta_is_corrected(self):
        with self.assertLogs("core.allocation.calculator", level="WARNING"):
            self.assertEqual(calculate_space_area("FOY", "15k", SizeClass.SMALL, size_delta=-0.5), 420)


class TestCalculateCirculation(unittest.TestCase):

    def test_fixed_percentage(self):
        settings = ProgramSettings(target_area=15000, program_tier="15k", circulation_pct=0.15)
        self.assertEqual(calculate_circulation(10000, settings), 1500)

    def test_fixed_percentage_tier_default(self):
        settings = ProgramSettings(target_area=15000, program_tier="15k")
        self.assertEqual(calculate_circulation(10000, settings), 1400)
        settings = ProgramSettings(target_area=20000, program_tier="20k")
        self.assertEqual(calculate_circulation(10000, settings), 1500)

    def test_balance_to_target(self):
        settings = ProgramSettings(
            target_area=15000, program_tier="15k", circulation_mode=CirculationMode.BALANCE_TO_TARGET
        )
        for net in (0, 9000, 12000, 14999, 15000):
            with self.subTest(net=net):
                self.assertEqual(net + calculate_circulation(net, settings), 15000)

    def test_balance_to_target_floors_at_zero(self):
        settings = ProgramSettings(
            target_area=15000, program_tier="15k", circulation_mode=CirculationMode.BALANCE_TO_TARGET
        )
        self.assertEqual(calculate_circulation(16000, settings), 0)


class TestCalculateProgramTotals(unittest.TestCase):

    def setUp(self):
        self.settings = ProgramSettings(target_area=2400, program_tier="15k", circulation_pct=0.14)
        self.selections = [
            SpaceSelection("FOY"),
            SpaceSelection("GR", size=SizeClass.LARGE),
            SpaceSelection("KIT", size=SizeClass.SMALL),
            SpaceSelection("PRI"),
            SpaceSelection("WINE", included=False),
            SpaceSelection("POOL"),
        ]

    def test_01_net_circulation_total(self):
        print("\n📊 UNIT Test 1: Program totals")
        totals = calculate_program_totals(self.selections, self.settings)

        self.assertEqual(totals.space_areas, {"FOY": 420, "GR": 660, "KIT": 405, "PRI": 500})
        self.assertEqual(totals.net, 1985)
        self.assertEqual(totals.circulation, 278)
        self.assertEqual(totals.total, 2263)
        self.assertEqual(totals.delta_from_target, -137)
        self.assertEqual(totals.warnings, [])
        print(f"  ✓ Net {totals.net}, circulation {totals.circulation}, total {totals.total}")

    def test_02_zone_and_level_partitions(self):
        totals = calculate_program_totals(self.selections, self.settings)
        self.assertEqual(totals.by_zone, {"Z1_APB": 1080, "Z2_FAM": 405, "Z5_PRI": 500})
        self.assertEqual(totals.by_level, {1: 1485, 2: 500})
        self.assertEqual(sum(totals.by_zone.values()), totals.net)
        self.assertEqual(sum(totals.by_level.values()), totals.net)

    def test_03_outdoor_kept_out_of_net(self):
        totals = calculate_program_totals(self.selections, self.settings)
        self.assertEqual(totals.outdoor_areas, {"POOL": 2000})
        self.assertEqual(totals.outdoor_total, 2000)
        self.assertNotIn("POOL", totals.space_areas)

    def test_04_excluded_spaces_contribute_nothing(self):
        """Excluded spaces are not even checked against the tier."""
        settings = ProgramSettings(target_area=1000, program_tier="10k")
        totals = calculate_program_totals([SpaceSelection("SAL", included=False)], settings)
        self.assertEqual(totals.net, 0)
        self.assertEqual(totals.total, 0)

    def test_05_round_trip_matches_individual_areas(self):
        """Summing per-space areas computed one at a time equals the aggregate net."""
        for tier in ("10k", "15k", "20k"):
            sizes = list(SizeClass)
            selections = [
                SpaceSelection(space.code, size=sizes[i % 3], included=(i % 4 != 0))
                for i, space in enumerate(get_spaces_for_tier(tier))
                if space.offered_at(tier)
            ]
            settings = ProgramSettings(target_area=15000, program_tier=tier, size_delta=0.12)
            totals = calculate_program_totals(selections, settings)

            expected = sum(
                calculate_space_area(s.code, tier, s.size, 0.12)
                for s in selections
                if s.included and s.code not in totals.outdoor_areas
            )
            with self.subTest(tier=tier):
                self.assertEqual(totals.net, expected)
                self.assertEqual(totals.total, totals.net + totals.circulation)

    def test_06_custom_area_contribution_is_stable(self):
        base = [SpaceSelection("GR", size=SizeClass.SMALL, custom_area=1234)]
        for tier in ("10k", "15k", "20k"):
            for size in SizeClass:
                selections = [base[0].with_changes(size=size)]
                totals = calculate_program_totals(selections, ProgramSettings(target_area=0, program_tier=tier))
                with self.subTest(tier=tier, size=size):
                    self.assertEqual(totals.space_areas["GR"], 1234)

    def test_07_balance_to_target_totals(self):
        settings = ProgramSettings(
            target_area=5000, program_tier="15k", circulation_mode=CirculationMode.BALANCE_TO_TARGET
        )
        totals = calculate_program_totals(self.selections, settings)
        self.assertEqual(totals.total, 5000)
        self.assertEqual(totals.circulation, 5000 - 1985)

    def test_08_variance_warning_is_advisory(self):
        settings = ProgramSettings(target_area=10000, program_tier="15k", circulation_pct=0.14)
        totals = calculate_program_totals(self.selections, settings)
        self.assertEqual(len(totals.warnings), 1)
        self.assertTrue(totals.warnings[0].startswith("variance:"))
        self.assertFalse(totals.within_variance)

    def test_09_basement_warnings(self):
        selections = [
            SpaceSelection("GR", level=BASEMENT_LEVEL),
            SpaceSelection("THR", level=BASEMENT_LEVEL),
        ]
        no_basement = ProgramSettings(target_area=0, program_tier="15k")
        totals = calculate_program_totals(selections, no_basement)
        self.assertEqual(len([w for w in totals.warnings if w.startswith("basement:")]), 2)

        with_basement = ProgramSettings(target_area=0, program_tier="15k", has_basement=True)
        totals = calculate_program_totals(selections, with_basement)
        self.assertEqual(totals.warnings, ["basement: GR is not suited to a basement location"])
        self.assertEqual(totals.by_level, {BASEMENT_LEVEL: 1000})

    def test_10_structure_totals(self):
        """Detached structures total their own net; circulation is carried by the main residence."""
        settings = ProgramSettings(target_area=1300, program_tier="20k", circulation_pct=0.10)
        totals = calculate_program_totals([SpaceSelection("GR"), SpaceSelection("PLH")], settings)

        self.assertEqual(totals.net, 1150)
        self.assertEqual(totals.circulation, 115)
        main = totals.structures["main"]
        pool_house = totals.structures["pool_house"]
        self.assertEqual((main.net, main.circulation, main.total, main.space_count), (750, 75, 825, 1))
        self.assertEqual((pool_house.net, pool_house.circulation, pool_house.total), (400, 0, 400))

    def test_11_accepts_stored_mapping(self):
        stored = {"FOY": {"included": True, "size": "L"}, "GR": {"included": False}}
        totals = calculate_program_totals(stored, self.settings)
        self.assertEqual(totals.space_areas, {"FOY": 462})

    def test_12_errors(self):
        with self.assertRaises(UnknownSpaceError):
            calculate_program_totals([SpaceSelection("NOPE")], self.settings)
        with self.assertRaises(UnknownTierError):
            calculate_program_totals([], ProgramSettings(target_area=0, program_tier="50k"))
        with self.assertRaises(SpaceNotOfferedError):
            calculate_program_totals([SpaceSelection("ART")], self.settings)

    def test_12b_repeated_code_rejected(self):
        for selections in (
            [SpaceSelection("FOY"), SpaceSelection("FOY", size=SizeClass.LARGE)],
            [SpaceSelection("FOY"), SpaceSelection("FOY", included=False)],
        ):
            with self.subTest(selections=selections):
                with self.assertRaises(DuplicateSpaceError) as ctx:
                    calculate_program_totals(selections, self.settings)
                self.assertEqual(ctx.exception.code, "FOY")

    def test_13_to_dict(self):
        data = calculate_program_totals(self.selections, self.settings).to_dict()
        self.assertEqual(data["by_level"], {"1": 1485, "2": 500})
        self.assertEqual(data["structures"]["main"]["net"], 1985)


class TestCheckVariance(unittest.TestCase):

    def test_within_limit(self):
        self.assertIsNone(check_variance(12000, 10000))
        self.assertIsNone(check_variance(8000, 10000))

    def test_beyond_limit(self):
        self.assertIsNotNone(check_variance(12001, 10000))
        self.assertIsNotNone(check_variance(7000, 10000, 0.2))
        self.assertIsNotNone(check_variance(10600, 10000, 0.05))

    def test_no_target(self):
        self.assertIsNone(check_variance(5000, 0))


if __name__ == '__main__':
    unittest.main()
