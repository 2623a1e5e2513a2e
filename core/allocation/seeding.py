#!/usr/bin/env python3
"""
Program seeding - tier-appropriate starting selections, shaped by intake answers.

Seeding runs whenever a project's target area is set or changed: the tier is
derived from the target, every space offered at that tier starts included at
Medium on its default level, and intake flags (bedrooms, staffing, children,
wellness, entertaining, basement, explicit wants) adjust the template.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import logging

from core.allocation.calculator import default_circulation_pct
from core.allocation.models import CirculationMode, ProgramSettings, SizeClass, SpaceSelection
from core.config_loader import AllocationConfig
from core.registries.spaces import BASEMENT_LEVEL, SPACES_BY_CODE, get_spaces_for_tier, legacy_to_code
from core.utils import get_section, intake_principal, to_number

logger = logging.getLogger(__name__)

DEFAULT_TARGET_AREA = 15000
DEFAULT_BEDROOM_COUNT = 4

LIVE_IN_STAFFING = frozenset({"live_in", "full_time"})
GUEST_SUITES = ("GST1", "GST2", "GST3", "GST4")
# Spaces that move to the basement when the project has one
BASEMENT_MOVES = ("THR", "WINE", "STR", "MEP")


@dataclass
class SeededProgram:
    settings: ProgramSettings
    selections: Dict[str, SpaceSelection] = field(default_factory=dict)
    adjustments: List[str] = field(default_factory=list)


def select_program_tier(target_area: Optional[float], config: Optional[AllocationConfig] = None) -> str:
    """Map a target area to a program tier: small targets -> 10k, large -> 20k, else 15k."""
    config = config or AllocationConfig()
    area = to_number(target_area)
    if area is None or area <= 0:
        return "15k"
    if area <= config.tier_10k_max_area:
        return "10k"
    if area >= config.tier_20k_min_area:
        return "20k"
    return "15k"


def initialize_selections(tier: str) -> Dict[str, SpaceSelection]:
    """Every space listed and offered at the tier, included at Medium on its default level."""
    return {
        space.code: SpaceSelection(code=space.code, included=True, size=SizeClass.MEDIUM,
                                   level=space.default_level)
        for space in get_spaces_for_tier(tier)
        if space.offered_at(tier)
    }


def _describe(value: Any) -> Any:
    return value.value if isinstance(value, SizeClass) else value


class _Seeder:
    """Applies intake answers to a fresh selection set, recording each adjustment."""

    def __init__(self, selections: Dict[str, SpaceSelection]):
        self.selections = selections
        self.adjustments: List[str] = []

    def update(self, code: str, source: Optional[str] = None, **changes) -> None:
        current = self.selections.get(code)
        if current is None:
            return
        if source is not None:
            changes.setdefault("source", source)
        self.selections[code] = current.with_changes(**changes)
        described = ", ".join(f"{k}={_describe(v)}" for k, v in changes.items())
        self.adjustments.append(f"{code}: {described}")

    def has_source(self, code: str) -> bool:
        selection = self.selections.get(code)
        return selection is not None and selection.source is not None


def _count_children(family: Any) -> int:
    members = family.get("familyMembers") or []
    count = 0
    for member in members:
        age = to_number(member.get("age")) if hasattr(member, "get") else None
        if age is not None and age < 18:
            count += 1
    return count


def apply_intake_defaults(kyc_data: Any, config: Optional[AllocationConfig] = None) -> SeededProgram:
    """Seed program settings and selections from a KYC intake document."""
    config = config or AllocationConfig()
    principal = intake_principal(kyc_data)
    params = get_section(principal, "projectParameters")
    family = get_section(principal, "familyHousehold")
    lifestyle = get_section(principal, "lifestyleLiving")
    wants = get_section(principal, "spaceRequirements")

    target = to_number(params.get("targetGSF")) or DEFAULT_TARGET_AREA
    has_basement = bool(params.get("hasBasement", False))
    bedrooms = to_number(params.get("bedroomCount")) or DEFAULT_BEDROOM_COUNT
    tier = select_program_tier(target, config)

    settings = ProgramSettings(
        target_area=target,
        program_tier=tier,
        size_delta=config.size_delta,
        circulation_mode=CirculationMode(config.circulation_mode),
        circulation_pct=config.circulation_pct if config.circulation_pct is not None else default_circulation_pct(tier),
        variance_warning_fraction=config.variance_warning_fraction,
        has_basement=has_basement,
    )
    seeder = _Seeder(initialize_selections(tier))

    # Bedrooms: one goes to the primary suite, the rest fill guest suites in order
    guests_needed = max(0, int(bedrooms) - 1)
    for index, code in enumerate(GUEST_SUITES, start=1):
        included = guests_needed >= index
        seeder.update(code, "bedroomCount" if included else None, included=included)

    for key, source in (("mustHaveSpaces", "mustHave"), ("niceToHaveSpaces", "niceToHave")):
        for legacy in wants.get(key) or []:
            code = legacy_to_code(legacy)
            if code is None:
                logger.debug("No space code for intake value %r", legacy)
                continue
            seeder.update(code, None if seeder.has_source(code) else source, included=True)

    if family.get("petGroomingRoom"):
        seeder.update("MUD", "petGroomingRoom", size=SizeClass.LARGE,
                      notes="Includes pet grooming station")

    if lifestyle.get("lateNightMediaUse"):
        seeder.update("MEDIA", "lateNightMediaUse", size=SizeClass.LARGE,
                      notes="Sound isolation required for late-night use")
        seeder.update("THR", "lateNightMediaUse", notes="Sound isolation required")

    for flag, code in (("wantsBar", "BAR"), ("wantsBunkRoom", "BNK"), ("wantsBreakfastNook", "BKF")):
        if wants.get(flag):
            seeder.update(code, flag, included=True, size=SizeClass.MEDIUM)

    staffing = family.get("staffingLevel")
    has_live_in = staffing in LIVE_IN_STAFFING
    if has_live_in:
        seeder.update("STF", "staffingLevel", included=True)
        if tier == "20k":
            seeder.update("SKT", "staffingLevel", included=True)
            seeder.update("SLG", "staffingLevel", included=True)
    elif "staffingLevel" in family:
        for code in ("STF", "SKT", "SLG"):
            seeder.update(code, included=False)

    children = _count_children(family)
    if children > 0:
        seeder.update("BNK", "kidsCount", included=True)
    elif "familyMembers" in family:
        if not wants.get("wantsBunkRoom"):
            seeder.update("BNK", included=False)
        seeder.update("PLY", included=False)
    if children > 0 and has_live_in:
        seeder.update("NNY", "staffingWithKids", included=True)
    elif "familyMembers" in family or "staffingLevel" in family:
        seeder.update("NNY", included=False)

    if "wellnessPriorities" in lifestyle:
        wellness = set(lifestyle.get("wellnessPriorities") or [])
        if not wellness & {"gym", "fitness"}:
            seeder.update("GYM", size=SizeClass.SMALL)
        if not wellness & {"spa", "sauna"}:
            seeder.update("SPA", size=SizeClass.SMALL)
            seeder.update("MAS", included=False)

    entertaining = lifestyle.get("entertainingFrequency")
    if entertaining in ("rarely", "never"):
        seeder.update("GAME", included=False)
        if not seeder.has_source("BAR"):
            seeder.update("BAR", included=False)
    elif entertaining in ("weekly", "daily"):
        seeder.update("GR", "entertainingFrequency", size=SizeClass.LARGE)
        seeder.update("BAR", "entertainingFrequency", included=True, size=SizeClass.LARGE)

    if has_basement:
        for code in BASEMENT_MOVES:
            if SPACES_BY_CODE[code].basement_eligible:
                seeder.update(code, "hasBasement", level=BASEMENT_LEVEL)

    logger.info("Seeded %s program for target %s: %d spaces, %d intake adjustments",
                tier, target, sum(1 for s in seeder.selections.values() if s.included), len(seeder.adjustments))
    return SeededProgram(settings=settings, selections=seeder.selections, adjustments=seeder.adjustments)
