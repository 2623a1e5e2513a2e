#!/usr/bin/env python3
"""
Allocation Calculator - space areas, circulation, and program totals.

Key behavior:
- A custom area is used verbatim; tier and size class are ignored for that space.
- Otherwise base area for the tier, then Small = base * (1 - delta), Large = base * (1 + delta),
  rounded half up to whole units.
- A space with no base area at the tier is a caller error, never a silent zero.
- Circulation is either a fixed percentage of net, or balances net up to the target (floored at 0).
- Variance beyond the warning fraction and questionable basement placements are warnings, not errors.
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional, Union
import logging

from core.allocation.models import (
    CirculationMode, ProgramSettings, ProgramTotals, SizeClass, SpaceSelection, StructureTotals,
)
from core.exceptions import DuplicateSpaceError, SpaceNotOfferedError, UnknownSpaceError, UnknownTierError
from core.registries.spaces import (
    BASEMENT_LEVEL, CIRCULATION_DEFAULTS, PROGRAM_TIERS, SPACES_BY_CODE, STRUCTURE_MAIN, SpaceTemplate,
)
from core.utils import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_SIZE_DELTA = 0.10
DEFAULT_VARIANCE_WARNING_FRACTION = 0.20


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def _resolve_space(space: Union[SpaceTemplate, str]) -> SpaceTemplate:
    if isinstance(space, SpaceTemplate):
        return space
    template = SPACES_BY_CODE.get(space)
    if template is None:
        raise UnknownSpaceError(space)
    return template


def _check_tier(tier: str) -> str:
    if tier not in PROGRAM_TIERS:
        raise UnknownTierError(tier)
    return tier


def default_circulation_pct(tier: str) -> float:
    return CIRCULATION_DEFAULTS[_check_tier(tier)].default


def calculate_space_area(
    space: Union[SpaceTemplate, str],
    tier: str,
    size: Union[SizeClass, str] = SizeClass.MEDIUM,
    size_delta: float = DEFAULT_SIZE_DELTA,
    custom_area: Optional[float] = None,
) -> float:
    """Area one space contributes to the program.

    Raises:
        UnknownSpaceError: space code not in the registry.
        UnknownTierError: tier is not a registered program tier (only checked without a custom area).
        SpaceNotOfferedError: no base area at this tier and no custom area.
    """
    template = _resolve_space(space)
    if custom_area is not None:
        return custom_area

    base = template.base_area_for(_check_tier(tier))
    if base is None:
        raise SpaceNotOfferedError(template.code, tier)

    delta = _clamp(float(size_delta), 0.0, 1.0)
    if delta != size_delta:
        logger.warning("Corrected size_delta from %r to %r", size_delta, delta)

    size = SizeClass.parse(size)
    if size == SizeClass.SMALL:
        return round_half_up(base * (1.0 - delta))
    if size == SizeClass.LARGE:
        return round_half_up(base * (1.0 + delta))
    return base


def calculate_circulation(net: float, settings: ProgramSettings) -> float:
    """Circulation allowance on top of net area."""
    if settings.circulation_mode == CirculationMode.BALANCE_TO_TARGET:
        return max(0, settings.target_area - net)

    pct = settings.circulation_pct
    if pct is None:
        pct = default_circulation_pct(settings.program_tier)
    if pct < 0:
        logger.warning("Corrected circulation_pct from %r to 0.0", pct)
        pct = 0.0
    return round_half_up(net * pct)


def _selection_area(selection: SpaceSelection, template: SpaceTemplate, settings: ProgramSettings) -> float:
    return calculate_space_area(
        template, settings.program_tier, selection.size, settings.size_delta, selection.custom_area,
    )


def _as_selections(selections: Union[Iterable[SpaceSelection], Mapping[str, Mapping]]) -> Iterable[SpaceSelection]:
    if isinstance(selections, Mapping):
        return [
            s if isinstance(s, SpaceSelection) else SpaceSelection.from_mapping(code, s)
            for code, s in selections.items()
        ]
    return selections


def calculate_program_totals(
    selections: Union[Iterable[SpaceSelection], Mapping[str, Mapping]],
    settings: ProgramSettings,
) -> ProgramTotals:
    """Aggregate included spaces into net, zone, level, structure and outdoor totals.

    Excluded spaces contribute nothing (and are not validated against the tier).

    Raises:
        UnknownSpaceError: a selection references a code missing from the registry.
        DuplicateSpaceError: the same space code is selected more than once.
        UnknownTierError: settings.program_tier is not registered.
        SpaceNotOfferedError: an included space has no area at the tier and no custom area.
    """
    _check_tier(settings.program_tier)
    totals = ProgramTotals(target_area=settings.target_area)
    structures: Dict[str, StructureTotals] = {STRUCTURE_MAIN: StructureTotals()}
    seen = set()

    for selection in _as_selections(selections):
        template = _resolve_space(selection.code)
        if template.code in seen:
            raise DuplicateSpaceError(template.code)
        seen.add(template.code)
        if not selection.included:
            continue

        area = _selection_area(selection, template, settings)

        if template.outdoor:
            totals.outdoor_areas[template.code] = area
            totals.outdoor_total += area
            continue

        level = selection.level if selection.level is not None else template.default_level
        totals.space_areas[template.code] = area
        totals.net += area
        totals.by_zone[template.zone] = totals.by_zone.get(template.zone, 0) + area
        totals.by_level[level] = totals.by_level.get(level, 0) + area

        bucket = structures.setdefault(template.structure, StructureTotals())
        bucket.net += area
        bucket.space_count += 1

        if level == BASEMENT_LEVEL:
            if not settings.has_basement:
                totals.warnings.append(f"basement: {template.code} is placed in a basement but the project has none")
            elif not template.basement_eligible:
                totals.warnings.append(f"basement: {template.code} is not suited to a basement location")

    totals.circulation = calculate_circulation(totals.net, settings)
    totals.circulation_pct = 100.0 * totals.circulation / totals.net if totals.net > 0 else 0.0
    totals.total = totals.net + totals.circulation
    totals.delta_from_target = totals.total - settings.target_area

    # Circulation belongs to the main residence; detached structures total their net area
    for name, bucket in structures.items():
        if name == STRUCTURE_MAIN:
            bucket.circulation = calculate_circulation(bucket.net, settings)
        bucket.total = bucket.net + bucket.circulation
    totals.structures = structures

    variance = check_variance(totals.total, settings.target_area, settings.variance_warning_fraction)
    if variance:
        totals.warnings.append(variance)

    logger.debug(
        "Program totals: net=%s circulation=%s total=%s target=%s outdoor=%s warnings=%d",
        totals.net, totals.circulation, totals.total, settings.target_area,
        totals.outdoor_total, len(totals.warnings),
    )
    return totals


def check_variance(
    total: float,
    target: float,
    fraction: float = DEFAULT_VARIANCE_WARNING_FRACTION,
) -> Optional[str]:
    """Warning text when |total - target| exceeds fraction * target, else None."""
    if not target or target <= 0:
        return None
    variance = abs(total - target)
    if variance > fraction * target:
        return (
            f"variance: total {total:,.0f} differs from target {target:,.0f} "
            f"by {100.0 * variance / target:.1f}% (limit {100.0 * fraction:.0f}%)"
        )
    return None
