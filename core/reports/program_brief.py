#!/usr/bin/env python3
"""
Program Brief - structured space-program summary for document rendering.

Returns plain dicts only; page layout belongs to whatever renders them.
"""

from typing import Any, Dict, List, Mapping, Optional
import logging

from core.allocation.calculator import calculate_program_totals
from core.allocation.models import ProgramSettings, ProgramTotals, SpaceSelection
from core.registries.labels import LabelConcern, label_for
from core.registries.spaces import SPACES, SPACES_BY_CODE
from core.registries.zones import get_zones_in_order
from core.reports.formatting import format_area, format_percent

logger = logging.getLogger(__name__)


def _level_label(level: int) -> str:
    return "Basement" if level == 0 else f"Level {level}"


def build_program_brief(
    selections: Mapping[str, SpaceSelection],
    settings: ProgramSettings,
    totals: Optional[ProgramTotals] = None,
    project_name: Optional[str] = None,
) -> Dict[str, Any]:
    """Brief with settings, included spaces grouped by zone, totals and warnings.

    Totals are computed from the selections when not supplied.
    """
    if totals is None:
        totals = calculate_program_totals(list(selections.values()), settings)

    zone_rows: Dict[str, List[Dict[str, Any]]] = {}
    # Registry order keeps rows stable regardless of selection order
    for space in SPACES:
        selection = selections.get(space.code)
        if selection is None or not selection.included:
            continue
        area = totals.outdoor_areas.get(space.code) if space.outdoor else totals.space_areas.get(space.code)
        level = selection.level if selection.level is not None else space.default_level
        zone_rows.setdefault(space.zone, []).append({
            "code": space.code,
            "name": space.name,
            "area": area,
            "area_display": format_area(area),
            "size": selection.size.value,
            "size_label": label_for(LabelConcern.SIZE_CLASS, selection.size),
            "level": level,
            "level_label": _level_label(level),
            "structure": label_for(LabelConcern.STRUCTURE, space.structure),
            "custom_area": selection.custom_area is not None,
            "outdoor": space.outdoor,
            "notes": selection.notes,
        })

    unknown = [code for code in selections if code not in SPACES_BY_CODE]
    if unknown:
        logger.warning("Program brief ignoring unknown space codes: %s", unknown)

    zones = []
    for zone in get_zones_in_order():
        rows = zone_rows.get(zone.code)
        if not rows:
            continue
        zones.append({
            "code": zone.code,
            "name": zone.name,
            "subtotal": totals.outdoor_total if zone.code == "Z8_OUT" else totals.by_zone.get(zone.code, 0),
            "spaces": rows,
        })

    circulation_fraction = settings.circulation_pct
    return {
        "project_name": project_name,
        "settings": {
            "target_area": settings.target_area,
            "target_area_display": format_area(settings.target_area),
            "program_tier": settings.program_tier,
            "size_delta_display": format_percent(settings.size_delta, 0),
            "circulation_mode": label_for(LabelConcern.CIRCULATION_MODE, settings.circulation_mode),
            "circulation_pct_display": format_percent(circulation_fraction) if circulation_fraction is not None else None,
            "has_basement": settings.has_basement,
        },
        "zones": zones,
        "totals": {
            "net": totals.net,
            "circulation": totals.circulation,
            "total": totals.total,
            "outdoor_total": totals.outdoor_total,
            "delta_from_target": totals.delta_from_target,
            "net_display": format_area(totals.net),
            "circulation_display": format_area(totals.circulation),
            "total_display": format_area(totals.total),
            "outdoor_display": format_area(totals.outdoor_total),
            "by_level": [
                {"level": level, "label": _level_label(level), "area": area}
                for level, area in sorted(totals.by_level.items())
            ],
            "structures": [
                {"structure": name, "label": label_for(LabelConcern.STRUCTURE, name),
                 "net": s.net, "circulation": s.circulation, "total": s.total, "space_count": s.space_count}
                for name, s in totals.structures.items() if s.space_count
            ],
        },
        "warnings": list(totals.warnings),
    }
