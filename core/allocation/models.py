#!/usr/bin/env python3
"""
Allocation Models - space selections, program settings and computed totals.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from core.registries.spaces import BASEMENT_LEVEL
from core.utils import to_bool, to_number


class SizeClass(str, Enum):
    SMALL = "S"
    MEDIUM = "M"
    LARGE = "L"

    @classmethod
    def parse(cls, value: Any) -> "SizeClass":
        if isinstance(value, SizeClass):
            return value
        if value is None or value == "":
            return cls.MEDIUM
        text = str(value).strip().upper()
        aliases = {"SMALL": "S", "MEDIUM": "M", "LARGE": "L"}
        return cls(aliases.get(text, text))


class CirculationMode(str, Enum):
    FIXED_PERCENTAGE = "fixed_percentage"
    BALANCE_TO_TARGET = "balance_to_target"


@dataclass(frozen=True)
class SpaceSelection:
    """One space in a program: whether it is in, how big, and on which level."""
    code: str
    included: bool = True
    size: SizeClass = SizeClass.MEDIUM
    level: Optional[int] = None  # None = the space's default level
    custom_area: Optional[float] = None
    notes: str = ""
    features: Tuple[str, ...] = ()
    source: Optional[str] = None  # intake field that shaped this selection

    def with_changes(self, **changes) -> "SpaceSelection":
        return replace(self, **changes)

    @classmethod
    def from_mapping(cls, code: str, data: Mapping) -> "SpaceSelection":
        """Read a stored selection; accepts both snake_case and intake (customSF, kycSource) keys."""
        level = to_number(data.get("level"))
        if level is not None and level < BASEMENT_LEVEL:
            # Older documents mark the basement as -1
            level = BASEMENT_LEVEL
        custom = data.get("custom_area", data.get("customSF"))
        return cls(
            code=code,
            included=to_bool(data.get("included"), default=True),
            size=SizeClass.parse(data.get("size")),
            level=int(level) if level is not None else None,
            custom_area=to_number(custom),
            notes=data.get("notes") or "",
            features=tuple(str(f) for f in data.get("features") or ()),
            source=data.get("source", data.get("kycSource")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "included": self.included,
            "size": self.size.value,
            "level": self.level,
            "custom_area": self.custom_area,
            "notes": self.notes,
            "features": list(self.features),
            "source": self.source,
        }


@dataclass(frozen=True)
class ProgramSettings:
    target_area: float
    program_tier: str = "15k"
    size_delta: float = 0.10
    circulation_mode: CirculationMode = CirculationMode.FIXED_PERCENTAGE
    circulation_pct: Optional[float] = None  # None = tier default
    variance_warning_fraction: float = 0.20
    has_basement: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping, defaults: Optional["ProgramSettings"] = None) -> "ProgramSettings":
        """Read stored settings. Intake documents store deltaPct as a percent and lockToTarget as a flag."""
        base = defaults or cls(target_area=0)
        target = to_number(data.get("target_area", data.get("targetSF")))

        delta = to_number(data.get("size_delta"))
        if delta is None:
            pct = to_number(data.get("deltaPct"))
            delta = pct / 100.0 if pct is not None else base.size_delta

        mode = data.get("circulation_mode")
        if mode is None and "lockToTarget" in data:
            mode = CirculationMode.BALANCE_TO_TARGET if to_bool(data.get("lockToTarget")) else CirculationMode.FIXED_PERCENTAGE
        circ_pct = to_number(data.get("circulation_pct", data.get("circulationPct")))
        variance_fraction = to_number(data.get("variance_warning_fraction"))

        return cls(
            target_area=target if target is not None else base.target_area,
            program_tier=str(data.get("program_tier", data.get("programTier")) or base.program_tier),
            size_delta=delta,
            circulation_mode=CirculationMode(mode) if mode is not None else base.circulation_mode,
            circulation_pct=circ_pct if circ_pct is not None else base.circulation_pct,
            variance_warning_fraction=variance_fraction if variance_fraction is not None else base.variance_warning_fraction,
            has_basement=to_bool(data.get("has_basement", data.get("hasBasement")), default=base.has_basement),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "target_area": self.target_area,
            "program_tier": self.program_tier,
            "size_delta": self.size_delta,
            "circulation_mode": self.circulation_mode.value,
            "circulation_pct": self.circulation_pct,
            "variance_warning_fraction": self.variance_warning_fraction,
            "has_basement": self.has_basement,
        }


@dataclass
class StructureTotals:
    net: float = 0
    circulation: float = 0
    total: float = 0
    space_count: int = 0


@dataclass
class ProgramTotals:
    """Aggregate program areas. Outdoor spaces are reported but never part of net or total."""
    space_areas: Dict[str, float] = field(default_factory=dict)
    net: float = 0
    by_zone: Dict[str, float] = field(default_factory=dict)
    by_level: Dict[int, float] = field(default_factory=dict)
    outdoor_areas: Dict[str, float] = field(default_factory=dict)
    outdoor_total: float = 0
    circulation: float = 0
    circulation_pct: float = 0.0
    total: float = 0
    target_area: float = 0
    delta_from_target: float = 0
    structures: Dict[str, StructureTotals] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    @property
    def within_variance(self) -> bool:
        return not any(w.startswith("variance:") for w in self.warnings)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "space_areas": dict(self.space_areas),
            "net": self.net,
            "by_zone": dict(self.by_zone),
            "by_level": {str(k): v for k, v in self.by_level.items()},
            "outdoor_areas": dict(self.outdoor_areas),
            "outdoor_total": self.outdoor_total,
            "circulation": self.circulation,
            "circulation_pct": self.circulation_pct,
            "total": self.total,
            "target_area": self.target_area,
            "delta_from_target": self.delta_from_target,
            "structures": {
                k: {"net": s.net, "circulation": s.circulation, "total": s.total, "space_count": s.space_count}
                for k, s in self.structures.items()
            },
            "warnings": list(self.warnings),
        }
