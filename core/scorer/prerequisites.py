#!/usr/bin/env python3
"""
Matching prerequisites - which intake fields are filled before matching runs.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List

from core.scorer.profile import _positive_number
from core.utils import get_section as _section, intake_principal as _principal


@dataclass(frozen=True)
class Gate:
    field: str
    label: str
    source: str
    filled: bool
    required: bool


@dataclass
class PrerequisiteReport:
    ready: bool
    completeness: int
    gates: List[Gate] = field(default_factory=list)

    @property
    def missing_required(self) -> List[str]:
        return [g.field for g in self.gates if g.required and not g.filled]

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["missing_required"] = self.missing_required
        return data


def check_match_prerequisites(kyc_data: Any, fyi_data: Any = None) -> PrerequisiteReport:
    """Project city and total budget are required; taste, styles, spaces and target area are optional."""
    principal = _principal(kyc_data)
    params = _section(principal, "projectParameters")
    budget_fw = _section(principal, "budgetFramework")
    design = _section(principal, "designIdentity")
    selections = _section(fyi_data, "selections")
    settings = _section(fyi_data, "settings")

    has_spaces = any(isinstance(s, Mapping) and s.get("included") for s in selections.values())

    gates = [
        Gate("projectCity", "Project City", "KYC",
             bool(params.get("projectCity")), True),
        Gate("totalProjectBudget", "Total Project Budget", "KYC",
             _positive_number(budget_fw.get("totalProjectBudget")) is not None, True),
        Gate("tasteAxes", "Design Identity (Taste Axes)", "KYC",
             bool(design.get("axisContemporaryTraditional") or design.get("axisMinimalLayered")), False),
        Gate("styleTags", "Architecture / Interior Style Tags", "KYC",
             bool(design.get("architectureStyleTags") or design.get("interiorStyleTags")), False),
        Gate("fyiSelections", "Space Selections (FYI)", "FYI", has_spaces, False),
        Gate("targetSF", "Target Square Footage", "FYI",
             _positive_number(settings.get("targetSF")) is not None, False),
    ]

    filled = sum(1 for g in gates if g.filled)
    return PrerequisiteReport(
        ready=all(g.filled for g in gates if g.required),
        completeness=int(filled * 100 / len(gates) + 0.5),
        gates=gates,
    )
