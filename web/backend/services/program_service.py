#!/usr/bin/env python3
"""
Program service - space-program totals, seeding and briefs.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional
from sqlalchemy.orm import Session

from core.allocation import (
    CirculationMode, ProgramSettings, SpaceSelection, apply_intake_defaults, calculate_program_totals,
)
from core.config_loader import AllocationConfig
from core.reports import build_program_brief
from ..models.responses import ProgramTotalsResponse, ProgramSeedResponse, ProgramBriefResponse
from ..exceptions import InvalidProgramException
from .matching_service import project_name_from_kyc
from .project_service import ProjectService

logger = logging.getLogger(__name__)


def default_settings(config: AllocationConfig) -> ProgramSettings:
    return ProgramSettings(
        target_area=0,
        size_delta=config.size_delta,
        circulation_mode=CirculationMode(config.circulation_mode),
        circulation_pct=config.circulation_pct,
        variance_warning_fraction=config.variance_warning_fraction,
    )


def parse_program(
    selections: Any,
    settings: Any,
    config: AllocationConfig
) -> tuple:
    """
    Read posted or stored selections/settings into engine types.

    Raises:
        InvalidProgramException: If the documents are malformed.
    """
    if not isinstance(selections, Mapping):
        raise InvalidProgramException("selections must be an object keyed by space code")
    if not isinstance(settings, Mapping):
        raise InvalidProgramException("settings must be an object")

    try:
        parsed_settings = ProgramSettings.from_mapping(settings, defaults=default_settings(config))
    except ValueError as e:
        raise InvalidProgramException(f"Invalid program settings: {e}") from e
    if parsed_settings.target_area < 0:
        raise InvalidProgramException(f"target_area must not be negative, got {parsed_settings.target_area}")

    parsed_selections: Dict[str, SpaceSelection] = {}
    for code, data in selections.items():
        if not isinstance(data, Mapping):
            raise InvalidProgramException(f"Selection for {code} must be an object")
        try:
            parsed_selections[code] = SpaceSelection.from_mapping(code, data)
        except ValueError as e:
            raise InvalidProgramException(f"Invalid selection for {code}: {e}") from e
    return parsed_selections, parsed_settings


class ProgramService:
    """Service for the Allocation Calculator."""

    def __init__(self, config: AllocationConfig, db: Optional[Session] = None):
        self.config = config
        self.db = db

    def calculate(self, selections: Dict[str, Any], settings: Dict[str, Any]) -> ProgramTotalsResponse:
        parsed_selections, parsed_settings = parse_program(selections, settings, self.config)
        totals = calculate_program_totals(list(parsed_selections.values()), parsed_settings)
        return ProgramTotalsResponse(
            success=True,
            settings=parsed_settings.to_dict(),
            totals=totals.to_dict(),
            within_variance=totals.within_variance,
        )

    def seed(self, target_area: Optional[float] = None, kyc: Optional[Dict[str, Any]] = None) -> ProgramSeedResponse:
        """Seed selections from a KYC document; an explicit target area wins over the intake's."""
        intake = dict(kyc or {})
        if target_area is not None:
            intake = {"principal": _with_target(intake, target_area)}
        seeded = apply_intake_defaults(intake, self.config)
        totals = calculate_program_totals(list(seeded.selections.values()), seeded.settings)
        logger.info(
            f"Seeded {seeded.settings.program_tier} program: "
            f"{sum(1 for s in seeded.selections.values() if s.included)} spaces, {len(seeded.adjustments)} adjustments"
        )
        return ProgramSeedResponse(
            success=True,
            settings=seeded.settings.to_dict(),
            selections={code: s.to_dict() for code, s in seeded.selections.items()},
            adjustments=list(seeded.adjustments),
            totals=totals.to_dict(),
        )

    def brief(self, slug: str) -> ProgramBriefResponse:
        """
        Program brief for a stored project. Uses the saved FYI program when there
        is one, otherwise seeds a program from the KYC intake.

        Raises:
            ProjectNotFoundException: If the project has no stored documents.
        """
        kyc, fyi = ProjectService(self.db).load_intake(slug)
        if fyi.get("selections"):
            selections, settings = parse_program(fyi.get("selections"), fyi.get("settings") or {}, self.config)
        else:
            seeded = apply_intake_defaults(kyc, self.config)
            selections, settings = seeded.selections, seeded.settings

        brief = build_program_brief(selections, settings, project_name=project_name_from_kyc(kyc, slug))
        return ProgramBriefResponse(success=True, slug=slug, brief=brief)


def _with_target(kyc: Dict[str, Any], target_area: float) -> Dict[str, Any]:
    principal = dict(kyc.get("principal") or kyc)
    params = dict(principal.get("projectParameters") or {})
    params["targetGSF"] = target_area
    principal["projectParameters"] = params
    return principal
