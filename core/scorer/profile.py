#!/usr/bin/env python3
"""
Project Profile builder - turns intake documents into a ProjectProfile.

Reads the KYC document (principal.projectParameters, budgetFramework,
designIdentity) and the FYI document (settings, selections). Both documents
are free-form JSON; every field is optional.
"""

from collections.abc import Mapping
from typing import Any, Dict, List, Optional
import logging
import re

from core.exceptions import InvalidProjectError
from core.registries.consultants import (
    BUDGET_TIERS, FULL_STATE_NAMES, KNOWN_MARKET_CITIES, TASTE_STYLE_MAP,
    TASTE_LOW_MAX, TASTE_HIGH_MIN,
)
from core.registries.spaces import feature_tags_for
from core.scorer.models import ProjectProfile, _normalize_tags
from core.utils import get_section as _section, intake_principal as _principal, to_number

logger = logging.getLogger(__name__)

# Slider value the intake form starts at; treated as "not set" when taste results exist
UNTOUCHED_AXIS_VALUE = 5

# Taste exploration score keys (1-10 scale) backing each intake axis
TASTE_SCORE_KEYS = {
    "axisContemporaryTraditional": "tradition",
    "axisMinimalLayered": "formality",
    "axisWarmCool": "warmth",
    "axisOrganicGeometric": "openness",
    "axisRefinedEclectic": "drama",
    "axisArchMinimalOrnate": "art_focus",
}

US_COUNTRY_NAMES = frozenset({"US", "USA", "U.S.", "U.S.A.", "UNITED STATES"})

_STATE_CODE = re.compile(r"^[A-Z]{2}$")


def _positive_number(value: Any) -> Optional[float]:
    number = to_number(value)
    return number if number is not None and number > 0 else None


def extract_state(city: Optional[str], country: Optional[str] = None) -> Optional[str]:
    """Extract a US state code from a free-text project city.

    Handles "City, ST", "City, State Name" and well-known luxury markets
    entered without a state ("Aspen"). Returns None when nothing matches.
    """
    if not city or not str(city).strip():
        return None
    if country and str(country).strip().upper() not in US_COUNTRY_NAMES:
        return None

    parts = [p.strip() for p in str(city).split(",")]
    if len(parts) >= 2:
        last = parts[-1].upper()
        if _STATE_CODE.match(last):
            return last
        if last in FULL_STATE_NAMES:
            return FULL_STATE_NAMES[last]

    return KNOWN_MARKET_CITIES.get(str(city).strip().lower())


def _axis_value(design_identity: Mapping, axis: str) -> Optional[float]:
    direct = design_identity.get(axis)
    if direct is not None and direct != UNTOUCHED_AXIS_VALUE:
        return direct

    taste = _section(design_identity, "principalTasteResults")
    scores = _section(taste, "profile", "scores") or _section(taste, "session", "profile", "scores")
    if scores:
        score_key = TASTE_SCORE_KEYS.get(axis)
        return scores.get(score_key) if score_key else None

    return direct


def derive_style_keywords(design_identity: Any) -> List[str]:
    """Style keywords from taste axes (1-10 sliders) plus explicit style tags.

    Axis values <= 3 map to the axis's low styles, >= 7 to its high styles,
    anything in between to the mid styles. Order is preserved, duplicates dropped.
    """
    if not isinstance(design_identity, Mapping):
        return []

    keywords: Dict[str, None] = {}
    for axis, bands in TASTE_STYLE_MAP.items():
        value = _axis_value(design_identity, axis)
        try:
            value = float(value) if value is not None else None
        except (TypeError, ValueError):
            logger.warning("Ignoring non-numeric taste axis %s=%r", axis, value)
            value = None
        if value is None:
            continue
        if value <= TASTE_LOW_MAX:
            band = "low"
        elif value >= TASTE_HIGH_MIN:
            band = "high"
        else:
            band = "mid"
        for style in bands[band]:
            keywords.setdefault(style)

    for key in ("architectureStyleTags", "interiorStyleTags"):
        for tag in design_identity.get(key) or []:
            if tag:
                keywords.setdefault(str(tag))

    return list(keywords)


def derive_budget_tier(budget: Any) -> Optional[str]:
    amount = _positive_number(budget) or 0.0
    for tier, minimum in BUDGET_TIERS:
        if amount >= minimum:
            return tier
    return None


def required_features_from_selections(selections: Any) -> List[str]:
    """Feature tags implied by included spaces: registry tags plus any per-selection extras."""
    if not isinstance(selections, Mapping):
        return []
    included = [code for code, sel in selections.items() if isinstance(sel, Mapping) and sel.get("included")]
    features: Dict[str, None] = {}
    for tag in feature_tags_for(included).values():
        features.setdefault(tag)
    for code in included:
        for tag in selections[code].get("features") or []:
            if tag:
                features.setdefault(str(tag))
    return list(features)


def build_project_profile(kyc_data: Any, fyi_data: Any = None) -> ProjectProfile:
    """Assemble a ProjectProfile from the KYC and FYI intake documents.

    Raises:
        InvalidProjectError: kyc_data is present but not a mapping.
    """
    if kyc_data is not None and not isinstance(kyc_data, Mapping):
        raise InvalidProjectError(f"KYC data must be a mapping, got {type(kyc_data).__name__}")

    principal = _principal(kyc_data)
    params = _section(principal, "projectParameters")
    budget_fw = _section(principal, "budgetFramework")
    design = _section(principal, "designIdentity")
    fyi_settings = _section(fyi_data, "settings")
    selections = _section(fyi_data, "selections")

    city = params.get("projectCity") or None
    target_area = _positive_number(fyi_settings.get("targetSF")) or _positive_number(params.get("targetGSF"))
    bedrooms = _positive_number(params.get("bedroomCount"))

    profile = ProjectProfile(
        region=extract_state(city, params.get("projectCountry")),
        city=city,
        total_budget=_positive_number(budget_fw.get("totalProjectBudget")),
        style_tags=_normalize_tags(derive_style_keywords(design), "style_tags", InvalidProjectError),
        required_features=_normalize_tags(
            required_features_from_selections(selections), "required_features", InvalidProjectError
        ),
        target_area=target_area,
        room_count=int(bedrooms) if bedrooms else None,
    )
    logger.debug("Built project profile: region=%s budget=%s styles=%d features=%d",
                 profile.region, profile.total_budget, len(profile.style_tags), len(profile.required_features))
    return profile
