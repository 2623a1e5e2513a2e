#!/usr/bin/env python3
"""
Dimension Scores - the six raw consultant scoring axes.

Each scorer returns (raw_points, components) where raw_points is always
clamped to [0, max] for its dimension. Missing optional inputs degrade to a
documented baseline instead of raising:

- Geography: no project region -> 0
- Budget: no project budget -> 0; missing candidate min -> 0, missing max -> unbounded
- Style / Features: no project tags -> 0
- Experience: missing or negative years -> lowest step
- Quality: no rating -> neutral baseline
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional, Tuple

from core.config_loader import ScoringConfig
from core.registries.consultants import NATIONWIDE_MARKERS, region_of
from core.scorer.models import Candidate, Dimension, DimensionScore, ProjectProfile, DIMENSION_ORDER

logger = logging.getLogger(__name__)

# (minimum years, points) checked top-down
EXPERIENCE_STEPS: Tuple[Tuple[float, float], ...] = (
    (20.0, 15.0),
    (12.0, 12.0),
    (8.0, 9.0),
    (5.0, 6.0),
)
EXPERIENCE_FLOOR_POINTS = 3.0

PARTNER_STATUS = "partner"


# ----------------------------
# Helpers
# ----------------------------
def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def _warn_correct(name: str, old: Any, new: Any) -> None:
    if old != new:
        logger.warning("Corrected %s from %r to %r", name, old, new)


def _nonneg(name: str, x: float) -> float:
    y = max(0.0, float(x))
    _warn_correct(name, x, y)
    return y


def _finite(x: Optional[float]) -> Optional[float]:
    if x is None:
        return None
    try:
        x = float(x)
    except (TypeError, ValueError):
        return None
    return x if math.isfinite(x) else None


def _proportional(max_points: float, have: frozenset, wanted: frozenset) -> Tuple[float, Dict[str, Any]]:
    if not wanted:
        return 0.0, {"matched": [], "requested": 0, "reason": "no project tags"}
    matched = sorted(have & wanted)
    raw = max_points * len(matched) / len(wanted)
    return _clamp(raw, 0.0, max_points), {"matched": matched, "requested": len(wanted)}


# ----------------------------
# Dimensions
# ----------------------------
def score_geography(candidate: Candidate, profile: ProjectProfile, config: ScoringConfig) -> Tuple[float, Dict[str, Any]]:
    max_points = _nonneg("maxima.geography", config.maxima.geography)
    region = (profile.region or "").strip().upper()
    if not region:
        return 0.0, {"match": "none", "reason": "no project region"}

    home = (candidate.home_region or "").strip().upper()
    areas = candidate.service_areas

    if home and home == region:
        return max_points, {"match": "home_region"}

    if region in areas:
        points = _nonneg("geography_service_area_points", config.geography_service_area_points)
        return _clamp(points, 0.0, max_points), {"match": "service_area"}

    project_macro = region_of(region)
    if project_macro is not None:
        candidate_macros = {region_of(home)} | {region_of(a) for a in areas}
        if project_macro in candidate_macros:
            points = _nonneg("geography_same_region_points", config.geography_same_region_points)
            return _clamp(points, 0.0, max_points), {"match": "same_region", "region": project_macro}

    if candidate.verification_status == PARTNER_STATUS:
        points = _nonneg("geography_partner_points", config.geography_partner_points)
        return _clamp(points, 0.0, max_points), {"match": "partner"}

    if areas & NATIONWIDE_MARKERS or len(areas) >= config.nationwide_service_area_count:
        points = _nonneg("geography_nationwide_points", config.geography_nationwide_points)
        return _clamp(points, 0.0, max_points), {"match": "nationwide"}

    return 0.0, {"match": "none"}


def score_budget(candidate: Candidate, profile: ProjectProfile, config: ScoringConfig) -> Tuple[float, Dict[str, Any]]:
    """Full points inside [min, max]; linear decay by relative distance outside it."""
    max_points = _nonneg("maxima.budget", config.maxima.budget)
    budget = _finite(profile.total_budget)
    if budget is None or budget <= 0:
        return 0.0, {"reason": "no project budget"}

    lo = _finite(candidate.budget_min)
    hi = _finite(candidate.budget_max)
    lo = 0.0 if lo is None else max(0.0, lo)
    hi = math.inf if hi is None else hi
    if hi < lo:
        logger.warning("Candidate %s has inverted budget range [%r, %r]; swapping", candidate.id, lo, hi)
        lo, hi = hi, lo

    if lo <= budget <= hi:
        return max_points, {"in_range": True, "deviation": 0.0}

    distance = lo - budget if budget < lo else budget - hi
    deviation = distance / budget
    span = _nonneg("budget_decay_span", config.budget_decay_span)
    if span <= 0:
        return 0.0, {"in_range": False, "deviation": deviation}

    raw = max_points * (1.0 - deviation / span)
    return _clamp(raw, 0.0, max_points), {"in_range": False, "deviation": deviation}


def score_style(candidate: Candidate, profile: ProjectProfile, config: ScoringConfig) -> Tuple[float, Dict[str, Any]]:
    max_points = _nonneg("maxima.style", config.maxima.style)
    return _proportional(max_points, candidate.specialties, profile.style_tags)


def score_experience(candidate: Candidate, profile: ProjectProfile, config: ScoringConfig) -> Tuple[float, Dict[str, Any]]:
    max_points = _nonneg("maxima.experience", config.maxima.experience)
    years = _finite(candidate.years_experience)
    if years is None or years < 0:
        return _clamp(EXPERIENCE_FLOOR_POINTS, 0.0, max_points), {"years": years, "reason": "no experience data"}

    for min_years, points in EXPERIENCE_STEPS:
        if years >= min_years:
            return _clamp(points, 0.0, max_points), {"years": years, "bracket": min_years}
    return _clamp(EXPERIENCE_FLOOR_POINTS, 0.0, max_points), {"years": years, "bracket": 0.0}


def score_quality(candidate: Candidate, profile: ProjectProfile, config: ScoringConfig) -> Tuple[float, Dict[str, Any]]:
    max_points = _nonneg("maxima.quality", config.maxima.quality)
    rating = _finite(candidate.rating)
    if rating is None:
        baseline = _nonneg("quality_missing_points", config.quality_missing_points)
        return _clamp(baseline, 0.0, max_points), {"rating": None, "reason": "no rating"}

    raw = rating * config.quality_points_per_star
    return _clamp(raw, 0.0, max_points), {"rating": rating}


def score_features(candidate: Candidate, profile: ProjectProfile, config: ScoringConfig) -> Tuple[float, Dict[str, Any]]:
    max_points = _nonneg("maxima.features", config.maxima.features)
    return _proportional(max_points, candidate.portfolio_features, profile.required_features)


SCORERS = {
    Dimension.GEOGRAPHY: score_geography,
    Dimension.BUDGET: score_budget,
    Dimension.STYLE: score_style,
    Dimension.EXPERIENCE: score_experience,
    Dimension.QUALITY: score_quality,
    Dimension.FEATURES: score_features,
}


def dimension_max(config: ScoringConfig, dimension: Dimension) -> float:
    return max(0.0, float(getattr(config.maxima, dimension.value)))


def score_dimensions(
    candidate: Candidate,
    profile: ProjectProfile,
    config: ScoringConfig,
) -> Tuple[DimensionScore, ...]:
    """Score all six dimensions in their fixed order."""
    scores = []
    for dimension in DIMENSION_ORDER:
        raw, components = SCORERS[dimension](candidate, profile, config)
        scores.append(DimensionScore(
            dimension=dimension,
            raw=raw,
            max_points=dimension_max(config, dimension),
            details=components,
        ))
    logger.debug(
        "Dimension scores for %s: %s",
        candidate.id, {s.dimension.value: round(s.raw, 2) for s in scores},
    )
    return tuple(scores)
