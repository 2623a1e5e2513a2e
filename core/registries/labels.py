#!/usr/bin/env python3
"""
Label Dictionaries - one typed key -> display label table per concern.

Report builders and API responses go through label_for() instead of keeping
their own string tables. Unknown keys fall back to the raw key with its
first letter capitalized.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class LabelConcern(str, Enum):
    DISCIPLINE = "discipline"
    DIMENSION = "dimension"
    MATCH_TIER = "match_tier"
    SIZE_CLASS = "size_class"
    BUDGET_TIER = "budget_tier"
    STRUCTURE = "structure"
    VERIFICATION = "verification"
    CIRCULATION_MODE = "circulation_mode"


LABELS: Mapping[LabelConcern, Mapping[str, str]] = MappingProxyType({
    LabelConcern.DISCIPLINE: MappingProxyType({
        "architect": "Architect",
        "interior_designer": "Interior Designer",
        "pm": "Project Manager",
        "gc": "General Contractor",
    }),
    LabelConcern.DIMENSION: MappingProxyType({
        "geography": "Geographic Relevance",
        "budget": "Budget Alignment",
        "style": "Style Compatibility",
        "experience": "Experience Tier",
        "quality": "Quality Signal",
        "features": "Feature Specialization",
    }),
    LabelConcern.MATCH_TIER: MappingProxyType({
        "top_match": "Top Match",
        "good_fit": "Good Fit",
        "consider": "Consider",
        "below_threshold": "Below Threshold",
    }),
    LabelConcern.SIZE_CLASS: MappingProxyType({
        "S": "Small",
        "M": "Medium",
        "L": "Large",
    }),
    LabelConcern.BUDGET_TIER: MappingProxyType({
        "ultra_luxury": "Ultra Luxury",
        "luxury": "Luxury",
        "high_end": "High End",
        "mid_range": "Mid Range",
    }),
    LabelConcern.STRUCTURE: MappingProxyType({
        "main": "Main Residence",
        "guest_house": "Guest House",
        "pool_house": "Pool House",
    }),
    LabelConcern.VERIFICATION: MappingProxyType({
        "pending": "Pending Review",
        "verified": "Verified",
        "partner": "Partner",
    }),
    LabelConcern.CIRCULATION_MODE: MappingProxyType({
        "fixed_percentage": "Fixed Percentage",
        "balance_to_target": "Balance to Target",
    }),
})


def _fallback(key: str) -> str:
    return key[:1].upper() + key[1:]


def label_for(concern: LabelConcern, key: Any) -> str:
    """Display label for a key within a concern, e.g. ("discipline", "pm") -> "Project Manager"."""
    if key is None:
        return ""
    if isinstance(key, Enum):
        key = key.value
    key = str(key)
    table = LABELS.get(LabelConcern(concern), {})
    return table.get(key, _fallback(key))
