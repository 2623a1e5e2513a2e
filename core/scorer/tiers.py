#!/usr/bin/env python3
"""
Match Tiers - discrete bands over the displayed Combined Score.

Bounds are inclusive-low: 80 -> Top Match, 60 -> Good Fit, 40 -> Consider.
"""

from typing import Optional

from core.config_loader import TierThresholds
from core.scorer.models import MatchTier

DEFAULT_THRESHOLDS = TierThresholds()


def assign_tier(combined_score: float, thresholds: Optional[TierThresholds] = None) -> MatchTier:
    t = thresholds or DEFAULT_THRESHOLDS
    if combined_score >= t.top_match:
        return MatchTier.TOP_MATCH
    if combined_score >= t.good_fit:
        return MatchTier.GOOD_FIT
    if combined_score >= t.consider:
        return MatchTier.CONSIDER
    return MatchTier.BELOW_THRESHOLD
