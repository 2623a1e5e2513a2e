#!/usr/bin/env python3
"""
Scoring Module - rule-based consultant scoring.

Public API:
- ScoringService: scores and ranks candidates against a project profile
- Candidate, ProjectProfile: scoring inputs
- MatchResult, RankingResult: scoring outputs

Split into focused, single-responsibility modules:

- models.py: Data structures (Candidate, ProjectProfile, DimensionScore, MatchResult)
- dimensions.py: The six dimension scorers (geography, budget, style, experience, quality, features)
- composite.py: Client Fit / Project Fit weighted composites
- tiers.py: Match Tier assignment
- profile.py: Intake documents -> ProjectProfile
- prerequisites.py: Matching readiness gates
- service.py: ScoringService orchestrator
"""

from core.scorer.models import (
    Candidate, ProjectProfile, Dimension, DimensionScore, CompositeScores,
    MatchTier, MatchResult, RankingResult,
)
from core.scorer.service import ScoringService
from core.scorer.profile import build_project_profile, extract_state, derive_style_keywords, derive_budget_tier
from core.scorer.prerequisites import check_match_prerequisites

__all__ = [
    'ScoringService', 'Candidate', 'ProjectProfile', 'Dimension', 'DimensionScore',
    'CompositeScores', 'MatchTier', 'MatchResult', 'RankingResult',
    'build_project_profile', 'extract_state', 'derive_style_keywords', 'derive_budget_tier',
    'check_match_prerequisites',
]
