#!/usr/bin/env python3
"""
Match Report - ranked consultant shortlist with per-dimension breakdowns.
"""

from typing import Any, Dict, Optional

from core.config_loader import ScoringConfig
from core.registries.labels import LabelConcern, label_for
from core.reports.formatting import format_budget
from core.scorer.models import MatchResult, ProjectProfile, RankingResult
from core.scorer.profile import derive_budget_tier


def match_result_to_dict(result: MatchResult, config: Optional[ScoringConfig] = None) -> Dict[str, Any]:
    config = config or ScoringConfig()
    client = config.client_fit.model_dump()
    project = config.project_fit.model_dump()
    return {
        "candidate_id": result.candidate_id,
        "candidate_name": result.candidate_name,
        "discipline": result.discipline.value if result.discipline else None,
        "discipline_label": label_for(LabelConcern.DISCIPLINE, result.discipline) if result.discipline else "",
        "client_fit": round(result.composites.client_fit, 2),
        "project_fit": round(result.composites.project_fit, 2),
        "combined_score": result.composites.combined_display,
        "tier": result.tier.value,
        "tier_label": label_for(LabelConcern.MATCH_TIER, result.tier),
        "breakdown": [
            {
                "dimension": s.dimension.value,
                "label": label_for(LabelConcern.DIMENSION, s.dimension),
                "raw": round(s.raw, 2),
                "max": s.max_points,
                "normalized": round(s.normalized, 1),
                "client_weight": client.get(s.dimension.value, 1.0),
                "project_weight": project.get(s.dimension.value, 1.0),
            }
            for s in result.dimensions
        ],
    }


def build_match_report(
    profile: ProjectProfile,
    ranking: RankingResult,
    config: Optional[ScoringConfig] = None,
    project_name: Optional[str] = None,
) -> Dict[str, Any]:
    budget_tier = derive_budget_tier(profile.total_budget)
    return {
        "project": {
            "name": project_name,
            "city": profile.city,
            "region": profile.region,
            "budget": profile.total_budget,
            "budget_display": format_budget(profile.total_budget),
            "budget_tier": budget_tier,
            "budget_tier_label": label_for(LabelConcern.BUDGET_TIER, budget_tier) if budget_tier else "",
            "style_tags": sorted(profile.style_tags),
            "required_features": sorted(profile.required_features),
        },
        "matches": [
            dict(match_result_to_dict(r, config), rank=i)
            for i, r in enumerate(ranking.matches, start=1)
        ],
        "summary": {
            "considered": ranking.total_considered,
            "returned": len(ranking.matches),
            "below_threshold": ranking.below_threshold_count,
            "excluded": len(ranking.excluded),
        },
    }
