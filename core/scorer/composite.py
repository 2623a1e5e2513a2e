from __future__ import annotations

from typing import Any, Dict, Sequence, Tuple
import numpy as np

from core.config_loader import CompositeMultipliers, ScoringConfig
from core.scorer.models import CompositeScores, DimensionScore
from core.utils import round_half_up


def _multiplier_vector(multipliers: CompositeMultipliers, scores: Sequence[DimensionScore]) -> np.ndarray:
    m = multipliers.model_dump()
    return np.array([max(0.0, float(m.get(s.dimension.value, 1.0))) for s in scores], dtype=np.float64)


def calculate_composite(
    scores: Sequence[DimensionScore],
    multipliers: CompositeMultipliers,
) -> Tuple[float, Dict[str, Any]]:
    """100 * sum(w * raw) / sum(w * max), re-normalized to 0-100 whatever the weighting."""
    if not scores:
        return 0.0, {"error": "No dimension scores provided", "score": 0.0}

    w = _multiplier_vector(multipliers, scores)
    raw = np.array([s.raw for s in scores], dtype=np.float64)
    mx = np.array([s.max_points for s in scores], dtype=np.float64)
    raw = np.clip(raw, 0.0, mx)

    denominator = float(w @ mx)
    if denominator <= 0:
        return 0.0, {"error": "Weighted maximum is zero", "score": 0.0}

    numerator = float(w @ raw)
    score = float(np.clip(100.0 * numerator / denominator, 0.0, 100.0))

    components = {
        "weighted_raw": numerator,
        "weighted_max": denominator,
        "weights": {s.dimension.value: float(wt) for s, wt in zip(scores, w.tolist())},
        "score": score,
    }
    return score, components


def calculate_composites(scores: Sequence[DimensionScore], config: ScoringConfig) -> CompositeScores:
    client_fit, _ = calculate_composite(scores, config.client_fit)
    project_fit, _ = calculate_composite(scores, config.project_fit)
    combined = (client_fit + project_fit) / 2.0
    return CompositeScores(
        client_fit=client_fit,
        project_fit=project_fit,
        combined=combined,
        combined_display=round_half_up(combined),
    )
