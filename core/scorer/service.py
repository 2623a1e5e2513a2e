#!/usr/bin/env python3
"""
Scoring Service - ranks consultants against a project profile.

Scores each candidate on the six dimensions, folds them into Client Fit and
Project Fit composites, assigns a Match Tier from the displayed Combined
Score, and applies the ResultPolicy (threshold + truncation).

Pure and synchronous: no database or HTTP access. Callers load records and
hand them in.
"""

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Union
import logging

from core.config_loader import ScoringConfig, ResultPolicy
from core.exceptions import InvalidCandidateError, InvalidProjectError
from core.registries.consultants import Discipline
from core.scorer.composite import calculate_composites
from core.scorer.dimensions import score_dimensions
from core.scorer.models import Candidate, MatchResult, ProjectProfile, RankingResult
from core.scorer.tiers import assign_tier

logger = logging.getLogger(__name__)

ARCHIVED_STATUS = "archived"


def _coerce_profile(profile: Any) -> ProjectProfile:
    if isinstance(profile, ProjectProfile):
        return profile
    if isinstance(profile, Mapping):
        return ProjectProfile.from_mapping(profile)
    raise InvalidProjectError(
        f"Project profile must be a ProjectProfile or mapping, got {type(profile).__name__}"
    )


def _record_id(record: Any, index: int) -> str:
    if isinstance(record, Candidate):
        return record.id
    if isinstance(record, Mapping) and record.get("id") is not None:
        return str(record.get("id"))
    return f"#{index}"


def _sort_key(result: MatchResult):
    return (-result.composites.combined, -result.composites.client_fit, result.candidate_id)


def _apply_result_policy(
    results: List[MatchResult],
    policy: ResultPolicy,
    include_below_threshold: bool,
    max_results: Optional[int],
) -> tuple:
    """Filter below-threshold results and truncate.

    Args:
        results: Scored matches, already sorted by combined score
        policy: ResultPolicy supplying the threshold
        include_below_threshold: Keep results under the threshold
        max_results: Truncation limit, None for no limit

    Returns:
        (kept results, number of results under the threshold)
    """
    below = [r for r in results if r.combined_score < policy.min_combined_score]
    kept = results if include_below_threshold else [
        r for r in results if r.combined_score >= policy.min_combined_score
    ]
    if max_results is not None and max_results >= 0:
        kept = kept[:max_results]
    return kept, len(below)


class ScoringService:
    """
    Service for consultant scoring and ranking.

    Holds only configuration; every call is independent, so one instance can
    be shared across threads.
    """

    def __init__(
        self,
        config: Optional[ScoringConfig] = None,
        policy: Optional[ResultPolicy] = None,
        skip_inactive: bool = True,
    ):
        self.config = config or ScoringConfig()
        self.policy = policy or ResultPolicy()
        self.skip_inactive = skip_inactive

    def score_candidate(
        self,
        candidate: Union[Candidate, Mapping],
        profile: Union[ProjectProfile, Mapping],
    ) -> MatchResult:
        """Score one candidate against one project.

        Raises:
            InvalidCandidateError: candidate record is malformed.
            InvalidProjectError: profile is not a ProjectProfile or mapping.
        """
        candidate = Candidate.from_record(candidate)
        profile = _coerce_profile(profile)

        dimensions = score_dimensions(candidate, profile, self.config)
        composites = calculate_composites(dimensions, self.config)
        tier = assign_tier(composites.combined_display, self.config.tiers)

        logger.debug(
            "Scored %s: client_fit=%.2f project_fit=%.2f combined=%d tier=%s",
            candidate.id, composites.client_fit, composites.project_fit,
            composites.combined_display, tier.value,
        )

        return MatchResult(
            candidate_id=candidate.id,
            candidate_name=candidate.name,
            discipline=candidate.discipline,
            dimensions=dimensions,
            composites=composites,
            tier=tier,
        )

    def _eligible(self, candidate: Candidate, record: Any) -> Optional[str]:
        if not self.skip_inactive:
            return None
        status = record.get("status") if isinstance(record, Mapping) else None
        if status == ARCHIVED_STATUS:
            return "archived"
        if not candidate.active:
            return "inactive"
        return None

    def rank_candidates(
        self,
        records: Iterable[Any],
        profile: Union[ProjectProfile, Mapping],
        discipline: Optional[Union[Discipline, str]] = None,
        include_below_threshold: Optional[bool] = None,
        max_results: Optional[int] = None,
    ) -> RankingResult:
        """Score and rank a batch of candidate records.

        Malformed records are logged and reported in ``excluded``; they never
        abort the batch. Results are sorted by combined score descending
        (ties: client fit descending, then id).
        """
        profile = _coerce_profile(profile)
        wanted = Discipline.parse(discipline) if discipline is not None else None
        if discipline is not None and wanted is None:
            logger.warning("Unknown discipline %r; no candidates will match", discipline)

        include = self.policy.include_below_threshold if include_below_threshold is None else include_below_threshold
        limit = self.policy.max_results if max_results is None else max_results

        result = RankingResult()
        scored: List[MatchResult] = []

        for index, record in enumerate(records):
            try:
                candidate = Candidate.from_record(record)
            except InvalidCandidateError as e:
                logger.warning("Skipping malformed candidate record %s: %s", _record_id(record, index), e)
                result.excluded.append({"id": _record_id(record, index), "index": index, "reason": str(e)})
                continue

            if discipline is not None and candidate.discipline != wanted:
                continue

            skip_reason = self._eligible(candidate, record)
            if skip_reason:
                result.excluded.append({"id": candidate.id, "index": index, "reason": skip_reason})
                continue

            result.total_considered += 1
            scored.append(self.score_candidate(candidate, profile))

        scored.sort(key=_sort_key)
        result.matches, result.below_threshold_count = _apply_result_policy(
            scored, self.policy, include, limit
        )

        logger.info(
            "Ranked %d candidates: %d returned, %d below threshold, %d excluded",
            result.total_considered, len(result.matches),
            result.below_threshold_count, len(result.excluded),
        )
        return result
