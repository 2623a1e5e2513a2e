#!/usr/bin/env python3
"""
Scoring Models - Data structures for consultant scoring.

Candidate and ProjectProfile are the inputs; DimensionScore, CompositeScores
and MatchResult are the outputs. Inputs are frozen so a pair can be scored
concurrently or repeatedly with identical results.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

from core.exceptions import InvalidCandidateError, InvalidProjectError
from core.registries.consultants import Discipline
from core.utils import to_number


class Dimension(str, Enum):
    GEOGRAPHY = "geography"
    BUDGET = "budget"
    STYLE = "style"
    EXPERIENCE = "experience"
    QUALITY = "quality"
    FEATURES = "features"


DIMENSION_ORDER: Tuple[Dimension, ...] = tuple(Dimension)


class MatchTier(str, Enum):
    TOP_MATCH = "top_match"
    GOOD_FIT = "good_fit"
    CONSIDER = "consider"
    BELOW_THRESHOLD = "below_threshold"


SEQUENCE_TYPES = (list, tuple, set, frozenset)


def _sequence_values(values: Any, field_name: str, error_cls=InvalidCandidateError) -> List[Any]:
    """Accept a single string or a list/tuple/set; anything else is malformed."""
    if values is None or values == "":
        return []
    if isinstance(values, str):
        return [values]
    if isinstance(values, SEQUENCE_TYPES):
        return list(values)
    raise error_cls(f"{field_name} must be a list of strings, got {type(values).__name__}")


def _normalize_tags(values: Any, field_name: str, error_cls=InvalidCandidateError) -> FrozenSet[str]:
    return frozenset(
        str(v).strip().lower()
        for v in _sequence_values(values, field_name, error_cls)
        if v is not None and str(v).strip()
    )


def _normalize_regions(values: Any, field_name: str) -> FrozenSet[str]:
    return frozenset(
        str(v).strip().upper()
        for v in _sequence_values(values, field_name)
        if v is not None and str(v).strip()
    )


def _optional_float(value: Any) -> Optional[float]:
    return to_number(value)


def _portfolio_features(record: Mapping) -> Iterable[str]:
    if record.get("portfolio_features"):
        return _sequence_values(record["portfolio_features"], "portfolio_features")
    portfolio = record.get("portfolio")
    if portfolio and not isinstance(portfolio, SEQUENCE_TYPES):
        raise InvalidCandidateError(
            f"portfolio must be a list of projects, got {type(portfolio).__name__}"
        )
    features: List[str] = []
    for project in portfolio or []:
        if isinstance(project, Mapping):
            features.extend(_sequence_values(project.get("features"), "portfolio features"))
    return features


def _display_name(record: Mapping) -> str:
    name = record.get("name") or record.get("firm_name")
    if name:
        return str(name)
    parts = [record.get("first_name"), record.get("last_name")]
    return " ".join(str(p) for p in parts if p)


@dataclass(frozen=True)
class Candidate:
    """A consultant being evaluated. Tag sets are lower-cased, region codes upper-cased."""
    id: str
    name: str = ""
    discipline: Optional[Discipline] = None
    home_region: Optional[str] = None
    service_areas: FrozenSet[str] = frozenset()
    years_experience: Optional[float] = None
    rating: Optional[float] = None
    specialties: FrozenSet[str] = frozenset()
    budget_min: Optional[float] = None
    budget_max: Optional[float] = None
    portfolio_features: FrozenSet[str] = frozenset()
    active: bool = True
    verification_status: Optional[str] = None

    @classmethod
    def from_record(cls, record: Any) -> "Candidate":
        """Build a Candidate from a registry record (dict or ORM-like mapping).

        Accepts both the registry column names (hq_state, min_budget, avg_rating,
        role, firm_name, portfolio[].features) and the scoring names.

        Raises:
            InvalidCandidateError: record is not a mapping, has no identifier,
                or carries a tag, area or portfolio field that is not a list.
        """
        if isinstance(record, Candidate):
            return record
        if not isinstance(record, Mapping):
            raise InvalidCandidateError(
                f"Candidate record must be a mapping, got {type(record).__name__}"
            )
        raw_id = record.get("id")
        if raw_id is None or str(raw_id).strip() == "":
            raise InvalidCandidateError("Candidate record is missing its identifier")

        home = record.get("home_region") or record.get("hq_state")
        return cls(
            id=str(raw_id),
            name=_display_name(record),
            discipline=Discipline.parse(record.get("discipline") or record.get("role")),
            home_region=str(home).strip().upper() if home else None,
            service_areas=_normalize_regions(record.get("service_areas"), "service_areas"),
            years_experience=_optional_float(record.get("years_experience")),
            rating=_optional_float(record.get("rating", record.get("avg_rating"))),
            specialties=_normalize_tags(record.get("specialties"), "specialties"),
            budget_min=_optional_float(record.get("budget_min", record.get("min_budget"))),
            budget_max=_optional_float(record.get("budget_max", record.get("max_budget"))),
            portfolio_features=_normalize_tags(_portfolio_features(record), "portfolio_features"),
            active=record.get("active", True) is not False,
            verification_status=record.get("verification_status"),
        )


@dataclass(frozen=True)
class ProjectProfile:
    """The client's project as the scoring engine sees it. Every field is optional."""
    region: Optional[str] = None
    city: Optional[str] = None
    total_budget: Optional[float] = None
    style_tags: FrozenSet[str] = frozenset()
    required_features: FrozenSet[str] = frozenset()
    target_area: Optional[float] = None
    room_count: Optional[int] = None

    @classmethod
    def from_mapping(cls, data: Mapping) -> "ProjectProfile":
        region = data.get("region")
        room_count = to_number(data.get("room_count"))
        return cls(
            region=str(region).strip().upper() if region else None,
            city=data.get("city"),
            total_budget=_optional_float(data.get("total_budget")),
            style_tags=_normalize_tags(data.get("style_tags"), "style_tags", InvalidProjectError),
            required_features=_normalize_tags(data.get("required_features"), "required_features", InvalidProjectError),
            target_area=_optional_float(data.get("target_area")),
            room_count=int(room_count) if room_count is not None else None,
        )


@dataclass(frozen=True)
class DimensionScore:
    dimension: Dimension
    raw: float
    max_points: float
    details: Dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def normalized(self) -> float:
        """Raw score on a 0-100 scale."""
        if self.max_points <= 0:
            return 0.0
        return 100.0 * self.raw / self.max_points


@dataclass(frozen=True)
class CompositeScores:
    client_fit: float
    project_fit: float
    combined: float
    combined_display: int


@dataclass(frozen=True)
class MatchResult:
    """Complete scored result for one candidate against one project."""
    candidate_id: str
    candidate_name: str
    discipline: Optional[Discipline]
    dimensions: Tuple[DimensionScore, ...]
    composites: CompositeScores
    tier: MatchTier

    @property
    def combined_score(self) -> int:
        return self.composites.combined_display

    def dimension(self, dimension: Dimension) -> DimensionScore:
        for score in self.dimensions:
            if score.dimension == dimension:
                return score
        raise KeyError(dimension)

    def raw_scores(self) -> Dict[str, float]:
        return {s.dimension.value: s.raw for s in self.dimensions}


@dataclass
class RankingResult:
    """Output of a ranking run: ordered matches plus what was left out and why."""
    matches: List[MatchResult] = field(default_factory=list)
    excluded: List[Dict[str, Any]] = field(default_factory=list)
    below_threshold_count: int = 0
    total_considered: int = 0
