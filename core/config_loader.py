import yaml
import os
from typing import Optional, Dict, Any, Literal
from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    url: str = "sqlite:///./estate_advisory.db"
    echo: bool = False


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080


class DimensionMaxima(BaseModel):
    """Maximum raw points per scoring dimension (total 110)."""
    geography: float = 20.0
    budget: float = 25.0
    style: float = 20.0
    experience: float = 15.0
    quality: float = 20.0
    features: float = 10.0


class CompositeMultipliers(BaseModel):
    """Per-dimension multipliers for one composite. Unlisted dimensions stay at 1.0."""
    geography: float = 1.0
    budget: float = 1.0
    style: float = 1.0
    experience: float = 1.0
    quality: float = 1.0
    features: float = 1.0


def _client_fit_multipliers() -> CompositeMultipliers:
    return CompositeMultipliers(style=1.5, quality=1.2)


def _project_fit_multipliers() -> CompositeMultipliers:
    return CompositeMultipliers(budget=1.5, geography=1.2, features=1.2)


class TierThresholds(BaseModel):
    """Lower bounds (inclusive) of the displayed Combined Score per match tier."""
    top_match: int = 80
    good_fit: int = 60
    consider: int = 40


class ScoringConfig(BaseModel):
    """
    Configuration for the consultant Scoring Engine.

    Dimension maxima, composite multipliers, geography partial credits,
    the budget decay curve, and tier thresholds are all tunable here.
    """
    maxima: DimensionMaxima = Field(default_factory=DimensionMaxima)
    client_fit: CompositeMultipliers = Field(default_factory=_client_fit_multipliers)
    project_fit: CompositeMultipliers = Field(default_factory=_project_fit_multipliers)

    # Geography partial credit (points out of maxima.geography)
    geography_service_area_points: float = 16.0
    geography_same_region_points: float = 12.0
    geography_partner_points: float = 8.0
    geography_nationwide_points: float = 6.0
    nationwide_service_area_count: int = 5

    # Budget: points decay linearly to zero at this relative deviation outside the range
    budget_decay_span: float = 0.75

    # Quality: points per rating star (0-5 scale); used when rating is missing
    quality_points_per_star: float = 4.0
    quality_missing_points: float = 10.0

    tiers: TierThresholds = Field(default_factory=TierThresholds)


class ResultPolicy(BaseModel):
    """Post-scoring result filtering and truncation policy.

    Applied after ranking to filter and truncate results.
    """
    min_combined_score: float = 40.0  # 0-100, displayed combined score threshold
    max_results: int = 50  # Maximum results to return
    include_below_threshold: bool = False


class MatchingConfig(BaseModel):
    """
    Top-level matching configuration.
    """
    enabled: bool = True
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)

    # Result policy for post-scoring filtering and truncation
    result_policy: ResultPolicy = Field(default_factory=ResultPolicy)

    # Skip consultants flagged inactive or archived in the registry
    skip_inactive: bool = True


class AllocationConfig(BaseModel):
    """Defaults for the space-program Allocation Calculator."""
    size_delta: float = 0.10  # Small/Large offset as a fraction of the base area
    circulation_mode: Literal["fixed_percentage", "balance_to_target"] = "fixed_percentage"
    circulation_pct: Optional[float] = None  # None = per-tier default
    variance_warning_fraction: float = 0.20
    tier_10k_max_area: int = 12000
    tier_20k_min_area: int = 18000


class AppConfig(BaseModel):
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    allocation: AllocationConfig = Field(default_factory=AllocationConfig)


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    # Allow env var override for DB URL
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        data.setdefault('database', {})
        data['database']['url'] = env_db_url

    # Web server overrides
    env_host = os.environ.get("WEB_HOST")
    if env_host:
        data.setdefault('web', {})
        data['web']['host'] = env_host

    env_port = os.environ.get("WEB_PORT")
    if env_port:
        data.setdefault('web', {})
        data['web']['port'] = int(env_port)

    return data


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from a subdirectory), try the repo root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", os.path.basename(config_path))

    data: Dict[str, Any] = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

    data = _apply_env_overrides(data)
    return AppConfig(**data)
