#!/usr/bin/env python3
"""
Consultant Reference Data - disciplines, budget tiers, geography and taste tables.

Used by the scoring engine (geography adjacency, style derivation) and the
intake adapters that turn client questionnaires into project profiles.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


class Discipline(str, Enum):
    ARCHITECT = "architect"
    INTERIOR_DESIGNER = "interior_designer"
    PROJECT_MANAGER = "pm"
    GENERAL_CONTRACTOR = "gc"

    @classmethod
    def parse(cls, value) -> Optional["Discipline"]:
        if value is None:
            return None
        if isinstance(value, Discipline):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


# (key, minimum total budget) ordered from highest to lowest
BUDGET_TIERS: Tuple[Tuple[str, float], ...] = (
    ("ultra_luxury", 10_000_000),
    ("luxury", 5_000_000),
    ("high_end", 2_000_000),
    ("mid_range", 1_000_000),
)

# Macro-regions used as a proximity proxy when states do not match exactly
STATE_REGIONS: Mapping[str, frozenset] = MappingProxyType({
    "northeast": frozenset({"CT", "ME", "MA", "NH", "RI", "VT", "NJ", "NY", "PA"}),
    "midatlantic": frozenset({"DE", "MD", "DC", "VA", "WV"}),
    "southeast": frozenset({"AL", "FL", "GA", "KY", "MS", "NC", "SC", "TN"}),
    "midwest": frozenset({"IL", "IN", "IA", "MI", "MN", "MO", "OH", "WI"}),
    "southwest": frozenset({"AZ", "NM", "OK", "TX"}),
    "west": frozenset({"CA", "CO", "NV", "OR", "UT", "WA"}),
    "mountain": frozenset({"ID", "MT", "WY"}),
})

NATIONWIDE_MARKERS = frozenset({"NATIONAL", "NATIONWIDE"})

FULL_STATE_NAMES: Mapping[str, str] = MappingProxyType({
    "CONNECTICUT": "CT", "NEW YORK": "NY", "CALIFORNIA": "CA", "FLORIDA": "FL",
    "MASSACHUSETTS": "MA", "COLORADO": "CO", "TEXAS": "TX", "WYOMING": "WY",
    "IDAHO": "ID", "UTAH": "UT", "MONTANA": "MT", "NEW JERSEY": "NJ",
    "PENNSYLVANIA": "PA", "VIRGINIA": "VA", "MARYLAND": "MD", "ARIZONA": "AZ",
    "GEORGIA": "GA", "NORTH CAROLINA": "NC", "SOUTH CAROLINA": "SC",
    "TENNESSEE": "TN", "ILLINOIS": "IL", "WASHINGTON": "WA", "OREGON": "OR",
    "NEVADA": "NV", "HAWAII": "HI", "OHIO": "OH", "MICHIGAN": "MI", "MINNESOTA": "MN",
})

# Luxury residential markets that are usually entered without a state suffix
KNOWN_MARKET_CITIES: Mapping[str, str] = MappingProxyType({
    "greenwich": "CT", "westport": "CT", "new canaan": "CT", "darien": "CT",
    "westchester": "NY", "bedford": "NY", "scarsdale": "NY", "rye": "NY",
    "hamptons": "NY", "east hampton": "NY", "southampton": "NY", "sag harbor": "NY",
    "manhattan": "NY", "new york": "NY", "brooklyn": "NY", "tribeca": "NY",
    "palm beach": "FL", "miami beach": "FL", "fisher island": "FL", "naples": "FL",
    "beverly hills": "CA", "bel air": "CA", "malibu": "CA", "pacific palisades": "CA",
    "aspen": "CO", "vail": "CO", "telluride": "CO",
    "nantucket": "MA", "martha's vineyard": "MA", "boston": "MA", "wellesley": "MA",
    "jackson hole": "WY", "sun valley": "ID", "park city": "UT",
    "atherton": "CA", "woodside": "CA", "palo alto": "CA", "hillsborough": "CA",
    "montecito": "CA", "santa barbara": "CA",
    "scottsdale": "AZ", "paradise valley": "AZ",
    "lake tahoe": "CA", "big sky": "MT",
})

# Taste axis (1-10 slider) -> specialty tags for the low / mid / high band
TASTE_STYLE_MAP: Mapping[str, Mapping[str, Tuple[str, ...]]] = MappingProxyType({
    "axisContemporaryTraditional": MappingProxyType({
        "low": ("Contemporary", "Modern", "Minimalist"),
        "mid": ("Transitional",),
        "high": ("Traditional", "Colonial", "Georgian", "Victorian"),
    }),
    "axisMinimalLayered": MappingProxyType({
        "low": ("Minimalist", "Scandinavian", "Japanese"),
        "mid": ("Transitional", "Coastal"),
        "high": ("Maximalist", "Eclectic", "Bohemian", "Art Deco"),
    }),
    "axisWarmCool": MappingProxyType({
        "low": ("Industrial", "Contemporary", "Scandinavian"),
        "mid": ("Transitional", "Modern"),
        "high": ("Mediterranean", "Tuscan", "Rustic", "Craftsman"),
    }),
    "axisOrganicGeometric": MappingProxyType({
        "low": ("Organic", "Rustic", "Natural", "Wabi-Sabi"),
        "mid": ("Transitional",),
        "high": ("Art Deco", "Geometric", "Modern", "Bauhaus"),
    }),
    "axisRefinedEclectic": MappingProxyType({
        "low": ("Classic", "Traditional", "French Provincial"),
        "mid": ("Transitional",),
        "high": ("Eclectic", "Bohemian", "Global", "Maximalist"),
    }),
    "axisArchMinimalOrnate": MappingProxyType({
        "low": ("Modern", "Minimalist", "Contemporary"),
        "mid": ("Transitional",),
        "high": ("Art Deco", "Craftsman", "Victorian", "Neoclassical"),
    }),
    "axisArchRegionalInternational": MappingProxyType({
        "low": ("Coastal", "Mountain", "Ranch", "Desert", "Prairie"),
        "mid": ("Transitional", "Farmhouse"),
        "high": ("International", "Contemporary", "Modern", "Bauhaus"),
    }),
})

TASTE_LOW_MAX = 3
TASTE_HIGH_MIN = 7


def region_of(state: str) -> Optional[str]:
    """Return the macro-region key containing a state code, if any."""
    if not state:
        return None
    state = state.upper().strip()
    for name, states in STATE_REGIONS.items():
        if state in states:
            return name
    return None
