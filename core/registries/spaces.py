#!/usr/bin/env python3
"""
Space Registry - Master definition of programmable spaces.

Each space carries a base area per program tier ("10k", "15k", "20k").
A base area of None means the space is not offered at that tier.

Everything here is read-only: spaces are frozen dataclasses, base areas are
MappingProxyType views, and lookups go through MappingProxyType indexes.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

PROGRAM_TIERS: Tuple[str, ...] = ("10k", "15k", "20k")

# Availability classes: which program tiers list a space by default
AVAILABILITY_CORE = "core"
AVAILABILITY_15K_PLUS = "15k+"
AVAILABILITY_20K_PLUS = "20k+"

STRUCTURE_MAIN = "main"
STRUCTURE_GUEST_HOUSE = "guest_house"
STRUCTURE_POOL_HOUSE = "pool_house"

BASEMENT_LEVEL = 0


@dataclass(frozen=True)
class SpaceTemplate:
    code: str
    name: str
    zone: str
    default_level: int
    base_area: Mapping[str, Optional[int]]
    availability: str = AVAILABILITY_CORE
    basement_eligible: bool = False
    outdoor: bool = False
    structure: str = STRUCTURE_MAIN
    feature: Optional[str] = None
    notes: str = ""

    def base_area_for(self, tier: str) -> Optional[int]:
        return self.base_area.get(tier)

    def offered_at(self, tier: str) -> bool:
        return self.base_area.get(tier) is not None


def _space(code: str, name: str, zone: str, level: int, sizes: Tuple[Optional[int], Optional[int], Optional[int]],
           availability: str = AVAILABILITY_CORE, **kwargs) -> SpaceTemplate:
    base = MappingProxyType(dict(zip(PROGRAM_TIERS, sizes)))
    return SpaceTemplate(code=code, name=name, zone=zone, default_level=level,
                         base_area=base, availability=availability, **kwargs)


SPACES: Tuple[SpaceTemplate, ...] = (
    # Zone 1: Arrival + Public
    _space("FOY", "Foyer / Gallery", "Z1_APB", 1, (350, 420, 500), notes="Includes coat closet allowance"),
    _space("PWD", "Powder Room", "Z1_APB", 1, (60, 80, 100)),
    _space("OFF", "Private Office", "Z1_APB", 1, (200, 280, 350), notes="Home office / study"),
    _space("GR", "Great Room", "Z1_APB", 1, (500, 600, 750), notes="Formal living / showcase room"),
    _space("DR", "Formal Dining", "Z1_APB", 1, (300, 400, 500), notes="Seats 10-14"),
    _space("WINE", "Wine Room", "Z1_APB", 1, (100, 150, 200), basement_eligible=True, feature="wine room",
           notes="Climate controlled; can move to basement"),
    _space("SAL", "Salon", "Z1_APB", 1, (None, 350, 450), AVAILABILITY_15K_PLUS,
           notes="Secondary formal sitting room"),
    _space("LIB", "Library", "Z1_APB", 1, (200, 280, 350), feature="library", notes="Can double as quiet office"),

    # Zone 2: Family + Kitchen
    _space("FR", "Family Room", "Z2_FAM", 1, (500, 650, 800), notes="Daily living hub"),
    _space("KIT", "Kitchen (Show)", "Z2_FAM", 1, (350, 450, 550), notes="Island-centric, open to family"),
    _space("BKF", "Breakfast Nook", "Z2_FAM", 1, (120, 180, 220), notes="Casual daily meals"),
    _space("SCUL", "Scullery / Pantry", "Z2_FAM", 1, (180, 250, 320), notes="Prep, cleanup, storage"),
    _space("CHEF", "Chef's Kitchen", "Z2_FAM", 1, (150, 200, 280), feature="chef's kitchen",
           notes="Service kitchen for formal dining"),
    _space("MEDIA", "Media Room", "Z2_FAM", 1, (250, 350, 450), basement_eligible=True,
           notes="Casual TV / movies; can move to basement"),
    _space("NKF", "Nook / Flex", "Z2_FAM", 1, (None, 150, 200), AVAILABILITY_15K_PLUS,
           notes="Homework, reading area"),

    # Zone 3: Entertainment
    _space("BAR", "Bar", "Z3_ENT", 1, (None, 150, 200), AVAILABILITY_15K_PLUS, basement_eligible=True,
           feature="bar", notes="Built-in bar"),
    _space("GAME", "Game Room", "Z3_ENT", 1, (None, 400, 550), AVAILABILITY_15K_PLUS, basement_eligible=True,
           notes="Cards, games, lounge"),
    _space("THR", "Theater", "Z3_ENT", 1, (None, 400, 550), AVAILABILITY_15K_PLUS, basement_eligible=True,
           feature="theater", notes="Dedicated cinema; basement ideal for sound"),
    _space("BIL", "Billiards", "Z3_ENT", 1, (None, 280, 350), AVAILABILITY_15K_PLUS, basement_eligible=True,
           notes="Pool table room"),
    _space("MUS", "Music Room", "Z3_ENT", 1, (None, 250, 300), AVAILABILITY_15K_PLUS, basement_eligible=True,
           feature="music room", notes="Piano, instruments"),
    _space("ART", "Art Studio", "Z3_ENT", 1, (None, None, 300), AVAILABILITY_20K_PLUS,
           feature="art studio", notes="Creative workspace; needs natural light"),

    # Zone 4: Wellness
    _space("GYM", "Fitness / Gym", "Z4_WEL", 1, (250, 350, 450), basement_eligible=True, feature="gym",
           notes="Daylight preferred"),
    _space("SPA", "Spa Suite", "Z4_WEL", 1, (180, 250, 350), basement_eligible=True, feature="spa",
           notes="Sauna, steam, shower"),
    _space("MAS", "Massage Room", "Z4_WEL", 1, (None, 150, 180), AVAILABILITY_15K_PLUS, basement_eligible=True,
           notes="Treatment room"),
    _space("PLH", "Pool House", "Z4_WEL", 1, (None, None, 400), AVAILABILITY_20K_PLUS,
           structure=STRUCTURE_POOL_HOUSE, feature="pool house", notes="Separate structure"),
    _space("POOLSUP", "Pool Support", "Z4_WEL", 1, (100, 150, 200), notes="Equipment, changing, bath"),

    # Zone 5: Primary Suite
    _space("PRI", "Primary Bedroom", "Z5_PRI", 2, (350, 500, 650)),
    _space("PRIBATH", "Primary Bath", "Z5_PRI", 2, (250, 350, 450), notes="Double vanity, wet room"),
    _space("PRICL", "Primary Closets", "Z5_PRI", 2, (200, 300, 400), notes="His/hers dressing"),
    _space("PRILNG", "Primary Lounge", "Z5_PRI", 2, (None, 200, 280), AVAILABILITY_15K_PLUS, notes="Sitting room"),
    _space("POF", "Primary Office", "Z5_PRI", 2, (None, None, 200), AVAILABILITY_20K_PLUS,
           notes="Private study within suite"),

    # Zone 6: Guest + Secondary
    _space("GST1", "Guest Suite 1", "Z6_GST", 1, (400, 450, 500), notes="Ground floor for accessibility"),
    _space("GST2", "Guest Suite 2", "Z6_GST", 2, (400, 450, 500)),
    _space("GST3", "Guest Suite 3", "Z6_GST", 2, (None, 450, 500), AVAILABILITY_15K_PLUS),
    _space("GST4", "Guest Suite 4", "Z6_GST", 2, (None, None, 500), AVAILABILITY_20K_PLUS),
    _space("VIP", "VIP Suite", "Z6_GST", 2, (None, 600, 700), AVAILABILITY_15K_PLUS, notes="Enhanced guest suite"),
    _space("KID1", "Kids Bedroom 1", "Z6_GST", 2, (350, 400, 450), notes="Children's room"),
    _space("KID2", "Kids Bedroom 2", "Z6_GST", 2, (350, 400, 450), notes="Children's room"),
    _space("BNK", "Bunk Room", "Z6_GST", 2, (None, 350, 400), AVAILABILITY_15K_PLUS),
    _space("PLY", "Playroom", "Z6_GST", 2, (None, 300, 400), AVAILABILITY_15K_PLUS, basement_eligible=True),
    _space("HWK", "Homework Loft", "Z6_GST", 2, (None, None, 200), AVAILABILITY_20K_PLUS),
    _space("NNY", "Nanny Suite", "Z6_GST", 2, (None, 350, 400), AVAILABILITY_15K_PLUS),
    _space("STF", "Staff Suite", "Z6_GST", 1, (None, 350, 400), AVAILABILITY_15K_PLUS, basement_eligible=True,
           feature="staff quarters"),

    # Zone 7: Service + BOH
    _space("MUD", "Mudroom", "Z7_SVC", 1, (150, 200, 280)),
    _space("LND", "Laundry", "Z7_SVC", 1, (140, 180, 250)),
    _space("LN2", "Laundry 2", "Z7_SVC", 2, (None, 80, 120), AVAILABILITY_15K_PLUS),
    _space("MEP", "Mechanical / IT", "Z7_SVC", 1, (300, 400, 550), basement_eligible=True),
    _space("STR", "Storage", "Z7_SVC", 1, (200, 300, 400), basement_eligible=True),
    _space("GAR", "Garage", "Z7_SVC", 1, (600, 900, 1200), basement_eligible=True),
    _space("WRK", "Workshop", "Z7_SVC", 1, (None, 150, 250), AVAILABILITY_15K_PLUS, basement_eligible=True),
    _space("SKT", "Staff Kitchen", "Z7_SVC", 1, (None, None, 180), AVAILABILITY_20K_PLUS),
    _space("SLG", "Staff Lounge", "Z7_SVC", 1, (None, None, 200), AVAILABILITY_20K_PLUS),
    _space("COR", "Stair / Elevator Core", "Z7_SVC", 1, (300, 400, 500), feature="elevator"),

    # Zone 8: Outdoor (not conditioned)
    _space("TERR", "Main Terrace", "Z8_OUT", 1, (800, 1200, 1800), outdoor=True),
    _space("POOL", "Pool + Deck", "Z8_OUT", 1, (1500, 2000, 2800), outdoor=True, feature="pool"),
    _space("OKT", "Outdoor Kitchen", "Z8_OUT", 1, (150, 250, 350), outdoor=True, feature="outdoor kitchen"),
    _space("FPT", "Fire Pit Area", "Z8_OUT", 1, (200, 300, 400), outdoor=True,
           notes="Gathering area; not in conditioned total"),
    _space("ODN", "Outdoor Dining", "Z8_OUT", 1, (250, 350, 500), outdoor=True,
           notes="Al fresco dining; not in conditioned total"),
    _space("CTY", "Courtyard", "Z8_OUT", 1, (None, 400, 600), AVAILABILITY_15K_PLUS, outdoor=True,
           feature="courtyard", notes="Interior court; not in conditioned total"),
    _space("DRV", "Motor Court", "Z8_OUT", 1, (1000, 1500, 2000), outdoor=True,
           notes="Arrival drive; not in conditioned total"),
)

SPACES_BY_CODE: Mapping[str, SpaceTemplate] = MappingProxyType({s.code: s for s in SPACES})

# Intake chip values (space requirements section) -> space codes
LEGACY_TO_CODE: Mapping[str, str] = MappingProxyType({
    'primary-suite': 'PRI',
    'secondary-suites': 'GST1',
    'kids-bedrooms': 'KID1',
    'great-room': 'GR',
    'formal-living': 'GR',
    'family-room': 'FR',
    'formal-dining': 'DR',
    'casual-dining': 'BKF',
    'chef-kitchen': 'KIT',
    'catering-kitchen': 'CHEF',
    'home-office': 'OFF',
    'library': 'LIB',
    'media-room': 'MEDIA',
    'game-room': 'GAME',
    'wine-cellar': 'WINE',
    'gym': 'GYM',
    'spa-wellness': 'SPA',
    'pool-indoor': 'POOLSUP',
    'sauna': 'SPA',
    'steam-room': 'SPA',
    'staff-quarters': 'STF',
    'mudroom': 'MUD',
    'laundry': 'LND',
    'art-gallery': 'FOY',
    'music-room': 'MUS',
    'safe-room': 'STR',
})


@dataclass(frozen=True)
class CirculationBand:
    minimum: float
    maximum: float
    default: float


CIRCULATION_DEFAULTS: Mapping[str, CirculationBand] = MappingProxyType({
    '10k': CirculationBand(0.12, 0.15, 0.13),
    '15k': CirculationBand(0.13, 0.16, 0.14),
    '20k': CirculationBand(0.14, 0.18, 0.15),
})


def get_space_by_code(code: str) -> Optional[SpaceTemplate]:
    return SPACES_BY_CODE.get(code)


def get_spaces_by_zone(zone_code: str) -> Tuple[SpaceTemplate, ...]:
    return tuple(s for s in SPACES if s.zone == zone_code)


def get_spaces_for_tier(tier: str) -> Tuple[SpaceTemplate, ...]:
    """Spaces listed for a program tier by their availability class."""
    def _available(space: SpaceTemplate) -> bool:
        if space.availability == AVAILABILITY_CORE:
            return True
        if space.availability == AVAILABILITY_15K_PLUS:
            return tier in ("15k", "20k")
        if space.availability == AVAILABILITY_20K_PLUS:
            return tier == "20k"
        return False

    return tuple(s for s in SPACES if _available(s))


def get_conditioned_spaces() -> Tuple[SpaceTemplate, ...]:
    return tuple(s for s in SPACES if not s.outdoor)


def get_outdoor_spaces() -> Tuple[SpaceTemplate, ...]:
    return tuple(s for s in SPACES if s.outdoor)


def get_basement_eligible_spaces() -> Tuple[SpaceTemplate, ...]:
    return tuple(s for s in SPACES if s.basement_eligible)


def legacy_to_code(legacy_value: str) -> Optional[str]:
    return LEGACY_TO_CODE.get(legacy_value)


def feature_tags_for(codes) -> Dict[str, str]:
    """Map space codes to their portfolio feature tag, skipping spaces without one."""
    tags = {}
    for code in codes:
        space = SPACES_BY_CODE.get(code)
        if space is not None and space.feature:
            tags[code] = space.feature
    return tags
