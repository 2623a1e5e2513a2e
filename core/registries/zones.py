#!/usr/bin/env python3
"""
Zone Registry - Program zones used to group spaces for breakdown reporting.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class Zone:
    code: str
    name: str
    order: int
    description: str = ""


ZONES: Tuple[Zone, ...] = (
    Zone("Z1_APB", "Arrival + Public", 10,
         "Entry, formal entertaining, office, and public-facing spaces"),
    Zone("Z2_FAM", "Family + Kitchen", 20,
         "Daily living hub, kitchen, breakfast, and casual family spaces"),
    Zone("Z3_ENT", "Entertainment", 30,
         "Game room, theater, bar, billiards, and recreational spaces"),
    Zone("Z4_WEL", "Wellness", 40,
         "Gym, spa, pool support, and health-focused spaces"),
    Zone("Z5_PRI", "Primary Suite", 50,
         "Primary bedroom, bath, closets, and private retreat"),
    Zone("Z6_GST", "Guest + Secondary", 60,
         "Guest suites, kids rooms, staff quarters, and secondary bedrooms"),
    Zone("Z7_SVC", "Service + BOH", 70,
         "Laundry, mudroom, mechanical, storage, and back-of-house"),
    Zone("Z8_OUT", "Outdoor Spaces", 80,
         "Terrace, pool, outdoor kitchen, and exterior living (not conditioned)"),
)

ZONES_BY_CODE: Mapping[str, Zone] = MappingProxyType({z.code: z for z in ZONES})


def get_zone_by_code(code: str) -> Optional[Zone]:
    return ZONES_BY_CODE.get(code)


def get_zones_in_order() -> Tuple[Zone, ...]:
    return tuple(sorted(ZONES, key=lambda z: z.order))
