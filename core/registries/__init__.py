"""Reference registries: zones, spaces, consultant reference data and labels."""
from core.registries.zones import Zone, ZONES, get_zone_by_code, get_zones_in_order
from core.registries.spaces import (
    SpaceTemplate, SPACES, PROGRAM_TIERS, CIRCULATION_DEFAULTS,
    get_space_by_code, get_spaces_for_tier, get_conditioned_spaces, get_outdoor_spaces,
)
from core.registries.consultants import Discipline, STATE_REGIONS, TASTE_STYLE_MAP, region_of
from core.registries.labels import LabelConcern, label_for

__all__ = [
    'Zone', 'ZONES', 'get_zone_by_code', 'get_zones_in_order',
    'SpaceTemplate', 'SPACES', 'PROGRAM_TIERS', 'CIRCULATION_DEFAULTS',
    'get_space_by_code', 'get_spaces_for_tier', 'get_conditioned_spaces', 'get_outdoor_spaces',
    'Discipline', 'STATE_REGIONS', 'TASTE_STYLE_MAP', 'region_of',
    'LabelConcern', 'label_for',
]
