import logging
import math
import re
from collections.abc import Mapping
from typing import Any, Optional

logger = logging.getLogger(__name__)

_SLUG_STRIP = re.compile(r"[^a-z0-9]+")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (Python's round() is banker's rounding).

    Args:
        value: Number to round

    Returns:
        Nearest integer, halves rounded toward +infinity
    """
    return int(math.floor(float(value) + 0.5))


def to_number(value: Any) -> Optional[float]:
    """Coerce intake values ("12000", 12000, None, "") to a finite float or None."""
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric value: {value!r}")
        return None
    return number if math.isfinite(number) else None


_TRUE_STRINGS = {"true", "yes", "y", "1", "on"}
_FALSE_STRINGS = {"false", "no", "n", "0", "off"}


def to_bool(value: Any, default: bool = False) -> bool:
    """Coerce intake flags (True, "false", "Yes", 0, None) to a bool; unreadable values give the default."""
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        logger.warning(f"Ignoring unreadable flag value: {value!r}")
        return default
    if isinstance(value, (int, float)):
        return value != 0
    return bool(value)


class ProjectSlugger:
    """
    Pure logic for deriving stable project slugs used as storage keys.
    """

    @staticmethod
    def slugify(name: str) -> str:
        """
        Lowercase, collapse non-alphanumerics to single hyphens, trim hyphens.
        """
        slug = _SLUG_STRIP.sub("-", str(name).lower().strip()).strip("-")
        return slug or "project"

    @staticmethod
    def is_valid(slug: str) -> bool:
        return bool(slug) and ProjectSlugger.slugify(slug) == slug


def get_section(data: Any, *path: str) -> Mapping:
    """Walk nested intake mappings, returning {} for anything missing or malformed."""
    current = data if isinstance(data, Mapping) else {}
    for key in path:
        value = current.get(key)
        current = value if isinstance(value, Mapping) else {}
    return current


def intake_principal(kyc_data: Any) -> Mapping:
    """KYC documents nest answers under 'principal'; older ones are flat."""
    principal = get_section(kyc_data, "principal")
    return principal if principal else get_section(kyc_data)
