"""Display formatting shared by report builders."""

from typing import Any

from core.utils import round_half_up, to_number

MISSING = "—"


def format_budget(amount: Any) -> str:
    """$10.0M / $850K / $900; a dash when missing."""
    value = to_number(amount)
    if value is None:
        return MISSING
    if value >= 1_000_000:
        return f"${value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"${round_half_up(value / 1_000)}K"
    return f"${round_half_up(value)}"


def format_area(area: Any, unit: str = "SF") -> str:
    value = to_number(area)
    if value is None:
        return MISSING
    return f"{round_half_up(value):,} {unit}"


def format_percent(fraction: Any, digits: int = 1) -> str:
    value = to_number(fraction)
    if value is None:
        return MISSING
    return f"{value * 100:.{digits}f}%"
