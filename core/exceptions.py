#!/usr/bin/env python3
"""
Engine exceptions shared by the scoring and allocation cores.

Only structural problems raise. Missing optional data degrades to baseline
scores, and advisory conditions (variance, below-threshold results) are
reported as values.
"""


class EngineError(Exception):
    """Base class for scoring and allocation errors."""
    pass


class InvalidCandidateError(EngineError):
    """Raised when a consultant record is not a mapping or has no identifier."""
    pass


class InvalidProjectError(EngineError):
    """Raised when a project profile is structurally invalid."""
    pass


class UnknownSpaceError(EngineError):
    """Raised when a selection references a space code missing from the registry."""

    def __init__(self, code: str):
        super().__init__(f"Unknown space code: {code!r}")
        self.code = code


class UnknownTierError(EngineError):
    """Raised when a program tier is not one of the registered tiers."""

    def __init__(self, tier: str):
        super().__init__(f"Unknown program tier: {tier!r}")
        self.tier = tier


class SpaceNotOfferedError(EngineError):
    """Raised when a space has no base area at the requested tier and no custom area was given."""

    def __init__(self, code: str, tier: str):
        super().__init__(f"Space {code!r} is not offered at tier {tier!r}; provide a custom area")
        self.code = code
        self.tier = tier


class DuplicateSpaceError(EngineError):
    """Raised when one selection set lists the same space code more than once."""

    def __init__(self, code: str):
        super().__init__(f"Space {code!r} is selected more than once")
        self.code = code
