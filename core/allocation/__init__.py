#!/usr/bin/env python3
"""
Allocation Module - space-program area calculation.

- models.py: SpaceSelection, ProgramSettings, ProgramTotals
- calculator.py: per-space area, circulation, aggregate totals, variance check
- seeding.py: tier selection and intake-driven starting selections
"""

from core.allocation.models import (
    SizeClass, CirculationMode, SpaceSelection, ProgramSettings, ProgramTotals, StructureTotals,
)
from core.allocation.calculator import (
    calculate_space_area, calculate_circulation, calculate_program_totals, check_variance,
)
from core.allocation.seeding import (
    SeededProgram, select_program_tier, initialize_selections, apply_intake_defaults,
)

__all__ = [
    'SizeClass', 'CirculationMode', 'SpaceSelection', 'ProgramSettings', 'ProgramTotals', 'StructureTotals',
    'calculate_space_area', 'calculate_circulation', 'calculate_program_totals', 'check_variance',
    'SeededProgram', 'select_program_tier', 'initialize_selections', 'apply_intake_defaults',
]
