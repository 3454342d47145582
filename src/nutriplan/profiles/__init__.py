"""Client profiles and energy expenditure calculations."""

from __future__ import annotations

from nutriplan.profiles.energy import (
    EnergyTargets,
    MacroTargets,
    basal_expenditure,
    calculate_energy_targets,
    macro_distribution,
    target_calories,
    total_expenditure,
)
from nutriplan.profiles.models import (
    ActivityLevel,
    ClientProfile,
    Gender,
    Goal,
    InvalidProfile,
    validate_profile,
)

__all__ = [
    "ActivityLevel",
    "ClientProfile",
    "EnergyTargets",
    "Gender",
    "Goal",
    "InvalidProfile",
    "MacroTargets",
    "basal_expenditure",
    "calculate_energy_targets",
    "macro_distribution",
    "target_calories",
    "total_expenditure",
    "validate_profile",
]
