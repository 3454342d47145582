"""Energy expenditure and macronutrient targets for a client profile.

Calculates basal expenditure (BMR), total daily energy expenditure (TDEE),
goal-adjusted calorie targets and macronutrient gram targets.

Uses the revised Mifflin-St Jeor coefficients for basal expenditure. Every
function is pure: results are recomputed from the profile on every call and
nothing is cached.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from nutriplan.profiles.models import (
    ActivityLevel,
    ClientProfile,
    Gender,
    Goal,
    validate_profile,
)

logger = logging.getLogger(__name__)


# Activity level multipliers (Harris-Benedict activity factors)
ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.INTENSE: 1.725,
    ActivityLevel.VERY_INTENSE: 1.9,
}

# Calorie adjustment from TDEE by goal
GOAL_ADJUSTMENTS = {
    Goal.MAINTENANCE: 0,
    Goal.WEIGHT_LOSS: -500,
    Goal.MUSCLE_GAIN: 300,
    Goal.HEALTH: 0,
}

# Protein grams per kg body weight
PROTEIN_PER_KG_DEFAULT = 1.8
PROTEIN_PER_KG_MUSCLE_GAIN = 2.0

# Share of target calories coming from fat
FAT_CALORIE_SHARE = 0.27

KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARB = 4
KCAL_PER_GRAM_FAT = 9


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (1.5 -> 2, -1.5 -> -1)."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class MacroTargets:
    """Daily macronutrient targets in grams."""

    protein_g: int
    carb_g: int
    fat_g: int

    @property
    def kcal(self) -> int:
        """Energy implied by the gram targets (4/4/9 kcal per gram)."""
        return (
            self.protein_g * KCAL_PER_GRAM_PROTEIN
            + self.carb_g * KCAL_PER_GRAM_CARB
            + self.fat_g * KCAL_PER_GRAM_FAT
        )

    @property
    def is_feasible(self) -> bool:
        """False when protein and fat alone exceed the calorie target."""
        return self.carb_g >= 0

    def to_dict(self) -> dict[str, int]:
        return {
            "protein_g": self.protein_g,
            "carb_g": self.carb_g,
            "fat_g": self.fat_g,
        }


@dataclass(frozen=True)
class EnergyTargets:
    """All energy figures derived from one profile."""

    basal_expenditure: float
    total_expenditure: int
    target_calories: int
    macros: MacroTargets

    def to_dict(self) -> dict:
        return {
            "basal_expenditure": round(self.basal_expenditure, 3),
            "total_expenditure": self.total_expenditure,
            "target_calories": self.target_calories,
            "macros": self.macros.to_dict(),
        }

    def summary(self) -> str:
        """Human-readable summary of targets."""
        m = self.macros
        return "\n".join([
            f"BMR: {self.basal_expenditure:.0f} kcal/day",
            f"TDEE: {self.total_expenditure} kcal/day",
            f"Target: {self.target_calories} kcal/day",
            f"Macros: {m.protein_g}g protein, {m.carb_g}g carbs, {m.fat_g}g fat",
        ])


def basal_expenditure(profile: ClientProfile) -> float:
    """Calculate Basal Metabolic Rate using the revised Mifflin-St Jeor equation.

    Male:   88.362 + 13.397 x weight(kg) + 4.799 x height(cm) - 5.677 x age
    Female: 447.593 + 9.247 x weight(kg) + 3.098 x height(cm) - 4.330 x age

    Args:
        profile: Client profile

    Returns:
        BMR in kcal per day, unrounded

    Raises:
        InvalidProfile: If the profile fails validation
    """
    validate_profile(profile)

    if profile.gender == Gender.MALE:
        return (
            88.362
            + 13.397 * profile.weight_kg
            + 4.799 * profile.height_cm
            - 5.677 * profile.age
        )
    return (
        447.593
        + 9.247 * profile.weight_kg
        + 3.098 * profile.height_cm
        - 4.330 * profile.age
    )


def total_expenditure(profile: ClientProfile) -> int:
    """Calculate Total Daily Energy Expenditure.

    Args:
        profile: Client profile

    Returns:
        TDEE in kcal per day, rounded to the nearest integer
    """
    bmr = basal_expenditure(profile)
    multiplier = ACTIVITY_MULTIPLIERS[profile.activity_level]
    return round_half_up(bmr * multiplier)


def target_calories(profile: ClientProfile) -> int:
    """Calculate the goal-adjusted daily calorie target.

    The result is not clamped to any safety floor; callers decide what to do
    with targets below the recommended minimum.

    Args:
        profile: Client profile

    Returns:
        Target kcal per day
    """
    tdee = total_expenditure(profile)
    return round_half_up(tdee + GOAL_ADJUSTMENTS[profile.goal])


def macro_distribution(target_kcal: int, profile: ClientProfile) -> MacroTargets:
    """Split a calorie target into protein, carbohydrate and fat grams.

    Protein is fixed by body weight, fat by a fixed share of calories, and
    carbohydrate takes whatever energy remains. The carbohydrate figure can
    go negative for heavy clients on very low targets; it is returned as-is
    so callers can reject the combination (see ``MacroTargets.is_feasible``).

    Args:
        target_kcal: Daily calorie target
        profile: Client profile (weight and goal are used)

    Returns:
        MacroTargets with integer gram values
    """
    validate_profile(profile)

    multiplier = (
        PROTEIN_PER_KG_MUSCLE_GAIN
        if profile.goal == Goal.MUSCLE_GAIN
        else PROTEIN_PER_KG_DEFAULT
    )
    protein_g = round_half_up(profile.weight_kg * multiplier)
    fat_g = round_half_up(target_kcal * FAT_CALORIE_SHARE / KCAL_PER_GRAM_FAT)
    remaining = (
        target_kcal
        - protein_g * KCAL_PER_GRAM_PROTEIN
        - fat_g * KCAL_PER_GRAM_FAT
    )
    carb_g = round_half_up(remaining / KCAL_PER_GRAM_CARB)

    if carb_g < 0:
        logger.debug(
            "Negative carbohydrate target (%dg) for %d kcal at %.1f kg",
            carb_g, target_kcal, profile.weight_kg,
        )

    return MacroTargets(protein_g=protein_g, carb_g=carb_g, fat_g=fat_g)


def calculate_energy_targets(profile: ClientProfile) -> EnergyTargets:
    """Calculate every energy figure for a profile in one call."""
    bmr = basal_expenditure(profile)
    tdee = total_expenditure(profile)
    target = target_calories(profile)
    return EnergyTargets(
        basal_expenditure=bmr,
        total_expenditure=tdee,
        target_calories=target,
        macros=macro_distribution(target, profile),
    )
