"""Advisory sanity checks for meal plans with concrete items.

The validator never blocks a plan. It returns human-readable warnings for a
nutrition professional to review; the caller decides what to do with them.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Protocol, Sequence

from nutriplan.config.settings import ValidationConfig
from nutriplan.nutrition.totals import day_totals
from nutriplan.plans.models import PlannedMeal, ValidationResult
from nutriplan.profiles.energy import MacroTargets

logger = logging.getLogger(__name__)


class ValidatablePlan(Protocol):
    """Anything with calorie/macro targets and meals of items."""

    @property
    def target_calories(self) -> int: ...

    @property
    def macros(self) -> MacroTargets: ...

    meals: Sequence[PlannedMeal]


def validate_plan(
    plan: ValidatablePlan,
    config: Optional[ValidationConfig] = None,
) -> ValidationResult:
    """Check a plan's totals against its targets and safety limits.

    Warnings are produced when:
    - total energy is below the absolute daily floor (default 1200 kcal)
    - total energy exceeds the target by more than 20 %
    - total protein is below 80 % of the protein target
    - fewer than 3 meals contain at least one item

    Args:
        plan: GeneratedMealPlan or ExternalMealPlan with items filled in
        config: Threshold overrides (defaults to ValidationConfig())

    Returns:
        ValidationResult; ``valid`` is True when there are no warnings
    """
    config = config or ValidationConfig()
    warnings: list[str] = []

    totals = day_totals(plan.meals)

    if totals.kcal < config.min_daily_kcal:
        warnings.append(
            f"Total calories ({math.floor(totals.kcal)} kcal) are below the recommended "
            f"minimum ({config.min_daily_kcal:.0f} kcal)"
        )

    if totals.kcal > plan.target_calories * config.max_calorie_ratio:
        warnings.append(
            f"Total calories ({totals.kcal:.0f} kcal) are well above the target "
            f"({plan.target_calories} kcal)"
        )

    if totals.protein < plan.macros.protein_g * config.min_protein_ratio:
        warnings.append(
            f"Protein ({totals.protein:.0f}g) is below the target "
            f"({plan.macros.protein_g}g)"
        )

    filled_meals = sum(1 for meal in plan.meals if meal.items)
    if filled_meals < config.min_meals_with_items:
        warnings.append(
            f"Fewer than {config.min_meals_with_items} meals per day "
            f"({filled_meals} with food items)"
        )

    if warnings:
        logger.debug("Plan validation produced %d warning(s)", len(warnings))

    return ValidationResult(valid=not warnings, warnings=tuple(warnings))
