"""Draft meal plan assembly from a client profile.

Pipeline: profile -> energy targets -> meal slot allocation -> template
match per slot -> plan with reasoning text. Meals without a matching
template are kept with ``template=None`` for manual composition.
"""

from __future__ import annotations

import logging
from typing import Optional

from nutriplan.planning.allocator import MealAllocation, distribute_meal_calories
from nutriplan.plans.models import GeneratedMealPlan, PlannedMeal
from nutriplan.profiles.energy import EnergyTargets, calculate_energy_targets
from nutriplan.profiles.models import ClientProfile, InvalidProfile
from nutriplan.templates.catalog import default_catalog
from nutriplan.templates.matcher import TemplateMatcher

logger = logging.getLogger(__name__)


# Targets below this are reported back to the professional
SAFE_MIN_DAILY_KCAL = 1200


def build_reasoning(
    profile: ClientProfile,
    energy: EnergyTargets,
    meals: list[PlannedMeal],
) -> str:
    """Summarise the inputs and computed targets for audit and display."""
    macros = energy.macros
    restrictions = ", ".join(sorted(profile.dietary_restrictions)) or "none"
    unmatched = [m.name for m in meals if m.template is None]

    lines = [
        "Plan generated from:",
        f"- Age: {profile.age} years",
        f"- Weight: {profile.weight_kg:g}kg, Height: {profile.height_cm:g}cm",
        f"- Activity level: {profile.activity_level.value}",
        f"- Goal: {profile.goal.value}",
        f"- Dietary restrictions: {restrictions}",
        f"- Estimated BMR: {energy.basal_expenditure:.0f} kcal",
        f"- Estimated TDEE: {energy.total_expenditure} kcal",
        f"- Calorie target: {energy.target_calories} kcal/day",
        f"- Macro split: {macros.protein_g}g protein, {macros.carb_g}g carbohydrate, "
        f"{macros.fat_g}g fat",
        f"- Templates matched: {len(meals) - len(unmatched)} of {len(meals)} meals",
    ]
    if unmatched:
        lines.append(f"- Needs manual composition: {', '.join(unmatched)}")
    return "\n".join(lines)


def assemble_meals(
    allocation: MealAllocation,
    matcher: TemplateMatcher,
    restrictions: frozenset[str],
) -> list[PlannedMeal]:
    """Match a template to every allocated slot, keeping slot order."""
    meals = []
    for slot in allocation:
        meals.append(
            PlannedMeal(
                name=slot.name,
                target_calories=slot.kcal,
                meal_type=matcher.slot_meal_type(slot),
                template=matcher.match(slot, restrictions),
            )
        )
    return meals


def generate_meal_plan(
    profile: ClientProfile,
    matcher: Optional[TemplateMatcher] = None,
    slot_count: int = 5,
    min_daily_kcal: float = SAFE_MIN_DAILY_KCAL,
) -> GeneratedMealPlan:
    """Assemble a draft meal plan for a client.

    Args:
        profile: Client profile
        matcher: Template matcher (defaults to one over the built-in catalog)
        slot_count: Number of meals in the day
        min_daily_kcal: Targets below this are flagged in ``warnings``

    Returns:
        GeneratedMealPlan with empty item lists

    Raises:
        InvalidProfile: If the profile is invalid, or the macro split leaves
            a negative carbohydrate target
    """
    if matcher is None:
        matcher = TemplateMatcher(default_catalog())

    energy = calculate_energy_targets(profile)
    if not energy.macros.is_feasible:
        raise InvalidProfile(
            f"Calorie target of {energy.target_calories} kcal cannot cover protein "
            f"and fat needs for {profile.weight_kg:g} kg "
            f"(carbohydrate would be {energy.macros.carb_g}g)"
        )

    warnings: list[str] = []
    if energy.target_calories < min_daily_kcal:
        warnings.append(
            f"Calorie target ({energy.target_calories} kcal) is below the "
            f"recommended minimum ({min_daily_kcal:.0f} kcal)"
        )

    allocation = distribute_meal_calories(energy.target_calories, slot_count)
    meals = assemble_meals(allocation, matcher, profile.dietary_restrictions)

    reasoning = build_reasoning(profile, energy, meals)
    if warnings:
        reasoning += "\n" + "\n".join(f"- Warning: {w}" for w in warnings)

    plan = GeneratedMealPlan(
        profile=profile,
        energy=energy,
        meals=meals,
        reasoning=reasoning,
        warnings=warnings,
    )
    logger.debug(
        "Generated plan: %d kcal, %d/%d meals matched",
        plan.target_calories, plan.matched_meals, len(meals),
    )
    return plan
