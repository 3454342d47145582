"""Nutrient arithmetic for plan items, meals and days."""

from __future__ import annotations

from nutriplan.nutrition.totals import (
    FoodNutrients,
    NutritionTotals,
    calculate_item_nutrition,
    calculate_progress,
    check_energy_consistency,
    day_totals,
    format_nutrient,
    meal_totals,
    sum_totals,
)

__all__ = [
    "FoodNutrients",
    "NutritionTotals",
    "calculate_item_nutrition",
    "calculate_progress",
    "check_energy_consistency",
    "day_totals",
    "format_nutrient",
    "meal_totals",
    "sum_totals",
]
