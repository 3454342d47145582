"""Nutrient totals for plan items, meals and whole days."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

from nutriplan.profiles.energy import (
    KCAL_PER_GRAM_CARB,
    KCAL_PER_GRAM_FAT,
    KCAL_PER_GRAM_PROTEIN,
    round_half_up,
)

# Declared energy may differ from the 4/4/9 estimate by this much (kcal)
ENERGY_CONSISTENCY_TOLERANCE = 50.0


@dataclass(frozen=True)
class FoodNutrients:
    """Nutrient content of a food per 100 g."""

    kcal: float
    protein: float
    carb: float
    fat: float
    fiber: float = 0.0
    sodium_mg: float = 0.0


@dataclass(frozen=True)
class NutritionTotals:
    """Summed nutrients for an item, a meal or a day."""

    kcal: float = 0.0
    protein: float = 0.0
    carb: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sodium_mg: float = 0.0
    grams: float = 0.0

    def __add__(self, other: "NutritionTotals") -> "NutritionTotals":
        return NutritionTotals(
            kcal=self.kcal + other.kcal,
            protein=self.protein + other.protein,
            carb=self.carb + other.carb,
            fat=self.fat + other.fat,
            fiber=self.fiber + other.fiber,
            sodium_mg=self.sodium_mg + other.sodium_mg,
            grams=self.grams + other.grams,
        )

    def to_dict(self) -> dict[str, float]:
        return {
            "kcal": round(self.kcal, 1),
            "protein": round(self.protein, 1),
            "carb": round(self.carb, 1),
            "fat": round(self.fat, 1),
            "fiber": round(self.fiber, 1),
            "sodium_mg": round(self.sodium_mg, 1),
            "grams": round(self.grams, 1),
        }


class _HasNutrients(Protocol):
    kcal: float
    protein: float
    carb: float
    fat: float


class _HasItems(Protocol):
    items: list


def calculate_item_nutrition(
    food: FoodNutrients,
    measure_grams: float,
    quantity: float,
) -> NutritionTotals:
    """Nutrients for ``quantity`` household measures of a food.

    Args:
        food: Nutrients per 100 g
        measure_grams: Grams in one measure (e.g., 50 for "1 unit" of bread)
        quantity: Number of measures

    Returns:
        NutritionTotals for the portion
    """
    grams = measure_grams * quantity
    factor = grams / 100
    return NutritionTotals(
        kcal=food.kcal * factor,
        protein=food.protein * factor,
        carb=food.carb * factor,
        fat=food.fat * factor,
        fiber=food.fiber * factor,
        sodium_mg=food.sodium_mg * factor,
        grams=grams,
    )


def _item_totals(item: _HasNutrients) -> NutritionTotals:
    return NutritionTotals(
        kcal=item.kcal or 0.0,
        protein=item.protein or 0.0,
        carb=item.carb or 0.0,
        fat=item.fat or 0.0,
        fiber=getattr(item, "fiber", 0.0) or 0.0,
        sodium_mg=getattr(item, "sodium_mg", 0.0) or 0.0,
        grams=getattr(item, "grams", 0.0) or 0.0,
    )


def sum_totals(totals: Iterable[NutritionTotals]) -> NutritionTotals:
    total = NutritionTotals()
    for part in totals:
        total = total + part
    return total


def meal_totals(items: Iterable[_HasNutrients]) -> NutritionTotals:
    """Sum the nutrients of a meal's items. Missing values count as zero."""
    return sum_totals(_item_totals(item) for item in items)


def day_totals(meals: Iterable[_HasItems]) -> NutritionTotals:
    """Sum the nutrients of every item of every meal."""
    return sum_totals(meal_totals(meal.items) for meal in meals)


def calculate_progress(current: float, target: float) -> int:
    """Percentage of a target reached, rounded; 0 when there is no target."""
    if not target:
        return 0
    return round_half_up(current / target * 100)


@dataclass(frozen=True)
class EnergyCheck:
    """Outcome of comparing declared kcal with the macro-derived estimate."""

    valid: bool
    calculated_kcal: int
    message: str = ""


def check_energy_consistency(
    kcal: float,
    protein: float,
    carb: float,
    fat: float,
    tolerance: float = ENERGY_CONSISTENCY_TOLERANCE,
) -> EnergyCheck:
    """Check that declared energy agrees with protein/carb/fat content.

    Used for custom foods typed in by hand: kcal should be close to
    ``protein*4 + carb*4 + fat*9``.
    """
    calculated = (
        protein * KCAL_PER_GRAM_PROTEIN
        + carb * KCAL_PER_GRAM_CARB
        + fat * KCAL_PER_GRAM_FAT
    )
    rounded = round_half_up(calculated)
    if abs(calculated - kcal) > tolerance:
        return EnergyCheck(
            valid=False,
            calculated_kcal=rounded,
            message=(
                f"Declared energy ({kcal:g} kcal) does not match the macronutrients "
                f"(calculated: {rounded} kcal)"
            ),
        )
    return EnergyCheck(valid=True, calculated_kcal=rounded)


def format_nutrient(value: Optional[float], unit: str = "g") -> str:
    """Format a nutrient amount with one decimal ("12.5g"); missing -> "0g"."""
    if value is None or math.isnan(value):
        return f"0{unit}"
    return f"{value:.1f}{unit}"
