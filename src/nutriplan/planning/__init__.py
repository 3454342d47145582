"""Daily calorie allocation across meal slots."""

from __future__ import annotations

from nutriplan.planning.allocator import (
    CANONICAL_SLOTS,
    MealAllocation,
    MealSlot,
    distribute_meal_calories,
)

__all__ = [
    "CANONICAL_SLOTS",
    "MealAllocation",
    "MealSlot",
    "distribute_meal_calories",
]
