"""Meal slot allocation for splitting a daily calorie target.

The canonical day has five meals at fixed shares of the target. Each slot
is rounded on its own and the parts are not reconciled with the total, so
the sum can drift from the target by at most half a kcal per slot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from nutriplan.profiles.energy import round_half_up
from nutriplan.templates.models import MealType


@dataclass(frozen=True)
class MealSlot:
    """A named meal slot with its calorie allocation.

    Attributes:
        name: Display name ("Breakfast", "Meal 2"...)
        meal_type: Meal type the slot stands for, or None for generic slots
        kcal: Allocated energy in kcal
    """

    name: str
    meal_type: Optional[MealType]
    kcal: int

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "meal_type": self.meal_type.value if self.meal_type else None,
            "kcal": self.kcal,
        }


# Default five-meal structure (name, type, share of daily calories)
CANONICAL_SLOTS: tuple[tuple[str, MealType, float], ...] = (
    ("Breakfast", MealType.BREAKFAST, 0.20),
    ("Morning Snack", MealType.MORNING_SNACK, 0.10),
    ("Lunch", MealType.LUNCH, 0.35),
    ("Afternoon Snack", MealType.AFTERNOON_SNACK, 0.10),
    ("Dinner", MealType.DINNER, 0.25),
)


@dataclass(frozen=True)
class MealAllocation:
    """Ordered meal slots for one day."""

    target_calories: int
    slots: tuple[MealSlot, ...]

    def __iter__(self) -> Iterator[MealSlot]:
        return iter(self.slots)

    def __len__(self) -> int:
        return len(self.slots)

    def __getitem__(self, name: str) -> int:
        for slot in self.slots:
            if slot.name == name:
                return slot.kcal
        raise KeyError(name)

    @property
    def total_calories(self) -> int:
        return sum(slot.kcal for slot in self.slots)

    @property
    def drift(self) -> int:
        """Allocated total minus the daily target (rounding leftovers)."""
        return self.total_calories - self.target_calories

    def names(self) -> list[str]:
        return [slot.name for slot in self.slots]

    def to_dict(self) -> dict[str, int]:
        """Ordered ``{slot name: kcal}`` mapping."""
        return {slot.name: slot.kcal for slot in self.slots}


def distribute_meal_calories(target_calories: int, slot_count: int = 5) -> MealAllocation:
    """Split a daily calorie target across meal slots.

    With five slots the canonical 20/10/35/10/25 % structure is used and each
    slot is tagged with its meal type. Any other count gives an even split
    over slots named "Meal 1".."Meal N" with no meal type.

    Args:
        target_calories: Daily calorie target
        slot_count: Number of meals in the day

    Returns:
        MealAllocation in slot order

    Raises:
        ValueError: If slot_count is less than 1
    """
    if slot_count < 1:
        raise ValueError(f"slot_count must be at least 1, got {slot_count}")

    if slot_count == len(CANONICAL_SLOTS):
        slots = tuple(
            MealSlot(
                name=name,
                meal_type=meal_type,
                kcal=round_half_up(target_calories * share),
            )
            for name, meal_type, share in CANONICAL_SLOTS
        )
    else:
        per_meal = round_half_up(target_calories / slot_count)
        slots = tuple(
            MealSlot(name=f"Meal {i + 1}", meal_type=None, kcal=per_meal)
            for i in range(slot_count)
        )

    return MealAllocation(target_calories=target_calories, slots=slots)
