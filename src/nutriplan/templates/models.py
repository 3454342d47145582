"""Data models for predefined meal templates.

A meal template is a ready-made meal composition (foods, portions and
measures) pitched at a nominal calorie level. Templates are reference data:
they are built once, never mutated, and matched against meal slots when a
draft plan is assembled.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional


class MealType(Enum):
    """The six meal slots a template can be written for."""

    BREAKFAST = "breakfast"
    MORNING_SNACK = "morning_snack"
    LUNCH = "lunch"
    AFTERNOON_SNACK = "afternoon_snack"
    DINNER = "dinner"
    EVENING_SNACK = "evening_snack"


class FoodCategory(Enum):
    """Food group of a template item."""

    BASE = "base"
    PROTEIN = "protein"
    VEGETABLE = "vegetable"
    FRUIT = "fruit"
    DAIRY = "dairy"
    FAT = "fat"


@dataclass(frozen=True)
class TemplateItem:
    """One food in a meal template.

    Attributes:
        food_name: Display name of the food
        search_terms: Aliases used to find the food in a food database
        quantity: Number of measures
        measure_name: Household measure ("unit", "tablespoon", "cup"...)
        category: Food group
        optional: If True, the item can be left out without breaking the meal
    """

    food_name: str
    search_terms: tuple[str, ...]
    quantity: float
    measure_name: str
    category: FoodCategory
    optional: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "food_name": self.food_name,
            "search_terms": list(self.search_terms),
            "quantity": self.quantity,
            "measure_name": self.measure_name,
            "category": self.category.value,
            "optional": self.optional,
        }


@dataclass(frozen=True)
class MealTemplate:
    """A predefined meal at a nominal calorie level.

    Attributes:
        id: Stable identifier (e.g., "lunch-executive")
        name: Display name
        description: Short description of the meal
        meal_type: Slot this template is written for
        target_kcal: Nominal energy of the meal as written
        items: Ordered foods making up the meal
        tags: Free-form labels used for dietary filtering ("vegetarian", "low-carb")
    """

    id: str
    name: str
    description: str
    meal_type: MealType
    target_kcal: float
    items: tuple[TemplateItem, ...]
    tags: frozenset[str] = frozenset()

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def scaled_items(self, target_kcal: float) -> tuple[TemplateItem, ...]:
        """Scale item quantities so the meal lands on a different calorie level.

        Quantities are multiplied by ``target_kcal / self.target_kcal`` and
        rounded to one decimal.

        Args:
            target_kcal: Desired energy for the meal

        Returns:
            New items with adjusted quantities (the template is unchanged)
        """
        if self.target_kcal <= 0:
            raise ValueError(f"Template {self.id} has no calorie reference to scale from")
        factor = target_kcal / self.target_kcal
        return tuple(
            replace(item, quantity=round(item.quantity * factor, 1))
            for item in self.items
        )

    def to_dict(self, include_items: bool = True) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "meal_type": self.meal_type.value,
            "target_kcal": self.target_kcal,
            "tags": sorted(self.tags),
        }
        if include_items:
            data["items"] = [item.to_dict() for item in self.items]
        return data


def item(
    food_name: str,
    quantity: float,
    measure_name: str,
    category: str,
    search_terms: Optional[list[str]] = None,
    optional: bool = False,
) -> TemplateItem:
    """Shorthand constructor used by the built-in definitions and YAML loader."""
    return TemplateItem(
        food_name=food_name,
        search_terms=tuple(search_terms or [food_name.lower()]),
        quantity=float(quantity),
        measure_name=measure_name,
        category=FoodCategory(category),
        optional=optional,
    )
