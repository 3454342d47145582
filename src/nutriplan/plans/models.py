"""Data models for draft meal plans.

Two kinds of plan share the same meal/item structure so that one validator
can check both:

- ``GeneratedMealPlan``: assembled locally from energy targets and template
  matches. Items start empty and are filled in by the caller.
- ``ExternalMealPlan``: returned by a generative plan source with concrete
  items and nutrient estimates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from nutriplan.nutrition.totals import NutritionTotals, meal_totals
from nutriplan.profiles.energy import EnergyTargets, MacroTargets
from nutriplan.profiles.models import ClientProfile
from nutriplan.templates.models import MealTemplate, MealType


@dataclass
class PlanItem:
    """A concrete food portion in a planned meal.

    Attributes:
        food_name: Food as named by whoever filled the plan
        quantity: Amount in ``measure`` units
        measure: Unit or household measure ("gramas", "ml", "unidade")
        kcal: Energy of the portion
        protein: Protein grams
        carb: Carbohydrate grams
        fat: Fat grams
        reference_name: Matching food-table name, when one is known
    """

    food_name: str
    quantity: float
    measure: str
    kcal: float = 0.0
    protein: float = 0.0
    carb: float = 0.0
    fat: float = 0.0
    reference_name: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "food_name": self.food_name,
            "quantity": self.quantity,
            "measure": self.measure,
            "estimated_kcal": self.kcal,
            "estimated_protein": self.protein,
            "estimated_carb": self.carb,
            "estimated_fat": self.fat,
            "reference_name": self.reference_name,
        }


@dataclass
class PlannedMeal:
    """One meal of a plan.

    Attributes:
        name: Slot name
        target_calories: Energy allocated to the meal
        meal_type: Meal type of the slot, if known
        template: Matched template, or None when the meal needs manual composition
        time: Suggested time ("08:00"), if any
        items: Concrete foods; empty until someone composes the meal
    """

    name: str
    target_calories: int
    meal_type: Optional[MealType] = None
    template: Optional[MealTemplate] = None
    time: Optional[str] = None
    items: list[PlanItem] = field(default_factory=list)

    @property
    def needs_manual_composition(self) -> bool:
        return self.template is None and not self.items

    @property
    def totals(self) -> NutritionTotals:
        return meal_totals(self.items)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "mealType": self.meal_type.value if self.meal_type else None,
            "time": self.time,
            "targetCalories": self.target_calories,
            "template": self.template.to_dict() if self.template else None,
            "items": [i.to_dict() for i in self.items],
        }


@dataclass
class GeneratedMealPlan:
    """Draft plan assembled from a client profile.

    Built fresh on every request and never persisted here.
    """

    profile: ClientProfile
    energy: EnergyTargets
    meals: list[PlannedMeal]
    reasoning: str
    warnings: list[str] = field(default_factory=list)

    @property
    def target_calories(self) -> int:
        return self.energy.target_calories

    @property
    def macros(self) -> MacroTargets:
        return self.energy.macros

    @property
    def matched_meals(self) -> int:
        return sum(1 for m in self.meals if m.template is not None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "profile": self.profile.to_dict(),
            "bmr": round(self.energy.basal_expenditure, 3),
            "tdee": self.energy.total_expenditure,
            "targetCalories": self.target_calories,
            "macros": self.macros.to_dict(),
            "meals": [m.to_dict() for m in self.meals],
            "reasoning": self.reasoning,
            "warnings": list(self.warnings),
        }


@dataclass
class ExternalMealPlan:
    """Plan produced by a generative source, checked for shape on parsing."""

    target_calories: int
    macros: MacroTargets
    meals: list[PlannedMeal]
    reasoning: str = ""
    educational_notes: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "targetCalories": self.target_calories,
            "macros": self.macros.to_dict(),
            "meals": [
                {
                    "name": m.name,
                    "time": m.time,
                    "targetCalories": m.target_calories,
                    "items": [i.to_dict() for i in m.items],
                }
                for m in self.meals
            ],
            "reasoning": self.reasoning,
            "educationalNotes": self.educational_notes,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Advisory outcome of plan validation.

    ``valid`` is True exactly when there are no warnings. Warnings are for a
    nutrition professional to review; they do not block anything by themselves.
    """

    valid: bool
    warnings: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "warnings": list(self.warnings)}
