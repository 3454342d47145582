"""Pytest fixtures for nutriplan tests."""

from __future__ import annotations

import pytest

from nutriplan.plans.models import ExternalMealPlan, PlanItem, PlannedMeal
from nutriplan.profiles.energy import MacroTargets
from nutriplan.profiles.models import ClientProfile
from nutriplan.templates.catalog import TemplateCatalog
from nutriplan.templates.models import MealTemplate, MealType, item


@pytest.fixture
def male_profile() -> ClientProfile:
    """30y male, 180 cm, 80 kg, moderately active, maintenance (target 2873 kcal)."""
    return ClientProfile(
        age=30,
        gender="male",
        height_cm=180,
        weight_kg=80,
        activity_level="moderate",
        goal="maintenance",
    )


@pytest.fixture
def female_profile() -> ClientProfile:
    """30y female, 165 cm, 60 kg, lightly active, maintenance (target 1903 kcal)."""
    return ClientProfile(
        age=30,
        gender="female",
        height_cm=165,
        weight_kg=60,
        activity_level="light",
        goal="maintenance",
    )


@pytest.fixture
def vegetarian_profile() -> ClientProfile:
    return ClientProfile(
        age=30,
        gender="female",
        height_cm=165,
        weight_kg=60,
        activity_level="light",
        goal="maintenance",
        dietary_restrictions=frozenset({"vegetarian"}),
    )


@pytest.fixture
def infeasible_profile() -> ClientProfile:
    """Valid inputs whose protein and fat needs exceed the calorie target."""
    return ClientProfile(
        age=120,
        gender="female",
        height_cm=100,
        weight_kg=100,
        activity_level="sedentary",
        goal="weight_loss",
    )


@pytest.fixture
def low_target_profile() -> ClientProfile:
    """Feasible profile with a target below 1200 kcal (782 kcal)."""
    return ClientProfile(
        age=60,
        gender="female",
        height_cm=150,
        weight_kg=45,
        activity_level="sedentary",
        goal="weight_loss",
    )


def _template(
    template_id: str,
    meal_type: MealType,
    target_kcal: float,
    tags: tuple[str, ...] = (),
) -> MealTemplate:
    return MealTemplate(
        id=template_id,
        name=template_id.replace("-", " ").title(),
        description="",
        meal_type=meal_type,
        target_kcal=target_kcal,
        items=(item("Arroz", 4, "colher", "base"),),
        tags=frozenset(tags),
    )


@pytest.fixture
def make_template():
    """Factory for single-item templates."""
    return _template


@pytest.fixture
def small_catalog() -> TemplateCatalog:
    """Two equidistant breakfasts around 400 kcal plus a few others."""
    return TemplateCatalog([
        _template("breakfast-380", MealType.BREAKFAST, 380),
        _template("breakfast-420", MealType.BREAKFAST, 420, ("vegetarian",)),
        _template("lunch-700", MealType.LUNCH, 700),
        _template("lunch-veg-650", MealType.LUNCH, 650, ("vegetarian", "low-carb")),
        _template("snack-150", MealType.MORNING_SNACK, 150),
    ])


def _external_plan(
    meal_kcal: list[list[float]],
    protein_per_item: float = 30.0,
    target_calories: int = 2000,
    protein_target: int = 100,
) -> ExternalMealPlan:
    """Plan with one meal per inner list, one item per kcal value."""
    meals = [
        PlannedMeal(
            name=f"Meal {i + 1}",
            target_calories=0,
            items=[
                PlanItem(food_name="Arroz", quantity=100, measure="gramas",
                         kcal=kcal, protein=protein_per_item)
                for kcal in kcals
            ],
        )
        for i, kcals in enumerate(meal_kcal)
    ]
    return ExternalMealPlan(
        target_calories=target_calories,
        macros=MacroTargets(protein_g=protein_target, carb_g=250, fat_g=60),
        meals=meals,
    )


@pytest.fixture
def make_external_plan():
    """Factory for plans with concrete items."""
    return _external_plan


@pytest.fixture
def plan_response() -> dict:
    """A well-formed response from an external plan source."""
    return {
        "meals": [
            {
                "name": "Café da Manhã",
                "time": "08:00",
                "targetCalories": 381,
                "items": [
                    {"food_name": "Pão integral", "quantity": 50, "measure": "gramas",
                     "estimated_kcal": 127, "estimated_protein": 4.7,
                     "estimated_carb": 24.9, "estimated_fat": 1.7},
                    {"food_name": "Ovo cozido", "quantity": 100, "measure": "gramas",
                     "estimated_kcal": 146, "estimated_protein": 13.3,
                     "estimated_carb": 0.6, "estimated_fat": 9.5},
                ],
            },
            {
                "name": "Almoço",
                "time": "12:00",
                "targetCalories": "666",
                "items": [
                    {"food_name": "Arroz integral", "quantity": 150, "measure": "gramas",
                     "estimated_kcal": 186, "estimated_protein": 3.9},
                    {"food_name": "Peito de frango grelhado", "quantity": 150,
                     "measure": "gramas", "estimated_kcal": 239,
                     "estimated_protein": 48},
                ],
            },
            {
                "name": "Jantar",
                "items": [
                    {"food_name": "Quinoa", "quantity": 120, "measure": "gramas",
                     "estimated_kcal": 144, "estimated_protein": 5.3},
                ],
            },
        ],
        "reasoning": "Balanced day.",
        "educationalNotes": "Drink water.",
    }
