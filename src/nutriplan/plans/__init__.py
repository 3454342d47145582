"""Meal plan assembly, validation and the external plan contract."""

from __future__ import annotations

from nutriplan.plans.external import (
    CalculatedData,
    ExternalPlanSource,
    PlanFormatError,
    extract_json_object,
    parse_external_plan,
    request_external_plan,
)
from nutriplan.plans.generator import generate_meal_plan
from nutriplan.plans.models import (
    ExternalMealPlan,
    GeneratedMealPlan,
    PlanItem,
    PlannedMeal,
    ValidationResult,
)
from nutriplan.plans.validator import validate_plan

__all__ = [
    "CalculatedData",
    "ExternalMealPlan",
    "ExternalPlanSource",
    "GeneratedMealPlan",
    "PlanFormatError",
    "PlanItem",
    "PlannedMeal",
    "ValidationResult",
    "extract_json_object",
    "generate_meal_plan",
    "parse_external_plan",
    "request_external_plan",
    "validate_plan",
]
