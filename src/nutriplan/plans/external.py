"""Contract for plans produced by an external generative source.

The source itself (HTTP transport, authentication, retries) lives outside
this package. Here we define what it is given, check the shape of what it
returns, and turn that into an ``ExternalMealPlan`` that the plan validator
can check like any other plan.

Request sent to a source::

    {"profile": {...}, "calculatedData": {"bmr", "tdee", "targetCalories", "macros"}}

Expected response::

    {"meals": [{"name", "time", "targetCalories",
                "items": [{"food_name", "quantity", "measure", "estimated_kcal",
                           "estimated_protein", "estimated_carb", "estimated_fat"}]}],
     "reasoning": "...", "educationalNotes": "..."}
"""

from __future__ import annotations

import json
import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Protocol

from nutriplan.data.food_names import map_food_name
from nutriplan.plans.models import ExternalMealPlan, PlanItem, PlannedMeal
from nutriplan.profiles.energy import (
    MacroTargets,
    basal_expenditure,
    macro_distribution,
    round_half_up,
    target_calories,
    total_expenditure,
)
from nutriplan.profiles.models import ClientProfile
from nutriplan.templates.matcher import infer_meal_type

logger = logging.getLogger(__name__)


class PlanFormatError(ValueError):
    """Raised when an external plan does not have the expected shape."""


@dataclass(frozen=True)
class CalculatedData:
    """Energy figures handed to an external plan source."""

    bmr: float
    tdee: int
    target_calories: int
    macros: MacroTargets

    @classmethod
    def for_profile(cls, profile: ClientProfile) -> "CalculatedData":
        target = target_calories(profile)
        return cls(
            bmr=basal_expenditure(profile),
            tdee=total_expenditure(profile),
            target_calories=target,
            macros=macro_distribution(target, profile),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "bmr": self.bmr,
            "tdee": self.tdee,
            "targetCalories": self.target_calories,
            "macros": self.macros.to_dict(),
        }


class ExternalPlanSource(Protocol):
    """Anything that can draft a plan for a profile, e.g. an LLM-backed service."""

    def generate(
        self,
        profile: ClientProfile,
        calculated_data: CalculatedData,
    ) -> dict[str, Any]:
        """Return the raw plan response (already decoded from JSON)."""
        ...


def _number(value: Any, where: str) -> float:
    if isinstance(value, bool) or value is None:
        raise PlanFormatError(f"{where} must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise PlanFormatError(f"{where} must be a number, got {value!r}") from None
    else:
        raise PlanFormatError(f"{where} must be a number, got {value!r}")
    if math.isnan(number) or math.isinf(number) or number < 0:
        raise PlanFormatError(f"{where} must be a non-negative number, got {value!r}")
    return number


def _text(value: Any, where: str, required: bool = True) -> str:
    if value is None and not required:
        return ""
    if not isinstance(value, str) or (required and not value.strip()):
        raise PlanFormatError(f"{where} must be a non-empty string, got {value!r}")
    return value


def _parse_item(raw: Any, where: str) -> PlanItem:
    if not isinstance(raw, dict):
        raise PlanFormatError(f"{where} must be an object")
    food_name = _text(raw.get("food_name"), f"{where}.food_name")
    return PlanItem(
        food_name=food_name,
        quantity=_number(raw.get("quantity"), f"{where}.quantity"),
        measure=_text(raw.get("measure"), f"{where}.measure", required=False),
        kcal=_number(raw.get("estimated_kcal"), f"{where}.estimated_kcal"),
        protein=_number(raw.get("estimated_protein"), f"{where}.estimated_protein"),
        carb=_number(raw.get("estimated_carb", 0), f"{where}.estimated_carb"),
        fat=_number(raw.get("estimated_fat", 0), f"{where}.estimated_fat"),
        reference_name=map_food_name(food_name),
    )


def _parse_meal(raw: Any, where: str) -> PlannedMeal:
    if not isinstance(raw, dict):
        raise PlanFormatError(f"{where} must be an object")
    name = _text(raw.get("name"), f"{where}.name")
    items = raw.get("items")
    if not isinstance(items, list):
        raise PlanFormatError(f"{where}.items must be a list")
    target = raw.get("targetCalories")
    return PlannedMeal(
        name=name,
        target_calories=round_half_up(_number(target, f"{where}.targetCalories")) if target is not None else 0,
        meal_type=infer_meal_type(name),
        time=_text(raw.get("time"), f"{where}.time", required=False) or None,
        items=[_parse_item(item, f"{where}.items[{i}]") for i, item in enumerate(items)],
    )


def parse_external_plan(raw: Any, calculated: CalculatedData) -> ExternalMealPlan:
    """Check the shape of a source response and build an ExternalMealPlan.

    Targets always come from ``calculated``, never from the response.
    Numeric fields may arrive as numeric strings.

    Args:
        raw: Decoded response from the source
        calculated: Figures that were sent with the request

    Returns:
        ExternalMealPlan

    Raises:
        PlanFormatError: If required fields are missing or malformed
    """
    if not isinstance(raw, dict):
        raise PlanFormatError("Plan response must be a JSON object")
    meals = raw.get("meals")
    if not isinstance(meals, list):
        raise PlanFormatError("Plan response must contain a 'meals' list")

    plan = ExternalMealPlan(
        target_calories=calculated.target_calories,
        macros=calculated.macros,
        meals=[_parse_meal(meal, f"meals[{i}]") for i, meal in enumerate(meals)],
        reasoning=_text(raw.get("reasoning"), "reasoning", required=False),
        educational_notes=_text(raw.get("educationalNotes"), "educationalNotes", required=False),
    )

    unmapped = [
        item.food_name for meal in plan.meals for item in meal.items
        if item.reference_name is None
    ]
    if unmapped:
        logger.debug("%d plan item(s) have no reference food: %s", len(unmapped), ", ".join(unmapped))

    return plan


_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


def extract_json_object(text: str) -> dict[str, Any]:
    """Pull the JSON object out of a model response that may wrap it in prose.

    Takes everything from the first ``{`` to the last ``}``.

    Raises:
        PlanFormatError: If no parseable JSON object is present
    """
    match = _JSON_OBJECT.search(text)
    if not match:
        raise PlanFormatError("Response does not contain a JSON object")
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise PlanFormatError(f"Response JSON is invalid: {exc}") from exc
    if not isinstance(data, dict):
        raise PlanFormatError("Response JSON is not an object")
    return data


def request_external_plan(
    profile: ClientProfile,
    source: ExternalPlanSource,
) -> ExternalMealPlan:
    """Compute targets, ask a source for a plan and parse its response.

    Errors raised by the source (network, authentication...) propagate
    unchanged; translating them is the caller's job.
    """
    calculated = CalculatedData.for_profile(profile)
    raw = source.generate(profile, calculated)
    return parse_external_plan(raw, calculated)
