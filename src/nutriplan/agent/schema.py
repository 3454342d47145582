"""Machine-readable descriptions of the plan contract.

Generative sources and agent tooling use these to learn what a valid plan
response looks like and which dietary restrictions the matcher understands.
"""

from __future__ import annotations

from typing import Any

from nutriplan.profiles.models import ActivityLevel, Gender, Goal
from nutriplan.templates.matcher import RESTRICTION_TAGS


RESTRICTION_DESCRIPTIONS: dict[str, str] = {
    "vegetarian": "No meat or fish",
    "vegan": "No animal products",
    "low_carb": "Reduced carbohydrate meals",
    "gluten_free": "No wheat, barley or rye",
    "lactose_free": "No lactose-containing dairy",
}


def get_plan_schema() -> dict[str, Any]:
    """Describe the request sent to a plan source and the response it must return."""
    return {
        "description": "Contract between the planner and an external plan source",
        "request": {
            "profile": {
                "age": {"type": "int", "range": [10, 120], "unit": "years"},
                "gender": {"type": "enum", "values": [g.value for g in Gender]},
                "height_cm": {"type": "number", "range": [100, 250], "unit": "cm"},
                "weight_kg": {"type": "number", "range": [30, 300], "unit": "kg"},
                "activity_level": {
                    "type": "enum",
                    "values": [a.value for a in ActivityLevel],
                },
                "goal": {"type": "enum", "values": [g.value for g in Goal]},
                "dietary_restrictions": {
                    "type": "list[str]",
                    "values": sorted(RESTRICTION_TAGS),
                },
            },
            "calculatedData": {
                "bmr": {"type": "number", "unit": "kcal/day"},
                "tdee": {"type": "int", "unit": "kcal/day"},
                "targetCalories": {"type": "int", "unit": "kcal/day"},
                "macros": {
                    "protein_g": {"type": "int", "unit": "g"},
                    "carb_g": {"type": "int", "unit": "g"},
                    "fat_g": {"type": "int", "unit": "g"},
                },
            },
        },
        "response": {
            "meals": {
                "type": "list",
                "required": True,
                "fields": {
                    "name": {"type": "str", "required": True},
                    "time": {"type": "str", "format": "HH:MM", "required": False},
                    "targetCalories": {"type": "number", "required": False},
                    "items": {
                        "type": "list",
                        "required": True,
                        "fields": {
                            "food_name": {"type": "str", "required": True},
                            "quantity": {"type": "number", "required": True},
                            "measure": {"type": "str", "required": False},
                            "estimated_kcal": {"type": "number", "required": True},
                            "estimated_protein": {"type": "number", "required": True},
                            "estimated_carb": {"type": "number", "required": False},
                            "estimated_fat": {"type": "number", "required": False},
                        },
                    },
                },
            },
            "reasoning": {"type": "str", "required": False},
            "educationalNotes": {"type": "str", "required": False},
        },
        "example_response": {
            "meals": [
                {
                    "name": "Breakfast",
                    "time": "08:00",
                    "targetCalories": 400,
                    "items": [
                        {
                            "food_name": "Pão integral",
                            "quantity": 50,
                            "measure": "gramas",
                            "estimated_kcal": 127,
                            "estimated_protein": 4.7,
                            "estimated_carb": 24.9,
                            "estimated_fat": 1.7,
                        }
                    ],
                }
            ],
            "reasoning": "Whole grains at breakfast for satiety.",
            "educationalNotes": "",
        },
    }


def get_restriction_list() -> list[dict[str, Any]]:
    """List supported dietary restrictions with the template tag each requires."""
    return [
        {
            "restriction": restriction,
            "template_tag": tag,
            "description": RESTRICTION_DESCRIPTIONS.get(restriction, ""),
        }
        for restriction, tag in sorted(RESTRICTION_TAGS.items())
    ]
