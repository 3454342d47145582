"""Render the request text sent to a generative plan source."""

from __future__ import annotations

from string import Template
from typing import Optional

from nutriplan.data.food_names import FOOD_NAME_MAP
from nutriplan.planning.allocator import distribute_meal_calories
from nutriplan.plans.external import CalculatedData
from nutriplan.profiles.models import ActivityLevel, ClientProfile, Gender, Goal


SYSTEM_PROMPT = """You help nutrition professionals by drafting meal plans.

LIMITS:
- You suggest, the professional validates
- You do not prescribe, you only save time

GUIDELINES:
- Affordable, everyday Brazilian foods
- Balanced macronutrients across meals
- Realistic, varied portions

Answer with a single JSON object:
{
  "meals": [
    {
      "name": "string",
      "time": "HH:MM",
      "targetCalories": number,
      "items": [
        {
          "food_name": "string",
          "quantity": number,
          "measure": "string",
          "estimated_kcal": number,
          "estimated_protein": number,
          "estimated_carb": number,
          "estimated_fat": number
        }
      ]
    }
  ],
  "reasoning": "string",
  "educationalNotes": "string"
}"""


DEFAULT_TEMPLATE = """PROFILE:
$PROFILE_LINE
Activity: $ACTIVITY
Goal: $GOAL

RESTRICTIONS:
$RESTRICTIONS
$EXTRA_NOTES
TARGETS:
$TARGET_CALORIES kcal (P:${PROTEIN}g C:${CARB}g F:${FAT}g)

MEALS ($MEAL_COUNT):
$MEAL_LINES

FOODS (use these names exactly):
$FOOD_LIST

RULES:
- Quantity in GRAMS
- Measure: "gramas" or "ml"
- 3-4 foods per meal
- Respect every restriction
- Valid JSON only
"""


ACTIVITY_LABELS: dict[ActivityLevel, str] = {
    ActivityLevel.SEDENTARY: "Sedentary",
    ActivityLevel.LIGHT: "Light",
    ActivityLevel.MODERATE: "Moderate",
    ActivityLevel.INTENSE: "Intense",
    ActivityLevel.VERY_INTENSE: "Very intense",
}

GOAL_LABELS: dict[Goal, str] = {
    Goal.MAINTENANCE: "Weight maintenance",
    Goal.WEIGHT_LOSS: "Weight loss",
    Goal.MUSCLE_GAIN: "Muscle gain",
    Goal.HEALTH: "General health",
}

# Suggested clock times for the five canonical meals
MEAL_TIMES = ("08:00", "10:00", "12:00", "15:00", "19:00")


def _profile_line(profile: ClientProfile) -> str:
    parts = [
        f"{profile.age}y",
        "M" if profile.gender is Gender.MALE else "F",
        f"{profile.weight_kg:g}kg",
        f"{profile.height_cm:g}cm",
    ]
    if profile.name:
        parts.insert(0, profile.name)
    return ", ".join(parts)


def _extra_notes(profile: ClientProfile) -> str:
    lines = []
    if profile.allergies:
        lines.append("Allergies: " + ", ".join(profile.allergies))
    if profile.dislikes:
        lines.append("Dislikes: " + ", ".join(profile.dislikes))
    if profile.medical_conditions:
        lines.append("Conditions: " + ", ".join(profile.medical_conditions))
    if profile.notes:
        lines.append("Notes: " + profile.notes)
    return "".join(f"{line}\n" for line in lines)


def build_plan_prompt(
    profile: ClientProfile,
    calculated: CalculatedData,
    template: Optional[str] = None,
) -> str:
    """Render the user prompt for a plan request.

    Args:
        profile: Client profile
        calculated: Targets computed for the profile
        template: Custom ``string.Template`` text (defaults to DEFAULT_TEMPLATE)

    Returns:
        Prompt text; pair it with SYSTEM_PROMPT
    """
    allocation = distribute_meal_calories(calculated.target_calories)
    meal_lines = [
        f"{slot.name} ({time}): {slot.kcal} kcal"
        for slot, time in zip(allocation, MEAL_TIMES)
    ]
    macros = calculated.macros

    return Template(template or DEFAULT_TEMPLATE).safe_substitute(
        PROFILE_LINE=_profile_line(profile),
        ACTIVITY=ACTIVITY_LABELS[profile.activity_level],
        GOAL=GOAL_LABELS[profile.goal],
        RESTRICTIONS=", ".join(sorted(profile.dietary_restrictions)) or "None",
        EXTRA_NOTES=_extra_notes(profile),
        TARGET_CALORIES=calculated.target_calories,
        PROTEIN=macros.protein_g,
        CARB=macros.carb_g,
        FAT=macros.fat_g,
        MEAL_COUNT=len(allocation),
        MEAL_LINES="\n".join(meal_lines),
        FOOD_LIST=" | ".join(sorted(set(FOOD_NAME_MAP.values()))),
    )
