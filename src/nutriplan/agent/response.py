"""JSON envelopes printed by ``nutriplan ... --json``.

Each builder turns one domain result (energy targets, a draft plan, a
validation outcome, catalog entries) into the same top-level shape so
agents can branch on ``success`` and read ``warnings``/``suggestions``
without knowing the command.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Sequence

from nutriplan.plans.models import ExternalMealPlan, GeneratedMealPlan, ValidationResult
from nutriplan.profiles.energy import EnergyTargets
from nutriplan.profiles.models import ClientProfile
from nutriplan.templates.models import MealTemplate

SCHEMA_VERSION = "1.0"


@dataclass(frozen=True)
class Envelope:
    command: str
    data: dict[str, Any]
    summary: str = ""
    warnings: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()
    errors: tuple[str, ...] = ()

    @property
    def success(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "command": self.command,
            "data": self.data,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "suggestions": list(self.suggestions),
            "human_summary": self.summary,
            "timestamp": datetime.now().isoformat(timespec="seconds"),
            "schema_version": SCHEMA_VERSION,
        }


def energy_warnings(energy: EnergyTargets) -> list[str]:
    """Findings worth showing next to a set of energy targets."""
    if energy.macros.is_feasible:
        return []
    return [
        f"Protein and fat exceed the calorie target (carbohydrate {energy.macros.carb_g}g)"
    ]


def targets_envelope(profile: ClientProfile, energy: EnergyTargets) -> Envelope:
    return Envelope(
        command="targets",
        data={"profile": profile.to_dict(), **energy.to_dict()},
        summary=f"Target {energy.target_calories} kcal/day",
        warnings=tuple(energy_warnings(energy)),
    )


def plan_envelope(draft: GeneratedMealPlan) -> Envelope:
    """Envelope for a draft plan; each unmatched slot becomes a suggestion."""
    unmatched = [meal.name for meal in draft.meals if meal.template is None]
    return Envelope(
        command="plan",
        data=draft.to_dict(),
        summary=(
            f"{draft.target_calories} kcal/day, "
            f"{draft.matched_meals}/{len(draft.meals)} meals matched"
        ),
        warnings=tuple(draft.warnings),
        suggestions=tuple(f"Compose '{name}' manually" for name in unmatched),
    )


def validation_envelope(plan: ExternalMealPlan, result: ValidationResult) -> Envelope:
    return Envelope(
        command="validate",
        data={"plan": plan.to_dict(), **result.to_dict()},
        summary="Plan looks consistent" if result.valid
        else f"{len(result.warnings)} warning(s)",
        warnings=tuple(result.warnings),
    )


def templates_envelope(templates: Iterable[MealTemplate]) -> Envelope:
    entries = [t.to_dict(include_items=False) for t in templates]
    return Envelope(
        command="templates list",
        data={"templates": entries},
        summary=f"{len(entries)} templates",
    )


def template_envelope(template: MealTemplate) -> Envelope:
    return Envelope(
        command="templates show",
        data=template.to_dict(),
        summary=f"{template.name}: {len(template.items)} items",
    )


def error_envelope(
    command: str,
    error: str,
    suggestions: Sequence[str] = (),
) -> Envelope:
    """Failed command carrying a single error message."""
    return Envelope(
        command=command,
        data={},
        summary=f"Error: {error}",
        suggestions=tuple(suggestions),
        errors=(error,),
    )
