"""Template matching for meal slots.

For each meal slot the matcher keeps the templates written for the slot's
meal type that satisfy every dietary restriction, drops those whose nominal
energy is too far from the slot allocation, and ranks the rest by calorie
distance. No match is a normal outcome: the slot is left for manual
composition.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from nutriplan.data.food_names import normalize_text
from nutriplan.templates.catalog import TemplateCatalog
from nutriplan.templates.models import MealTemplate, MealType

if TYPE_CHECKING:
    from nutriplan.planning.allocator import MealSlot

logger = logging.getLogger(__name__)


DEFAULT_TOLERANCE_KCAL = 150.0

# Dietary restriction -> tag a template must carry to be allowed
RESTRICTION_TAGS: dict[str, str] = {
    "vegetarian": "vegetarian",
    "vegan": "vegan",
    "low_carb": "low-carb",
    "gluten_free": "gluten-free",
    "lactose_free": "lactose-free",
}

_SNACK_WORDS = ("snack", "lanche")
_SNACK_QUALIFIERS: tuple[tuple[tuple[str, ...], MealType], ...] = (
    (("morning", "manha"), MealType.MORNING_SNACK),
    (("afternoon", "tarde"), MealType.AFTERNOON_SNACK),
    (("evening", "night", "noite"), MealType.EVENING_SNACK),
)
_MEAL_WORDS: tuple[tuple[tuple[str, ...], MealType], ...] = (
    (("breakfast", "cafe", "manha"), MealType.BREAKFAST),
    (("lunch", "almoco"), MealType.LUNCH),
    (("dinner", "jantar"), MealType.DINNER),
    (("supper", "ceia"), MealType.EVENING_SNACK),
)


def normalize_restriction(restriction: str) -> str:
    """Canonical form of a restriction ("Low-Carb" -> "low_carb")."""
    return "_".join(restriction.strip().lower().replace("-", " ").split())


def required_tags(restrictions: Iterable[str]) -> frozenset[str]:
    """Tags a template needs to satisfy all restrictions.

    Restrictions without a known tag do not filter anything.
    """
    tags = set()
    for restriction in restrictions:
        tag = RESTRICTION_TAGS.get(normalize_restriction(restriction))
        if tag is None:
            logger.debug("No template tag for dietary restriction %r", restriction)
            continue
        tags.add(tag)
    return frozenset(tags)


def infer_meal_type(slot_name: str) -> MealType:
    """Guess a meal type from a slot name (English or Portuguese).

    Only used for slots that do not carry an explicit meal type.

    Examples:
        "Café da Manhã" -> BREAKFAST
        "Lanche da Tarde" -> AFTERNOON_SNACK
        "Meal 3" -> MORNING_SNACK (fallback)
    """
    name = normalize_text(slot_name)

    if any(word in name for word in _SNACK_WORDS):
        for words, meal_type in _SNACK_QUALIFIERS:
            if any(word in name for word in words):
                return meal_type
        return MealType.AFTERNOON_SNACK

    for words, meal_type in _MEAL_WORDS:
        if any(word in name for word in words):
            return meal_type

    return MealType.MORNING_SNACK


class TemplateMatcher:
    """Pick the closest-calorie template for meal slots.

    Args:
        catalog: Templates to choose from
        tolerance_kcal: Templates must be strictly closer than this to the slot
    """

    def __init__(
        self,
        catalog: TemplateCatalog,
        tolerance_kcal: float = DEFAULT_TOLERANCE_KCAL,
    ):
        if tolerance_kcal <= 0:
            raise ValueError(f"tolerance_kcal must be positive, got {tolerance_kcal}")
        self.catalog = catalog
        self.tolerance_kcal = tolerance_kcal

    @staticmethod
    def slot_meal_type(slot: MealSlot) -> MealType:
        return slot.meal_type or infer_meal_type(slot.name)

    def eligible(
        self,
        meal_type: MealType,
        restrictions: Iterable[str] = (),
    ) -> list[MealTemplate]:
        """Templates of a meal type that satisfy every restriction, in catalog order."""
        tags = required_tags(restrictions)
        return [t for t in self.catalog.by_meal_type(meal_type) if tags <= t.tags]

    def candidates(
        self,
        slot: MealSlot,
        restrictions: Iterable[str] = (),
    ) -> list[MealTemplate]:
        """All acceptable templates for a slot, closest first.

        Ties keep catalog order because the sort is stable.
        """
        meal_type = self.slot_meal_type(slot)
        in_band = [
            t for t in self.eligible(meal_type, restrictions)
            if abs(t.target_kcal - slot.kcal) < self.tolerance_kcal
        ]
        in_band.sort(key=lambda t: abs(t.target_kcal - slot.kcal))
        return in_band

    def match(
        self,
        slot: MealSlot,
        restrictions: Iterable[str] = (),
    ) -> Optional[MealTemplate]:
        """Best template for a slot, or None when nothing fits."""
        candidates = self.candidates(slot, restrictions)
        if not candidates:
            logger.debug("No template for slot %s (%d kcal)", slot.name, slot.kcal)
            return None
        return candidates[0]
