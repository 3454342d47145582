"""Predefined meal templates and slot matching.

Templates are fixed meal compositions at a nominal calorie level. A
``TemplateCatalog`` holds them; a ``TemplateMatcher`` picks, per meal slot,
the template closest to the slot's calorie allocation among those that
satisfy the client's dietary restrictions.
"""

from __future__ import annotations

from nutriplan.templates.catalog import (
    TemplateCatalog,
    default_catalog,
    load_catalog,
    save_catalog,
)
from nutriplan.templates.matcher import TemplateMatcher, infer_meal_type
from nutriplan.templates.models import (
    FoodCategory,
    MealTemplate,
    MealType,
    TemplateItem,
)

__all__ = [
    "FoodCategory",
    "MealTemplate",
    "MealType",
    "TemplateCatalog",
    "TemplateItem",
    "TemplateMatcher",
    "default_catalog",
    "infer_meal_type",
    "load_catalog",
    "save_catalog",
]
