"""Immutable, injectable catalog of meal templates."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional

import yaml

from nutriplan.templates.definitions import BUILTIN_TEMPLATES
from nutriplan.templates.models import MealTemplate, MealType, item

logger = logging.getLogger(__name__)


class TemplateCatalog:
    """Read-only, ordered collection of meal templates.

    The catalog is built once and handed to whoever needs it (usually a
    ``TemplateMatcher``). Iteration follows construction order, which is also
    the tie-break order when two templates are equally good matches.
    """

    def __init__(self, templates: Iterable[MealTemplate]):
        ordered = tuple(templates)
        index: dict[str, MealTemplate] = {}
        for template in ordered:
            if template.id in index:
                raise ValueError(f"Duplicate template id: {template.id}")
            index[template.id] = template
        self._templates = ordered
        self._index = index

    def __iter__(self) -> Iterator[MealTemplate]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._index

    def __repr__(self) -> str:
        return f"TemplateCatalog({len(self._templates)} templates)"

    @property
    def templates(self) -> tuple[MealTemplate, ...]:
        return self._templates

    @property
    def ids(self) -> list[str]:
        return [t.id for t in self._templates]

    def get(self, template_id: str) -> Optional[MealTemplate]:
        """Look up a template by id, or None if absent."""
        return self._index.get(template_id)

    def by_meal_type(self, meal_type: MealType) -> list[MealTemplate]:
        """Templates written for one meal type, in catalog order."""
        return [t for t in self._templates if t.meal_type == meal_type]

    def by_calorie_range(self, min_kcal: float, max_kcal: float) -> list[MealTemplate]:
        """Templates whose nominal energy is within [min_kcal, max_kcal]."""
        return [t for t in self._templates if min_kcal <= t.target_kcal <= max_kcal]

    def with_tags(self, tags: Iterable[str]) -> list[MealTemplate]:
        """Templates carrying every one of the given tags."""
        required = set(tags)
        return [t for t in self._templates if required <= t.tags]

    def to_dict(self) -> dict[str, Any]:
        return {"templates": [t.to_dict() for t in self._templates]}


def default_catalog() -> TemplateCatalog:
    """Build a catalog holding the built-in templates."""
    return TemplateCatalog(BUILTIN_TEMPLATES)


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    return [value] if isinstance(value, str) else list(value)


def _template_from_dict(data: dict[str, Any]) -> MealTemplate:
    try:
        template = MealTemplate(
            id=str(data["id"]),
            name=data.get("name") or str(data["id"]),
            description=data.get("description") or "",
            meal_type=MealType(data["meal_type"]),
            target_kcal=float(data["target_kcal"]),
            items=tuple(
                item(
                    food_name=entry["food_name"],
                    quantity=entry["quantity"],
                    measure_name=entry["measure_name"],
                    category=entry["category"],
                    search_terms=entry.get("search_terms"),
                    optional=bool(entry.get("optional", False)),
                )
                for entry in data.get("items") or []
            ),
            tags=frozenset(_as_list(data.get("tags"))),
        )
    except KeyError as exc:
        raise ValueError(f"Template {data.get('id', '?')} is missing field {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Template {data.get('id', '?')} is invalid: {exc}") from exc
    if not template.target_kcal > 0:
        raise ValueError(f"Template {template.id} needs a positive target_kcal, got {template.target_kcal:g}")
    return template


def catalog_from_data(data: dict[str, Any]) -> TemplateCatalog:
    """Build a catalog from parsed YAML/JSON data (``{"templates": [...]}``)."""
    entries = data.get("templates") if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise ValueError("Catalog data must contain a 'templates' list")
    return TemplateCatalog(_template_from_dict(entry) for entry in entries)


def load_catalog(path: Path) -> TemplateCatalog:
    """Load a template catalog from a YAML file.

    Args:
        path: Path to a YAML file with a top-level ``templates`` list

    Returns:
        TemplateCatalog in file order
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    catalog = catalog_from_data(data)
    logger.debug("Loaded %d meal templates from %s", len(catalog), path)
    return catalog


def save_catalog(catalog: TemplateCatalog, path: Path) -> None:
    """Write a catalog to a YAML file readable by ``load_catalog``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(catalog.to_dict(), f, default_flow_style=False, sort_keys=False, allow_unicode=True)
