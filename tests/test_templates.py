"""Tests for meal templates and the template catalog."""

from __future__ import annotations

import dataclasses

import pytest
import yaml

from nutriplan.templates.catalog import (
    TemplateCatalog,
    catalog_from_data,
    default_catalog,
    load_catalog,
    save_catalog,
)
from nutriplan.templates.models import FoodCategory, MealType


class TestBuiltinCatalog:
    """Tests for the built-in templates."""

    def test_size_and_unique_ids(self):
        catalog = default_catalog()
        assert len(catalog) == 14
        assert len(set(catalog.ids)) == 14

    def test_every_meal_type_is_covered(self):
        catalog = default_catalog()
        for meal_type in MealType:
            assert catalog.by_meal_type(meal_type), meal_type

    def test_breakfasts_in_catalog_order(self):
        ids = [t.id for t in default_catalog().by_meal_type(MealType.BREAKFAST)]
        assert ids == ["cafe-classico", "cafe-fit", "cafe-vegetariano", "cafe-lowcarb"]

    def test_calorie_range_is_inclusive(self):
        ids = [t.id for t in default_catalog().by_calorie_range(120, 180)]
        assert ids == ["lanche-fruta", "lanche-manha-iogurte", "ceia-leve"]

    def test_with_tags_requires_all(self):
        ids = [t.id for t in default_catalog().with_tags(["vegetarian", "low-carb"])]
        assert ids == ["cafe-lowcarb"]

    def test_get(self):
        catalog = default_catalog()
        assert catalog.get("cafe-fit").target_kcal == 380
        assert catalog.get("missing") is None
        assert "cafe-fit" in catalog

    def test_templates_are_immutable(self):
        template = default_catalog().get("cafe-classico")
        with pytest.raises(dataclasses.FrozenInstanceError):
            template.target_kcal = 999
        assert isinstance(default_catalog().templates, tuple)

    def test_duplicate_ids_rejected(self, make_template):
        with pytest.raises(ValueError, match="Duplicate"):
            TemplateCatalog([
                make_template("same", MealType.LUNCH, 600),
                make_template("same", MealType.DINNER, 500),
            ])


class TestScaledItems:
    """Scaling template quantities to a slot allocation."""

    def test_scale_up(self):
        template = default_catalog().get("cafe-classico")
        scaled = template.scaled_items(600)
        assert [i.quantity for i in scaled[:2]] == [1.5, 3.0]
        assert template.items[0].quantity == 1.0

    def test_rounded_to_one_decimal(self, make_template):
        template = make_template("t", MealType.LUNCH, 300)
        assert template.scaled_items(100)[0].quantity == 1.3

    def test_zero_reference_rejected(self, make_template):
        template = make_template("t", MealType.LUNCH, 0)
        with pytest.raises(ValueError):
            template.scaled_items(500)


class TestCatalogFiles:
    """YAML loading and saving."""

    def test_round_trip(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        save_catalog(default_catalog(), path)
        loaded = load_catalog(path)
        assert loaded.ids == default_catalog().ids
        assert loaded.get("almoco-vegetariano").tags == frozenset(
            {"vegetarian", "tradicional", "balanceado"}
        )
        assert loaded.get("cafe-classico").items[0].category is FoodCategory.BASE

    def test_minimal_entry(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.dump({
            "templates": [
                {"id": "sopa", "meal_type": "dinner", "target_kcal": 300},
            ]
        }))
        catalog = load_catalog(path)
        template = catalog.get("sopa")
        assert template.name == "sopa"
        assert template.items == ()
        assert template.tags == frozenset()

    def test_missing_templates_list(self):
        with pytest.raises(ValueError, match="templates"):
            catalog_from_data({"meals": []})

    def test_unknown_meal_type(self):
        with pytest.raises(ValueError, match="brunch"):
            catalog_from_data({
                "templates": [{"id": "x", "meal_type": "brunch", "target_kcal": 400}]
            })

    def test_missing_field(self):
        with pytest.raises(ValueError, match="target_kcal"):
            catalog_from_data({"templates": [{"id": "x", "meal_type": "lunch"}]})

    def test_zero_kcal_template_rejected(self):
        with pytest.raises(ValueError, match="positive target_kcal"):
            catalog_from_data({
                "templates": [{"id": "vazio", "meal_type": "dinner", "target_kcal": 0}]
            })

    def test_single_tag_string(self):
        catalog = catalog_from_data({
            "templates": [
                {"id": "sopa", "meal_type": "dinner", "target_kcal": 350, "tags": "vegetarian"}
            ]
        })
        assert catalog.get("sopa").tags == frozenset({"vegetarian"})
