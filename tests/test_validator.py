"""Tests for advisory plan validation."""

from __future__ import annotations

from nutriplan.config.settings import ValidationConfig
from nutriplan.plans.generator import generate_meal_plan
from nutriplan.plans.validator import validate_plan


class TestValidatePlan:
    """Each warning rule in isolation."""

    def test_clean_plan(self, make_external_plan):
        plan = make_external_plan([[600], [700], [700]])
        result = validate_plan(plan)
        assert result.valid
        assert result.warnings == ()

    def test_below_daily_floor(self, make_external_plan):
        plan = make_external_plan([[400], [400], [399]], target_calories=1200)
        result = validate_plan(plan)
        assert not result.valid
        assert result.warnings == (
            "Total calories (1199 kcal) are below the recommended minimum (1200 kcal)",
        )

    def test_floor_message_never_reaches_the_minimum(self, make_external_plan):
        plan = make_external_plan([[400], [400], [399.6]], target_calories=1200)
        assert validate_plan(plan).warnings == (
            "Total calories (1199 kcal) are below the recommended minimum (1200 kcal)",
        )

    def test_floor_is_exclusive(self, make_external_plan):
        plan = make_external_plan([[400], [400], [400]], target_calories=1200)
        assert validate_plan(plan).valid

    def test_well_above_target(self, make_external_plan):
        plan = make_external_plan([[801], [800], [800]], target_calories=2000)
        result = validate_plan(plan)
        assert result.warnings == (
            "Total calories (2401 kcal) are well above the target (2000 kcal)",
        )

    def test_moderate_overshoot_is_fine(self, make_external_plan):
        plan = make_external_plan([[800], [700], [800]], target_calories=2000)
        assert validate_plan(plan).valid

    def test_low_protein(self, make_external_plan):
        plan = make_external_plan([[700], [700], [600]], protein_per_item=26.3)
        result = validate_plan(plan)
        assert result.warnings == ("Protein (79g) is below the target (100g)",)

    def test_too_few_meals_with_items(self, make_external_plan):
        plan = make_external_plan([[1000], [1000], []], protein_per_item=60)
        result = validate_plan(plan)
        assert result.warnings == ("Fewer than 3 meals per day (2 with food items)",)

    def test_empty_generated_plan(self, female_profile):
        result = validate_plan(generate_meal_plan(female_profile))
        assert not result.valid
        assert len(result.warnings) == 3
        assert "Fewer than 3 meals per day (0 with food items)" in result.warnings

    def test_custom_thresholds(self, make_external_plan):
        plan = make_external_plan([[400], [400], [400]], target_calories=1200)
        config = ValidationConfig(min_daily_kcal=1500)
        result = validate_plan(plan, config)
        assert result.warnings[0].startswith("Total calories (1200 kcal)")

    def test_to_dict(self, make_external_plan):
        result = validate_plan(make_external_plan([[2000]], protein_per_item=100))
        assert result.to_dict() == {
            "valid": False,
            "warnings": ["Fewer than 3 meals per day (1 with food items)"],
        }
