"""Tests for energy expenditure and macronutrient targets."""

from __future__ import annotations

import pytest

from nutriplan.profiles.energy import (
    basal_expenditure,
    calculate_energy_targets,
    macro_distribution,
    round_half_up,
    target_calories,
    total_expenditure,
)
from nutriplan.profiles.models import (
    ActivityLevel,
    ClientProfile,
    Goal,
    InvalidProfile,
    validate_profile,
)


def profile_with(**overrides) -> ClientProfile:
    data = {
        "age": 30,
        "gender": "male",
        "height_cm": 180,
        "weight_kg": 80,
        "activity_level": "moderate",
        "goal": "maintenance",
    }
    data.update(overrides)
    return ClientProfile(**data)


class TestRounding:
    """Half-up rounding of calorie and gram figures."""

    def test_halves_round_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(419.5) == 420

    def test_negative_halves_round_towards_positive(self):
        assert round_half_up(-0.5) == 0
        assert round_half_up(-17.0) == -17
        assert round_half_up(-1.6) == -2


class TestBasalExpenditure:
    """Tests for the revised Mifflin-St Jeor equation."""

    def test_male_formula(self, male_profile):
        expected = 88.362 + 13.397 * 80 + 4.799 * 180 - 5.677 * 30
        assert basal_expenditure(male_profile) == pytest.approx(expected, abs=0.001)
        assert basal_expenditure(male_profile) == pytest.approx(1853.632, abs=0.001)

    def test_female_formula(self):
        profile = profile_with(gender="female")
        expected = 447.593 + 9.247 * 80 + 3.098 * 180 - 4.330 * 30
        assert basal_expenditure(profile) == pytest.approx(expected, abs=0.001)
        assert basal_expenditure(profile) == pytest.approx(1615.093, abs=0.001)

    def test_not_rounded(self, female_profile):
        assert basal_expenditure(female_profile) == pytest.approx(1383.683, abs=0.001)


class TestTotalExpenditure:
    """Tests for activity scaling."""

    def test_moderate(self, male_profile):
        assert total_expenditure(male_profile) == 2873

    def test_light(self, female_profile):
        assert total_expenditure(female_profile) == 1903

    def test_monotonic_in_activity(self):
        levels = [
            ActivityLevel.SEDENTARY,
            ActivityLevel.LIGHT,
            ActivityLevel.MODERATE,
            ActivityLevel.INTENSE,
            ActivityLevel.VERY_INTENSE,
        ]
        values = [total_expenditure(profile_with(activity_level=level)) for level in levels]
        assert values == sorted(values)
        assert len(set(values)) == len(values)


class TestTargetCalories:
    """Goal adjustments applied to TDEE."""

    @pytest.mark.parametrize(
        "goal,adjustment",
        [
            (Goal.MAINTENANCE, 0),
            (Goal.WEIGHT_LOSS, -500),
            (Goal.MUSCLE_GAIN, 300),
            (Goal.HEALTH, 0),
        ],
    )
    def test_goal_adjustment(self, goal, adjustment):
        profile = profile_with(goal=goal)
        assert target_calories(profile) == total_expenditure(profile) + adjustment

    def test_no_safety_floor(self, low_target_profile):
        assert target_calories(low_target_profile) == 782


class TestMacroDistribution:
    """Tests for protein, fat and carbohydrate targets."""

    def test_maintenance_split(self, male_profile):
        macros = macro_distribution(2873, male_profile)
        assert macros.protein_g == 144
        assert macros.fat_g == 86
        assert macros.carb_g == 381

    def test_muscle_gain_uses_higher_protein(self):
        profile = profile_with(goal="muscle_gain")
        macros = macro_distribution(target_calories(profile), profile)
        assert macros.protein_g == 160
        assert macros.fat_g == 95
        assert macros.carb_g == 420

    @pytest.mark.parametrize("goal", ["maintenance", "weight_loss", "muscle_gain", "health"])
    @pytest.mark.parametrize("weight", [50, 80, 120])
    def test_macros_add_up_to_target(self, goal, weight):
        profile = profile_with(goal=goal, weight_kg=weight)
        target = target_calories(profile)
        macros = macro_distribution(target, profile)
        assert abs(macros.kcal - target) <= 3

    def test_negative_carbohydrate_is_not_clamped(self, infeasible_profile):
        target = target_calories(infeasible_profile)
        assert target == 895
        macros = macro_distribution(target, infeasible_profile)
        assert macros.protein_g == 180
        assert macros.fat_g == 27
        assert macros.carb_g == -17
        assert not macros.is_feasible


class TestEnergyTargets:
    """Tests for the combined calculation."""

    def test_all_figures(self, female_profile):
        energy = calculate_energy_targets(female_profile)
        assert energy.total_expenditure == 1903
        assert energy.target_calories == 1903
        assert energy.macros.to_dict() == {"protein_g": 108, "carb_g": 240, "fat_g": 57}

    def test_summary(self, female_profile):
        summary = calculate_energy_targets(female_profile).summary()
        assert "TDEE: 1903 kcal/day" in summary
        assert "108g protein" in summary

    def test_idempotent(self, male_profile):
        assert calculate_energy_targets(male_profile) == calculate_energy_targets(male_profile)


class TestProfileValidation:
    """Out-of-range and malformed profiles are rejected."""

    def test_age_too_low(self):
        with pytest.raises(InvalidProfile, match="age"):
            profile_with(age=5)

    def test_weight_too_high(self):
        with pytest.raises(InvalidProfile, match="weight_kg"):
            profile_with(weight_kg=1000)

    def test_unknown_gender(self):
        with pytest.raises(InvalidProfile, match="gender"):
            profile_with(gender="other")

    def test_unknown_goal(self):
        with pytest.raises(InvalidProfile, match="goal"):
            profile_with(goal="bulk")

    def test_missing_height(self):
        with pytest.raises(InvalidProfile, match="height_cm is required"):
            profile_with(height_cm=None)

    def test_bool_is_not_a_number(self):
        with pytest.raises(InvalidProfile):
            profile_with(weight_kg=True)

    def test_fractional_age(self):
        with pytest.raises(InvalidProfile, match="whole number"):
            profile_with(age=30.5)

    def test_whole_float_age_is_accepted(self):
        assert profile_with(age=30.0).age == 30

    def test_bounds_are_inclusive(self):
        profile_with(age=10, weight_kg=30, height_cm=100)
        profile_with(age=120, weight_kg=300, height_cm=250)

    def test_validate_rejects_other_types(self):
        with pytest.raises(InvalidProfile):
            validate_profile({"age": 30})

    def test_from_dict_accepts_numeric_strings(self):
        profile = ClientProfile.from_dict({
            "age": "30",
            "gender": "Male",
            "height_cm": "180",
            "weight_kg": "80.5",
            "activity_level": "moderate",
            "goal": "weight_loss",
            "dietary_restrictions": ["Vegetarian"],
        })
        assert profile.age == 30
        assert profile.weight_kg == 80.5
        assert profile.dietary_restrictions == frozenset({"vegetarian"})

    def test_from_dict_rejects_text(self):
        with pytest.raises(InvalidProfile, match="age must be a number"):
            ClientProfile.from_dict({
                "age": "thirty",
                "gender": "male",
                "height_cm": 180,
                "weight_kg": 80,
                "activity_level": "moderate",
                "goal": "maintenance",
            })

    def test_to_dict_round_trip(self, vegetarian_profile):
        assert ClientProfile.from_dict(vegetarian_profile.to_dict()) == vegetarian_profile

    def test_single_restriction_string(self):
        profile = profile_with(dietary_restrictions="Vegetarian", allergies="amendoim")
        assert profile.dietary_restrictions == frozenset({"vegetarian"})
        assert profile.allergies == ("amendoim",)

    def test_non_text_restriction_rejected(self):
        with pytest.raises(InvalidProfile, match="dietary_restrictions entries must be text"):
            profile_with(dietary_restrictions=[1])

    def test_non_list_preferences_rejected(self):
        with pytest.raises(InvalidProfile, match="dislikes"):
            profile_with(dislikes={"fígado": True})

    def test_from_dict_rejects_text_target_weight(self, male_profile):
        data = {**male_profile.to_dict(), "target_weight_kg": "n/a"}
        with pytest.raises(InvalidProfile, match="target_weight_kg must be a number"):
            ClientProfile.from_dict(data)

    def test_target_weight_range(self, male_profile):
        with pytest.raises(InvalidProfile, match="target_weight_kg"):
            profile_with(target_weight_kg=5)
        data = {**male_profile.to_dict(), "target_weight_kg": "75"}
        assert ClientProfile.from_dict(data).target_weight_kg == 75.0

    def test_validate_does_not_modify_profile(self, male_profile):
        before = male_profile.to_dict()
        assert validate_profile(male_profile) is male_profile
        assert male_profile.to_dict() == before
        assert type(male_profile.age) is int
