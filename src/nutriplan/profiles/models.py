"""Client profile model used as input to every nutrition calculation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional


class InvalidProfile(ValueError):
    """Raised when a client profile is missing data or holds implausible values."""


class Gender(Enum):
    """Biological sex used by the basal expenditure formula."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(Enum):
    """Activity level used to scale basal expenditure."""

    SEDENTARY = "sedentary"          # Little or no exercise
    LIGHT = "light"                  # Light exercise 1-3 days/week
    MODERATE = "moderate"            # Moderate exercise 3-5 days/week
    INTENSE = "intense"              # Hard exercise 6-7 days/week
    VERY_INTENSE = "very_intense"    # Very hard exercise, physical job


class Goal(Enum):
    """Nutrition goal agreed between client and professional."""

    MAINTENANCE = "maintenance"
    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    HEALTH = "health"


# Plausible human ranges (inclusive). Values outside are rejected, not clamped.
AGE_RANGE = (10, 120)
WEIGHT_KG_RANGE = (30.0, 300.0)
HEIGHT_CM_RANGE = (100.0, 250.0)


def _parse_enum(enum_cls: type[Enum], value: Any, field_name: str) -> Any:
    if isinstance(value, enum_cls):
        return value
    if value is None:
        raise InvalidProfile(f"{field_name} is required")
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidProfile(
            f"{field_name} must be one of ({allowed}), got '{value}'"
        ) from None


def _text_items(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = (value,)
    elif not isinstance(value, (list, tuple, set, frozenset)):
        raise InvalidProfile(f"{field_name} must be a list of text entries, got {value!r}")
    for entry in value:
        if not isinstance(entry, str):
            raise InvalidProfile(f"{field_name} entries must be text, got {entry!r}")
    return tuple(value)


def _check_number(value: Any, field_name: str, bounds: tuple[float, float]) -> None:
    if value is None:
        raise InvalidProfile(f"{field_name} is required")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidProfile(f"{field_name} must be a number, got {value!r}")
    low, high = bounds
    if not low <= value <= high:
        raise InvalidProfile(
            f"{field_name} must be between {low:g} and {high:g}, got {value!r}"
        )


@dataclass(frozen=True)
class ClientProfile:
    """Anthropometric and goal data for one client.

    Enum fields accept their string values (``"male"``, ``"weight_loss"``...)
    and are normalised on construction. Construction fails with
    ``InvalidProfile`` for unknown enum values or out-of-range numbers.

    Attributes:
        age: Age in whole years (10-120)
        gender: Gender used by the basal formula (male/female only)
        height_cm: Height in centimetres (100-250)
        weight_kg: Weight in kilograms (30-300)
        activity_level: Activity level
        goal: Nutrition goal
        dietary_restrictions: Restriction tags such as "vegetarian" or "low_carb"
        name: Display name passed on to generative plan sources
        target_weight_kg: Optional weight the client is working towards
        allergies: Free-text allergy list
        dislikes: Foods the client does not eat
        meal_preferences: Preferred cuisines or foods
        medical_conditions: Conditions the professional has recorded
        notes: Free-text professional notes
    """

    age: int
    gender: Gender
    height_cm: float
    weight_kg: float
    activity_level: ActivityLevel
    goal: Goal
    dietary_restrictions: frozenset[str] = field(default_factory=frozenset)
    name: str = ""
    target_weight_kg: Optional[float] = None
    allergies: tuple[str, ...] = ()
    dislikes: tuple[str, ...] = ()
    meal_preferences: tuple[str, ...] = ()
    medical_conditions: tuple[str, ...] = ()
    notes: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "gender", _parse_enum(Gender, self.gender, "gender"))
        object.__setattr__(
            self,
            "activity_level",
            _parse_enum(ActivityLevel, self.activity_level, "activity_level"),
        )
        object.__setattr__(self, "goal", _parse_enum(Goal, self.goal, "goal"))
        restrictions = _text_items(self.dietary_restrictions, "dietary_restrictions")
        object.__setattr__(
            self,
            "dietary_restrictions",
            frozenset(r.strip().lower() for r in restrictions if r.strip()),
        )
        for name in ("allergies", "dislikes", "meal_preferences", "medical_conditions"):
            object.__setattr__(self, name, _text_items(getattr(self, name), name))
        if isinstance(self.age, float) and self.age.is_integer():
            object.__setattr__(self, "age", int(self.age))
        validate_profile(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClientProfile":
        """Build a profile from a plain mapping (YAML, JSON or CLI input).

        Numeric strings are accepted; anything that cannot be read as a
        number raises InvalidProfile.
        """
        def number(key: str, cast: type) -> Any:
            raw = data.get(key)
            if raw is None or isinstance(raw, bool):
                return raw
            try:
                return cast(raw)
            except (TypeError, ValueError):
                raise InvalidProfile(f"{key} must be a number, got {raw!r}") from None

        return cls(
            age=number("age", float),
            gender=data.get("gender"),
            height_cm=number("height_cm", float),
            weight_kg=number("weight_kg", float),
            activity_level=data.get("activity_level"),
            goal=data.get("goal"),
            dietary_restrictions=data.get("dietary_restrictions"),
            name=data.get("name") or "",
            target_weight_kg=number("target_weight_kg", float),
            allergies=data.get("allergies"),
            dislikes=data.get("dislikes"),
            meal_preferences=data.get("meal_preferences"),
            medical_conditions=data.get("medical_conditions"),
            notes=data.get("notes") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dict."""
        return {
            "name": self.name,
            "age": self.age,
            "gender": self.gender.value,
            "height_cm": self.height_cm,
            "weight_kg": self.weight_kg,
            "activity_level": self.activity_level.value,
            "goal": self.goal.value,
            "target_weight_kg": self.target_weight_kg,
            "dietary_restrictions": sorted(self.dietary_restrictions),
            "allergies": list(self.allergies),
            "dislikes": list(self.dislikes),
            "meal_preferences": list(self.meal_preferences),
            "medical_conditions": list(self.medical_conditions),
            "notes": self.notes,
        }


def validate_profile(profile: ClientProfile) -> ClientProfile:
    """Check that a profile is usable for calculations.

    Args:
        profile: Profile to check

    Returns:
        The same profile, for chaining

    Raises:
        InvalidProfile: If a field is missing, has the wrong type or is out of range
    """
    if not isinstance(profile, ClientProfile):
        raise InvalidProfile(f"expected a ClientProfile, got {type(profile).__name__}")
    _check_number(profile.age, "age", AGE_RANGE)
    if isinstance(profile.age, float) and not profile.age.is_integer():
        raise InvalidProfile(f"age must be a whole number of years, got {profile.age!r}")
    _check_number(profile.weight_kg, "weight_kg", WEIGHT_KG_RANGE)
    _check_number(profile.height_cm, "height_cm", HEIGHT_CM_RANGE)
    if profile.target_weight_kg is not None:
        _check_number(profile.target_weight_kg, "target_weight_kg", WEIGHT_KG_RANGE)
    if not isinstance(profile.gender, Gender):
        raise InvalidProfile(f"unrecognised gender: {profile.gender!r}")
    if not isinstance(profile.activity_level, ActivityLevel):
        raise InvalidProfile(f"unrecognised activity_level: {profile.activity_level!r}")
    if not isinstance(profile.goal, Goal):
        raise InvalidProfile(f"unrecognised goal: {profile.goal!r}")
    return profile
