"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".nutriplan"


@dataclass
class PlanningConfig:
    """Plan assembly configuration."""

    slot_count: int = 5
    match_tolerance_kcal: float = 150.0


@dataclass
class ValidationConfig:
    """Thresholds for advisory plan validation."""

    min_daily_kcal: float = 1200.0        # Absolute safety floor
    max_calorie_ratio: float = 1.2        # Warn above target * ratio
    min_protein_ratio: float = 0.8        # Warn below protein target * ratio
    min_meals_with_items: int = 3


@dataclass
class CatalogConfig:
    """Meal template catalog configuration."""

    path: Optional[Path] = None  # None -> built-in templates


@dataclass
class DefaultsConfig:
    """Default values for various operations."""

    output_format: str = "table"  # "table", "json", "markdown"


@dataclass
class Settings:
    """Main application settings."""

    planning: PlanningConfig = field(default_factory=PlanningConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.nutriplan/config.yaml

        Returns:
            Settings instance
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        # Parse planning config
        if "planning" in data:
            plan_data = data["planning"]
            if "slot_count" in plan_data:
                settings.planning.slot_count = int(plan_data["slot_count"])
            if "match_tolerance_kcal" in plan_data:
                settings.planning.match_tolerance_kcal = float(
                    plan_data["match_tolerance_kcal"]
                )

        # Parse validation thresholds
        if "validation" in data:
            val_data = data["validation"]
            if "min_daily_kcal" in val_data:
                settings.validation.min_daily_kcal = float(val_data["min_daily_kcal"])
            if "max_calorie_ratio" in val_data:
                settings.validation.max_calorie_ratio = float(
                    val_data["max_calorie_ratio"]
                )
            if "min_protein_ratio" in val_data:
                settings.validation.min_protein_ratio = float(
                    val_data["min_protein_ratio"]
                )
            if "min_meals_with_items" in val_data:
                settings.validation.min_meals_with_items = int(
                    val_data["min_meals_with_items"]
                )

        # Parse catalog config
        if "catalog" in data:
            cat_data = data["catalog"]
            if cat_data.get("path"):
                settings.catalog.path = Path(cat_data["path"]).expanduser()

        # Parse defaults
        if "defaults" in data:
            def_data = data["defaults"]
            if "output_format" in def_data:
                settings.defaults.output_format = def_data["output_format"]

        return settings

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.nutriplan/config.yaml
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def to_dict(self) -> dict:
        return {
            "planning": {
                "slot_count": self.planning.slot_count,
                "match_tolerance_kcal": self.planning.match_tolerance_kcal,
            },
            "validation": {
                "min_daily_kcal": self.validation.min_daily_kcal,
                "max_calorie_ratio": self.validation.max_calorie_ratio,
                "min_protein_ratio": self.validation.min_protein_ratio,
                "min_meals_with_items": self.validation.min_meals_with_items,
            },
            "catalog": {
                "path": str(self.catalog.path) if self.catalog.path else None,
            },
            "defaults": {
                "output_format": self.defaults.output_format,
            },
        }


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings(config_path: Optional[Path] = None) -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load(config_path)
    return _settings
