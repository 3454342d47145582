"""Tests for YAML-backed settings."""

from __future__ import annotations

from pathlib import Path

import yaml

from nutriplan.config import settings as settings_module
from nutriplan.config.settings import Settings, reload_settings


class TestSettings:
    """Loading, saving and defaults."""

    def test_missing_file_gives_defaults(self, tmp_path):
        settings = Settings.load(tmp_path / "absent.yaml")
        assert settings.planning.slot_count == 5
        assert settings.planning.match_tolerance_kcal == 150.0
        assert settings.validation.min_daily_kcal == 1200.0
        assert settings.validation.max_calorie_ratio == 1.2
        assert settings.validation.min_protein_ratio == 0.8
        assert settings.validation.min_meals_with_items == 3
        assert settings.catalog.path is None
        assert settings.defaults.output_format == "table"

    def test_partial_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({
            "planning": {"slot_count": "3"},
            "validation": {"min_daily_kcal": 1400},
            "catalog": {"path": "~/templates.yaml"},
        }))
        settings = Settings.load(path)
        assert settings.planning.slot_count == 3
        assert settings.planning.match_tolerance_kcal == 150.0
        assert settings.validation.min_daily_kcal == 1400.0
        assert settings.catalog.path == Path.home() / "templates.yaml"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert Settings.load(path).to_dict() == Settings().to_dict()

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "nested" / "config.yaml"
        settings = Settings()
        settings.defaults.output_format = "markdown"
        settings.validation.min_protein_ratio = 0.9
        settings.save(path)

        loaded = Settings.load(path)
        assert loaded.defaults.output_format == "markdown"
        assert loaded.validation.min_protein_ratio == 0.9

    def test_reload_replaces_global(self, tmp_path, monkeypatch):
        monkeypatch.setattr(settings_module, "_settings", None)
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"defaults": {"output_format": "json"}}))

        reloaded = reload_settings(path)
        assert reloaded.defaults.output_format == "json"
        assert settings_module.get_settings() is reloaded
