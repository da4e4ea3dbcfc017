"""Tests for the YAML-backed configuration repository."""

from __future__ import annotations

import pytest
from yaml import safe_load

from ganttline import configuration
from ganttline.configuration import (
    chart_options_from_configuration,
    get_default_configuration,
)
from ganttline.repository.configuration import CONFIGURATION_REPO


class TestLoading:
    def test_defaults_without_file(self, config_dir):
        assert CONFIGURATION_REPO.get_config() == get_default_configuration()

    def test_missing_keys_are_filled(self, config_dir):
        config_dir.mkdir(parents=True)
        configuration.APP_CONFIG_PATH.write_text("timezone: UTC\ntimeline_months: 6\n")

        config = CONFIGURATION_REPO.get_config()

        assert config["timezone"] == "UTC"
        assert config["timeline_months"] == 6
        assert config["pixels_per_day"] == get_default_configuration()["pixels_per_day"]

    def test_non_mapping_file(self, config_dir):
        config_dir.mkdir(parents=True)
        configuration.APP_CONFIG_PATH.write_text("- a\n- b\n")

        with pytest.raises(ValueError):
            CONFIGURATION_REPO.get_config()

    def test_get_config_returns_copy(self, config_dir):
        CONFIGURATION_REPO.get_config()["timezone"] = "Mars/Olympus"

        assert CONFIGURATION_REPO.get_config()["timezone"] == "local"


class TestUpdating:
    def test_update_and_flush(self, config_dir):
        CONFIGURATION_REPO.update_config(timeline_months=3, max_zoom=8.0)

        assert CONFIGURATION_REPO.flush() is True
        assert CONFIGURATION_REPO.flush() is False

        saved = safe_load(configuration.APP_CONFIG_PATH.read_text())
        assert saved["timeline_months"] == 3
        assert saved["max_zoom"] == 8.0

        CONFIGURATION_REPO.reload()
        assert CONFIGURATION_REPO.get_config()["timeline_months"] == 3

    def test_flush_without_changes(self, config_dir):
        CONFIGURATION_REPO.get_config()

        assert CONFIGURATION_REPO.flush() is False
        assert not configuration.APP_CONFIG_PATH.exists()

    def test_colors_are_merged(self, config_dir):
        CONFIGURATION_REPO.update_config(colors={"1": "#111111"})
        CONFIGURATION_REPO.update_config(colors={"2": "#222222"})

        assert CONFIGURATION_REPO.get_config()["colors"] == {
            "1": "#111111",
            "2": "#222222",
        }

    def test_remove_colors(self, config_dir):
        CONFIGURATION_REPO.update_config(colors={"1": "#111111"})
        CONFIGURATION_REPO.update_config(remove_colors=True)

        assert CONFIGURATION_REPO.get_config()["colors"] is None

    def test_title_and_grid_lines(self, config_dir):
        CONFIGURATION_REPO.update_config(chart_title="Roadmap", grid_lines="both")

        config = CONFIGURATION_REPO.get_config()
        assert config["chart_title"] == "Roadmap"
        assert config["grid_lines"] == "both"

        CONFIGURATION_REPO.update_config(chart_title="")
        assert CONFIGURATION_REPO.get_config()["chart_title"] is None


class TestChartOptions:
    def test_options_follow_configuration(self):
        config = get_default_configuration()
        config["pixels_per_day"] = 12
        config["colors"] = {"3": "#333333"}
        config["chart_title"] = "Roadmap"
        config["grid_lines"] = "none"

        options = chart_options_from_configuration(config)

        assert options["pixels_per_day"] == 12
        assert options["colors"] == {"3": "#333333"}
        assert options["chart_title"] == "Roadmap"
        assert options["grid_lines"] == "none"
        assert options["margin_top"] == 50
