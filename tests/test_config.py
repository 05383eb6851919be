"""Tests for layered settings loading."""

from __future__ import annotations

import json
import logging

from inactive_regions.config import SETTINGS_FILENAME, Settings, load_settings, resolve_workspace


class TestResolveWorkspace:
    def test_explicit(self, tmp_path):
        assert resolve_workspace(tmp_path / "repo") == tmp_path / "repo"

    def test_environment(self, tmp_path):
        assert resolve_workspace() == tmp_path

    def test_cwd_fallback(self, monkeypatch, tmp_path):
        monkeypatch.delenv("INACTIVE_REGIONS_WORKSPACE")
        monkeypatch.chdir(tmp_path)
        assert resolve_workspace() == tmp_path


class TestLoadSettings:
    def test_defaults(self):
        assert load_settings() == Settings(
            inactive_region_opacity=0.55, inactive_token_type="comment"
        )

    def test_workspace_file(self, tmp_path):
        (tmp_path / SETTINGS_FILENAME).write_text(
            json.dumps({"inactiveRegionOpacity": 0.3, "inactiveTokenType": "inactive"})
        )
        assert load_settings(tmp_path) == Settings(
            inactive_region_opacity=0.3, inactive_token_type="inactive"
        )

    def test_environment_overrides_file(self, monkeypatch, tmp_path):
        (tmp_path / SETTINGS_FILENAME).write_text(json.dumps({"inactiveRegionOpacity": 0.3}))
        monkeypatch.setenv("INACTIVE_REGIONS_OPACITY", "0.8")
        monkeypatch.setenv("INACTIVE_REGIONS_TOKEN_TYPE", " disabled ")

        settings = load_settings()

        assert settings.inactive_region_opacity == 0.8
        assert settings.inactive_token_type == "disabled"

    def test_invalid_opacity_falls_back(self, monkeypatch, tmp_path, caplog):
        (tmp_path / SETTINGS_FILENAME).write_text(json.dumps({"inactiveRegionOpacity": 0.4}))
        monkeypatch.setenv("INACTIVE_REGIONS_OPACITY", "dim")

        with caplog.at_level(logging.WARNING, logger="inactive_regions.config"):
            settings = load_settings()

        assert settings.inactive_region_opacity == 0.4
        assert "non-numeric" in caplog.text

    def test_out_of_range_opacity(self, tmp_path):
        (tmp_path / SETTINGS_FILENAME).write_text(json.dumps({"inactiveRegionOpacity": 1.5}))
        assert load_settings(tmp_path).inactive_region_opacity == 0.55

    def test_blank_token_type_ignored(self, tmp_path):
        (tmp_path / SETTINGS_FILENAME).write_text(json.dumps({"inactiveTokenType": "  "}))
        assert load_settings(tmp_path).inactive_token_type == "comment"

    def test_unreadable_file(self, tmp_path, caplog):
        (tmp_path / SETTINGS_FILENAME).write_text("{not json")
        with caplog.at_level(logging.WARNING, logger="inactive_regions.config"):
            assert load_settings(tmp_path) == Settings()
        assert "Failed reading" in caplog.text

    def test_non_object_file(self, tmp_path):
        (tmp_path / SETTINGS_FILENAME).write_text("[0.3]")
        assert load_settings(tmp_path) == Settings()
