"""Tests for lanedash.config — defaults, overrides and validation."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from game_engine import Playfield, Rules
from lanedash.config.defaults import default_settings
from lanedash.config.loader import load_settings
from lanedash.config.schema import Settings
from lanedash.core.doctor import run_doctor


class TestSettings:
    def test_defaults_match_engine(self):
        settings = default_settings()
        assert settings.playfield == Playfield()
        assert settings.rules == Rules()
        assert settings.fps == 60
        assert settings.sim_workers >= 1

    def test_overrides(self):
        settings = load_settings(width=500, seed=3)
        assert settings.playfield.width == 500
        assert settings.playfield.road_width == 200
        assert settings.seed == 3

    def test_with_overrides_returns_copy(self):
        base = Settings()
        changed = base.with_overrides(fps=30)
        assert base.fps == 60
        assert changed.fps == 30

    def test_road_wider_than_field_rejected(self):
        with pytest.raises(ValueError, match="road_width"):
            load_settings(road_width=400)

    def test_road_narrower_than_car_rejected(self):
        with pytest.raises(ValueError, match="fit the car"):
            load_settings(road_width=20)

    def test_bad_fps_rejected(self):
        with pytest.raises(ValueError, match="fps"):
            load_settings(fps=0)


class TestDoctor:
    def test_doctor_reports_config(self):
        checks = {c.name: c for c in run_doctor(load_settings())}
        assert checks["config"].ok
        assert "pygame" in checks and "numpy" in checks

    def test_doctor_flags_bad_config(self):
        bad = Settings(playfield=Playfield(width=100, road_width=150))
        checks = {c.name: c for c in run_doctor(bad)}
        assert not checks["config"].ok
