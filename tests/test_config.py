"""Tests for segment_zoom.config."""
from __future__ import annotations

import pytest
from pathlib import Path
from pydantic import ValidationError

from segment_zoom.config import AppConfig, CurveConfig, RenderConfig, ZoomConfig, load_config
from segment_zoom.segments import ZoomSegment


# --- load_config ----------------------------------------------------------

class TestLoadConfig:
    def test_missing_file_returns_defaults(self, tmp_path):
        cfg = load_config(tmp_path / "nonexistent.yaml")
        assert isinstance(cfg, AppConfig)
        assert cfg.zoom.duration == 1.0

    def test_load_from_file(self, config_yaml):
        cfg = load_config(config_yaml)
        assert cfg.paths.output_dir == Path("results")
        assert cfg.output_dir == Path("results")
        assert cfg.zoom.duration == 0.5
        assert cfg.zoom.ease_in.as_tuple() == (0.0, 0.0, 1.0, 1.0)
        assert cfg.render.fps == 24.0

    def test_defaults_preserved(self, config_yaml):
        cfg = load_config(config_yaml)
        assert cfg.zoom.ease_out.as_tuple() == (0.5, 0.0, 0.5, 1.0)
        assert cfg.render.workers == 1
        assert cfg.paths.timeline == Path("timeline.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path).zoom.duration == 1.0

    def test_invalid_curve_in_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("zoom:\n  ease_out:\n    x1: 2.0\n    y1: 0.0\n    x2: 0.5\n    y2: 1.0\n")
        with pytest.raises(ValidationError, match="bezier x values"):
            load_config(path)


# --- AppConfig defaults ---------------------------------------------------

class TestAppConfigDefaults:
    def test_default_construction(self):
        cfg = AppConfig()
        assert cfg.zoom.ease_in.as_tuple() == (0.1, 0.0, 0.3, 1.0)
        assert cfg.zoom.ease_out.as_tuple() == (0.5, 0.0, 0.5, 1.0)
        assert cfg.render.fps == 30.0
        assert cfg.paths.output_dir == Path("out")

    def test_build_interpolator_uses_settings(self, config_yaml):
        interpolator = load_config(config_yaml).build_interpolator()
        assert interpolator.duration == 0.5
        segments = [ZoomSegment(start=1.0, end=3.0, amount=2.0)]
        assert interpolator(1.25, segments).progress == pytest.approx(0.5)


# --- Validators -----------------------------------------------------------

class TestValidators:
    def test_curve_rejects_bad_x(self):
        with pytest.raises(ValidationError, match="bezier x values"):
            CurveConfig(x1=0.2, y1=0.0, x2=-0.1, y2=1.0)

    def test_curve_allows_overshoot(self):
        curve = CurveConfig(x1=0.3, y1=-0.4, x2=0.7, y2=1.4)
        assert curve.y1 == -0.4

    def test_duration_positive(self):
        with pytest.raises(ValidationError):
            ZoomConfig(duration=0.0)

    def test_fps_positive(self):
        with pytest.raises(ValidationError):
            RenderConfig(fps=0)

    def test_workers_at_least_one(self):
        with pytest.raises(ValidationError):
            RenderConfig(workers=0)

    def test_assignment_is_validated(self):
        render = RenderConfig()
        with pytest.raises(ValidationError):
            render.fps = 0.0
        with pytest.raises(ValidationError):
            render.workers = 0
        render.fps = 12.0
        assert render.fps == 12.0
