"""Shared fixtures for the segment zoom test suite."""
from __future__ import annotations

import pytest
from pathlib import Path

from segment_zoom.interpolate import ZoomInterpolator

LINEAR = (0.0, 0.0, 1.0, 1.0)


@pytest.fixture
def linear() -> ZoomInterpolator:
    """Interpolator whose curves are straight lines, so progress equals elapsed ratio."""
    return ZoomInterpolator(ease_in=LINEAR, ease_out=LINEAR)


@pytest.fixture
def eased() -> ZoomInterpolator:
    """Interpolator with the default curves."""
    return ZoomInterpolator()


@pytest.fixture
def timeline_yaml(tmp_path: Path) -> Path:
    """Write a two-segment timeline and return its path."""
    path = tmp_path / "timeline.yaml"
    path.write_text(
        "segments:\n"
        "  - start: 2.0\n"
        "    end: 4.0\n"
        "    amount: 2.5\n"
        "    mode: auto\n"
        "  - start: 4.5\n"
        "    end: 6.0\n"
        "    amount: 2.0\n"
        "    mode:\n"
        "      type: manual\n"
        "      x: 0.5\n"
        "      y: 0.25\n"
    )
    return path


@pytest.fixture
def config_yaml(tmp_path: Path) -> Path:
    """Write a minimal config.yaml and return its path."""
    cfg = tmp_path / "config.yaml"
    cfg.write_text(
        "paths:\n"
        "  output_dir: results\n"
        "zoom:\n"
        "  duration: 0.5\n"
        "  ease_in:\n"
        "    x1: 0.0\n"
        "    y1: 0.0\n"
        "    x2: 1.0\n"
        "    y2: 1.0\n"
        "render:\n"
        "  fps: 24\n"
    )
    return cfg
