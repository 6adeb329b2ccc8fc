"""Configuration models and loader for the segment zoom toolkit."""
from __future__ import annotations

from pathlib import Path
from typing import Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .easing import cubic_bezier
from .interpolate import EASE_IN, EASE_OUT, ZOOM_DURATION, ZoomInterpolator


class CurveConfig(BaseModel):
    x1: float
    y1: float
    x2: float
    y2: float

    @model_validator(mode="after")
    def validate_curve(self) -> "CurveConfig":
        cubic_bezier(*self.as_tuple())
        return self

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)


class ZoomConfig(BaseModel):
    duration: float = Field(ZOOM_DURATION, gt=0.0, description="Seconds spent entering or leaving a zoom.")
    ease_in: CurveConfig = Field(
        CurveConfig(x1=EASE_IN[0], y1=EASE_IN[1], x2=EASE_IN[2], y2=EASE_IN[3]),
        description="Curve used when zooming into a segment.",
    )
    ease_out: CurveConfig = Field(
        CurveConfig(x1=EASE_OUT[0], y1=EASE_OUT[1], x2=EASE_OUT[2], y2=EASE_OUT[3]),
        description="Curve used when zooming back out.",
    )


class RenderConfig(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    fps: float = Field(30.0, gt=0.0, description="Frame rate used when sampling a timeline.")
    workers: int = Field(1, ge=1, description="Number of threads evaluating frames.")


class PathsConfig(BaseModel):
    timeline: Path = Field(Path("timeline.yaml"), description="Zoom segment timeline.")
    output_dir: Path = Field(Path("out"), description="Base directory for derived outputs.")


class AppConfig(BaseModel):
    paths: PathsConfig = Field(default_factory=PathsConfig)
    zoom: ZoomConfig = Field(default_factory=ZoomConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)

    def build_interpolator(self) -> ZoomInterpolator:
        return ZoomInterpolator(
            duration=self.zoom.duration,
            ease_in=self.zoom.ease_in.as_tuple(),
            ease_out=self.zoom.ease_out.as_tuple(),
        )

    @property
    def output_dir(self) -> Path:
        return self.paths.output_dir


def load_config(path: Path | str) -> AppConfig:
    """Load configuration from YAML, falling back to defaults when missing."""

    cfg_path = Path(path)
    if not cfg_path.exists():
        return AppConfig()
    data = yaml.safe_load(cfg_path.read_text()) or {}
    return AppConfig.model_validate(data)
