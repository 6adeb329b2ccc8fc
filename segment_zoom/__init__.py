"""Eased zoom transitions for timelines of zoom segments."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .geometry import XY, SegmentBounds
from .interpolate import ZOOM_DURATION, InterpolatedZoom, ZoomInterpolator, bounds_for_segment, interpolate
from .segments import AutoMode, ManualMode, SegmentsCursor, ZoomSegment

__all__ = [
    "XY",
    "AppConfig",
    "AutoMode",
    "InterpolatedZoom",
    "ManualMode",
    "SegmentBounds",
    "SegmentsCursor",
    "ZOOM_DURATION",
    "ZoomInterpolator",
    "ZoomSegment",
    "bounds_for_segment",
    "interpolate",
    "load_config",
]

if TYPE_CHECKING:  # pragma: no cover - for static type checkers only
    from .config import AppConfig, load_config


def __getattr__(name: str) -> Any:
    if name in ("AppConfig", "load_config"):
        from .config import AppConfig as _AppConfig, load_config as _load_config

        globals().update({"AppConfig": _AppConfig, "load_config": _load_config})
        return globals()[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
