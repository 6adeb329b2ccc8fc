"""Eased zoom state for a playback time on a segment timeline.

Every query is classified by :class:`~segment_zoom.segments.SegmentsCursor`
into the segment in effect (if any) and the most recently completed one.
From that pair the interpolator picks one of the transitions below; each
transition lasts ``duration`` seconds regardless of segment length.

* nothing around: no zoom.
* only a completed segment: zoom out of it with ``ease_out``.
* only an active segment, or a gap of at least ``duration`` before it: zoom
  in from the full frame with ``ease_in``.
* back-to-back segments: stay fully zoomed and slide from the previous
  segment's bounds to the new ones.
* a gap shorter than ``duration``: the zoom-out was cut short, so the zoom-in
  starts from wherever the zoom-out had reached at the new segment's start.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from loguru import logger

from .easing import Easing, clamp_unit, cubic_bezier
from .geometry import XY, SegmentBounds
from .segments import SegmentsCursor, ZoomSegment

__all__ = [
    "EASE_IN",
    "EASE_OUT",
    "ZOOM_DURATION",
    "InterpolatedZoom",
    "ZoomInterpolator",
    "bounds_for_segment",
    "interpolate",
]

ZOOM_DURATION = 1.0
EASE_IN = (0.1, 0.0, 0.3, 1.0)
EASE_OUT = (0.5, 0.0, 0.5, 1.0)


def bounds_for_segment(segment: ZoomSegment) -> SegmentBounds:
    """Bounds that keep the segment's focus point fixed on screen."""

    fx, fy = segment.focus()
    position = XY(fx, fy)
    center_diff = position * segment.amount - position
    return SegmentBounds(
        XY(0.0, 0.0) - center_diff,
        XY(segment.amount, segment.amount) - center_diff,
    )


@dataclass(frozen=True)
class InterpolatedZoom:
    # ratio of the current zoom to the full zoom of the segment in effect
    progress: float
    bounds: SegmentBounds


class ZoomInterpolator:
    """Evaluate zoom transitions with a fixed duration and pair of curves.

    Curves are built once here, so invalid control points surface when the
    interpolator is created rather than while frames are being rendered.
    Instances hold no per-query state and can be shared between threads.
    """

    def __init__(
        self,
        duration: float = ZOOM_DURATION,
        ease_in: Tuple[float, float, float, float] = EASE_IN,
        ease_out: Tuple[float, float, float, float] = EASE_OUT,
    ) -> None:
        if duration <= 0.0:
            raise ValueError(f"zoom duration must be positive, got {duration}")
        self.duration = duration
        self.ease_in: Easing = cubic_bezier(*ease_in)
        self.ease_out: Easing = cubic_bezier(*ease_out)

    def _ratio(self, elapsed: float) -> float:
        return clamp_unit(elapsed / self.duration)

    def _direct(self, cursor: SegmentsCursor) -> Optional[InterpolatedZoom]:
        """Resolve every transition except an interrupted zoom-out."""

        default = SegmentBounds.default()
        prev, segment = cursor.prev_segment, cursor.segment

        if segment is None and prev is None:
            return InterpolatedZoom(0.0, default)

        if segment is None:
            zoom_t = self.ease_out(self._ratio(cursor.time - prev.end))
            return InterpolatedZoom(1.0 - zoom_t, bounds_for_segment(prev).lerp(default, zoom_t))

        zoom_t = self.ease_in(self._ratio(cursor.time - segment.start))
        if prev is None or segment.start - prev.end >= self.duration:
            return InterpolatedZoom(zoom_t, default.lerp(bounds_for_segment(segment), zoom_t))

        if segment.start == prev.end:
            return InterpolatedZoom(1.0, bounds_for_segment(prev).lerp(bounds_for_segment(segment), zoom_t))

        return None

    def at_cursor(self, cursor: SegmentsCursor) -> InterpolatedZoom:
        # (zoom_t, target bounds) for each interrupted zoom-out, newest first
        pending: List[Tuple[float, SegmentBounds]] = []
        while True:
            result = self._direct(cursor)
            if result is not None:
                break
            segment = cursor.segment
            zoom_t = self.ease_in(self._ratio(cursor.time - segment.start))
            pending.append((zoom_t, bounds_for_segment(segment)))
            cursor = SegmentsCursor.new(segment.start, cursor.segments)

        if len(pending) > 1:
            logger.debug("Resolved {} chained zoom transitions at t={}", len(pending), cursor.time)

        for zoom_t, target in reversed(pending):
            result = InterpolatedZoom(
                result.progress * (1.0 - zoom_t) + zoom_t,
                result.bounds.lerp(target, zoom_t),
            )
        return result

    def __call__(self, time: float, segments: Sequence[ZoomSegment]) -> InterpolatedZoom:
        return self.at_cursor(SegmentsCursor.new(time, segments))


_DEFAULT_INTERPOLATOR = ZoomInterpolator()


def interpolate(time: float, segments: Sequence[ZoomSegment]) -> InterpolatedZoom:
    """Zoom state at ``time`` using the default duration and curves."""

    return _DEFAULT_INTERPOLATOR(time, segments)
