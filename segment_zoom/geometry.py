"""Vector and rectangle primitives in normalized frame coordinates."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class XY:
    x: float
    y: float

    def __add__(self, other: "XY") -> "XY":
        return XY(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "XY") -> "XY":
        return XY(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> "XY":
        return XY(self.x * scale, self.y * scale)

    __rmul__ = __mul__


@dataclass(frozen=True)
class SegmentBounds:
    """Rectangle the source frame is mapped onto; ``(0,0)-(1,1)`` is no zoom."""

    top_left: XY
    bottom_right: XY

    @classmethod
    def default(cls) -> "SegmentBounds":
        return cls(XY(0.0, 0.0), XY(1.0, 1.0))

    def lerp(self, other: "SegmentBounds", t: float) -> "SegmentBounds":
        return SegmentBounds(
            self.top_left * (1.0 - t) + other.top_left * t,
            self.bottom_right * (1.0 - t) + other.bottom_right * t,
        )

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.top_left.x, self.top_left.y, self.bottom_right.x, self.bottom_right.y)
