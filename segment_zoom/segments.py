"""Zoom segment models and the segment locator."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

__all__ = ["AutoMode", "ManualMode", "SegmentsCursor", "ZoomMode", "ZoomSegment"]


class AutoMode(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["auto"] = "auto"


class ManualMode(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["manual"] = "manual"
    x: float = Field(..., ge=0.0, le=1.0, description="Focus x in normalized frame coordinates.")
    y: float = Field(..., ge=0.0, le=1.0, description="Focus y in normalized frame coordinates.")


ZoomMode = Union[AutoMode, ManualMode]


class ZoomSegment(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: float
    end: float
    amount: float = Field(1.5, ge=1.0, description="Zoom factor applied on both axes.")
    mode: ZoomMode = Field(default_factory=AutoMode, discriminator="type")

    @field_validator("mode", mode="before")
    @classmethod
    def _expand_mode_shorthand(cls, value):
        if isinstance(value, str):
            return {"type": value.lower()}
        return value

    @model_validator(mode="after")
    def _check_span(self) -> "ZoomSegment":
        if not self.start < self.end:
            raise ValueError(f"segment start ({self.start}) must be before end ({self.end})")
        return self

    def focus(self) -> Tuple[float, float]:
        """Focus point of the zoom; ``auto`` pins it to the frame origin."""

        if isinstance(self.mode, ManualMode):
            return self.mode.x, self.mode.y
        return 0.0, 0.0


@dataclass(frozen=True)
class SegmentsCursor:
    """Where ``time`` falls on a segment timeline.

    ``segment_index`` points at the segment in effect (``start < time <= end``)
    and ``prev_index`` at the most recently completed one.  Both index into
    ``segments``, which is never copied or modified.
    """

    time: float
    segment_index: Optional[int]
    prev_index: Optional[int]
    segments: Sequence[ZoomSegment]

    @classmethod
    def new(cls, time: float, segments: Sequence[ZoomSegment]) -> "SegmentsCursor":
        for idx, seg in enumerate(segments):
            if seg.start < time <= seg.end:
                return cls(time, idx, idx - 1 if idx > 0 else None, segments)
        for idx in range(len(segments) - 1, -1, -1):
            if segments[idx].end <= time:
                return cls(time, None, idx, segments)
        return cls(time, None, None, segments)

    @property
    def segment(self) -> Optional[ZoomSegment]:
        return None if self.segment_index is None else self.segments[self.segment_index]

    @property
    def prev_segment(self) -> Optional[ZoomSegment]:
        return None if self.prev_index is None else self.segments[self.prev_index]
