"""Timeline loading, frame sampling and CSV export."""
from __future__ import annotations

import concurrent.futures
import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Sequence

import numpy as np
import yaml
from loguru import logger
from pydantic import BaseModel, Field
from tqdm import tqdm

from .geometry import SegmentBounds
from .interpolate import ZoomInterpolator
from .segments import ZoomSegment


class TimelineError(RuntimeError):
    pass


class Timeline(BaseModel):
    segments: List[ZoomSegment] = Field(default_factory=list)

    @property
    def end(self) -> float:
        return max((seg.end for seg in self.segments), default=0.0)


def _is_ordered(segments: Sequence[ZoomSegment]) -> bool:
    return all(a.end <= b.start for a, b in zip(segments, segments[1:]))


def load_timeline(path: Path) -> Timeline:
    """Read a YAML (or JSON) timeline; either ``segments: [...]`` or a bare list."""

    if not path.exists():
        raise TimelineError(f"Timeline file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text())
    except OSError as exc:
        raise TimelineError(f"Could not read timeline {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise TimelineError(f"Could not parse timeline {path}: {exc}") from exc
    if data is None:
        data = {}
    if isinstance(data, list):
        data = {"segments": data}
    timeline = Timeline.model_validate(data)
    if not _is_ordered(timeline.segments):
        logger.warning("Segments in {} are not sorted and disjoint; zoom output is undefined", path)
    logger.debug("Loaded {} zoom segments from {}", len(timeline.segments), path)
    return timeline


@dataclass
class ZoomSample:
    time: float
    progress: float
    bounds: SegmentBounds


def frame_times(duration: float, fps: float) -> np.ndarray:
    """Timestamps of every frame in ``[0, duration]``."""

    count = int(np.floor(duration * fps + 1e-9)) + 1
    return np.arange(count, dtype=np.float64) / fps


def _sample_one(interpolator: ZoomInterpolator, segments: Sequence[ZoomSegment], time: float) -> ZoomSample:
    zoom = interpolator(time, segments)
    return ZoomSample(time=time, progress=zoom.progress, bounds=zoom.bounds)


def sample_timeline(
    interpolator: ZoomInterpolator,
    segments: Sequence[ZoomSegment],
    times: Iterable[float],
    *,
    workers: int = 1,
) -> List[ZoomSample]:
    """Evaluate the zoom at each time, in order."""

    frozen = tuple(segments)
    values = [float(t) for t in times]
    if workers <= 1:
        return [_sample_one(interpolator, frozen, t) for t in tqdm(values, desc="frames", unit="frame", leave=False)]

    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        results = executor.map(lambda t: _sample_one(interpolator, frozen, t), values)
        return list(tqdm(results, total=len(values), desc="frames", unit="frame", leave=False))


def write_samples(csv_path: Path, samples: Sequence[ZoomSample]) -> None:
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    with csv_path.open("w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["time", "progress", "top_left_x", "top_left_y", "bottom_right_x", "bottom_right_y"])
        for s in samples:
            writer.writerow([f"{s.time:.4f}", f"{s.progress:.6f}", *(f"{v:.6f}" for v in s.bounds.as_tuple())])


def summary_stats(samples: Sequence[ZoomSample]) -> dict:
    if not samples:
        return {"count": 0, "peak_progress": 0.0, "zoomed_fraction": 0.0}
    progress = np.array([s.progress for s in samples])
    return {
        "count": len(samples),
        "peak_progress": round(float(progress.max()), 4),
        "zoomed_fraction": round(float(np.mean(progress > 0.0)), 4),
    }
