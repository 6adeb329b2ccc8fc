"""Console entry point for the segment zoom toolkit."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from loguru import logger

from .config import AppConfig, load_config
from .timeline import frame_times, load_timeline, sample_timeline, summary_stats, write_samples


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(sys.stderr, level=level)


def _load_config(path: Path) -> AppConfig:
    if not path.exists():
        logger.info("Using default configuration; no {} found", path)
    return load_config(path)


def _resolve_timeline_path(config: AppConfig, override: str | None) -> Path:
    return Path(override) if override else Path(config.paths.timeline)


def cmd_at(config: AppConfig, args: argparse.Namespace) -> None:
    timeline = load_timeline(_resolve_timeline_path(config, args.timeline))
    zoom = config.build_interpolator()(args.time, timeline.segments)
    tl = zoom.bounds.top_left
    br = zoom.bounds.bottom_right
    logger.debug("Zoom at {}: progress={}", args.time, zoom.progress)
    print(f"time={args.time:.4f} progress={zoom.progress:.6f} bounds=({tl.x:.6f}, {tl.y:.6f})-({br.x:.6f}, {br.y:.6f})")


def cmd_sample(config: AppConfig, args: argparse.Namespace) -> None:
    if args.fps is not None:
        config.render.fps = args.fps
    if args.workers is not None:
        config.render.workers = args.workers
    timeline = load_timeline(_resolve_timeline_path(config, args.timeline))
    duration = args.duration if args.duration is not None else timeline.end + config.zoom.duration
    out_csv = Path(args.out or (config.output_dir / "zoom_samples.csv"))

    interpolator = config.build_interpolator()
    logger.debug(
        "Zoom duration {}s, ease_in {}, ease_out {}",
        config.zoom.duration,
        config.zoom.ease_in.as_tuple(),
        config.zoom.ease_out.as_tuple(),
    )
    times = frame_times(duration, config.render.fps)
    samples = sample_timeline(interpolator, timeline.segments, times, workers=config.render.workers)
    write_samples(out_csv, samples)
    stats = summary_stats(samples)
    logger.info(
        "Wrote {} samples to {} (peak progress {}, zoomed {:.1%})",
        stats["count"],
        out_csv,
        stats["peak_progress"],
        stats["zoomed_fraction"],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="segzoom", description="Eased zoom transitions for segment timelines")
    parser.add_argument("--config", default="config.yaml", help="Path to YAML configuration file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    at_p = sub.add_parser("at", help="Print the zoom state at one time")
    at_p.add_argument("time", type=float)
    at_p.add_argument("--timeline")
    at_p.set_defaults(func=cmd_at)

    sample_p = sub.add_parser("sample", help="Sample every frame of a timeline to CSV")
    sample_p.add_argument("--timeline")
    sample_p.add_argument("--out")
    sample_p.add_argument("--fps", type=float)
    sample_p.add_argument("--duration", type=float)
    sample_p.add_argument("--workers", type=int)
    sample_p.set_defaults(func=cmd_sample)

    return parser


def main(argv: List[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    config = _load_config(Path(args.config))
    args.func(config, args)


if __name__ == "__main__":
    main()
