from __future__ import annotations

import argparse
import csv
import logging
from pathlib import Path
from typing import Optional

from .config import Settings, load_settings_file
from .simulation import Simulation

logger = logging.getLogger(__name__)

_HEADER = [
    "frame",
    "population",
    "neighbor_checks",
    "avg_speed",
    "time_delta_ms",
    "tick_ms",
]


def run_headless(
    frames: int,
    seed: Optional[int],
    log_path: Optional[Path],
    frame_ms: float = 16.0,
    settings: Optional[Settings] = None,
    deterministic_log: bool = False,
) -> Simulation:
    if frame_ms <= 0:
        raise ValueError(f"frame_ms must be positive, got {frame_ms}")
    simulation = Simulation(settings or Settings(), seed=seed)
    writer = None
    csv_file = None
    if log_path:
        csv_file = Path(log_path).open("w", newline="")
        writer = csv.writer(csv_file)
        writer.writerow(_HEADER)

    try:
        for frame in range(frames):
            metrics = simulation.tick(frame * frame_ms)
            if writer and metrics is not None:
                tick_ms = 0.0 if deterministic_log else metrics.tick_duration_ms
                writer.writerow(
                    [
                        metrics.frame,
                        metrics.population,
                        metrics.neighbor_checks,
                        f"{metrics.average_speed:.4f}",
                        f"{metrics.time_delta_ms:.3f}",
                        f"{tick_ms:.3f}",
                    ]
                )
    finally:
        if csv_file:
            csv_file.close()

    logger.info("Ran %d frames with %d boids", frames, len(simulation.boids))
    return simulation


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    parser = argparse.ArgumentParser(description="Headless boids simulation")
    parser.add_argument("--frames", type=int, default=600)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--frame-ms", type=float, default=16.0, help="Milliseconds between frames")
    parser.add_argument("--settings", type=Path, default=None, help="YAML file with flock settings")
    parser.add_argument("--log", type=Path, default=None, help="CSV file to write per-frame metrics")
    parser.add_argument(
        "--deterministic-log",
        action="store_true",
        help="Write deterministic CSV (tick_ms is forced to 0.000 so identical seeds match).",
    )
    args = parser.parse_args()
    settings = load_settings_file(args.settings) if args.settings else Settings()
    run_headless(
        args.frames,
        args.seed,
        args.log,
        frame_ms=args.frame_ms,
        settings=settings,
        deterministic_log=args.deterministic_log,
    )


if __name__ == "__main__":
    main()
