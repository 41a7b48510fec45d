from __future__ import annotations

import logging
from time import perf_counter
from typing import List, Optional

from .boid import Boid
from .config import SIZE, Settings
from .flock import populate, repopulate, update_all
from .metrics import FrameMetrics
from .neighbors import VisibleBoid
from .rng import DeterministicRng
from .snapshot import BoidSnapshot, Snapshot

logger = logging.getLogger(__name__)


class Simulation:
    """Drives a flock from a stream of frame timestamps."""

    def __init__(self, settings: Settings, seed: Optional[int] = None):
        self._settings = settings
        self._rng = DeterministicRng(seed)
        self._boids: List[Boid] = populate(settings, self._rng)
        self._visible_scratch: List[VisibleBoid] = []
        self._last_timestamp_ms: Optional[float] = None
        self._paused = False
        self._frame = 0
        self._generation = 0
        self._metrics: FrameMetrics | None = None

    @property
    def boids(self) -> List[Boid]:
        return self._boids

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def metrics(self) -> FrameMetrics | None:
        return self._metrics

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        if self._paused:
            self._paused = False
            # The time spent paused must not turn into one large jump.
            self._last_timestamp_ms = None

    def reset(self) -> None:
        self._rng.reset()
        self._frame = 0
        self._generation = 0
        self._last_timestamp_ms = None
        repopulate(self._boids, self._settings, self._rng)

    def apply_settings(self, settings: Settings) -> None:
        self._settings = settings
        self.next_generation()

    def next_generation(self) -> None:
        self._generation += 1
        self._last_timestamp_ms = None
        repopulate(self._boids, self._settings, self._rng)
        logger.info("Generation %d: %d boids", self._generation, len(self._boids))

    def tick(self, timestamp_ms: float) -> FrameMetrics | None:
        if self._paused:
            return None
        if self._last_timestamp_ms is None:
            time_delta_ms = 0.0
        else:
            time_delta_ms = timestamp_ms - self._last_timestamp_ms
        self._last_timestamp_ms = timestamp_ms

        start = perf_counter()
        neighbor_checks = update_all(self._settings, self._boids, time_delta_ms, self._visible_scratch)
        elapsed_ms = (perf_counter() - start) * 1000.0

        population = len(self._boids)
        speed_sum = 0.0
        for boid in self._boids:
            speed_sum += boid.velocity.length()
        self._metrics = FrameMetrics(
            frame=self._frame,
            population=population,
            neighbor_checks=neighbor_checks,
            average_speed=speed_sum / population if population else 0.0,
            time_delta_ms=time_delta_ms,
            tick_duration_ms=elapsed_ms,
        )
        self._frame += 1
        return self._metrics

    def snapshot(self) -> Snapshot:
        return Snapshot(
            frame=self._frame,
            generation=self._generation,
            width=SIZE[0],
            height=SIZE[1],
            boids=[self._boid_snapshot(boid) for boid in self._boids],
        )

    @staticmethod
    def _boid_snapshot(boid: Boid) -> BoidSnapshot:
        return BoidSnapshot(
            x=boid.position.x,
            y=boid.position.y,
            heading=boid.heading,
            speed=boid.velocity.length(),
            radius=boid.radius,
            hue=boid.hue,
            color=boid.color(),
            points=[(point.x, point.y) for point in boid.polygon()],
        )
