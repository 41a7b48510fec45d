from __future__ import annotations

from typing import List

from .boid import Boid
from .config import Settings
from .neighbors import VisibleBoid, collect_visible
from .rng import DeterministicRng


def populate(settings: Settings, rng: DeterministicRng, count: int | None = None) -> List[Boid]:
    count = settings.population if count is None else count
    return [Boid.new_random(rng, settings) for _ in range(count)]


def repopulate(boids: List[Boid], settings: Settings, rng: DeterministicRng) -> None:
    """Replace every boid in place with ``settings.population`` fresh random ones."""
    boids.clear()
    boids.extend(populate(settings, rng))


def update_all(
    settings: Settings,
    boids: List[Boid],
    time_delta_ms: float,
    scratch: List[VisibleBoid] | None = None,
) -> int:
    """
    Advance every boid by ``time_delta_ms``.

    Boids are updated in index order and in place, so boids later in the list
    see the already-moved state of earlier ones. Returns the number of
    neighbor pairs that were in range during the pass.
    """

    visible: List[VisibleBoid] = [] if scratch is None else scratch
    neighbor_checks = 0
    for index, boid in enumerate(boids):
        collect_visible(boids, index, settings.visible_range, visible)
        neighbor_checks += len(visible)
        boid.update(settings, visible, time_delta_ms)
    visible.clear()
    return neighbor_checks
