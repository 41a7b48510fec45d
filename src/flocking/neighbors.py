from __future__ import annotations

from typing import TYPE_CHECKING, List, NamedTuple, Sequence

from pygame.math import Vector2

if TYPE_CHECKING:
    from .boid import Boid


class VisibleBoid(NamedTuple):
    boid: "Boid"
    offset: Vector2
    distance: float


def collect_visible(
    boids: Sequence["Boid"],
    index: int,
    visible_range: float,
    out: List[VisibleBoid] | None = None,
) -> List[VisibleBoid]:
    """
    Collect every boid other than ``boids[index]`` within ``visible_range`` of it.

    Brute-force scan in index order. Each entry carries the offset from the
    viewer and its length so the steering rules don't recompute them.
    """

    if out is None:
        out = []
    else:
        out.clear()
    position = boids[index].position
    pos_x = position.x
    pos_y = position.y
    append = out.append

    for other_index, other in enumerate(boids):
        if other_index == index:
            continue
        offset = Vector2(other.position.x - pos_x, other.position.y - pos_y)
        distance = offset.length()
        if distance > visible_range:
            continue
        append(VisibleBoid(other, offset, distance))
    return out
