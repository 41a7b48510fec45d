from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(slots=True)
class BoidSnapshot:
    x: float
    y: float
    heading: float
    speed: float
    radius: float
    hue: float
    color: str
    points: List[Tuple[float, float]] = field(default_factory=list)


@dataclass(slots=True)
class Snapshot:
    frame: int
    generation: int
    width: float
    height: float
    boids: List[BoidSnapshot]
