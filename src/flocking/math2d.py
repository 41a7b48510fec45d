from __future__ import annotations

import math
import sys
from typing import Iterable, Optional, Protocol, Tuple, TypeVar

from pygame.math import Vector2

TAU = math.tau
FRAC_TAU_3 = TAU / 3.0


class Averageable(Protocol):
    """Anything that can be summed and scaled by a float: ``float`` and ``Vector2``."""

    def __add__(self, other): ...

    def __sub__(self, other): ...

    def __mul__(self, scalar: float): ...

    def __truediv__(self, scalar: float): ...


T = TypeVar("T", bound=Averageable)


def _is_normal(value: float) -> bool:
    # IEEE normal: finite, non-zero and not subnormal.
    return math.isfinite(value) and abs(value) >= sys.float_info.min


def smallest_angle_between(source: float, target: float) -> float:
    """Signed shortest angle from ``source`` to ``target``, in ``[-pi, pi)``."""
    d = target - source
    # Python's % is already the non-negative (Euclidean) modulo for a positive divisor.
    wrapped = (d + math.pi) % TAU
    if wrapped >= TAU:
        wrapped = 0.0
    return wrapped - math.pi


def from_polar(angle: float, radius: float) -> Vector2:
    return Vector2(radius * math.cos(angle), radius * math.sin(angle))


def angle(vector: Vector2) -> float:
    return math.atan2(vector.y, vector.x)


def clamp_magnitude(vector: Vector2, max_length: float) -> Vector2:
    mag = vector.length()
    if mag > max_length:
        return vector / mag * max_length
    return vector


def mean(values: Iterable[T], zero: T = 0.0) -> Optional[T]:
    """Running average of ``values``.

    Returns ``None`` when there is nothing to average, never ``zero``.
    """
    avg = zero
    count = 0.0
    for value in values:
        count += 1.0
        avg = avg + (value - avg) / count
    if _is_normal(count):
        return avg
    return None


def weighted_mean(pairs: Iterable[Tuple[T, float]], zero: T = 0.0) -> Optional[T]:
    """``sum(value * weight) / sum(weight)`` over ``(value, weight)`` pairs.

    Returns ``None`` if the total weight is zero, infinite, subnormal or NaN.
    """
    total = zero
    total_weight = 0.0
    for value, weight in pairs:
        total = total + value * weight
        total_weight += weight
    if _is_normal(total_weight):
        return total / total_weight
    return None
