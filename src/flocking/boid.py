from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence

from pygame.math import Vector2

from .config import SIZE, Settings
from .math2d import FRAC_TAU_3, angle, clamp_magnitude, from_polar, mean, smallest_angle_between, weighted_mean
from .neighbors import VisibleBoid
from .rng import DeterministicRng

# Converts a time delta in milliseconds into simulation distance per velocity unit.
_TIME_SCALE = 0.01

# (angle in thirds of a turn, radius multiplier) for each polygon vertex.
_SHAPE = (
    (0.0, 2.0),
    (1.0, 1.0),
    (2.0, 1.0),
)


def shape_points(radius: float, rotation: float) -> Iterator[Vector2]:
    for turn, radius_mul in _SHAPE:
        yield from_polar(turn * FRAC_TAU_3 + rotation, radius_mul * radius)


@dataclass(slots=True)
class Boid:
    position: Vector2
    velocity: Vector2
    radius: float
    hue: float

    @classmethod
    def new_random(cls, rng: DeterministicRng, settings: Settings) -> "Boid":
        max_radius = settings.min_distance / 2.0
        min_radius = max_radius / 6.0

        # by using the third power large boids become rarer
        radius = min_radius + rng.next_float() ** 3 * (max_radius - min_radius)

        return cls(
            position=Vector2(rng.next_float() * SIZE[0], rng.next_float() * SIZE[1]),
            velocity=from_polar(rng.next_angle(), settings.max_speed),
            radius=radius,
            hue=rng.next_angle(),
        )

    @property
    def heading(self) -> float:
        return angle(self.velocity)

    def coherence(self, visible: Sequence[VisibleBoid], factor: float) -> Vector2:
        """Pull toward the centre of visible boids, weighted by their area."""
        center = weighted_mean(
            ((other.boid.position, other.boid.radius * other.boid.radius) for other in visible),
            zero=Vector2(),
        )
        if center is None:
            return Vector2()
        return (center - self.position) * factor

    def separation(self, visible: Sequence[VisibleBoid], settings: Settings) -> Vector2:
        accel = Vector2()
        for other in visible:
            if other.distance > settings.min_distance:
                continue
            accel = accel - other.offset
        return accel * settings.separation_factor

    def alignment(self, visible: Sequence[VisibleBoid], factor: float) -> Vector2:
        avg_velocity = mean((other.boid.velocity for other in visible), zero=Vector2())
        if avg_velocity is None:
            return Vector2()
        return (avg_velocity - self.velocity) * factor

    def adapt_color(self, visible: Sequence[VisibleBoid], factor: float) -> None:
        """Drift hue toward that of bigger visible boids."""
        avg_hue_offset = mean(
            smallest_angle_between(self.hue, other.boid.hue)
            for other in visible
            if other.boid.radius > self.radius
        )
        if avg_hue_offset is not None:
            self.hue += avg_hue_offset * factor

    def keep_in_bounds(self, settings: Settings) -> None:
        """Turn hard when inside the border margin of the simulation area."""
        turn_speed = self.velocity.length() * settings.turn_speed_ratio
        nudge_x = 0.0
        nudge_y = 0.0

        min_x = SIZE[0] * settings.border_margin
        min_y = SIZE[1] * settings.border_margin
        max_x = SIZE[0] - min_x
        max_y = SIZE[1] - min_y
        pos = self.position

        if pos.x < min_x:
            nudge_x += turn_speed
        if pos.x > max_x:
            nudge_x -= turn_speed

        if pos.y < min_y:
            nudge_y += turn_speed
        if pos.y > max_y:
            nudge_y -= turn_speed

        self.velocity = self.velocity + Vector2(nudge_x, nudge_y)

    def update_velocity(self, settings: Settings, visible: Sequence[VisibleBoid]) -> None:
        v = (
            self.velocity
            + self.coherence(visible, settings.cohesion_factor)
            + self.separation(visible, settings)
            + self.alignment(visible, settings.alignment_factor)
        )
        self.velocity = clamp_magnitude(v, settings.max_speed)

    def update(self, settings: Settings, visible: Sequence[VisibleBoid], time_delta_ms: float) -> None:
        self.adapt_color(visible, settings.color_adapt_factor)
        self.update_velocity(settings, visible)
        self.keep_in_bounds(settings)
        self.position = self.position + self.velocity * time_delta_ms * _TIME_SCALE

    def polygon(self) -> List[Vector2]:
        return [self.position + offset for offset in shape_points(self.radius, self.heading)]

    def color(self) -> str:
        return f"hsl({self.hue:.3f}rad, 100%, 50%)"
