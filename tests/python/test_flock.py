from __future__ import annotations

from pygame.math import Vector2
from pytest import approx

from flocking.boid import Boid
from flocking.config import Settings
from flocking.flock import populate, repopulate, update_all
from flocking.neighbors import collect_visible
from flocking.rng import DeterministicRng


def _xy(vector: Vector2) -> tuple[float, float]:
    return (vector.x, vector.y)


def _boid(x: float, y: float, vx: float = 0.0, vy: float = 0.0, radius: float = 2.0) -> Boid:
    return Boid(position=Vector2(x, y), velocity=Vector2(vx, vy), radius=radius, hue=0.0)


def test_repopulate_yields_requested_size_at_full_speed():
    rng = DeterministicRng(5)
    boids = populate(Settings(population=40), rng)
    old = list(boids)

    settings = Settings(population=12, max_speed=9.0)
    repopulate(boids, settings, rng)

    assert len(boids) == 12
    assert all(boid.velocity.length() == approx(9.0) for boid in boids)
    assert not any(boid is previous for boid in boids for previous in old)


def test_repopulate_to_zero_empties_the_flock():
    rng = DeterministicRng(5)
    boids = populate(Settings(population=3), rng)

    repopulate(boids, Settings(population=0), rng)
    assert boids == []


def test_populate_is_reproducible_for_a_seed():
    settings = Settings(population=20)
    first = populate(settings, DeterministicRng(99))
    second = populate(settings, DeterministicRng(99))

    assert [(b.position, b.velocity, b.radius, b.hue) for b in first] == [
        (b.position, b.velocity, b.radius, b.hue) for b in second
    ]


def test_distant_boids_ignore_each_other(quiet_settings):
    settings = quiet_settings.replace(visible_range=50.0, cohesion_factor=0.3, alignment_factor=0.3)
    boids = [_boid(300.0, 300.0, vx=1.0), _boid(600.0, 300.0, vy=2.0)]

    assert collect_visible(boids, 0, settings.visible_range) == []
    assert collect_visible(boids, 1, settings.visible_range) == []

    checks = update_all(settings, boids, 10.0)
    assert checks == 0
    assert _xy(boids[0].velocity) == (1.0, 0.0)
    assert _xy(boids[1].velocity) == (0.0, 2.0)


def test_close_boids_accelerate_apart(quiet_settings):
    settings = quiet_settings.replace(min_distance=5.0, separation_factor=0.6)
    boids = [_boid(800.0, 500.0), _boid(803.0, 500.0)]
    closing_before = (boids[1].velocity - boids[0].velocity).x

    update_all(settings, boids, 0.0)

    closing_after = (boids[1].velocity - boids[0].velocity).x
    assert closing_after > closing_before
    assert boids[0].velocity.x < 0.0
    assert boids[1].velocity.x > 0.0


def test_later_boids_see_earlier_boids_after_they_moved(quiet_settings):
    settings = quiet_settings.replace(visible_range=95.0, alignment_factor=0.5)
    boids = [_boid(800.0, 500.0, vx=10.0), _boid(900.0, 500.0)]

    checks = update_all(settings, boids, 500.0)

    assert _xy(boids[0].position) == (850.0, 500.0)
    assert _xy(boids[0].velocity) == (10.0, 0.0)
    # boid 1 only sees boid 0 because boid 0 already moved this pass
    assert checks == 1
    assert boids[1].velocity.x == approx(5.0)
    assert boids[1].velocity.y == approx(0.0)


def test_aligned_pair_moves_straight(quiet_settings):
    settings = quiet_settings.replace(
        visible_range=50.0, min_distance=5.0, alignment_factor=0.4, border_margin=0.0
    )
    boids = [_boid(0.0, 0.0, vx=1.0), _boid(10.0, 0.0, vx=1.0)]

    update_all(settings, boids, 16.0)

    for boid, start_x in zip(boids, (0.0, 10.0)):
        assert _xy(boid.velocity) == (1.0, 0.0)
        assert boid.position.x == start_x + 1.0 * 16.0 * 0.01
        assert boid.position.y == 0.0


def test_cohering_pair_has_no_perpendicular_drift(quiet_settings):
    settings = quiet_settings.replace(
        visible_range=50.0, min_distance=5.0, cohesion_factor=0.01, alignment_factor=0.4, border_margin=0.0
    )
    boids = [_boid(0.0, 0.0, vx=1.0), _boid(10.0, 0.0, vx=1.0)]
    starts = [Vector2(boid.position) for boid in boids]

    update_all(settings, boids, 16.0)

    for boid, start in zip(boids, starts):
        assert boid.velocity.y == 0.0
        assert _xy(boid.position) == _xy(start + boid.velocity * 16.0 * 0.01)
    assert boids[0].velocity.x > 1.0
    assert boids[1].velocity.x < 1.0
