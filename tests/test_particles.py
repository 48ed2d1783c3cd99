import random

import pytest

from ugine.particles import Affector, BlendMode, Emitter, Particle


def test_particle_moves_and_ages():
    p = Particle(None, 2.0, -3.0, 90.0, 5.0, False)
    p.update(1.0)
    assert (p.x, p.y) == (2.0, -3.0)
    assert p.angle == 90.0
    assert p.lifetime == 4.0
    assert p.alpha == 255


def test_particle_autofade_truncates_alpha():
    p = Particle(None, 0.0, 0.0, 0.0, 1.0, True)
    p.update(0.5)
    assert p.alpha == 127


def test_particle_autofade_floors_at_zero():
    p = Particle(None, 0.0, 0.0, 0.0, 1.0, True)
    p.update(2.0)
    assert p.alpha == 0


def test_particle_defaults_to_additive_blend():
    assert Particle().blend_mode is BlendMode.ADDITIVE


def test_affector_contains_is_inclusive():
    a = Affector(0, 0, 10, 10)
    assert a.contains(0, 0)
    assert a.contains(10, 10)
    assert not a.contains(10.5, 5)
    assert not a.contains(5, -1)


def test_affector_with_fixed_ranges():
    a = Affector(0, 0, 10, 10)
    a.min_red = a.max_red = 10
    a.min_green = a.max_green = 20
    a.min_blue = a.max_blue = 30
    a.min_velocity_x = a.max_velocity_x = 4.0
    a.min_velocity_y = a.max_velocity_y = -2.0
    a.min_angular_velocity = a.max_angular_velocity = 45.0
    p = Particle()
    p.alpha = 99
    a.change_particle_properties(p, random.Random(1))
    assert (p.red, p.green, p.blue, p.alpha) == (10, 20, 30, 99)
    assert (p.velocity_x, p.velocity_y) == (4.0, -2.0)
    assert p.angular_velocity == 45.0
    assert p.affected


@pytest.mark.parametrize("seed", range(5))
def test_affector_random_values_within_ranges(seed):
    a = Affector(0, 0, 1, 1)
    a.min_velocity_x, a.max_velocity_x = -5.0, 5.0
    p = Particle()
    a.change_particle_properties(p, random.Random(seed))
    assert 0 <= p.red <= 255
    assert -5.0 <= p.velocity_x <= 5.0
    assert 30.0 <= p.angular_velocity <= 360.0


def test_idle_emitter_spawns_nothing():
    e = Emitter(rng=random.Random(0))
    e.min_rate = e.max_rate = 10
    e.update(1.0)
    assert e.particles == []


def test_emitter_spawns_rate_times_elapsed():
    e = Emitter(rng=random.Random(0))
    e.x, e.y = 5.0, 6.0
    e.min_rate = e.max_rate = 10
    e.min_red, e.max_red = 100, 200
    e.start()
    e.update(1.0)
    assert len(e.particles) == 10
    for p in e.particles:
        assert (p.x, p.y) == (5.0, 6.0)
        assert 100 <= p.red <= 200
        assert p.blend_mode is BlendMode.ADDITIVE


def test_emitter_rounds_fractional_rate_up():
    e = Emitter(rng=random.Random(0))
    e.min_rate = e.max_rate = 2.5
    e.start()
    e.update(1.0)
    assert len(e.particles) == 3


def test_dead_particles_are_removed():
    e = Emitter(autofade=False, rng=random.Random(0))
    e.min_rate = e.max_rate = 4
    e.start()
    e.update(1.0)
    assert len(e.particles) == 4
    e.stop()
    e.update(0.1)
    assert e.particles == []


def test_emitter_applies_affectors():
    e = Emitter(autofade=False, rng=random.Random(0))
    e.x, e.y = 5.0, 5.0
    e.min_rate = e.max_rate = 3
    a = Affector(0, 0, 10, 10)
    a.min_velocity_x = a.max_velocity_x = 3.0
    e.add_affector(a)
    e.start()
    e.update(0.5)
    assert len(e.particles) == 2
    assert all(p.affected and p.velocity_x == 3.0 for p in e.particles)