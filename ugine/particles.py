"""Particle emitters and the affectors that alter particles in a region."""

from __future__ import annotations

import math
import random
from enum import Enum

from .image import Image


class BlendMode(Enum):
    SOLID = "solid"
    ALPHA = "alpha"
    MULTIPLICATIVE = "multiplicative"
    ADDITIVE = "additive"


def _uniform(rng: random.Random, low: float, high: float) -> float:
    return rng.random() * (high - low) + low


class Particle:
    """A moving, spinning, optionally fading sprite with a limited lifetime."""

    def __init__(self, image: Image | None = None, velocity_x: float = 0.0,
                 velocity_y: float = 0.0, angular_velocity: float = 0.0,
                 lifetime: float = 0.0, autofade: bool = False) -> None:
        self.image = image
        self.x = 0.0
        self.y = 0.0
        self.angle = 0.0
        self.red = 255
        self.green = 255
        self.blue = 255
        self.alpha = 255
        self.velocity_x = velocity_x
        self.velocity_y = velocity_y
        self.angular_velocity = angular_velocity
        self.initial_lifetime = lifetime
        self.lifetime = lifetime
        self.autofade = autofade
        self.affected = False
        self.blend_mode = BlendMode.ADDITIVE

    def set_color(self, red: int, green: int, blue: int, alpha: int = 255) -> None:
        self.red, self.green, self.blue, self.alpha = red, green, blue, alpha

    def update(self, elapsed: float) -> None:
        self.x += self.velocity_x * elapsed
        self.y += self.velocity_y * elapsed
        self.angle += self.angular_velocity * elapsed
        if self.autofade:
            if self.initial_lifetime > 0:
                new_alpha = int(self.alpha - 255 / self.initial_lifetime * elapsed)
            else:
                new_alpha = 0 if elapsed > 0 else self.alpha
            self.alpha = max(new_alpha, 0)
        self.lifetime -= elapsed


class Affector:
    """A rectangle that gives particles entering it new random properties."""

    def __init__(self, x0: float, y0: float, x1: float, y1: float) -> None:
        self.x0, self.y0, self.x1, self.y1 = x0, y0, x1, y1
        self.min_red = self.min_green = self.min_blue = 0
        self.max_red = self.max_green = self.max_blue = 255
        self.min_velocity_x = self.max_velocity_x = 0.0
        self.min_velocity_y = self.max_velocity_y = 0.0
        self.min_angular_velocity = 30.0
        self.max_angular_velocity = 360.0

    def contains(self, x: float, y: float) -> bool:
        return self.x0 <= x <= self.x1 and self.y0 <= y <= self.y1

    def change_particle_properties(self, particle: Particle,
                                   rng: random.Random) -> None:
        particle.set_color(
            int(_uniform(rng, self.min_red, self.max_red)),
            int(_uniform(rng, self.min_green, self.max_green)),
            int(_uniform(rng, self.min_blue, self.max_blue)),
            particle.alpha,
        )
        particle.velocity_x = _uniform(rng, self.min_velocity_x, self.max_velocity_x)
        particle.velocity_y = _uniform(rng, self.min_velocity_y, self.max_velocity_y)
        particle.angular_velocity = _uniform(
            rng, self.min_angular_velocity, self.max_angular_velocity)
        particle.affected = True


class Emitter:
    """Spawns particles at its position at a random rate per second."""

    def __init__(self, image: Image | None = None, autofade: bool = True,
                 rng: random.Random | None = None) -> None:
        self.image = image
        self.autofade = autofade
        self.rng = rng if rng is not None else random.Random()
        self.x = 0.0
        self.y = 0.0
        self.min_rate = self.max_rate = 0.0
        self.min_velocity_x = self.max_velocity_x = 0.0
        self.min_velocity_y = self.max_velocity_y = 0.0
        self.min_angular_velocity = self.max_angular_velocity = 0.0
        self.min_lifetime = self.max_lifetime = 1.0
        self.min_red = self.min_green = self.min_blue = 0
        self.max_red = self.max_green = self.max_blue = 255
        self.emitting = False
        self.affectors: list[Affector] = []
        self.particles: list[Particle] = []

    def start(self) -> None:
        self.emitting = True

    def stop(self) -> None:
        self.emitting = False

    def add_affector(self, affector: Affector) -> None:
        self.affectors.append(affector)

    def _spawn(self) -> Particle:
        rng = self.rng
        particle = Particle(
            self.image,
            _uniform(rng, self.min_velocity_x, self.max_velocity_x),
            _uniform(rng, self.min_velocity_y, self.max_velocity_y),
            _uniform(rng, self.min_angular_velocity, self.max_angular_velocity),
            _uniform(rng, self.min_lifetime, self.max_lifetime),
            self.autofade,
        )
        particle.set_color(
            int(_uniform(rng, self.min_red, self.max_red)),
            int(_uniform(rng, self.min_green, self.max_green)),
            int(_uniform(rng, self.min_blue, self.max_blue)),
        )
        particle.blend_mode = BlendMode.ADDITIVE
        particle.x, particle.y = self.x, self.y
        return particle

    def update(self, elapsed: float) -> None:
        """Spawn new particles, apply affectors, age particles and drop dead ones."""
        if self.emitting:
            rate = _uniform(self.rng, self.min_rate, self.max_rate) * elapsed
            self.particles.extend(self._spawn() for _ in range(math.ceil(max(rate, 0))))
        alive = []
        for particle in self.particles:
            if not particle.affected:
                for affector in self.affectors:
                    if affector.contains(particle.x, particle.y):
                        affector.change_particle_properties(particle, self.rng)
            if particle.alpha == 0 or particle.lifetime <= 0:
                continue
            particle.update(elapsed)
            alive.append(particle)
        self.particles = alive