# src/verlet_sims/core/spawning.py

from __future__ import annotations
from typing import TYPE_CHECKING, List
from .particle import Particle
if TYPE_CHECKING:
    from .config import SimConfig


def spawn_angle(index: int, period: int = 40, scale: float = 0.1) -> float:
    """
    Launch angle (radians) for the particle with spawn index `index`.

    Cycles through `period` values: the first half sweeps one way, the
    second half sweeps back, giving an oscillating left/right spray.
    """
    d = index % period
    if d > period // 2:
        return (2 * period - d) * scale
    return (d + period) * scale


class SpawnPolicy:
    """Emits one particle every `spawn_cadence` frames until the cap is hit."""

    def __init__(self, config: SimConfig):
        self.cadence = config.spawn_cadence
        self.max_particles = config.max_particles
        self.point = config.spawn_point
        self.speed = config.spawn_speed
        self.period = config.spawn_period
        self.scale = config.spawn_angle_scale

    def should_spawn(self, n_particles: int, frame_index: int) -> bool:
        return frame_index % self.cadence == 0 and n_particles < self.max_particles

    def maybe_spawn(self, particles: List[Particle], frame_index: int) -> Particle | None:
        if not self.should_spawn(len(particles), frame_index):
            return None
        angle = spawn_angle(len(particles), self.period, self.scale)
        particle = Particle.launched(self.point, self.speed, angle)
        particles.append(particle)
        return particle
