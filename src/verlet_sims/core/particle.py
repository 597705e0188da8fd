# src/verlet_sims/core/particle.py

from __future__ import annotations
from dataclasses import dataclass, field
import numpy as np


@dataclass
class Particle:
    """
    A point mass integrated with Störmer–Verlet.

    - pos / old_pos: world-space position now and one sub-step ago
    - acc: acceleration accumulated since the last update

    Velocity is never stored; it is always pos - old_pos.
    """
    pos: np.ndarray           # shape (2,)
    old_pos: np.ndarray       # shape (2,)
    acc: np.ndarray = field(default_factory=lambda: np.zeros(2))

    def __post_init__(self):
        self.pos = np.asarray(self.pos, dtype=float).copy()
        self.old_pos = np.asarray(self.old_pos, dtype=float).copy()
        self.acc = np.asarray(self.acc, dtype=float).copy()

    @classmethod
    def at_rest(cls, pos) -> "Particle":
        return cls(pos=pos, old_pos=pos)

    @classmethod
    def launched(cls, pos, speed: float, angle: float) -> "Particle":
        """
        Place a particle at `pos` with its previous position offset by
        speed * (cos angle, sin angle), which gives it momentum in the
        opposite direction.
        """
        pos = np.asarray(pos, dtype=float)
        offset = speed * np.array([np.cos(angle), np.sin(angle)])
        return cls(pos=pos, old_pos=pos + offset)

    @property
    def velocity(self) -> np.ndarray:
        # displacement per sub-step
        return self.pos - self.old_pos

    def accelerate(self, acc: np.ndarray) -> None:
        self.acc += acc

    def update(self, dt: float) -> None:
        vel = self.pos - self.old_pos
        self.old_pos = self.pos.copy()
        self.pos = self.pos + vel + self.acc * dt * dt
        self.acc = np.zeros(2)


@dataclass(frozen=True)
class ParticleView:
    """Read-only snapshot of one particle handed to renderers."""
    pos: tuple[float, float]
    radius: float
