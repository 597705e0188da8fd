# src/verlet_sims/core/boundary.py
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable
import numpy as np
from .particle import Particle


def reflect(vec: np.ndarray, normal: np.ndarray) -> np.ndarray:
    """Mirror `vec` about the plane with unit `normal`."""
    return vec - 2.0 * np.dot(vec, normal) * normal


class Boundary(ABC):
    @abstractmethod
    def apply_constraint(self, particle: Particle, radius: float) -> bool:
        """
        Push the particle back inside the domain if it pokes through the wall
        and reflect its implicit velocity. Return True if it was corrected.
        """
        ...

    @abstractmethod
    def contains(self, pos: np.ndarray, radius: float = 0.0) -> bool:
        """
        Return True if a (possibly extended) point is fully inside the domain.

        `radius` lets you check "does this circle of radius r fit inside?".
        """
        ...

    def apply_all(self, particles: Iterable[Particle], radius: float) -> int:
        return sum(1 for p in particles if self.apply_constraint(p, radius))

    def bounds(self) -> tuple[float, float, float, float]:
        """
        Optionally provide (xmin, xmax, ymin, ymax) for camera setup / plotting.
        Default raises if not meaningful.
        """
        raise NotImplementedError


@dataclass
class CircleBoundary(Boundary):
    center: tuple[float, float]
    radius: float
    damping: float = 0.999

    def __post_init__(self):
        self._center = np.asarray(self.center, dtype=float)

    def apply_constraint(self, particle: Particle, radius: float) -> bool:
        to_obj = particle.pos - self._center
        dist = float(np.hypot(to_obj[0], to_obj[1]))
        limit = self.radius - radius
        # dist == 0 never gets here as long as self.radius > radius
        if dist <= limit:
            return False
        n = to_obj / dist
        penetration = dist - limit
        vel = particle.pos - particle.old_pos

        particle.pos = particle.pos - n * penetration
        particle.old_pos = particle.pos - reflect(vel, n) * self.damping
        return True

    def contains(self, pos: np.ndarray, radius: float = 0.0) -> bool:
        pos = np.asarray(pos, dtype=float)
        return float(np.linalg.norm(pos - self._center)) + radius <= self.radius

    def bounds(self) -> tuple[float, float, float, float]:
        cx, cy = self._center
        return cx - self.radius, cx + self.radius, cy - self.radius, cy + self.radius
