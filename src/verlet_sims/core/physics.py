# src/verlet_sims/core/physics.py

from __future__ import annotations
from typing import Sequence
import math
import numpy as np
from .particle import Particle

# separation axis used when two centres coincide exactly
_FALLBACK_NORMAL = np.array([1.0, 0.0])


def accelerate_all(particles: Sequence[Particle], acc: np.ndarray) -> None:
    for p in particles:
        p.accelerate(acc)


def integrate(particles: Sequence[Particle], dt: float) -> None:
    for p in particles:
        p.update(dt)


def get_penetration(a_pos: np.ndarray, b_pos: np.ndarray, min_dist: float) -> tuple[float, np.ndarray | None]:
    """
    Overlap depth of two equal circles whose centres must stay `min_dist` apart,
    and the unit normal pointing from b to a. The normal is None when they don't overlap.
    """
    dx = float(a_pos[0] - b_pos[0])
    dy = float(a_pos[1] - b_pos[1])
    dist_sq = dx * dx + dy * dy
    if dist_sq >= min_dist * min_dist:
        return min_dist - math.sqrt(dist_sq), None
    dist = math.sqrt(dist_sq)
    if dist == 0.0:
        return min_dist, _FALLBACK_NORMAL.copy()
    return min_dist - dist, np.array([dx / dist, dy / dist])


def resolve_collisions(particles: Sequence[Particle], radius: float, restitution: float) -> int:
    """
    One sequential relaxation pass over every pair (i, j), i < j.

    Each overlapping pair is pushed apart along its normal by half the overlap
    each, then an impulse scaled by `restitution` is written into old_pos if
    the pair is still approaching. Pairs later in the scan see the corrections
    made by earlier ones. Returns the number of colliding pairs.
    """
    min_dist = 2.0 * radius
    n_pairs = 0
    n = len(particles)
    for i in range(n):
        a = particles[i]
        for j in range(i + 1, n):
            b = particles[j]
            penetration, normal = get_penetration(a.pos, b.pos, min_dist)
            if normal is None:
                continue
            n_pairs += 1
            _positional_correction(a, b, normal, penetration)
            _velocity_correction(a, b, normal, restitution)
    return n_pairs


def _positional_correction(a: Particle, b: Particle, n: np.ndarray, penetration: float) -> None:
    shift = n * (0.5 * penetration)
    a.pos = a.pos + shift
    b.pos = b.pos - shift


def _velocity_correction(a: Particle, b: Particle, n: np.ndarray, restitution: float) -> None:
    rv = a.velocity - b.velocity
    vel_along_normal = float(np.dot(rv, n))
    if vel_along_normal >= 0:
        return

    # equal masses: the impulse is shared evenly
    j = -(1.0 + restitution) * vel_along_normal * 0.5
    impulse_vec = j * n
    a.old_pos = a.old_pos - impulse_vec
    b.old_pos = b.old_pos + impulse_vec
