# src/verlet_sims/core/simulation.py

from __future__ import annotations
from typing import List
import numpy as np

from .config import SimConfig
from .particle import Particle, ParticleView
from .boundary import CircleBoundary
from .spawning import SpawnPolicy
from .physics import accelerate_all, integrate, resolve_collisions
from .timing import StepTimings
from .recording import SimulationRecording, snapshot_simulation


class Simulation:
    """
    Particles spawned into a circular container, falling under gravity.

    Per advance(dt, frame_index):
      spawn (maybe), then sub_steps times
      {gravity -> boundary constraint -> collisions -> integrate by dt/sub_steps}.

    Particles are only ever appended; the list order is the collision scan order.
    """

    def __init__(self, config: SimConfig | None = None):
        self.config = config or SimConfig()
        self.gravity = np.array(self.config.gravity, dtype=float)
        self.boundary = CircleBoundary(
            center=self.config.container_center,
            radius=self.config.container_radius,
            damping=self.config.damping_factor,
        )
        self.spawner = SpawnPolicy(self.config)
        self._particles: List[Particle] = []
        self.time = 0.0
        self.frame_index: int | None = None
        self.last_timings = StepTimings()

    @property
    def radius(self) -> float:
        return self.config.particle_radius

    @property
    def n_particles(self) -> int:
        return len(self._particles)

    def add_particle(self, particle: Particle) -> None:
        if len(self._particles) >= self.config.max_particles:
            raise ValueError(f"Simulation already holds max_particles={self.config.max_particles}")
        self._particles.append(particle)

    def particles(self) -> tuple[ParticleView, ...]:
        r = self.radius
        return tuple(ParticleView(pos=(float(p.pos[0]), float(p.pos[1])), radius=r) for p in self._particles)

    def positions(self) -> np.ndarray:
        if not self._particles:
            return np.empty((0, 2))
        return np.array([p.pos for p in self._particles], dtype=float)

    def apply_boundary_constraint(self) -> int:
        return self.boundary.apply_all(self._particles, self.radius)

    def resolve_collisions(self) -> int:
        return resolve_collisions(self._particles, self.radius, self.config.restitution_coefficient)

    def integrate(self, dt: float) -> None:
        integrate(self._particles, dt)

    def advance(self, dt: float, frame_index: int) -> None:
        self.spawner.maybe_spawn(self._particles, frame_index)

        sub_steps = self.config.sub_steps
        sub_dt = dt / sub_steps
        timings = StepTimings()

        for _ in range(sub_steps):
            with timings.measure("gravity"):
                accelerate_all(self._particles, self.gravity)
            with timings.measure("constraints"):
                self.apply_boundary_constraint()
            with timings.measure("collisions"):
                self.resolve_collisions()
            with timings.measure("update"):
                self.integrate(sub_dt)

        self.time += dt
        self.frame_index = frame_index
        self.last_timings = timings


def run_simulation(
    sim: Simulation,
    n_frames: int,
    dt: float = 1 / 60,
    log_interval: int = 600,
    *,
    record_every: int = 1,
) -> SimulationRecording:
    """
    Advance the simulation n_frames times (frame indices 1..n_frames) and
    record a snapshot every `record_every` frames.
    """
    recording = SimulationRecording(meta={"config": sim.config.to_dict(), "dt": dt})
    start = (sim.frame_index or 0) + 1
    for frame_index in range(start, start + n_frames):
        sim.advance(dt, frame_index)
        if (frame_index - start + 1) % record_every == 0:
            recording.add_frame(snapshot_simulation(sim))
        if log_interval and (frame_index - start + 1) % log_interval == 0:
            print(f"Simulated {sim.time:.3f} seconds / {n_frames*dt:.3f} seconds...")
            print(f"Number of particles: {sim.n_particles}")
            print(sim.last_timings.format())

    return recording
