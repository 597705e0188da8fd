# src/verlet_sims/core/__init__.py

from .config import SimConfig
from .particle import Particle, ParticleView
from .spawning import SpawnPolicy, spawn_angle
from .boundary import Boundary, CircleBoundary, reflect
from .physics import accelerate_all, integrate, resolve_collisions, get_penetration
from .timing import StepTimings
from .recording import FrameSnapshot, SimulationRecording
from .simulation import Simulation, run_simulation

__all__ = [
    "SimConfig",
    "Particle",
    "ParticleView",
    "SpawnPolicy",
    "spawn_angle",
    "Boundary",
    "CircleBoundary",
    "reflect",
    "accelerate_all",
    "integrate",
    "resolve_collisions",
    "get_penetration",
    "StepTimings",
    "FrameSnapshot",
    "SimulationRecording",
    "Simulation",
    "run_simulation",
]
