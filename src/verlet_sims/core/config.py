# src/verlet_sims/core/config.py

from __future__ import annotations
from dataclasses import dataclass, fields, asdict
from typing import Any, Mapping
import math


@dataclass(frozen=True)
class SimConfig:
    gravity: tuple[float, float] = (0.0, 750.0)   # y points down
    particle_radius: float = 4.0
    container_center: tuple[float, float] = (300.0, 300.0)
    container_radius: float = 250.0
    max_particles: int = 1000
    spawn_cadence: int = 1          # frames between new particles
    sub_steps: int = 6
    damping_factor: float = 0.999
    restitution_coefficient: float = 0.7
    spawn_point: tuple[float, float] = (300.0, 100.0)
    spawn_speed: float = 4.0
    spawn_period: int = 40
    spawn_angle_scale: float = 0.1

    def __post_init__(self):
        # normalise sequences coming from YAML / argparse into float tuples
        for name in ("gravity", "container_center", "spawn_point"):
            value = tuple(float(v) for v in getattr(self, name))
            if len(value) != 2:
                raise ValueError(f"{name} must have exactly 2 components, got {value}")
            object.__setattr__(self, name, value)

        if self.particle_radius <= 0:
            raise ValueError(f"particle_radius must be positive, got {self.particle_radius}")
        if self.container_radius <= self.particle_radius:
            raise ValueError(
                f"container_radius ({self.container_radius}) must exceed particle_radius ({self.particle_radius})"
            )
        if self.max_particles < 0:
            raise ValueError(f"max_particles must be >= 0, got {self.max_particles}")
        if self.spawn_cadence < 1:
            raise ValueError(f"spawn_cadence must be >= 1, got {self.spawn_cadence}")
        if self.sub_steps < 1:
            raise ValueError(f"sub_steps must be >= 1, got {self.sub_steps}")
        if not 0.0 <= self.damping_factor <= 1.0:
            raise ValueError(f"damping_factor must be in [0, 1], got {self.damping_factor}")
        if not 0.0 <= self.restitution_coefficient <= 1.0:
            raise ValueError(f"restitution_coefficient must be in [0, 1], got {self.restitution_coefficient}")
        if self.spawn_period < 1:
            raise ValueError(f"spawn_period must be >= 1, got {self.spawn_period}")

        dx = self.spawn_point[0] - self.container_center[0]
        dy = self.spawn_point[1] - self.container_center[1]
        if math.hypot(dx, dy) + self.particle_radius > self.container_radius:
            raise ValueError(f"spawn_point {self.spawn_point} lies outside the container")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SimConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown SimConfig keys: {sorted(unknown)}")
        return cls(**dict(data))

    @classmethod
    def from_args(cls, args, base: "SimConfig" | None = None) -> "SimConfig":
        """Build a config from parsed CLI args, falling back to `base` for anything unset."""
        kwargs = base.to_dict() if base is not None else {}
        for f in fields(cls):
            name = f.name
            value = getattr(args, name, None)
            if value is None:
                continue
            #only the vertical gravity component is exposed on the CLI
            if name == 'gravity':
                kwargs[name] = (0.0, value)
            else:
                kwargs[name] = value
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
