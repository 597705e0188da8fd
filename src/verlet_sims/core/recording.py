# src/verlet_sims/core/recording.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any
import numpy as np
if TYPE_CHECKING:
    from .simulation import Simulation
    from .timing import StepTimings


@dataclass
class FrameSnapshot:
    t: float
    frame_index: int
    positions: np.ndarray             # (n, 2), copied from the simulation
    timings: StepTimings | None = None

    @property
    def n_particles(self) -> int:
        return len(self.positions)


@dataclass
class SimulationRecording:
    """
    In-memory record of a simulation run.

    `meta` holds config, frame rate, etc.
    """
    frames: list[FrameSnapshot] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)

    def add_frame(self, frame: FrameSnapshot) -> None:
        self.frames.append(frame)

    @property
    def times(self) -> list[float]:
        return [f.t for f in self.frames]

    @property
    def t_end(self) -> float | None:
        """Time of the last frame, or None if no frames."""
        if not self.frames:
            return None
        return self.frames[-1].t

    @property
    def particle_counts(self) -> list[int]:
        return [f.n_particles for f in self.frames]


def snapshot_simulation(sim: "Simulation") -> FrameSnapshot:
    return FrameSnapshot(
        t=sim.time,
        frame_index=sim.frame_index,
        positions=sim.positions(),
        timings=sim.last_timings,
    )
