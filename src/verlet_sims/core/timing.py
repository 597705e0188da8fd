# src/verlet_sims/core/timing.py

from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, fields
import time


@dataclass
class StepTimings:
    """Wall-clock seconds spent in each phase of one advance() call."""
    gravity: float = 0.0
    constraints: float = 0.0
    collisions: float = 0.0
    update: float = 0.0

    @property
    def total(self) -> float:
        return sum(getattr(self, f.name) for f in fields(self))

    @contextmanager
    def measure(self, phase: str):
        start = time.perf_counter()
        try:
            yield
        finally:
            setattr(self, phase, getattr(self, phase) + time.perf_counter() - start)

    def format(self) -> str:
        return (
            f"Gravity: {self.gravity * 1e3:.2f}ms\n"
            f"Collisions: {self.collisions * 1e3:.2f}ms\n"
            f"Constraints: {self.constraints * 1e3:.2f}ms\n"
            f"Update: {self.update * 1e3:.2f}ms\n"
        )
