"""Shared fixtures for the simulation tests."""
import pytest

from verlet_sims.core import SimConfig, Simulation


@pytest.fixture
def reference_config():
    """Constants of the reference run: 1000 particles, 6 sub-steps."""
    return SimConfig()


@pytest.fixture
def zero_gravity_config():
    """No gravity and no spawning, for hand-built scenarios."""
    return SimConfig(gravity=(0.0, 0.0), max_particles=50, spawn_cadence=10**9)


@pytest.fixture
def empty_sim(zero_gravity_config):
    return Simulation(zero_gravity_config)
