from __future__ import annotations
from verlet_sims.core import Simulation, SimConfig
from verlet_sims.utils.preset_loader import load_preset


def make_simulation(sim_config: SimConfig | None = None) -> Simulation:
    sim_config = sim_config or SimConfig()
    print('sim config: ', sim_config.to_dict())
    return Simulation(sim_config)


def make_simulation_from_preset(preset: str = "default") -> Simulation:
    return make_simulation(load_preset(preset).to_config())
