# scripts/main.py

from __future__ import annotations

import numpy as np

from verlet_sims.core import run_simulation, SimConfig
from verlet_sims.presets.basic import make_simulation
from verlet_sims.utils.cli import build_parser
from verlet_sims.utils.preset_loader import load_preset


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # 1. Resolve config: preset first, CLI flags override
    preset = load_preset(args.preset)
    run_cfg = preset.resolved.get("run", {})
    sim_config = SimConfig.from_args(args, base=preset.to_config())
    frame_rate = args.frame_rate or run_cfg.get("frame_rate", 60)
    n_frames = args.n_frames or run_cfg.get("n_frames", 600)
    log_interval = args.log_interval if args.log_interval is not None else run_cfg.get("log_interval", 600)

    # 2. Run simulation and record
    sim = make_simulation(sim_config)
    recording = run_simulation(sim, n_frames, dt=1 / frame_rate, log_interval=log_interval)
    print("Simulation completed.")

    # 3. Summary
    final = recording.frames[-1]
    dist = np.linalg.norm(final.positions - np.asarray(sim_config.container_center), axis=1)
    print(f"Frames: {len(recording.frames)}  t_end: {recording.t_end:.3f} s")
    print(f"Particles: {final.n_particles} / {sim_config.max_particles}")
    if final.n_particles:
        print(f"Max distance from centre: {dist.max():.3f} (limit {sim_config.container_radius - sim_config.particle_radius:.3f})")
    print(final.timings.format())


if __name__ == "__main__":
    main()
