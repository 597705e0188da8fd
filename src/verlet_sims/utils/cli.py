import argparse


def build_parser():
    parser = argparse.ArgumentParser(description='Headless Verlet particle simulation')
    parser.add_argument('--preset', type=str, default='default', metavar='NAME',
                        help='bundled preset name or path to a preset YAML (default: default)')
    parser.add_argument('--n_frames', type=int, default=None, metavar='N',
                        help='number of frames to simulate (default: from preset)')
    parser.add_argument('--frame_rate', type=int, default=None, metavar='N',
                        help='frames per simulated second; dt = 1/frame_rate (default: from preset)')
    parser.add_argument('--log_interval', type=int, default=None, metavar='N',
                        help='print progress every N frames, 0 to disable (default: from preset)')
    parser.add_argument(
        "--gravity",
        type=float,
        default=None,
        help="Gravity strength in the downward (positive y) direction.",
    )
    parser.add_argument('--particle_radius', type=float, default=None, metavar='R',
                        help='radius shared by all particles')
    parser.add_argument('--container_radius', type=float, default=None, metavar='R',
                        help='radius of the circular container')
    parser.add_argument('--max_particles', type=int, default=None, metavar='N',
                        help='maximum number of particles ever spawned')
    parser.add_argument('--spawn_cadence', type=int, default=None, metavar='N',
                        help='frames between new particles')
    parser.add_argument('--sub_steps', type=int, default=None, metavar='N',
                        help='integration sub-steps per frame')
    parser.add_argument('--damping_factor', type=float, default=None, metavar='F',
                        help='speed kept on each wall bounce (0..1)')
    parser.add_argument('--restitution_coefficient', type=float, default=None, metavar='F',
                        help='restitution of particle-particle impulses (0..1)')
    return parser

'''
usage: python scripts/main.py --preset fine_substeps --n_frames 1200 --max_particles 400 --sub_steps 8
'''
