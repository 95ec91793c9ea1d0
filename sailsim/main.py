"""
Sailing Simulator CLI
=====================

Headless entry point: step the default fleet, inspect the forces on one
ship, or print the lift/drag curves. Output is JSON on stdout.
"""

import argparse
import json
import math
import sys
import logging

from .geometry import Vector2
from .physics.aerodynamics import coefficient_table
from .simulation.clock import DELTA_TIME, Simulation, SimConfig
from .simulation.instruments import debug_ship_physics

logger = logging.getLogger(__name__)


def run_simulation(args) -> int:
    """Step the default fleet and print ship summaries."""
    sim = Simulation(SimConfig(
        wind_angle=math.radians(args.wind_angle),
        wind_speed=args.wind_speed,
    ))

    for _ in range(args.steps):
        step = sim.step()
        if args.every and step % args.every == 0:
            print(json.dumps({
                'step': step,
                'ships': [ship.summary() for ship in sim.get_population()],
            }))

    population = sim.get_population()
    print(json.dumps({
        'step': sim.step_count,
        'settings': sim.get_settings().to_dict(),
        'ships': [ship.summary() for ship in population],
    }, indent=2))

    logger.info(
        f"Ran {args.steps} steps ({args.steps * DELTA_TIME:.1f} s simulated), "
        f"fleet speeds: {', '.join(f'{ship.speed:.2f}' for ship in population)}"
    )
    return 0


def show_forces(args) -> int:
    """Print the force breakdown for one ship."""
    report = debug_ship_physics(
        wind_angle=math.radians(args.wind_angle),
        wind_speed=args.wind_speed,
        velocity=Vector2(args.vx, args.vy),
        rot_velocity=args.rot,
        heading=math.radians(args.heading),
        mainsheet_lengths=args.mainsheet,
        rudder_angle=math.radians(args.rudder),
    )
    print(json.dumps(report.to_dict(), indent=2))
    return 0


def show_coefficients(args) -> int:
    """Print the lift and drag coefficient curves."""
    angles, cls, cds = coefficient_table(args.step)
    print(json.dumps({
        'angle_deg': [round(math.degrees(a), 6) for a in angles],
        'lift': cls.tolist(),
        'drag': cds.tolist(),
    }))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="2D sailing ship simulator")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Verbose logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser("run", help="Step the default fleet")
    run.add_argument("--steps", "-n", type=int, default=300,
                     help="Number of ticks to simulate (30 per second)")
    run.add_argument("--wind-angle", type=float, default=0.0,
                     help="Direction the wind blows from (degrees)")
    run.add_argument("--wind-speed", type=float, default=5.0,
                     help="Wind speed (m/s)")
    run.add_argument("--every", type=int, default=0,
                     help="Also print the fleet every N steps")
    run.set_defaults(func=run_simulation)

    forces = subparsers.add_parser("forces", help="Force breakdown for one ship")
    forces.add_argument("--wind-angle", type=float, default=0.0,
                        help="Direction the wind blows from (degrees)")
    forces.add_argument("--wind-speed", type=float, default=5.0,
                        help="Wind speed (m/s)")
    forces.add_argument("--heading", type=float, default=180.0,
                        help="Ship heading (degrees)")
    forces.add_argument("--vx", type=float, default=0.0, help="Velocity x (m/s)")
    forces.add_argument("--vy", type=float, default=0.0, help="Velocity y (m/s)")
    forces.add_argument("--rot", type=float, default=0.0,
                        help="Rotational velocity (rad/s)")
    forces.add_argument("--mainsheet", type=float, nargs="+", default=[7.0],
                        help="Mainsheet length per sail (m)")
    forces.add_argument("--rudder", type=float, default=0.0,
                        help="Rudder angle (degrees)")
    forces.set_defaults(func=show_forces)

    coefficients = subparsers.add_parser("coefficients", help="Lift/drag curves")
    coefficients.add_argument("--step", type=float, default=1.0,
                              help="Angle step (degrees)")
    coefficients.set_defaults(func=show_coefficients)

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Setup logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
