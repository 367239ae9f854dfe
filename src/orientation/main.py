#!/usr/bin/env python3
"""
===============================================================================
ORIENTATION - COMMAND-LINE ENTRY POINT
===============================================================================
Converts single orientations between representations from the shell.

USAGE:
    orientation from-eulers 45 30 10 --degrees     # Bunge angles -> quaternion + matrix
    orientation to-eulers 0.9 0.1 0.3 0.2 --degrees
    orientation from-angle-axis 90 0 0 1 --degrees
    orientation to-angle-axis 0.7071 0 0 0.7071 --degrees
    orientation random --count 5 --seed 42
    orientation --config config/orientation_config.yaml random

Quaternions are given and printed scalar first (w x y z). Input quaternions
are normalized before conversion.
===============================================================================
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

import numpy as np

from orientation.config import load_config
from orientation.core.errors import OrientationError
from orientation.core.quaternion import Quaternion

logger = logging.getLogger('orientation')


def _fmt(values, precision: int) -> str:
    return ' '.join(f"{v:+.{precision}f}" for v in np.ravel(values))


def _input_quaternion(args: argparse.Namespace) -> Quaternion:
    q = Quaternion(args.w, args.x, args.y, args.z)
    if not q.is_unit():
        logger.warning("Input quaternion has norm %.8f; normalizing", q.norm)
    return q.normalize()


# =============================================================================
# SUBCOMMANDS
# =============================================================================

def cmd_from_eulers(args: argparse.Namespace, config: Dict[str, Any]) -> None:
    """Bunge-Euler angles -> quaternion and rotation matrix."""
    precision = config['output']['precision']
    q = Quaternion.from_bunge_eulers([args.phi1, args.PHI, args.phi2], args.degrees)
    print(f"quaternion: {_fmt(q.to_array(), precision)}")
    print("matrix:")
    for row in q.to_matrix():
        print(f"  {_fmt(row, precision)}")


def cmd_to_eulers(args: argparse.Namespace, config: Dict[str, Any]) -> None:
    """Quaternion -> Bunge-Euler angles."""
    q = _input_quaternion(args)
    eulers = q.to_bunge_eulers(args.degrees)
    print(f"eulers: {_fmt(eulers, config['output']['precision'])}")


def cmd_from_angle_axis(args: argparse.Namespace, config: Dict[str, Any]) -> None:
    """Angle-axis pair -> quaternion."""
    q = Quaternion.from_angle_axis(args.angle, [args.ax, args.ay, args.az],
                                   args.degrees)
    print(f"quaternion: {_fmt(q.to_array(), config['output']['precision'])}")


def cmd_to_angle_axis(args: argparse.Namespace, config: Dict[str, Any]) -> None:
    """Quaternion -> angle-axis pair."""
    precision = config['output']['precision']
    angle, axis = _input_quaternion(args).to_angle_axis(args.degrees)
    print(f"angle: {angle:+.{precision}f}")
    print(f"axis: {_fmt(axis, precision)}")


def cmd_random(args: argparse.Namespace, config: Dict[str, Any]) -> None:
    """Uniformly random unit quaternions."""
    seed = args.seed if args.seed is not None else config['random']['seed']
    count = args.count if args.count is not None else config['random']['count']
    if count < 1:
        raise ValueError(f"count must be positive, got {count}")

    logger.debug("Sampling %d quaternion(s) with seed %s", count, seed)
    rng = np.random.default_rng(seed)
    for _ in range(count):
        q = Quaternion.random_unit(rng)
        print(_fmt(q.to_array(), config['output']['precision']))


# =============================================================================
# ARGUMENT PARSING
# =============================================================================

def _add_quaternion_args(parser: argparse.ArgumentParser) -> None:
    for name in ('w', 'x', 'y', 'z'):
        parser.add_argument(name, type=float, help=f"{name} component")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='orientation',
        description='Convert 3-D rotations between quaternions, Bunge-Euler '
                    'angles, angle-axis pairs and rotation matrices.'
    )
    parser.add_argument('--config', default=None,
                        help='YAML configuration file')
    parser.add_argument('--log-level', default=None,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Override the configured logging level')

    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('from-eulers', help='Bunge-Euler angles to quaternion')
    p.add_argument('phi1', type=float)
    p.add_argument('PHI', type=float)
    p.add_argument('phi2', type=float)
    p.add_argument('--degrees', action='store_true', help='Angles in degrees')
    p.set_defaults(func=cmd_from_eulers)

    p = sub.add_parser('to-eulers', help='Quaternion to Bunge-Euler angles')
    _add_quaternion_args(p)
    p.add_argument('--degrees', action='store_true', help='Print degrees')
    p.set_defaults(func=cmd_to_eulers)

    p = sub.add_parser('from-angle-axis', help='Angle-axis pair to quaternion')
    p.add_argument('angle', type=float)
    p.add_argument('ax', type=float)
    p.add_argument('ay', type=float)
    p.add_argument('az', type=float)
    p.add_argument('--degrees', action='store_true', help='Angle in degrees')
    p.set_defaults(func=cmd_from_angle_axis)

    p = sub.add_parser('to-angle-axis', help='Quaternion to angle-axis pair')
    _add_quaternion_args(p)
    p.add_argument('--degrees', action='store_true', help='Print degrees')
    p.set_defaults(func=cmd_to_angle_axis)

    p = sub.add_parser('random', help='Uniformly random unit quaternions')
    p.add_argument('--count', type=int, default=None)
    p.add_argument('--seed', type=int, default=None)
    p.set_defaults(func=cmd_random)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:]

    Returns:
        Process exit status (0 on success, 1 on invalid input)
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError, TypeError) as exc:
        print(f"orientation: cannot load configuration: {exc}", file=sys.stderr)
        return 1

    level = args.log_level or config['logging']['level']
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )

    try:
        args.func(args, config)
    except OrientationError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1
    except ValueError as exc:
        logger.error("Invalid input: %s", exc)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
