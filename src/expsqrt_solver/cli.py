"""
expsqrt Command-Line Interface

Solves e^x = 1/sqrt(x) by bisection from the terminal.
"""

import sys
import argparse
import json
import logging
from pathlib import Path

from . import __version__
from .app_state import parse_number, FAILURE_MARK, SUCCESS_MARK, DEFAULT_A, DEFAULT_B
from .contract import EQUATION, target_function
from .formatting import format_fixed, format_scientific
from .receipts import SolveReceipt, replay_receipt
from .solver import BisectionConfig

logger = logging.getLogger(__name__)


METHOD_DESCRIPTION = (
    "Bisection method:\n"
    "1. Check that f(a)·f(b) < 0\n"
    "2. Halve the interval\n"
    "3. Keep the half where the sign changes\n"
    "4. Repeat until the required precision is reached"
)


def cmd_solve(args):
    """Solve the equation on [a, b]."""
    print("=" * 60)
    print(f"Solving {EQUATION}")
    print("=" * 60)

    a = parse_number(args.a)
    b = parse_number(args.b)
    if a is None or b is None:
        print("Error: invalid numbers")
        return 1

    try:
        config = BisectionConfig(epsilon=args.epsilon, max_iterations=args.max_iter)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print(f"\nInterval: [{a}, {b}]")
    print(f"Epsilon: {config.epsilon}")
    print(f"Max iterations: {config.max_iterations}")

    logger.debug("solving on [%r, %r] with %s", a, b, config)
    receipt = SolveReceipt.issue(a, b, config)
    result = receipt.result

    if result.interval is not None and result.interval.a_adjusted:
        print(f"\nWarning: left bound was adjusted to {config.min_positive}")
    if result.interval is not None and result.interval.b_adjusted:
        print(f"Warning: right bound was adjusted to {config.max_upper}")

    print()
    if result.found:
        print(f"{SUCCESS_MARK} {result.message}")
        print(f"Root: {format_fixed(result.root)}")
        print(f"f(root): {format_scientific(target_function(result.root))} ≈ 0")
    else:
        print(f"{FAILURE_MARK} {result.message}")

    if args.output:
        Path(args.output).write_text(receipt.to_json(), encoding="utf-8")
        print(f"\nReceipt written to {args.output}")

    return 0 if result.found else 1


def cmd_replay(args):
    """Re-run a stored receipt and check it reproduces."""
    path = Path(args.receipt)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        report = replay_receipt(data)
    except (OSError, ValueError, KeyError, TypeError) as e:
        print(f"Error: cannot replay {path}: {e}")
        return 1

    print(f"Receipt: {path}")
    print(f"Hash intact: {'yes' if report.intact else 'no'}")
    print(f"Reproduced: {'yes' if report.reproduced else 'no'}")
    print(f"Replayed result: {report.replayed.result.message}")
    return 0 if report.verified else 1


def cmd_info(args):
    """Print the equation and the method."""
    print(f"Equation: {EQUATION}")
    print("The function is defined only for x > 0")
    print()
    print(METHOD_DESCRIPTION)
    return 0


def cmd_version(args):
    """Print version information."""
    print(f"expsqrt-solver {__version__}")
    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='expsqrt',
        description=f'Bisection solver for {EQUATION}'
    )
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    solve_parser = subparsers.add_parser(
        'solve', help='Find the root in [a, b]',
        epilog='Put bounds after "--" when a starts with "-": expsqrt solve -- -1e-12 1'
    )
    solve_parser.add_argument('a', nargs='?', default=DEFAULT_A,
                              help=f'Left bound (default: {DEFAULT_A})')
    solve_parser.add_argument('b', nargs='?', default=DEFAULT_B,
                              help=f'Right bound (default: {DEFAULT_B})')
    solve_parser.add_argument('--epsilon', '-e', type=float, default=BisectionConfig.epsilon,
                              help='Bracket width tolerance (default: 1e-12)')
    solve_parser.add_argument('--max-iter', '-n', type=int, default=BisectionConfig.max_iterations,
                              help='Max iterations (default: 1000)')
    solve_parser.add_argument('--output', '-o', type=str,
                              help='Write a solve receipt (JSON) to this file')
    solve_parser.set_defaults(func=cmd_solve)

    replay_parser = subparsers.add_parser('replay', help='Verify a solve receipt')
    replay_parser.add_argument('receipt', help='Receipt JSON written by solve --output')
    replay_parser.set_defaults(func=cmd_replay)

    info_parser = subparsers.add_parser('info', help='Describe the equation and method')
    info_parser.set_defaults(func=cmd_info)

    ver_parser = subparsers.add_parser('version', help='Print version')
    ver_parser.set_defaults(func=cmd_version)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
