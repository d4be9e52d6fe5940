"""Command-line entry point for the Newton-Cotes demonstration."""

import argparse
from typing import List, Optional, Sequence, Tuple

from torchcotes.demo._example import METHODS, example, format_example
from torchcotes.demo._integrands import INTEGRANDS
from torchcotes.quadrature import get_rule

PROMPT = "Integration bounds(separated by a space): "


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def parse_bounds(text: str) -> Tuple[float, float]:
    """Parse two whitespace-separated numbers."""
    parts = text.split()
    if len(parts) != 2:
        raise ValueError(f"expected two bounds, got {len(parts)}")
    return float(parts[0]), float(parts[1])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="torchcotes-demo",
        description=(
            "Integrate an example function between two bounds with each "
            "Newton-Cotes rule, at a base and a doubled iteration count."
        ),
    )
    parser.add_argument(
        "bounds",
        nargs="*",
        type=float,
        metavar="BOUND",
        help="lower and upper bound; read from standard input if omitted",
    )
    parser.add_argument(
        "--iterations",
        type=_positive_int,
        default=100,
        help="base number of subintervals (default: 100)",
    )
    parser.add_argument(
        "--integrand",
        choices=list(INTEGRANDS),
        default="x^2",
        help="function to integrate (default: x^2)",
    )
    parser.add_argument(
        "--method",
        dest="methods",
        action="append",
        choices=[rule for _, rule in METHODS],
        help="rule to run, may be repeated (default: all)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstration. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.bounds) == 2:
        a, b = args.bounds
    elif not args.bounds:
        try:
            a, b = parse_bounds(input(PROMPT))
        except (EOFError, ValueError) as e:
            parser.error(f"invalid bounds: {e}")
    else:
        parser.error(f"expected two bounds, got {len(args.bounds)}")

    f = INTEGRANDS[args.integrand]
    selected: List[str] = args.methods or [rule for _, rule in METHODS]

    for method_name, rule in METHODS:
        if rule not in selected:
            continue

        results = example(
            get_rule(rule),
            method_name,
            f,
            a,
            b,
            iterations=args.iterations,
        )

        print()
        print(format_example(results, a, b))

    return 0
