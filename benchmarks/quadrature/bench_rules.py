"""Benchmark Newton-Cotes rules.

Compares accuracy and runtime of the five composite rules on
integral_0^pi sin(x) dx = 2 as the number of subintervals grows, and
reports the observed order of convergence log2(e(n) / e(2n)).
"""

import math
import time
from typing import Optional

import torch

from torchcotes.quadrature import NewtonCotes, get_rule

EXACT = 2.0

# Multiples of 12 conform to every rule
SUBINTERVALS = [12, 24, 48, 96, 192]


def benchmark_rule(rule: str, n: int, n_iterations: int = 100) -> float:
    """Benchmark one rule at a given subinterval count.

    Parameters
    ----------
    rule : str
        Registered rule name.
    n : int
        Number of subintervals.
    n_iterations : int
        Number of iterations for timing.

    Returns
    -------
    float
        Average time per integration in microseconds.
    """
    evaluate = get_rule(rule)

    # Warmup
    for _ in range(3):
        _ = evaluate(torch.sin, n, 0.0, math.pi)

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = evaluate(torch.sin, n, 0.0, math.pi)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1e6  # us


def absolute_error(rule: str, n: int) -> float:
    return abs(get_rule(rule)(torch.sin, n, 0.0, math.pi).item() - EXACT)


def observed_order(previous: Optional[float], error: float) -> Optional[float]:
    """log2(previous / error), or None when either error is zero or missing."""
    if previous is not None and previous > 0 and error > 0:
        return math.log2(previous / error)
    return None


def main():
    """Run accuracy and timing benchmarks for every rule."""
    print("Newton-Cotes Rules Benchmark: integral of sin(x) on [0, pi]")
    print("=" * 70)
    print(
        f"{'Rule':>12} {'n':>6} {'Abs error':>14} {'Order':>8} {'Time (us)':>12}"
    )
    print("-" * 70)

    for rule in NewtonCotes.rules:
        previous = None

        for n in SUBINTERVALS:
            error = absolute_error(rule, n)

            order = observed_order(previous, error)
            column = f"{order:8.2f}" if order is not None else f"{'-':>8}"

            us = benchmark_rule(rule, n)

            print(f"{rule:>12} {n:>6} {error:>14.3e} {column} {us:>12.1f}")

            previous = error

        print("-" * 70)


if __name__ == "__main__":
    main()
