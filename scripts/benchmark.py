#!/usr/bin/env python
"""
Cast random rays at a cone frustum and display a timing breakdown.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --rays 100000 --seed 3
    python scripts/benchmark.py --json

Profiling markers must not be compiled out (do not set
CONEFRUSTUM_NO_PROFILING and do not run with -O).
"""

import argparse
import json
import sys
import time
from pathlib import Path

import numpy as np

# Add project paths for development
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from conefrustum import ConeFrustum, Ray
from conefrustum.profiling import (
    _PROFILING_COMPILED_OUT,
    enable_profiling,
    get_profile_results,
    perf_marker,
    reset_profile,
)


# ANSI colors for output
RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
GREEN = "\033[32m"
CYAN = "\033[36m"


def run_benchmark(ray_count: int, seed: int) -> dict:
    """Intersect ray_count random rays with a tilted frustum. Returns a summary dict."""
    frustum = ConeFrustum.from_capsule((0.0, 0.0, 0.0), 1.5, (2.0, 3.0, 1.0), 0.5)
    bounds = frustum.bounding_box()

    rng = np.random.default_rng(seed)
    origins = rng.uniform(-10.0, 10.0, size=(ray_count, 3))
    targets = rng.uniform(bounds.min.to_array() - 1.0, bounds.max.to_array() + 1.0, size=(ray_count, 3))
    rays = [Ray(o, t - o) for o, t in zip(origins, targets)]

    reset_profile()
    enable_profiling()
    start = time.perf_counter()
    hits = 0
    with perf_marker("benchmark"):
        for ray in rays:
            if ray.intersects_cone_frustum(frustum) is not None:
                hits += 1
    elapsed_ms = (time.perf_counter() - start) * 1000
    enable_profiling(False)

    return {
        'rays': ray_count,
        'hits': hits,
        'elapsed_ms': round(elapsed_ms, 3),
        'us_per_ray': round(elapsed_ms * 1000 / ray_count, 3) if ray_count else 0.0,
        'markers': get_profile_results(),
    }


def print_report(summary: dict) -> None:
    print(f"{BOLD}RAY / CONE FRUSTUM BENCHMARK{RESET}")
    print(f"  rays      {summary['rays']}")
    print(f"  hits      {GREEN}{summary['hits']}{RESET}")
    print(f"  total     {summary['elapsed_ms']:.1f}ms  {DIM}({summary['us_per_ray']:.2f}µs per ray){RESET}")
    print()
    print(f"  {'marker':<28} {'count':>8} {'total':>10} {'avg':>10}")
    print(f"  {'─' * 28} {'─' * 8} {'─' * 10} {'─' * 10}")
    for name, m in sorted(summary['markers'].items(), key=lambda kv: -kv[1]['total_ms']):
        print(f"  {CYAN}{name:<28}{RESET} {m['count']:>8} {m['total_ms']:>8.1f}ms {m['avg_ms'] * 1000:>8.1f}µs")
    print()


def main():
    parser = argparse.ArgumentParser(description="Benchmark ray / cone frustum intersection.")
    parser.add_argument("-n", "--rays", type=int, default=20000, help="Number of random rays (default: 20000)")
    parser.add_argument("--seed", type=int, default=0, help="Random seed (default: 0)")
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON")

    args = parser.parse_args()

    if _PROFILING_COMPILED_OUT:
        print("Error: profiling is compiled out (CONEFRUSTUM_NO_PROFILING or -O)")
        return 1

    summary = run_benchmark(args.rays, args.seed)

    if args.json:
        print(json.dumps(summary, indent=2))
    else:
        print_report(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
