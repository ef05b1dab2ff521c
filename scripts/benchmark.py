#!/usr/bin/env python3
"""Benchmark script for catalogfilter performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of catalogfilter package."""
    start = time.perf_counter()
    import catalogfilter  # noqa: F401

    return time.perf_counter() - start


def _synthetic_events(count: int) -> tuple[object, ...]:
    from catalogfilter.domain.model.event import Event

    return tuple(
        Event(
            name=f"Event{i}Created",
            domain=f"Domain{i % 20}",
            producer_names=(f"Service{i % 50}",),
            consumer_names=(f"Service{(i + 7) % 50}", f"Service{(i + 13) % 50}"),
        )
        for i in range(count)
    )


def benchmark_compute_visible(count: int) -> float:
    """Measure 100 recomputations with all three dimensions constrained."""
    from catalogfilter.application.engine import compute_visible
    from catalogfilter.domain.model.filter_state import FilterState

    events = _synthetic_events(count)
    state = FilterState(
        selected_services=frozenset({"Service1", "Service2", "Service3"}),
        selected_domains=frozenset({"Domain1", "Domain2"}),
        search_text="created",
    )

    start = time.perf_counter()
    for _ in range(100):
        compute_visible(events, state)  # type: ignore[arg-type]
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run catalogfilter benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument("--events", type=int, default=10000, help="Synthetic catalog size")
    args = parser.parse_args()

    results = [
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": benchmark_import_time(),
        },
        {
            "name": f"compute_visible ({args.events} events, 100 runs)",
            "unit": "seconds",
            "value": benchmark_compute_visible(args.events),
        },
    ]

    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
