#!/usr/bin/env python3
"""
Profile property computation to identify optimization opportunities.
"""

import cProfile
import pstats
import time
from io import StringIO

from graph_properties import (
    Graph,
    check_planarity,
    colour_vertices,
    compute_properties,
    find_biconnected_components,
    random_graph,
)


def generate_grid_graph(rows: int, cols: int) -> Graph:
    """Generate a planar rows x cols grid with integer vertices."""
    adj = {v: [] for v in range(rows * cols)}
    for r in range(rows):
        for c in range(cols):
            v = r * cols + c
            if c + 1 < cols:
                adj[v].append(v + 1)
                adj[v + 1].append(v)
            if r + 1 < rows:
                adj[v].append(v + cols)
                adj[v + cols].append(v)
    return Graph(0, f"grid {rows}x{cols}", False, adj)


def benchmark_properties(n: int, p: float):
    """Build a random graph and return construction time and its size."""
    start = time.perf_counter()
    g = random_graph(n, p, vertex_id=int, seed=n)
    elapsed = time.perf_counter() - start

    return elapsed, g.size()


def benchmark_analyses(g: Graph):
    """Time the individual analyses on one graph."""
    timings = {}
    for label, analysis in [
        ("biconnected", find_biconnected_components),
        ("colouring", colour_vertices),
        ("planarity", check_planarity),
    ]:
        start = time.perf_counter()
        analysis(g)
        timings[label] = time.perf_counter() - start
    return timings


def profile_properties(g: Graph):
    """Profile compute_properties and return stats."""
    profiler = cProfile.Profile()

    profiler.enable()
    compute_properties(g)
    profiler.disable()

    stream = StringIO()
    stats = pstats.Stats(profiler, stream=stream)
    stats.strip_dirs()
    stats.sort_stats("cumulative")
    stats.print_stats(30)

    return stream.getvalue()


def main():
    print("=" * 70)
    print("GRAPH PROPERTIES BENCHMARK")
    print("=" * 70)
    print()

    # Construction computes every property eagerly
    print("TIMING BENCHMARKS (random_graph + properties)")
    print("-" * 70)
    print(f"{'Graph':<30} {'Order':>8} {'p':>8} {'Edges':>8} {'Time':>10}")
    print("-" * 70)

    test_cases = [
        (100, 0.05),
        (500, 0.01),
        (1000, 0.005),
        (2000, 0.002),
    ]

    for n, p in test_cases:
        elapsed, n_edges = benchmark_properties(n, p)
        label = f"Random (n={n})"
        print(f"{label:<30} {n:>8} {p:>8} {n_edges:>8} {elapsed:>9.4f}s")

    print("-" * 70)
    print()

    print("ANALYSES ON GRIDS")
    print("-" * 70)
    print(f"{'Grid':<12} {'Biconnected':>15} {'Colouring':>15} {'Planarity':>15}")
    print("-" * 70)

    for size in [10, 30, 60, 100]:
        timings = benchmark_analyses(generate_grid_graph(size, size))
        print(
            f"{size}x{size:<9} {timings['biconnected']:>14.4f}s"
            f" {timings['colouring']:>14.4f}s {timings['planarity']:>14.4f}s"
        )

    print("-" * 70)
    print()

    # Detailed profiling
    print("=" * 70)
    print("DETAILED PROFILING (60x60 grid)")
    print("=" * 70)

    profile_output = profile_properties(generate_grid_graph(60, 60))
    print(profile_output)


if __name__ == "__main__":
    main()
