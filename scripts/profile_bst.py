"""
Profiling script for PyBST tree operations.

This script profiles insertion, lookup, deletion and the level-order queries
on random and sorted key orders.
"""

import cProfile
import pstats
import io
from pstats import SortKey
import time
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np
from pybst import OrderedTree


def create_keys(n_keys, shuffled=True):
    """Create n distinct integer keys, shuffled or ascending."""
    rng = np.random.default_rng(42)
    keys = np.arange(n_keys)
    if shuffled:
        keys = rng.permutation(keys)
    return [int(k) for k in keys]


def exercise_tree(keys):
    """Build a tree, query it, then delete half of the keys."""
    tree = OrderedTree()
    for key in keys:
        tree.insert(key)
    for key in keys:
        tree.contains(key)
    tree.count_leaves()
    tree.single_child_nodes()
    for key in keys[::50]:
        tree.cousins_of(key)
    for key in keys[::2]:
        tree.delete(key)
    tree.in_order()


def profile_random_small():
    """Profile 1,000 keys in random order."""
    exercise_tree(create_keys(1000))


def profile_random_large():
    """Profile 50,000 keys in random order."""
    exercise_tree(create_keys(50000))


def profile_sorted():
    """Profile 2,000 keys in ascending order (degenerate tree)."""
    exercise_tree(create_keys(2000, shuffled=False))


def profile_scenario(name, func, top=10):
    """Profile one scenario, listing only calls into pybst."""
    profiler = cProfile.Profile()
    start = time.perf_counter()
    profiler.runcall(func)
    elapsed = time.perf_counter() - start

    s = io.StringIO()
    stats = pstats.Stats(profiler, stream=s).sort_stats(SortKey.TIME)
    stats.print_stats("pybst", top)

    print(f"--- {name}: {elapsed:.3f}s")
    print(s.getvalue())
    return elapsed


def main():
    scenarios = [
        ("random, 1000 keys", profile_random_small),
        ("random, 50000 keys", profile_random_large),
        ("sorted, 2000 keys", profile_sorted),
    ]

    timings = [(name, profile_scenario(name, func)) for name, func in scenarios]

    print(f"{'scenario':<24}{'seconds':>10}")
    for name, elapsed in timings:
        print(f"{name:<24}{elapsed:>10.3f}")


if __name__ == "__main__":
    main()
