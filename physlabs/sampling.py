"""Bias of the sample standard deviation for small normal samples."""

from __future__ import annotations

import argparse
import math

import numpy as np


def mean(sample):
    """Arithmetic mean of a non-empty sample."""
    data = np.asarray(sample, dtype=float)
    if data.size == 0:
        raise ValueError("mean of an empty sample")
    return float(data.sum() / data.size)


def stdev(sample, m):
    """Sample standard deviation about ``m`` with N - 1 in the denominator."""
    data = np.asarray(sample, dtype=float)
    if data.size < 2:
        raise ValueError("standard deviation needs at least two values")
    return math.sqrt(float(((data - m) ** 2).sum()) / (data.size - 1))


def mean_stdev(n, trials, rng=None):
    """Mean over ``trials`` experiments of the stdev of ``n`` standard normals."""
    if n < 2:
        raise ValueError("each experiment needs at least two measurements")
    if trials < 1:
        raise ValueError("at least one experiment is needed")
    rng = np.random.default_rng() if rng is None else rng
    samples = rng.standard_normal((trials, n))
    return float(np.std(samples, axis=1, ddof=1).mean())


def main(argv=None):
    """Print the mean sample stdev for sample sizes 2 up to the maximum."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("--max-n", type=int, default=50)
    parser.add_argument("--trials", type=int, default=10000)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = np.random.default_rng(args.seed)
    for n in range(2, args.max_n + 1):
        print(f"{n}\t{mean_stdev(n, args.trials, rng):g}")
    return 0