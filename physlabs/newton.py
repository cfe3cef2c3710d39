"""Newton iteration counts for z**3 = 1 over a square of the complex plane."""

from __future__ import annotations

import argparse

import numpy as np

from physlabs.timer import Timer

_TOLERANCE = 1e-6


def iterations(z0, max_iter=256):
    """Newton steps taken from ``z0`` until a step is shorter than 1e-6."""
    z0 = complex(z0)
    for k in range(max_iter):
        try:
            z = z0 - (z0 * z0 * z0 - 1.0) / (3.0 * z0 * z0)
        except ZeroDivisionError:
            return max_iter
        if abs(z - z0) < _TOLERANCE:
            return k
        z0 = z
    return max_iter


def iteration_counts(n=2000, lower=-2.0, upper=2.0, max_iter=256):
    """Counts on an n-by-n grid; row i is the imaginary, column j the real axis."""
    if n < 2:
        raise ValueError("the grid needs at least two points per axis")
    h = (upper - lower) / (n - 1)
    axis = lower + np.arange(n) * h
    grid = np.empty((n, n), dtype=complex)
    grid.real = axis[np.newaxis, :]
    grid.imag = axis[:, np.newaxis]

    counts = np.full(n * n, max_iter, dtype=np.int64)
    index = np.arange(n * n)
    z0 = grid.ravel()
    with np.errstate(all="ignore"):
        for k in range(max_iter):
            if index.size == 0:
                break
            z = z0 - (z0 * z0 * z0 - 1.0) / (3.0 * z0 * z0)
            converged = np.abs(z - z0) < _TOLERANCE
            counts[index[converged]] = k
            remaining = ~converged
            index = index[remaining]
            z0 = z[remaining]
    return counts.reshape(n, n)


def write_counts(path, counts):
    """Write ``row<TAB>column<TAB>count`` lines."""
    with open(path, "w", encoding="utf-8") as fh:
        fh.writelines(f"{i}\t{j}\t{c}\n" for (i, j), c in np.ndenumerate(counts))


def main(argv=None):
    """Compute the Newton fractal, write it, and report the time taken."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("--size", type=int, default=2000)
    parser.add_argument("--max-iter", type=int, default=256)
    parser.add_argument("--output", default="out")
    args = parser.parse_args(argv)

    timer = Timer()
    timer.tick()
    counts = iteration_counts(args.size, -2.0, 2.0, args.max_iter)
    timer.tock()
    print(f"tau = {float(timer.duration()):g} ms")

    timer.tick()
    write_counts(args.output, counts)
    timer.tock()
    print(f"IO = {float(timer.duration()):g} ms")
    return 0