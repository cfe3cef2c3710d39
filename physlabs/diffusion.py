"""Heat equation u_t = D u_xx with an implicit Euler step."""

from __future__ import annotations

import argparse
import math
from pathlib import Path

import numpy as np

_XMIN = -20.0
_XMAX = 20.0
_POINTS = 200
_SNAPSHOTS = 10
_T_END = 5.0
_DIFFUSIVITY = 1.0


def gaussian(x, t):
    """Heat kernel started at t = -1, evaluated at time ``t``."""
    x = np.asarray(x, dtype=float)
    return 1.0 / math.sqrt(4.0 * math.pi * (t + 1.0)) * np.exp(-x * x / (4.0 * (t + 1.0)))


def implicit_step(u, alpha):
    """Solve (1 + 2a) v_i - a (v_{i-1} + v_{i+1}) = u_i, zero outside the grid.

    ``alpha`` may be complex; the result has the wider of the two types.
    """
    values = np.asarray(u)
    if values.ndim != 1 or values.size < 2:
        raise ValueError("a field must be a one-dimensional array of at least two values")
    dtype = np.result_type(values, np.asarray(alpha), np.float64)
    alpha = np.asarray(alpha, dtype=dtype).item()
    rhs = values.astype(dtype).tolist()

    diagonal = 1.0 + 2.0 * alpha
    pivots = [diagonal]
    reduced = [rhs[0]]
    for value in rhs[1:]:
        factor = alpha / pivots[-1]
        pivots.append(diagonal - alpha * factor)
        reduced.append(value + factor * reduced[-1])

    solution = [reduced[-1] / pivots[-1]]
    for value, pivot in zip(reversed(reduced[:-1]), reversed(pivots[:-1])):
        solution.append((value + alpha * solution[-1]) / pivot)
    solution.reverse()
    return np.array(solution, dtype=dtype)


def write_profile(path, x, u, t):
    """Write ``x<TAB>u<TAB>exact`` lines, the exact value taken at time ``t``."""
    x = np.asarray(x, dtype=float)
    u = np.asarray(u, dtype=float)
    if x.shape != u.shape:
        raise ValueError("x and u must have the same shape")
    exact = gaussian(x, t)
    with open(path, "w", encoding="utf-8") as fh:
        fh.writelines(f"{xi:g}\t{ui:g}\t{ei:g}\n" for xi, ui, ei in zip(x, u, exact))


def run(directory):
    """Diffuse a Gaussian up to t = 5, writing u_0 .. u_10 into ``directory``.

    Returns (steps per snapshot, final time, final field).
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    dx = (_XMAX - _XMIN) / (_POINTS - 1)
    dt = dx
    substeps = int(_T_END / _SNAPSHOTS / dt)
    alpha = _DIFFUSIVITY * dt / dx / dx
    x = _XMIN + np.arange(_POINTS) * dx

    t = 0.0
    u = gaussian(x, t)
    write_profile(directory / "u_0", x, u, t)
    for index in range(1, _SNAPSHOTS + 1):
        for _ in range(substeps):
            u = implicit_step(u, alpha)
            t += dt
        write_profile(directory / f"u_{index}", x, u, t)
    return substeps, t, u


def main(argv=None):
    """Solve the heat equation and write the snapshots."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("--directory", default=".")
    args = parser.parse_args(argv)

    substeps, t, _ = run(args.directory)
    print(f"Nk = {substeps}")
    print(f"t = {t:g}")
    return 0