"""Linear advection u_t + V u_x = 0 on a periodic grid: FTCS and upwind schemes."""

from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np

_XMIN = -10.0
_XMAX = 10.0
_POINTS = 256
_SNAPSHOTS = 10
_VELOCITY = 1.0


def _as_field(u):
    data = np.asarray(u, dtype=float)
    if data.ndim != 1 or data.size < 2:
        raise ValueError("a field must be a one-dimensional array of at least two values")
    return data


def grid(xmin, dx, n):
    """The ``n`` grid points ``xmin + i * dx``."""
    if n < 0:
        raise ValueError("the number of grid points cannot be negative")
    return xmin + np.arange(n) * dx


def box_profile(x, x0=0.0):
    """1 where ``|x - x0| <= 1``, else 0."""
    x = np.asarray(x, dtype=float)
    return np.where(np.abs(x - x0) <= 1.0, 1.0, 0.0)


def ftcs_step(u, c):
    """One forward-time centred-space step; ``c`` is the Courant number V*dt/dx."""
    u = _as_field(u)
    return u - 0.5 * c * (np.roll(u, -1) - np.roll(u, 1))


def upwind_step(u, c):
    """One first-order upwind step for V > 0; ``c`` is the Courant number V*dt/dx."""
    u = _as_field(u)
    return u - c * (u - np.roll(u, 1))


def write_profile(path, x, u):
    """Write ``x<TAB>u`` lines."""
    x = np.asarray(x, dtype=float)
    u = np.asarray(u, dtype=float)
    if x.shape != u.shape:
        raise ValueError("x and u must have the same shape")
    with open(path, "w", encoding="utf-8") as fh:
        fh.writelines(f"{xi:g}\t{ui:g}\n" for xi, ui in zip(x, u))


def _evolve(directory, prefix, step, c, u, x, substeps):
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    write_profile(directory / f"{prefix}_0", x, u)
    for index in range(1, _SNAPSHOTS + 1):
        for _ in range(substeps):
            u = step(u, c)
        write_profile(directory / f"{prefix}_{index}", x, u)
    return x, u


def run_ftcs(directory):
    """Advect a box with FTCS up to t = 15, writing f_0 .. f_10; returns (x, u)."""
    t_end = 15.0
    dx = (_XMAX - _XMIN) / (_POINTS - 1)
    dt = dx / _VELOCITY
    substeps = int(t_end / _SNAPSHOTS / dt)
    x = grid(_XMIN, dx, _POINTS)
    u = box_profile(x)
    return _evolve(directory, "f", ftcs_step, _VELOCITY * dt / dx, u, x, substeps)


def run_upwind(directory):
    """Advect a box centred at -5 upwind up to t = 10, writing u_0 .. u_10."""
    t_end = 10.0
    x0 = -5.0
    dx = (_XMAX - _XMIN) / (_POINTS - 1)
    dt = 0.9 * dx / _VELOCITY
    substeps = int(t_end / _SNAPSHOTS / dt)
    x = grid(_XMIN, dx, _POINTS)
    u = box_profile(x, x0)
    return _evolve(directory, "u", upwind_step, _VELOCITY * dt / dx, u, x, substeps)


def main(argv=None):
    """Run the advection schemes and write their snapshots."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("--scheme", choices=("ftcs", "upwind", "both"), default="both")
    parser.add_argument("--directory", default=".")
    args = parser.parse_args(argv)

    if args.scheme in ("ftcs", "both"):
        run_ftcs(args.directory)
    if args.scheme in ("upwind", "both"):
        run_upwind(args.directory)
    return 0