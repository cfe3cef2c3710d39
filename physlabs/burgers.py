"""Inviscid Burgers equation u_t + u u_x = 0 with leapfrog and Lax-Wendroff."""

from __future__ import annotations

import argparse
import math
from pathlib import Path

import numpy as np

_XMIN = 0.0
_XMAX = 1.0
_POINTS = 64
_SNAPSHOTS = 10
_T_END = 1.0 / (2.0 * math.pi)
_SCHEMES = ("lf", "lw")


def _as_field(u):
    data = np.asarray(u, dtype=float)
    if data.ndim != 1 or data.size < 2:
        raise ValueError("a field must be a one-dimensional array of at least two values")
    return data


def initial_levels(x, dt):
    """Return (u_prev, u_curr): sin(2 pi x) and its Taylor expansion one step back."""
    x = np.asarray(x, dtype=float)
    u = np.sin(2 * math.pi * x)
    ux = 2 * math.pi * np.cos(2 * math.pi * x)
    uxx = -4 * math.pi * math.pi * u
    u_prev = u + dt * u * ux + dt * dt * 0.5 * (u * u * uxx + 2 * u * ux * ux)
    return u_prev, u.copy()


def leapfrog_step(u_prev, u_curr, dt, dx):
    """Next level of the leapfrog scheme on a periodic grid."""
    u_prev = _as_field(u_prev)
    u_curr = _as_field(u_curr)
    if u_prev.shape != u_curr.shape:
        raise ValueError("both levels must have the same shape")
    c = dt / dx
    return u_prev - c * u_curr * (np.roll(u_curr, -1) - np.roll(u_curr, 1))


def lax_wendroff_step(u, dt, dx):
    """One two-stage Lax-Wendroff step on a periodic grid."""
    u = _as_field(u)
    c = dt / dx
    right = np.roll(u, -1)
    half = 0.5 * ((right + u) + c * u * (right - u))
    return u - c * u * (half - np.roll(half, 1))


def analytic_profile(x, tend):
    """Characteristics of sin(2 pi x) carried to ``tend``: returns (xi, u)."""
    x = np.asarray(x, dtype=float)
    u = np.sin(2 * math.pi * x)
    return x + u * tend, u


def write_profile(path, x, u):
    """Write ``x<TAB>u`` lines."""
    x = np.asarray(x, dtype=float)
    u = np.asarray(u, dtype=float)
    if x.shape != u.shape:
        raise ValueError("x and u must have the same shape")
    with open(path, "w", encoding="utf-8") as fh:
        fh.writelines(f"{xi:g}\t{ui:g}\n" for xi, ui in zip(x, u))


def run(scheme, directory):
    """Integrate with ``scheme`` ("lf" or "lw") and write the snapshots.

    Writes ``u_0``, ``ana`` and ``<scheme>u_1`` .. ``<scheme>u_10`` into
    ``directory``. Returns (steps per snapshot, final time, last written field).
    """
    if scheme not in _SCHEMES:
        raise ValueError(f"unknown scheme {scheme!r}, expected one of {_SCHEMES}")
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    dx = (_XMAX - _XMIN) / _POINTS
    dt = dx / 2
    substeps = int(_T_END / _SNAPSHOTS / dt)
    x = _XMIN + np.arange(_POINTS) * dx

    u_prev, u_curr = initial_levels(x, dt)
    write_profile(directory / "u_0", x, u_prev)
    xi, u_exact = analytic_profile(x, _T_END)
    write_profile(directory / "ana", xi, u_exact)

    if scheme == "lf":
        state = (u_prev, u_curr)

        def advance(levels):
            prev, curr = levels
            return curr, leapfrog_step(prev, curr, dt, dx)

    else:
        state = (u_prev,)

        def advance(levels):
            return (lax_wendroff_step(levels[0], dt, dx),)

    t = 0.0
    for index in range(1, _SNAPSHOTS + 1):
        for _ in range(substeps):
            state = advance(state)
            t += dt
        write_profile(directory / f"{scheme}u_{index}", x, state[0])
    return substeps, t, state[0]


def main(argv=None):
    """Solve the Burgers equation and write the snapshots."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("--scheme", choices=_SCHEMES, default="lf")
    parser.add_argument("--directory", default=".")
    args = parser.parse_args(argv)

    substeps, t, _ = run(args.scheme, args.directory)
    print(f"Nk = {substeps}")
    print(f"t = {t:g}")
    return 0