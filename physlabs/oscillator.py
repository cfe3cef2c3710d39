"""Relativistic oscillator H = sqrt(1 + p**2) + q**2 / 2 with three integrators."""

from __future__ import annotations

import argparse
import math
from pathlib import Path


def hamiltonian(q, p):
    """Energy of the state (q, p)."""
    return math.sqrt(1.0 + p * p) + 0.5 * q * q


def _velocity(p):
    return p / math.sqrt(1.0 + p * p)


def _integrate(step, q0, p0, dt, tmax):
    if dt <= 0:
        raise ValueError("the time step must be positive")
    q, p = float(q0), float(p0)
    rows = []
    t = 0.0
    while t < tmax:
        q, p = step(q, p, dt)
        rows.append((t, q, p, hamiltonian(q, p)))
        t += dt
    return rows


def _forward_euler_step(q, p, dt):
    return q + dt * _velocity(p), p - dt * q


def _symplectic_euler_step(q, p, dt):
    q = q + dt * _velocity(p)
    return q, p - dt * q


def _stormer_verlet_step(q, p, dt):
    q_half = q + dt / 2 * _velocity(p)
    p = p - dt * q_half
    return q_half + dt / 2 * _velocity(p), p


def forward_euler(q0, p0, dt, tmax):
    """Rows (t, q, p, H) of the explicit Euler method."""
    return _integrate(_forward_euler_step, q0, p0, dt, tmax)


def symplectic_euler(q0, p0, dt, tmax):
    """Rows (t, q, p, H) of the symplectic Euler method."""
    return _integrate(_symplectic_euler_step, q0, p0, dt, tmax)


def stormer_verlet(q0, p0, dt, tmax):
    """Rows (t, q, p, H) of the Stoermer-Verlet method."""
    return _integrate(_stormer_verlet_step, q0, p0, dt, tmax)


def write_trajectory(path, rows):
    """Write ``t<TAB>q<TAB>p<TAB>H`` lines."""
    with open(path, "w", encoding="utf-8") as fh:
        fh.writelines(f"{t:g}\t{q:g}\t{p:g}\t{h:g}\n" for t, q, p, h in rows)


def main(argv=None):
    """Integrate the oscillator with all three methods and write the results."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("--tmax", type=float, default=20.0)
    parser.add_argument("--steps", type=int, default=500)
    parser.add_argument("--q0", type=float, default=3.0)
    parser.add_argument("--p0", type=float, default=0.0)
    parser.add_argument("--directory", default=".")
    args = parser.parse_args(argv)

    if args.steps < 1:
        parser.error("--steps must be positive")
    dt = args.tmax / args.steps
    directory = Path(args.directory)
    directory.mkdir(parents=True, exist_ok=True)
    for name, method in (
        ("dataFE", forward_euler),
        ("dataSE", symplectic_euler),
        ("dataSV", stormer_verlet),
    ):
        write_trajectory(directory / name, method(args.q0, args.p0, dt, args.tmax))
    return 0