"""Nonlinear Schroedinger equation solved by operator splitting."""

from __future__ import annotations

import argparse
import math
from pathlib import Path

import numpy as np

from physlabs.diffusion import implicit_step

_POINTS = 1000
_LENGTH = 200.0
_T_END = 200.0
_SNAPSHOTS = 100
_ETA = 0.2


def soliton(x, eta):
    """Bright soliton sqrt(2) eta / cosh(eta x) as a complex field."""
    x = np.asarray(x, dtype=float)
    return (math.sqrt(2.0) * eta / np.cosh(eta * x)).astype(complex)


def linear_step(psi, dt, dx):
    """Implicit step of the dispersive part with a = i dt / dx**2."""
    return implicit_step(np.asarray(psi, dtype=complex), 1j * dt / dx / dx)


def nonlinear_step(psi, dt):
    """Rotate every value by the phase |psi|**2 dt."""
    psi = np.asarray(psi, dtype=complex)
    phi = np.abs(psi) ** 2 * dt
    return psi * np.exp(1j * phi)


def write_field(path, x, psi):
    """Write ``x<TAB>|psi|^2<TAB>Re psi<TAB>Im psi`` lines."""
    x = np.asarray(x, dtype=float)
    psi = np.asarray(psi, dtype=complex)
    if x.shape != psi.shape:
        raise ValueError("x and psi must have the same shape")
    with open(path, "w", encoding="utf-8") as fh:
        fh.writelines(
            f"{xi:g}\t{abs(p) ** 2:g}\t{p.real:g}\t{p.imag:g}\n" for xi, p in zip(x, psi)
        )


def run(directory):
    """Evolve a soliton, writing psi_0 .. psi_100 into ``directory``.

    Returns (steps per snapshot, accumulated time, final field).
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    xmin = -_LENGTH / 2
    dx = _LENGTH / (_POINTS - 1)
    dt = dx / 10
    substeps = int(_T_END / _SNAPSHOTS / dt + 0.5)
    x = xmin + np.arange(_POINTS) * dx

    psi = soliton(x, _ETA)
    write_field(directory / "psi_0", x, psi)
    t = 0.0
    for index in range(1, _SNAPSHOTS + 1):
        psi = linear_step(psi, dt * 0.5, dx)
        psi = nonlinear_step(psi, dt)
        for _ in range(substeps - 2):
            psi = nonlinear_step(linear_step(psi, dt, dx), dt)
            t += dt
        psi = linear_step(psi, dt * 0.5, dx)
        write_field(directory / f"psi_{index}", x, psi)
    return substeps, t, psi


def main(argv=None):
    """Solve the nonlinear Schroedinger equation and write the snapshots."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("--directory", default=".")
    args = parser.parse_args(argv)

    substeps, t, _ = run(args.directory)
    print(f"Nk = {substeps}")
    print(f"t = {t:g}")
    return 0