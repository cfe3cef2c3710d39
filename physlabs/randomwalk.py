"""Two-dimensional random walks of many independent particles."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

import numpy as np

_STATISTICS_FILE = "statistics"
_BASENAME = "rwalk"
_DENSITY_FILE = "density"


@dataclass(frozen=True)
class Statistics:
    """Mean squared displacement and summed coordinates of an ensemble."""

    msd: float
    sx: float
    sy: float


def _as_positions(positions):
    data = np.asarray(positions, dtype=float)
    if data.ndim != 2 or data.shape[1] != 2:
        raise ValueError("positions must be an array of shape (n, 2)")
    return data


def init_particles(n):
    """All ``n`` particles at the origin, as an (n, 2) array."""
    if n < 0:
        raise ValueError("the number of particles cannot be negative")
    return np.zeros((n, 2), dtype=float)


def _push(positions, lengths, phi):
    steps = np.column_stack((lengths * np.cos(phi), lengths * np.sin(phi)))
    return positions + steps


def push_uniform(positions, rng=None):
    """One step per particle in a random direction, length uniform in [0, 1)."""
    positions = _as_positions(positions)
    rng = np.random.default_rng() if rng is None else rng
    n = len(positions)
    phi = 2.0 * np.pi * rng.random(n)
    lengths = rng.random(n)
    return _push(positions, lengths, phi)


def push_unit(positions, rng=None):
    """One step of length 1 per particle in a random direction."""
    positions = _as_positions(positions)
    rng = np.random.default_rng() if rng is None else rng
    phi = 2.0 * np.pi * rng.random(len(positions))
    return _push(positions, np.ones(len(positions)), phi)


def statistics(positions):
    """Mean squared distance from the origin and the coordinate sums."""
    positions = _as_positions(positions)
    if len(positions) == 0:
        raise ValueError("statistics of an empty ensemble")
    x, y = positions[:, 0], positions[:, 1]
    msd = float((x * x + y * y).sum() / len(positions))
    return Statistics(msd=msd, sx=float(x.sum()), sy=float(y.sum()))


def create_filename(basename, index):
    """File name ``<basename>_<index>``."""
    return f"{basename}_{index}"


def write_text(positions, path, precise=False):
    """Write ``x<TAB>y`` lines; ``precise`` keeps all 17 significant digits."""
    positions = _as_positions(positions)
    spec = ".17g" if precise else "g"
    with open(path, "w", encoding="utf-8") as fh:
        fh.writelines(f"{x:{spec}}\t{y:{spec}}\n" for x, y in positions)


def write_binary(positions, path):
    """Write the coordinates as consecutive native doubles x0 y0 x1 y1 ..."""
    positions = np.ascontiguousarray(_as_positions(positions), dtype=np.float64)
    with open(path, "wb") as fh:
        fh.write(positions.tobytes())


def read_binary(path):
    """Read positions written by :func:`write_binary`."""
    raw = Path(path).read_bytes()
    record = 2 * np.dtype(np.float64).itemsize
    if len(raw) % record:
        raise ValueError(f"{path} does not hold whole (x, y) pairs")
    return np.frombuffer(raw, dtype=np.float64).reshape(-1, 2).copy()


def calc_density(positions, nsteps, bins=512):
    """Histogram of positions on a bins-by-bins grid over [-nsteps, nsteps].

    Row i counts from the top (largest y), column j from the left.
    """
    positions = _as_positions(positions)
    if nsteps <= 0 or bins <= 0:
        raise ValueError("nsteps and bins must be positive")
    h = 2 * nsteps / float(bins)
    j = np.trunc((positions[:, 0] + nsteps) / h).astype(np.int64)
    i = np.trunc((nsteps - positions[:, 1]) / h).astype(np.int64)
    outside = (i < 0) | (i >= bins) | (j < 0) | (j >= bins)
    if outside.any():
        raise ValueError("a particle lies outside the density grid")
    density = np.zeros((bins, bins), dtype=np.int64)
    np.add.at(density, (i, j), 1)
    return density


def write_density(density, nsteps, path):
    """Write ``x<TAB>y<TAB>count`` lines, a blank line after each row."""
    density = np.asarray(density)
    if density.ndim != 2 or density.shape[0] != density.shape[1]:
        raise ValueError("density must be a square array")
    bins = density.shape[0]
    h = 2 * nsteps / float(bins)
    lower = -nsteps
    with open(path, "w", encoding="utf-8") as fh:
        for i, row in enumerate(density):
            y = lower + (i + 0.5) * h
            fh.writelines(
                f"{lower + (j + 0.5) * h:g}\t{y:g}\t{count}\n"
                for j, count in enumerate(row)
            )
            fh.write("\n")


def simulate(directory, npart=50000, nsteps=500, nfiles=20, unit_steps=False, rng=None):
    """Run the walk, writing snapshots and statistics into ``directory``.

    With ``unit_steps`` the steps have length 1, snapshots are binary and a
    density map of the final positions is written; otherwise step lengths are
    uniform in [0, 1) and snapshots are text. Returns the final positions and
    the statistics of every snapshot.
    """
    if nfiles < 1:
        raise ValueError("at least one output file is needed")
    if npart < 1:
        raise ValueError("at least one particle is needed")
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    rng = np.random.default_rng() if rng is None else rng
    push = push_unit if unit_steps else push_uniform
    substeps = nsteps // nfiles

    positions = init_particles(npart)
    history = []
    with open(directory / _STATISTICS_FILE, "w", encoding="utf-8") as stat_file:
        for index in range(nfiles + 1):
            stats = statistics(positions)
            history.append(stats)
            stat_file.write(f"{index}\t{stats.msd:g}\t{stats.sx:g}\t{stats.sy:g}\n")
            target = directory / create_filename(_BASENAME, index)
            if unit_steps:
                write_binary(positions, target)
            else:
                write_text(positions, target)
            for _ in range(substeps):
                positions = push(positions, rng)

    if unit_steps:
        density = calc_density(positions, nsteps)
        write_density(density, nsteps, directory / _DENSITY_FILE)
    return positions, history


def main(argv=None):
    """Simulate a random walk ensemble and write its snapshots."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("--particles", type=int, default=50000)
    parser.add_argument("--steps", type=int, default=500)
    parser.add_argument("--files", type=int, default=20)
    parser.add_argument("--unit", action="store_true", help="unit-length steps")
    parser.add_argument("--directory", default=".")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    simulate(
        args.directory,
        npart=args.particles,
        nsteps=args.steps,
        nfiles=args.files,
        unit_steps=args.unit,
        rng=np.random.default_rng(args.seed),
    )
    return 0