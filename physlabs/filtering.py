"""Periodic three-point smoothing of a series read from a text file."""

from __future__ import annotations

import argparse


def read_values(path, count):
    """Read the first ``count`` whitespace-separated numbers from ``path``."""
    with open(path, encoding="utf-8") as fh:
        tokens = fh.read().split()
    if len(tokens) < count:
        raise ValueError(f"{path} holds {len(tokens)} values, {count} needed")
    return [float(token) for token in tokens[:count]]


def write_values(path, values):
    """Write one value per line."""
    with open(path, "w", encoding="utf-8") as fh:
        fh.writelines(f"{value:g}\n" for value in values)


def smooth(values):
    """Average every value with its two neighbours, wrapping at the ends."""
    values = list(values)
    if not values:
        raise ValueError("cannot smooth an empty series")
    previous = values[-1:] + values[:-1]
    following = values[1:] + values[:1]
    return [(v + p + n) / 3.0 for v, p, n in zip(values, previous, following)]


def main(argv=None):
    """Smooth a noisy series several times and write the result."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("--input", default="noisy.txt")
    parser.add_argument("--output", default="filtered.txt")
    parser.add_argument("--count", type=int, default=237)
    parser.add_argument("--passes", type=int, default=3)
    args = parser.parse_args(argv)

    values = read_values(args.input, args.count)
    for _ in range(args.passes):
        values = smooth(values)
    write_values(args.output, values)
    return 0