"""Spectral derivative and shift of a periodic signal via the real FFT."""

from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np


def _as_signal(signal):
    data = np.asarray(signal, dtype=float)
    if data.ndim != 1 or data.size == 0:
        raise ValueError("a signal must be a non-empty one-dimensional array")
    return data


def _wavenumbers(n, length):
    if length <= 0:
        raise ValueError("the period length must be positive")
    return 2.0 * np.pi / length * np.arange(n // 2 + 1)


def gaussian_signal(n, xmin, xmax):
    """Return (x, exp(-x**2)) on ``n`` points of the periodic interval [xmin, xmax)."""
    if n < 1:
        raise ValueError("at least one sample is needed")
    if xmax <= xmin:
        raise ValueError("xmax must exceed xmin")
    dx = (xmax - xmin) / n
    x = xmin + np.arange(n) * dx
    return x, np.exp(-x * x)


def derivative(signal, length):
    """First derivative of a periodic signal sampled over one period ``length``."""
    data = _as_signal(signal)
    k = _wavenumbers(data.size, length)
    return np.fft.irfft(1j * k * np.fft.rfft(data), n=data.size)


def shift(signal, length, a):
    """The periodic signal f(x + a), sampled on the same points."""
    data = _as_signal(signal)
    k = _wavenumbers(data.size, length)
    return np.fft.irfft(np.exp(1j * k * a) * np.fft.rfft(data), n=data.size)


def write_data(path, x, values):
    """Write ``x<TAB>value`` lines."""
    x = np.asarray(x, dtype=float)
    values = np.asarray(values, dtype=float)
    if x.shape != values.shape:
        raise ValueError("x and values must have the same shape")
    with open(path, "w", encoding="utf-8") as fh:
        fh.writelines(f"{xi:g}\t{vi:g}\n" for xi, vi in zip(x, values))


def main(argv=None):
    """Differentiate or shift a Gaussian spectrally and write f and df."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("--mode", choices=("derivative", "shift"), default="derivative")
    parser.add_argument("--points", type=int, default=128)
    parser.add_argument("--xmin", type=float, default=-10.0)
    parser.add_argument("--xmax", type=float, default=10.0)
    parser.add_argument("--shift", type=float, default=5.0)
    parser.add_argument("--directory", default=".")
    args = parser.parse_args(argv)

    directory = Path(args.directory)
    directory.mkdir(parents=True, exist_ok=True)
    length = args.xmax - args.xmin
    x, signal = gaussian_signal(args.points, args.xmin, args.xmax)
    if args.mode == "derivative":
        result = derivative(signal, length)
        # Both files carry the deviation from the exact derivative -2x exp(-x^2).
        correction = 2.0 * x * np.exp(-x * x)
    else:
        result = shift(signal, length, args.shift)
        correction = np.zeros_like(x)
    write_data(directory / "f", x, signal + correction)
    write_data(directory / "df", x, result + correction)
    return 0