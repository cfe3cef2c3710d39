import numpy as np
import pytest

from physlabs.spectral import derivative, gaussian_signal, main, shift, write_data


def test_gaussian_signal_grid():
    x, s = gaussian_signal(128, -10, 10)
    assert len(x) == 128
    assert x[0] == pytest.approx(-10)
    assert x[-1] < 10
    assert np.allclose(np.diff(x), 20 / 128)
    assert np.allclose(s, np.exp(-x * x))


def test_gaussian_signal_rejects_bad_interval():
    with pytest.raises(ValueError):
        gaussian_signal(16, 1.0, -1.0)


def test_derivative_of_gaussian():
    x, s = gaussian_signal(128, -10, 10)
    assert np.allclose(derivative(s, 20.0), -2 * x * np.exp(-x * x), atol=1e-8)


def test_derivative_of_sine():
    n, length = 64, 4.0
    x = np.arange(n) * length / n
    w = 2 * np.pi / length
    assert np.allclose(derivative(np.sin(w * x), length), w * np.cos(w * x), atol=1e-10)


def test_derivative_of_constant_is_zero():
    assert np.allclose(derivative(np.full(32, 3.0), 5.0), 0.0, atol=1e-12)


def test_shift_moves_gaussian():
    x, s = gaussian_signal(128, -10, 10)
    assert np.allclose(shift(s, 20.0, 5.0), np.exp(-(x + 5) ** 2), atol=1e-8)


def test_shift_by_period_and_zero_is_identity():
    _, s = gaussian_signal(128, -10, 10)
    assert np.allclose(shift(s, 20.0, 0.0), s, atol=1e-12)
    assert np.allclose(shift(s, 20.0, 20.0), s, atol=1e-9)


def test_shift_round_trip():
    _, s = gaussian_signal(128, -10, 10)
    assert np.allclose(shift(shift(s, 20.0, 3.0), 20.0, -3.0), s, atol=1e-10)


def test_errors():
    with pytest.raises(ValueError):
        derivative([], 1.0)
    with pytest.raises(ValueError):
        shift([1.0, 2.0], 0.0, 1.0)


def test_write_data_round_trip(tmp_path):
    x = np.linspace(0, 1, 6)
    values = x**2
    path = tmp_path / "data"
    write_data(path, x, values)
    data = np.loadtxt(path)
    assert np.allclose(data[:, 0], x, atol=1e-6)
    assert np.allclose(data[:, 1], values, atol=1e-6)


def test_main_shift_mode(tmp_path):
    assert main(["--mode", "shift", "--directory", str(tmp_path)]) == 0
    data = np.loadtxt(tmp_path / "df")
    assert data.shape == (128, 2)
    assert np.allclose(data[:, 1], np.exp(-(data[:, 0] + 5) ** 2), atol=1e-5)


def test_main_derivative_mode_error_is_small(tmp_path):
    assert main(["--directory", str(tmp_path)]) == 0
    data = np.loadtxt(tmp_path / "df")
    assert np.max(np.abs(data[:, 1])) < 1e-6