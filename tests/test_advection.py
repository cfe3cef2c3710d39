import numpy as np
import pytest

from physlabs.advection import (
    box_profile,
    ftcs_step,
    grid,
    main,
    run_ftcs,
    run_upwind,
    upwind_step,
    write_profile,
)


def test_grid_points():
    assert np.allclose(grid(0.0, 0.5, 3), [0.0, 0.5, 1.0])


def test_grid_negative_count():
    with pytest.raises(ValueError):
        grid(0.0, 1.0, -1)


def test_box_profile_edges_included():
    x = np.array([-1.5, -1.0, 0.0, 1.0, 1.5])
    assert list(box_profile(x)) == [0.0, 1.0, 1.0, 1.0, 0.0]


def test_box_profile_shifted():
    x = np.array([-7.0, -5.0, -4.0, 0.0])
    assert list(box_profile(x, -5.0)) == [0.0, 1.0, 1.0, 0.0]


def test_upwind_unit_courant_shifts_by_one_cell():
    u = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
    assert np.allclose(upwind_step(u, 1.0), np.roll(u, 1))


def test_upwind_zero_courant_is_identity():
    u = np.array([0.3, 1.0, -2.0])
    assert np.allclose(upwind_step(u, 0.0), u)


def test_ftcs_zero_courant_is_identity():
    u = np.array([0.3, 1.0, -2.0, 5.0])
    assert np.allclose(ftcs_step(u, 0.0), u)


def test_ftcs_constant_field_unchanged():
    u = np.full(10, 2.5)
    assert np.allclose(ftcs_step(u, 0.7), u)


@pytest.mark.parametrize("step", [ftcs_step, upwind_step])
def test_schemes_conserve_total(step):
    rng = np.random.default_rng(1)
    u = rng.random(32)
    assert step(u, 0.8).sum() == pytest.approx(u.sum())


def test_ftcs_is_periodic():
    u = np.zeros(6)
    u[0] = 1.0
    result = ftcs_step(u, 1.0)
    assert result[1] == pytest.approx(-0.5)
    assert result[-1] == pytest.approx(0.5)


@pytest.mark.parametrize("step", [ftcs_step, upwind_step])
def test_schemes_reject_bad_fields(step):
    with pytest.raises(ValueError):
        step(np.zeros((2, 2)), 0.5)
    with pytest.raises(ValueError):
        step([1.0], 0.5)


def test_write_profile_round_trip(tmp_path):
    x = np.linspace(-1.0, 1.0, 5)
    u = box_profile(x)
    path = tmp_path / "profile"
    write_profile(path, x, u)
    data = np.loadtxt(path)
    assert np.allclose(data[:, 0], x)
    assert np.allclose(data[:, 1], u)


def test_write_profile_shape_mismatch(tmp_path):
    with pytest.raises(ValueError):
        write_profile(tmp_path / "p", [0.0, 1.0], [1.0])


def test_run_upwind_writes_snapshots(tmp_path):
    x, u = run_upwind(tmp_path)
    names = {p.name for p in tmp_path.iterdir()}
    assert names == {f"u_{i}" for i in range(11)}
    initial = np.loadtxt(tmp_path / "u_0")
    assert u.sum() == pytest.approx(initial[:, 1].sum())
    final = np.loadtxt(tmp_path / "u_10")
    assert np.allclose(final[:, 1], u, atol=1e-5)
    assert len(x) == 256


def test_run_ftcs_writes_snapshots(tmp_path):
    x, u = run_ftcs(tmp_path)
    names = {p.name for p in tmp_path.iterdir()}
    assert names == {f"f_{i}" for i in range(11)}
    initial = np.loadtxt(tmp_path / "f_0")
    assert np.allclose(initial[:, 0], x, atol=1e-5)
    assert u.sum() == pytest.approx(initial[:, 1].sum())


def test_main_upwind_only(tmp_path):
    assert main(["--scheme", "upwind", "--directory", str(tmp_path)]) == 0
    assert (tmp_path / "u_10").exists()
    assert not (tmp_path / "f_0").exists()