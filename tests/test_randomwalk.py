import numpy as np
import pytest

from physlabs.randomwalk import (
    Statistics,
    calc_density,
    create_filename,
    init_particles,
    main,
    push_uniform,
    push_unit,
    read_binary,
    simulate,
    statistics,
    write_binary,
    write_density,
    write_text,
)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


def test_init_particles_at_origin():
    p = init_particles(7)
    assert p.shape == (7, 2)
    assert np.all(p == 0.0)


def test_init_particles_negative():
    with pytest.raises(ValueError):
        init_particles(-1)


def test_push_unit_step_length(rng):
    start = init_particles(100)
    moved = push_unit(start, rng)
    lengths = np.hypot(moved[:, 0] - start[:, 0], moved[:, 1] - start[:, 1])
    assert np.allclose(lengths, 1.0)
    assert np.all(start == 0.0)


def test_push_uniform_step_length(rng):
    start = init_particles(500)
    moved = push_uniform(start, rng)
    lengths = np.hypot(moved[:, 0], moved[:, 1])
    assert np.all(lengths < 1.0)
    assert np.all(lengths >= 0.0)
    assert lengths.max() > lengths.min()


def test_push_rejects_bad_shape(rng):
    with pytest.raises(ValueError):
        push_unit(np.zeros(3), rng)


def test_statistics_values():
    s = statistics([[1.0, 0.0], [0.0, 2.0]])
    assert s == Statistics(msd=2.5, sx=1.0, sy=2.0)


def test_statistics_origin():
    s = statistics(init_particles(4))
    assert (s.msd, s.sx, s.sy) == (0.0, 0.0, 0.0)


def test_statistics_empty():
    with pytest.raises(ValueError):
        statistics(init_particles(0))


def test_create_filename():
    assert create_filename("rwalk", 3) == "rwalk_3"


def test_binary_round_trip(tmp_path, rng):
    positions = push_uniform(init_particles(20), rng)
    path = tmp_path / "snap"
    write_binary(positions, path)
    assert path.stat().st_size == 20 * 2 * 8
    assert np.array_equal(read_binary(path), positions)


def test_read_binary_rejects_partial(tmp_path):
    path = tmp_path / "bad"
    path.write_bytes(b"\x00" * 8)
    with pytest.raises(ValueError):
        read_binary(path)


def test_text_precise_round_trip(tmp_path, rng):
    positions = push_uniform(init_particles(10), rng)
    path = tmp_path / "snap.txt"
    write_text(positions, path, precise=True)
    loaded = np.loadtxt(path).reshape(-1, 2)
    assert np.array_equal(loaded, positions)


def test_text_default_precision(tmp_path, rng):
    positions = push_uniform(init_particles(10), rng)
    path = tmp_path / "snap.txt"
    write_text(positions, path)
    loaded = np.loadtxt(path).reshape(-1, 2)
    assert np.allclose(loaded, positions, rtol=1e-5, atol=1e-6)


def test_density_counts_all_particles(rng):
    positions = init_particles(50)
    for _ in range(10):
        positions = push_unit(positions, rng)
    density = calc_density(positions, 100, bins=64)
    assert density.shape == (64, 64)
    assert density.sum() == 50


def test_density_origin_bin():
    density = calc_density(init_particles(3), 256, bins=512)
    assert density[256, 256] == 3


def test_density_outside_raises():
    with pytest.raises(ValueError):
        calc_density([[10.0, 0.0]], 5, bins=8)


def test_write_density_layout(tmp_path):
    density = calc_density(init_particles(2), 4, bins=4)
    path = tmp_path / "density"
    write_density(density, 4, path)
    lines = path.read_text().split("\n")
    assert lines[0] == "-3\t-3\t0"
    assert lines[4] == ""
    rows = [line for line in lines if line]
    assert len(rows) == 16
    assert sum(int(r.split("\t")[2]) for r in rows) == 2


def test_simulate_text_mode(tmp_path, rng):
    positions, history = simulate(tmp_path, npart=30, nsteps=20, nfiles=4, rng=rng)
    assert positions.shape == (30, 2)
    assert len(history) == 5
    assert history[0].msd == 0.0
    for index in range(5):
        assert (tmp_path / create_filename("rwalk", index)).exists()
    stat_lines = (tmp_path / "statistics").read_text().splitlines()
    assert len(stat_lines) == 5
    assert stat_lines[0].split("\t")[0] == "0"
    assert not (tmp_path / "density").exists()


def test_simulate_unit_mode(tmp_path, rng):
    positions, history = simulate(
        tmp_path, npart=40, nsteps=100, nfiles=5, unit_steps=True, rng=rng
    )
    last = read_binary(tmp_path / create_filename("rwalk", 5))
    assert statistics(last) == history[-1]
    assert (tmp_path / "density").exists()
    assert len(positions) == 40


def test_simulate_needs_files(tmp_path):
    with pytest.raises(ValueError):
        simulate(tmp_path, npart=5, nsteps=10, nfiles=0)


def test_main_writes_outputs(tmp_path):
    code = main([
        "--particles", "10", "--steps", "10", "--files", "2",
        "--directory", str(tmp_path), "--seed", "3",
    ])
    assert code == 0
    assert len((tmp_path / "statistics").read_text().splitlines()) == 3