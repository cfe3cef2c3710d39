# physlabs

A collection of small computational physics exercises. Each module can be
used as a library and also has a command that writes its results as plain
text (or binary) data files.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command               | What it does |
|-----------------------|--------------|
| `physlabs-fraction`   | Prints a short demonstration of fraction arithmetic. |
| `physlabs-filter`     | Reads `--count` values (default 237) from `--input` (default `noisy.txt`), applies a periodic three-point smoothing `--passes` times (default 3) and writes `--output` (default `filtered.txt`). |
| `physlabs-sampling`   | Prints the mean sample standard deviation of standard normal samples for sizes 2 to `--max-n` (default 50), over `--trials` experiments (default 10000); `--seed` fixes the random numbers. |
| `physlabs-newton`     | Counts Newton iterations for z³ = 1 on a `--size` × `--size` grid (default 2000) over [-2, 2]², writes `row col count` lines to `--output` (default `out`) and prints the compute and write times in milliseconds. |
| `physlabs-randomwalk` | Two-dimensional random walk of `--particles` particles (default 50000) over `--steps` steps (default 500), writing `statistics` and `--files`+1 snapshots `rwalk_0`, `rwalk_1`, …. Step lengths are uniform in [0, 1) and snapshots are text; with `--unit` steps have length 1, snapshots are binary doubles and a `density` map is written as well. |
| `physlabs-oscillator` | Integrates the relativistic oscillator H = √(1+p²) + q²/2 with forward Euler, symplectic Euler and Störmer–Verlet, writing `dataFE`, `dataSE`, `dataSV`. Options `--tmax`, `--steps`, `--q0`, `--p0`. |
| `physlabs-advection`  | Linear advection of a box profile: FTCS writes `f_0`…`f_10`, upwind writes `u_0`…`u_10`. `--scheme ftcs|upwind|both` (default both). |
| `physlabs-burgers`    | Inviscid Burgers equation with `--scheme lf` (leapfrog, default) or `lw` (Lax–Wendroff); writes `u_0`, `ana` and `lfu_1`…`lfu_10` or `lwu_1`…`lwu_10`, and prints the steps per snapshot and the final time. |
| `physlabs-diffusion`  | Implicit Euler solution of the heat equation, writing `u_0`…`u_10` with the exact Gaussian in a third column. |
| `physlabs-nls`        | Split-step solution of the nonlinear Schrödinger equation for a soliton, writing `psi_0`…`psi_100` as `x |ψ|² Re ψ Im ψ`. |
| `physlabs-spectral`   | Spectral derivative (`--mode derivative`, default) or spectral shift (`--mode shift`, by `--shift`, default 5) of a Gaussian via the real FFT; writes `f` and `df`. In derivative mode both files hold the deviation from the exact derivative −2x·exp(−x²). |

All commands except `physlabs-fraction`, `physlabs-sampling`,
`physlabs-filter` and `physlabs-newton` take `--directory` (default the
current directory) for their output files. For example:

```
physlabs-burgers --directory run --scheme lw
```

## Library use

```python
from physlabs.fraction import Fraction

a = Fraction(1, 2)
c = Fraction(1, 4)
print(a * c)                      # 1/8
print(a + c)                      # 3/4
print(Fraction(12, 4).decimal())  # 3.0
```

Fractions are reduced by the greatest common divisor after every
operation; the sign of the denominator is kept as given, so
`Fraction(2, -3)` prints as `2/-3`. `+=`, `*=` and `/=` work in place,
and `invert()` swaps numerator and denominator.

```python
import numpy as np
from physlabs.randomwalk import init_particles, push_unit, statistics

rng = np.random.default_rng(1)
positions = init_particles(1000)
for _ in range(100):
    positions = push_unit(positions, rng)
print(statistics(positions))      # Statistics(msd=..., sx=..., sy=...)
```

```python
from physlabs.oscillator import stormer_verlet

rows = stormer_verlet(3.0, 0.0, 0.04, 20.0)   # list of (t, q, p, H)
```

```python
from physlabs.timer import Timer

timer = Timer()
timer.tick()
# ... work ...
timer.tock()
print(timer.duration())           # whole milliseconds
```

The numerical building blocks (`advection.ftcs_step`,
`advection.upwind_step`, `burgers.leapfrog_step`,
`burgers.lax_wendroff_step`, `diffusion.implicit_step`,
`nls.linear_step`, `nls.nonlinear_step`, `spectral.derivative`,
`spectral.shift`) take NumPy arrays and return new arrays, so they can be
combined freely for your own experiments.

## What it does not do

The package only writes data files; it draws no plots. Use any plotting
tool on the tab-separated output.