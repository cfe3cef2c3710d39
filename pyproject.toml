[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "physlabs"
version = "0.1.0"
description = "Small computational physics exercises: filters, random walks, integrators and PDE solvers"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "physics",
    "numerics",
    "random walk",
    "pde",
    "advection",
    "burgers",
    "diffusion",
    "schrodinger",
    "fft",
    "newton fractal",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
physlabs-fraction = "physlabs.fraction:main"
physlabs-filter = "physlabs.filtering:main"
physlabs-sampling = "physlabs.sampling:main"
physlabs-newton = "physlabs.newton:main"
physlabs-randomwalk = "physlabs.randomwalk:main"
physlabs-oscillator = "physlabs.oscillator:main"
physlabs-advection = "physlabs.advection:main"
physlabs-burgers = "physlabs.burgers:main"
physlabs-diffusion = "physlabs.diffusion:main"
physlabs-nls = "physlabs.nls:main"
physlabs-spectral = "physlabs.spectral:main"

[tool.hatch.build.targets.wheel]
packages = ["physlabs"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
