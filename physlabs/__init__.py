"""Computational physics exercises: fractions, filters, random walks, integrators and PDE solvers."""

__version__ = "0.1.0"