"""Graph model, solvers and command for blocking path queries by degrading edge weights."""

__version__ = "0.1.0"