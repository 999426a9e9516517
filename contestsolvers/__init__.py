"""Solvers for algorithmic contest problems, as functions and stdin/stdout commands."""

__version__ = "0.1.0"