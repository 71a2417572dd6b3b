"""Crout LU solvers over floats, mpmath numbers and outward-rounded intervals."""

__version__ = "1.0.0"
__all__ = ["elementary", "interval", "parser", "solver"]