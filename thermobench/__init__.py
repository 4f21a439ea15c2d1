"""Thermometer display simulator with matrix A^T*A and search benchmarks."""

__version__ = "1.0.0"