"""Fenwick tree with tools to generate, run, verify and benchmark range-sum test cases."""

__version__ = "0.1.0"
__all__ = ["__version__"]