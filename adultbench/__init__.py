"""Analyses of the Adult census dataset and data-structure scalability benchmarks."""

__version__ = "0.1.0"