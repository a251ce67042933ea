"""Concurrency building blocks and the example programs that exercise them."""

__version__ = "0.1.0"