"""Sorting algorithms, test-array generators and a timing benchmark."""

__version__ = "0.1.0"
__all__ = ["arrays", "simple", "timing", "divide", "distribution", "cli"]