"""Classic sorting algorithms, a random data generator and a benchmark menu."""

__version__ = "0.1.0"
__all__ = ["sorting", "generator", "benchmark", "cli"]