"""CPU-only Conway's Game of Life with a pygame window and frame-time metrics."""

__version__ = "0.1.0"