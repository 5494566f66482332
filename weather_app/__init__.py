"""Simple Weather - a single-screen terminal weather lookup."""

__version__ = "0.1.0"
