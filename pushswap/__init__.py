"""Two-stack integer sorting that prints its moves, with small string, memory and output helpers."""

__version__ = "0.1.0"