"""Two-stack integer sorting with a restricted instruction set, and a checker for it."""

__version__ = "0.1.0"