"""Two-stack integer sorting with a restricted operation set, and a checker for operation lists."""

__version__ = "1.0.0"