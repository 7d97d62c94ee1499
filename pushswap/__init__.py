"""Solve the push_swap two-stack sorting puzzle."""

__version__ = "1.0.0"
__all__ = ["cli", "large", "parse", "small", "stacks"]