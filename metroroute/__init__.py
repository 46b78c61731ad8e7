"""Metro network route finding by distance and by fewest line changes."""

__version__ = "0.1.0"

__all__ = ["__version__"]