"""Tiger — an interactive shell layered over git."""

__version__ = "0.1.0-dev"
