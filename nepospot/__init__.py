"""Look up whether a film person's parents have Wikipedia articles."""

__version__ = "0.1.0"
