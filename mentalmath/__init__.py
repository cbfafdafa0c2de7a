"""Difficulty model, state machine and JSON profile storage for mental arithmetic practice."""

__version__ = "0.1.0"
__all__ = ["__version__"]