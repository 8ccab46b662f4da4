"""Keyboard-driven terminal application for looking through houseplants."""

__version__ = "0.1.0"
__all__ = ["__version__"]