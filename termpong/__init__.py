"""Pong for the terminal, with a computer opponent, two-player mode, a watch mode and themes."""

__version__ = "0.1.0"