"""Nimm: two-player Nim on a triangular board, played from a terminal."""

__version__ = "0.1.0"
