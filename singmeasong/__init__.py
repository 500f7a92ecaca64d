"""Sing Me A Song — music recommendations ranked by community votes."""

__version__ = "1.0.0"
