"""Badevann: Norwegian beach water temperatures in the terminal."""

__version__ = "0.1.0"
