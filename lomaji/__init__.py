"""Lomaji syllable input composer."""

__version__ = "0.1.0"
