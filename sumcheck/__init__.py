"""Checksum manifest verification."""

__version__ = "0.1.0"
