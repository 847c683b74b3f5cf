"""Decoders for game cache config formats and sprites, with helpers for building map tiles."""

__version__ = "0.1.0"