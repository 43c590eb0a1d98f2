"""Pixel encodings, seven-segment digits and two-wire frame building for LED strips."""

__version__ = "0.1.0"

__all__ = [
    "chipfeatures",
    "features",
    "methods",
    "segment",
]