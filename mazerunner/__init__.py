"""A tile-based maze game drawn with pygame, with its own XPM texture reader."""

__version__ = "0.1.0"
__all__ = ["__version__"]