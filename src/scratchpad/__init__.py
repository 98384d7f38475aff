"""Scratchpad: comparison operators and safe division from the command line."""

__version__ = "1.0.0"

AUTHOR = "Go Developer"
LICENSE = "MIT"

__all__ = ["AUTHOR", "LICENSE", "__version__"]
