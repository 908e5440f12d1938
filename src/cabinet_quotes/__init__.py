"""Cabinet quote builder."""

__version__ = "0.1.0"
