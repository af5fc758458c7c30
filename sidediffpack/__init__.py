"""Internal packages for SideDiff."""

__version__ = "0.1.0"
