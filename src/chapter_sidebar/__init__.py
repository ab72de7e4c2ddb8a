"""Generate a documentation sidebar from chapter content directories."""

__version__ = "0.1.0"
