"""FastAPI backend for tracking option and stock position legs."""

__version__ = "0.1.0"
