"""Desktop-style interactive résumé built from JSON screen descriptions and shown with pygame."""

__version__ = "0.1.0"