"""Workshop pricing calculator — cost lists in, financial summary out."""

__version__ = "1.0.0"
