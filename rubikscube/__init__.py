"""Rubik's cube model with move notation, plus camera, transform and layout geometry for 3D display."""

__version__ = "0.1.0"
__all__ = ["camera", "cube", "layout", "transform"]