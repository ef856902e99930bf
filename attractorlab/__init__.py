"""Strange attractors: iteration, classification, colouring, point clouds and OBJ export."""

__version__ = "0.1.0"