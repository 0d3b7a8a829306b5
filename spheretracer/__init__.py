"""A small path tracer for scenes of spheres, rendering to PPM images."""

__version__ = "0.1.0"