"""Ray tracer that renders .rt scenes of spheres, planes and cylinders to PPM images."""

__version__ = "0.1.0"