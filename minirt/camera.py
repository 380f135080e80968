"""Pinhole camera: orthonormal basis and primary rays."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from minirt.intersect import Ray
from minirt.quadratic import EPS
from minirt.vector import Vec3

WIN_W = 800
"""Width of the rendered image in pixels."""

WIN_H = 600
"""Height of the rendered image in pixels."""

_WORLD_UP = Vec3(0.0, 0.0, 1.0)
_FALLBACK_UP = Vec3(0.0, 1.0, 0.0)


@dataclass(frozen=True)
class Camera:
    """A camera at ``position`` looking along ``forward`` with a horizontal field of view."""

    position: Vec3 = field(default_factory=Vec3)
    forward: Vec3 = field(default_factory=Vec3)
    right: Vec3 = field(default_factory=Vec3)
    up: Vec3 = field(default_factory=Vec3)
    fov_deg: float = 0.0

    def build_basis(self) -> Camera:
        """Return a copy with ``forward`` normalised and ``right``/``up`` derived from it."""
        forward = self.forward.normalized()
        world_up = _WORLD_UP
        if (forward - world_up).sq() < EPS * EPS:
            world_up = _FALLBACK_UP
        up = world_up.ver(forward).normalized()
        right = forward.cross(up).normalized()
        return replace(self, forward=forward, right=right, up=up)

    def half_width(self) -> float:
        """Return half the image-plane width at unit distance."""
        fov_rad = self.fov_deg / 180 * math.pi
        return math.tan(fov_rad / 2)

    def half_height(self) -> float:
        """Return half the image-plane height at unit distance."""
        return self.half_width() * WIN_H / WIN_W

    def pixel_ray(self, x: int, y: int) -> Ray:
        """Return the primary ray through the centre of pixel ``(x, y)``."""
        ndc_x = ((2 * (x + 0.5) / WIN_W) - 1) * self.half_width()
        ndc_y = (1 - (2 * (y + 0.5) / WIN_H)) * self.half_height()
        direction = self.right.scale(ndc_x) + self.up.scale(ndc_y) + self.forward
        return Ray(self.position, direction)