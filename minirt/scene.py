"""Scene description: ambient light, camera, point light and objects."""

from __future__ import annotations

from dataclasses import dataclass, field

from minirt.camera import Camera
from minirt.color import Color
from minirt.intersect import Cylinder, Hit, Plane, Ray, Sphere, closest_hit
from minirt.vector import Vec3


@dataclass
class Ambient:
    """Ambient lighting: a ratio in ``[0, 1]`` and a colour."""

    ratio: float = 0.0
    color: Color = field(default_factory=Color)


@dataclass
class Light:
    """A point light source."""

    position: Vec3 = field(default_factory=Vec3)
    ratio: float = 0.0
    color: Color = field(default_factory=Color)


@dataclass
class Scene:
    """Everything needed to render an image."""

    ambient: Ambient = field(default_factory=Ambient)
    camera: Camera = field(default_factory=Camera)
    light: Light = field(default_factory=Light)
    spheres: list[Sphere] = field(default_factory=list)
    planes: list[Plane] = field(default_factory=list)
    cylinders: list[Cylinder] = field(default_factory=list)

    def closest_hit(self, ray: Ray) -> Hit:
        """Return the nearest hit of ``ray`` against every object in the scene."""
        return closest_hit(ray, self.spheres, self.planes, self.cylinders)