"""Shading: shadows, ambient and diffuse light."""

from __future__ import annotations

from minirt.color import Color
from minirt.intersect import Hit, Ray
from minirt.quadratic import EPS
from minirt.scene import Scene


def is_lit(hit: Hit, scene: Scene) -> bool:
    """Whether the light reaches the hit point without being blocked."""
    light = scene.light
    direction = hit.point - light.position
    if direction.sq() < EPS * EPS:
        return False
    blocker = scene.closest_hit(Ray(light.position, direction))
    return (hit.point - blocker.point).sq() < EPS * EPS


def ambient_color(hit: Hit, scene: Scene) -> Color:
    """Return the colour of a point lit by ambient light only."""
    amb = scene.ambient
    return hit.color * amb.color.scale(amb.ratio)


def lit_color(hit: Hit, scene: Scene) -> Color:
    """Return the ambient plus diffuse colour of a point the light reaches."""
    light = scene.light
    to_light = (light.position - hit.point).normalized()
    factor = max(to_light.dot(hit.normal) * light.ratio, 0.0)
    diffuse = (hit.color * light.color).scale(factor)
    return ambient_color(hit, scene) + diffuse


def detect_color(hit: Hit, scene: Scene) -> int:
    """Return the packed ``0xRRGGBB`` colour for a hit; misses are black."""
    if not hit.is_hit:
        color = Color()
    elif not is_lit(hit, scene):
        color = ambient_color(hit, scene)
    else:
        color = lit_color(hit, scene)
    return color.to_int()