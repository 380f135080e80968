"""Reading scene descriptions in the ``.rt`` format."""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Callable, Union

from minirt.camera import Camera
from minirt.color import Color
from minirt.intersect import Cylinder, Plane, Sphere
from minirt.scene import Ambient, Light, Scene
from minirt.vector import Vec3

_DIGITS = frozenset("0123456789")


class SceneParseError(ValueError):
    """Raised when a scene description is malformed."""

    def __init__(self, where: str, message: str) -> None:
        super().__init__(f"{where}: {message}")
        self.where = where
        self.message = message


def _split(text: str, sep: str) -> list[str]:
    """Split on ``sep`` and drop empty fields, so runs of separators collapse."""
    return [part for part in text.split(sep) if part]


def is_valid_float(text: str) -> bool:
    """Whether ``text`` is an optional sign, then digits with at most one dot."""
    if not text:
        return False
    body = text[1:] if text[0] in "+-" else text
    if not body:
        return False
    seen_dot = False
    for ch in body:
        if ch == "." and not seen_dot:
            seen_dot = True
        elif ch not in _DIGITS:
            return False
    return True


def parse_float(text: str) -> float:
    """Convert a validated decimal number; raise ``SceneParseError`` otherwise."""
    if not is_valid_float(text):
        raise SceneParseError(text, "invalid float")
    body = text.lstrip("+-")
    if body == ".":
        return 0.0
    return float(text)


def _three_parts(text: str, where: str) -> list[str]:
    parts = _split(text, ",")
    if len(parts) != 3:
        raise SceneParseError(where, f"expected three comma-separated values in {text!r}")
    return parts


def parse_vec3(text: str) -> Vec3:
    """Parse ``x,y,z`` into a vector."""
    x, y, z = (parse_float(part) for part in _three_parts(text, "vec3"))
    return Vec3(x, y, z)


def parse_color(text: str, obj_type: str) -> Color:
    """Parse ``r,g,b`` with channels in ``[0, 255]`` into a unit-range colour."""
    parts = _three_parts(text, obj_type)
    try:
        rgb = [parse_float(part) for part in parts]
    except SceneParseError as exc:
        raise SceneParseError(obj_type, "Invalid color value") from exc
    if any(channel < 0 or channel > 255 for channel in rgb):
        raise SceneParseError(obj_type, "Color out of range")
    r, g, b = (channel / 255.0 for channel in rgb)
    return Color(r, g, b)


def parse_ranged(text: str, low: float, high: float) -> float:
    """Parse a number that must lie in ``[low, high]``."""
    value = parse_float(text)
    if value < low or value > high:
        raise SceneParseError(text, f"Value out of range [{low}, {high}]")
    return value


def parse_positive(text: str) -> float:
    """Parse a number that must be strictly positive."""
    try:
        value = parse_float(text)
    except SceneParseError as exc:
        raise SceneParseError(text, "Value must be positive") from exc
    if value <= 0:
        raise SceneParseError(text, "Value must be positive")
    return value


def parse_direction(text: str) -> Vec3:
    """Parse a non-zero direction with components in ``[-1, 1]`` and normalise it."""
    vec = parse_vec3(text)
    if any(c < -1.0 or c > 1.0 for c in vec):
        raise SceneParseError(text, "Direction component out of [-1,1]")
    if vec.length() == 0:
        raise SceneParseError(text, "Zero direction vector")
    return vec.normalized()


def _expect_count(tokens: list[str], count: int, where: str, message: str) -> None:
    if len(tokens) != count:
        raise SceneParseError(where, message)


def parse_ambient(tokens: list[str]) -> Ambient:
    """Parse ``A ratio r,g,b``."""
    _expect_count(tokens, 3, "ambient", "Invalid format")
    try:
        ratio = parse_ranged(tokens[1], 0.0, 1.0)
    except SceneParseError as exc:
        raise SceneParseError("ambient", "Value out of range") from exc
    return Ambient(ratio=ratio, color=parse_color(tokens[2], "ambient"))


def parse_camera(tokens: list[str]) -> Camera:
    """Parse ``C x,y,z dx,dy,dz fov``."""
    _expect_count(tokens, 4, "camera", "Invalid format")
    position = parse_vec3(tokens[1])
    forward = parse_direction(tokens[2])
    fov = parse_ranged(tokens[3], 0.0, 180.0)
    return Camera(position=position, forward=forward, fov_deg=fov)


def parse_light(tokens: list[str]) -> Light:
    """Parse ``L x,y,z ratio r,g,b``."""
    _expect_count(tokens, 4, tokens[0] if tokens else "light", "Invalid light format")
    position = parse_vec3(tokens[1])
    ratio = parse_ranged(tokens[2], 0.0, 1.0)
    return Light(position=position, ratio=ratio, color=parse_color(tokens[3], "light"))


def parse_sphere(tokens: list[str]) -> Sphere:
    """Parse ``sp x,y,z diameter r,g,b``."""
    _expect_count(tokens, 4, "sphere", "Invalid sphere format")
    center = parse_vec3(tokens[1])
    radius = parse_positive(tokens[2]) / 2
    return Sphere(center=center, radius=radius, color=parse_color(tokens[3], "sphere"))


def parse_plane(tokens: list[str]) -> Plane:
    """Parse ``pl x,y,z nx,ny,nz r,g,b``."""
    _expect_count(tokens, 4, "plane", "Invalid plane format")
    point = parse_vec3(tokens[1])
    normal = parse_direction(tokens[2])
    return Plane(point=point, normal=normal, color=parse_color(tokens[3], "plane"))


def parse_cylinder(tokens: list[str]) -> Cylinder:
    """Parse ``cy x,y,z ax,ay,az diameter height r,g,b``."""
    _expect_count(tokens, 6, "cylinder", "Invalid cylinder format")
    center = parse_vec3(tokens[1])
    axis = parse_direction(tokens[2])
    radius = parse_positive(tokens[3]) / 2
    height = parse_positive(tokens[4])
    return Cylinder(
        center=center,
        axis=axis,
        radius=radius,
        height=height,
        color=parse_color(tokens[5], "cylinder"),
    )


_ENV_NAMES = {"A": "ambient", "C": "camera", "L": "light"}
_ENV_PARSERS: dict[str, Callable[[list[str]], object]] = {
    "A": parse_ambient,
    "C": parse_camera,
    "L": parse_light,
}
_OBJECT_PARSERS: dict[str, tuple[str, Callable[[list[str]], object]]] = {
    "sp": ("spheres", parse_sphere),
    "pl": ("planes", parse_plane),
    "cy": ("cylinders", parse_cylinder),
}


def _tokenize(line: str) -> list[str]:
    head = line.lstrip(" \t")
    if not head or head[0] == "\n":
        return []
    if head.endswith("\n"):
        head = head[:-1]
    return _split(head, " ")


def parse_scene(lines: Iterable[str]) -> Scene:
    """Build a scene from the lines of a description.

    Ambient, camera and light must each appear exactly once. Objects are
    kept newest first.
    """
    scene = Scene()
    seen: set[str] = set()
    for line in lines:
        tokens = _tokenize(line)
        if not tokens:
            continue
        ident = tokens[0]
        if ident in _ENV_PARSERS:
            if ident in seen:
                raise SceneParseError(_ENV_NAMES[ident], "multiple detection")
            setattr(scene, _ENV_NAMES[ident], _ENV_PARSERS[ident](tokens))
            seen.add(ident)
        elif ident in _OBJECT_PARSERS:
            attr, parse = _OBJECT_PARSERS[ident]
            getattr(scene, attr).insert(0, parse(tokens))
        else:
            raise SceneParseError(ident, "Unknown identifier")
    for ident in ("A", "C", "L"):
        if ident not in seen:
            raise SceneParseError(_ENV_NAMES[ident], "Missing required")
    return scene


def load_scene(path: Union[str, "os.PathLike[str]"]) -> Scene:
    """Read and parse a scene file."""
    with open(path, encoding="utf-8", newline="") as fh:
        return parse_scene(fh)