"""Ray intersection with spheres, planes and finite cylinders."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional, Union

from minirt.color import Color
from minirt.quadratic import EPS, MISS, min_positive, quad_min_solution
from minirt.vector import Vec3


class ObjType(enum.IntEnum):
    """Kind of object a hit belongs to."""

    NONE = 0
    SPHERE = 1
    PLANE = 2
    CYLINDER = 3


class SurfacePart(enum.Enum):
    """Part of a cylinder that a ray strikes."""

    SIDE = enum.auto()
    CAPS = enum.auto()


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``origin`` along ``dir``."""

    origin: Vec3
    dir: Vec3

    def at(self, t: float) -> Vec3:
        """Return the point reached after travelling ``t`` along the ray."""
        return self.dir.scale(t) + self.origin


@dataclass(frozen=True)
class Hit:
    """Result of an intersection test; ``obj_type`` is ``NONE`` for a miss."""

    t: float = 0.0
    point: Vec3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    color: Color = field(default_factory=Color)
    obj_type: ObjType = ObjType.NONE
    obj: Optional[Union["Sphere", "Plane", "Cylinder"]] = None

    @property
    def is_hit(self) -> bool:
        """Whether something was struck."""
        return self.obj_type is not ObjType.NONE


@dataclass(frozen=True)
class Sphere:
    """A sphere given by its centre and radius."""

    center: Vec3
    radius: float
    color: Color = field(default_factory=Color)

    def distance(self, ray: Ray) -> float:
        """Return the nearest non-negative ray parameter, or ``MISS``."""
        offset = ray.origin - self.center
        a = ray.dir.sq()
        b = 2 * offset.dot(ray.dir)
        c = offset.sq() - self.radius * self.radius
        t = quad_min_solution(a, b, c)
        return MISS if t < 0 else t

    def hit(self, ray: Ray) -> Hit:
        """Intersect the ray with this sphere."""
        t = self.distance(ray)
        if t < 0:
            return Hit()
        point = ray.at(t)
        return Hit(
            t=t,
            point=point,
            normal=(point - self.center).normalized(),
            color=self.color,
            obj_type=ObjType.SPHERE,
            obj=self,
        )


@dataclass(frozen=True)
class Plane:
    """An infinite plane through ``point`` with the given ``normal``."""

    point: Vec3
    normal: Vec3
    color: Color = field(default_factory=Color)

    def distance(self, ray: Ray) -> float:
        """Return the ray parameter of the crossing, or ``MISS``."""
        const_n = (ray.origin - self.point).dot(self.normal)
        varia_n = ray.dir.dot(self.normal)
        if varia_n * varia_n < EPS * EPS:
            return MISS
        t = -(const_n / varia_n)
        if t < EPS:
            return MISS
        return t

    def hit(self, ray: Ray) -> Hit:
        """Intersect the ray with this plane; the normal faces the ray."""
        t = self.distance(ray)
        if t < 0:
            return Hit()
        normal = -self.normal if ray.dir.dot(self.normal) > 0 else self.normal
        return Hit(
            t=t,
            point=ray.at(t),
            normal=normal,
            color=self.color,
            obj_type=ObjType.PLANE,
            obj=self,
        )


@dataclass(frozen=True)
class Cylinder:
    """A capped cylinder centred at ``center`` along ``axis``."""

    center: Vec3
    axis: Vec3
    radius: float
    height: float
    color: Color = field(default_factory=Color)

    def is_valid_side_point(self, point: Vec3) -> bool:
        """Whether a point on the infinite side lies within the height."""
        half_h = self.height / 2
        offset = point.hor(self.axis) - self.center.hor(self.axis)
        return offset.sq() < half_h * half_h

    def is_valid_caps_point(self, point: Vec3) -> bool:
        """Whether a point on a cap plane lies within the radius."""
        offset = point.ver(self.axis) - self.center.ver(self.axis)
        return offset.sq() < self.radius * self.radius

    def _side_distance(self, ray: Ray) -> float:
        # Only the nearer root is used: when it falls outside the height,
        # the cap that the ray must have crossed first catches it instead.
        origin_ver = (ray.origin - self.center).ver(self.axis)
        dir_ver = ray.dir.ver(self.axis)
        a = dir_ver.sq()
        b = 2 * origin_ver.dot(dir_ver)
        c = origin_ver.sq() - self.radius * self.radius
        return quad_min_solution(a, b, c)

    def _caps_distance(self, ray: Ray) -> float:
        offset = self.axis.scale(self.height / 2)
        top = Plane(self.center + offset, self.axis)
        bottom = Plane(self.center - offset, self.axis)
        return min_positive(top.distance(ray), bottom.distance(ray))

    def distance(self, ray: Ray) -> tuple[float, SurfacePart]:
        """Return the nearest ray parameter and the part struck.

        A negative parameter means a miss.
        """
        side_t = self._side_distance(ray)
        if side_t >= 0 and not self.is_valid_side_point(ray.at(side_t)):
            side_t = MISS
        caps_t = self._caps_distance(ray)
        if caps_t >= 0 and not self.is_valid_caps_point(ray.at(caps_t)):
            caps_t = MISS
        min_t = min_positive(side_t, caps_t)
        if min_t < 0:
            return min_t, SurfacePart.SIDE
        if caps_t >= 0 and min_t == caps_t:
            return min_t, SurfacePart.CAPS
        return min_t, SurfacePart.SIDE

    def _side_normal(self, point: Vec3) -> Vec3:
        return (point - self.center).ver(self.axis).normalized()

    def _cap_normal(self, point: Vec3) -> Vec3:
        axis_n = self.axis.normalized()
        if (point - self.center).dot(self.axis) < 0:
            return -axis_n
        return axis_n

    def hit(self, ray: Ray) -> Hit:
        """Intersect the ray with this cylinder."""
        t, part = self.distance(ray)
        if t < 0:
            return Hit()
        point = ray.at(t)
        if part is SurfacePart.CAPS:
            normal = self._cap_normal(point)
        else:
            normal = self._side_normal(point)
        return Hit(
            t=t,
            point=point,
            normal=normal,
            color=self.color,
            obj_type=ObjType.CYLINDER,
            obj=self,
        )


def _nearer(best: Hit, candidate: Hit) -> Hit:
    if not candidate.is_hit:
        return best
    if not best.is_hit:
        return candidate
    if best.t > candidate.t:
        return candidate
    return best


def closest_hit(
    ray: Ray,
    spheres: Iterable[Sphere] = (),
    planes: Iterable[Plane] = (),
    cylinders: Iterable[Cylinder] = (),
) -> Hit:
    """Return the nearest hit among all objects; earlier objects win ties."""
    best = Hit()
    for group in (spheres, planes, cylinders):
        for obj in group:
            best = _nearer(best, obj.hit(ray))
    return best