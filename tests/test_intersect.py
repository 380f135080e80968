import pytest

from minirt.color import Color
from minirt.intersect import (
    Cylinder,
    Hit,
    ObjType,
    Plane,
    Ray,
    Sphere,
    SurfacePart,
    closest_hit,
)
from minirt.quadratic import MISS
from minirt.vector import Vec3

Z = Vec3(0, 0, 1)


def test_obj_type_none_is_zero():
    assert ObjType.NONE == 0
    assert Hit().obj_type is ObjType.NONE


def test_ray_at_follows_direction():
    ray = Ray(Vec3(1, 2, 3), Vec3(0.5, -1, 2))
    assert ray.at(0) == ray.origin
    p = ray.at(3)
    assert p - ray.origin == ray.dir.scale(3)


def test_sphere_hit_lies_on_surface():
    sphere = Sphere(Vec3(0, 0, 5), 1.5, Color(1, 0, 0))
    ray = Ray(Vec3(0.2, 0.1, 0), Z)
    hit = sphere.hit(ray)
    assert hit.obj_type is ObjType.SPHERE
    assert hit.obj is sphere
    assert hit.color == Color(1, 0, 0)
    assert (hit.point - sphere.center).length() == pytest.approx(1.5)
    assert hit.normal.length() == pytest.approx(1.0)
    assert hit.normal.dot(ray.dir) < 0
    assert hit.t == pytest.approx(sphere.distance(ray))


def test_sphere_miss():
    sphere = Sphere(Vec3(0, 0, 5), 1)
    ray = Ray(Vec3(3, 0, 0), Z)
    assert sphere.distance(ray) == MISS
    assert sphere.hit(ray).obj_type is ObjType.NONE


def test_sphere_behind_ray_is_missed():
    sphere = Sphere(Vec3(0, 0, -5), 1)
    assert sphere.distance(Ray(Vec3(), Z)) == MISS


def test_ray_from_inside_sphere_hits_far_side():
    sphere = Sphere(Vec3(), 2)
    ray = Ray(Vec3(), Z)
    t = sphere.distance(ray)
    assert t > 0
    assert ray.at(t).length() == pytest.approx(2)


def test_plane_hit_lies_on_plane_and_faces_ray():
    plane = Plane(Vec3(0, 0, 3), Vec3(0, 0, 1))
    ray = Ray(Vec3(1, 1, 0), Vec3(0.3, 0.2, 1))
    hit = plane.hit(ray)
    assert hit.obj_type is ObjType.PLANE
    assert (hit.point - plane.point).dot(plane.normal) == pytest.approx(0, abs=1e-9)
    assert hit.normal.dot(ray.dir) <= 0
    assert hit.normal == -plane.normal


def test_plane_normal_kept_when_facing_ray():
    plane = Plane(Vec3(0, 0, 3), Vec3(0, 0, -1))
    hit = plane.hit(Ray(Vec3(), Z))
    assert hit.normal == plane.normal


def test_plane_parallel_ray_misses():
    plane = Plane(Vec3(0, 0, 3), Z)
    ray = Ray(Vec3(), Vec3(1, 0, 0))
    assert plane.distance(ray) == MISS
    assert not plane.hit(ray).is_hit


def test_plane_behind_ray_misses():
    plane = Plane(Vec3(0, 0, -3), Z)
    assert plane.distance(Ray(Vec3(), Z)) == MISS


def test_cylinder_side_hit():
    cyl = Cylinder(Vec3(), Z, 1, 4, Color(0, 1, 0))
    ray = Ray(Vec3(5, 0, 0), Vec3(-1, 0, 0))
    t, part = cyl.distance(ray)
    assert part is SurfacePart.SIDE
    hit = cyl.hit(ray)
    assert hit.t == pytest.approx(t)
    assert hit.obj_type is ObjType.CYLINDER
    assert hit.obj is cyl
    assert (hit.point - cyl.center).ver(cyl.axis).length() == pytest.approx(1)
    assert hit.normal.dot(cyl.axis) == pytest.approx(0)
    assert hit.normal.length() == pytest.approx(1)


def test_cylinder_top_cap_hit():
    cyl = Cylinder(Vec3(), Z, 1, 4)
    ray = Ray(Vec3(0, 0, 10), Vec3(0, 0, -1))
    t, part = cyl.distance(ray)
    assert part is SurfacePart.CAPS
    hit = cyl.hit(ray)
    assert hit.point.z == pytest.approx(cyl.height / 2)
    assert hit.normal == Z


def test_cylinder_bottom_cap_normal_points_down():
    cyl = Cylinder(Vec3(), Z, 1, 4)
    hit = cyl.hit(Ray(Vec3(0, 0, -10), Z))
    assert hit.point.z == pytest.approx(-cyl.height / 2)
    assert hit.normal == -Z


def test_cylinder_miss_outside_height():
    cyl = Cylinder(Vec3(), Z, 1, 2)
    ray = Ray(Vec3(5, 0, 5), Vec3(-1, 0, 0))
    t, _ = cyl.distance(ray)
    assert t < 0
    assert cyl.hit(ray).obj_type is ObjType.NONE


def test_cylinder_point_validity():
    cyl = Cylinder(Vec3(), Z, 1, 2)
    assert cyl.is_valid_side_point(Vec3(1, 0, 0.5))
    assert not cyl.is_valid_side_point(Vec3(1, 0, 1.5))
    assert cyl.is_valid_caps_point(Vec3(0.5, 0, 1))
    assert not cyl.is_valid_caps_point(Vec3(1.5, 0, 1))


def test_closest_hit_picks_nearest():
    near = Sphere(Vec3(0, 0, 3), 1)
    far = Sphere(Vec3(0, 0, 10), 1)
    plane = Plane(Vec3(0, 0, 20), Z)
    ray = Ray(Vec3(), Z)
    hit = closest_hit(ray, [far, near], [plane], [])
    assert hit.obj is near
    assert hit.t == pytest.approx(near.distance(ray))


def test_closest_hit_across_kinds():
    sphere = Sphere(Vec3(0, 0, 10), 1)
    plane = Plane(Vec3(0, 0, 2), Z)
    cyl = Cylinder(Vec3(0, 0, 6), Z, 1, 2)
    hit = closest_hit(Ray(Vec3(), Z), [sphere], [plane], [cyl])
    assert hit.obj is plane
    assert hit.obj_type is ObjType.PLANE


def test_closest_hit_nothing():
    hit = closest_hit(Ray(Vec3(), Z), [], [], [])
    assert hit.obj_type is ObjType.NONE
    assert hit.obj is None
    assert hit.point == Vec3()


def test_closest_hit_tie_keeps_first():
    first = Sphere(Vec3(0, 0, 5), 1, Color(1, 0, 0))
    second = Sphere(Vec3(0, 0, 5), 1, Color(0, 0, 1))
    hit = closest_hit(Ray(Vec3(), Z), [first, second], [], [])
    assert hit.obj is first
    assert hit.color == Color(1, 0, 0)