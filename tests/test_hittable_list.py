import math

from spheretracer.hittable_list import HittableList
from spheretracer.interval import Interval
from spheretracer.materials import Lambertian, Metal
from spheretracer.ray import Ray
from spheretracer.sphere import Sphere
from spheretracer.vector import Vec3

RAY = Ray(Vec3(), Vec3(0.0, 0.0, -1.0))
WINDOW = Interval(0.001, math.inf)


def _spheres():
    near = Sphere(Vec3(0.0, 0.0, -2.0), 0.5, Lambertian(Vec3(0.1, 0.2, 0.3)))
    far = Sphere(Vec3(0.0, 0.0, -5.0), 0.5, Metal(Vec3(0.9, 0.9, 0.9), 0.0))
    return near, far


def test_empty_list_misses():
    assert HittableList().hit(RAY, WINDOW) is None


def test_add_appends_objects():
    near, far = _spheres()
    world = HittableList()
    world.add(near)
    world.add(far)
    assert world.objects == [near, far]


def test_nearest_hit_wins_regardless_of_order():
    near, far = _spheres()
    forward = HittableList([near, far]).hit(RAY, WINDOW)
    backward = HittableList([far, near]).hit(RAY, WINDOW)
    assert forward.t == backward.t
    assert forward.mat == near.mat
    assert backward.mat == near.mat
    assert forward.t == near.hit(RAY, WINDOW).t


def test_window_excludes_near_object():
    near, far = _spheres()
    world = HittableList([near, far])
    rec = world.hit(RAY, Interval(3.0, math.inf))
    assert rec.mat == far.mat
    assert rec.t > 3.0