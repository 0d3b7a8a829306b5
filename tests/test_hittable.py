from spheretracer.hittable import HitRecord, Hittable
from spheretracer.interval import Interval
from spheretracer.materials import Lambertian
from spheretracer.ray import Ray
from spheretracer.vector import Vec3


def _record():
    return HitRecord(Vec3(), Vec3(), Lambertian(), 1.0)


def test_front_face_keeps_outward_normal():
    rec = _record()
    outward = Vec3(0.0, 0.0, 1.0)
    rec.set_face_normal(Ray(Vec3(0, 0, 5), Vec3(0.0, 0.0, -1.0)), outward)
    assert rec.front_face is True
    assert rec.normal == outward


def test_back_face_flips_normal():
    rec = _record()
    outward = Vec3(0.0, 0.0, 1.0)
    rec.set_face_normal(Ray(Vec3(), Vec3(0.0, 0.5, 1.0)), outward)
    assert rec.front_face is False
    assert rec.normal == -outward


def test_normal_always_opposes_ray():
    outward = Vec3(0.0, 1.0, 0.0)
    for direction in (Vec3(1, 1, 0), Vec3(1, -1, 0), Vec3(0, -2, 3)):
        rec = _record()
        rec.set_face_normal(Ray(Vec3(), direction), outward)
        assert rec.normal.dot(direction) < 0.0


def test_base_hittable_never_hits():
    ray = Ray(Vec3(), Vec3(0.0, 0.0, -1.0))
    assert Hittable().hit(ray, Interval(0.0, 100.0)) is None