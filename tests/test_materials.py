import random

import pytest

from spheretracer.hittable import HitRecord
from spheretracer.materials import Dielectric, Lambertian, Material, Metal
from spheretracer.ray import Ray
from spheretracer.vector import Vec3, reflect


def _record(mat, normal=Vec3(0.0, 0.0, 1.0), front_face=True):
    return HitRecord(Vec3(1.0, 2.0, 3.0), normal, mat, 1.0, front_face)


def test_base_material_absorbs():
    rec = _record(Material())
    assert Material().scatter(Ray(Vec3(), Vec3(0, 0, -1)), rec) is None


def test_lambertian_scatters_into_hemisphere():
    random.seed(10)
    albedo = Vec3(0.4, 0.2, 0.1)
    mat = Lambertian(albedo)
    rec = _record(mat)
    for _ in range(50):
        attenuation, scattered = mat.scatter(Ray(Vec3(), Vec3(0, 0, -1)), rec)
        assert attenuation == albedo
        assert scattered.origin == rec.p
        assert scattered.direction.dot(rec.normal) >= 0.0


def test_metal_fuzz_is_capped():
    assert Metal(Vec3(0.5, 0.5, 0.5), 2.0).fuzz == 1.0
    assert Metal(Vec3(0.5, 0.5, 0.5), 0.3).fuzz == 0.3


def test_metal_without_fuzz_is_mirror():
    albedo = Vec3(0.7, 0.6, 0.5)
    mat = Metal(albedo, 0.0)
    rec = _record(mat)
    incoming = Ray(Vec3(), Vec3(1.0, 0.0, -1.0))
    attenuation, scattered = mat.scatter(incoming, rec)
    assert attenuation == albedo
    expected = reflect(incoming.direction, rec.normal).normalized()
    assert tuple(scattered.direction) == pytest.approx(tuple(expected))


def test_metal_absorbs_ray_reflected_below_surface():
    mat = Metal(Vec3(0.7, 0.6, 0.5), 0.0)
    rec = _record(mat)
    assert mat.scatter(Ray(Vec3(), Vec3(0.0, 0.0, 1.0)), rec) is None


def test_dielectric_with_unit_index_passes_straight():
    random.seed(11)
    mat = Dielectric(1.0)
    rec = _record(mat)
    incoming = Ray(Vec3(), Vec3(0.0, 0.0, -2.0))
    attenuation, scattered = mat.scatter(incoming, rec)
    assert attenuation == Vec3(1.0, 1.0, 1.0)
    assert scattered.origin == rec.p
    assert tuple(scattered.direction) == pytest.approx(tuple(incoming.direction.normalized()))


def test_dielectric_total_internal_reflection():
    mat = Dielectric(1.5)
    rec = _record(mat, front_face=False)
    incoming = Ray(Vec3(), Vec3(1.0, 0.0, -0.1))
    _, scattered = mat.scatter(incoming, rec)
    expected = reflect(incoming.direction.normalized(), rec.normal)
    assert tuple(scattered.direction) == pytest.approx(tuple(expected))


def test_reflectance_limits():
    assert Dielectric.reflectance(1.0, 1.0) == pytest.approx(0.0)
    assert Dielectric.reflectance(0.0, 1.5) == pytest.approx(1.0)
    assert Dielectric.reflectance(0.5, 1.5) < Dielectric.reflectance(0.1, 1.5)