"""Spheres as hittable objects."""

from __future__ import annotations

import math
from dataclasses import dataclass

from spheretracer.hittable import HitRecord, Hittable
from spheretracer.interval import Interval
from spheretracer.materials import Material
from spheretracer.ray import Ray
from spheretracer.vector import Vec3


@dataclass(frozen=True)
class Sphere(Hittable):
    """A sphere with a centre, radius and surface material."""

    center: Vec3
    radius: float
    mat: Material

    def hit(self, ray: Ray, ray_t: Interval) -> HitRecord | None:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        h = ray.direction.dot(oc)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = h * h - a * c
        if discriminant < 0.0:
            return None

        sqrtd = math.sqrt(discriminant)
        root = (-h - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (-h + sqrtd) / a
            if not ray_t.surrounds(root):
                return None

        p = ray.at(root)
        outward_normal = (p - self.center) / self.radius
        rec = HitRecord(p, outward_normal, self.mat, root)
        rec.set_face_normal(ray, outward_normal)
        return rec