"""Ray intersection records and the interface for things rays can hit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from spheretracer.interval import Interval
from spheretracer.ray import Ray
from spheretracer.vector import Vec3

if TYPE_CHECKING:
    from spheretracer.materials import Material


@dataclass(slots=True)
class HitRecord:
    """Where and how a ray struck a surface."""

    p: Vec3
    normal: Vec3
    mat: Material
    t: float
    front_face: bool = False

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Orient the normal against the incoming ray and note which side was hit."""
        self.front_face = ray.direction.dot(outward_normal) < 0.0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable:
    """Something a ray may intersect; the base never reports a hit."""

    def hit(self, ray: Ray, ray_t: Interval) -> HitRecord | None:
        return None