"""Surface materials that decide how rays scatter."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from spheretracer.ray import Ray
from spheretracer.vector import Vec3, random_unit_vector, reflect, refract

if TYPE_CHECKING:
    from spheretracer.hittable import HitRecord

Colour = Vec3


class Material:
    """A surface; the base absorbs every ray."""

    def scatter(self, ray_in: Ray, rec: HitRecord) -> tuple[Colour, Ray] | None:
        """Return (attenuation, scattered ray), or None if the ray is absorbed."""
        return None


@dataclass(frozen=True)
class Lambertian(Material):
    """Ideal diffuse surface."""

    albedo: Colour = field(default_factory=Vec3)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> tuple[Colour, Ray] | None:
        direction = rec.normal + random_unit_vector()
        if direction.near_zero():
            direction = rec.normal
        return self.albedo, Ray(rec.p, direction)


@dataclass(frozen=True)
class Metal(Material):
    """Reflective surface with optional fuzz, capped at 1."""

    albedo: Colour = field(default_factory=Vec3)
    fuzz: float = 0.0

    def __post_init__(self) -> None:
        if self.fuzz > 1.0:
            object.__setattr__(self, "fuzz", 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> tuple[Colour, Ray] | None:
        reflected = reflect(ray_in.direction, rec.normal).normalized()
        reflected = reflected + self.fuzz * random_unit_vector()
        scattered = Ray(rec.p, reflected)
        if scattered.direction.dot(rec.normal) > 0.0:
            return self.albedo, scattered
        return None


@dataclass(frozen=True)
class Dielectric(Material):
    """Transparent surface that refracts or reflects."""

    refraction_index: float = 0.0

    def scatter(self, ray_in: Ray, rec: HitRecord) -> tuple[Colour, Ray] | None:
        attenuation = Vec3(1.0, 1.0, 1.0)
        ri = 1.0 / self.refraction_index if rec.front_face else self.refraction_index

        unit_direction = ray_in.direction.normalized()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = ri * sin_theta > 1.0
        if cannot_refract or self.reflectance(cos_theta, ri) > random.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ri)
        return attenuation, Ray(rec.p, direction)

    @staticmethod
    def reflectance(cosine: float, refraction_index: float) -> float:
        """Schlick's approximation of the reflection coefficient."""
        r0 = (1.0 - refraction_index) / (1.0 + refraction_index)
        r0 = r0 * r0
        return r0 + (1.0 - r0) * (1.0 - cosine) ** 5