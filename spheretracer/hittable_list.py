"""A collection of hittable objects treated as one."""

from __future__ import annotations

from dataclasses import dataclass, field

from spheretracer.hittable import HitRecord, Hittable
from spheretracer.interval import Interval
from spheretracer.ray import Ray


@dataclass
class HittableList(Hittable):
    """Objects in a scene; a hit reports the nearest intersection."""

    objects: list[Hittable] = field(default_factory=list)

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)

    def hit(self, ray: Ray, ray_t: Interval) -> HitRecord | None:
        closest_so_far = ray_t.max
        final_hit = None
        for obj in self.objects:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                final_hit = rec
        return final_hit