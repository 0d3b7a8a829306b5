"""Camera that casts rays into a scene and renders a PPM image."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from spheretracer.colour import Colour, format_colour
from spheretracer.hittable import Hittable
from spheretracer.interval import Interval
from spheretracer.ray import Ray
from spheretracer.vector import Vec3, degrees_to_radians, random_in_unit_disk

DEFAULT_OUTPUT = "rendered_image.ppm"

_SKY_BOTTOM = Vec3(1.0, 1.0, 1.0)
_SKY_TOP = Vec3(0.5, 0.7, 1.0)


def sample_square() -> Vec3:
    """A random offset in the unit square centred on the origin, z = 0."""
    return Vec3(random.random() - 0.5, random.random() - 0.5, 0.0)


def ray_colour(ray: Ray, depth: int, world: Hittable) -> Colour:
    """The colour seen along a ray, following at most depth bounces."""
    if depth <= 0:
        return Vec3()

    rec = world.hit(ray, Interval(0.001, math.inf))
    if rec is not None:
        scattered = rec.mat.scatter(ray, rec)
        if scattered is None:
            return Vec3()
        attenuation, next_ray = scattered
        return attenuation.mul(ray_colour(next_ray, depth - 1, world))

    unit_direction = ray.direction.normalized()
    a = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - a) * _SKY_BOTTOM + a * _SKY_TOP


@dataclass
class Camera:
    """A pinhole or thin-lens camera with its image settings."""

    aspect_ratio: float = 1.0
    image_width: float = 100.0
    samples_per_pixel: int = 10
    max_depth: int = 10
    vfov: float = 90
    lookfrom: Vec3 = field(default_factory=Vec3)
    lookat: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, -1.0))
    vup: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))
    defocus_angle: float = 0.0
    focus_dist: float = 10.0

    image_height: float = field(init=False, default=0.0)
    pixel_samples_scale: float = field(init=False, default=0.0)
    _center: Vec3 = field(init=False, default_factory=Vec3, repr=False)
    _pixel00_loc: Vec3 = field(init=False, default_factory=Vec3, repr=False)
    _pixel_delta_u: Vec3 = field(init=False, default_factory=Vec3, repr=False)
    _pixel_delta_v: Vec3 = field(init=False, default_factory=Vec3, repr=False)
    _u: Vec3 = field(init=False, default_factory=Vec3, repr=False)
    _v: Vec3 = field(init=False, default_factory=Vec3, repr=False)
    _w: Vec3 = field(init=False, default_factory=Vec3, repr=False)
    _defocus_disk_u: Vec3 = field(init=False, default_factory=Vec3, repr=False)
    _defocus_disk_v: Vec3 = field(init=False, default_factory=Vec3, repr=False)
    _initialised: bool = field(init=False, default=False, repr=False)

    def initialise(self) -> None:
        """Derive the viewport geometry from the public settings."""
        self.image_height = max(self.image_width / self.aspect_ratio, 1.0)

        if self.samples_per_pixel == 0:
            self.samples_per_pixel = 100
        self.pixel_samples_scale = 1.0 / self.samples_per_pixel

        self._center = self.lookfrom

        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2.0)
        viewport_height = 2.0 * h * self.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        self._w = (self.lookfrom - self.lookat).normalized()
        self._u = self.vup.cross(self._w).normalized()
        self._v = self._w.cross(self._u)

        print(f"Viewport width: {viewport_width}")
        print(f"Viewport height: {viewport_height}")
        print(f"lookfrom: {tuple(self.lookfrom)}")
        print(f"lookat: {tuple(self.lookat)}")
        print(f"vfov: {self.vfov}")
        print(f"aspect_ratio: {self.aspect_ratio}")

        viewport_u = viewport_width * self._u
        viewport_v = viewport_height * -self._v

        self._pixel_delta_u = viewport_u / self.image_width
        self._pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (
            self._center - self.focus_dist * self._w - viewport_u / 2.0 - viewport_v / 2.0
        )
        self._pixel00_loc = viewport_upper_left + 0.5 * (self._pixel_delta_u + self._pixel_delta_v)

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2.0))
        self._defocus_disk_u = self._u * defocus_radius
        self._defocus_disk_v = self._v * defocus_radius

        print(f"Pixel deltas: u = {tuple(self._pixel_delta_u)}, v = {tuple(self._pixel_delta_v)}")
        self._initialised = True

    def get_ray(self, i: int, j: int) -> Ray:
        """A ray through a random point of pixel (i, j) from the lens."""
        offset = sample_square()
        pixel_sample = (
            self._pixel00_loc
            + (i + offset.x) * self._pixel_delta_u
            + (j + offset.y) * self._pixel_delta_v
        )
        origin = self._center if self.defocus_angle <= 0.0 else self._defocus_disk_sample()
        return Ray(origin, pixel_sample - origin)

    def render_rows(self, world: Hittable) -> Iterator[str]:
        """Yield the PPM pixel lines of each image row, top to bottom."""
        if not self._initialised:
            self.initialise()
        width = int(self.image_width)
        height = int(self.image_height)
        for completed, j in enumerate(range(height), start=1):
            pixels = []
            for i in range(width):
                total = Vec3()
                for _ in range(self.samples_per_pixel):
                    total = total + ray_colour(self.get_ray(i, j), self.max_depth, world)
                pixels.append(format_colour(total * self.pixel_samples_scale))
            print(f"Progress: {completed}/{height}")
            yield "".join(pixels)

    def render(self, world: Hittable, path: str | Path = DEFAULT_OUTPUT) -> Path:
        """Render the world to a plain PPM file and return its path."""
        self.initialise()
        out = Path(path)
        with out.open("w", encoding="ascii") as stream:
            stream.write(f"P3\n{int(self.image_width)} {int(self.image_height)}\n255\n")
            for row in self.render_rows(world):
                stream.write(row)
        print("\rDone.               \n")
        return out

    def _defocus_disk_sample(self) -> Vec3:
        p = random_in_unit_disk()
        return self._center + p.x * self._defocus_disk_u + p.y * self._defocus_disk_v