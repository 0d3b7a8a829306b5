"""The demonstration scene and the command that renders it."""

from __future__ import annotations

import argparse

from spheretracer.camera import DEFAULT_OUTPUT, Camera
from spheretracer.hittable_list import HittableList
from spheretracer.materials import Dielectric, Lambertian, Material, Metal
from spheretracer.sphere import Sphere
from spheretracer.vector import Vec3, random_float, random_vec3


def build_random_scene() -> HittableList:
    """A ground plane, a grid of small random spheres and three large ones."""
    world = HittableList()
    world.add(Sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, Lambertian(Vec3(0.5, 0.5, 0.5))))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random_float()
            center = Vec3(a + 0.9 * random_float(), 0.2, b + 0.9 * random_float())

            material: Material
            if choose_mat < 0.8:
                material = Lambertian(random_vec3().mul(random_vec3()))
            elif choose_mat < 0.95:
                albedo = random_vec3(0.5, 1.0)
                material = Metal(albedo, random_float(0.0, 0.5))
            else:
                material = Dielectric(1.5)
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Vec3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vec3(-4.0, 1.0, 0.0), 1.0, Lambertian(Vec3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vec3(4.0, 1.0, 0.0), 1.0, Metal(Vec3(0.7, 0.6, 0.5), 0.0)))
    return world


def make_camera(
    image_width: float = 1200.0, samples_per_pixel: int = 100, max_depth: int = 50
) -> Camera:
    """The camera set up to view the random scene."""
    return Camera(
        aspect_ratio=16.0 / 9.0,
        image_width=float(image_width),
        samples_per_pixel=samples_per_pixel,
        max_depth=max_depth,
        vfov=20,
        lookfrom=Vec3(13.0, 2.0, 3.0),
        lookat=Vec3(0.0, 0.0, 0.0),
        vup=Vec3(0.0, 1.0, 0.0),
        defocus_angle=0.6,
        focus_dist=10.0,
    )


def main(argv: list[str] | None = None) -> int:
    """Render the random scene to a PPM file."""
    parser = argparse.ArgumentParser(description="Render a scene of random spheres.")
    parser.add_argument("--width", type=float, default=1200.0, help="image width in pixels")
    parser.add_argument("--samples", type=int, default=100, help="samples per pixel")
    parser.add_argument("--depth", type=int, default=50, help="maximum ray bounces")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="output PPM path")
    args = parser.parse_args(argv)

    world = build_random_scene()
    camera = make_camera(args.width, args.samples, args.depth)
    camera.render(world, args.output)
    return 0