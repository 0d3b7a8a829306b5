# spheretracer

A small Monte Carlo path tracer in pure Python. It renders scenes built
from spheres with three kinds of material:

- `Lambertian` – matte, diffuse surfaces
- `Metal` – reflective surfaces with optional fuzz (capped at 1)
- `Dielectric` – glass-like surfaces that refract and reflect

Output is a plain-text PPM (`P3`) image.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
spheretracer
```

This builds the "many random spheres" scene (a large ground sphere, a grid
of small randomly placed diffuse, metal and glass spheres, and three large
feature spheres), sets up a camera with a shallow depth of field, and writes
the result to `rendered_image.ppm` in the current directory. Progress is
printed row by row.

Options:

| option      | default              | meaning              |
|-------------|----------------------|----------------------|
| `--width`   | 1200                 | image width in pixels |
| `--samples` | 100                  | samples per pixel    |
| `--depth`   | 50                   | maximum ray bounces  |
| `--output`  | `rendered_image.ppm` | output PPM path      |

Full-size renders in pure Python take a long time, so start small, e.g.
`spheretracer --width 200 --samples 10 --depth 10`.

## Library use

```python
from spheretracer.camera import Camera
from spheretracer.hittable_list import HittableList
from spheretracer.materials import Dielectric, Lambertian, Metal
from spheretracer.sphere import Sphere
from spheretracer.vector import Vec3

world = HittableList()
world.add(Sphere(Vec3(0.0, -100.5, -1.0), 100.0, Lambertian(Vec3(0.8, 0.8, 0.0))))
world.add(Sphere(Vec3(0.0, 0.0, -1.2), 0.5, Lambertian(Vec3(0.1, 0.2, 0.5))))
world.add(Sphere(Vec3(-1.0, 0.0, -1.0), 0.5, Dielectric(1.5)))
world.add(Sphere(Vec3(1.0, 0.0, -1.0), 0.5, Metal(Vec3(0.8, 0.6, 0.2), 1.0)))

cam = Camera(aspect_ratio=16 / 9, image_width=200, samples_per_pixel=20, max_depth=20)
path = cam.render(world, "scene.ppm")
```

`Camera.render` writes the PPM file and returns its path.
`Camera.render_rows` yields the pixel lines of each row, top to bottom,
without writing a file.

Building blocks:

- `spheretracer.vector` – `Vec3` (arithmetic, `dot`, `cross`, `length`,
  `length_squared`, `normalized`, `near_zero`, component-wise `mul`) and the
  helpers `degrees_to_radians`, `random_float`, `random_vec3`,
  `random_unit_vector`, `random_in_unit_disk`, `reflect` and `refract`
- `spheretracer.interval.Interval` – `surrounds` (strictly inside) and `clamp`
- `spheretracer.ray.Ray` – a ray with `at(t)`
- `spheretracer.colour` – gamma correction and PPM pixel formatting
  (`linear_to_gamma`, `colour_to_bytes`, `format_colour`, `write_colour`)
- `spheretracer.hittable` – `HitRecord` and the `Hittable` base class
- `spheretracer.materials` – `Material` and its subclasses;
  `Dielectric.reflectance` gives Schlick's approximation
- `spheretracer.hittable_list.HittableList` – reports the nearest hit
- `spheretracer.sphere.Sphere` – the only shape
- `spheretracer.camera` – `Camera`, `ray_colour` and `sample_square`
- `spheretracer.scene` – `build_random_scene`, `make_camera` and `main`

## Camera settings

| attribute           | default          |
|---------------------|------------------|
| `aspect_ratio`      | 1.0              |
| `image_width`       | 100              |
| `samples_per_pixel` | 10 (0 means 100) |
| `max_depth`         | 10               |
| `vfov`              | 90 degrees       |
| `lookfrom`          | (0, 0, 0)        |
| `lookat`            | (0, 0, -1)       |
| `vup`               | (0, 1, 0)        |
| `defocus_angle`     | 0.0              |
| `focus_dist`        | 10.0             |

The image height is `image_width / aspect_ratio`, at least 1.

## What it does not do

Rendering runs in a single process, one row after another; there is no
parallel rendering. Spheres are the only shapes, the image is written only
as `P3` PPM, and there is no way to load scenes from a file: scenes are
built in Python.