[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spheretracer"
version = "0.1.0"
description = "A small path tracer that renders scenes of spheres with diffuse, metal and glass materials to PPM images."
requires-python = ">=3.10"
dependencies = []
keywords = ["raytracer", "path tracing", "rendering", "ppm", "spheres"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spheretracer = "spheretracer.scene:main"

[tool.hatch.build.targets.wheel]
packages = ["spheretracer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
