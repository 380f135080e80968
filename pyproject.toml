[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minirt"
version = "0.1.0"
description = "A small ray tracer that renders .rt scene files of spheres, planes and cylinders to PPM images"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "3d", "scene", "ppm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minirt = "minirt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minirt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
