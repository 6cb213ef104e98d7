[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sphereray"
version = "0.1.0"
description = "A small sphere ray caster that renders text scene files to binary PPM images"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray casting", "ppm", "spheres", "rendering", "graphics"]
classifiers = [
    "Development Status :: 4 - Beta",
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
sphereray = "sphereray.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sphereray"]

[tool.pytest.ini_options]
addopts = "-ra"
