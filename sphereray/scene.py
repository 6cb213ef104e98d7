"""Scene description, scene-file parsing and ray-cast rendering of spheres."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, Optional, Sequence, Union

_INTEGER = re.compile(r"[+-]?\d+\Z")


class SceneFormatError(ValueError):
    """Raised when a scene description is malformed or holds invalid values."""


@dataclass(frozen=True, slots=True)
class Pixel:
    """An RGB colour with 8-bit components."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for component in (self.r, self.g, self.b):
            if not 0 <= component <= 255:
                raise ValueError(f"colour component out of range [0-255]: {component}")

    def __bytes__(self) -> bytes:
        return bytes((self.r, self.g, self.b))


@dataclass(frozen=True, slots=True)
class Vector:
    """A point or direction in three-dimensional space."""

    x: float
    y: float
    z: float

    def dot(self, other: Vector) -> float:
        """Return the inner product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def normalized(self) -> Vector:
        """Return the unit vector with the same direction."""
        length = math.sqrt(self.dot(self))
        if length == 0:
            raise ValueError("cannot normalise a zero-length vector")
        return Vector(self.x / length, self.y / length, self.z / length)


@dataclass(frozen=True, slots=True)
class Sphere:
    """A coloured sphere."""

    center: Vector
    radius: float
    color: Pixel


@dataclass(frozen=True, slots=True)
class Scene:
    """A viewport, a background colour and the spheres seen through it."""

    viewport_size: Vector
    bg_color: Pixel
    spheres: tuple[Sphere, ...] = ()


def _to_float(token: Optional[str]) -> Optional[float]:
    if token is None or "_" in token:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def _to_int(token: Optional[str]) -> Optional[int]:
    if token is None or not _INTEGER.match(token):
        return None
    return int(token)


def _read_record(
    tokens: Iterator[str],
    keyword: str,
    kinds: Sequence[Callable[[Optional[str]], Optional[Union[int, float]]]],
) -> list:
    """Read a keyword and its fields; return the fields read before the first failure."""
    values: list = []
    if next(tokens, None) != keyword:
        return values
    for kind in kinds:
        value = kind(next(tokens, None))
        if value is None:
            break
        values.append(value)
    return values


def _in_byte_range(*components: int) -> bool:
    return all(0 <= component <= 255 for component in components)


def parse_scene(text: str) -> Scene:
    """Parse a scene description made of VP, BG, OBJ_N and S records."""
    tokens = iter(text.split())

    viewport = _read_record(tokens, "VP", (_to_float,) * 3)
    if len(viewport) != 3:
        raise SceneFormatError("Malformed viewport header section")

    background = _read_record(tokens, "BG", (_to_int,) * 3)
    if len(background) != 3:
        raise SceneFormatError("Malformed background color header section")
    if not _in_byte_range(*background):
        raise SceneFormatError("Color values for background must be in range [0-255]")

    count_fields = _read_record(tokens, "OBJ_N", (_to_int,))
    if len(count_fields) != 1:
        raise SceneFormatError("Malformed number of objects header section")
    count = count_fields[0]
    if count < 0:
        raise SceneFormatError(f"Invalid number of objects: {count}")

    spheres = []
    for number in range(1, count + 1):
        fields = _read_record(tokens, "S", (_to_float,) * 4 + (_to_int,) * 3)
        if len(fields) != 7:
            raise SceneFormatError(
                f"Malformed sphere {number} definition: "
                f"expected 7 parameters, got {len(fields)}"
            )
        x, y, z, radius, r, g, b = fields
        if radius <= 0:
            raise SceneFormatError(
                f"Invalid radius for sphere {number}: {radius:f} (must be positive)"
            )
        if not _in_byte_range(r, g, b):
            raise SceneFormatError("Color values for spheres must be in range [0-255]")
        spheres.append(Sphere(Vector(x, y, z), radius, Pixel(r, g, b)))

    return Scene(Vector(*viewport), Pixel(*background), tuple(spheres))


def read_scene_file(path: Union[str, Path]) -> Scene:
    """Read and parse a scene file."""
    with open(path, encoding="utf-8") as handle:
        return parse_scene(handle.read())


def _trace(scene: Scene, ray: Vector) -> Pixel:
    """Return the colour of the nearest sphere hit by the ray, or the background."""
    try:
        direction = ray.normalized()
    except ValueError:
        return scene.bg_color

    closest = math.inf
    color = scene.bg_color
    for sphere in scene.spheres:
        a = direction.dot(direction)
        b = -2 * sphere.center.dot(direction)
        c = sphere.center.dot(sphere.center) - sphere.radius * sphere.radius
        discriminant = b * b - 4 * a * c
        if discriminant > 0:
            root = math.sqrt(discriminant)
            distance = min(abs(-b + root) / (2 * a), abs(-b - root) / (2 * a))
        elif discriminant == 0:
            distance = abs(-b / (2 * a))
        else:
            continue
        if distance < closest:
            closest = distance
            color = sphere.color
    return color


def render_image(scene: Scene, width: int, height: int) -> list[Pixel]:
    """Render the scene to a row-major list of pixels, top row first."""
    if width < 0 or height < 0:
        raise ValueError(f"invalid image size: {width} x {height}")

    viewport = scene.viewport_size
    step_x = viewport.x / (width - 1) if width > 1 else math.nan
    step_y = viewport.y / (height - 1) if height > 1 else math.nan

    rows = [
        [
            _trace(
                scene,
                Vector(
                    step_x * i - viewport.x / 2,
                    step_y * j - viewport.y / 2,
                    viewport.z,
                ),
            )
            for i in range(width)
        ]
        for j in range(height)
    ]
    return [pixel for row in reversed(rows) for pixel in row]