"""Command-line entry point: render a scene file to a PPM image."""

from __future__ import annotations

import re
import sys
from typing import Optional, Sequence

from sphereray.ppm import save_image_as_ppm
from sphereray.scene import SceneFormatError, read_scene_file, render_image

DEFAULT_SCENE = "test.txt"
DEFAULT_OUTPUT = "image.ppm"
DEFAULT_WIDTH = 1920
DEFAULT_HEIGHT = 1080

USAGE = (
    "Error while reading parameters. Use the defaults by calling main:\n"
    "sphereray\n"
    "or follow the format:\n"
    "sphereray <scene-file.txt> <image-name.ppm> <image-width> <image-height>"
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    """Parse the leading integer of a string, or 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render a scene file and save it as a PPM image; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (0, 4):
        print(USAGE, file=sys.stderr)
        return 1

    scene_path, output_path = DEFAULT_SCENE, DEFAULT_OUTPUT
    width, height = DEFAULT_WIDTH, DEFAULT_HEIGHT
    if args:
        scene_path, output_path = args[0], args[1]
        width, height = _leading_int(args[2]), _leading_int(args[3])

    print(f"Scene: {scene_path}")
    print(f"Output: {output_path}")
    print(f"Resolution: {width} x {height}")

    try:
        scene = read_scene_file(scene_path)
    except (OSError, SceneFormatError) as exc:
        print(exc, file=sys.stderr)
        print(f"Error while opening the scene file: {scene_path}", file=sys.stderr)
        return 1

    try:
        image = render_image(scene, width, height)
    except ValueError:
        print("Error rendering image", file=sys.stderr)
        return 1

    try:
        save_image_as_ppm(output_path, image, width, height)
    except (OSError, ValueError):
        print("Error saving image", file=sys.stderr)
        return 1

    print("Execution ended")
    return 0


if __name__ == "__main__":
    sys.exit(main())