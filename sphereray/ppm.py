"""Binary PPM (P6) encoding and writing of rendered images."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Union

from sphereray.scene import Pixel


def encode_ppm(image: Sequence[Pixel], width: int, height: int) -> bytes:
    """Return the P6 file contents for a row-major list of pixels."""
    if width < 0 or height < 0:
        raise ValueError(f"invalid image size: {width} x {height}")
    if len(image) != width * height:
        raise ValueError(
            f"image holds {len(image)} pixels, expected {width * height}"
        )
    header = f"P6\n{width} {height}\n255\n".encode("ascii")
    return header + b"".join(bytes(pixel) for pixel in image)


def save_image_as_ppm(
    path: Union[str, Path], image: Sequence[Pixel], width: int, height: int
) -> None:
    """Write the image to a binary PPM file, replacing any existing file."""
    data = encode_ppm(image, width, height)
    with open(path, "wb") as handle:
        handle.write(data)