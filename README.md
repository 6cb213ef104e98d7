# sphereray

sphereray renders a scene of coloured spheres into a binary PPM (P6) image.
The scene is described in a small text file. The camera sits at the origin and
looks through a viewport. Each pixel takes the colour of the nearest sphere
its ray hits. If the ray hits no sphere, the pixel takes the background
colour.

## Installation

```
pip install .
```

The package needs nothing beyond the Python standard library and runs on
Python 3.10 or later.

## Command line

```
sphereray
```

With no arguments, this reads `test.txt` and writes a 1920 x 1080 image to
`image.ppm`. To set every parameter yourself, give all four of them:

```
sphereray <scene-file.txt> <image-name.ppm> <image-width> <image-height>
```

Each size is read from the leading digits of its argument. If an argument has
no leading digits, the size is 0. Any other number of arguments prints a usage
message and fails.

The command prints the scene name, the output name and the resolution. It
prints `Execution ended` when it finishes. It does the following on failure:

- If the scene file can't be read or is invalid, it prints the reason and
  `Error while opening the scene file: <name>` to standard error.
- If a size is negative, it prints `Error rendering image`.
- If the image can't be written, it prints `Error saving image`.

In each of these cases it exits with status 1.

You can also run the command as `python -m sphereray.cli`.

## Scene file format

```
VP 2 1.125 1
BG 255 255 255
OBJ_N 2
S 0.2 1 8 1 255 0 0
S -0.5 -0.2 5 0.6 0 0 255
```

- `VP x y z`: the viewport's width and height, and its distance from the
  camera.
- `BG r g b`: the background colour. Each component is an integer from 0 to
  255.
- `OBJ_N n`: the number of spheres that follow. It must not be negative.
- `S x y z radius r g b`: a sphere's centre, its radius and its colour. The
  radius must be positive. Each colour component is an integer from 0 to 255.

Whitespace of any kind separates the fields. Anything after the declared
spheres is ignored.

A malformed scene or an out-of-range value raises `SceneFormatError`, which is
a subclass of `ValueError`. A missing or unreadable file raises `OSError`.

## Library use

```python
from sphereray.scene import read_scene_file, render_image
from sphereray.ppm import save_image_as_ppm

scene = read_scene_file("scene.txt")
image = render_image(scene, 640, 360)
save_image_as_ppm("out.ppm", image, 640, 360)
```

`sphereray.scene` provides these:

- `parse_scene(text)` builds a `Scene` from a string. `read_scene_file(path)`
  does the same from a file.
- `Scene` holds `viewport_size` (a `Vector`), `bg_color` (a `Pixel`) and
  `spheres` (a tuple of `Sphere`). It is a frozen dataclass.
- `Sphere` has `center`, `radius` and `color`.
- `Vector` has `x`, `y` and `z`, and offers `dot(other)` and `normalized()`.
  `normalized()` raises `ValueError` for a zero-length vector.
- `Pixel` has `r`, `g` and `b`, each in the range 0 to 255. It raises
  `ValueError` otherwise. `bytes(pixel)` gives its three bytes.
- `render_image(scene, width, height)` returns a row-major list of `Pixel`
  values, top row first. It raises `ValueError` for a negative size.

`sphereray.ppm` provides these:

- `encode_ppm(image, width, height)` returns the PPM file as bytes. It raises
  `ValueError` if the number of pixels doesn't equal `width * height`.
- `save_image_as_ppm(path, image, width, height)` writes the file, replacing
  any existing one.

## What it does not do

The renderer gives each pixel the flat colour of the sphere it hits. It has
no lighting, shading, shadows or reflections. Spheres are the only shapes.
The only output format is binary PPM.

## Running the tests

```
pip install ".[test]"
pytest
```