# minirt

A small ray tracer. It reads a scene description from a `.rt` file and
renders it as an 800 by 600 image. The scene has ambient lighting and one
point light. Spheres, planes and capped cylinders are supported, and every
object in the scene casts shadows.

## Installing

```
pip install .
```

## Running

```
minirt scene.rt
```

The single argument must name a file that ends in `.rt`. The image goes to a
binary PPM (P6) file next to the scene, with the same name and a `.ppm`
suffix, so `scene.rt` becomes `scene.ppm`. Progress and errors go to
standard error, and each line starts with `miniRT:`. The exit status is 0 on
success and 1 on any error: a wrong number of arguments, a wrong suffix, a
file that cannot be opened, a malformed scene, or an image that cannot be
written.

## Scene files

Each non-blank line starts with an identifier and then lists fields
separated by spaces. Vectors and colours are three comma-separated numbers.
A number is an optional sign followed by digits with at most one dot.
Colour channels run from 0 to 255.

| Identifier | Fields |
|------------|--------|
| `A`  | ambient ratio (0–1), colour |
| `C`  | position, direction (each component −1 to 1, not all zero), horizontal field of view (0–180) |
| `L`  | position, brightness ratio (0–1), colour |
| `sp` | centre, diameter (> 0), colour |
| `pl` | point, normal (each component −1 to 1, not all zero), colour |
| `cy` | centre, axis (each component −1 to 1, not all zero), diameter (> 0), height (> 0), colour |

`A`, `C` and `L` must each appear exactly once. Any number of `sp`, `pl` and
`cy` lines may appear. An unknown identifier is an error. Directions are
normalised after they are read.

```
A 0.2 255,255,255
C 0,-10,0 0,1,0 70
L -5,-5,5 0.7 255,255,255
sp 0,0,0 4 255,0,0
pl 0,0,-2 0,0,1 200,200,200
cy 3,2,0 0,0,1 1.5 4 0,128,255
```

## Using the library

```python
from minirt.parser import load_scene
from minirt.render import render

scene = load_scene("scene.rt")
image = render(scene)
image.save("scene.ppm")
```

- `minirt.parser.load_scene(path)` reads a file. `parse_scene(lines)` takes
  any iterable of lines. Both raise `minirt.parser.SceneParseError`, a
  `ValueError` with `where` and `message` attributes, when the input is
  malformed.
- `minirt.render.render(scene)` builds the camera basis and returns a
  `Framebuffer`. Use `get_pixel(x, y)` to read a pixel as a `0xRRGGBB`
  integer, `to_ppm()` to get the PPM bytes, or `save(path)` to write them.
- `minirt.render.pixel_color(scene, x, y)` shades a single pixel. It uses
  the camera as given, so call `scene.camera.build_basis()` first. That
  method returns a new camera and does not change the scene.
- Geometry lives in `minirt.vector.Vec3`, `minirt.color.Color` and
  `minirt.intersect` (`Ray`, `Sphere`, `Plane`, `Cylinder`, `closest_hit`).
  Shading lives in `minirt.shade`.

## What it does not do

The image is not shown on screen. There is no window and no interactive
selection or moving of objects. The only output is the PPM file. The image
size is fixed at 800 by 600.