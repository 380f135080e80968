"""Rendering a scene into an in-memory framebuffer."""

from __future__ import annotations

import os
from dataclasses import replace
from itertools import chain
from typing import Union

from minirt.camera import WIN_H, WIN_W
from minirt.scene import Scene
from minirt.shade import detect_color


class Framebuffer:
    """A grid of packed ``0xRRGGBB`` pixels, stored row by row."""

    def __init__(self, width: int = WIN_W, height: int = WIN_H) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid framebuffer size {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = [0] * (width * height)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store a packed colour at ``(x, y)``."""
        self._pixels[self._offset(x, y)] = color & 0xFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the packed colour at ``(x, y)``."""
        return self._pixels[self._offset(x, y)]

    def to_ppm(self) -> bytes:
        """Encode the image as a binary PPM (P6)."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        body = bytes(
            chain.from_iterable(
                ((c >> 16) & 0xFF, (c >> 8) & 0xFF, c & 0xFF) for c in self._pixels
            )
        )
        return header + body

    def save(self, path: Union[str, "os.PathLike[str]"]) -> None:
        """Write the image to ``path`` as a binary PPM."""
        with open(path, "wb") as fh:
            fh.write(self.to_ppm())


def pixel_color(scene: Scene, x: int, y: int) -> int:
    """Return the packed colour seen through pixel ``(x, y)``.

    The scene's camera is used as is, so its basis must already be built.
    """
    ray = scene.camera.pixel_ray(x, y)
    hit = scene.closest_hit(ray)
    return detect_color(hit, scene)


def render(scene: Scene) -> Framebuffer:
    """Render the whole scene into a new framebuffer of the window size."""
    ready = replace(scene, camera=scene.camera.build_basis())
    frame = Framebuffer(WIN_W, WIN_H)
    for y in range(WIN_H):
        for x in range(WIN_W):
            frame.put_pixel(x, y, pixel_color(ready, x, y))
    return frame