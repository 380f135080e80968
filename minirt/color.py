"""Floating-point RGB colours."""

from __future__ import annotations

from dataclasses import dataclass


def _clamp_unit(value: float) -> float:
    return min(max(value, 0.0), 1.0)


@dataclass(frozen=True)
class Color:
    """An RGB colour with channels nominally in ``[0, 1]``."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __add__(self, other: Color) -> Color:
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other: Color) -> Color:
        """Multiply channel by channel."""
        return Color(self.r * other.r, self.g * other.g, self.b * other.b)

    def scale(self, t: float) -> Color:
        """Return every channel multiplied by ``t``."""
        return Color(self.r * t, self.g * t, self.b * t)

    def clamped(self) -> Color:
        """Return the colour with every channel limited to ``[0, 1]``."""
        return Color(_clamp_unit(self.r), _clamp_unit(self.g), _clamp_unit(self.b))

    def to_int(self) -> int:
        """Pack the clamped colour as ``0xRRGGBB``."""
        c = self.clamped()
        r = int(c.r * 255)
        g = int(c.g * 255)
        b = int(c.b * 255)
        return r << 16 | g << 8 | b