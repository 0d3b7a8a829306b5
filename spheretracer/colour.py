"""Colour gamma correction and PPM pixel output."""

from __future__ import annotations

import math
from typing import TextIO

from spheretracer.interval import Interval
from spheretracer.vector import Vec3

Colour = Vec3

_INTENSITY = Interval(0.000, 0.999)


def linear_to_gamma(linear_component: float) -> float:
    """Apply gamma 2 correction; non-positive input gives 0."""
    if linear_component > 0.0:
        return math.sqrt(linear_component)
    return 0.0


def colour_to_bytes(colour: Colour) -> tuple[int, int, int]:
    """Convert a linear colour to gamma-corrected 0-255 components."""
    r, g, b = (int(256.0 * _INTENSITY.clamp(linear_to_gamma(c))) for c in colour)
    return r, g, b


def format_colour(colour: Colour) -> str:
    """One PPM pixel line: 'r g b' followed by a newline."""
    r, g, b = colour_to_bytes(colour)
    return f"{r} {g} {b}\n"


def write_colour(stream: TextIO, colour: Colour) -> None:
    """Write one pixel line to a text stream."""
    stream.write(format_colour(colour))