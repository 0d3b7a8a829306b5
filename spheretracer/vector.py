"""Three-component vectors and the random sampling helpers built on them."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector, also used for points and colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vec3:
        """Return the unit vector in this direction; a zero vector raises ZeroDivisionError."""
        return self / self.length()

    def near_zero(self) -> bool:
        """True when every component is within 1e-8 of zero."""
        s = 1e-8
        return abs(self.x) < s and abs(self.y) < s and abs(self.z) < s

    def mul(self, other: Vec3) -> Vec3:
        """Component-wise product."""
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def random_float(low: float = 0.0, high: float = 1.0) -> float:
    """A uniform random number in [low, high)."""
    return low + (high - low) * random.random()


def random_vec3(low: float = 0.0, high: float = 1.0) -> Vec3:
    """A vector whose components are each uniform in [low, high)."""
    return Vec3(random_float(low, high), random_float(low, high), random_float(low, high))


def random_unit_vector() -> Vec3:
    """A uniformly distributed direction on the unit sphere."""
    while True:
        p = random_vec3(-1.0, 1.0)
        lensq = p.length_squared()
        if 1e-8 < lensq <= 1.0:
            return p.normalized()


def random_in_unit_disk() -> Vec3:
    """A random point strictly inside the unit disk in the z = 0 plane."""
    while True:
        p = Vec3(random_float(-1.0, 1.0), random_float(-1.0, 1.0), 0.0)
        if p.length_squared() < 1.0:
            return p


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Mirror v about the surface with normal n."""
    return v - 2.0 * v.dot(n) * n


def refract(uv: Vec3, n: Vec3, etai_over_etat: float) -> Vec3:
    """Bend unit vector uv through a surface with normal n by Snell's law."""
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = etai_over_etat * (uv + cos_theta * n)
    r_out_parallel = -math.sqrt(abs(1.0 - r_out_perp.length_squared())) * n
    return r_out_perp + r_out_parallel