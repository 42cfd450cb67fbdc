"""Small vector types and the scalar helpers used throughout the game."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


@dataclass(frozen=True)
class Vector2:
    """A two-dimensional vector, used for screen positions."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Vector3:
    """A three-dimensional vector with the usual arithmetic operators."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __pos__(self) -> Vector3:
        return self

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: object) -> Vector3:
        if not isinstance(scalar, Real):
            return NotImplemented
        s = float(scalar)
        return Vector3(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Vector3:
        if not isinstance(scalar, Real):
            return NotImplemented
        s = float(scalar)
        return Vector3(self.x / s, self.y / s, self.z / s)


@dataclass(frozen=True)
class AABB:
    """An axis-aligned bounding box given by its two corners."""

    min: Vector3
    max: Vector3


def lerp(x1: float, x2: float, t: float) -> float:
    """Linear interpolation from x1 to x2."""
    return (1.0 - t) * x1 + t * x2


def ease_in_out(x1: float, x2: float, t: float) -> float:
    """Sine ease-in-out interpolation from x1 to x2."""
    eased = -(math.cos(math.pi * t) - 1.0) / 2.0
    return lerp(x1, x2, eased)


def leap(v1: Vector3, v2: Vector3, t: float) -> Vector3:
    """Component-wise linear interpolation between two vectors."""
    return Vector3(lerp(v1.x, v2.x, t), lerp(v1.y, v2.y, t), lerp(v1.z, v2.z, t))


def is_collision(aabb1: AABB, aabb2: AABB) -> bool:
    """Whether two boxes overlap or touch on every axis."""
    return all(
        lo1 <= hi2 and hi1 >= lo2
        for lo1, hi1, lo2, hi2 in zip(aabb1.min, aabb1.max, aabb2.min, aabb2.max)
    )


def dot(v1: Vector3, v2: Vector3) -> float:
    """Dot product."""
    return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z


def length(v: Vector3) -> float:
    """Euclidean length."""
    return math.sqrt(dot(v, v))


def normalize(v: Vector3) -> Vector3:
    """Unit vector in the direction of v; the zero vector stays zero."""
    size = length(v)
    if size == 0:
        return Vector3(0.0, 0.0, 0.0)
    return Vector3(v.x / size, v.y / size, v.z / size)