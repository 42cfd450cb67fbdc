"""4x4 matrices in row-vector convention and the affine builders."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from hoshiyoke.vector import Vector3

Row = tuple[float, float, float, float]
Rows = tuple[Row, Row, Row, Row]

_ZERO_ROWS: Rows = ((0.0,) * 4,) * 4

_AXIS_X, _AXIS_Y, _AXIS_Z = range(3)


@dataclass(frozen=True)
class Matrix4x4:
    """An immutable 4x4 matrix; ``m[i][j]`` reads row i, column j."""

    rows: Rows = field(default=_ZERO_ROWS)

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a Matrix4x4 needs exactly 4 rows of 4 values")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def zero(cls) -> Matrix4x4:
        return cls(_ZERO_ROWS)

    @classmethod
    def identity(cls) -> Matrix4x4:
        return _affine(_identity3())

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __matmul__(self, other: object) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return multiply(self, other)


def _identity3() -> list[list[float]]:
    return [[1.0 if row == column else 0.0 for column in range(3)] for row in range(3)]


def _affine(
    linear: Sequence[Sequence[float]], offset: Sequence[float] = (0.0, 0.0, 0.0)
) -> Matrix4x4:
    """Build a 4x4 matrix from a 3x3 linear block and a translation row."""
    rows = [(*row, 0.0) for row in linear]
    rows.append((*offset, 1.0))
    return Matrix4x4(tuple(rows))


def _rotation(radian: float, axis: int) -> Matrix4x4:
    """Rotation about one axis; the two other axes are taken in cyclic order."""
    first, second = (axis + 1) % 3, (axis + 2) % 3
    c, s = math.cos(radian), math.sin(radian)
    linear = _identity3()
    linear[first][first] = c
    linear[second][second] = c
    linear[first][second] = s
    linear[second][first] = -s
    return _affine(linear)


def _apply(components: tuple[float, float, float, float], matrix: Matrix4x4) -> list[float]:
    """Multiply a row vector of four components by the matrix."""
    return [sum(p * m for p, m in zip(components, column)) for column in zip(*matrix.rows)]


def multiply(matrix1: Matrix4x4, matrix2: Matrix4x4) -> Matrix4x4:
    """Matrix product matrix1 * matrix2."""
    return Matrix4x4(tuple(tuple(_apply(row, matrix2)) for row in matrix1.rows))


def make_scale_matrix(scale: Vector3) -> Matrix4x4:
    linear = _identity3()
    for index, factor in enumerate((scale.x, scale.y, scale.z)):
        linear[index][index] = factor
    return _affine(linear)


def make_translate_matrix(translate: Vector3) -> Matrix4x4:
    return _affine(_identity3(), (translate.x, translate.y, translate.z))


def make_rotate_x_matrix(radian: float) -> Matrix4x4:
    return _rotation(radian, _AXIS_X)


def make_rotate_y_matrix(radian: float) -> Matrix4x4:
    return _rotation(radian, _AXIS_Y)


def make_rotate_z_matrix(radian: float) -> Matrix4x4:
    return _rotation(radian, _AXIS_Z)


def make_affine_matrix(scale: Vector3, rotate: Vector3, translate: Vector3) -> Matrix4x4:
    """Scale, then rotate X*Y*Z, then translate."""
    rotation = (
        make_rotate_x_matrix(rotate.x)
        @ make_rotate_y_matrix(rotate.y)
        @ make_rotate_z_matrix(rotate.z)
    )
    return make_scale_matrix(scale) @ rotation @ make_translate_matrix(translate)


def transform(vector: Vector3, matrix: Matrix4x4) -> Vector3:
    """Transform a point (w = 1) and divide by the resulting w."""
    x, y, z, w = _apply((vector.x, vector.y, vector.z, 1.0), matrix)
    if w == 0.0:
        raise ValueError("transformed point has w == 0")
    return Vector3(x / w, y / w, z / w)


def transform_normal(v: Vector3, m: Matrix4x4) -> Vector3:
    """Transform a direction, ignoring translation."""
    x, y, z, _ = _apply((v.x, v.y, v.z, 0.0), m)
    return Vector3(x, y, z)


def player_affine_matrix(scale: Vector3, rotate: Vector3, translate: Vector3) -> Matrix4x4:
    """World matrix from the Y rotation and translation only; scale is ignored."""
    del scale
    return make_rotate_y_matrix(rotate.y) @ make_translate_matrix(translate)