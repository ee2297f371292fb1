"""Square matrices with cofactor-expansion inversion and affine builders.

Builder calls chain by left-multiplication, so the last call in a chain is
the last transform applied to a point.

Example:
    >>> import numpy as np
    >>> from rt_core.matrix import identity
    >>> from rt_core.tuples import point
    >>> t = identity().rotate_x(np.pi / 2).scale(5, 5, 5).translate(10, 5, 7)
    >>> np.allclose(t @ point(1, 0, 1), point(15, 0, 7))
    True
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from rt_core.tuples import EPSILON, Tuple4, cross, is_point, is_vector, normalize


@dataclass(frozen=True, eq=False)
class Matrix:
    data: NDArray[np.float64]

    def __post_init__(self) -> None:
        m = np.array(self.data, dtype=float)
        if m.ndim != 2 or m.shape[0] != m.shape[1]:
            raise ValueError(f"Matrix must be square, got shape {m.shape}")
        object.__setattr__(self, "data", m)

    @property
    def size(self) -> int:
        return self.data.shape[0]

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self.data[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if other.size != self.size:
            return False
        return bool(np.all(np.abs(self.data - other.data) < EPSILON))

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            if other.size != self.size:
                raise ValueError(f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size}")
            return Matrix(self.data @ other.data)
        return self.data @ np.asarray(other, dtype=float)

    def __repr__(self) -> str:
        rows = ", ".join("[" + ", ".join(f"{v:.5f}" for v in row) + "]" for row in self.data)
        return f"Matrix([{rows}])"

    def transpose(self) -> "Matrix":
        return Matrix(self.data.T)

    def submatrix(self, row: int, col: int) -> "Matrix":
        """Copy with ``row`` and ``col`` removed."""

        return Matrix(np.delete(np.delete(self.data, row, axis=0), col, axis=1))

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        m = self.minor(row, col)
        return -m if (row + col) % 2 else m

    def determinant(self) -> float:
        if self.size == 2:
            return float(self.data[0, 0] * self.data[1, 1] - self.data[0, 1] * self.data[1, 0])
        return sum(float(self.data[0, c]) * self.cofactor(0, c) for c in range(self.size))

    def is_invertible(self) -> bool:
        return self.determinant() != 0.0

    def inverse(self) -> "Matrix":
        """Adjugate over determinant; a singular matrix yields inf/NaN entries."""

        det = self.determinant()
        out = np.zeros_like(self.data)
        with np.errstate(divide="ignore", invalid="ignore"):
            for r in range(self.size):
                for c in range(self.size):
                    # transposed on write
                    out[c, r] = self.cofactor(r, c) / det
        return Matrix(out)

    def translate(self, x: float, y: float, z: float) -> "Matrix":
        return translation(x, y, z) @ self

    def scale(self, x: float, y: float, z: float) -> "Matrix":
        return scaling(x, y, z) @ self

    def rotate_x(self, radians: float) -> "Matrix":
        return rotation_x(radians) @ self

    def rotate_y(self, radians: float) -> "Matrix":
        return rotation_y(radians) @ self

    def rotate_z(self, radians: float) -> "Matrix":
        return rotation_z(radians) @ self

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> "Matrix":
        return shearing(xy, xz, yx, yz, zx, zy) @ self


def identity(size: int = 4) -> Matrix:
    return Matrix(np.eye(size))


def translation(x: float, y: float, z: float) -> Matrix:
    m = np.eye(4)
    m[0:3, 3] = (x, y, z)
    return Matrix(m)


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix(np.diag([x, y, z, 1.0]))


def rotation_x(radians: float) -> Matrix:
    c, s = np.cos(radians), np.sin(radians)
    m = np.eye(4)
    m[1, 1], m[1, 2] = c, -s
    m[2, 1], m[2, 2] = s, c
    return Matrix(m)


def rotation_y(radians: float) -> Matrix:
    c, s = np.cos(radians), np.sin(radians)
    m = np.eye(4)
    m[0, 0], m[0, 2] = c, s
    m[2, 0], m[2, 2] = -s, c
    return Matrix(m)


def rotation_z(radians: float) -> Matrix:
    c, s = np.cos(radians), np.sin(radians)
    m = np.eye(4)
    m[0, 0], m[0, 1] = c, -s
    m[1, 0], m[1, 1] = s, c
    return Matrix(m)


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Each coefficient moves the first axis in proportion to the second."""

    m = np.eye(4)
    m[0, 1], m[0, 2] = xy, xz
    m[1, 0], m[1, 2] = yx, yz
    m[2, 0], m[2, 1] = zx, zy
    return Matrix(m)


def view_transform(from_: Tuple4, to: Tuple4, up: Tuple4) -> Matrix:
    """World-to-eye transform for an eye at ``from_`` looking at ``to``."""

    assert is_point(from_) and is_point(to), "view_transform() expects from/to points"
    assert is_vector(up), "view_transform() expects an up vector"
    forward = normalize(to - from_)
    left = cross(forward, normalize(up))
    true_up = cross(left, forward)
    orientation = Matrix(
        np.array(
            [
                [left[0], left[1], left[2], 0.0],
                [true_up[0], true_up[1], true_up[2], 0.0],
                [-forward[0], -forward[1], -forward[2], 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
    )
    return orientation @ translation(-from_[0], -from_[1], -from_[2])
