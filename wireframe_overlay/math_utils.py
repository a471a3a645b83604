#
# PROJECT: wireframe-overlay
# MODULE: wireframe_overlay/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from dataclasses import dataclass

import numpy as np


class Vec3:
    """Immutable 3-component vector."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self):
        return 3

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return self.x == other.x and self.y == other.y and self.z == other.z
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, scalar):
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar):
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    @property
    def xy(self):
        """The screen-plane components as an (x, y) tuple."""
        return (self.x, self.y)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other) -> 'Vec3':
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> 'Vec3':
        m = self.magnitude()
        if m == 0:
            return Vec3(0, 0, 0)
        return self / m


class Mat4:
    """4x4 transform matrix, stored [row][col] and applied to column vectors.

    Backed by a float64 numpy array. Instances are treated as values: every
    operation returns a new matrix and the factories never share storage.
    """
    __slots__ = ('m',)

    def __init__(self, data=None):
        if data is None:
            self.m = np.zeros((4, 4), dtype=np.float64)
        else:
            m = np.array(data, dtype=np.float64)
            if m.shape != (4, 4):
                raise ValueError(f"Mat4 needs 4x4 data, got shape {m.shape}")
            self.m = m

    def __repr__(self):
        rows = ", ".join("[" + ", ".join(f"{v:.3f}" for v in row) + "]" for row in self.m)
        return f"Mat4({rows})"

    def __eq__(self, other):
        if isinstance(other, Mat4):
            return bool(np.array_equal(self.m, other.m))
        return NotImplemented

    __hash__ = None

    def __getitem__(self, index):
        return self.m[index]

    @classmethod
    def from_rows(cls, rows) -> 'Mat4':
        return cls(rows)

    @classmethod
    def identity(cls) -> 'Mat4':
        return cls(np.eye(4))

    @classmethod
    def translation(cls, x, y, z) -> 'Mat4':
        mat = cls.identity()
        mat.m[0][3] = x
        mat.m[1][3] = y
        mat.m[2][3] = z
        return mat

    @classmethod
    def scale(cls, sx, sy, sz) -> 'Mat4':
        mat = cls.identity()
        mat.m[0][0] = sx
        mat.m[1][1] = sy
        mat.m[2][2] = sz
        return mat

    @classmethod
    def rotation_x(cls, rad: float) -> 'Mat4':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[1][1] = c
        mat.m[1][2] = -s
        mat.m[2][1] = s
        mat.m[2][2] = c
        return mat

    @classmethod
    def rotation_y(cls, rad: float) -> 'Mat4':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[0][0] = c
        mat.m[0][2] = s
        mat.m[2][0] = -s
        mat.m[2][2] = c
        return mat

    @classmethod
    def rotation_z(cls, rad: float) -> 'Mat4':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[0][0] = c
        mat.m[0][1] = -s
        mat.m[1][0] = s
        mat.m[1][1] = c
        return mat

    @classmethod
    def ortho(cls, left, right, bottom, top, near=-1.0, far=1.0) -> 'Mat4':
        """OpenGL-style orthographic projection onto the [-1, 1] cube."""
        mat = cls.identity()
        mat.m[0][0] = 2.0 / (right - left)
        mat.m[1][1] = 2.0 / (top - bottom)
        mat.m[2][2] = -2.0 / (far - near)
        mat.m[0][3] = -(right + left) / (right - left)
        mat.m[1][3] = -(top + bottom) / (top - bottom)
        mat.m[2][3] = -(far + near) / (far - near)
        return mat

    @classmethod
    def perspective(cls, fov_y: float, aspect: float, near: float, far: float) -> 'Mat4':
        """OpenGL-style perspective projection; fov_y in degrees.

        The camera looks down -z, so points in front of it end up with w > 0.
        """
        f_tan = 1.0 / math.tan(math.radians(fov_y) / 2.0)
        mat = cls()
        mat.m[0][0] = f_tan / aspect
        mat.m[1][1] = f_tan
        mat.m[2][2] = (far + near) / (near - far)
        mat.m[2][3] = 2.0 * far * near / (near - far)
        mat.m[3][2] = -1.0
        return mat

    def __matmul__(self, other):
        if isinstance(other, Mat4):
            return Mat4(self.m @ other.m)
        return NotImplemented

    def transform(self, x, y, z, w=1.0) -> np.ndarray:
        """Multiply the homogeneous point (x, y, z, w), returning the 4-vector."""
        return self.m @ np.array((x, y, z, w), dtype=np.float64)


@dataclass(frozen=True)
class Viewport:
    """Pixel rectangle that normalized device coordinates are mapped onto."""
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def for_canvas(cls, canvas) -> 'Viewport':
        """Viewport covering the whole canvas."""
        return cls(0.0, 0.0, float(canvas.width), float(canvas.height))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.width
        yield self.height
