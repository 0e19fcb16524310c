# luminaire/core/math3d.py
"""
Core math types for light attitude tracking.
Designed for CPU-side transforms - upload to GPU as uniform data.

Conventions:
- Mat4 stores 16 floats row-major and multiplies column vectors (M @ v).
- Quat stores (x, y, z, w) with w the real part; products are Hamilton products.
- Vec3, Vec4 and Quat are frozen values; operations return new instances.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Tuple, Union

# Determinant magnitude below which a matrix is treated as singular.
SINGULAR_EPSILON = 1e-10


class SingularMatrixError(ArithmeticError):
    """Raised when inverting a matrix whose determinant is (numerically) zero."""

    def __init__(self, determinant: float):
        super().__init__(f"matrix is singular (det={determinant!r})")
        self.determinant = determinant


# =============================================================================
# Vector Types
# =============================================================================

@dataclass(frozen=True)
class Vec3:
    """3D vector for world and eye space positions and directions."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vec3:
        return self.__mul__(scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}, {self.z}]"

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vec3:
        ln = self.length()
        if ln < 1e-10:
            return Vec3(0.0, 0.0, 0.0)
        return Vec3(self.x / ln, self.y / ln, self.z / ln)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_homogeneous(self) -> Vec4:
        """Direction form (w=0): translations do not leak into it."""
        return Vec4(self.x, self.y, self.z, 0.0)

    @staticmethod
    def zero() -> Vec3:
        return Vec3(0.0, 0.0, 0.0)

    @staticmethod
    def unit_x() -> Vec3:
        return Vec3(1.0, 0.0, 0.0)

    @staticmethod
    def unit_y() -> Vec3:
        return Vec3(0.0, 1.0, 0.0)

    @staticmethod
    def unit_z() -> Vec3:
        return Vec3(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Vec4:
    """4D vector for homogeneous coordinates."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def xyz(self) -> Vec3:
        """Drop w without dividing (contraction of a direction)."""
        return Vec3(self.x, self.y, self.z)

    def to_vec3(self) -> Vec3:
        """Perspective divide to get 3D point."""
        if abs(self.w) < 1e-10:
            return Vec3(self.x, self.y, self.z)
        return Vec3(self.x / self.w, self.y / self.w, self.z / self.w)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    @staticmethod
    def from_vec3(v: Vec3, w: float = 1.0) -> Vec4:
        return Vec4(v.x, v.y, v.z, w)

    @staticmethod
    def direction(x: float, y: float, z: float) -> Vec4:
        """Create a direction vector (w=0)."""
        return Vec4(x, y, z, 0.0)


# =============================================================================
# Matrix Types
# =============================================================================

class Mat4:
    """4x4 matrix for 3D transforms."""

    __slots__ = ('m',)

    def __init__(self, values: Tuple[float, ...] = None):
        """Initialize with row-major values or identity."""
        if values is None:
            self.m = (
                1.0, 0.0, 0.0, 0.0,
                0.0, 1.0, 0.0, 0.0,
                0.0, 0.0, 1.0, 0.0,
                0.0, 0.0, 0.0, 1.0
            )
        else:
            assert len(values) == 16
            self.m = tuple(values)

    def __getitem__(self, idx: Tuple[int, int]) -> float:
        row, col = idx
        return self.m[row * 4 + col]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return self.m == other.m

    def __hash__(self) -> int:
        return hash(self.m)

    def __repr__(self) -> str:
        rows = ", ".join(
            "(" + ", ".join(f"{self[row, col]:.4f}" for col in range(4)) + ")"
            for row in range(4)
        )
        return f"Mat4({rows})"

    def __matmul__(self, other: Union[Mat4, Vec4, Vec3]) -> Union[Mat4, Vec4, Vec3]:
        if isinstance(other, Mat4):
            return self._mul_mat(other)
        elif isinstance(other, Vec4):
            return self._mul_vec4(other)
        elif isinstance(other, Vec3):
            # Treat as point (w=1)
            v4 = self._mul_vec4(Vec4.from_vec3(other, 1.0))
            return v4.to_vec3()
        raise TypeError(f"Cannot multiply Mat4 by {type(other)}")

    def _mul_mat(self, other: Mat4) -> Mat4:
        result = []
        for row in range(4):
            for col in range(4):
                val = sum(self[row, k] * other[k, col] for k in range(4))
                result.append(val)
        return Mat4(tuple(result))

    def _mul_vec4(self, v: Vec4) -> Vec4:
        return Vec4(
            self[0,0]*v.x + self[0,1]*v.y + self[0,2]*v.z + self[0,3]*v.w,
            self[1,0]*v.x + self[1,1]*v.y + self[1,2]*v.z + self[1,3]*v.w,
            self[2,0]*v.x + self[2,1]*v.y + self[2,2]*v.z + self[2,3]*v.w,
            self[3,0]*v.x + self[3,1]*v.y + self[3,2]*v.z + self[3,3]*v.w
        )

    def transpose(self) -> Mat4:
        return Mat4(tuple(
            self[col, row]
            for row in range(4)
            for col in range(4)
        ))

    def to_tuple(self) -> Tuple[float, ...]:
        return self.m

    def inverse(self, epsilon: float = SINGULAR_EPSILON) -> Mat4:
        """Compute inverse matrix.

        Raises SingularMatrixError when |det| < epsilon.
        """
        m = self.m

        c00 = m[5]*m[10]*m[15] - m[5]*m[11]*m[14] - m[9]*m[6]*m[15] + m[9]*m[7]*m[14] + m[13]*m[6]*m[11] - m[13]*m[7]*m[10]
        c01 = -m[4]*m[10]*m[15] + m[4]*m[11]*m[14] + m[8]*m[6]*m[15] - m[8]*m[7]*m[14] - m[12]*m[6]*m[11] + m[12]*m[7]*m[10]
        c02 = m[4]*m[9]*m[15] - m[4]*m[11]*m[13] - m[8]*m[5]*m[15] + m[8]*m[7]*m[13] + m[12]*m[5]*m[11] - m[12]*m[7]*m[9]
        c03 = -m[4]*m[9]*m[14] + m[4]*m[10]*m[13] + m[8]*m[5]*m[14] - m[8]*m[6]*m[13] - m[12]*m[5]*m[10] + m[12]*m[6]*m[9]

        det = m[0]*c00 + m[1]*c01 + m[2]*c02 + m[3]*c03
        if abs(det) < epsilon:
            raise SingularMatrixError(det)

        inv_det = 1.0 / det

        c10 = -m[1]*m[10]*m[15] + m[1]*m[11]*m[14] + m[9]*m[2]*m[15] - m[9]*m[3]*m[14] - m[13]*m[2]*m[11] + m[13]*m[3]*m[10]
        c11 = m[0]*m[10]*m[15] - m[0]*m[11]*m[14] - m[8]*m[2]*m[15] + m[8]*m[3]*m[14] + m[12]*m[2]*m[11] - m[12]*m[3]*m[10]
        c12 = -m[0]*m[9]*m[15] + m[0]*m[11]*m[13] + m[8]*m[1]*m[15] - m[8]*m[3]*m[13] - m[12]*m[1]*m[11] + m[12]*m[3]*m[9]
        c13 = m[0]*m[9]*m[14] - m[0]*m[10]*m[13] - m[8]*m[1]*m[14] + m[8]*m[2]*m[13] + m[12]*m[1]*m[10] - m[12]*m[2]*m[9]

        c20 = m[1]*m[6]*m[15] - m[1]*m[7]*m[14] - m[5]*m[2]*m[15] + m[5]*m[3]*m[14] + m[13]*m[2]*m[7] - m[13]*m[3]*m[6]
        c21 = -m[0]*m[6]*m[15] + m[0]*m[7]*m[14] + m[4]*m[2]*m[15] - m[4]*m[3]*m[14] - m[12]*m[2]*m[7] + m[12]*m[3]*m[6]
        c22 = m[0]*m[5]*m[15] - m[0]*m[7]*m[13] - m[4]*m[1]*m[15] + m[4]*m[3]*m[13] + m[12]*m[1]*m[7] - m[12]*m[3]*m[5]
        c23 = -m[0]*m[5]*m[14] + m[0]*m[6]*m[13] + m[4]*m[1]*m[14] - m[4]*m[2]*m[13] - m[12]*m[1]*m[6] + m[12]*m[2]*m[5]

        c30 = -m[1]*m[6]*m[11] + m[1]*m[7]*m[10] + m[5]*m[2]*m[11] - m[5]*m[3]*m[10] - m[9]*m[2]*m[7] + m[9]*m[3]*m[6]
        c31 = m[0]*m[6]*m[11] - m[0]*m[7]*m[10] - m[4]*m[2]*m[11] + m[4]*m[3]*m[10] + m[8]*m[2]*m[7] - m[8]*m[3]*m[6]
        c32 = -m[0]*m[5]*m[11] + m[0]*m[7]*m[9] + m[4]*m[1]*m[11] - m[4]*m[3]*m[9] - m[8]*m[1]*m[7] + m[8]*m[3]*m[5]
        c33 = m[0]*m[5]*m[10] - m[0]*m[6]*m[9] - m[4]*m[1]*m[10] + m[4]*m[2]*m[9] + m[8]*m[1]*m[6] - m[8]*m[2]*m[5]

        return Mat4((
            c00*inv_det, c10*inv_det, c20*inv_det, c30*inv_det,
            c01*inv_det, c11*inv_det, c21*inv_det, c31*inv_det,
            c02*inv_det, c12*inv_det, c22*inv_det, c32*inv_det,
            c03*inv_det, c13*inv_det, c23*inv_det, c33*inv_det
        ))

    @staticmethod
    def identity() -> Mat4:
        return Mat4()

    @staticmethod
    def translate(tx: float, ty: float, tz: float) -> Mat4:
        return Mat4((
            1.0, 0.0, 0.0, tx,
            0.0, 1.0, 0.0, ty,
            0.0, 0.0, 1.0, tz,
            0.0, 0.0, 0.0, 1.0
        ))

    @staticmethod
    def translate_vec(v: Vec3) -> Mat4:
        return Mat4.translate(v.x, v.y, v.z)


# =============================================================================
# Quaternion
# =============================================================================

@dataclass(frozen=True)
class Quat:
    """Quaternion for rotations.

    Not necessarily unit length: a pure quaternion (w=0) seeded from an axis
    is a valid value and is used as a rotation accumulator.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __mul__(self, other: Quat) -> Quat:
        return Quat(
            self.w*other.x + self.x*other.w + self.y*other.z - self.z*other.y,
            self.w*other.y - self.x*other.z + self.y*other.w + self.z*other.x,
            self.w*other.z + self.x*other.y - self.y*other.x + self.z*other.w,
            self.w*other.w - self.x*other.x - self.y*other.y - self.z*other.z
        )

    @property
    def vector(self) -> Vec3:
        """Imaginary (vector) part."""
        return Vec3(self.x, self.y, self.z)

    def to_mat4(self) -> Mat4:
        x, y, z, w = self.x, self.y, self.z, self.w

        xx = x*x; yy = y*y; zz = z*z
        xy = x*y; xz = x*z; yz = y*z
        wx = w*x; wy = w*y; wz = w*z

        return Mat4((
            1-2*(yy+zz),  2*(xy-wz),    2*(xz+wy),    0.0,
            2*(xy+wz),    1-2*(xx+zz),  2*(yz-wx),    0.0,
            2*(xz-wy),    2*(yz+wx),    1-2*(xx+yy),  0.0,
            0.0,          0.0,          0.0,          1.0
        ))

    @staticmethod
    def pure(v: Vec3) -> Quat:
        """Quaternion with zero real part and vector part v."""
        return Quat(v.x, v.y, v.z, 0.0)

    @staticmethod
    def from_axis_angle(axis: Vec3, angle: float) -> Quat:
        axis = axis.normalized()
        half = angle / 2.0
        s = math.sin(half)
        return Quat(axis.x * s, axis.y * s, axis.z * s, math.cos(half))


# =============================================================================
# Utility Functions
# =============================================================================

def deg_to_rad(degrees: float) -> float:
    return degrees * (math.pi / 180.0)

def rad_to_deg(radians: float) -> float:
    return radians * (180.0 / math.pi)
