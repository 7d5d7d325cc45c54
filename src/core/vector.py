# core/vector.py
import math
import numbers

from core.constants import SURFACE_EPSILON


class Vector3:
    """
    A simple 3D vector class supporting arithmetic, dot and cross products,
    and normalization. Arithmetic always produces a plain Vector3, so the
    subclasses below keep their invariants only through their constructors.
    """
    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, axis: int) -> float:
        return (self.x, self.y, self.z)[axis]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return (self.x, self.y, self.z) == (other.x, other.y, other.z)

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        l = self.length()
        if l == 0:
            return Vector3(0, 0, 0)
        return self / l

    def is_close(self, other: "Vector3", tol: float = SURFACE_EPSILON) -> bool:
        return all(abs(a - b) <= tol for a, b in zip(self, other))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y}, {self.z})"


class Position(Vector3):
    """
    A point in world space.
    """
    @classmethod
    def of(cls, v: Vector3) -> "Position":
        return cls(v.x, v.y, v.z)

    def move_forward(self, distance: float, direction: "Direction") -> "Position":
        return Position.of(self + direction * distance)

    def distance_to(self, other: "Position") -> float:
        return (other - self).length()


class Direction(Vector3):
    """
    A unit vector. Every constructor normalizes; the zero vector stays zero.
    """
    def __init__(self, x: float, y: float, z: float):
        l = math.sqrt(x * x + y * y + z * z)
        if l == 0:
            super().__init__(0.0, 0.0, 0.0)
        else:
            super().__init__(x / l, y / l, z / l)

    @classmethod
    def of(cls, v: Vector3) -> "Direction":
        return cls(v.x, v.y, v.z)

    @classmethod
    def a_to_b(cls, a: Position, b: Position) -> "Direction":
        return cls.of(b - a)

    def reverse(self) -> "Direction":
        return Direction(-self.x, -self.y, -self.z)

    def is_acute_angle(self, other: Vector3) -> bool:
        return self.dot(other) > 0.0

    def reflection(self, n: "Direction") -> "Direction":
        """
        Mirror this direction about the unit normal n: I - 2 (I.N) N.
        """
        return Direction.of(self - n * (2.0 * self.dot(n)))

    def refraction(self, n: "Direction", n1: float, n2: float) -> "Direction":
        """
        Bend this direction through a surface with unit normal n, going from
        a medium of index n1 into one of index n2 (vector form of Snell's law).

        Every sine and cosine is clamped to [-1, 1]; near total internal
        reflection the sine of the outgoing angle saturates at 1 instead of
        producing NaN.
        """
        eta = n1 / n2
        cos_theta1 = -_clamp(self.dot(n), -1.0, 1.0)
        sin_theta1 = _clamp(math.sqrt(max(0.0, 1.0 - cos_theta1 ** 2)), -1.0, 1.0)
        sin_theta2 = _clamp(eta * sin_theta1, -1.0, 1.0)
        cos_theta2 = _clamp(math.sqrt(max(0.0, 1.0 - sin_theta2 ** 2)), -1.0, 1.0)

        return Direction.of(self * eta + n * (eta * cos_theta1 - cos_theta2))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
