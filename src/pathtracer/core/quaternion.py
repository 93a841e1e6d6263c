# core/quaternion.py
import math
from pathtracer.core.vector import Vector3

class Quaternion:
    """
    Unit quaternion used to rotate vectors about an arbitrary axis.
    """
    __slots__ = ("w", "x", "y", "z")

    def __init__(self, w: float = 1.0, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.w = w
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: float) -> "Quaternion":
        """
        Rotation of `angle` radians about `axis` (right-hand rule).
        A zero axis yields the identity rotation.
        """
        n = axis.normalize()
        half = angle * 0.5
        s = math.sin(half)
        return cls(math.cos(half), n.x * s, n.y * s, n.z * s)

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        # Hamilton product: (self * other) applies `other` first.
        return Quaternion(
            self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
        )

    def conjugate(self) -> "Quaternion":
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def rotate(self, v: Vector3) -> Vector3:
        """
        Rotate a vector, equivalent to q * (0, v) * q^-1 for a unit quaternion.
        """
        q = Vector3(self.x, self.y, self.z)
        t = q.cross(v) * 2.0
        return v + t * self.w + q.cross(t)

    def __repr__(self) -> str:
        return f"Quaternion({self.w}, {self.x}, {self.y}, {self.z})"
