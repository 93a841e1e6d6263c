# core/onb.py
from pathtracer.core.vector import Vector3

class ONB:
    """
    Orthonormal basis (u, v, w) built around a single direction w.
    """
    __slots__ = ("u", "v", "w")

    def __init__(self, u: Vector3, v: Vector3, w: Vector3):
        self.u = u
        self.v = v
        self.w = w

    @classmethod
    def from_w(cls, n: Vector3) -> "ONB":
        w = n.normalize()
        # Pick a helper axis that is not (nearly) parallel to w.
        a = Vector3(0, 1, 0) if abs(w.x) > 0.9 else Vector3(1, 0, 0)
        v = w.cross(a).normalize()
        u = w.cross(v)
        return cls(u, v, w)

    def local(self, a: Vector3) -> Vector3:
        """Map local coordinates (a.x, a.y, a.z) into world space."""
        return self.u * a.x + self.v * a.y + self.w * a.z
