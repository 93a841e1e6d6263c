# src/core/aabb.py
from typing import Iterable, List, Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import safe_inverse

class AABB:
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, narrow the interval in which the ray is inside.
        # A zero direction component gives +-inf slab bounds; a NaN bound
        # (0 * inf) fails both comparisons and leaves the interval untouched.
        for a in range(3):
            inv_d = safe_inverse(ray.direction[a])
            t0 = (self.minimum[a] - ray.origin[a]) * inv_d
            t1 = (self.maximum[a] - ray.origin[a]) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def corners(self) -> List[Vector3]:
        return [
            Vector3(x, y, z)
            for x in (self.minimum.x, self.maximum.x)
            for y in (self.minimum.y, self.maximum.y)
            for z in (self.minimum.z, self.maximum.z)
        ]

    def translated(self, offset: Vector3) -> "AABB":
        return AABB(self.minimum + offset, self.maximum + offset)

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return AABB(Vector3.minimum(box0.minimum, box1.minimum),
                    Vector3.maximum(box0.maximum, box1.maximum))

    @staticmethod
    def surrounding(boxes: Iterable[Optional["AABB"]]) -> Optional["AABB"]:
        """
        Union of every box in `boxes`; missing boxes (None) are left out.
        Returns None when no box is present at all.
        """
        result = None
        for box in boxes:
            if box is None:
                continue
            result = box if result is None else AABB.surrounding_box(result, box)
        return result

    @staticmethod
    def from_points(points: Iterable[Vector3]) -> "AABB":
        points = list(points)
        lo = hi = points[0]
        for p in points[1:]:
            lo = Vector3.minimum(lo, p)
            hi = Vector3.maximum(hi, p)
        return AABB(lo, hi)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    def __repr__(self) -> str:
        return f"AABB({self.minimum}, {self.maximum})"
