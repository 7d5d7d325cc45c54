# geometry/box.py
import math
from typing import Optional

from core.constants import SURFACE_EPSILON
from core.errors import SceneBuildError
from core.interval import Interval
from core.ray import Ray
from core.vector import Direction, Position
from geometry.hittable import Visible
from materials.material import Material

# Outward normals of the six faces, in the order they are tested.
_FACE_NORMALS = (
    (Direction(-1.0, 0.0, 0.0), Direction(1.0, 0.0, 0.0)),
    (Direction(0.0, -1.0, 0.0), Direction(0.0, 1.0, 0.0)),
    (Direction(0.0, 0.0, -1.0), Direction(0.0, 0.0, 1.0)),
)


class AABBox(Visible):
    """
    Axis-aligned box spanning the corners low and high.
    """
    def __init__(self, low: Position, high: Position, material: Material):
        for axis in range(3):
            if low[axis] > high[axis]:
                raise SceneBuildError(
                    f"low corner {low!r} exceeds high corner {high!r} on axis {'xyz'[axis]}")
        self.low = low
        self.high = high
        self.material = material

    def hit_by_ray(self, ray: Ray, interval: Interval) -> Optional[float]:
        # Slab method: for each axis, find intersection intervals.
        t_min = -math.inf
        t_max = math.inf
        for axis in range(3):
            o = ray.origin[axis]
            d = ray.direction[axis]
            low = self.low[axis]
            high = self.high[axis]
            if d == 0:
                # parallel to the slab: the ray is either always inside it or never
                if o < low or o > high:
                    return None
                continue
            t0 = (low - o) / d
            t1 = (high - o) / d
            if t0 > t1:
                t0, t1 = t1, t0
            t_min = max(t_min, t0)
            t_max = min(t_max, t1)

        if t_min > t_max or t_min < 0:
            return None
        if not interval.contains(t_min):
            return None
        return t_min

    def material_of(self, pos: Position) -> Material:
        return self.material

    def norm_of(self, pos: Position) -> Direction:
        for axis, (low_normal, high_normal) in enumerate(_FACE_NORMALS):
            if abs(pos[axis] - self.low[axis]) < SURFACE_EPSILON:
                return low_normal
            if abs(pos[axis] - self.high[axis]) < SURFACE_EPSILON:
                return high_normal
        return Direction(0.0, 0.0, 0.0)

    def __repr__(self) -> str:
        return f"AABBox({self.low!r}, {self.high!r})"
