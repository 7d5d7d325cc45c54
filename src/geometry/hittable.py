# geometry/hittable.py
from typing import Optional

from core.interval import Interval
from core.ray import Ray
from core.vector import Direction, Position
from materials.material import Material


class Visible:
    """
    Abstract class for objects that can be hit by a ray. Each subclass owns
    its own geometry and answers intersection, material and normal queries.
    """
    def hit_by_ray(self, ray: Ray, interval: Interval) -> Optional[float]:
        """
        Nearest ray parameter inside interval at which the ray meets the
        surface, or None.
        """
        raise NotImplementedError("hit_by_ray() must be implemented by subclasses.")

    def material_of(self, pos: Position) -> Material:
        """
        Material at a point on the surface. May be built on the fly.
        """
        raise NotImplementedError("material_of() must be implemented by subclasses.")

    def norm_of(self, pos: Position) -> Direction:
        """
        Outward unit normal at a point on the surface.
        """
        raise NotImplementedError("norm_of() must be implemented by subclasses.")


class HitPoint:
    """
    Records details of a ray-object intersection. Only valid while the
    shading of that one intersection is evaluated.
    """
    def __init__(self, obj: Visible, position: Position, is_outside: bool):
        self.obj = obj              # The object that was hit
        self.position = position    # Intersection point
        self.is_outside = is_outside  # Whether the ray came from outside the solid

    def surface_material(self) -> Material:
        return self.obj.material_of(self.position)

    def norm(self) -> Direction:
        """
        Surface normal facing the side the ray arrived from.
        """
        n = self.obj.norm_of(self.position)
        return n if self.is_outside else n.reverse()
