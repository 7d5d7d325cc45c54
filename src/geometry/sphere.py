# geometry/sphere.py
import math
from typing import Optional, Tuple

from core.color import Color
from core.errors import SceneBuildError
from core.interval import Interval
from core.ray import Ray
from core.vector import Direction, Position, Vector3
from geometry.hittable import Visible
from materials.material import Material


class Sphere(Visible):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Position, radius: float, material: Material):
        if radius <= 0:
            raise SceneBuildError(f"sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius
        self.material = material

    def roots(self, ray: Ray) -> Optional[Tuple[float, float]]:
        """
        Both solutions (near, far) of |O + tD - C|^2 = r^2, or None when the
        ray misses.
        """
        cq = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(cq)
        c = cq.dot(cq) - self.radius * self.radius
        discriminant = b * b - 4.0 * a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        return (-b - sqrt_disc) / (2.0 * a), (-b + sqrt_disc) / (2.0 * a)

    def hit_by_ray(self, ray: Ray, interval: Interval) -> Optional[float]:
        roots = self.roots(ray)
        if roots is None:
            return None

        # Find the nearest root that lies in the acceptable range; the far
        # one is used when the ray starts inside the sphere.
        for root in roots:
            if interval.contains(root):
                return root
        return None

    def material_of(self, pos: Position) -> Material:
        return self.material

    def norm_of(self, pos: Position) -> Direction:
        return Direction.of(pos - self.center)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"


class GradientSphere(Sphere):
    """
    Sphere whose color follows its outward normal, mapped from [-1, 1] to
    [0, 1] per channel.
    """
    def __init__(self, center: Position, radius: float, material: Material = None):
        super().__init__(center, radius, material if material is not None else Material())

    def material_of(self, pos: Position) -> Material:
        n = self.norm_of(pos)
        gradient = (n + Vector3(1.0, 1.0, 1.0)) * 0.5
        return self.material.with_diffuse_color(Color.of(gradient))

    def __repr__(self) -> str:
        return f"GradientSphere({self.center!r}, {self.radius})"
