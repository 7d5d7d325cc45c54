# core/ray.py
from core.constants import RAY_OFFSET
from core.vector import Direction, Position


class Ray:
    """
    Represents a ray in 3D space with an origin and a unit direction.
    Rays are values: deriving a secondary ray always builds a new one.
    """
    def __init__(self, origin: Position, direction: Direction):
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Position:
        """
        Returns the point along the ray at parameter t.
        """
        return Position.of(self.origin + self.direction * t)

    def reflected(self, hit) -> "Ray":
        """
        Mirror ray leaving the hit point.
        """
        n = hit.norm()
        direction = self.direction.reflection(n)
        return Ray(_offset_origin(hit.position, n, direction), direction)

    def refracted(self, hit) -> "Ray":
        """
        Transmitted ray through the hit surface. Leaving the solid swaps the
        refractive indices of the two media.
        """
        n = hit.norm()
        n1, n2 = 1.0, hit.surface_material().refractive_index
        if not hit.is_outside:
            n1, n2 = n2, n1

        direction = self.direction.refraction(n, n1, n2)
        return Ray(_offset_origin(hit.position, n, direction), direction)

    @staticmethod
    def shadow(hit, light_position: Position) -> "Ray":
        """
        Ray from the hit point toward a light, nudged along its own direction.
        """
        to_light = Direction.a_to_b(hit.position, light_position)
        return Ray(hit.position.move_forward(RAY_OFFSET, to_light), to_light)

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"


def _offset_origin(position: Position, n: Direction, direction: Direction) -> Position:
    # push to whichever side of the surface the new ray travels into
    side = n if direction.is_acute_angle(n) else n.reverse()
    return position.move_forward(RAY_OFFSET, side)
