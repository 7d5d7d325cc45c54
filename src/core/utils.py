# core/utils.py
import random

from core.vector import Direction, Vector3


def random_in_unit_cube(rng=random) -> Vector3:
    """
    Returns a random point inside the cube [-1, 1]^3.
    """
    return Vector3(rng.uniform(-1, 1),
                   rng.uniform(-1, 1),
                   rng.uniform(-1, 1))


def random_on_hemisphere(normal: Direction, rng=random) -> Direction:
    """
    Returns a random unit direction on the same side of the surface as normal.
    """
    while True:
        d = Direction.of(random_in_unit_cube(rng))
        if d.length() > 0:
            break
    if not d.is_acute_angle(normal):
        d = d.reverse()
    return d
