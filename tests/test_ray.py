"""Unit tests for rays and their derived secondary rays.

Tests cover:
- Points along a ray
- Shadow, reflected and refracted ray origins are pushed off the surface
- Index swapping when a refracted ray leaves a solid
"""

from core.constants import RAY_OFFSET
from core.interval import Interval
from core.ray import Ray
from core.vector import Direction, Position
from geometry.hittable import HitPoint
from geometry.sphere import Sphere
from geometry.world import Scene
from materials.material import Material
from materials.presets import MaterialPresets


def unit_sphere(material=None):
    return Sphere(Position(0, 0, 0), 1.0, material if material is not None else Material())


class TestRay:
    """Tests for basic ray evaluation."""

    def test_at(self):
        ray = Ray(Position(1, 0, 0), Direction(0, 0, -1))
        assert ray.at(2.5).is_close(Position(1, 0, -2.5))
        assert isinstance(ray.at(0.0), Position)


class TestShadowRay:
    """Tests for rays cast toward a light."""

    def test_points_at_light_and_starts_off_surface(self):
        hit = HitPoint(unit_sphere(), Position(0, 1, 0), True)
        shadow = Ray.shadow(hit, Position(0, 10, 0))
        assert shadow.direction.is_close(Direction(0, 1, 0))
        assert shadow.origin.is_close(Position(0, 1 + RAY_OFFSET, 0))


class TestSecondaryRays:
    """Tests for reflected and refracted rays built from real hits."""

    def test_reflected_from_outside(self):
        scene = Scene().add_object(unit_sphere())
        ray = Ray(Position(0, 5, 0), Direction(0, -1, 0))
        hit = scene.intersect(ray)

        assert hit.is_outside
        reflected = ray.reflected(hit)
        assert reflected.direction.is_close(Direction(0, 1, 0))
        assert reflected.origin.is_close(Position(0, 1 + RAY_OFFSET, 0), 1e-9)

    def test_refracted_with_unit_index_goes_straight_in(self):
        scene = Scene().add_object(unit_sphere(Material(refractive_index=1.0)))
        ray = Ray(Position(0, 5, 0), Direction(0, -1, 0))
        hit = scene.intersect(ray)

        refracted = ray.refracted(hit)
        assert refracted.direction.is_close(Direction(0, -1, 0))
        # the new origin lies just inside the sphere
        assert refracted.origin.is_close(Position(0, 1 - RAY_OFFSET, 0), 1e-9)

    def test_refracted_leaving_solid(self):
        scene = Scene().add_object(unit_sphere(MaterialPresets.glass()))
        ray = Ray(Position(0, 0, 0), Direction(0, 1, 0))
        hit = scene.intersect(ray)

        assert not hit.is_outside
        assert hit.norm().is_close(Direction(0, -1, 0))
        refracted = ray.refracted(hit)
        assert refracted.direction.is_close(Direction(0, 1, 0))
        assert refracted.origin.is_close(Position(0, 1 + RAY_OFFSET, 0), 1e-9)

    def test_oblique_entry_bends_toward_normal(self):
        glass = unit_sphere(MaterialPresets.glass())
        hit = HitPoint(glass, Position(0, 1, 0), True)
        ray = Ray(Position(-1, 2, 0), Direction(1, -1, 0))

        refracted = ray.refracted(hit)
        # entering a denser medium: the sideways component shrinks
        assert 0 < refracted.direction.x < ray.direction.x
        assert refracted.direction.y < 0


class TestInterval:
    """Tests for ray parameter ranges."""

    def test_contains_is_half_open(self):
        interval = Interval(1.0, 2.0)
        assert interval.contains(1.0)
        assert interval.contains(1.5)
        assert not interval.contains(2.0)

    def test_surrounds_is_strict(self):
        interval = Interval(1.0, 2.0)
        assert not interval.surrounds(1.0)
        assert interval.surrounds(1.5)
        assert not interval.surrounds(2.0)

    def test_constants(self):
        assert Interval.FULL.contains(-1e300)
        assert not Interval.POSITIVE.contains(-1e-9)
        assert Interval.POSITIVE.contains(0.0)
