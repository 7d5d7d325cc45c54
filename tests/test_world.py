"""Unit tests for the Scene and its nearest-hit query.

Tests cover:
- Nearest object wins regardless of insertion order
- Exact ties go to the object added first
- View range and the background fallback
- Builder chaining and validation
"""

import pytest

from core.color import Color
from core.errors import SceneBuildError
from core.ray import Ray
from core.vector import Direction, Position
from geometry.box import AABBox
from geometry.light import Light
from geometry.sphere import Sphere
from geometry.world import Scene
from materials.material import Material
from renderer.background import DummyBackground, SolidBackground, Sky
from renderer.ray_cast import LambertianStrategy, MonteCarloStrategy

FORWARD = Ray(Position(0, 0, 0), Direction(0, 0, -1))


class TestIntersect:
    """Tests for Scene.intersect."""

    def test_empty_scene(self):
        assert Scene().intersect(FORWARD) is None

    def test_nearest_object_wins(self):
        far = Sphere(Position(0, 0, -10), 1.0, Material())
        near = Sphere(Position(0, 0, -5), 1.0, Material())
        scene = Scene().add_object(far).add_object(near)

        hit = scene.intersect(FORWARD)
        assert hit.obj is near
        assert hit.position.is_close(Position(0, 0, -4))
        assert hit.is_outside

    def test_tie_goes_to_first_added(self):
        first = Sphere(Position(0, 0, -5), 1.0, Material(Color.RED))
        second = Sphere(Position(0, 0, -5), 1.0, Material(Color.BLUE))
        scene = Scene().add_object(first).add_object(second)
        assert scene.intersect(FORWARD).obj is first

    def test_mixed_shapes(self):
        box = AABBox(Position(-1, -1, -4), Position(1, 1, -3), Material())
        sphere = Sphere(Position(0, 0, -8), 1.0, Material())
        hit = Scene().add_object(sphere).add_object(box).intersect(FORWARD)
        assert hit.obj is box
        assert hit.norm().is_close(Direction(0, 0, 1))

    def test_from_inside(self):
        scene = Scene().add_object(Sphere(Position(0, 0, 0), 2.0, Material()))
        hit = scene.intersect(FORWARD)
        assert not hit.is_outside
        assert hit.norm().is_close(Direction(0, 0, 1))

    def test_beyond_view_range(self):
        scene = Scene().add_object(Sphere(Position(0, 0, -50), 1.0, Material()))
        assert scene.intersect(FORWARD) is not None
        scene.update_view_range(10.0)
        assert scene.intersect(FORWARD) is None


class TestBackground:
    """Tests for colors of rays that miss."""

    def test_default_is_black(self):
        assert Scene().data.intersect_background(FORWARD) == Color.BLACK

    def test_solid(self):
        scene = Scene().add_background(SolidBackground(Color(0.1, 0.2, 0.3)))
        assert scene.data.intersect_background(FORWARD) == Color(0.1, 0.2, 0.3)

    def test_dummy(self):
        assert DummyBackground().color_of(Direction(0, 0, 1)).is_close(Color(0.6, 0.8, 0.4))

    def test_sky_gradient(self):
        sky = Sky()
        assert sky.color_of(Direction(0, -1, 0)).is_close(Color.WHITE)
        assert sky.color_of(Direction(0, 1, 0)).is_close(Color(0.5, 0.7, 1.0))
        assert sky.color_of(Direction(1, 0, 0)).is_close(Color(0.75, 0.85, 1.0))


class TestSceneBuilder:
    """Tests for Scene construction."""

    def test_chaining(self):
        light = Light(Position(0, 5, 0), 1.5)
        sphere = Sphere(Position(0, 0, -5), 1.0, Material())
        scene = Scene().add_object(sphere).add_light(light).add_background(Sky())
        assert scene.objects == [sphere]
        assert scene.lights == [light]

    def test_default_strategy(self):
        assert isinstance(Scene().strategy, LambertianStrategy)
        assert isinstance(Scene(MonteCarloStrategy()).strategy, MonteCarloStrategy)

    def test_invalid_view_range(self):
        with pytest.raises(SceneBuildError):
            Scene().update_view_range(0.0)

    def test_negative_light_intensity(self):
        with pytest.raises(SceneBuildError):
            Light(Position(0, 0, 0), -0.1)


class TestPackageLayering:
    """Tests that geometry does not depend on the renderer at import time."""

    def test_world_has_no_module_level_renderer_import(self):
        import ast
        import inspect

        import geometry.world as world

        tree = ast.parse(inspect.getsource(world))
        imported = [node.module for node in tree.body if isinstance(node, ast.ImportFrom)]
        imported += [alias.name for node in tree.body if isinstance(node, ast.Import)
                     for alias in node.names]
        assert not any(name.startswith("renderer") for name in imported)
