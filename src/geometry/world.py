# geometry/world.py
import logging
from typing import List, Optional

from core.color import Color
from core.constants import RAY_OFFSET, VIEW_RANGE
from core.errors import SceneBuildError
from core.interval import Interval
from core.ray import Ray
from geometry.hittable import HitPoint, Visible
from geometry.light import Light

logger = logging.getLogger(__name__)


class SceneData:
    """
    The objects, lights and background of a scene, plus the nearest-hit
    query every shading strategy is built on. Read-only once rendering starts.
    """
    def __init__(self):
        self.objects: List[Visible] = []
        self.lights: List[Light] = []
        self.background = None
        self.view_range = VIEW_RANGE

    def intersect(self, ray: Ray) -> Optional[HitPoint]:
        """
        Closest object hit by the ray within the view range. On an exact tie
        the object added first wins.
        """
        interval = Interval(RAY_OFFSET, self.view_range)
        closest_so_far = None
        hit_object = None
        for obj in self.objects:
            t = obj.hit_by_ray(ray, interval)
            if t is None:
                continue
            if closest_so_far is None or t < closest_so_far:
                closest_so_far = t
                hit_object = obj

        if hit_object is None or closest_so_far > self.view_range:
            return None

        position = ray.at(closest_so_far)
        is_outside = ray.direction.dot(hit_object.norm_of(position)) < 0
        return HitPoint(hit_object, position, is_outside)

    def intersect_background(self, ray: Ray) -> Color:
        if self.background is None:
            return Color.BLACK
        return self.background.color_of(ray.direction)


class Scene:
    """
    Builder-style scene: objects, lights and a background are added once,
    then rays are cast through the chosen strategy.
    """
    def __init__(self, strategy=None):
        if strategy is None:
            from renderer.ray_cast import LambertianStrategy
            strategy = LambertianStrategy()
        self.data = SceneData()
        self.strategy = strategy

    def add_object(self, obj: Visible) -> "Scene":
        self.data.objects.append(obj)
        logger.debug("Added %r (%d objects)", obj, len(self.data.objects))
        return self

    def add_light(self, light: Light) -> "Scene":
        self.data.lights.append(light)
        logger.debug("Added %r (%d lights)", light, len(self.data.lights))
        return self

    def add_background(self, background) -> "Scene":
        self.data.background = background
        return self

    def update_view_range(self, view_range: float) -> "Scene":
        if view_range <= RAY_OFFSET:
            raise SceneBuildError(f"view range must exceed {RAY_OFFSET}, got {view_range}")
        self.data.view_range = view_range
        return self

    @property
    def objects(self) -> List[Visible]:
        return self.data.objects

    @property
    def lights(self) -> List[Light]:
        return self.data.lights

    def intersect(self, ray: Ray) -> Optional[HitPoint]:
        return self.data.intersect(ray)

    def cast_ray(self, ray: Ray) -> Color:
        return self.strategy.cast_ray(self.data, ray, 0)
