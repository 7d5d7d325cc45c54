# renderer/ray_cast.py
"""
Strategies turning a ray into a color. A strategy is handed to the Scene when
it is built; both share the scene's nearest-hit query but shade differently.
"""
import random
from typing import Tuple

from core.color import Color
from core.constants import MONTE_CARLO_DEPTH, RECURSION_DEPTH
from core.errors import SceneBuildError
from core.ray import Ray
from core.utils import random_on_hemisphere
from core.vector import Direction


class RayCastStrategy:
    def cast_ray(self, scene, ray: Ray, depth: int) -> Color:
        """
        Color carried back along ray, depth being the number of bounces
        already taken.
        """
        raise NotImplementedError("cast_ray() must be implemented by subclasses.")

    def reseed(self, seed=None) -> None:
        """
        Restart the strategy's own random generator, if it keeps one.
        """


class LambertianStrategy(RayCastStrategy):
    """
    Whitted-style ray tracing: Lambert diffuse plus Phong specular from every
    unshadowed point light, with recursive mirror and refraction rays.
    """
    def __init__(self, recursion_depth: int = RECURSION_DEPTH):
        if recursion_depth < 0:
            raise SceneBuildError(f"recursion depth must be non-negative, got {recursion_depth}")
        self.recursion_depth = recursion_depth

    def direct_illumination(self, scene, ray: Ray, hit) -> Tuple[float, float]:
        """
        Summed (diffuse, specular) light intensity at the hit point.

        The side-corrected normal is used, so points seen from inside a
        solid are lit by lights on that same inner side.
        """
        diffuse_intensity = 0.0
        specular_intensity = 0.0
        n = hit.norm()
        material = hit.surface_material()

        for light in scene.lights:
            to_light = Direction.a_to_b(hit.position, light.position)
            if not to_light.is_acute_angle(n):
                continue

            light_distance = hit.position.distance_to(light.position)
            shadow_ray = Ray.shadow(hit, light.position)
            blocker = scene.intersect(shadow_ray)
            if blocker is not None and \
                    blocker.position.distance_to(shadow_ray.origin) < light_distance:
                continue

            reflected_light = to_light.reverse().reflection(n).reverse()
            highlight = max(0.0, ray.direction.dot(reflected_light)) ** material.specular_exponent

            diffuse_intensity += light.intensity * max(0.0, to_light.dot(n))
            specular_intensity += light.intensity * highlight

        return diffuse_intensity, specular_intensity

    def cast_ray(self, scene, ray: Ray, depth: int) -> Color:
        if depth > self.recursion_depth:
            return Color.BLACK

        hit = scene.intersect(ray)
        if hit is None:
            return scene.intersect_background(ray)

        material = hit.surface_material()

        if material.albedo.reflective > 0:
            reflective_color = self.cast_ray(scene, ray.reflected(hit), depth + 1)
        else:
            reflective_color = scene.intersect_background(ray)

        if material.albedo.refractive > 0:
            refractive_color = self.cast_ray(scene, ray.refracted(hit), depth + 1)
        else:
            refractive_color = scene.intersect_background(ray)

        diffuse_intensity, specular_intensity = self.direct_illumination(scene, ray, hit)

        return Color.apply_albedo(
            material.diffuse_color.apply_intensity(diffuse_intensity),
            Color.WHITE.apply_intensity(specular_intensity),
            reflective_color,
            refractive_color,
            material.albedo,
        )


class MonteCarloStrategy(RayCastStrategy):
    """
    Diffuse-only path tracer: each hit bounces once in a uniformly random
    direction of the normal's hemisphere and keeps half of what comes back.
    No light sampling, so only the background illuminates the scene.
    """
    ATTENUATION = 0.5

    def __init__(self, recursion_depth: int = MONTE_CARLO_DEPTH, rng=None):
        if recursion_depth < 0:
            raise SceneBuildError(f"recursion depth must be non-negative, got {recursion_depth}")
        self.recursion_depth = recursion_depth
        self.rng = rng

    def reseed(self, seed=None) -> None:
        if self.rng is not None:
            self.rng.seed(seed)

    def diffusive_ray(self, hit) -> Ray:
        rng = self.rng if self.rng is not None else random
        direction = random_on_hemisphere(hit.norm(), rng)
        return Ray(hit.position, direction)

    def cast_ray(self, scene, ray: Ray, depth: int) -> Color:
        if depth > self.recursion_depth:
            return Color.BLACK

        hit = scene.intersect(ray)
        if hit is None:
            return scene.intersect_background(ray)

        return self.cast_ray(scene, self.diffusive_ray(hit), depth + 1) * self.ATTENUATION
