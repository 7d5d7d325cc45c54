# camera/camera.py
import copy
import math
import random
from typing import Tuple

from core.color import Color
from core.constants import DEFAULT_FILM_DISTANCE, DEFAULT_FOV, SAMPLES_PER_PIXEL
from core.errors import SceneBuildError
from core.ray import Ray
from core.vector import Direction, Position


class Camera:
    """
    Pinhole camera. The film sits film_distance in front of position along
    forward; right and up span it. fov is the vertical field of view in
    degrees.
    """
    def __init__(self, position: Position = None, forward: Direction = None,
                 right: Direction = None, up: Direction = None,
                 fov: float = DEFAULT_FOV, film_distance: float = DEFAULT_FILM_DISTANCE,
                 antialiasing: bool = False, samples_per_pixel: int = SAMPLES_PER_PIXEL):
        if not 0 < fov < 180:
            raise SceneBuildError(f"field of view must be within (0, 180) degrees, got {fov}")
        if film_distance <= 0:
            raise SceneBuildError(f"film distance must be positive, got {film_distance}")
        if samples_per_pixel < 1:
            raise SceneBuildError(f"need at least one sample per pixel, got {samples_per_pixel}")
        self.position = position if position is not None else Position(0, 0, 0)
        self.forward = forward if forward is not None else Direction(0, 0, -1)
        self.right = right if right is not None else Direction(1, 0, 0)
        self.up = up if up is not None else Direction(0, 1, 0)
        self.fov = fov
        self.film_distance = film_distance
        self.antialiasing = antialiasing
        self.samples_per_pixel = samples_per_pixel

    def film_coordinate(self, u: float, v: float, width: int, height: int) -> Tuple[float, float]:
        """
        Maps a (possibly fractional) pixel coordinate onto the film.
        """
        # Normalized device coordinates with the aspect ratio applied, so a
        # pixel step is the same size in x and y:
        # x_ndc in [-w/h, w/h], y_ndc in [-1, 1] with y pointing up.
        x_ndc = (2.0 * u - width) / height
        y_ndc = (height - 2.0 * v) / height

        scale = math.tan(math.radians(self.fov / 2.0)) * self.film_distance
        return x_ndc * scale, y_ndc * scale

    def pixel_on_film(self, idx: int, width: int, height: int) -> Tuple[float, float]:
        """
        Film coordinate of pixel number idx, counted row by row from the top left.
        """
        u = idx % width
        v = idx // width
        return self.film_coordinate(u, v, width, height)

    def sample_pixel_on_film(self, idx: int, width: int, height: int, rng=random) -> Tuple[float, float]:
        """
        Like pixel_on_film, jittered by up to half a pixel on each axis.
        """
        u = idx % width + rng.uniform(-0.5, 0.5)
        v = idx // width + rng.uniform(-0.5, 0.5)
        return self.film_coordinate(u, v, width, height)

    def ray_to_pixel(self, x: float, y: float) -> Ray:
        """
        Ray from the camera through the film point (x, y).
        """
        direction = self.right * x + self.up * y + self.forward * self.film_distance
        return Ray(self.position, Direction.of(direction))

    def pixel_color(self, scene, idx: int, width: int, height: int, rng=random) -> Color:
        if not self.antialiasing:
            x, y = self.pixel_on_film(idx, width, height)
            return scene.cast_ray(self.ray_to_pixel(x, y))

        color = Color(0.0, 0.0, 0.0)
        for _ in range(self.samples_per_pixel):
            x, y = self.sample_pixel_on_film(idx, width, height, rng)
            color = color + scene.cast_ray(self.ray_to_pixel(x, y))
        return color / self.samples_per_pixel

    def __repr__(self) -> str:
        return (f"Camera(position={self.position!r}, forward={self.forward!r}, "
                f"fov={self.fov}, antialiasing={self.antialiasing})")


class CameraBuilder:
    """
    Chainable construction of a Camera; build() may be called repeatedly.
    """
    def __init__(self):
        self._settings = {}

    def position(self, position: Position) -> "CameraBuilder":
        self._settings["position"] = position
        return self

    def forward_to(self, forward: Direction) -> "CameraBuilder":
        self._settings["forward"] = forward
        return self

    def up_to(self, up: Direction) -> "CameraBuilder":
        self._settings["up"] = up
        return self

    def right_to(self, right: Direction) -> "CameraBuilder":
        self._settings["right"] = right
        return self

    def look_at(self, target: Position, world_up: Direction = Direction(0, 1, 0)) -> "CameraBuilder":
        """
        Points the camera at target, deriving an orthonormal basis from the
        world up direction.
        """
        position = self._settings.get("position", Position(0, 0, 0))
        return self._set_basis(Direction.a_to_b(position, target), world_up)

    def orient(self, yaw: float, pitch: float) -> "CameraBuilder":
        """
        Points the camera by yaw and pitch in radians; yaw 0, pitch 0 looks
        down -z.
        """
        forward = Direction(
            math.sin(yaw) * math.cos(pitch),
            math.sin(pitch),
            -math.cos(yaw) * math.cos(pitch)
        )
        return self._set_basis(forward, Direction(0, 1, 0))

    def _set_basis(self, forward: Direction, world_up: Direction) -> "CameraBuilder":
        right = Direction.of(forward.cross(world_up))
        if right.length() == 0:
            raise SceneBuildError("camera forward direction is parallel to the up direction")
        self._settings["forward"] = forward
        self._settings["right"] = right
        self._settings["up"] = Direction.of(right.cross(forward))
        return self

    def adjust_screen(self, distance: float) -> "CameraBuilder":
        self._settings["film_distance"] = distance
        return self

    def adjust_fov_in_degree(self, degree: float) -> "CameraBuilder":
        self._settings["fov"] = degree
        return self

    def adjust_fov_in_radian(self, radian: float) -> "CameraBuilder":
        self._settings["fov"] = math.degrees(radian)
        return self

    def antialiasing(self, enable: bool = True, samples: int = SAMPLES_PER_PIXEL) -> "CameraBuilder":
        self._settings["antialiasing"] = enable
        self._settings["samples_per_pixel"] = samples
        return self

    def build(self) -> Camera:
        return Camera(**copy.copy(self._settings))
