# renderer/raytracer.py
import copy
import logging
import os
import random
import time
from multiprocessing import Pool

import numpy as np

from camera.camera import Camera
from core.constants import SAMPLES_PER_PIXEL
from core.errors import SceneBuildError
from renderer.tone_mapping import quantize_image, to_image

logger = logging.getLogger(__name__)

QUALITY_PRESETS = {
    "preview": {"antialiasing": False, "samples": 1},
    "balanced": {"antialiasing": True, "samples": 4},
    "final": {"antialiasing": True, "samples": SAMPLES_PER_PIXEL},
}

# Per-process render state, filled once by the pool initializer so the
# scene is not pickled again for every row.
_worker_state = {}


def _init_worker(scene, camera, width, height, seed, reseed=True):
    _worker_state.update(scene=scene, camera=camera, width=width, height=height, seed=seed)
    if reseed and seed is None:
        # forked workers inherit the parent's generator state
        random.seed()
        scene.strategy.reseed()


def _render_row(y):
    scene = _worker_state["scene"]
    camera = _worker_state["camera"]
    width = _worker_state["width"]
    height = _worker_state["height"]
    seed = _worker_state["seed"]

    if seed is not None:
        row_seed = seed * 1_000_003 + y
        random.seed(row_seed)
        scene.strategy.reseed(row_seed)

    row = np.empty((width, 3), dtype=np.float64)
    for x in range(width):
        color = camera.pixel_color(scene, y * width + x, width, height, random)
        row[x] = (color.x, color.y, color.z)
    return y, row


class Renderer:
    """
    Renders a scene through a camera into a (height, width, 3) float buffer.

    Rows are handed out to a pool of worker processes; each row is written by
    exactly one worker. The scene and camera are only read while rendering.
    """
    def __init__(self, width: int, height: int, workers: int = None, seed: int = None):
        if width <= 0 or height <= 0:
            raise SceneBuildError(f"image size must be positive, got {width}x{height}")
        if workers is None:
            workers = os.cpu_count() or 1
        if workers < 1:
            raise SceneBuildError(f"need at least one worker, got {workers}")
        self.width = width
        self.height = height
        self.workers = workers
        self.seed = seed
        self.buffer = np.zeros((height, width, 3), dtype=np.float64)

    @staticmethod
    def configure_camera(camera: Camera, preset: str) -> Camera:
        """
        Copy of camera with the sampling settings of a quality preset.
        """
        try:
            quality = QUALITY_PRESETS[preset]
        except KeyError:
            raise SceneBuildError(
                f"unknown quality preset {preset!r}, expected one of {sorted(QUALITY_PRESETS)}"
            ) from None
        configured = copy.copy(camera)
        configured.antialiasing = quality["antialiasing"]
        configured.samples_per_pixel = quality["samples"]
        return configured

    def render(self, scene, camera: Camera) -> np.ndarray:
        """
        Trace every pixel and return the linear color buffer.
        """
        logger.info("Rendering %dx%d with %d worker(s), %s, %d objects, %d lights",
                    self.width, self.height, self.workers,
                    f"{camera.samples_per_pixel} samples/pixel" if camera.antialiasing else "1 sample/pixel",
                    len(scene.objects), len(scene.lights))
        start = time.perf_counter()
        args = (scene, camera, self.width, self.height, self.seed)

        if self.workers == 1:
            _init_worker(*args, reseed=False)
            try:
                for y in range(self.height):
                    _, self.buffer[y] = _render_row(y)
            finally:
                _worker_state.clear()
        else:
            with Pool(processes=self.workers, initializer=_init_worker, initargs=args) as pool:
                for y, row in pool.imap_unordered(_render_row, range(self.height)):
                    self.buffer[y] = row

        elapsed = time.perf_counter() - start
        pixels = self.width * self.height
        logger.info("Rendered %d pixels in %.2fs (%.0f pixels/sec)",
                    pixels, elapsed, pixels / elapsed if elapsed > 0 else float("inf"))
        return self.buffer

    def render_image(self, scene, camera: Camera) -> np.ndarray:
        """
        Render and quantize to an 8-bit (height, width, 3) array.
        """
        return quantize_image(self.render(scene, camera))

    def to_image(self):
        return to_image(self.buffer)

    def save(self, path) -> None:
        """
        Write the last render; the file format follows the extension.
        """
        self.to_image().save(path)
        logger.info("Saved render to %s", path)
