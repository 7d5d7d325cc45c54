# renderer/tone_mapping.py
import numpy as np
from numba import njit, prange
from PIL import Image


@njit(parallel=True)
def quantize_image(linear_image):
    """
    Convert a (height, width, 3) linear color buffer to 8-bit RGB.

    Pixels whose brightest channel exceeds 1 are scaled down so that channel
    lands exactly on 1, then every channel is clamped to [0, 1] and mapped to
    [0, 255] by truncation. Same rule as Color.to_rgb8, pixel for pixel.
    """
    height, width, _ = linear_image.shape
    output_image = np.empty((height, width, 3), dtype=np.uint8)
    for y in prange(height):
        for x in range(width):
            r = linear_image[y, x, 0]
            g = linear_image[y, x, 1]
            b = linear_image[y, x, 2]

            max_chan = max(r, max(g, b))
            if max_chan > 1.0:
                r = r / max_chan
                g = g / max_chan
                b = b / max_chan

            output_image[y, x, 0] = int(255.0 * min(1.0, max(0.0, r)))
            output_image[y, x, 1] = int(255.0 * min(1.0, max(0.0, g)))
            output_image[y, x, 2] = int(255.0 * min(1.0, max(0.0, b)))
    return output_image


def to_image(linear_image: np.ndarray) -> Image.Image:
    """
    Quantize a linear buffer into an RGB PIL image.
    """
    return Image.fromarray(quantize_image(np.ascontiguousarray(linear_image, dtype=np.float64)))
