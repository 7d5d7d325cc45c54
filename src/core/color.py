# core/color.py
from typing import Tuple

import numpy as np

from core.vector import Vector3


class Albedo:
    """
    Weights of the four illumination channels of a surface, in order:
    diffuse, specular, reflective, refractive. They need not sum to 1.
    """
    def __init__(self, diffuse: float, specular: float,
                 reflective: float, refractive: float):
        self.weights = np.array([diffuse, specular, reflective, refractive], dtype=np.float64)

    @property
    def diffuse(self) -> float:
        return float(self.weights[0])

    @property
    def specular(self) -> float:
        return float(self.weights[1])

    @property
    def reflective(self) -> float:
        return float(self.weights[2])

    @property
    def refractive(self) -> float:
        return float(self.weights[3])

    def __repr__(self) -> str:
        return "Albedo({}, {}, {}, {})".format(*self.weights.tolist())


class Color(Vector3):
    """
    Linear RGB color. Channels may exceed 1 until quantization.
    """
    @classmethod
    def of(cls, v) -> "Color":
        r, g, b = v
        return cls(r, g, b)

    def __add__(self, other: "Color") -> "Color":
        return Color.of(super().__add__(other))

    def __mul__(self, other) -> "Color":
        return Color.of(super().__mul__(other))

    def __truediv__(self, t: float) -> "Color":
        return Color.of(super().__truediv__(t))

    def apply_intensity(self, intensity: float) -> "Color":
        return self * intensity

    @staticmethod
    def apply_albedo(diffuse: "Color", specular: "Color", reflective: "Color",
                     refractive: "Color", albedo: Albedo) -> "Color":
        """
        Combine the four channel colors with one 3x4 matrix product.
        """
        channels = np.array([list(diffuse), list(specular),
                             list(reflective), list(refractive)], dtype=np.float64).T
        return Color.of(channels @ albedo.weights)

    def to_rgb8(self) -> Tuple[int, int, int]:
        """
        Quantize to 8 bits per channel. If the brightest channel is above 1,
        all channels are divided by it first so the hue survives clipping.
        """
        r, g, b = self.x, self.y, self.z
        max_chan = max(r, g, b)
        if max_chan > 1.0:
            r, g, b = r / max_chan, g / max_chan, b / max_chan
        return tuple(int(255.0 * min(1.0, max(0.0, c))) for c in (r, g, b))

    @classmethod
    def from_rgb8(cls, rgb) -> "Color":
        r, g, b = rgb
        return cls(r / 255.0, g / 255.0, b / 255.0)


Color.RED = Color(1.0, 0.0, 0.0)
Color.GREEN = Color(0.0, 1.0, 0.0)
Color.BLUE = Color(0.0, 0.0, 1.0)
Color.WHITE = Color(1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0)
Color.YELLOW = Color(1.0, 1.0, 0.0)
Color.CYAN = Color(0.0, 1.0, 1.0)
Color.MAGENTA = Color(1.0, 0.0, 1.0)
