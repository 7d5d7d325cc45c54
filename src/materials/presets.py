# materials/presets.py
from core.color import Albedo, Color
from materials.material import Material


class MaterialPresets:
    """Predefined materials for the Whitted-style shading model."""

    @staticmethod
    def ivory() -> Material:
        return Material(Color(0.4, 0.4, 0.3), Albedo(0.6, 0.3, 0.1, 0.0), 50.0, 1.0)

    @staticmethod
    def red_rubber() -> Material:
        return Material(Color(0.3, 0.1, 0.1), Albedo(0.9, 0.1, 0.0, 0.0), 10.0, 1.0)

    @staticmethod
    def glass() -> Material:
        # mostly refraction, no diffuse term
        return Material(Color(0.6, 0.7, 0.8), Albedo(0.0, 0.5, 0.1, 0.8), 125.0, 1.5)

    @staticmethod
    def gold() -> Material:
        return Material(Color(0.6, 0.5, 0.3), Albedo(0.5, 0.5, 0.1, 0.0), 80.0, 0.8)

    @staticmethod
    def magenta() -> Material:
        return Material(Color.MAGENTA, Albedo(0.3, 0.3, 0.1, 0.0), 20.0, 0.8)

    @staticmethod
    def mirror() -> Material:
        return Material(Color(0.0, 0.0, 0.0), Albedo(1.0, 1.0, 0.87, 0.0), 1425.0, 1.0)

    @staticmethod
    def dark_mirror() -> Material:
        return Material(Color(40 / 255, 40 / 255, 40 / 255), Albedo(1.0, 0.1, 0.1, 0.0), 30.0, 1.0)

    @staticmethod
    def matte(color: Color) -> Material:
        return Material(color, Albedo(1.0, 0.0, 0.0, 0.0), 10.0, 1.0)
