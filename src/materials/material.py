# materials/material.py
from core.color import Albedo, Color
from core.errors import SceneBuildError


class Material:
    """
    Surface description for the Phong/Whitted shading model.

    Attributes:
        diffuse_color: base color scaled by the diffuse light intensity.
        albedo: how the surface splits energy across the diffuse, specular,
            reflective and refractive channels.
        specular_exponent: Phong shininess, must be positive.
        refractive_index: index of the medium inside the surface.
    """
    def __init__(self, diffuse_color: Color = Color.WHITE,
                 albedo: Albedo = None,
                 specular_exponent: float = 50.0,
                 refractive_index: float = 1.0):
        if specular_exponent <= 0:
            raise SceneBuildError(f"specular exponent must be positive, got {specular_exponent}")
        if refractive_index <= 0:
            raise SceneBuildError(f"refractive index must be positive, got {refractive_index}")
        self.diffuse_color = diffuse_color
        self.albedo = albedo if albedo is not None else Albedo(1.0, 0.0, 0.0, 0.0)
        self.specular_exponent = specular_exponent
        self.refractive_index = refractive_index

    def with_diffuse_color(self, color: Color) -> "Material":
        """
        Copy of this material with another base color.
        """
        return Material(color, self.albedo, self.specular_exponent, self.refractive_index)

    def __repr__(self) -> str:
        return (f"Material({self.diffuse_color!r}, {self.albedo!r}, "
                f"{self.specular_exponent}, {self.refractive_index})")
