# geometry/light.py
from core.errors import SceneBuildError
from core.vector import Position


class Light:
    """
    Point light. No falloff with distance, and the light itself casts no
    shadows.
    """
    def __init__(self, position: Position, intensity: float):
        if intensity < 0:
            raise SceneBuildError(f"light intensity must be non-negative, got {intensity}")
        self.position = position
        self.intensity = intensity

    def __repr__(self) -> str:
        return f"Light({self.position!r}, {self.intensity})"
