# renderer/background.py
from core.color import Color
from core.vector import Direction


class Background:
    """
    Color seen by rays that hit nothing, as a function of their direction.
    """
    def color_of(self, direction: Direction) -> Color:
        raise NotImplementedError("color_of() must be implemented by subclasses.")


class SolidBackground(Background):
    def __init__(self, color: Color):
        self.color = color

    def color_of(self, direction: Direction) -> Color:
        return self.color


class DummyBackground(SolidBackground):
    """Flat pale green."""
    def __init__(self):
        super().__init__(Color(0.6, 0.8, 0.4))


class Sky(Background):
    """
    Vertical gradient: interpolates between a horizon color (looking down)
    and a zenith color (looking up).
    """
    def __init__(self, horizon: Color = Color.WHITE, zenith: Color = Color(0.5, 0.7, 1.0)):
        self.horizon = horizon
        self.zenith = zenith

    def color_of(self, direction: Direction) -> Color:
        t = 0.5 * (direction.y + 1.0)
        return self.horizon * (1.0 - t) + self.zenith * t
