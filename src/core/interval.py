# core/interval.py
import math


class Interval:
    """
    Half-open range [start, end) of ray parameters.
    """
    def __init__(self, start: float, end: float):
        self.start = start
        self.end = end

    def contains(self, t: float) -> bool:
        return self.start <= t < self.end

    def surrounds(self, t: float) -> bool:
        return self.start < t < self.end

    def __repr__(self) -> str:
        return f"Interval({self.start}, {self.end})"


Interval.FULL = Interval(-math.inf, math.inf)
Interval.POSITIVE = Interval(0.0, math.inf)
