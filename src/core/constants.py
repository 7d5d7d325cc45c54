# core/constants.py
"""
Numeric tolerances and default settings for the ray tracer.
"""

# Distance under which a point counts as lying on a box face.
SURFACE_EPSILON = 1e-6

# Bias applied to the origin of secondary rays, and the lower bound of
# every scene intersection query.
RAY_OFFSET = 1e-3

# Whitted-style recursion bound.
RECURSION_DEPTH = 5

# Bounce bound for the Monte Carlo strategy.
MONTE_CARLO_DEPTH = 10

# Jittered samples per pixel when antialiasing is enabled.
SAMPLES_PER_PIXEL = 10

# Rays travelling further than this are treated as misses.
VIEW_RANGE = 1000.0

DEFAULT_FOV = 90.0  # degrees
DEFAULT_FILM_DISTANCE = 1.0
