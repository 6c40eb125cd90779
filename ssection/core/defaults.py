
DISPLAY_EPS = 1e-9
"""Components of a :any:`Vector3` that are non-zero but smaller than this
value in magnitude are printed as ``~0``. Only used for formatting."""

AREA_RTOL = 1e-12
"""Relative tolerance for zero-area contours. A contour is degenerate if
the absolute value of its signed area is not larger than
``AREA_RTOL * width * height``."""

PARALLEL_TOL = 1e-12
"""Two unit directions are treated as parallel if the length of their
cross product does not exceed this value."""

TABLE_DECIMALS = 6
"""Number of decimals in the tables written to the debug log."""
