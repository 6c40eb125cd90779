
from typing import Optional

import numpy as np

from ssection.core.defaults import PARALLEL_TOL
from ssection.core.errors import DegenerateVector
from ssection.core.preprocessing.vector import (
    Point3, Vector3, cross, normalize, subtract, vector_from_point
)


def local_axes(
    start: Point3, end: Point3, web: Optional[Vector3] = None
) -> np.ndarray:
    r"""Create the 3x3 rotation matrix of a member's local axes.

    Parameters
    ----------
    start, end : :any:`Point3`
        Start and end point of the member. The local :math:`x'`-axis points
        from ``start`` to ``end``.
    web : :any:`Vector3`, optional
        Direction that fixes the rotation of the cross-section about
        :math:`x'`. The local :math:`y'`-axis lies in the plane spanned by
        :math:`x'` and ``web``, on the side of ``web``. Defaults to the
        global z-axis, or to the global y-axis for members parallel to the
        global z-axis.

    Returns
    -------
    :any:`numpy.array`
        A 3x3 matrix whose rows are the unit vectors :math:`x'`,
        :math:`y'` and :math:`z'` in global coordinates. Multiplying a
        global 3x1 vector with it yields its local components.

    Raises
    ------
    DegenerateVector
        If ``start`` and ``end`` coincide, or if ``web`` is parallel to the
        member.

    Notes
    -----
    The axes are built from cross products so that they form a
    right-handed orthonormal triad:

    .. math::
        z' = \frac{x' \times w}{\| x' \times w \|}, \quad
        y' = z' \times x'

    Examples
    --------
    >>> from ssection.core.preprocessing.vector import Point3
    >>> local_axes(Point3(0, 0, 0), Point3(2, 0, 0))
    array([[ 1.,  0.,  0.],
           [ 0.,  0.,  1.],
           [ 0., -1.,  0.]])
    """
    axis = subtract(vector_from_point(end), vector_from_point(start))
    try:
        x_ = normalize(axis)
    except DegenerateVector:
        raise DegenerateVector(
            "Start and end point of a member must not coincide."
        ) from None

    if web is None:
        web = Vector3.k()
        if cross(x_, web).length <= PARALLEL_TOL:
            web = Vector3.j()

    normal = cross(x_, normalize(web))
    if normal.length <= PARALLEL_TOL:
        raise DegenerateVector(
            f"The web direction ({web}) is parallel to the member axis."
        )
    z_ = normalize(normal)
    y_ = cross(z_, x_)

    return np.array([x_.as_array(), y_.as_array(), z_.as_array()])
