# -*- coding: utf-8 -*-
"""
Reconstruction Kernels - Point, linear, cubic Hermite and windowed sinc.

Each kernel evaluates the continuous reconstruction of ``samples`` at the
source-domain coordinate ``u`` (already multiplied by the resampler's scale
factor). ``u`` may be a scalar or an ``np.ndarray`` of coordinates; in the
array case ``samples`` must be an ``np.ndarray`` too. All sample reads go
through :func:`~wavresample.interpolation.boundary.fetch`, so the kernels
never index the buffer unchecked.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-17
"""

# Standard library
import math
from typing import Sequence

# Third-party
import numpy as np

# wavresample internal
from wavresample.interpolation.boundary import BoundaryMapper, Index, fetch
from wavresample.interpolation.windows import Real, WindowFunction


def _floor_index(u: Real) -> Index:
    """Integer part of ``u`` rounded toward negative infinity."""
    if isinstance(u, np.ndarray):
        return np.floor(u).astype(np.int64)
    return math.floor(u)


def point_kernel(
    u: Real,
    samples: Sequence[float],
    clip: BoundaryMapper,
) -> Real:
    """Nearest-neighbour (zero-order hold).

    Ties round up (``floor(u + 0.5)``), not to even.
    """
    return fetch(samples, _floor_index(u + 0.5), clip)


def linear_kernel(
    u: Real,
    samples: Sequence[float],
    clip: BoundaryMapper,
) -> Real:
    """Linear blend of the two samples bracketing ``u``."""
    k = _floor_index(u)
    f = u - k
    return (1 - f) * fetch(samples, k, clip) + f * fetch(samples, k + 1, clip)


def _tangent(
    j: Index,
    samples: Sequence[float],
    clip: BoundaryMapper,
    tangent_factor: float,
) -> Real:
    """Centered-difference slope at sample ``j``, damped by tension."""
    return tangent_factor * (
        fetch(samples, j + 1, clip) - fetch(samples, j - 1, clip)
    ) / 2


def cubic_kernel(
    u: Real,
    samples: Sequence[float],
    clip: BoundaryMapper,
    tangent_factor: float = 1.0,
) -> Real:
    """Cubic Hermite spline with finite-difference tangents.

    With ``tangent_factor == 1`` this is a Catmull-Rom spline; with
    ``tangent_factor == 0`` all tangents vanish and the curve reduces to
    a smoothstep blend of the two bracketing samples.

    Parameters
    ----------
    u : float or np.ndarray
        Source-domain coordinate(s).
    samples : sequence of float or np.ndarray
        Source buffer.
    clip : callable
        Boundary mapper.
    tangent_factor : float
        ``1 - tension``, in ``[0, 1]``.

    Returns
    -------
    float or np.ndarray
        Interpolated value(s).
    """
    k = _floor_index(u)
    p0 = fetch(samples, k, clip)
    p1 = fetch(samples, k + 1, clip)
    m0 = _tangent(k, samples, clip, tangent_factor)
    m1 = _tangent(k + 1, samples, clip, tangent_factor)

    f = u - k
    f2 = f * f
    f3 = f * f2
    return ((2 * f3 - 3 * f2 + 1) * p0
            + (f3 - 2 * f2 + f) * m0
            + (-2 * f3 + 3 * f2) * p1
            + (f3 - f2) * m1)


def windowed_sinc_kernel(
    u: Real,
    samples: Sequence[float],
    clip: BoundaryMapper,
    kernel: WindowFunction,
    filter_size: int = 1,
) -> Real:
    """Windowed-sinc sum over ``2 * filter_size`` neighbouring samples.

    Sums ``kernel(u - n) * fetch(n)`` for every integer ``n`` in
    ``[floor(u) - filter_size + 1, floor(u) + filter_size]``. The weights
    are not renormalized.

    Parameters
    ----------
    u : float or np.ndarray
        Source-domain coordinate(s).
    samples : sequence of float or np.ndarray
        Source buffer.
    clip : callable
        Boundary mapper.
    kernel : callable
        Windowed sinc ``x -> sinc(x) * window(x)``. Must accept arrays
        when ``u`` is an array.
    filter_size : int
        Kernel half-width in source samples.

    Returns
    -------
    float or np.ndarray
        Interpolated value(s).
    """
    k = _floor_index(u)
    total = 0.0
    for offset in range(1 - filter_size, filter_size + 1):
        n = k + offset
        total = total + kernel(u - n) * fetch(samples, n, clip)
    return total
