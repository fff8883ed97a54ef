# -*- coding: utf-8 -*-
"""
Boundary Mapping - Out-of-range index policies for sample fetches.

Every kernel reads samples through :func:`fetch`, which maps indices that
fall outside ``[0, n)`` back into the buffer with one of three policies:

- ``clamp`` — saturate to the nearest edge sample.
- ``periodic`` — treat the buffer as one period of a cyclic signal.
- ``mirror`` — reflect about both edges with period ``2 * (n - 1)``;
  edge samples are not repeated across the reflection.

The mappers are total functions from the integers onto ``[0, n)`` for any
``n >= 1`` and accept either a Python ``int`` or an integer
``np.ndarray`` (element-wise). They are the identity on ``[0, n)``.

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
from typing import Callable, Dict, Sequence, Union

# Third-party
import numpy as np

# wavresample internal
from wavresample.vocabulary import BoundaryPolicy

Index = Union[int, np.ndarray]
BoundaryMapper = Callable[[Index, int], Index]


def clip_clamp(t: Index, n: int) -> Index:
    """Saturate ``t`` to ``[0, n - 1]``.

    Parameters
    ----------
    t : int or np.ndarray
        Integer sample index (or indices), possibly out of range.
    n : int
        Buffer length, ``>= 1``.

    Returns
    -------
    int or np.ndarray
        Index inside ``[0, n)``.
    """
    if isinstance(t, np.ndarray):
        return np.clip(t, 0, n - 1)
    return max(0, min(t, n - 1))


def clip_periodic(t: Index, n: int) -> Index:
    """Wrap ``t`` into ``[0, n)``, treating the buffer as cyclic.

    Python's ``%`` already floors toward negative infinity, so the
    result is non-negative for both ints and integer arrays.
    """
    return t % n


def clip_mirror(t: Index, n: int) -> Index:
    """Reflect ``t`` about both edges of the buffer.

    ``t`` is first wrapped modulo ``2 * (n - 1)``; values past the last
    sample are then folded back as ``2 * (n - 1) - t``. A single-sample
    buffer has no reflection period, so every index maps to 0.
    """
    if n == 1:
        return t * 0
    last = n - 1
    t = clip_periodic(t, 2 * last)
    # last - |last - t| is t on [0, last] and 2 * last - t beyond it
    return last - abs(last - t)


BOUNDARY_MAPPERS: Dict[BoundaryPolicy, BoundaryMapper] = {
    BoundaryPolicy.CLAMP: clip_clamp,
    BoundaryPolicy.PERIODIC: clip_periodic,
    BoundaryPolicy.MIRROR: clip_mirror,
}


def fetch(
    samples: Sequence[float],
    t: Index,
    clip: BoundaryMapper,
):
    """Read ``samples[t]``, routing out-of-range indices through ``clip``.

    Parameters
    ----------
    samples : sequence of float or np.ndarray
        Source buffer. Must be an ``np.ndarray`` when ``t`` is an array.
    t : int or np.ndarray
        Integer sample index (or indices).
    clip : callable
        Boundary mapper ``(t, n) -> index``.

    Returns
    -------
    float or np.ndarray
        The fetched sample value(s).
    """
    n = len(samples)
    if isinstance(t, np.ndarray):
        return samples[clip(t, n)]
    if 0 <= t < n:
        return samples[t]
    return samples[clip(t, n)]
