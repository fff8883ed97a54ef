# -*- coding: utf-8 -*-
"""
Interpolation - Scalar resampling of one-dimensional sample buffers.

Evaluates a continuous reconstruction of a buffer of ``source_length``
samples at ``target_length`` evenly spaced output indices. Kernels and
boundary policies are chosen once at construction and combined freely.

Kernels:

- ``point`` — nearest neighbour.
- ``linear`` — two-sample linear blend.
- ``cubic`` — cubic Hermite with finite-difference tangents and tension.
- ``sinc`` — windowed sinc, Gaussian window by default.
- ``lanczos`` — windowed sinc with a Lanczos window.

Boundary policies (``clip``):

- ``clamp`` — saturate at the edge samples (default).
- ``periodic`` — wrap, treating the buffer as one period.
- ``mirror`` — reflect about both edges.

Entry points:

- ``Interpolator`` / ``interpolator`` — configuration plus single-index
  ``evaluate`` and vectorized ``interpolate``.
- ``resample`` — full resampling pass with optional anti-aliasing.

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

from wavresample.interpolation.boundary import (
    BOUNDARY_MAPPERS,
    clip_clamp,
    clip_mirror,
    clip_periodic,
    fetch,
)
from wavresample.interpolation.windows import (
    LanczosWindow,
    SincKernel,
    gaussian_window,
    lanczos_window,
    sinc,
    sinc_kernel,
)
from wavresample.interpolation.kernels import (
    cubic_kernel,
    linear_kernel,
    point_kernel,
    windowed_sinc_kernel,
)
from wavresample.interpolation.engine import Interpolator, interpolator
from wavresample.interpolation.resampling import resample

__all__ = [
    'BOUNDARY_MAPPERS',
    'clip_clamp',
    'clip_periodic',
    'clip_mirror',
    'fetch',
    'sinc',
    'gaussian_window',
    'lanczos_window',
    'LanczosWindow',
    'sinc_kernel',
    'SincKernel',
    'point_kernel',
    'linear_kernel',
    'cubic_kernel',
    'windowed_sinc_kernel',
    'Interpolator',
    'interpolator',
    'resample',
]
