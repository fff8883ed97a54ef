# -*- coding: utf-8 -*-
"""
wavresample - Interpolation engine of the wavefile audio toolkit.

Resamples one fully materialized buffer of samples to a new length by
evaluating point, linear, cubic Hermite, windowed-sinc or Lanczos
reconstructions under clamp, periodic or mirror boundary policies. File
parsing, container handling and channel de-interleaving live in the
surrounding toolkit.

Dependencies
------------
numpy
scipy

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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from wavresample.exceptions import (
    WavResampleError,
    InvalidConfigurationError,
)
from wavresample.vocabulary import (
    InterpolationMethod,
    BoundaryPolicy,
)
from wavresample.interpolation import (
    Interpolator,
    interpolator,
    resample,
)

__all__ = [
    'WavResampleError',
    'InvalidConfigurationError',
    'InterpolationMethod',
    'BoundaryPolicy',
    'Interpolator',
    'interpolator',
    'resample',
]
