# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for the resampling engine.

Single source of truth for the interpolation methods and boundary policies
accepted by :class:`~wavresample.interpolation.Interpolator`. Both enums
parse loosely: an unrecognized name resolves to the documented default
instead of raising, so callers that pass through user-supplied option
records never fail on a typo.

Author
------
Steven Siebert

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

from enum import Enum
from typing import Any


class InterpolationMethod(Enum):
    """Reconstruction kernel used to evaluate fractional source indices.

    ``LANCZOS`` shares the windowed-sinc kernel with ``SINC``; only the
    window and the kernel half-width differ.
    """

    POINT = "point"
    LINEAR = "linear"
    CUBIC = "cubic"
    SINC = "sinc"
    LANCZOS = "lanczos"

    @classmethod
    def parse(cls, value: Any) -> 'InterpolationMethod':
        """Resolve ``value`` to a member, defaulting to ``SINC``.

        Matching is exact and case-sensitive on the member value.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.SINC


class BoundaryPolicy(Enum):
    """Rule for mapping out-of-range sample indices back into the buffer."""

    CLAMP = "clamp"
    PERIODIC = "periodic"
    MIRROR = "mirror"

    @classmethod
    def parse(cls, value: Any) -> 'BoundaryPolicy':
        """Resolve ``value`` to a member, defaulting to ``CLAMP``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.CLAMP
