# -*- coding: utf-8 -*-
"""
wavresample Exception Hierarchy - Domain-specific exceptions for resampling.

Lets the file/format layer that drives the engine catch resampling errors
distinctly from Python built-in exceptions. Every exception subclasses both
``WavResampleError`` and the appropriate built-in exception so existing
``except ValueError`` handlers keep working.

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


class WavResampleError(Exception):
    """Base exception for all wavresample errors."""


class InvalidConfigurationError(WavResampleError, ValueError):
    """Resampler configuration violates a construction precondition.

    Raised for non-positive source or target lengths, a Lanczos method
    without a usable ``lanczos_filter_size``, and negative filter sizes.
    Unrecognized ``method`` or ``clip`` names are *not* errors; they fall
    back to ``sinc`` and ``clamp``.
    """
