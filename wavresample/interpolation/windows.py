# -*- coding: utf-8 -*-
"""
Sinc Windows - Unnormalized-argument sinc and its taper functions.

The windowed-sinc kernel is ``sinc(x) * window(x)``. Two windows ship with
the engine:

- ``gaussian_window`` — ``exp(-x**2)``, the default.
- ``lanczos_window(a)`` — ``sinc(x / a)``; combined with the outer sinc
  this is the standard Lanczos-``a`` kernel.

Any ``(float) -> float`` callable may be used as a window. Callables that
also accept ``np.ndarray`` arguments enable the vectorized bulk paths.

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
from typing import Callable, Union

# Third-party
import numpy as np

# wavresample internal
from wavresample.exceptions import InvalidConfigurationError

Real = Union[float, np.ndarray]
WindowFunction = Callable[[Real], Real]


def sinc(x: Real) -> Real:
    """Normalized sinc: ``sin(pi*x) / (pi*x)``, exactly 1 at ``x == 0``."""
    if isinstance(x, np.ndarray):
        return np.sinc(x)
    if x == 0:
        return 1.0
    px = math.pi * x
    return math.sin(px) / px


def gaussian_window(x: Real) -> Real:
    """Gaussian taper ``exp(-x**2)``."""
    if isinstance(x, np.ndarray):
        return np.exp(-x * x)
    return math.exp(-x * x)


class LanczosWindow:
    """Lanczos taper ``sinc(x / size)``.

    A class rather than a closure so the bulk resampler can recognize it
    and hand ``size`` to the compiled loop.

    Parameters
    ----------
    size : int
        Lanczos ``a``: number of lobes, equal to the kernel half-width in
        source samples. Must be >= 1.
    """

    def __init__(self, size: int) -> None:
        if size is None or size < 1:
            raise InvalidConfigurationError(
                f"lanczos window size must be >= 1, got {size}"
            )
        self.size = size

    def __call__(self, x: Real) -> Real:
        return sinc(x / self.size)

    def __repr__(self) -> str:
        return f"LanczosWindow(size={self.size})"


def lanczos_window(size: int) -> LanczosWindow:
    """Create a Lanczos window with ``size`` lobes.

    Raises
    ------
    InvalidConfigurationError
        If ``size`` is unset or < 1.
    """
    return LanczosWindow(size)


class SincKernel:
    """Windowed sinc ``x -> sinc(x) * window(x)``.

    Parameters
    ----------
    window : callable
        Taper ``(float) -> float``.
    """

    def __init__(self, window: WindowFunction) -> None:
        self.window = window

    def __call__(self, x: Real) -> Real:
        return sinc(x) * self.window(x)

    def __repr__(self) -> str:
        name = getattr(self.window, '__name__', None) or repr(self.window)
        return f"SincKernel(window={name})"


def sinc_kernel(window: WindowFunction = gaussian_window) -> SincKernel:
    """Compose :func:`sinc` with ``window``."""
    return SincKernel(window)
