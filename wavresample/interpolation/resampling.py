# -*- coding: utf-8 -*-
"""
Bulk Resampling - Full resampling pass over one materialized buffer.

Produces every output sample ``evaluate(i)`` for ``i`` in
``range(target_length)`` in a single call. Output samples are independent,
so the pass is vectorized with numpy; for windowed-sinc kernels with a
built-in window (Gaussian or Lanczos) the summation loop runs in parallel
across output samples when numba is available.

An optional anti-aliasing stage applies a linear-phase FIR low-pass
(``scipy.signal.firwin``) at ``min(source, target) / max(source, target)``
of Nyquist: to the input before downsampling, to the output after
upsampling.

Dependencies
------------
scipy (for anti-aliasing)
numba (optional, for parallel acceleration)

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
import logging
import math
from typing import Optional, Sequence, Union

# Third-party
import numpy as np

# wavresample internal
from wavresample.exceptions import InvalidConfigurationError
from wavresample.interpolation.engine import Interpolator
from wavresample.interpolation.windows import (
    LanczosWindow,
    WindowFunction,
    gaussian_window,
)
from wavresample.vocabulary import BoundaryPolicy, InterpolationMethod

# Optional numba acceleration
try:
    import numba as nb
    _HAS_NUMBA = True
except ImportError:
    _HAS_NUMBA = False

logger = logging.getLogger(__name__)

# Codes handed to the compiled loop
_POLICY_CODES = {
    BoundaryPolicy.CLAMP: 0,
    BoundaryPolicy.PERIODIC: 1,
    BoundaryPolicy.MIRROR: 2,
}
_WINDOW_GAUSSIAN = 0
_WINDOW_LANCZOS = 1


# ── Numba-accelerated kernel ────────────────────────────────────────────

if _HAS_NUMBA:

    @nb.njit(inline='always')
    def _sinc(x):
        """Normalized sinc, exactly 1 at 0."""
        if x == 0.0:
            return 1.0
        px = math.pi * x
        return math.sin(px) / px

    @nb.njit(inline='always')
    def _map_index(t, n, policy):
        """Boundary mapper (0 clamp, 1 periodic, 2 mirror)."""
        if 0 <= t < n:
            return t
        if policy == 1:
            return t % n
        if policy == 2:
            if n == 1:
                return 0
            last = n - 1
            t = t % (2 * last)
            return last - abs(last - t)
        if t < 0:
            return 0
        return n - 1

    @nb.njit(parallel=True, cache=True)
    def _windowed_sinc_parallel(samples, scale_factor, target_length,
                                filter_size, window_code, lanczos_size,
                                policy):
        """Parallel windowed-sinc resampling.

        Parameters
        ----------
        samples : ndarray, shape (N,), float64
        scale_factor : float
        target_length : int
        filter_size : int
        window_code : int
            0 Gaussian, 1 Lanczos.
        lanczos_size : int
        policy : int
            0 clamp, 1 periodic, 2 mirror.

        Returns
        -------
        ndarray, shape (target_length,)
        """
        n = samples.shape[0]
        result = np.empty(target_length, dtype=np.float64)

        for i in nb.prange(target_length):
            u = scale_factor * i
            k = int(math.floor(u))
            acc = 0.0
            for j in range(k - filter_size + 1, k + filter_size + 1):
                x = u - j
                if window_code == 1:
                    w = _sinc(x) * _sinc(x / lanczos_size)
                else:
                    w = _sinc(x) * math.exp(-x * x)
                acc += w * samples[_map_index(j, n, policy)]
            result[i] = acc

        return result


# ── Anti-aliasing ───────────────────────────────────────────────────────


def _lowpass(x: np.ndarray, cutoff: float, numtaps: int) -> np.ndarray:
    """Zero-delay FIR low-pass; ``cutoff`` is a fraction of Nyquist."""
    from scipy.signal import convolve, firwin

    taps = firwin(numtaps, cutoff)
    return convolve(x, taps, mode='same')


def _compiled_window(interp: Interpolator) -> Optional[int]:
    """Window code for the compiled loop, or None if not compilable."""
    if not interp.uses_window:
        return None
    if isinstance(interp.window, LanczosWindow):
        return _WINDOW_LANCZOS
    if interp.window is gaussian_window:
        return _WINDOW_GAUSSIAN
    return None


def _run(interp: Interpolator, samples: np.ndarray) -> np.ndarray:
    """Evaluate every output index of ``interp`` over ``samples``."""
    window_code = _compiled_window(interp)
    if _HAS_NUMBA and window_code is not None and samples.dtype == np.float64:
        logger.debug("Resampling with numba parallel windowed sinc")
        lanczos_size = (
            interp.window.size if window_code == _WINDOW_LANCZOS else 1
        )
        return _windowed_sinc_parallel(
            np.ascontiguousarray(samples),
            interp.scale_factor,
            interp.target_length,
            interp.sinc_filter_size,
            window_code,
            lanczos_size,
            _POLICY_CODES[interp.boundary],
        )
    return interp.interpolate(
        np.arange(interp.target_length, dtype=np.float64), samples,
    )


def resample(
    samples: Union[Sequence[float], np.ndarray],
    target_length: int,
    method: Union[str, InterpolationMethod, None] = 'sinc',
    clip: Union[str, BoundaryPolicy, None] = 'clamp',
    tension: Optional[float] = 0.0,
    sinc_filter_size: Optional[int] = 1,
    sinc_window: Optional[WindowFunction] = None,
    lanczos_filter_size: Optional[int] = None,
    antialias: bool = False,
    antialias_taps: int = 71,
) -> np.ndarray:
    """Resample ``samples`` to ``target_length`` points.

    Output ``i`` equals ``Interpolator(len(samples), target_length,
    ...).evaluate(i, samples)`` (up to floating-point rounding) when
    ``antialias`` is off. Equal lengths are not short-circuited.

    Parameters
    ----------
    samples : array_like
        Source buffer, shape ``(N,)``, ``N >= 1``. Not mutated.
    target_length : int
        Output length. Must be >= 1.
    method, clip, tension, sinc_filter_size, sinc_window, lanczos_filter_size
        See :class:`~wavresample.interpolation.Interpolator`.
    antialias : bool
        Apply an FIR low-pass at the lower of the two Nyquist limits.
        Default is False.
    antialias_taps : int
        Low-pass length. Must be >= 3. Default is 71.

    Returns
    -------
    np.ndarray
        Resampled buffer, shape ``(target_length,)``.

    Raises
    ------
    InvalidConfigurationError
        For an empty or non-1D buffer, a non-positive ``target_length``,
        ``antialias_taps < 3``, or any constructor precondition of
        :class:`~wavresample.interpolation.Interpolator`.

    Examples
    --------
    >>> y = resample([0, 10, 0, 10, 0], 10, method='linear')
    >>> y.shape
    (10,)
    """
    samples = np.asarray(samples)
    if samples.ndim != 1:
        raise InvalidConfigurationError(
            f"samples must be 1D, got shape {samples.shape}"
        )
    if samples.size == 0:
        raise InvalidConfigurationError("samples must not be empty")
    if not np.iscomplexobj(samples):
        samples = samples.astype(np.float64, copy=False)

    interp = Interpolator(
        samples.size,
        target_length,
        method=method,
        clip=clip,
        tension=tension,
        sinc_filter_size=sinc_filter_size,
        sinc_window=sinc_window,
        lanczos_filter_size=lanczos_filter_size,
    )

    if antialias and antialias_taps < 3:
        raise InvalidConfigurationError(
            f"antialias_taps must be >= 3, got {antialias_taps}"
        )
    if not antialias or interp.source_length == interp.target_length:
        return _run(interp, samples)

    source_length = interp.source_length
    target_length = interp.target_length
    if target_length < source_length:
        cutoff = target_length / source_length
        logger.debug("Low-pass at %.4f Nyquist before downsampling", cutoff)
        return _run(interp, _lowpass(samples, cutoff, antialias_taps))
    cutoff = source_length / target_length
    logger.debug("Low-pass at %.4f Nyquist after upsampling", cutoff)
    return _lowpass(_run(interp, samples), cutoff, antialias_taps)
