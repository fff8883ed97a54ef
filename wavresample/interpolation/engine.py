# -*- coding: utf-8 -*-
"""
Interpolation Engine - Configuration resolver and evaluation entry point.

An :class:`Interpolator` is built once per resampling session from the
source length, the target length and an options record. Construction
resolves the method and boundary policy, derives the scale factor, the
cubic tangent factor and the windowed-sinc kernel, and is immutable
afterwards. :meth:`Interpolator.evaluate` maps an output index ``t`` to
the source coordinate ``scale_factor * t`` and dispatches to the selected
kernel.

Scale factor:

- ``clamp`` / ``mirror`` — ``(source_length - 1) / target_length``; the
  buffer spans ``source_length - 1`` intervals between fixed endpoints.
- ``periodic`` — ``source_length / target_length``; the buffer is one
  period of a cyclic signal.

Unrecognized ``method`` or ``clip`` names fall back to ``sinc`` and
``clamp`` without raising.

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
from numbers import Integral
from typing import Any, Mapping, Optional, Sequence, Union

# Third-party
import numpy as np

# wavresample internal
from wavresample.exceptions import InvalidConfigurationError
from wavresample.interpolation.boundary import BOUNDARY_MAPPERS
from wavresample.interpolation.kernels import (
    cubic_kernel,
    linear_kernel,
    point_kernel,
    windowed_sinc_kernel,
)
from wavresample.interpolation.windows import (
    LanczosWindow,
    WindowFunction,
    gaussian_window,
    sinc_kernel,
)
from wavresample.vocabulary import BoundaryPolicy, InterpolationMethod

logger = logging.getLogger(__name__)

# Options-record keys accepted by ``from_options``, camelCase spellings
# first so records produced by the file/format layer pass straight through.
_OPTION_KEYS = {
    'method': 'method',
    'clip': 'clip',
    'tension': 'tension',
    'sincFilterSize': 'sinc_filter_size',
    'sinc_filter_size': 'sinc_filter_size',
    'sincWindow': 'sinc_window',
    'sinc_window': 'sinc_window',
    'lanczosFilterSize': 'lanczos_filter_size',
    'lanczos_filter_size': 'lanczos_filter_size',
}


def _check_length(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidConfigurationError(
            f"{name} must be an integer, got {value!r}"
        )
    if value < 1:
        raise InvalidConfigurationError(
            f"{name} must be >= 1, got {value}"
        )
    return int(value)


def _resolve_tension(tension: Any) -> float:
    """Clamp ``tension`` into [0, 1]; unusable values mean 0."""
    try:
        value = float(tension or 0.0)
    except (TypeError, ValueError):
        logger.debug("Unusable tension %r, falling back to 0", tension)
        return 0.0
    if math.isnan(value):
        logger.debug("Unusable tension %r, falling back to 0", tension)
        return 0.0
    return max(0.0, min(1.0, value))


def _resolve_filter_size(size: Any) -> int:
    """Windowed-sinc half-width; anything below 1 or non-numeric means 1."""
    try:
        value = float(size or 1)
    except (TypeError, ValueError):
        logger.debug("Unusable sinc_filter_size %r, falling back to 1", size)
        return 1
    if not value >= 1 or math.isinf(value):
        logger.debug("Unusable sinc_filter_size %r, falling back to 1", size)
        return 1
    return int(value)


def _check_lanczos_size(size: Any) -> int:
    if (isinstance(size, bool)
            or not isinstance(size, (Integral, float))
            or not size >= 1
            or not float(size).is_integer()):
        raise InvalidConfigurationError(
            "lanczos_filter_size must be an integer >= 1 when "
            f"method='lanczos', got {size!r}"
        )
    return int(size)


class Interpolator:
    """Scalar resampler from ``source_length`` to ``target_length`` samples.

    Parameters
    ----------
    source_length : int
        Length of the original buffer. Must be >= 1.
    target_length : int
        Requested output length. Must be >= 1.
    method : str or InterpolationMethod
        ``'point'``, ``'linear'``, ``'cubic'``, ``'sinc'`` or
        ``'lanczos'``. Anything else selects ``'sinc'``. Default is
        ``'sinc'``.
    clip : str or BoundaryPolicy
        ``'clamp'``, ``'periodic'`` or ``'mirror'``. Anything else
        selects ``'clamp'``. Default is ``'clamp'``.
    tension : float
        Cubic tangent damping, clamped into ``[0, 1]``. 0 gives a
        Catmull-Rom spline, 1 flattens every tangent. Non-numeric values
        mean 0. Default is 0.
    sinc_filter_size : int
        Windowed-sinc half-width in source samples. Values below 1
        and non-numeric values mean 1. Ignored by point, linear and
        cubic. Default is 1.
    sinc_window : callable, optional
        Window ``(float) -> float`` multiplied into the sinc. Default is
        :func:`~wavresample.interpolation.windows.gaussian_window`.
        Ignored when ``method='lanczos'``.
    lanczos_filter_size : int, optional
        Lanczos ``a``. Required when ``method='lanczos'``; also replaces
        ``sinc_filter_size`` so the kernel support ends at the window's
        last zero crossing.

    Raises
    ------
    InvalidConfigurationError
        If a length is not a positive integer, or if
        ``method='lanczos'`` without an integral
        ``lanczos_filter_size`` >= 1. Other malformed options fall back
        to their defaults.

    Examples
    --------
    >>> interp = Interpolator(5, 10, method='linear')
    >>> interp.evaluate(2.5, [0, 10, 0, 10, 0])
    10.0
    """

    def __init__(
        self,
        source_length: int,
        target_length: int,
        method: Union[str, InterpolationMethod, None] = 'sinc',
        clip: Union[str, BoundaryPolicy, None] = 'clamp',
        tension: Optional[float] = 0.0,
        sinc_filter_size: Optional[int] = 1,
        sinc_window: Optional[WindowFunction] = None,
        lanczos_filter_size: Optional[int] = None,
    ) -> None:
        self._source_length = _check_length('source_length', source_length)
        self._target_length = _check_length('target_length', target_length)

        self._method = InterpolationMethod.parse(method)
        if self._method.value != method and self._method is not method:
            logger.debug(
                "Unrecognized method %r, falling back to %r",
                method, self._method.value,
            )
        self._boundary = BoundaryPolicy.parse(clip)
        if self._boundary.value != clip and self._boundary is not clip:
            logger.debug(
                "Unrecognized clip %r, falling back to %r",
                clip, self._boundary.value,
            )
        self._clip = BOUNDARY_MAPPERS[self._boundary]

        if self._boundary is BoundaryPolicy.PERIODIC:
            self._scale_factor = self._source_length / self._target_length
        else:
            self._scale_factor = (
                (self._source_length - 1) / self._target_length
            )

        self._tension = _resolve_tension(tension)
        self._tangent_factor = 1.0 - self._tension

        self._sinc_filter_size = _resolve_filter_size(sinc_filter_size)
        self._window = sinc_window or gaussian_window

        if self._method is InterpolationMethod.LANCZOS:
            size = _check_lanczos_size(lanczos_filter_size)
            self._window = LanczosWindow(size)
            self._sinc_filter_size = size
        self._kernel = sinc_kernel(self._window)

        logger.debug("Configured %r", self)

    # ── Resolved configuration ──────────────────────────────────────────

    @property
    def source_length(self) -> int:
        """Length of the original buffer."""
        return self._source_length

    @property
    def target_length(self) -> int:
        """Requested output length."""
        return self._target_length

    @property
    def method(self) -> InterpolationMethod:
        """Resolved interpolation method."""
        return self._method

    @property
    def boundary(self) -> BoundaryPolicy:
        """Resolved boundary policy."""
        return self._boundary

    @property
    def scale_factor(self) -> float:
        """Source-domain step per output index."""
        return self._scale_factor

    @property
    def tension(self) -> float:
        """Clamped cubic tension."""
        return self._tension

    @property
    def tangent_factor(self) -> float:
        """``1 - tension``; multiplies every cubic tangent."""
        return self._tangent_factor

    @property
    def sinc_filter_size(self) -> int:
        """Windowed-sinc half-width in source samples."""
        return self._sinc_filter_size

    @property
    def window(self) -> WindowFunction:
        """Window applied inside the sinc kernel."""
        return self._window

    # ── Evaluation ──────────────────────────────────────────────────────

    def _reconstruct(self, u, samples):
        """Dispatch source coordinate(s) ``u`` to the configured kernel."""
        method = self._method
        if method is InterpolationMethod.POINT:
            return point_kernel(u, samples, self._clip)
        if method is InterpolationMethod.LINEAR:
            return linear_kernel(u, samples, self._clip)
        if method is InterpolationMethod.CUBIC:
            return cubic_kernel(
                u, samples, self._clip, self._tangent_factor,
            )
        # SINC and LANCZOS differ only in window and half-width
        return windowed_sinc_kernel(
            u, samples, self._clip, self._kernel, self._sinc_filter_size,
        )

    def evaluate(self, t: float, samples: Sequence[float]) -> float:
        """Interpolated value at output index ``t``.

        Parameters
        ----------
        t : float
            Output index, meaningful in ``[0, target_length)``. Not
            bounds-checked.
        samples : sequence of float
            Source buffer of length ``source_length``. Not mutated.

        Returns
        -------
        float
            Reconstructed sample.
        """
        return self._reconstruct(self._scale_factor * t, samples)

    __call__ = evaluate

    def interpolate(
        self,
        t: Union[Sequence[float], np.ndarray],
        samples: Union[Sequence[float], np.ndarray],
    ) -> np.ndarray:
        """Evaluate many output indices in one vectorized pass.

        Parameters
        ----------
        t : array_like
            Output indices, shape ``(M,)``.
        samples : array_like
            Source buffer, shape ``(source_length,)``.

        Returns
        -------
        np.ndarray
            Reconstructed samples, shape ``(M,)``, float64 unless
            ``samples`` is complex.
        """
        t = np.asarray(t, dtype=np.float64)
        samples = np.asarray(samples)
        if not np.iscomplexobj(samples):
            samples = samples.astype(np.float64, copy=False)
        if t.size == 0:
            return np.zeros(0, dtype=samples.dtype)
        u = self._scale_factor * t
        if self.uses_window and not _accepts_arrays(self._kernel, u):
            # Scalar-only caller window: evaluate point by point
            return np.array(
                [self._reconstruct(float(ui), samples) for ui in u],
                dtype=samples.dtype,
            )
        return np.asarray(self._reconstruct(u, samples))

    @property
    def uses_window(self) -> bool:
        """Whether the configured method is a windowed sinc."""
        return self._method in (
            InterpolationMethod.SINC, InterpolationMethod.LANCZOS,
        )

    # ── Construction helpers ────────────────────────────────────────────

    @classmethod
    def from_options(
        cls,
        source_length: int,
        target_length: int,
        options: Optional[Mapping[str, Any]] = None,
    ) -> 'Interpolator':
        """Build from an options record.

        Accepts ``method``, ``clip``, ``tension``, ``sincFilterSize``,
        ``sincWindow`` and ``lanczosFilterSize`` (or their snake_case
        spellings). Unknown keys are ignored.
        """
        kwargs = {}
        for key, value in (options or {}).items():
            name = _OPTION_KEYS.get(key)
            if name is None:
                logger.debug("Ignoring unknown option %r", key)
                continue
            kwargs[name] = value
        return cls(source_length, target_length, **kwargs)

    def __repr__(self) -> str:
        parts = [
            f"source_length={self._source_length}",
            f"target_length={self._target_length}",
            f"method={self._method.value!r}",
            f"clip={self._boundary.value!r}",
        ]
        if self._method is InterpolationMethod.CUBIC:
            parts.append(f"tension={self._tension}")
        if self.uses_window:
            parts.append(f"sinc_filter_size={self._sinc_filter_size}")
            parts.append(f"kernel={self._kernel!r}")
        return f"Interpolator({', '.join(parts)})"


def _accepts_arrays(kernel, u: np.ndarray) -> bool:
    """Probe whether ``kernel`` evaluates element-wise on an array."""
    probe = u[:2]
    try:
        out = np.asarray(kernel(probe))
    except (TypeError, ValueError):
        return False
    return out.shape == probe.shape


def interpolator(
    source_length: int,
    target_length: int,
    method: Union[str, InterpolationMethod, None] = 'sinc',
    clip: Union[str, BoundaryPolicy, None] = 'clamp',
    tension: Optional[float] = 0.0,
    sinc_filter_size: Optional[int] = 1,
    sinc_window: Optional[WindowFunction] = None,
    lanczos_filter_size: Optional[int] = None,
) -> Interpolator:
    """Create an interpolator.

    Convenience factory function. See :class:`Interpolator` for full
    documentation.
    """
    return Interpolator(
        source_length,
        target_length,
        method=method,
        clip=clip,
        tension=tension,
        sinc_filter_size=sinc_filter_size,
        sinc_window=sinc_window,
        lanczos_filter_size=lanczos_filter_size,
    )
