# -*- coding: utf-8 -*-
"""
Kernel Factory - 3x3 convolution kernels derived from a filter intensity.

Provides the immutable ``Kernel`` value type and factory functions that
turn a named filter and an intensity in ``[1, 100]`` into weights. The
intensity maps to ``strength = intensity / 50``: 50 is unit strength and
100 doubles it.

- ``sharpen_kernel``: 4-connected unsharp mask
  ``[0, -s, 0, -s, 1 + 4s, -s, 0, -s, 0]``
- ``blur_kernel``: identity blended toward the 3x3 binomial kernel up to
  unit strength, then binomial blended toward the 3x3 box kernel. Weights
  are non-negative and always sum to 1.
- ``edge_detect_kernel``: 8-connected Laplacian scaled by strength. Weights
  sum to 0.

Convolution applies the weights as given; no normalization happens there.

Dependencies
------------
numpy

License
-------
MIT License
Copyright (c) 2026 rasterfx contributors
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
import logging
import numbers
from typing import Any, Iterable, Tuple, Union

# Third-party
import numpy as np

# rasterfx internal
from rasterfx.exceptions import InvalidParameterError
from rasterfx.vocabulary import FilterKind

logger = logging.getLogger(__name__)

#: Inclusive range of filter intensities.
INTENSITY_RANGE = (1, 100)

#: Intensity that yields unit strength.
DEFAULT_INTENSITY = 50

KERNEL_SIZE = 3

_IDENTITY = np.array([0, 0, 0, 0, 1, 0, 0, 0, 0], dtype=np.float64)
_BINOMIAL = np.array([1, 2, 1, 2, 4, 2, 1, 2, 1], dtype=np.float64) / 16.0
_BOX = np.full(9, 1.0 / 9.0)
_LAPLACIAN_8 = np.array([-1, -1, -1, -1, 8, -1, -1, -1, -1], dtype=np.float64)


class Kernel:
    """Immutable 3x3 convolution kernel.

    Weights are stored row-major: the weight applied to the neighbour at
    offset ``(kx, ky)`` with ``kx, ky`` in ``{-1, 0, 1}`` is at index
    ``(ky + 1) * 3 + (kx + 1)``.

    Parameters
    ----------
    weights : iterable of float, or array of shape (3, 3)
        Nine finite real weights.

    Raises
    ------
    InvalidParameterError
        If there are not exactly nine weights or any weight is non-finite.

    Examples
    --------
    >>> k = Kernel([0, -1, 0, -1, 5, -1, 0, -1, 0])
    >>> k.weight(0, 0)
    5.0
    >>> k.total
    1.0
    """

    __slots__ = ('_weights',)

    def __init__(self, weights: Union[Iterable[float], np.ndarray]) -> None:
        if weights is None:
            raise InvalidParameterError("Kernel weights must not be None")
        try:
            array = np.array(weights, dtype=np.float64).reshape(-1)
        except (TypeError, ValueError) as exc:
            raise InvalidParameterError(
                f"Kernel weights must be real numbers: {exc}"
            ) from exc
        if array.size != KERNEL_SIZE * KERNEL_SIZE:
            raise InvalidParameterError(
                f"Kernel needs {KERNEL_SIZE * KERNEL_SIZE} weights, got {array.size}"
            )
        if not np.all(np.isfinite(array)):
            raise InvalidParameterError("Kernel weights must be finite")
        array.setflags(write=False)
        self._weights = array

    @classmethod
    def identity(cls) -> 'Kernel':
        return cls(_IDENTITY)

    @property
    def weights(self) -> Tuple[float, ...]:
        """The nine weights, row-major."""
        return tuple(float(w) for w in self._weights)

    @property
    def total(self) -> float:
        """Sum of the weights."""
        return float(self._weights.sum())

    def weight(self, kx: int, ky: int) -> float:
        """Weight for the neighbour at column offset *kx*, row offset *ky*."""
        if kx not in (-1, 0, 1) or ky not in (-1, 0, 1):
            raise IndexError(f"Kernel offset ({kx}, {ky}) outside [-1, 1]")
        return float(self._weights[(ky + 1) * KERNEL_SIZE + (kx + 1)])

    def as_matrix(self) -> np.ndarray:
        """Read-only ``(3, 3)`` float64 view, rows indexed by ``ky + 1``."""
        return self._weights.reshape(KERNEL_SIZE, KERNEL_SIZE)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Kernel):
            return NotImplemented
        return np.array_equal(self._weights, other._weights)

    def __hash__(self) -> int:
        return hash(self.weights)

    def __repr__(self) -> str:
        return f"Kernel({list(self.weights)!r})"


def validate_intensity(intensity: Any, name: str = 'intensity') -> int:
    """Check that *intensity* is an integer in ``[1, 100]``.

    Raises
    ------
    InvalidParameterError
        If *intensity* is not an integer or is out of range.
    """
    if isinstance(intensity, bool) or not isinstance(intensity, numbers.Integral):
        raise InvalidParameterError(
            f"{name} must be an integer, got {type(intensity).__name__}"
        )
    lo, hi = INTENSITY_RANGE
    if not (lo <= intensity <= hi):
        raise InvalidParameterError(f"{name} {intensity!r} outside [{lo}, {hi}]")
    return int(intensity)


def strength_for(intensity: int) -> float:
    """Map an intensity in ``[1, 100]`` to ``intensity / 50``."""
    return validate_intensity(intensity) / DEFAULT_INTENSITY


def sharpen_kernel(intensity: int = DEFAULT_INTENSITY) -> Kernel:
    """4-connected sharpening kernel.

    ``center = 1 + 4 * strength`` and the four edge-adjacent weights are
    ``-strength``; diagonals stay 0. At intensity 50 this is
    ``[0, -1, 0, -1, 5, -1, 0, -1, 0]``.
    """
    strength = strength_for(intensity)
    center = 1 + 4 * strength
    edge = -strength
    logger.debug("Sharpen kernel: intensity=%d center=%.4f edge=%.4f",
                 intensity, center, edge)
    return Kernel([
        0, edge, 0,
        edge, center, edge,
        0, edge, 0,
    ])


def blur_kernel(intensity: int = DEFAULT_INTENSITY) -> Kernel:
    """Brightness-preserving smoothing kernel.

    For ``strength <= 1`` the kernel is
    ``(1 - strength) * identity + strength * binomial``; above that it is
    ``(2 - strength) * binomial + (strength - 1) * box``. At intensity 50
    this is the binomial kernel ``[1, 2, 1, 2, 4, 2, 1, 2, 1] / 16`` and at
    100 the box kernel.
    """
    strength = strength_for(intensity)
    if strength <= 1.0:
        weights = (1.0 - strength) * _IDENTITY + strength * _BINOMIAL
    else:
        t = strength - 1.0
        weights = (1.0 - t) * _BINOMIAL + t * _BOX
    logger.debug("Blur kernel: intensity=%d strength=%.4f", intensity, strength)
    return Kernel(weights)


def edge_detect_kernel(intensity: int = DEFAULT_INTENSITY) -> Kernel:
    """8-connected Laplacian edge kernel scaled by strength.

    At intensity 50 this is ``[-1, -1, -1, -1, 8, -1, -1, -1, -1]``. Flat
    regions map to 0.
    """
    strength = strength_for(intensity)
    logger.debug("Edge kernel: intensity=%d strength=%.4f", intensity, strength)
    return Kernel(strength * _LAPLACIAN_8)


_FACTORIES = {
    FilterKind.SHARPEN: sharpen_kernel,
    FilterKind.BLUR: blur_kernel,
    FilterKind.EDGE_DETECT: edge_detect_kernel,
}


def kernel_for(kind: Union[FilterKind, str], intensity: int = DEFAULT_INTENSITY) -> Kernel:
    """Derive the kernel for a convolution filter *kind*.

    Parameters
    ----------
    kind : FilterKind or str
        ``SHARPEN``, ``BLUR``, or ``EDGE_DETECT`` (or their values).
    intensity : int
        Filter intensity in ``[1, 100]``.

    Raises
    ------
    InvalidParameterError
        If *kind* is not a convolution filter.
    """
    if isinstance(kind, str):
        try:
            kind = FilterKind(kind)
        except ValueError:
            raise InvalidParameterError(f"Unknown filter kind {kind!r}") from None
    factory = _FACTORIES.get(kind)
    if factory is None:
        raise InvalidParameterError(f"{kind} is not a convolution filter")
    return factory(intensity)

