# -*- coding: utf-8 -*-
"""
Color Remap Operators - Per-pixel grayscale, contrast, and brightness transforms.

Each output pixel depends only on the same pixel of the source, so these
operators are neighborhood-independent. All of them write a new buffer,
round channel values to the nearest integer (ties to even), clamp to
``[0, 255]``, and copy the alpha channel unchanged.

- ``Grayscale``: luminance, average, or lightness conversion
- ``ContrastAdjustment``: ``factor * (v - 128) + 128`` with
  ``factor = 259 (level + 255) / (255 (259 - level))``
- ``BrightnessAdjustment``: ``v + level * 255 / 100``

Function entry points ``to_grayscale``, ``adjust_contrast``,
``adjust_brightness``, and ``remap`` wrap the processor classes.

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
import math
import numbers
from typing import Annotated, Any, Optional, Union

# Third-party
import numpy as np

# rasterfx internal
from rasterfx.exceptions import InvalidParameterError, UnsupportedMethodError
from rasterfx.image_processing.base import ColorChannelMixin, ImageTransform
from rasterfx.image_processing.params import Desc, Range
from rasterfx.image_processing.versioning import processor_tags, processor_version
from rasterfx.raster import RasterBuffer
from rasterfx.vocabulary import ConversionMethod, ProcessorCategory

logger = logging.getLogger(__name__)

#: Inclusive range of contrast and brightness levels.
LEVEL_RANGE = (-100, 100)

#: Rec. 601 luma coefficients for R, G, B.
LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114])

#: Contrast is stretched around this channel value.
MID_GRAY = 128.0

MethodLike = Union[str, ConversionMethod, None]


def validate_method(method: MethodLike, strict: bool = False) -> ConversionMethod:
    """Resolve a grayscale method name to a ``ConversionMethod``.

    Names are matched case-insensitively after stripping whitespace.

    Parameters
    ----------
    method : str, ConversionMethod, or None
        Method to resolve. ``None`` selects ``LUMINANCE``.
    strict : bool
        If True, unrecognized methods raise instead of falling back.

    Returns
    -------
    ConversionMethod
        The resolved method; ``LUMINANCE`` for unrecognized input when
        *strict* is False.

    Raises
    ------
    UnsupportedMethodError
        If *strict* is True and *method* is not recognized.
    """
    if method is None:
        return ConversionMethod.LUMINANCE
    if isinstance(method, ConversionMethod):
        return method
    if isinstance(method, str):
        try:
            return ConversionMethod(method.strip().lower())
        except ValueError:
            pass
    if strict:
        raise UnsupportedMethodError(
            f"Unsupported grayscale method {method!r}; expected one of "
            f"{[m.value for m in ConversionMethod]}"
        )
    logger.warning("Unrecognized grayscale method %r, using luminance", method)
    return ConversionMethod.LUMINANCE


def contrast_factor(level: float) -> float:
    """Contrast stretch factor for *level*.

    Computes ``259 * (level + 255) / (255 * (259 - level))``. Level 0
    yields exactly 1.0.

    Raises
    ------
    InvalidParameterError
        If *level* is non-finite or the denominator is zero or negative
        (``level >= 259``).
    """
    if isinstance(level, bool) or not isinstance(level, numbers.Real):
        raise InvalidParameterError(
            f"Contrast level must be a number, got {type(level).__name__}"
        )
    if not math.isfinite(level):
        raise InvalidParameterError(f"Contrast level must be finite, got {level!r}")
    denominator = 255.0 * (259.0 - level)
    if denominator <= 0:
        raise InvalidParameterError(
            f"Contrast level {level!r} gives a non-positive denominator; "
            f"levels must be below 259"
        )
    return 259.0 * (level + 255.0) / denominator


def validate_level(name: str, level: Any) -> float:
    """Check that a contrast or brightness *level* is a number in [-100, 100].

    Returns the level as a Python ``float``.

    Raises
    ------
    InvalidParameterError
        If *level* is not a real number or is out of range.
    """
    if isinstance(level, bool) or not isinstance(level, numbers.Real):
        raise InvalidParameterError(
            f"{name} must be a number, got {type(level).__name__}"
        )
    lo, hi = LEVEL_RANGE
    if not (lo <= level <= hi):
        raise InvalidParameterError(
            f"{name} {level!r} outside [{lo}, {hi}]"
        )
    return float(level)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.COLOR,
                description='Convert colour to gray using a weighting method')
class Grayscale(ColorChannelMixin, ImageTransform):
    """Convert an image to grayscale.

    Per pixel, with channel values ``R, G, B``:

    - ``luminance``: ``0.299 R + 0.587 G + 0.114 B``
    - ``average``: ``(R + G + B) / 3``
    - ``lightness``: ``(max(R, G, B) + min(R, G, B)) / 2``

    The gray value is written to all three colour channels. Unrecognized
    methods fall back to ``luminance`` with a logged warning.

    Parameters
    ----------
    method : str or ConversionMethod
        Conversion method. Default ``'luminance'``.

    Examples
    --------
    >>> gray = Grayscale(method='average').apply(buffer)
    """

    method: Annotated[object, Desc('luminance, average, or lightness')] = 'luminance'

    def _apply_rgb(self, rgb: np.ndarray, **kwargs: Any) -> np.ndarray:
        params = self._resolve_params(kwargs)
        method = validate_method(params['method'])

        if method is ConversionMethod.AVERAGE:
            gray = (rgb[..., 0] + rgb[..., 1] + rgb[..., 2]) / 3.0
        elif method is ConversionMethod.LIGHTNESS:
            gray = (rgb.max(axis=-1) + rgb.min(axis=-1)) / 2.0
        else:
            gray = (LUMA_WEIGHTS[0] * rgb[..., 0]
                    + LUMA_WEIGHTS[1] * rgb[..., 1]
                    + LUMA_WEIGHTS[2] * rgb[..., 2])

        return np.repeat(gray[..., np.newaxis], 3, axis=-1)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.ENHANCE,
                description='Stretch or flatten channel values around mid-gray')
class ContrastAdjustment(ColorChannelMixin, ImageTransform):
    """Adjust contrast around mid-gray (128).

    ``output = clamp(factor * (input - 128) + 128, 0, 255)`` per colour
    channel. Positive levels stretch values away from 128, negative
    levels pull them toward it, and level 0 is the identity.

    Parameters
    ----------
    level : float
        Contrast level in ``[-100, 100]``. Default 0.
    """

    level: Annotated[float, Range(min=LEVEL_RANGE[0], max=LEVEL_RANGE[1]),
                     Desc('Contrast level')] = 0

    def _apply_rgb(self, rgb: np.ndarray, **kwargs: Any) -> np.ndarray:
        params = self._resolve_params(kwargs)
        factor = contrast_factor(params['level'])
        if factor == 1.0:
            return rgb
        return factor * (rgb - MID_GRAY) + MID_GRAY


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.ENHANCE,
                description='Shift channel values up or down')
class BrightnessAdjustment(ColorChannelMixin, ImageTransform):
    """Shift every colour channel by ``level`` percent of full scale.

    ``output = clamp(input + level * 255 / 100, 0, 255)``.

    Parameters
    ----------
    level : float
        Brightness level in ``[-100, 100]``. Default 0.
    """

    level: Annotated[float, Range(min=LEVEL_RANGE[0], max=LEVEL_RANGE[1]),
                     Desc('Brightness level')] = 0

    def _apply_rgb(self, rgb: np.ndarray, **kwargs: Any) -> np.ndarray:
        params = self._resolve_params(kwargs)
        return rgb + params['level'] * 255.0 / 100.0


def to_grayscale(buffer: RasterBuffer, method: MethodLike = 'luminance') -> RasterBuffer:
    """Grayscale *buffer* with *method*; see ``Grayscale``."""
    return Grayscale(method=method).apply(buffer)


def adjust_contrast(buffer: RasterBuffer, level: float) -> RasterBuffer:
    """Adjust contrast of *buffer*; see ``ContrastAdjustment``.

    Raises
    ------
    InvalidParameterError
        If *level* is not a number in ``[-100, 100]``.
    """
    level = validate_level('Contrast level', level)
    return ContrastAdjustment(level=level).apply(buffer)


def adjust_brightness(buffer: RasterBuffer, level: float) -> RasterBuffer:
    """Adjust brightness of *buffer*; see ``BrightnessAdjustment``."""
    level = validate_level('Brightness level', level)
    return BrightnessAdjustment(level=level).apply(buffer)


def remap(
    buffer: RasterBuffer,
    setting: Optional[Union[MethodLike, float]] = None,
) -> RasterBuffer:
    """Apply a color remap chosen by the type of *setting*.

    A method name (or ``ConversionMethod``, or ``None``) selects grayscale
    conversion; a number selects contrast adjustment with that level.
    Anything else is treated as an unrecognized method name and converts
    with ``luminance``.

    Examples
    --------
    >>> remap(buffer, 'lightness')   # grayscale
    >>> remap(buffer, 40)            # contrast
    """
    if isinstance(setting, numbers.Real) and not isinstance(setting, bool):
        return adjust_contrast(buffer, setting)
    return to_grayscale(buffer, setting)
