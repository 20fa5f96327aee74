# -*- coding: utf-8 -*-
"""
Filter Requests - Tagged descriptions of a single transform to run.

A ``FilterRequest`` is one of six frozen dataclasses, each naming a filter
and carrying its parameter. Requests are plain data: nothing is validated
until ``to_transform()`` builds the matching processor, which is where
``TransformPipeline`` catches parameter errors.

========================  ====================  =========================
Request                   Parameter             Processor
========================  ====================  =========================
``GrayscaleRequest``      ``method``            ``Grayscale``
``ContrastRequest``       ``level``             ``ContrastAdjustment``
``BrightnessRequest``     ``level``             ``BrightnessAdjustment``
``SharpenRequest``        ``intensity``         ``Sharpen``
``BlurRequest``           ``intensity``         ``Blur``
``EdgeDetectRequest``     ``intensity``         ``EdgeDetect``
========================  ====================  =========================

``parse_request`` turns the string tags used by upload forms and scripts
(``'grayscale'``, ``'edge-detection'``, ...) into requests.

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
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Type, Union

# rasterfx internal
from rasterfx.exceptions import InvalidParameterError
from rasterfx.image_processing.base import ImageTransform
from rasterfx.image_processing.color import (
    BrightnessAdjustment,
    ContrastAdjustment,
    Grayscale,
    validate_level,
)
from rasterfx.image_processing.convolution import Blur, EdgeDetect, Sharpen
from rasterfx.image_processing.kernels import DEFAULT_INTENSITY, validate_intensity
from rasterfx.vocabulary import ConversionMethod, FilterKind


@dataclass(frozen=True)
class GrayscaleRequest:
    """Grayscale conversion with *method* (unknown names use luminance)."""

    kind: ClassVar[FilterKind] = FilterKind.GRAYSCALE
    method: Union[str, ConversionMethod] = ConversionMethod.LUMINANCE.value

    def to_transform(self) -> ImageTransform:
        return Grayscale(method=self.method)


@dataclass(frozen=True)
class ContrastRequest:
    """Contrast adjustment with *level* in ``[-100, 100]``."""

    kind: ClassVar[FilterKind] = FilterKind.CONTRAST
    level: float = 0

    def to_transform(self) -> ImageTransform:
        return ContrastAdjustment(level=validate_level('Contrast level', self.level))


@dataclass(frozen=True)
class BrightnessRequest:
    """Brightness adjustment with *level* in ``[-100, 100]``."""

    kind: ClassVar[FilterKind] = FilterKind.BRIGHTNESS
    level: float = 0

    def to_transform(self) -> ImageTransform:
        return BrightnessAdjustment(level=validate_level('Brightness level', self.level))


@dataclass(frozen=True)
class SharpenRequest:
    """Sharpen with *intensity* in ``[1, 100]``."""

    kind: ClassVar[FilterKind] = FilterKind.SHARPEN
    intensity: int = DEFAULT_INTENSITY

    def to_transform(self) -> ImageTransform:
        return Sharpen(intensity=validate_intensity(self.intensity))


@dataclass(frozen=True)
class BlurRequest:
    """Blur with *intensity* in ``[1, 100]``."""

    kind: ClassVar[FilterKind] = FilterKind.BLUR
    intensity: int = DEFAULT_INTENSITY

    def to_transform(self) -> ImageTransform:
        return Blur(intensity=validate_intensity(self.intensity))


@dataclass(frozen=True)
class EdgeDetectRequest:
    """Edge detection with *intensity* in ``[1, 100]``."""

    kind: ClassVar[FilterKind] = FilterKind.EDGE_DETECT
    intensity: int = DEFAULT_INTENSITY

    def to_transform(self) -> ImageTransform:
        return EdgeDetect(intensity=validate_intensity(self.intensity))


FilterRequest = Union[
    GrayscaleRequest,
    ContrastRequest,
    BrightnessRequest,
    SharpenRequest,
    BlurRequest,
    EdgeDetectRequest,
]

REQUEST_TYPES: Dict[FilterKind, Type] = {
    FilterKind.GRAYSCALE: GrayscaleRequest,
    FilterKind.CONTRAST: ContrastRequest,
    FilterKind.BRIGHTNESS: BrightnessRequest,
    FilterKind.SHARPEN: SharpenRequest,
    FilterKind.BLUR: BlurRequest,
    FilterKind.EDGE_DETECT: EdgeDetectRequest,
}

_ALIASES = {
    'greyscale': FilterKind.GRAYSCALE,
    'gray': FilterKind.GRAYSCALE,
    'edge_detect': FilterKind.EDGE_DETECT,
    'edge-detect': FilterKind.EDGE_DETECT,
    'edge_detection': FilterKind.EDGE_DETECT,
    'edges': FilterKind.EDGE_DETECT,
}


def is_filter_request(obj: Any) -> bool:
    """Whether *obj* is an instance of one of the request variants."""
    return isinstance(obj, tuple(REQUEST_TYPES.values()))


def resolve_kind(name: Union[str, FilterKind]) -> FilterKind:
    """Resolve a filter tag or alias to a ``FilterKind``.

    Raises
    ------
    InvalidParameterError
        If *name* is not a known filter.
    """
    if isinstance(name, FilterKind):
        return name
    if not isinstance(name, str):
        raise InvalidParameterError(
            f"Filter name must be a string, got {type(name).__name__}"
        )
    key = name.strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return FilterKind(key)
    except ValueError:
        raise InvalidParameterError(
            f"Unknown filter {name!r}; expected one of "
            f"{[k.value for k in FilterKind]}"
        ) from None


def parse_request(name: Union[str, FilterKind], value: Optional[Any] = None) -> FilterRequest:
    """Build a request from a filter tag and an optional parameter value.

    Parameters
    ----------
    name : str or FilterKind
        Filter tag, e.g. ``'contrast'`` or ``'edge-detection'``.
    value : optional
        Method name for grayscale, level for contrast and brightness,
        intensity for the convolution filters. ``None`` uses the default.

    Returns
    -------
    FilterRequest

    Examples
    --------
    >>> parse_request('sharpen', 75)
    SharpenRequest(intensity=75)
    """
    request_type = REQUEST_TYPES[resolve_kind(name)]
    if value is None:
        return request_type()
    return request_type(value)
