# -*- coding: utf-8 -*-
"""
Image Processing Module - Colour remaps, 3x3 convolutions, and dispatch.

Modules
-------
base.py
    ``ImageProcessor`` and ``ImageTransform`` ABCs and
    ``ColorChannelMixin``.
params.py
    ``Range``, ``Options``, ``Desc`` constraint markers for tunable
    parameters via ``Annotated`` type hints.
versioning.py
    ``@processor_version`` and ``@processor_tags`` decorators.
color.py
    Per-pixel grayscale, contrast, and brightness operators.
kernels.py
    ``Kernel`` value type and the sharpen, blur, and edge factories.
convolution.py
    3x3 convolution with a copied 1-pixel border.
requests.py
    ``FilterRequest`` variants and ``parse_request``.
pipeline.py
    ``Pipeline`` chains and the ``TransformPipeline`` dispatcher.

Key Classes
-----------
Base infrastructure:
    ``ImageProcessor``, ``ImageTransform``, ``ColorChannelMixin``,
    ``Pipeline``, ``processor_version``, ``processor_tags``,
    ``Range``, ``Options``, ``Desc``, ``ParamSpec``

Colour:
    ``Grayscale``, ``ContrastAdjustment``, ``BrightnessAdjustment``

Convolution:
    ``Kernel``, ``Convolve3x3``, ``Sharpen``, ``Blur``, ``EdgeDetect``

Dispatch:
    ``TransformPipeline``, ``TransformResult``, ``GrayscaleRequest``,
    ``ContrastRequest``, ``BrightnessRequest``, ``SharpenRequest``,
    ``BlurRequest``, ``EdgeDetectRequest``

Usage
-----
    >>> from rasterfx import RasterBuffer
    >>> from rasterfx.image_processing import TransformPipeline, SharpenRequest
    >>> buffer = RasterBuffer.blank(64, 48, fill=(120, 80, 40, 255))
    >>> out = TransformPipeline().apply(buffer, SharpenRequest(intensity=50))
    >>> out == buffer
    True

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

from rasterfx.image_processing.base import (
    ImageProcessor,
    ImageTransform,
    ColorChannelMixin,
)
from rasterfx.image_processing.params import Range, Options, Desc, ParamSpec
from rasterfx.image_processing.versioning import processor_version, processor_tags
from rasterfx.image_processing.color import (
    LEVEL_RANGE,
    Grayscale,
    ContrastAdjustment,
    BrightnessAdjustment,
    adjust_brightness,
    adjust_contrast,
    contrast_factor,
    remap,
    to_grayscale,
    validate_method,
)
from rasterfx.image_processing.kernels import (
    DEFAULT_INTENSITY,
    INTENSITY_RANGE,
    Kernel,
    blur_kernel,
    edge_detect_kernel,
    kernel_for,
    sharpen_kernel,
)
from rasterfx.image_processing.convolution import (
    Convolve3x3,
    Sharpen,
    Blur,
    EdgeDetect,
    convolve,
)
from rasterfx.image_processing.requests import (
    FilterRequest,
    GrayscaleRequest,
    ContrastRequest,
    BrightnessRequest,
    SharpenRequest,
    BlurRequest,
    EdgeDetectRequest,
    parse_request,
)
from rasterfx.image_processing.pipeline import (
    Pipeline,
    TransformPipeline,
    TransformResult,
)

__all__ = [
    'ImageProcessor',
    'ImageTransform',
    'ColorChannelMixin',
    'Range',
    'Options',
    'Desc',
    'ParamSpec',
    'processor_version',
    'processor_tags',
    'LEVEL_RANGE',
    'Grayscale',
    'ContrastAdjustment',
    'BrightnessAdjustment',
    'adjust_brightness',
    'adjust_contrast',
    'contrast_factor',
    'remap',
    'to_grayscale',
    'validate_method',
    'DEFAULT_INTENSITY',
    'INTENSITY_RANGE',
    'Kernel',
    'blur_kernel',
    'edge_detect_kernel',
    'kernel_for',
    'sharpen_kernel',
    'Convolve3x3',
    'Sharpen',
    'Blur',
    'EdgeDetect',
    'convolve',
    'FilterRequest',
    'GrayscaleRequest',
    'ContrastRequest',
    'BrightnessRequest',
    'SharpenRequest',
    'BlurRequest',
    'EdgeDetectRequest',
    'parse_request',
    'Pipeline',
    'TransformPipeline',
    'TransformResult',
]
