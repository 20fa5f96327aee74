# -*- coding: utf-8 -*-
"""
rasterfx Exception Hierarchy - Domain-specific exceptions for pixel transforms.

Provides a small exception hierarchy that lets collaborators (upload forms,
export helpers, batch scripts) catch rasterfx-specific errors distinctly
from Python built-in exceptions. All rasterfx exceptions subclass both
``RasterFxError`` and the appropriate built-in exception, so existing
``except ValueError`` handlers keep working.

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


class RasterFxError(Exception):
    """Base exception for all rasterfx errors."""


class InvalidInputError(RasterFxError, ValueError):
    """Missing or malformed raster buffer.

    Raised for ``None`` buffers, non-positive dimensions, pixel sequences
    whose length disagrees with ``width * height * 4``, and files that are
    not decodable images.
    """


class InvalidParameterError(RasterFxError, ValueError):
    """Operator parameter outside its documented range.

    Raised for contrast levels whose factor would be non-finite, intensities
    outside [1, 100], malformed kernels, and unknown filter names.
    """


class UnsupportedMethodError(RasterFxError, ValueError):
    """Unrecognized grayscale conversion method.

    Only raised when strict method validation is requested. The grayscale
    operator itself falls back to ``luminance``.
    """


class ProcessorError(RasterFxError, RuntimeError):
    """Algorithm failure during ``apply()``.

    Raised when a processor encounters a non-recoverable error during
    execution (not an input validation issue), such as an output buffer
    whose dimensions differ from its source.
    """


class DependencyError(RasterFxError, ImportError):
    """Missing optional dependency required for a specific module.

    Raised when image decode/encode is requested but Pillow is not
    installed.
    """
