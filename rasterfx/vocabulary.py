# -*- coding: utf-8 -*-
"""
rasterfx Vocabulary - Enumerations shared across processors and pipelines.

Defines the closed sets of values used to tag processors, select grayscale
conversion methods, name filter kinds, and report pipeline state.

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

from enum import Enum


class ProcessorCategory(Enum):
    """Processing categories for processor tagging.

    Each value corresponds to a functional grouping of pixel operations.
    """

    COLOR = "color"
    ENHANCE = "enhance"
    FILTERS = "filters"
    EDGES = "edges"
    MATH = "math"


class ConversionMethod(Enum):
    """Grayscale conversion methods.

    ``LUMINANCE`` weights channels by Rec. 601 luma coefficients,
    ``AVERAGE`` takes the arithmetic mean, and ``LIGHTNESS`` takes the
    midpoint of the brightest and darkest channel.
    """

    LUMINANCE = "luminance"
    AVERAGE = "average"
    LIGHTNESS = "lightness"


class FilterKind(Enum):
    """The closed set of filters a ``FilterRequest`` can select."""

    GRAYSCALE = "grayscale"
    CONTRAST = "contrast"
    BRIGHTNESS = "brightness"
    SHARPEN = "sharpen"
    BLUR = "blur"
    EDGE_DETECT = "edge-detection"

    @property
    def is_convolution(self) -> bool:
        """Whether the filter is implemented by a 3x3 convolution."""
        return self in (FilterKind.SHARPEN, FilterKind.BLUR,
                        FilterKind.EDGE_DETECT)


class PipelineState(Enum):
    """Lifecycle of a single ``TransformPipeline`` call."""

    IDLE = "idle"
    PROCESSING = "processing"
    DONE = "done"
    FAILED = "failed"


class OutputFormat(Enum):
    """Supported export formats."""

    PNG = "png"
