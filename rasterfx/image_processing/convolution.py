# -*- coding: utf-8 -*-
"""
Convolution Operators - 3x3 spatial filters with a copied 1-pixel border.

Applies a fixed 3x3 kernel to the ``R, G, B`` channels of every interior
pixel. For pixel ``(x, y)`` with ``1 <= x < width - 1`` and
``1 <= y < height - 1``::

    sum = sum_{ky, kx in -1..1} input[y + ky, x + kx, c] * k[(ky + 1) * 3 + (kx + 1)]

and ``clamp(round(sum), 0, 255)`` is stored. The weights are applied as
correlation (no kernel flip) and are never normalized here. Border pixels
and the whole alpha channel are copied verbatim from the source. Buffers
narrower or shorter than 3 pixels have no interior and come back
unchanged.

The per-channel weighted sums are computed with
``scipy.ndimage.correlate``. Interior rows can be split into contiguous
bands and processed on a thread pool; every band reads only the source
and writes disjoint rows of the destination, so the result is identical
to the serial path.

- ``Convolve3x3``: arbitrary ``Kernel``
- ``Sharpen``, ``Blur``, ``EdgeDetect``: kernel derived from an intensity

Dependencies
------------
numpy
scipy

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
from abc import abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import Annotated, Any, List, Tuple, Union

# Third-party
import numpy as np
from scipy.ndimage import correlate

# rasterfx internal
from rasterfx.exceptions import InvalidParameterError
from rasterfx.image_processing.base import ImageTransform
from rasterfx.image_processing.kernels import (
    DEFAULT_INTENSITY,
    INTENSITY_RANGE,
    Kernel,
    blur_kernel,
    edge_detect_kernel,
    sharpen_kernel,
)
from rasterfx.image_processing.params import Desc, Range
from rasterfx.image_processing.versioning import processor_tags, processor_version
from rasterfx.raster import ALPHA, RasterBuffer, require_buffer, saturate
from rasterfx.vocabulary import ProcessorCategory

logger = logging.getLogger(__name__)

#: Upper bound on the worker threads a single convolution may use.
MAX_WORKERS = 64

KernelLike = Union[Kernel, np.ndarray, List[float], Tuple[float, ...]]


def _as_kernel(kernel: KernelLike) -> Kernel:
    if isinstance(kernel, Kernel):
        return kernel
    return Kernel(kernel)


def validate_workers(workers: Any) -> int:
    """Check that *workers* is an integer in ``[1, MAX_WORKERS]``.

    Raises
    ------
    InvalidParameterError
        If *workers* is not an integer or is out of range.
    """
    if isinstance(workers, bool) or not isinstance(workers, int) \
            or not 1 <= workers <= MAX_WORKERS:
        raise InvalidParameterError(
            f"workers must be an integer in [1, {MAX_WORKERS}], got {workers!r}"
        )
    return workers


def _row_bands(height: int, workers: int) -> List[Tuple[int, int]]:
    """Split interior rows ``[1, height - 1)`` into contiguous bands."""
    rows = np.arange(1, height - 1)
    return [(int(band[0]), int(band[-1]) + 1)
            for band in np.array_split(rows, min(workers, rows.size))
            if band.size]


def _convolve_band(
    rgb: np.ndarray,
    weights: np.ndarray,
    row_start: int,
    row_stop: int,
) -> np.ndarray:
    """Weighted sums for interior rows ``[row_start, row_stop)``.

    Returns an array of shape ``(row_stop - row_start, cols - 2, 3)``.
    """
    slab = rgb[row_start - 1:row_stop + 1]
    out = np.empty((row_stop - row_start, rgb.shape[1] - 2, 3), dtype=np.float64)
    for c in range(3):
        # The boundary mode never reaches the interior of the slab.
        full = correlate(slab[..., c], weights, mode='nearest')
        out[..., c] = full[1:-1, 1:-1]
    return out


def convolve(buffer: RasterBuffer, kernel: KernelLike, workers: int = 1) -> RasterBuffer:
    """Convolve the colour channels of *buffer* with a 3x3 *kernel*.

    Parameters
    ----------
    buffer : RasterBuffer
        Source image. Not modified.
    kernel : Kernel or sequence of 9 floats
        Row-major weights.
    workers : int
        Number of threads used for the interior rows. Default 1.

    Returns
    -------
    RasterBuffer
        New buffer of the same dimensions. Border pixels and alpha equal
        the source.

    Raises
    ------
    InvalidInputError
        If *buffer* is not a ``RasterBuffer``.
    InvalidParameterError
        If *kernel* is malformed or *workers* is out of range.
    """
    buffer = require_buffer(buffer)
    kernel = _as_kernel(kernel)
    workers = validate_workers(workers)

    width, height = buffer.width, buffer.height
    if width < 3 or height < 3:
        logger.debug("No interior to convolve in %dx%d buffer", width, height)
        return buffer.copy()

    pixels = buffer.as_array()
    rgb = pixels[..., :ALPHA].astype(np.float64)
    weights = kernel.as_matrix()
    bands = _row_bands(height, workers)
    logger.debug("Convolving %dx%d buffer in %d band(s)", width, height, len(bands))

    out = np.array(pixels, dtype=np.uint8, copy=True)
    if len(bands) == 1:
        results = [_convolve_band(rgb, weights, *bands[0])]
    else:
        with ThreadPoolExecutor(max_workers=len(bands)) as executor:
            results = list(executor.map(
                lambda band: _convolve_band(rgb, weights, *band), bands
            ))

    for (row_start, row_stop), sums in zip(bands, results):
        out[row_start:row_stop, 1:-1, :ALPHA] = saturate(sums)

    return buffer.with_pixels(out)


class _KernelFilter(ImageTransform):
    """Shared ``apply`` for processors backed by a single 3x3 kernel."""

    workers: Annotated[int, Range(min=1, max=MAX_WORKERS),
                       Desc('Threads used for interior rows')] = 1

    @abstractmethod
    def kernel_from_params(self, params: dict) -> Kernel:
        """Build the kernel from resolved parameters."""
        ...

    @property
    def kernel(self) -> Kernel:
        """Kernel for the processor's current parameters."""
        return self.kernel_from_params(self.params)

    def apply(self, source: RasterBuffer, **kwargs: Any) -> RasterBuffer:
        """Convolve *source* with this processor's kernel.

        Parameters
        ----------
        source : RasterBuffer
            Input image.

        Returns
        -------
        RasterBuffer
            New buffer, same dimensions, border and alpha copied.
        """
        params = self._resolve_params(kwargs)
        result = convolve(source, self.kernel_from_params(params),
                          workers=params['workers'])
        self._report_progress(kwargs, 1.0)
        return result


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS,
                description='Convolve colour channels with a 3x3 kernel')
class Convolve3x3(_KernelFilter):
    """Convolve with an arbitrary 3x3 kernel.

    Parameters
    ----------
    kernel : Kernel or sequence of 9 floats
        Row-major weights, applied without normalization.
    workers : int
        Threads used for interior rows. Default 1.

    Examples
    --------
    >>> emboss = Convolve3x3([-2, -1, 0, -1, 1, 1, 0, 1, 2])
    >>> out = emboss.apply(buffer)
    """

    def __init__(self, kernel: KernelLike, workers: int = 1) -> None:
        self._kernel = _as_kernel(kernel)
        self.workers = workers
        self._resolve_params({})

    def kernel_from_params(self, params: dict) -> Kernel:
        return self._kernel

    def __repr__(self) -> str:
        return f"Convolve3x3({self._kernel!r}, workers={self.workers!r})"


class _IntensityFilter(_KernelFilter):

    intensity: Annotated[int, Range(min=INTENSITY_RANGE[0], max=INTENSITY_RANGE[1]),
                         Desc('Filter intensity; 50 is unit strength')] = DEFAULT_INTENSITY


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS,
                description='Sharpen detail with a 4-connected unsharp mask')
class Sharpen(_IntensityFilter):
    """Sharpen with ``sharpen_kernel(intensity)``.

    Flat regions are unchanged; local differences are amplified.

    Parameters
    ----------
    intensity : int
        Strength in ``[1, 100]``. Default 50.
    workers : int
        Threads used for interior rows. Default 1.
    """

    def kernel_from_params(self, params: dict) -> Kernel:
        return sharpen_kernel(params['intensity'])


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS,
                description='Smooth with a brightness-preserving kernel')
class Blur(_IntensityFilter):
    """Blur with ``blur_kernel(intensity)``."""

    def kernel_from_params(self, params: dict) -> Kernel:
        return blur_kernel(params['intensity'])


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.EDGES,
                description='Highlight edges with a Laplacian kernel')
class EdgeDetect(_IntensityFilter):
    """Detect edges with ``edge_detect_kernel(intensity)``.

    Flat interior regions become black; border pixels keep their source
    values.
    """

    def kernel_from_params(self, params: dict) -> Kernel:
        return edge_detect_kernel(params['intensity'])
