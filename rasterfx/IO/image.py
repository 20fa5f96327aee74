# -*- coding: utf-8 -*-
"""
Image Reader - Decode image files into RGBA buffers and fit them for display.

Reads any raster format Pillow can identify (PNG, JPEG, GIF, BMP, WebP,
...) and converts it to interleaved RGBA. Files Pillow cannot identify are
rejected as non-images. ``scale_to_fit`` shrinks a buffer so it fits a
display box, preserving aspect ratio and never enlarging.

Dependencies
------------
Pillow

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
from pathlib import Path
from typing import Tuple, Union

# Third-party
import numpy as np

try:
    from PIL import Image, UnidentifiedImageError
    _HAS_PIL = True
except ImportError:
    _HAS_PIL = False

# rasterfx internal
from rasterfx.exceptions import DependencyError, InvalidInputError
from rasterfx.IO.base import ImageReader
from rasterfx.raster import RasterBuffer, require_buffer

logger = logging.getLogger(__name__)

#: Largest ``(width, height)`` a loaded image is shown at.
MAX_DISPLAY_SIZE = (800, 600)


def _require_pil() -> None:
    if not _HAS_PIL:
        raise DependencyError(
            "Pillow is required for image file IO. "
            "Install with: pip install Pillow"
        )


class ImageFileReader(ImageReader):
    """Read an image file into an RGBA ``RasterBuffer``.

    Parameters
    ----------
    filepath : str or Path
        Path to the image file.

    Raises
    ------
    FileNotFoundError
        If *filepath* does not exist.
    InvalidInputError
        If the file is not an image Pillow can decode.
    DependencyError
        If Pillow is not installed.

    Examples
    --------
    >>> with ImageFileReader('photo.jpg') as reader:
    ...     buffer = reader.read_buffer()
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        _require_pil()
        super().__init__(filepath)

    def _open(self):
        try:
            return Image.open(self.filepath)
        except UnidentifiedImageError as exc:
            raise InvalidInputError(
                f"{self.filepath} is not an image file"
            ) from exc

    def _load_metadata(self) -> None:
        with self._open() as img:
            width, height = img.size
            self.metadata = {
                'width': width,
                'height': height,
                'format': img.format,
                'mode': img.mode,
            }
        logger.debug("Opened %s: %dx%d %s (%s)", self.filepath, width,
                     height, self.metadata['format'], self.metadata['mode'])

    def read_buffer(self) -> RasterBuffer:
        """Decode the image, converting any colour mode to RGBA.

        Images without transparency receive an opaque alpha channel.
        """
        with self._open() as img:
            try:
                rgba = np.asarray(img.convert('RGBA'), dtype=np.uint8)
            except OSError as exc:
                raise InvalidInputError(
                    f"Could not decode {self.filepath}: {exc}"
                ) from exc
        return RasterBuffer.from_array(rgba)


def read_image(filepath: Union[str, Path]) -> RasterBuffer:
    """Read *filepath* into an RGBA ``RasterBuffer``; see ``ImageFileReader``."""
    with ImageFileReader(filepath) as reader:
        return reader.read_buffer()


def fit_size(
    width: int,
    height: int,
    max_width: int = MAX_DISPLAY_SIZE[0],
    max_height: int = MAX_DISPLAY_SIZE[1],
) -> Tuple[int, int]:
    """Size that fits ``(width, height)`` inside the display box.

    ``scale = min(max_width / width, max_height / height, 1)``; each side is
    rounded and kept at least 1 pixel.

    Raises
    ------
    InvalidInputError
        If a bound is not a positive integer.
    """
    for name, value in (('max_width', max_width), ('max_height', max_height)):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidInputError(f"{name} must be a positive integer, got {value!r}")
    scale = min(max_width / width, max_height / height, 1.0)
    return (max(1, round(width * scale)), max(1, round(height * scale)))


def scale_to_fit(
    buffer: RasterBuffer,
    max_width: int = MAX_DISPLAY_SIZE[0],
    max_height: int = MAX_DISPLAY_SIZE[1],
) -> RasterBuffer:
    """Shrink *buffer* to fit ``max_width x max_height``.

    Aspect ratio is preserved and buffers that already fit are returned
    as is. Resampling is bilinear.

    Parameters
    ----------
    buffer : RasterBuffer
        Source image.
    max_width, max_height : int
        Display box. Default ``(800, 600)``.

    Returns
    -------
    RasterBuffer
    """
    buffer = require_buffer(buffer)
    size = fit_size(buffer.width, buffer.height, max_width, max_height)
    if size == (buffer.width, buffer.height):
        return buffer
    _require_pil()
    logger.debug("Scaling %dx%d buffer to %dx%d", buffer.width, buffer.height,
                 *size)
    img = Image.fromarray(np.array(buffer.as_array()))
    resized = img.resize(size, Image.Resampling.BILINEAR)
    return RasterBuffer.from_array(np.asarray(resized, dtype=np.uint8))
