# -*- coding: utf-8 -*-
"""
PNG Writer - Write RGBA buffers to PNG files.

Encodes a ``RasterBuffer`` as an 8-bit RGBA PNG with Pillow, so alpha
survives the round trip. ``EXPORT_FILENAMES`` holds the default download
name for each filter's output.

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
from typing import Any, Dict, Optional, Union

# Third-party
import numpy as np

try:
    from PIL import Image
    from PIL.PngImagePlugin import PngInfo
    _HAS_PIL = True
except ImportError:
    _HAS_PIL = False

# rasterfx internal
from rasterfx.exceptions import DependencyError
from rasterfx.image_processing.requests import resolve_kind
from rasterfx.IO.base import ImageWriter
from rasterfx.raster import RasterBuffer, require_buffer
from rasterfx.vocabulary import FilterKind, OutputFormat

logger = logging.getLogger(__name__)

#: Default output file name per filter.
EXPORT_FILENAMES: Dict[FilterKind, str] = {
    FilterKind.GRAYSCALE: 'grayscale-image.png',
    FilterKind.CONTRAST: 'contrast-adjusted-image.png',
    FilterKind.BRIGHTNESS: 'brightness-adjusted-image.png',
    FilterKind.SHARPEN: 'sharpened-image.png',
    FilterKind.BLUR: 'blurred-image.png',
    FilterKind.EDGE_DETECT: 'edge-detected-image.png',
}


class PngWriter(ImageWriter):
    """Write a ``RasterBuffer`` to an RGBA PNG file.

    Parameters
    ----------
    filepath : str or Path
        Output PNG file path.
    metadata : Dict[str, Any], optional
        Text chunks to embed, as ``{key: value}``.

    Raises
    ------
    DependencyError
        If Pillow is not installed.

    Examples
    --------
    >>> from rasterfx.IO.png import PngWriter
    >>> with PngWriter('output.png') as writer:
    ...     writer.write(buffer)
    """

    output_format = OutputFormat.PNG

    def __init__(
        self,
        filepath: Union[str, Path],
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        if not _HAS_PIL:
            raise DependencyError(
                "Pillow is required for PNG writing. "
                "Install with: pip install Pillow"
            )
        super().__init__(filepath, metadata)

    def write(self, buffer: RasterBuffer) -> None:
        """Encode *buffer* to ``self.filepath``.

        Raises
        ------
        InvalidInputError
            If *buffer* is not a ``RasterBuffer``.
        """
        buffer = require_buffer(buffer)
        img = Image.fromarray(np.array(buffer.as_array()))
        save_kwargs: Dict[str, Any] = {}
        if self.metadata:
            info = PngInfo()
            for key, value in self.metadata.items():
                info.add_text(str(key), str(value))
            save_kwargs['pnginfo'] = info
        img.save(str(self.filepath), format=self.output_format.value.upper(), **save_kwargs)
        logger.debug("Wrote %dx%d PNG to %s", buffer.width, buffer.height,
                     self.filepath)


def write_png(buffer: RasterBuffer, filepath: Union[str, Path]) -> Path:
    """Write *buffer* to *filepath* as PNG and return the path."""
    with PngWriter(filepath) as writer:
        writer.write(buffer)
    return writer.filepath


def export_filename(kind: Union[FilterKind, str]) -> str:
    """Default output name for a filter, e.g. ``'sharpened-image.png'``.

    Accepts the same tags and aliases as ``parse_request``.

    Raises
    ------
    InvalidParameterError
        If *kind* is not a known filter.
    """
    return EXPORT_FILENAMES[resolve_kind(kind)]
