# -*- coding: utf-8 -*-
"""
IO Module - Load image files into RGBA buffers and write results as PNG.

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

from rasterfx.IO.base import ImageReader, ImageWriter
from rasterfx.IO.image import (
    MAX_DISPLAY_SIZE,
    ImageFileReader,
    fit_size,
    read_image,
    scale_to_fit,
)
from rasterfx.IO.png import EXPORT_FILENAMES, PngWriter, export_filename, write_png

__all__ = [
    'ImageReader',
    'ImageWriter',
    'MAX_DISPLAY_SIZE',
    'ImageFileReader',
    'fit_size',
    'read_image',
    'scale_to_fit',
    'EXPORT_FILENAMES',
    'PngWriter',
    'export_filename',
    'write_png',
]
