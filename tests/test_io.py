# -*- coding: utf-8 -*-
"""
Image IO Tests - Reading image files, fitting to the display box, PNG export.

Dependencies
------------
pytest
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

import numpy as np
import pytest

try:
    from PIL import Image
    _HAS_PIL = True
except ImportError:
    _HAS_PIL = False

from rasterfx.exceptions import InvalidInputError, InvalidParameterError
from rasterfx.raster import RasterBuffer
from rasterfx.vocabulary import FilterKind

pytestmark = pytest.mark.skipif(
    not _HAS_PIL, reason="Pillow not installed"
)


class TestPngWriter:
    """RGBA PNG export."""

    def test_roundtrip_keeps_alpha(self, tmp_path, random_buffer):
        from rasterfx.IO.png import PngWriter

        filepath = tmp_path / "out.png"
        with PngWriter(filepath) as writer:
            writer.write(random_buffer)

        img = Image.open(str(filepath))
        assert img.mode == 'RGBA'
        assert img.format == PngWriter.output_format.value.upper()
        np.testing.assert_array_equal(np.array(img), random_buffer.as_array())

    def test_write_png_returns_path(self, tmp_path, gray_3x3):
        from rasterfx.IO.png import write_png

        path = write_png(gray_3x3, tmp_path / "gray.png")
        assert path.exists()

    def test_text_metadata(self, tmp_path, gray_3x3):
        from rasterfx.IO.png import PngWriter

        filepath = tmp_path / "meta.png"
        with PngWriter(filepath, metadata={'filter': 'sharpen'}) as writer:
            writer.write(gray_3x3)
        assert Image.open(str(filepath)).text['filter'] == 'sharpen'

    def test_rejects_non_buffer(self, tmp_path):
        from rasterfx.IO.png import PngWriter

        with pytest.raises(InvalidInputError):
            PngWriter(tmp_path / "x.png").write(np.zeros((2, 2, 4), dtype=np.uint8))

    def test_export_filenames(self):
        from rasterfx.IO.png import EXPORT_FILENAMES, export_filename

        assert set(EXPORT_FILENAMES) == set(FilterKind)
        assert export_filename('sharpen') == 'sharpened-image.png'
        assert export_filename(FilterKind.CONTRAST) == 'contrast-adjusted-image.png'
        assert export_filename('grayscale') == 'grayscale-image.png'

    @pytest.mark.parametrize("name, expected", [
        ('edge_detect', 'edge-detected-image.png'),
        ('gray', 'grayscale-image.png'),
        ('Sharpen', 'sharpened-image.png'),
        (' blur ', 'blurred-image.png'),
    ])
    def test_export_filename_aliases(self, name, expected):
        from rasterfx.IO.png import export_filename

        assert export_filename(name) == expected

    def test_export_filename_unknown(self):
        from rasterfx.IO.png import export_filename

        with pytest.raises(InvalidParameterError, match="emboss"):
            export_filename('emboss')


class TestImageFileReader:
    """Decoding image files into RGBA buffers."""

    def test_rgb_gets_opaque_alpha(self, tmp_path):
        from rasterfx.IO.image import read_image

        rgb = np.random.randint(0, 256, (6, 9, 3), dtype=np.uint8)
        filepath = tmp_path / "rgb.png"
        Image.fromarray(rgb).save(str(filepath))

        buf = read_image(filepath)
        assert (buf.width, buf.height) == (9, 6)
        np.testing.assert_array_equal(buf.as_array()[..., :3], rgb)
        assert np.all(buf.as_array()[..., 3] == 255)

    def test_grayscale_file_expanded(self, tmp_path):
        from rasterfx.IO.image import read_image

        gray = np.full((4, 4), 77, dtype=np.uint8)
        filepath = tmp_path / "gray.png"
        Image.fromarray(gray).save(str(filepath))

        assert read_image(filepath).pixel(2, 2) == (77, 77, 77, 255)

    def test_metadata(self, tmp_path, random_buffer):
        from rasterfx.IO.image import ImageFileReader
        from rasterfx.IO.png import write_png

        filepath = write_png(random_buffer, tmp_path / "in.png")
        with ImageFileReader(filepath) as reader:
            assert reader.metadata['format'] == 'PNG'
            assert reader.get_shape() == (23, 37)
            assert reader.read_buffer() == random_buffer

    def test_non_image_rejected(self, tmp_path):
        from rasterfx.IO.image import read_image

        filepath = tmp_path / "notes.txt"
        filepath.write_text("not an image")
        with pytest.raises(InvalidInputError, match="not an image"):
            read_image(filepath)

    def test_missing_file(self, tmp_path):
        from rasterfx.IO.image import read_image

        with pytest.raises(FileNotFoundError):
            read_image(tmp_path / "missing.png")


class TestScaleToFit:
    """Fitting into the 800x600 display box."""

    @pytest.mark.parametrize("size, expected", [
        ((1600, 1200), (800, 600)),
        ((1000, 100), (800, 80)),
        ((300, 1200), (150, 600)),
        ((800, 600), (800, 600)),
        ((640, 480), (640, 480)),
        ((4000, 1), (800, 1)),
    ])
    def test_fit_size(self, size, expected):
        from rasterfx.IO.image import fit_size

        assert fit_size(*size) == expected

    def test_fit_size_bad_bounds(self):
        from rasterfx.IO.image import fit_size

        with pytest.raises(InvalidInputError):
            fit_size(10, 10, max_width=0)

    def test_small_buffer_returned_as_is(self, random_buffer):
        from rasterfx.IO.image import scale_to_fit

        assert scale_to_fit(random_buffer) is random_buffer

    def test_downscales_preserving_aspect(self):
        from rasterfx.IO.image import scale_to_fit

        big = RasterBuffer.blank(1000, 500, fill=(10, 20, 30, 255))
        out = scale_to_fit(big)
        assert (out.width, out.height) == (800, 400)
        assert out.pixel(400, 200) == (10, 20, 30, 255)

    def test_custom_box(self, random_buffer):
        from rasterfx.IO.image import scale_to_fit

        out = scale_to_fit(random_buffer, max_width=10, max_height=10)
        assert (out.width, out.height) == (10, 6)
