# -*- coding: utf-8 -*-
"""
Raster Buffer - Interleaved RGBA pixel container.

Defines ``RasterBuffer``, the data type every operator consumes and
produces: a width, a height, and a flat sequence of ``width * height * 4``
bytes laid out row-major with interleaved ``R, G, B, A`` channels. The
byte for channel ``c`` of pixel ``(x, y)`` lives at
``(y * width + x) * 4 + c``.

Buffers are immutable. The backing ``numpy.uint8`` array is marked
read-only, and operators allocate a fresh destination buffer through
``with_pixels`` rather than writing into their source.

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
from typing import Any, Tuple, Union

# Third-party
import numpy as np

# rasterfx internal
from rasterfx.exceptions import InvalidInputError

#: Number of interleaved channels per pixel.
CHANNELS = 4

#: Channel indices within a pixel.
RED, GREEN, BLUE, ALPHA = 0, 1, 2, 3

Rgba = Tuple[int, int, int, int]


def _check_dimension(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidInputError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    if value <= 0:
        raise InvalidInputError(f"{name} must be positive, got {value}")
    return int(value)


def saturate(values: np.ndarray) -> np.ndarray:
    """Round and clamp real-valued channel data to storable bytes.

    Values are rounded to the nearest integer (ties to even) and clamped
    to ``[0, 255]``. Non-finite values are rejected rather than stored.

    Parameters
    ----------
    values : np.ndarray
        Real-valued channel data of any shape.

    Returns
    -------
    np.ndarray
        ``uint8`` array, same shape.

    Raises
    ------
    InvalidInputError
        If *values* contains NaN or infinity.
    """
    values = np.asarray(values)
    if np.issubdtype(values.dtype, np.integer):
        return np.clip(values, 0, 255).astype(np.uint8)
    if not np.all(np.isfinite(values)):
        raise InvalidInputError("Channel data contains non-finite values")
    return np.clip(np.rint(values), 0, 255).astype(np.uint8)


class RasterBuffer:
    """Immutable RGBA raster with interleaved 8-bit channels.

    Parameters
    ----------
    width : int
        Number of pixel columns. Must be positive.
    height : int
        Number of pixel rows. Must be positive.
    pixels : bytes, sequence of int, or np.ndarray
        Flat channel data of length ``width * height * 4``. Integer data
        must already lie in ``[0, 255]``.

    Raises
    ------
    InvalidInputError
        If a dimension is not a positive integer, the pixel data has the
        wrong length, or a channel value is out of range.

    Examples
    --------
    >>> buf = RasterBuffer(2, 1, [255, 0, 0, 255, 0, 0, 255, 128])
    >>> buf.pixel(1, 0)
    (0, 0, 255, 128)
    """

    __slots__ = ('_width', '_height', '_pixels')

    def __init__(
        self,
        width: int,
        height: int,
        pixels: Union[bytes, bytearray, np.ndarray, Any],
    ) -> None:
        self._width = _check_dimension('width', width)
        self._height = _check_dimension('height', height)

        if pixels is None:
            raise InvalidInputError("pixels must not be None")
        if isinstance(pixels, (bytes, bytearray, memoryview)):
            data = np.frombuffer(bytes(pixels), dtype=np.uint8)
        else:
            raw = np.asarray(pixels).reshape(-1)
            if raw.dtype == np.uint8:
                data = raw
            elif np.issubdtype(raw.dtype, np.integer):
                if raw.size and (raw.min() < 0 or raw.max() > 255):
                    raise InvalidInputError(
                        "Channel values must lie in [0, 255]"
                    )
                data = raw.astype(np.uint8)
            else:
                raise InvalidInputError(
                    f"pixels must hold integer channel values, "
                    f"got dtype {raw.dtype}"
                )

        expected = self._width * self._height * CHANNELS
        if data.size != expected:
            raise InvalidInputError(
                f"Expected {expected} bytes for a {self._width}x"
                f"{self._height} RGBA buffer, got {data.size}"
            )

        data = np.array(data, dtype=np.uint8, copy=True)
        data.setflags(write=False)
        self._pixels = data

    # -----------------------------------------------------------------
    # Alternate constructors
    # -----------------------------------------------------------------
    @classmethod
    def from_array(cls, array: np.ndarray) -> 'RasterBuffer':
        """Build a buffer from a ``(rows, cols, 4)`` or ``(rows, cols, 3)`` array.

        Three-channel input receives an opaque alpha channel (255).

        Parameters
        ----------
        array : np.ndarray
            Integer image array in ``[0, 255]``.

        Returns
        -------
        RasterBuffer
        """
        if array is None:
            raise InvalidInputError("array must not be None")
        array = np.asarray(array)
        if array.ndim != 3 or array.shape[2] not in (3, CHANNELS):
            raise InvalidInputError(
                f"Expected (rows, cols, 4) RGBA or (rows, cols, 3) RGB, "
                f"got shape {array.shape}"
            )
        if array.shape[2] == 3:
            alpha = np.full(array.shape[:2] + (1,), 255, dtype=array.dtype)
            array = np.concatenate([array, alpha], axis=2)
        rows, cols = array.shape[:2]
        return cls(cols, rows, array)

    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes) -> 'RasterBuffer':
        """Build a buffer from raw interleaved RGBA bytes."""
        return cls(width, height, data)

    @classmethod
    def blank(
        cls,
        width: int,
        height: int,
        fill: Rgba = (0, 0, 0, 0),
    ) -> 'RasterBuffer':
        """Build a buffer with every pixel set to *fill*.

        Parameters
        ----------
        width, height : int
            Buffer dimensions.
        fill : tuple of int
            ``(R, G, B, A)`` fill colour. Default transparent black.

        Returns
        -------
        RasterBuffer
        """
        width = _check_dimension('width', width)
        height = _check_dimension('height', height)
        if len(fill) != CHANNELS:
            raise InvalidInputError(f"fill must have 4 channels, got {fill!r}")
        tile = np.array(fill, dtype=np.int64)
        if tile.min() < 0 or tile.max() > 255:
            raise InvalidInputError(f"fill values must lie in [0, 255]: {fill!r}")
        return cls(width, height, np.tile(tile.astype(np.uint8), width * height))

    def with_pixels(self, array: np.ndarray) -> 'RasterBuffer':
        """Allocate a new buffer with this buffer's dimensions.

        Real-valued data is saturated (rounded and clamped to
        ``[0, 255]``) before storage.

        Parameters
        ----------
        array : np.ndarray
            Flat or ``(rows, cols, 4)`` channel data.

        Returns
        -------
        RasterBuffer
        """
        return RasterBuffer(self._width, self._height, saturate(array))

    # -----------------------------------------------------------------
    # Accessors
    # -----------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> np.ndarray:
        """Flat read-only ``uint8`` channel data."""
        return self._pixels

    @property
    def shape(self) -> Tuple[int, int, int]:
        """Array shape ``(height, width, 4)``."""
        return (self._height, self._width, CHANNELS)

    @property
    def size(self) -> int:
        """Number of pixels."""
        return self._width * self._height

    def as_array(self) -> np.ndarray:
        """Read-only ``(height, width, 4)`` view of the pixel data."""
        return self._pixels.reshape(self.shape)

    def index(self, x: int, y: int, channel: int = RED) -> int:
        """Flat index of *channel* at pixel ``(x, y)``."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) outside {self._width}x{self._height} buffer"
            )
        if not 0 <= channel < CHANNELS:
            raise IndexError(f"Channel {channel} outside [0, {CHANNELS})")
        return (y * self._width + x) * CHANNELS + channel

    def pixel(self, x: int, y: int) -> Rgba:
        """Channel values ``(R, G, B, A)`` of pixel ``(x, y)``."""
        start = self.index(x, y)
        return tuple(int(v) for v in self._pixels[start:start + CHANNELS])

    def to_bytes(self) -> bytes:
        return self._pixels.tobytes()

    def copy(self) -> 'RasterBuffer':
        return RasterBuffer(self._width, self._height, self._pixels)

    # -----------------------------------------------------------------
    # Dunder
    # -----------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RasterBuffer):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and np.array_equal(self._pixels, other._pixels)
        )

    def __hash__(self) -> int:
        return hash((self._width, self._height, self._pixels.tobytes()))

    def __repr__(self) -> str:
        return f"RasterBuffer(width={self._width}, height={self._height})"


def require_buffer(buffer: Any, name: str = 'buffer') -> RasterBuffer:
    """Check that *buffer* is a ``RasterBuffer``.

    Raises
    ------
    InvalidInputError
        If *buffer* is ``None`` or of another type.
    """
    if buffer is None:
        raise InvalidInputError(f"{name} must not be None")
    if not isinstance(buffer, RasterBuffer):
        raise InvalidInputError(
            f"{name} must be a RasterBuffer, got {type(buffer).__name__}"
        )
    return buffer
