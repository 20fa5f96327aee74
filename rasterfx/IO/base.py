# -*- coding: utf-8 -*-
"""
IO Base Classes - Abstract interfaces for raster readers and writers.

Defines abstract base classes for loading image files into
``RasterBuffer`` values and writing buffers back out. Concrete readers
and writers inherit from these classes and can be used as context
managers.

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
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

# rasterfx internal
from rasterfx.raster import RasterBuffer


class ImageReader(ABC):
    """
    Abstract base class for all raster readers.

    Attributes
    ----------
    filepath : Path
        Path to the image file.
    metadata : Dict[str, Any]
        Format metadata gathered when the reader opens.
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        """
        Initialize the image reader.

        Parameters
        ----------
        filepath : Union[str, Path]
            Path to the image file.

        Raises
        ------
        FileNotFoundError
            If the specified filepath does not exist.
        """
        self.filepath = Path(filepath)
        if not self.filepath.exists():
            raise FileNotFoundError(f"File not found: {self.filepath}")
        self.metadata: Dict[str, Any] = {}
        self._load_metadata()

    @abstractmethod
    def _load_metadata(self) -> None:
        """
        Populate ``self.metadata`` with at least ``width``, ``height``
        and ``format``.
        """
        pass

    @abstractmethod
    def read_buffer(self) -> RasterBuffer:
        """
        Decode the whole image.

        Returns
        -------
        RasterBuffer
            Decoded pixels as interleaved RGBA.
        """
        pass

    def get_shape(self) -> Tuple[int, int]:
        """
        Get the image size.

        Returns
        -------
        Tuple[int, int]
            ``(height, width)`` in pixels.
        """
        return (self.metadata['height'], self.metadata['width'])

    def close(self) -> None:
        """
        Close the reader and release resources.

        Default implementation does nothing. Override if the reader
        keeps open file handles.
        """
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False


class ImageWriter(ABC):
    """
    Abstract base class for all raster writers.

    Attributes
    ----------
    filepath : Path
        Path where the image will be written.
    metadata : Dict[str, Any]
        Extra metadata for the output file.
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        self.filepath = Path(filepath)
        self.metadata = metadata or {}

    @abstractmethod
    def write(self, buffer: RasterBuffer) -> None:
        """
        Write a buffer to ``self.filepath``.

        Parameters
        ----------
        buffer : RasterBuffer
            Image to encode.

        Raises
        ------
        InvalidInputError
            If *buffer* is not a ``RasterBuffer``.
        IOError
            If writing fails.
        """
        pass

    def close(self) -> None:
        """
        Close the writer and release resources.

        Default implementation does nothing.
        """
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False
