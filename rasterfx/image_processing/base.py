# -*- coding: utf-8 -*-
"""
Image Processing Base Classes - Abstract interfaces for pixel processors.

Defines the ``ImageProcessor`` common base class, the ``ImageTransform``
ABC for buffer-to-buffer transforms, and ``ColorChannelMixin`` which lets a
transform work on the ``R, G, B`` planes of a ``RasterBuffer`` while the
alpha plane is carried through untouched. ``ImageProcessor`` provides
version checking at first instantiation and ``typing.Annotated``-based
tunable parameter declarations with automatic ``__init__`` generation and
runtime resolution through ``**kwargs``.

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
import logging
import warnings
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

# Third-party
import numpy as np

# rasterfx internal
from rasterfx.exceptions import ProcessorError
from rasterfx.image_processing.params import ParamSpec, collect_param_specs, _make_init
from rasterfx.raster import ALPHA, RasterBuffer, require_buffer, saturate

logger = logging.getLogger(__name__)


class ImageProcessor(ABC):
    """
    Common base class for all pixel processors.

    Provides two cross-cutting capabilities:

    **Version checking**: Concrete subclasses that do not declare a processor
    version via ``@processor_version('x.y.z')`` trigger a ``UserWarning`` at
    first instantiation. The check runs in ``__new__`` so that class
    decorators have already been applied.

    **Tunable parameter flow**: Subclasses declare tunable parameters as
    ``typing.Annotated`` class-body fields using ``Range``, ``Options`` and
    ``Desc`` markers. ``__init_subclass__`` collects them into
    ``__param_specs__`` and auto-generates an ``__init__`` unless the
    subclass defines its own. At runtime ``_resolve_params(kwargs)`` merges
    instance values with keyword overrides and validates them.
    """

    # Track which classes have been checked to warn only once per class.
    _version_warned_classes: set = set()

    #: Tuple of ``ParamSpec`` built by ``__init_subclass__``.
    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)
        if cls.__param_specs__ and '__init__' not in cls.__dict__:
            cls.__init__ = _make_init(cls.__param_specs__)

    def __new__(cls, *args: Any, **kwargs: Any) -> 'ImageProcessor':
        if cls not in ImageProcessor._version_warned_classes:
            ImageProcessor._version_warned_classes.add(cls)
            if (
                not getattr(cls, '__processor_version__', None)
                and not getattr(cls, '__abstractmethods__', None)
            ):
                warnings.warn(
                    f"{cls.__qualname__} does not declare a processor version. "
                    f"Use @processor_version('x.y.z') to declare one.",
                    UserWarning,
                    stacklevel=2,
                )
        logger.debug("Instantiating %s", cls.__qualname__)
        return super().__new__(cls)

    @property
    def params(self) -> Dict[str, Any]:
        """Current values of every declared tunable parameter."""
        return {spec.name: getattr(self, spec.name)
                for spec in type(self).__param_specs__}

    def _resolve_params(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge instance values with runtime *kwargs* overrides.

        Keys in *kwargs* that are not declared parameters (for example
        ``progress_callback``) are ignored.

        Returns
        -------
        Dict[str, Any]
            ``{param_name: resolved_value}`` for every declared param.

        Raises
        ------
        TypeError
            If a value has the wrong type.
        InvalidParameterError
            If a value violates range or choices constraints.
        """
        resolved: Dict[str, Any] = {}
        for spec in type(self).__param_specs__:
            value = kwargs[spec.name] if spec.name in kwargs else getattr(self, spec.name)
            spec.validate(value)
            resolved[spec.name] = value
        return resolved

    def _report_progress(self, kwargs: Dict[str, Any], fraction: float) -> None:
        """Call the optional ``progress_callback`` with *fraction* in [0, 1]."""
        cb = kwargs.get('progress_callback')
        if cb is not None:
            cb(float(fraction))

    def __repr__(self) -> str:
        args = ', '.join(f"{k}={v!r}" for k, v in self.params.items())
        return f"{type(self).__name__}({args})"


class ImageTransform(ImageProcessor):
    """
    Abstract base class for buffer-to-buffer transforms.

    Subclasses implement ``apply``, which reads a source ``RasterBuffer``
    and returns a freshly allocated ``RasterBuffer`` of the same
    dimensions. The source is never modified.
    """

    @abstractmethod
    def apply(self, source: RasterBuffer, **kwargs: Any) -> RasterBuffer:
        """
        Apply the transform to a source buffer.

        Parameters
        ----------
        source : RasterBuffer
            Input image.

        Returns
        -------
        RasterBuffer
            Transformed image with the same width and height.
        """
        ...


class ColorChannelMixin:
    """Mixin that runs a transform on the colour planes of a buffer.

    When mixed into an ``ImageTransform`` subclass, this provides
    ``apply()``: the source is validated, its ``R, G, B`` planes are
    handed to ``_apply_rgb()`` as a ``(rows, cols, 3)`` float64 array, the
    result is saturated to bytes, and the source alpha plane is copied into
    the new buffer unchanged.

    Usage
    -----
    ::

        class Invert(ColorChannelMixin, ImageTransform):
            def _apply_rgb(self, rgb, **kwargs):
                return 255.0 - rgb
    """

    def apply(self, source: RasterBuffer, **kwargs: Any) -> RasterBuffer:
        """Apply the colour-plane transform.

        Parameters
        ----------
        source : RasterBuffer
            Input image.

        Returns
        -------
        RasterBuffer
            New buffer, same dimensions, alpha identical to *source*.

        Raises
        ------
        InvalidInputError
            If *source* is not a ``RasterBuffer``.
        ProcessorError
            If ``_apply_rgb`` returns planes of a different shape.
        """
        source = require_buffer(source, 'source')
        pixels = source.as_array()
        rgb = pixels[..., :ALPHA].astype(np.float64)

        result = self._apply_rgb(rgb, **kwargs)
        if result.shape != rgb.shape:
            raise ProcessorError(
                f"{type(self).__name__} produced shape {result.shape}, "
                f"expected {rgb.shape}"
            )

        out = np.empty(source.shape, dtype=np.uint8)
        out[..., :ALPHA] = saturate(result)
        out[..., ALPHA] = pixels[..., ALPHA]
        self._report_progress(kwargs, 1.0)
        return source.with_pixels(out)

    @abstractmethod
    def _apply_rgb(self, rgb: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Transform the colour planes.

        Parameters
        ----------
        rgb : np.ndarray
            ``(rows, cols, 3)`` float64 array with values in [0, 255].

        Returns
        -------
        np.ndarray
            Real-valued array of the same shape. Values are rounded and
            clamped by the caller.
        """
        ...
