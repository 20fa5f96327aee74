# -*- coding: utf-8 -*-
"""
Pipelines - Sequential transform chains and request dispatch.

``Pipeline`` chains ``ImageTransform`` instances, feeding each output into
the next. ``TransformPipeline`` is the single entry point collaborators
call: it takes a source ``RasterBuffer`` and a ``FilterRequest``, builds
the matching processor, runs it, and checks that the output has the
source dimensions. Each call moves through
``IDLE -> PROCESSING -> DONE | FAILED``.

``TransformPipeline.apply`` raises ``RasterFxError`` subclasses on bad
input. ``TransformPipeline.run`` returns the same outcome as an explicit
``TransformResult`` value instead of raising.

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
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

# rasterfx internal
from rasterfx.exceptions import InvalidParameterError, ProcessorError, RasterFxError
from rasterfx.image_processing.base import ImageTransform
from rasterfx.image_processing.convolution import validate_workers
from rasterfx.image_processing.requests import FilterRequest, is_filter_request
from rasterfx.raster import RasterBuffer, require_buffer
from rasterfx.vocabulary import PipelineState

logger = logging.getLogger(__name__)


class Pipeline(ImageTransform):
    """Sequential chain of image transforms.

    Applies a sequence of ``ImageTransform`` instances in order, passing
    the output of each as the input to the next. The pipeline itself is an
    ``ImageTransform``, so it can be nested inside other pipelines.

    Parameters
    ----------
    steps : Sequence[ImageTransform]
        Ordered transforms. Must contain at least one.

    Examples
    --------
    >>> from rasterfx.image_processing import Grayscale, Sharpen, Pipeline
    >>> pipe = Pipeline([Grayscale(method='average'), Sharpen(intensity=70)])
    >>> result = pipe.apply(buffer)

    With progress reporting:

    >>> result = pipe.apply(buffer, progress_callback=lambda f: print(f"{f:.0%}"))
    """

    __processor_version__ = '1.0.0'

    def __init__(self, steps: Sequence[ImageTransform]) -> None:
        if not steps:
            raise ValueError("Pipeline requires at least one transform")
        for i, step in enumerate(steps):
            if not isinstance(step, ImageTransform):
                raise TypeError(
                    f"Step {i} is not an ImageTransform: {type(step).__name__}"
                )
        self._steps: List[ImageTransform] = list(steps)

    @property
    def steps(self) -> List[ImageTransform]:
        """Shallow copy of the step list."""
        return list(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        step_names = [type(s).__name__ for s in self._steps]
        return f"Pipeline({step_names})"

    def apply(self, source: RasterBuffer, **kwargs: Any) -> RasterBuffer:
        """Apply all transforms in sequence.

        Parameters
        ----------
        source : RasterBuffer
            Input image.
        **kwargs
            Forwarded to each step's ``apply()``. ``progress_callback`` is
            intercepted and rescaled so each step reports its share of
            overall progress.

        Returns
        -------
        RasterBuffer
            Output after all transforms have been applied.
        """
        n = len(self._steps)
        outer_cb = kwargs.pop('progress_callback', None)

        result = source
        for i, step in enumerate(self._steps):
            logger.debug("Pipeline step %d/%d: %s", i + 1, n,
                         type(step).__qualname__)

            step_kwargs = dict(kwargs)
            if outer_cb is not None:
                base = i / n
                scale = 1.0 / n
                step_kwargs['progress_callback'] = (
                    lambda f, _b=base, _s=scale: outer_cb(_b + f * _s)
                )

            result = step.apply(result, **step_kwargs)

            if outer_cb is not None:
                outer_cb((i + 1) / n)

        return result


@dataclass(frozen=True)
class TransformResult:
    """Outcome of one ``TransformPipeline.run`` call.

    Attributes
    ----------
    state : PipelineState
        ``DONE`` or ``FAILED``.
    buffer : RasterBuffer or None
        The output buffer when ``state`` is ``DONE``.
    error : RasterFxError or None
        The failure when ``state`` is ``FAILED``.
    """

    state: PipelineState
    buffer: Optional[RasterBuffer] = None
    error: Optional[RasterFxError] = None

    @property
    def ok(self) -> bool:
        return self.state is PipelineState.DONE

    def unwrap(self) -> RasterBuffer:
        """Return the buffer, or raise the recorded error."""
        if self.error is not None:
            raise self.error
        return self.buffer


class TransformPipeline:
    """Dispatch a ``FilterRequest`` to its operator.

    Colour remap requests (grayscale, contrast, brightness) run a
    per-pixel operator; sharpen, blur, and edge detection derive a kernel
    and run the convolution operator. The source buffer is never
    modified, and the output always has the source's width and height.

    Parameters
    ----------
    workers : int
        Threads used by convolution requests. Default 1.

    Examples
    --------
    >>> from rasterfx.image_processing import TransformPipeline, SharpenRequest
    >>> pipeline = TransformPipeline()
    >>> sharpened = pipeline.apply(buffer, SharpenRequest(intensity=50))
    >>> outcome = pipeline.run(buffer, SharpenRequest(intensity=500))
    >>> outcome.state
    <PipelineState.FAILED: 'failed'>
    """

    def __init__(self, workers: int = 1) -> None:
        self.workers = validate_workers(workers)
        self._state = PipelineState.IDLE

    @property
    def state(self) -> PipelineState:
        """State of the most recent call."""
        return self._state

    def build(self, request: FilterRequest) -> ImageTransform:
        """Build the processor for *request*.

        Raises
        ------
        InvalidParameterError
            If *request* is not a ``FilterRequest`` or its parameter is
            out of range.
        """
        if not is_filter_request(request):
            raise InvalidParameterError(
                f"Expected a FilterRequest, got {type(request).__name__}"
            )
        transform = request.to_transform()
        if request.kind.is_convolution:
            transform.workers = self.workers
        return transform

    def apply(self, source: RasterBuffer, request: FilterRequest) -> RasterBuffer:
        """Run *request* on *source* and return the new buffer.

        Raises
        ------
        InvalidInputError
            If *source* is not a ``RasterBuffer``.
        InvalidParameterError
            If the request or its parameter is invalid.
        ProcessorError
            If the output dimensions differ from the source.
        """
        self._state = PipelineState.PROCESSING
        try:
            source = require_buffer(source, 'source')
            transform = self.build(request)
            logger.debug("Applying %r to %r", transform, source)
            result = transform.apply(source)
            if (result.width, result.height) != (source.width, source.height):
                raise ProcessorError(
                    f"{type(transform).__name__} changed dimensions from "
                    f"{source.width}x{source.height} to "
                    f"{result.width}x{result.height}"
                )
        except Exception:
            self._state = PipelineState.FAILED
            raise
        self._state = PipelineState.DONE
        return result

    def apply_all(
        self,
        source: RasterBuffer,
        requests: Sequence[FilterRequest],
    ) -> RasterBuffer:
        """Run *requests* in order, each on the previous result."""
        if not requests:
            raise InvalidParameterError("apply_all requires at least one request")
        result = source
        for request in requests:
            result = self.apply(result, request)
        return result

    def run(self, source: RasterBuffer, request: FilterRequest) -> TransformResult:
        """Run *request* on *source*, reporting failure as a value.

        ``RasterFxError`` failures are captured in the returned
        ``TransformResult``; other exceptions propagate.
        """
        try:
            buffer = self.apply(source, request)
        except RasterFxError as exc:
            logger.debug("Transform failed: %s", exc)
            return TransformResult(PipelineState.FAILED, error=exc)
        return TransformResult(PipelineState.DONE, buffer=buffer)
