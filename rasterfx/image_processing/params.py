# -*- coding: utf-8 -*-
"""
Tunable Parameter Annotations - Declarative parameter constraints via typing.Annotated.

Provides constraint marker types (``Range``, ``Options``, ``Desc``) for use
inside ``typing.Annotated`` annotations on ``ImageProcessor`` subclasses, plus
the ``ParamSpec`` introspection class and collection/init-generation utilities
consumed by ``ImageProcessor.__init_subclass__``.

Usage
-----
Declare tunable parameters as class-body annotations::

    from typing import Annotated
    from rasterfx.image_processing.params import Range, Desc

    class Sharpen(ImageTransform):
        intensity: Annotated[int, Range(min=1, max=100), Desc('Strength')] = 50

Parameters are collected into ``cls.__param_specs__`` at class definition
time. An ``__init__`` is auto-generated unless the class defines its own.
Range and choice violations raise ``InvalidParameterError``; values of the
wrong type raise ``TypeError``.

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
import inspect
import math
import numbers
from typing import (
    Annotated,
    Any,
    Optional,
    Tuple,
    Union,
    get_origin,
    get_type_hints,
)

# rasterfx internal
from rasterfx.exceptions import InvalidParameterError


# =====================================================================
# Constraint marker types  (used inside Annotated[...])
# =====================================================================

class ParamMeta:
    """Base marker for tunable parameter metadata in ``Annotated`` types."""


class Range(ParamMeta):
    """Inclusive numeric range constraint.

    Parameters
    ----------
    min : int or float, optional
        Minimum allowed value (inclusive).
    max : int or float, optional
        Maximum allowed value (inclusive).
    """

    __slots__ = ('min', 'max')

    def __init__(
        self,
        min: Optional[Union[int, float]] = None,
        max: Optional[Union[int, float]] = None,
    ) -> None:
        if min is not None and max is not None and min > max:
            raise ValueError(f"Range min {min!r} exceeds max {max!r}")
        self.min = min
        self.max = max

    def __repr__(self) -> str:
        parts = []
        if self.min is not None:
            parts.append(f"min={self.min!r}")
        if self.max is not None:
            parts.append(f"max={self.max!r}")
        return f"Range({', '.join(parts)})"


class Options(ParamMeta):
    """Discrete choice constraint.

    Parameters
    ----------
    *choices
        Allowed values.  Must supply at least one.
    """

    __slots__ = ('choices',)

    def __init__(self, *choices: Any) -> None:
        if not choices:
            raise ValueError("Options requires at least one choice")
        self.choices = choices

    def __repr__(self) -> str:
        return f"Options{self.choices!r}"


class Desc(ParamMeta):
    """Human-readable parameter description."""

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Desc({self.text!r})"


# =====================================================================
# ParamSpec
# =====================================================================

_SENTINEL = object()


class ParamSpec:
    """Resolved specification for a single tunable parameter.

    Built from ``Annotated`` declarations by ``collect_param_specs``.

    Attributes
    ----------
    name : str
        Parameter name (keyword-argument key).
    param_type : type
        Expected Python type (``float``, ``int``, ``str``, ...).
    default : Any
        Default value, or ``None`` if the parameter is required.
    description : str
        Human-readable description.
    min_value, max_value : int, float, or None
        Inclusive bounds (from ``Range``).
    choices : tuple or None
        Allowed values (from ``Options``).
    """

    __slots__ = (
        'name', 'param_type', 'default', '_has_default',
        'description', 'min_value', 'max_value', 'choices',
    )

    def __init__(
        self,
        name: str,
        param_type: type,
        default: Any,
        has_default: bool,
        description: str,
        min_value: Optional[Union[int, float]],
        max_value: Optional[Union[int, float]],
        choices: Optional[Tuple],
    ) -> None:
        self.name = name
        self.param_type = param_type
        self.default = default
        self._has_default = has_default
        self.description = description
        self.min_value = min_value
        self.max_value = max_value
        self.choices = choices

    @property
    def required(self) -> bool:
        """Whether this parameter has no default."""
        return not self._has_default

    def _check_type(self, value: Any) -> None:
        if self.param_type is object:
            return
        # bool is an int subclass but never a valid level or intensity.
        if isinstance(value, bool) and self.param_type is not bool:
            ok = False
        elif self.param_type is float:
            ok = isinstance(value, numbers.Real)
        elif self.param_type is int:
            ok = isinstance(value, numbers.Integral)
        else:
            ok = isinstance(value, self.param_type)
        if not ok:
            raise TypeError(
                f"Parameter '{self.name}' must be "
                f"{self.param_type.__name__}, got {type(value).__name__}"
            )

    def validate(self, value: Any) -> None:
        """Validate *value* against this spec's type and constraints.

        Any real number (numpy scalars included) is accepted where ``float``
        is declared, and any integral number where ``int`` is. Range bounds
        are inclusive. Non-finite values never satisfy a range.

        Raises
        ------
        TypeError
            If *value* has the wrong type.
        InvalidParameterError
            If *value* violates range or choices constraints.
        """
        self._check_type(value)

        if self.min_value is not None or self.max_value is not None:
            if isinstance(value, numbers.Real) and not math.isfinite(value):
                raise InvalidParameterError(
                    f"Parameter '{self.name}' must be finite, got {value!r}"
                )
        if self.min_value is not None and value < self.min_value:
            raise InvalidParameterError(
                f"Parameter '{self.name}' value {value!r} "
                f"is below minimum {self.min_value!r}"
            )
        if self.max_value is not None and value > self.max_value:
            raise InvalidParameterError(
                f"Parameter '{self.name}' value {value!r} "
                f"is above maximum {self.max_value!r}"
            )
        if self.choices is not None and value not in self.choices:
            raise InvalidParameterError(
                f"Parameter '{self.name}' value {value!r} "
                f"is not in allowed choices {self.choices!r}"
            )

    def __repr__(self) -> str:
        parts = (
            f"ParamSpec(name={self.name!r}, "
            f"param_type={self.param_type.__name__}, "
            f"required={self.required!r}"
        )
        if not self.required:
            parts += f", default={self.default!r}"
        if self.min_value is not None:
            parts += f", min_value={self.min_value!r}"
        if self.max_value is not None:
            parts += f", max_value={self.max_value!r}"
        if self.choices is not None:
            parts += f", choices={self.choices!r}"
        return parts + ")"


# =====================================================================
# Annotation collection
# =====================================================================

def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Parse ``Annotated`` type hints on *cls* into a tuple of ``ParamSpec``.

    Only fields whose metadata includes a ``ParamMeta`` instance are
    collected, ordered parent-first by MRO and by declaration order within
    each class.

    Raises
    ------
    TypeError
        If a field has both ``Range`` and ``Options`` constraints.
    """
    try:
        hints = get_type_hints(cls, include_extras=True)
    except (NameError, TypeError):
        return ()

    seen: set = set()
    ordered_names: list = []
    for klass in reversed(cls.__mro__):
        for name in getattr(klass, '__annotations__', {}):
            if name not in seen and name in hints:
                seen.add(name)
                ordered_names.append(name)

    specs: list = []
    for name in ordered_names:
        hint = hints[name]
        if get_origin(hint) is not Annotated:
            continue

        param_metas = [m for m in hint.__metadata__ if isinstance(m, ParamMeta)]
        if not param_metas:
            continue

        range_meta = next((m for m in param_metas if isinstance(m, Range)), None)
        options_meta = next((m for m in param_metas if isinstance(m, Options)), None)
        desc_meta = next((m for m in param_metas if isinstance(m, Desc)), None)

        if range_meta and options_meta:
            raise TypeError(
                f"Parameter '{name}' on {cls.__qualname__}: "
                f"Range and Options are mutually exclusive."
            )

        default = getattr(cls, name, _SENTINEL)
        has_default = default is not _SENTINEL

        specs.append(ParamSpec(
            name=name,
            param_type=hint.__args__[0],
            default=default if has_default else None,
            has_default=has_default,
            description=desc_meta.text if desc_meta else '',
            min_value=range_meta.min if range_meta else None,
            max_value=range_meta.max if range_meta else None,
            choices=options_meta.choices if options_meta else None,
        ))

    return tuple(specs)


# =====================================================================
# __init__ generation
# =====================================================================

def _make_init(param_specs: Tuple[ParamSpec, ...]):
    """Build a keyword-only ``__init__`` from *param_specs*.

    The generated function falls back to each spec's default, validates
    every value, stores it on the instance, rejects unexpected keywords,
    and finally calls ``__post_init__`` when the class defines one.
    """
    _specs = param_specs
    expected = {s.name for s in _specs}

    def __init__(self, **kwargs):
        unexpected = set(kwargs) - expected
        if unexpected:
            raise TypeError(
                f"{type(self).__name__}() got unexpected "
                f"keyword arguments: {', '.join(sorted(unexpected))}"
            )
        for spec in _specs:
            if spec.name in kwargs:
                value = kwargs[spec.name]
            elif spec._has_default:
                value = spec.default
            else:
                raise TypeError(
                    f"{type(self).__name__}() missing required "
                    f"keyword argument: '{spec.name}'"
                )
            spec.validate(value)
            object.__setattr__(self, spec.name, value)

        if hasattr(self, '__post_init__'):
            self.__post_init__()

    params = [inspect.Parameter('self', inspect.Parameter.POSITIONAL_OR_KEYWORD)]
    for spec in _specs:
        params.append(inspect.Parameter(
            spec.name,
            inspect.Parameter.KEYWORD_ONLY,
            default=spec.default if spec._has_default else inspect.Parameter.empty,
        ))
    __init__.__signature__ = inspect.Signature(params)
    __init__.__qualname__ = '__init__'

    return __init__
