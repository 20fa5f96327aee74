# -*- coding: utf-8 -*-
"""
Processor Versioning - Version and capability decorators for processors.

Provides the ``@processor_version`` class decorator for stamping semantic
version strings on processor classes, and ``@processor_tags`` for attaching
a ``ProcessorCategory`` and a short description used by collaborators to
list and group the available filters.

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
import importlib.metadata
from typing import Optional, Type, TypeVar

# rasterfx internal
from rasterfx.vocabulary import ProcessorCategory

T = TypeVar('T')


def processor_version(version: Optional[str] = None):
    """Class decorator that stamps a processor version.

    Sets ``__processor_version__`` on the decorated class. When *version*
    is omitted, the installed ``rasterfx`` distribution version is used
    (``'unknown'`` when running from a source checkout).

    Parameters
    ----------
    version : str, optional
        Semantic version string (e.g., ``'1.0.0'``).

    Examples
    --------
    >>> @processor_version('1.0.0')
    ... class Identity(ImageTransform):
    ...     def apply(self, source, **kwargs):
    ...         return source
    >>> Identity.__processor_version__
    '1.0.0'
    """
    def decorator(cls: Type[T]) -> Type[T]:
        if version:
            cls.__processor_version__ = version
        else:
            try:
                cls.__processor_version__ = importlib.metadata.version('rasterfx')
            except importlib.metadata.PackageNotFoundError:
                cls.__processor_version__ = "unknown"
        return cls
    return decorator


def processor_tags(
    category: Optional[ProcessorCategory] = None,
    description: Optional[str] = None,
):
    """Class decorator for processor capability metadata.

    Stamps ``__processor_tags__`` on the class.

    Parameters
    ----------
    category : ProcessorCategory, optional
        Processing category.
    description : str, optional
        Short human-readable description of the processor's purpose.

    Raises
    ------
    TypeError
        If *category* is not a ``ProcessorCategory`` member.
    """
    if category is not None and not isinstance(category, ProcessorCategory):
        raise TypeError(
            f"category must be a ProcessorCategory member, got {category!r}"
        )

    def decorator(cls: Type[T]) -> Type[T]:
        cls.__processor_tags__ = {
            'category': category,
            'description': description,
        }
        return cls
    return decorator
