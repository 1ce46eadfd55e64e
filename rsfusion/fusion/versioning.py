# -*- coding: utf-8 -*-
"""
Processor Versioning - Version and capability decorators for fusion processors.

Provides the ``@processor_version`` class decorator that stamps a
semantic version string on a processor class, and ``@processor_tags``
that records which image modalities a processor is designed for. The
version is written into saved outputs so results can be traced to the
algorithm revision that produced them.

Author
------
Steven Siebert

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

# Standard library
import importlib.metadata
from typing import Optional, Sequence, Type, TypeVar

# rsfusion internal
from rsfusion.vocabulary import ImageModality

T = TypeVar('T')


def processor_version(version: Optional[str] = None):
    """Class decorator that stamps a processor version on a processor class.

    Sets ``__processor_version__`` as a class attribute. If no version
    is given it is taken from the installed ``rsfusion`` distribution
    metadata, or ``'unknown'`` when the package is not installed.

    Parameters
    ----------
    version : str, optional
        Semantic version string (e.g., ``'1.0.0'``).

    Returns
    -------
    Callable
        Class decorator.

    Examples
    --------
    >>> @processor_version('1.0.0')
    ... class MyFusion(FusionProcessor):
    ...     pass
    >>> MyFusion.__processor_version__
    '1.0.0'
    """
    def decorator(cls: Type[T]) -> Type[T]:
        if version:
            cls.__processor_version__ = version
        else:
            try:
                cls.__processor_version__ = importlib.metadata.version('rsfusion')
            except importlib.metadata.PackageNotFoundError:
                cls.__processor_version__ = "unknown"
        return cls
    return decorator


def processor_tags(
    modalities: Optional[Sequence[ImageModality]] = None,
    description: Optional[str] = None,
):
    """Class decorator for processor capability metadata.

    Stamps ``__processor_tags__`` on the class as a dict with
    ``'modalities'`` (tuple of ``ImageModality``) and ``'description'``.

    Parameters
    ----------
    modalities : Sequence[ImageModality], optional
        Imagery modalities this processor is designed for.
    description : str, optional
        Short human-readable description.

    Raises
    ------
    TypeError
        If any element of *modalities* is not an ``ImageModality``.
    """
    mods = tuple(modalities) if modalities else ()
    for m in mods:
        if not isinstance(m, ImageModality):
            raise TypeError(
                f"modalities must contain ImageModality members, "
                f"got {type(m).__name__}"
            )

    def decorator(cls: Type[T]) -> Type[T]:
        cls.__processor_tags__ = {
            'modalities': mods,
            'description': description,
        }
        return cls
    return decorator
