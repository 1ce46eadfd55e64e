# -*- coding: utf-8 -*-
"""
Processor Settings - Typed, validated keyword settings via typing.Annotated.

A fusion processor declares its settings as ``Annotated`` class-body
fields carrying ``Desc`` and, for enumerated settings, ``Options``
markers::

    class MyFusion(FusionProcessor):
        standardize: Annotated[bool, Desc('Use the correlation matrix')] = True
        output_dtype: Annotated[str, Options('float64', 'float32')] = 'float64'

``FusionProcessor.__init_subclass__`` turns those fields into a tuple of
``ParamSpec`` records (``__param_specs__``) and, unless the class writes
its own, a keyword-only ``__init__`` that validates every value.

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
import inspect
from dataclasses import dataclass
from typing import (
    Annotated,
    Any,
    Callable,
    Iterator,
    Optional,
    Tuple,
    get_origin,
    get_type_hints,
)

# Third-party
import numpy as np

# rsfusion internal
from rsfusion.exceptions import ValidationError


class ParamMeta:
    """Marks an ``Annotated`` field as a processor setting."""


class Options(ParamMeta):
    """Restrict a setting to a fixed set of values.

    Parameters
    ----------
    *choices
        Allowed values; at least one.
    """

    __slots__ = ('choices',)

    def __init__(self, *choices: Any) -> None:
        if not choices:
            raise ValueError("Options needs at least one allowed value")
        self.choices = tuple(choices)

    def __repr__(self) -> str:
        return f"Options{self.choices!r}"


class Desc(ParamMeta):
    """One-line description of a setting, used in reprs and reports."""

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Desc({self.text!r})"


class _Required:
    """Default placeholder for settings that must be passed explicitly."""

    def __repr__(self) -> str:
        return '<required>'


REQUIRED = _Required()


def _type_matches(param_type: type, value: Any) -> bool:
    if param_type is object:
        return True
    if param_type is bool:
        return isinstance(value, (bool, np.bool_))
    if isinstance(value, (bool, np.bool_)):
        return False
    if param_type is float:
        return isinstance(value, (int, float, np.integer, np.floating))
    if param_type is int:
        return isinstance(value, (int, np.integer))
    return isinstance(value, param_type)


@dataclass(frozen=True)
class ParamSpec:
    """One declared processor setting.

    Attributes
    ----------
    name : str
        Keyword name of the setting.
    param_type : type
        Expected type. ``float`` also accepts integers; ``bool`` accepts
        only ``bool`` and ``numpy.bool_``, never integers.
    default : Any
        Value used when the keyword is omitted, or ``REQUIRED``.
    description : str
        Text from the ``Desc`` marker.
    choices : tuple, optional
        Allowed values from the ``Options`` marker.
    """

    name: str
    param_type: type
    default: Any = REQUIRED
    description: str = ''
    choices: Optional[Tuple[Any, ...]] = None

    @property
    def required(self) -> bool:
        return self.default is REQUIRED

    def validate(self, value: Any) -> None:
        """Check *value* against the declared type and choices.

        Raises
        ------
        ValidationError
            On a type mismatch or a value outside ``choices``.
        """
        if not _type_matches(self.param_type, value):
            raise ValidationError(
                f"Parameter '{self.name}' must be "
                f"{self.param_type.__name__}, got {type(value).__name__}"
            )
        if self.choices is not None and value not in self.choices:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is not in allowed choices {self.choices!r}"
            )


def _declared_names(cls: type) -> Iterator[str]:
    """Annotated names in MRO order, base classes first, no repeats."""
    seen = set()
    for klass in reversed(cls.__mro__):
        for name in inspect.get_annotations(klass):
            if name not in seen:
                seen.add(name)
                yield name


def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Build ``ParamSpec`` records from the ``Annotated`` settings of *cls*.

    Fields without a ``ParamMeta`` marker are ordinary annotations and
    are skipped. Annotations that cannot be resolved yield no specs.
    """
    try:
        hints = get_type_hints(cls, include_extras=True)
    except (NameError, TypeError):
        return ()

    specs = []
    for name in _declared_names(cls):
        hint = hints.get(name)
        if hint is None or get_origin(hint) is not Annotated:
            continue
        markers = [m for m in hint.__metadata__ if isinstance(m, ParamMeta)]
        if not markers:
            continue
        desc = next((m.text for m in markers if isinstance(m, Desc)), '')
        options = next((m.choices for m in markers if isinstance(m, Options)),
                       None)
        specs.append(ParamSpec(
            name=name,
            param_type=hint.__origin__,
            default=getattr(cls, name, REQUIRED),
            description=desc,
            choices=options,
        ))
    return tuple(specs)


def _make_init(specs: Tuple[ParamSpec, ...]) -> Callable[..., None]:
    """Keyword-only ``__init__`` that validates and stores each setting.

    Calls ``self.__post_init__()`` afterwards when the class defines it.
    """
    known = frozenset(s.name for s in specs)

    def __init__(self, **kwargs):
        unexpected = set(kwargs) - known
        if unexpected:
            raise TypeError(
                f"{type(self).__name__}() got unexpected keyword "
                f"arguments: {', '.join(sorted(unexpected))}"
            )
        for spec in specs:
            value = kwargs.get(spec.name, spec.default)
            if value is REQUIRED:
                raise TypeError(
                    f"{type(self).__name__}() missing required keyword "
                    f"argument: '{spec.name}'"
                )
            spec.validate(value)
            setattr(self, spec.name, value)
        post_init = getattr(self, '__post_init__', None)
        if post_init is not None:
            post_init()

    self_param = inspect.Parameter(
        'self', inspect.Parameter.POSITIONAL_OR_KEYWORD)
    __init__.__signature__ = inspect.Signature([self_param] + [
        inspect.Parameter(
            s.name, inspect.Parameter.KEYWORD_ONLY,
            default=inspect.Parameter.empty if s.required else s.default,
        )
        for s in specs
    ])
    __init__.__qualname__ = '__init__'
    return __init__
