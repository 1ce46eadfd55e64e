# -*- coding: utf-8 -*-
"""
Fusion Processor Base Class - Abstract interface for image fusion processors.

Defines ``FusionProcessor``, the common base class for processors that
combine two co-registered rasters into one product. It provides version
checking at first instantiation and ``typing.Annotated``-based tunable
parameter declarations with automatic ``__init__`` generation and
runtime resolution through ``**kwargs``.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

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
import logging
import warnings
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple, TYPE_CHECKING

# rsfusion internal
from rsfusion.exceptions import ValidationError
from rsfusion.fusion.params import ParamSpec, collect_param_specs, _make_init

if TYPE_CHECKING:
    from rsfusion.raster import RasterImage

logger = logging.getLogger(__name__)


class FusionProcessor(ABC):
    """
    Common base class for two-input fusion processors.

    **Version checking**: Concrete subclasses that do not declare a
    processor version via ``@processor_version('x.y.z')`` trigger a
    ``UserWarning`` at first instantiation. The check uses ``__new__``
    so that class decorators have been applied by the time it runs.

    **Tunable parameter flow**: Subclasses declare tunable parameters
    as ``typing.Annotated`` class-body fields using the markers from
    :mod:`rsfusion.fusion.params` (``Options``, ``Desc``).
    ``__init_subclass__`` collects them into ``__param_specs__`` and
    auto-generates a keyword-only ``__init__`` (unless the subclass
    defines its own). At call time ``_resolve_params(kwargs)`` merges
    instance values with keyword overrides and validates them.
    """

    # Track which classes have been checked to warn only once per class.
    _version_warned_classes: set = set()

    #: Built by ``__init_subclass__`` from ``Annotated`` fields.
    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)
        if cls.__param_specs__ and '__init__' not in cls.__dict__:
            cls.__init__ = _make_init(cls.__param_specs__)

    def __new__(cls, *args: Any, **kwargs: Any) -> 'FusionProcessor':
        if cls not in FusionProcessor._version_warned_classes:
            FusionProcessor._version_warned_classes.add(cls)
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
        """Current values of all declared tunable parameters."""
        return {spec.name: getattr(self, spec.name)
                for spec in type(self).__param_specs__}

    def _resolve_params(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge instance values with runtime *kwargs* overrides.

        Parameters
        ----------
        kwargs : Dict[str, Any]
            Runtime keyword arguments. Keys that are not declared
            parameters are ignored.

        Returns
        -------
        Dict[str, Any]
            ``{param_name: resolved_value}`` for every declared param.

        Raises
        ------
        ValidationError
            If a value has the wrong type or is not an allowed choice.
        """
        resolved: Dict[str, Any] = {}
        for spec in type(self).__param_specs__:
            if spec.name in kwargs:
                value = kwargs[spec.name]
            else:
                value = getattr(self, spec.name)
            spec.validate(value)
            resolved[spec.name] = value
        return resolved

    def _reject_unknown(self, kwargs: Dict[str, Any], allowed: Tuple[str, ...] = ()) -> None:
        """Raise if *kwargs* holds keys that are neither params nor *allowed*."""
        known = {s.name for s in type(self).__param_specs__} | set(allowed)
        unknown = set(kwargs) - known
        if unknown:
            raise ValidationError(
                f"{type(self).__name__} got unknown options: "
                f"{', '.join(sorted(unknown))}"
            )

    @abstractmethod
    def fuse(self, x: 'RasterImage', y: 'RasterImage', **kwargs: Any) -> Any:
        """
        Fuse two co-registered rasters.

        Parameters
        ----------
        x : RasterImage
            First input (e.g. optical).
        y : RasterImage
            Second input (e.g. radar).
        **kwargs
            Per-call overrides of tunable parameters.
        """
        ...

    def __repr__(self) -> str:
        args = ', '.join(f"{k}={v!r}" for k, v in self.params.items())
        return f"{type(self).__name__}({args})"
