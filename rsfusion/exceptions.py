# -*- coding: utf-8 -*-
"""
rsfusion Exception Hierarchy - Domain-specific exceptions for image fusion.

Provides a small exception hierarchy that lets callers catch fusion
errors distinctly from Python built-in exceptions. All rsfusion
exceptions subclass both ``FusionError`` and the appropriate built-in
exception, so ``except ValueError`` and ``except FusionError`` both
work.

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


class FusionError(Exception):
    """Base exception for all rsfusion errors."""


class ValidationError(FusionError, ValueError):
    """Invalid parameters or malformed raster construction arguments.

    Raised for band/name count mismatches, non-numeric data, bad
    extents, and out-of-range processor parameters.
    """


class UnsupportedTypeError(FusionError, TypeError):
    """One or both fusion inputs are not a recognized multi-band raster.

    The message names the offending type(s).
    """


class ExtentMismatchError(FusionError, ValueError):
    """The two fusion inputs do not share spatial extent or pixel grid.

    No cropping, resampling or reprojection is attempted; the caller
    must co-register the inputs first.
    """


class MissingDataError(FusionError, ValueError):
    """Missing (no-data) values reached the PCA decomposition.

    Raised when incomplete pixels were not removed before analysis.
    Enable ``drop_incomplete`` to exclude them.
    """


class DegenerateInputError(FusionError, ValueError):
    """Too little usable data to form a PCA decomposition.

    Raised for fewer than two analyzed pixels, a constant band that
    cannot be scaled to unit variance, or zero total variance.
    """


class DependencyError(FusionError, ImportError):
    """Missing optional dependency required for a specific module.

    Raised when a module requires an optional package (rasterio) that
    is not installed.
    """
