# -*- coding: utf-8 -*-
"""
rsfusion - Principal component fusion of co-registered remote sensing images.

Merges the bands of two rasters that cover the same extent on the same
pixel grid (for example an optical scene and a radar scene) and
decomposes the combined band set into principal components, returning
the component rasters along with variance, correlation and contribution
statistics.

Dependencies
------------
numpy
scipy

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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from rsfusion.exceptions import (
    FusionError,
    ValidationError,
    UnsupportedTypeError,
    ExtentMismatchError,
    MissingDataError,
    DegenerateInputError,
    DependencyError,
)
from rsfusion.vocabulary import (
    ImageModality,
    DecompositionBasis,
    OutputFormat,
)
from rsfusion.raster import Extent, RasterImage
from rsfusion.fusion import (
    FusionResult,
    PCAFusion,
    fuse,
)
from rsfusion.report import present

__all__ = [
    'FusionError',
    'ValidationError',
    'UnsupportedTypeError',
    'ExtentMismatchError',
    'MissingDataError',
    'DegenerateInputError',
    'DependencyError',
    'ImageModality',
    'DecompositionBasis',
    'OutputFormat',
    'Extent',
    'RasterImage',
    'FusionResult',
    'PCAFusion',
    'fuse',
    'present',
]
