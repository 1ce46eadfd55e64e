# -*- coding: utf-8 -*-
"""
rsfusion Vocabulary - Enumerations shared across the fusion library.

Defines the image modalities a raster can be tagged with, the matrix a
PCA decomposition is computed from, and the output formats understood by
the writer factory.

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

from enum import Enum


class ImageModality(Enum):
    """Sensor modality a raster was acquired with.

    Fusion does not depend on the modality; it is carried on
    ``RasterImage`` so reports and outputs can say what was fused.
    """

    PAN = "PAN"
    SAR = "SAR"
    MSI = "MSI"
    HSI = "HSI"
    EO = "EO"
    LWIR = "LWIR"


class DecompositionBasis(Enum):
    """Matrix the principal components are extracted from.

    ``CORRELATION`` corresponds to standardized bands (zero mean, unit
    variance); ``COVARIANCE`` to bands that are only centered.
    """

    COVARIANCE = "covariance"
    CORRELATION = "correlation"

    @classmethod
    def from_standardize(cls, standardize: bool) -> 'DecompositionBasis':
        """Map the ``standardize`` flag onto a basis."""
        return cls.CORRELATION if standardize else cls.COVARIANCE


class OutputFormat(Enum):
    """Supported output file formats for the writer factory."""

    GEOTIFF = "geotiff"
    NUMPY = "numpy"
