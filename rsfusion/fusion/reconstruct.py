# -*- coding: utf-8 -*-
"""
Component Reconstruction - Scatter PCA scores back onto the raster grid.

Builds a ``RasterImage`` with one band per principal component, on the
same extent and grid as the band stack. Only pixels that were analyzed
receive a score; every other pixel is NaN.

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

# Third-party
import numpy as np

# rsfusion internal
from rsfusion.exceptions import ValidationError
from rsfusion.fusion.features import FeatureMatrix
from rsfusion.fusion.pca import PCAResult
from rsfusion.raster import RasterImage

logger = logging.getLogger(__name__)


def reconstruct_components(
    stacked: RasterImage,
    features: FeatureMatrix,
    pca: PCAResult,
    dtype: str = 'float64',
) -> RasterImage:
    """Write component scores into raster form.

    Pixels without a score are NaN. Scores are centered, so zero and
    any other finite value can be a genuine score; NaN is the only
    marker that never collides with one.

    Parameters
    ----------
    stacked : RasterImage
        The band stack the features were built from; supplies extent,
        grid shape and CRS.
    features : FeatureMatrix
        Supplies ``pixel_index``, the grid position of each score row.
    pca : PCAResult
        Supplies ``scores``.
    dtype : str
        Output dtype, ``'float64'`` or ``'float32'``. Default
        ``'float64'``.

    Returns
    -------
    RasterImage
        Bands ``PC1 .. PCk`` with ``nodata=None``. Each band holds
        exactly ``features.n_rows`` values that are not NaN.

    Raises
    ------
    ValidationError
        If the score rows do not line up with ``pixel_index`` or the
        grid does not match the stack.
    """
    if pca.scores.shape[0] != features.pixel_index.shape[0]:
        raise ValidationError(
            f"{pca.scores.shape[0]} score rows for "
            f"{features.pixel_index.shape[0]} retained pixels"
        )
    if tuple(features.grid_shape) != stacked.grid_shape:
        raise ValidationError(
            f"Feature grid {features.grid_shape} does not match stack "
            f"grid {stacked.grid_shape}"
        )

    rows, cols = stacked.grid_shape
    k = pca.n_components
    out = np.full((k, rows * cols), np.nan, dtype=dtype)
    out[:, features.pixel_index] = pca.scores.T
    logger.debug(
        "Reconstructed %d component bands, %d of %d pixels filled",
        k, features.pixel_index.shape[0], rows * cols,
    )

    return RasterImage(
        out.reshape(k, rows, cols),
        extent=stacked.extent,
        band_names=pca.component_names,
        crs=stacked.crs,
    )
