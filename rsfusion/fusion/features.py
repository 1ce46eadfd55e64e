# -*- coding: utf-8 -*-
"""
Feature Matrix - Flatten a band stack into a (pixels, bands) table.

Turns a stacked ``RasterImage`` into the 2-D matrix the PCA works on,
one row per pixel in raster scan (row-major) order and one column per
band. Tracks which pixels are complete (no missing value in any band)
and, when incomplete rows are dropped, the original pixel index of every
retained row so component scores can be written back to the grid.

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
from dataclasses import dataclass
from typing import Tuple

# Third-party
import numpy as np

# rsfusion internal
from rsfusion.raster import RasterImage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeatureMatrix:
    """Pixels-by-bands table with its completeness bookkeeping.

    Attributes
    ----------
    values : np.ndarray
        Shape ``(n_rows, n_bands)``, float64. Missing values are NaN.
    valid_mask : np.ndarray
        Shape ``(rows * cols,)``, bool. True where a pixel has a value
        in every band. Always covers the full grid.
    pixel_index : np.ndarray
        Shape ``(n_rows,)``, int64. Raster-scan index of each row of
        ``values``, strictly increasing.
    band_names : Tuple[str, ...]
        Column labels.
    grid_shape : Tuple[int, int]
        ``(rows, cols)`` of the source raster.
    dropped_incomplete : bool
        Whether incomplete pixels were removed from ``values``.
    """

    values: np.ndarray
    valid_mask: np.ndarray
    pixel_index: np.ndarray
    band_names: Tuple[str, ...]
    grid_shape: Tuple[int, int]
    dropped_incomplete: bool

    @property
    def n_rows(self) -> int:
        return self.values.shape[0]

    @property
    def n_bands(self) -> int:
        return self.values.shape[1]

    @property
    def n_pixels(self) -> int:
        """Pixels in the source grid, retained or not."""
        return self.valid_mask.shape[0]

    @property
    def n_incomplete(self) -> int:
        """Pixels with at least one missing band value."""
        return int(self.n_pixels - np.count_nonzero(self.valid_mask))

    @property
    def has_missing(self) -> bool:
        """Whether ``values`` still contains missing entries."""
        return bool(np.isnan(self.values).any())


def build_feature_matrix(
    stacked: RasterImage,
    drop_incomplete: bool = False,
) -> FeatureMatrix:
    """Flatten a band stack into a feature matrix.

    Parameters
    ----------
    stacked : RasterImage
        Band stack, shape ``(bands, rows, cols)``.
    drop_incomplete : bool
        If True, rows with any missing value are excluded and their
        positions omitted from ``pixel_index``. If False, every pixel
        is kept and missing entries stay NaN for the PCA step to
        reject. Default False.

    Returns
    -------
    FeatureMatrix
    """
    n_bands, rows, cols = stacked.shape
    values = stacked.data.reshape(n_bands, rows * cols).T.astype(np.float64)
    missing = stacked.missing_mask().reshape(n_bands, rows * cols).T
    values[missing] = np.nan
    valid_mask = ~missing.any(axis=1)

    if drop_incomplete:
        pixel_index = np.flatnonzero(valid_mask).astype(np.int64)
        values = values[valid_mask]
    else:
        pixel_index = np.arange(rows * cols, dtype=np.int64)

    logger.debug(
        "Feature matrix %s from %d pixels (%d incomplete, dropped=%s)",
        values.shape, rows * cols, rows * cols - int(valid_mask.sum()),
        drop_incomplete,
    )
    return FeatureMatrix(
        values=values,
        valid_mask=valid_mask,
        pixel_index=pixel_index,
        band_names=tuple(stacked.band_names),
        grid_shape=(rows, cols),
        dropped_incomplete=bool(drop_incomplete),
    )
