# -*- coding: utf-8 -*-
"""
Band Stacking - Structural merge of two co-registered rasters.

Concatenates the bands of two rasters into a single ``RasterImage``,
preserving each input's band order and suffixing every band name with
its source index (``.1`` for the first image, ``.2`` for the second) so
that identically named bands never collide.

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

# Third-party
import numpy as np

# rsfusion internal
from rsfusion.raster import RasterImage


def _as_nan_filled(image: RasterImage) -> np.ndarray:
    """Float64 copy of the pixel data with every missing value set to NaN."""
    data = image.data.astype(np.float64)
    data[image.missing_mask()] = np.nan
    return data


def stack_bands(x: RasterImage, y: RasterImage) -> RasterImage:
    """Concatenate the bands of two validated rasters.

    Each input's own no-data sentinel is resolved to NaN before merging,
    so NaN is the only missing-value marker in the stack and the stack
    carries no sentinel. A valid value in one input that equals the
    other input's sentinel stays valid.

    Parameters
    ----------
    x, y : RasterImage
        Inputs already checked by ``validate_compatibility``.

    Returns
    -------
    RasterImage
        ``x.n_bands + y.n_bands`` bands, float64, same extent as both
        inputs, ``nodata=None``. Band names are ``'<name>.1'`` for ``x``
        and ``'<name>.2'`` for ``y``.
    """
    data = np.concatenate([_as_nan_filled(x), _as_nan_filled(y)], axis=0)
    names = ([f"{n}.1" for n in x.band_names]
             + [f"{n}.2" for n in y.band_names])
    return RasterImage(
        data,
        extent=x.extent,
        band_names=names,
        crs=x.crs or y.crs,
    )
