# -*- coding: utf-8 -*-
"""
Compatibility Validation - Precondition gate for two-image fusion.

Checks that both inputs are ``RasterImage`` instances and that they
share the same spatial extent and pixel grid. No cropping, resampling or
reprojection is attempted; inputs must already be co-registered.

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
from typing import Any

# rsfusion internal
from rsfusion.exceptions import ExtentMismatchError, UnsupportedTypeError
from rsfusion.raster import is_raster_image

logger = logging.getLogger(__name__)


def validate_compatibility(x: Any, y: Any) -> None:
    """Verify that two inputs can be stacked pixel for pixel.

    Parameters
    ----------
    x, y : RasterImage
        Inputs to fuse.

    Raises
    ------
    UnsupportedTypeError
        If either input is not a ``RasterImage``. The message names
        every offending type.
    ExtentMismatchError
        If the extents differ, or the extents agree but the pixel grids
        ``(rows, cols)`` do not.
    """
    offending = [
        f"{label}={type(obj).__name__}"
        for label, obj in (('x', x), ('y', y))
        if not is_raster_image(obj)
    ]
    if offending:
        raise UnsupportedTypeError(
            f"Unsupported input type(s): {', '.join(offending)}. "
            f"Both inputs must be RasterImage instances."
        )

    if not x.extent.matches(y.extent):
        raise ExtentMismatchError(
            f"The extents of the images are different: "
            f"x={tuple(x.extent)}, y={tuple(y.extent)}"
        )
    if x.grid_shape != y.grid_shape:
        raise ExtentMismatchError(
            f"The pixel grids of the images are different: "
            f"x={x.grid_shape}, y={y.grid_shape}"
        )

    if x.crs and y.crs and x.crs != y.crs:
        logger.warning(
            "Inputs share an extent but declare different CRS "
            "(%s vs %s); fusing as-is", x.crs, y.crs,
        )
    logger.debug(
        "Inputs compatible: grid %s, %d + %d bands",
        x.grid_shape, x.n_bands, y.n_bands,
    )
