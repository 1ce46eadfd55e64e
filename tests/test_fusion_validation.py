# -*- coding: utf-8 -*-
"""
Compatibility Validator Tests - Type, extent and grid gate before fusion.

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

import logging

import numpy as np
import pytest

from rsfusion import (
    ExtentMismatchError,
    FusionError,
    RasterImage,
    UnsupportedTypeError,
)
from rsfusion.fusion import validate_compatibility


@pytest.fixture
def pair():
    x = RasterImage(np.arange(8.0).reshape(2, 2, 2), extent=(0, 0, 20, 20))
    y = RasterImage(np.arange(4.0).reshape(2, 2), extent=(0, 0, 20, 20))
    return x, y


# ---------------------------------------------------------------------------
# Type checks
# ---------------------------------------------------------------------------

class TestTypeChecks:
    """Non-raster inputs raise UnsupportedTypeError naming the type."""

    def test_valid_pair_passes(self, pair):
        validate_compatibility(*pair)

    def test_x_not_raster(self, pair):
        _, y = pair
        with pytest.raises(UnsupportedTypeError, match="x=ndarray"):
            validate_compatibility(np.zeros((2, 2)), y)

    def test_y_not_raster(self, pair):
        x, _ = pair
        with pytest.raises(UnsupportedTypeError, match="y=dict"):
            validate_compatibility(x, {})

    def test_both_named(self):
        with pytest.raises(UnsupportedTypeError) as exc_info:
            validate_compatibility([1, 2], 'raster')
        msg = str(exc_info.value)
        assert 'x=list' in msg
        assert 'y=str' in msg

    def test_is_type_error_and_fusion_error(self):
        with pytest.raises(TypeError):
            validate_compatibility(None, None)
        with pytest.raises(FusionError):
            validate_compatibility(None, None)


# ---------------------------------------------------------------------------
# Extent and grid checks
# ---------------------------------------------------------------------------

class TestExtentChecks:
    """Extent or grid mismatch raises ExtentMismatchError."""

    def test_different_extent(self, pair):
        x, _ = pair
        y = RasterImage(np.zeros((2, 2)), extent=(0, 0, 30, 30))
        with pytest.raises(ExtentMismatchError,
                           match="extents of the images are different"):
            validate_compatibility(x, y)

    def test_different_grid_sizes_with_default_extents(self):
        x = RasterImage(np.zeros((2, 2)))
        y = RasterImage(np.zeros((3, 3)))
        with pytest.raises(ExtentMismatchError):
            validate_compatibility(x, y)

    def test_same_extent_different_grid(self):
        x = RasterImage(np.zeros((2, 2)), extent=(0, 0, 10, 10))
        y = RasterImage(np.zeros((5, 5)), extent=(0, 0, 10, 10))
        with pytest.raises(ExtentMismatchError, match="pixel grids"):
            validate_compatibility(x, y)

    @pytest.mark.parametrize("fill", [0.0, np.nan, 1e6])
    def test_mismatch_regardless_of_content(self, fill):
        x = RasterImage(np.full((2, 2), fill), extent=(0, 0, 2, 2))
        y = RasterImage(np.full((2, 2), fill), extent=(1, 1, 3, 3))
        with pytest.raises(ExtentMismatchError):
            validate_compatibility(x, y)

    def test_is_value_error(self, pair):
        x, _ = pair
        y = RasterImage(np.zeros((2, 2)), extent=(5, 5, 25, 25))
        with pytest.raises(ValueError):
            validate_compatibility(x, y)


# ---------------------------------------------------------------------------
# CRS handling
# ---------------------------------------------------------------------------

class TestCRS:
    """A CRS difference on matching extents is logged, not raised."""

    def test_crs_mismatch_logs_warning(self, caplog):
        x = RasterImage(np.zeros((2, 2)), crs='EPSG:32618')
        y = RasterImage(np.ones((2, 2)), crs='EPSG:4326')
        with caplog.at_level(logging.WARNING,
                             logger='rsfusion.fusion.validation'):
            validate_compatibility(x, y)
        assert 'different CRS' in caplog.text

    def test_missing_crs_is_silent(self, caplog):
        x = RasterImage(np.zeros((2, 2)), crs='EPSG:32618')
        y = RasterImage(np.ones((2, 2)))
        with caplog.at_level(logging.WARNING,
                             logger='rsfusion.fusion.validation'):
            validate_compatibility(x, y)
        assert caplog.text == ''
