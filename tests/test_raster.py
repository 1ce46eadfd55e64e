# -*- coding: utf-8 -*-
"""
RasterImage Tests - Construction, validation and missing-data masks.

Covers 2-D promotion, default extent and band names, constructor
validation, alternate constructors, the missing-value mask for NaN and
sentinel no-data, and ``Extent`` comparison.

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

import numpy as np
import pytest

from rsfusion import Extent, ImageModality, RasterImage, ValidationError
from rsfusion.raster import is_raster_image


# ---------------------------------------------------------------------------
# Construction and defaults
# ---------------------------------------------------------------------------

class TestRasterImageInit:
    """Test construction defaults and shape handling."""

    def test_2d_promoted_to_single_band(self):
        img = RasterImage(np.array([[1.0, 2.0], [3.0, 4.0]]))
        assert img.shape == (1, 2, 2)
        assert img.n_bands == 1

    def test_default_extent_is_pixel_grid(self):
        img = RasterImage(np.zeros((2, 3, 5)))
        assert img.extent == Extent(0.0, 0.0, 5.0, 3.0)

    def test_default_band_names(self):
        img = RasterImage(np.zeros((3, 2, 2)))
        assert img.band_names == ('B1', 'B2', 'B3')

    def test_explicit_metadata(self):
        img = RasterImage(
            np.zeros((2, 4, 4)),
            extent=(100, 200, 140, 240),
            band_names=['red', 'nir'],
            nodata=-9999,
            crs='EPSG:32618',
            modality=ImageModality.MSI,
        )
        assert img.band_names == ('red', 'nir')
        assert img.nodata == -9999.0
        assert img.crs == 'EPSG:32618'
        assert img.modality is ImageModality.MSI
        assert img.resolution == (10.0, 10.0)
        assert img.grid_shape == (4, 4)

    def test_integer_data_accepted(self):
        img = RasterImage(np.arange(4, dtype=np.uint16).reshape(2, 2))
        assert img.data.dtype == np.uint16


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class TestRasterImageValidation:
    """Constructor rejects malformed input with ValidationError."""

    def test_1d_raises(self):
        with pytest.raises(ValidationError, match="2D"):
            RasterImage(np.arange(4.0))

    def test_4d_raises(self):
        with pytest.raises(ValidationError):
            RasterImage(np.zeros((1, 2, 2, 2)))

    def test_complex_raises(self):
        with pytest.raises(ValidationError, match="real-valued"):
            RasterImage(np.zeros((2, 2), dtype=np.complex64))

    def test_string_raises(self):
        with pytest.raises(ValidationError):
            RasterImage(np.array([['a', 'b'], ['c', 'd']]))

    def test_empty_raises(self):
        with pytest.raises(ValidationError, match="empty"):
            RasterImage(np.zeros((1, 0, 3)))

    def test_extent_wrong_length_raises(self):
        with pytest.raises(ValidationError, match="4 values"):
            RasterImage(np.zeros((2, 2)), extent=(0, 0, 1))

    def test_inverted_extent_raises(self):
        with pytest.raises(ValidationError, match="inverted"):
            RasterImage(np.zeros((2, 2)), extent=(10, 0, 0, 10))

    def test_band_name_count_mismatch_raises(self):
        with pytest.raises(ValidationError, match="band names"):
            RasterImage(np.zeros((2, 2, 2)), band_names=['only'])

    def test_duplicate_band_names_raise(self):
        with pytest.raises(ValidationError, match="unique"):
            RasterImage(np.zeros((2, 2, 2)), band_names=['a', 'a'])

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            RasterImage(np.arange(4.0))


# ---------------------------------------------------------------------------
# Alternate constructors
# ---------------------------------------------------------------------------

class TestRasterImageConstructors:
    """from_array and from_bands."""

    def test_from_array_forwards_kwargs(self):
        img = RasterImage.from_array(
            np.ones((3, 3)), extent=(0, 0, 30, 30), nodata=0,
        )
        assert img.nodata == 0.0
        assert img.extent.width == 30.0

    def test_from_bands_preserves_order(self):
        bands = {
            'vv': np.full((2, 2), 1.0),
            'vh': np.full((2, 2), 2.0),
        }
        img = RasterImage.from_bands(bands, extent=(0, 0, 2, 2))
        assert img.band_names == ('vv', 'vh')
        np.testing.assert_array_equal(img.band('vh'), np.full((2, 2), 2.0))

    def test_from_bands_shape_mismatch_raises(self):
        bands = {'a': np.zeros((2, 2)), 'b': np.zeros((3, 3))}
        with pytest.raises(ValidationError, match="same shape"):
            RasterImage.from_bands(bands)

    def test_from_bands_empty_raises(self):
        with pytest.raises(ValidationError):
            RasterImage.from_bands({})


# ---------------------------------------------------------------------------
# Missing data and accessors
# ---------------------------------------------------------------------------

class TestRasterImageMissing:
    """missing_mask marks NaN and the sentinel."""

    def test_nan_is_missing_without_sentinel(self):
        img = RasterImage(np.array([[np.nan, 1.0], [2.0, 3.0]]))
        mask = img.missing_mask()
        assert mask.shape == (1, 2, 2)
        assert mask[0, 0, 0]
        assert mask.sum() == 1

    def test_sentinel_is_missing(self):
        img = RasterImage(np.array([[-9999.0, 1.0], [2.0, np.nan]]),
                          nodata=-9999)
        assert img.missing_mask().sum() == 2

    def test_integer_sentinel(self):
        data = np.array([[0, 5], [6, 7]], dtype=np.int16)
        img = RasterImage(data, nodata=0)
        np.testing.assert_array_equal(
            img.missing_mask()[0], [[True, False], [False, False]],
        )

    def test_nan_sentinel(self):
        img = RasterImage(np.array([[np.nan, 1.0]]), nodata=np.nan)
        assert img.missing_mask().sum() == 1

    def test_band_unknown_name_raises_key_error(self):
        img = RasterImage(np.zeros((2, 2)))
        with pytest.raises(KeyError):
            img.band('nope')

    def test_to_dict(self):
        img = RasterImage(np.zeros((2, 3, 4)), modality=ImageModality.SAR)
        d = img.to_dict()
        assert d['bands'] == 2
        assert d['rows'] == 3
        assert d['cols'] == 4
        assert d['modality'] == 'SAR'
        assert d['extent'] == (0.0, 0.0, 4.0, 3.0)

    def test_repr(self):
        assert 'RasterImage(bands=1' in repr(RasterImage(np.zeros((2, 2))))

    def test_is_raster_image(self):
        assert is_raster_image(RasterImage(np.zeros((2, 2))))
        assert not is_raster_image(np.zeros((2, 2)))


# ---------------------------------------------------------------------------
# Extent
# ---------------------------------------------------------------------------

class TestExtent:
    """Extent geometry and tolerant comparison."""

    def test_width_height(self):
        ext = Extent(10.0, 20.0, 40.0, 60.0)
        assert ext.width == 30.0
        assert ext.height == 40.0

    def test_matches_identical(self):
        assert Extent(0, 0, 2, 2).matches(Extent(0, 0, 2, 2))

    def test_matches_within_rounding(self):
        a = Extent(500000.0, 4000000.0, 510000.0, 4010000.0)
        b = Extent(500000.0, 4000000.0 + 1e-6, 510000.0, 4010000.0)
        assert a.matches(b)

    def test_different_extent_does_not_match(self):
        assert not Extent(0, 0, 2, 2).matches(Extent(0, 0, 3, 3))
