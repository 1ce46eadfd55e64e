# -*- coding: utf-8 -*-
"""
Report Tests - Text rendering of fusion results.

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

from rsfusion import RasterImage, fuse, present
from rsfusion.report import format_matrix, format_vector


@pytest.fixture
def result():
    x = RasterImage(np.array([[1.0, 2.0], [3.0, 5.0]]), extent=(0, 0, 20, 20),
                    band_names=['red'])
    y = RasterImage(np.array([[9.0, 6.0], [7.0, 8.0]]), extent=(0, 0, 20, 20),
                    band_names=['vv'])
    return fuse(x, y)


class TestPresent:
    """Section headers and labels appear in order."""

    def test_title_first(self, result):
        text = present(result)
        assert text.splitlines()[0].startswith('*' * 20)
        assert 'FUSION OF IMAGES' in text.splitlines()[0]

    def test_sections_in_order(self, result):
        text = present(result)
        headers = [
            '**** Fused images ****',
            '**** Variance ****',
            '**** Proportion_of_variance ****',
            '**** Cumulative_variance ****',
            '**** Correlation ****',
            '**** Contribution_in_percentage ****',
        ]
        positions = [text.index(h) for h in headers]
        assert positions == sorted(positions)

    def test_raster_summary(self, result):
        text = present(result)
        assert 'dimensions : 2, 2, 4, 2 (nrow, ncol, ncell, nlayers)' in text
        assert 'resolution : 10, 10  (x, y)' in text
        assert 'names      : PC1, PC2' in text
        assert 'crs        : NA' in text

    def test_band_labels(self, result):
        text = present(result)
        assert 'red.1' in text
        assert 'vv.2' in text

    def test_precision(self, result):
        text = present(result, precision=2)
        assert '1.00' in text
        assert '1.0000' not in text


class TestTables:
    """Vector and matrix formatting helpers."""

    def test_format_vector(self):
        lines = format_vector(['PC1', 'PC2'], np.array([0.75, 0.25]))
        assert lines == ['   PC1    PC2', '0.7500 0.2500']

    def test_format_matrix(self):
        lines = format_matrix(
            ['a.1', 'b.2'], ['PC1', 'PC2'],
            np.array([[1.0, -0.5], [0.3, 0.0]]), precision=1,
        )
        assert lines[0] == '    PC1  PC2'
        assert lines[1] == 'a.1 1.0 -0.5'
        assert lines[2] == 'b.2 0.3  0.0'
