# -*- coding: utf-8 -*-
"""
Data Preparation Module - Feature matrix conditioning before decomposition.

Provides ``BandStandardizer`` for column-wise centering and z-score
scaling of ``(pixels, bands)`` matrices with fit/transform semantics.

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

from rsfusion.data_prep.standardizer import BandStandardizer

__all__ = [
    'BandStandardizer',
]
