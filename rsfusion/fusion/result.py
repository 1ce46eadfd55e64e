# -*- coding: utf-8 -*-
"""
Fusion Result - Typed aggregate returned by the fusion pipeline.

Packages the reconstructed component raster with the variance,
proportion of variance, cumulative variance, correlation and
contribution statistics under fixed field names.

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
from dataclasses import dataclass
from typing import Any, Dict, Tuple

# Third-party
import numpy as np

# rsfusion internal
from rsfusion.fusion.pca import PCAResult
from rsfusion.raster import RasterImage
from rsfusion.vocabulary import DecompositionBasis


@dataclass(frozen=True)
class FusionResult:
    """Fused component raster and its statistical summary.

    Attributes
    ----------
    fused_images : RasterImage
        One band per principal component (``PC1 .. PCk``).
    variance : np.ndarray
        Variance of each component, shape ``(k,)``.
    proportion_of_variance : np.ndarray
        Share of total variance per component; sums to 1.
    cumulative_variance : np.ndarray
        Running sum of the proportions; ends at 1.
    correlation : np.ndarray
        Band/component correlations, shape ``(p, k)``.
    contribution_in_pct : np.ndarray
        Band contributions to each component in percent, shape
        ``(p, k)``; columns sum to 100.
    band_names : Tuple[str, ...]
        Row labels of ``correlation`` and ``contribution_in_pct``.
    component_names : Tuple[str, ...]
        Column labels, ``PC1 .. PCk``.
    n_pixels_analyzed : int
        Number of pixels the decomposition was computed from.
    basis : DecompositionBasis
        Covariance or correlation matrix.
    """

    fused_images: RasterImage
    variance: np.ndarray
    proportion_of_variance: np.ndarray
    cumulative_variance: np.ndarray
    correlation: np.ndarray
    contribution_in_pct: np.ndarray
    band_names: Tuple[str, ...]
    component_names: Tuple[str, ...]
    n_pixels_analyzed: int
    basis: DecompositionBasis

    def as_dict(self) -> Dict[str, Any]:
        """The six primary fields under their report names."""
        return {
            'Fused_images': self.fused_images,
            'Variance': self.variance,
            'Proportion_of_variance': self.proportion_of_variance,
            'Cumulative_variance': self.cumulative_variance,
            'Correlation': self.correlation,
            'Contribution_in_pct': self.contribution_in_pct,
        }


def assemble_result(fused_images: RasterImage, pca: PCAResult) -> FusionResult:
    """Package a reconstructed raster and PCA statistics.

    Arrays are copied so the result owns all of its fields.
    """
    return FusionResult(
        fused_images=fused_images,
        variance=pca.variance.copy(),
        proportion_of_variance=pca.proportion.copy(),
        cumulative_variance=pca.cumulative.copy(),
        correlation=pca.correlation.copy(),
        contribution_in_pct=pca.contribution.copy(),
        band_names=tuple(pca.band_names),
        component_names=pca.component_names,
        n_pixels_analyzed=pca.n_observations,
        basis=pca.basis,
    )
