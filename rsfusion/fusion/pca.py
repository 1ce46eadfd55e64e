# -*- coding: utf-8 -*-
"""
PCA Engine - Principal component decomposition of a band feature matrix.

Computes the principal components of a ``(pixels, bands)`` matrix from
the eigendecomposition of its covariance matrix (bands centered) or its
correlation matrix (bands centered and scaled to unit variance), and
derives the per-component variance, proportion of variance, cumulative
proportion, band/component correlations and band contributions.

Variances use the sample (``n - 1``) normalization. Components are
ordered by decreasing variance. The sign of each eigenvector is fixed so
that its largest-magnitude loading is positive; callers should still not
rely on component sign, only on magnitudes.

Dependencies
------------
scipy

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
from typing import Optional, Sequence, Tuple, Union

# Third-party
import numpy as np
from scipy import linalg

# rsfusion internal
from rsfusion.data_prep.standardizer import BandStandardizer
from rsfusion.exceptions import (
    DegenerateInputError,
    MissingDataError,
    ValidationError,
)
from rsfusion.fusion.features import FeatureMatrix
from rsfusion.vocabulary import DecompositionBasis

logger = logging.getLogger(__name__)

# Total variance below this fraction of the squared data magnitude is
# treated as zero (rounding residue of centering a constant matrix).
_ZERO_VARIANCE_RTOL = 1e-24
_STD_EPS = 1e-12


@dataclass(frozen=True)
class PCAResult:
    """Outcome of one PCA decomposition.

    For ``p`` bands and ``n`` analyzed pixels, ``k = p`` components are
    returned.

    Attributes
    ----------
    scores : np.ndarray
        Component scores, shape ``(n, k)``.
    loadings : np.ndarray
        Unit-length eigenvectors as columns, shape ``(p, k)``.
    sdev : np.ndarray
        Component standard deviations, shape ``(k,)``.
    variance : np.ndarray
        Component variances (``sdev ** 2``), shape ``(k,)``.
    proportion : np.ndarray
        Share of total variance per component; sums to 1.
    cumulative : np.ndarray
        Running sum of ``proportion``; non-decreasing, ends at 1.
    correlation : np.ndarray
        Correlation of band ``j`` with component ``i`` at ``[j, i]``,
        shape ``(p, k)``.
    contribution : np.ndarray
        Percentage contribution of band ``j`` to component ``i`` at
        ``[j, i]``; every column sums to 100.
    center : np.ndarray
        Band means subtracted before decomposition, shape ``(p,)``.
    scale : np.ndarray or None
        Band standard deviations divided out, or None when the bands
        were only centered.
    basis : DecompositionBasis
        Matrix the components were extracted from.
    band_names : Tuple[str, ...]
        Row labels for ``loadings``, ``correlation``, ``contribution``.
    """

    scores: np.ndarray
    loadings: np.ndarray
    sdev: np.ndarray
    variance: np.ndarray
    proportion: np.ndarray
    cumulative: np.ndarray
    correlation: np.ndarray
    contribution: np.ndarray
    center: np.ndarray
    scale: Optional[np.ndarray]
    basis: DecompositionBasis
    band_names: Tuple[str, ...]

    @property
    def n_components(self) -> int:
        return self.variance.shape[0]

    @property
    def n_observations(self) -> int:
        return self.scores.shape[0]

    @property
    def standardized(self) -> bool:
        return self.basis is DecompositionBasis.CORRELATION

    @property
    def component_names(self) -> Tuple[str, ...]:
        """``('PC1', 'PC2', ...)``."""
        return component_names(self.n_components)


def component_names(k: int) -> Tuple[str, ...]:
    """Labels ``PC1 .. PCk``."""
    return tuple(f"PC{i + 1}" for i in range(k))


def _fix_signs(vectors: np.ndarray) -> np.ndarray:
    """Flip eigenvectors so each one's largest-magnitude entry is positive."""
    idx = np.argmax(np.abs(vectors), axis=0)
    signs = np.sign(vectors[idx, np.arange(vectors.shape[1])])
    signs[signs == 0] = 1.0
    return vectors * signs


def compute_pca(
    features: Union[FeatureMatrix, np.ndarray],
    standardize: bool = True,
    band_names: Optional[Sequence[str]] = None,
) -> PCAResult:
    """Decompose a feature matrix into principal components.

    Parameters
    ----------
    features : FeatureMatrix or np.ndarray
        Matrix of shape ``(n_pixels, n_bands)``.
    standardize : bool
        If True, scale each band to unit variance after centering so
        the decomposition is of the correlation matrix. If False, only
        center (covariance matrix). Default True.
    band_names : Sequence[str], optional
        Band labels when *features* is a bare array. Defaults to
        ``Band1 .. Bandp``. Ignored for a ``FeatureMatrix``.

    Returns
    -------
    PCAResult

    Raises
    ------
    ValidationError
        If the matrix is not 2-D or has no bands.
    MissingDataError
        If any value is NaN or infinite.
    DegenerateInputError
        If fewer than 2 rows remain, a band is constant while
        standardizing, or the total variance is zero.
    """
    if isinstance(features, FeatureMatrix):
        X = features.values
        names = tuple(features.band_names)
    else:
        X = np.asarray(features, dtype=np.float64)
        if X.ndim != 2:
            raise ValidationError(
                f"features must be 2D (pixels, bands), got {X.ndim}D"
            )
        if band_names is None:
            names = tuple(f"Band{j + 1}" for j in range(X.shape[1]))
        else:
            names = tuple(band_names)
    n, p = X.shape
    if p == 0:
        raise ValidationError("features must have at least one band")
    if len(names) != p:
        raise ValidationError(
            f"Got {len(names)} band names for {p} bands"
        )

    finite = np.isfinite(X)
    if not finite.all():
        bad_rows = int(np.count_nonzero(~finite.all(axis=1)))
        raise MissingDataError(
            f"{bad_rows} of {n} pixels contain missing values. "
            f"Missing data cannot be decomposed; set drop_incomplete=True "
            f"to exclude incomplete pixels."
        )
    if n < 2:
        raise DegenerateInputError(
            f"At least 2 valid pixels are required for PCA, got {n}"
        )

    basis = DecompositionBasis.from_standardize(standardize)
    scaler = BandStandardizer(method='zscore' if standardize else 'center')
    Z = scaler.fit_transform(X)

    cov = (Z.T @ Z) / (n - 1)
    total = float(np.trace(cov))
    magnitude = max(1.0, float(np.mean(scaler.mean_ ** 2)))
    if total <= _ZERO_VARIANCE_RTOL * magnitude:
        raise DegenerateInputError(
            "Total variance of the feature matrix is zero; every band is "
            "constant over the analyzed pixels"
        )

    eigvals, eigvecs = linalg.eigh(cov)
    order = np.argsort(-eigvals, kind='stable')
    variance = np.clip(eigvals[order], 0.0, None)
    loadings = _fix_signs(eigvecs[:, order])
    logger.debug(
        "PCA on %s matrix (%s basis): variances %s",
        X.shape, basis.value, np.array2string(variance, precision=4),
    )

    scores = Z @ loadings
    sdev = np.sqrt(variance)
    proportion = variance / variance.sum()
    cumulative = np.cumsum(proportion)
    cumulative[-1] = 1.0
    cumulative = np.minimum(cumulative, 1.0)

    band_std = Z.std(axis=0, ddof=1)
    with np.errstate(divide='ignore', invalid='ignore'):
        correlation = loadings * sdev[np.newaxis, :] / band_std[:, np.newaxis]
    correlation[band_std <= _STD_EPS, :] = 0.0
    correlation = np.clip(correlation, -1.0, 1.0)

    squared = loadings ** 2
    contribution = squared / squared.sum(axis=0, keepdims=True) * 100.0

    return PCAResult(
        scores=scores,
        loadings=loadings,
        sdev=sdev,
        variance=variance,
        proportion=proportion,
        cumulative=cumulative,
        correlation=correlation,
        contribution=contribution,
        center=scaler.mean_.copy(),
        scale=None if scaler.scale_ is None else scaler.scale_.copy(),
        basis=basis,
        band_names=names,
    )
