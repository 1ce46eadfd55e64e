# -*- coding: utf-8 -*-
"""
Band Standardizer - Column-wise centering and scaling of feature matrices.

Provides fit/transform centering and z-score scaling for ``(pixels,
bands)`` feature matrices. Statistics are computed per column with the
sample (``n - 1``) normalization used by PCA, so that the covariance of
the transformed matrix is the correlation matrix of the input when
scaling is enabled.

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

# Standard library
from typing import Optional

# Third-party
import numpy as np

# rsfusion internal
from rsfusion.exceptions import DegenerateInputError, ValidationError


_VALID_METHODS = ('center', 'zscore')


class BandStandardizer:
    """Per-band centering and unit-variance scaling.

    Supports two methods:

    - ``'center'``: Subtract each column's mean.
    - ``'zscore'``: Subtract each column's mean and divide by its
      sample standard deviation.

    Parameters
    ----------
    method : str
        One of ``'center'``, ``'zscore'``. Default ``'zscore'``.
    ddof : int
        Delta degrees of freedom for the standard deviation.
        Default ``1``.
    epsilon : float
        Standard deviations at or below this are treated as zero.
        Default ``1e-12``.

    Raises
    ------
    ValidationError
        If method is not one of the valid options or ddof is negative.

    Examples
    --------
    >>> import numpy as np
    >>> from rsfusion.data_prep import BandStandardizer
    >>> std = BandStandardizer(method='zscore')
    >>> z = std.fit_transform(np.array([[1.0, 10.0], [3.0, 30.0]]))
    >>> z[:, 0]
    array([-0.70710678,  0.70710678])
    """

    def __init__(
        self,
        method: str = 'zscore',
        ddof: int = 1,
        epsilon: float = 1e-12,
    ) -> None:
        if method not in _VALID_METHODS:
            raise ValidationError(
                f"method must be one of {_VALID_METHODS}, got '{method}'"
            )
        if ddof < 0:
            raise ValidationError(f"ddof must be non-negative, got {ddof}")

        self._method = method
        self._ddof = ddof
        self._epsilon = epsilon

        # Fitted parameters (set by fit())
        self._mean: Optional[np.ndarray] = None
        self._std: Optional[np.ndarray] = None
        self._is_fitted: bool = False

    @property
    def method(self) -> str:
        """The standardization method, ``'center'`` or ``'zscore'``."""
        return self._method

    @property
    def is_fitted(self) -> bool:
        """Whether ``fit()`` has been called."""
        return self._is_fitted

    @property
    def mean_(self) -> np.ndarray:
        """Per-band means computed by ``fit()``."""
        self._check_fitted()
        return self._mean

    @property
    def std_(self) -> np.ndarray:
        """Per-band sample standard deviations computed by ``fit()``."""
        self._check_fitted()
        return self._std

    @property
    def scale_(self) -> Optional[np.ndarray]:
        """Divisor applied to each band, or None for ``'center'``."""
        self._check_fitted()
        return self._std if self._method == 'zscore' else None

    def constant_bands(self) -> np.ndarray:
        """Indices of bands whose standard deviation is effectively zero.

        Returns
        -------
        np.ndarray
            Integer column indices.
        """
        self._check_fitted()
        return np.flatnonzero(self._std <= self._epsilon)

    def fit(self, data: np.ndarray) -> 'BandStandardizer':
        """Compute per-band mean and standard deviation.

        Parameters
        ----------
        data : np.ndarray
            Feature matrix, shape ``(pixels, bands)``.

        Returns
        -------
        BandStandardizer
            Self, for method chaining.

        Raises
        ------
        ValidationError
            If data is not 2-D.
        DegenerateInputError
            If there are not more rows than ``ddof``.
        """
        arr = self._validate_data(data)
        if arr.shape[0] <= self._ddof:
            raise DegenerateInputError(
                f"Need more than {self._ddof} rows to estimate band "
                f"statistics, got {arr.shape[0]}"
            )
        self._mean = arr.mean(axis=0)
        self._std = arr.std(axis=0, ddof=self._ddof)
        self._is_fitted = True
        return self

    def transform(self, data: np.ndarray) -> np.ndarray:
        """Apply the fitted centering (and scaling).

        Parameters
        ----------
        data : np.ndarray
            Feature matrix, shape ``(pixels, bands)``.

        Returns
        -------
        np.ndarray
            Standardized matrix, dtype float64.

        Raises
        ------
        RuntimeError
            If ``fit()`` was not called first.
        DegenerateInputError
            If scaling is requested and a band is constant.
        """
        self._check_fitted()
        arr = self._validate_data(data)
        if arr.shape[1] != self._mean.shape[0]:
            raise ValidationError(
                f"data has {arr.shape[1]} bands, standardizer was fitted "
                f"on {self._mean.shape[0]}"
            )
        result = arr - self._mean
        if self._method == 'zscore':
            constant = self.constant_bands()
            if constant.size:
                raise DegenerateInputError(
                    f"Cannot scale constant band(s) {constant.tolist()} to "
                    f"unit variance. Remove them or disable standardization."
                )
            result = result / self._std
        return result

    def fit_transform(self, data: np.ndarray) -> np.ndarray:
        """Convenience: fit then transform in one call."""
        self.fit(data)
        return self.transform(data)

    def _check_fitted(self) -> None:
        if not self._is_fitted:
            raise RuntimeError(
                "BandStandardizer has not been fitted. Call fit() first."
            )

    @staticmethod
    def _validate_data(data: np.ndarray) -> np.ndarray:
        if not isinstance(data, np.ndarray):
            raise ValidationError(
                f"data must be np.ndarray, got {type(data).__name__}"
            )
        if data.ndim != 2:
            raise ValidationError(
                f"data must be 2D (pixels, bands), got {data.ndim}D"
            )
        return data.astype(np.float64)

    def __repr__(self) -> str:
        return (
            f"BandStandardizer(method='{self._method}', ddof={self._ddof}, "
            f"epsilon={self._epsilon})"
        )
