# -*- coding: utf-8 -*-
"""
PCA Fusion - Fuse two co-registered rasters into principal components.

Runs the complete fusion chain: compatibility check, band stacking,
feature matrix construction, PCA, reconstruction of component rasters
and assembly of the statistics. Works for any pair of sensors
(optical/optical, optical/SAR, SAR/SAR) as long as the inputs share an
extent and pixel grid; co-register them first.

Usage
-----
    >>> from rsfusion import fuse
    >>> result = fuse(optical, radar, drop_incomplete=True)
    >>> result.proportion_of_variance
    array([0.71, 0.18, ...])

or, with settings held on a processor:

    >>> from rsfusion.fusion import PCAFusion
    >>> fusion = PCAFusion(standardize=False, drop_incomplete=True)
    >>> result = fusion.fuse(optical, radar)

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
from typing import Annotated, Any, Optional

# rsfusion internal
from rsfusion.fusion.base import FusionProcessor
from rsfusion.fusion.features import build_feature_matrix
from rsfusion.fusion.params import Desc, Options
from rsfusion.fusion.pca import compute_pca
from rsfusion.fusion.progress import (
    LoggingEmitter,
    NullEmitter,
    ProgressEmitter,
    format_checkpoint,
)
from rsfusion.fusion.reconstruct import reconstruct_components
from rsfusion.fusion.result import FusionResult, assemble_result
from rsfusion.fusion.stacking import stack_bands
from rsfusion.fusion.validation import validate_compatibility
from rsfusion.fusion.versioning import processor_tags, processor_version
from rsfusion.raster import RasterImage
from rsfusion.vocabulary import ImageModality

logger = logging.getLogger(__name__)


@processor_version('1.0.0')
@processor_tags(
    modalities=[ImageModality.EO, ImageModality.MSI, ImageModality.SAR],
    description='PCA fusion of two co-registered multi-band rasters',
)
class PCAFusion(FusionProcessor):
    """Principal component fusion of two co-registered rasters.

    Settings are declared as tunable parameters and may be overridden
    per call through ``fuse(x, y, **overrides)``.

    Parameters
    ----------
    standardize : bool
        Decompose the correlation matrix (bands centered and scaled)
        instead of the covariance matrix (bands centered). Default True.
    drop_incomplete : bool
        Exclude pixels with a missing value in any band. When False,
        missing values raise ``MissingDataError``. Default False.
    verbose : bool
        Emit progress messages at extent verification,
        standardization and statistics. Default False.
    output_dtype : str
        dtype of the component raster, ``'float64'`` or ``'float32'``.
        Statistics are always float64. Default ``'float64'``.
    """

    standardize: Annotated[bool, Desc(
        'Use standardized bands (correlation matrix)')] = True
    drop_incomplete: Annotated[bool, Desc(
        'Exclude pixels with missing values')] = False
    verbose: Annotated[bool, Desc('Emit progress messages')] = False
    output_dtype: Annotated[str, Options('float64', 'float32'), Desc(
        'dtype of the fused component raster')] = 'float64'

    def fuse(
        self,
        x: RasterImage,
        y: RasterImage,
        emitter: Optional[ProgressEmitter] = None,
        **kwargs: Any,
    ) -> FusionResult:
        """Fuse two rasters.

        Parameters
        ----------
        x : RasterImage
            First input (e.g. optical).
        y : RasterImage
            Second input (e.g. radar).
        emitter : ProgressEmitter, optional
            Receives progress messages when ``verbose`` is set. Default
            is a ``LoggingEmitter`` on the ``rsfusion`` logger.
        **kwargs
            Per-call overrides of ``standardize``, ``drop_incomplete``,
            ``verbose``, ``output_dtype``.

        Returns
        -------
        FusionResult

        Raises
        ------
        UnsupportedTypeError
            If either input is not a ``RasterImage``.
        ExtentMismatchError
            If the inputs differ in extent or pixel grid.
        MissingDataError
            If missing values remain and ``drop_incomplete`` is False.
        DegenerateInputError
            If too few valid pixels remain or the bands carry no
            variance.
        """
        self._reject_unknown(kwargs)
        params = self._resolve_params(kwargs)
        if params['verbose']:
            out = emitter if emitter is not None else LoggingEmitter()
        else:
            out = NullEmitter()

        out.emit(format_checkpoint('Verifying the same extent'))
        validate_compatibility(x, y)
        stacked = stack_bands(x, y)
        features = build_feature_matrix(
            stacked, drop_incomplete=params['drop_incomplete'],
        )

        if params['standardize']:
            out.emit(format_checkpoint('Standardizing variables'))
        pca = compute_pca(features, standardize=params['standardize'])

        out.emit(format_checkpoint('Contributions and correlations'))
        fused = reconstruct_components(
            stacked, features, pca, dtype=params['output_dtype'],
        )
        logger.debug(
            "Fused %d + %d bands over %d pixels",
            x.n_bands, y.n_bands, features.n_rows,
        )
        return assemble_result(fused, pca)


def fuse(
    x: RasterImage,
    y: RasterImage,
    standardize: bool = True,
    drop_incomplete: bool = False,
    verbose: bool = False,
    emitter: Optional[ProgressEmitter] = None,
) -> FusionResult:
    """Fuse two co-registered rasters by principal component analysis.

    Convenience wrapper around ``PCAFusion``.

    Parameters
    ----------
    x : RasterImage
        First input (e.g. optical).
    y : RasterImage
        Second input (e.g. radar).
    standardize : bool
        Use the correlation matrix (True) or covariance matrix (False).
        Default True.
    drop_incomplete : bool
        Exclude pixels with missing values. Default False.
    verbose : bool
        Emit progress messages. Has no effect on results. Default False.
    emitter : ProgressEmitter, optional
        Destination for progress messages when *verbose*.

    Returns
    -------
    FusionResult
    """
    fusion = PCAFusion(
        standardize=standardize,
        drop_incomplete=drop_incomplete,
        verbose=verbose,
    )
    return fusion.fuse(x, y, emitter=emitter)
