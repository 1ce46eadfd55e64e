# -*- coding: utf-8 -*-
"""
Fusion Result Persistence - Save a ``FusionResult`` to disk.

Writes the fused component raster as a GeoTIFF and the variance,
proportion, cumulative, correlation and contribution statistics as a
``.npz`` archive with a JSON sidecar carrying the band and component
labels.

Dependencies
------------
rasterio

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
import logging
from pathlib import Path
from typing import Dict, Union

# rsfusion internal
from rsfusion.fusion.result import FusionResult
from rsfusion.IO.geotiff import GeoTIFFWriter
from rsfusion.IO.numpy_io import NumpyWriter

logger = logging.getLogger(__name__)


def save_fusion_result(
    result: FusionResult,
    directory: Union[str, Path],
    prefix: str = 'fusion',
) -> Dict[str, Path]:
    """Write a fusion result into *directory*.

    Parameters
    ----------
    result : FusionResult
        Output of ``fuse``.
    directory : str or Path
        Output directory; created if missing.
    prefix : str
        File name prefix. Default ``'fusion'``.

    Returns
    -------
    Dict[str, Path]
        ``{'components': <GeoTIFF path>, 'statistics': <npz path>}``.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    components_path = directory / f"{prefix}_components.tif"
    stats_path = directory / f"{prefix}_statistics.npz"

    with GeoTIFFWriter(components_path) as writer:
        writer.write_raster(result.fused_images)

    with NumpyWriter(stats_path) as writer:
        writer.write_npz(
            {
                'variance': result.variance,
                'proportion_of_variance': result.proportion_of_variance,
                'cumulative_variance': result.cumulative_variance,
                'correlation': result.correlation,
                'contribution_in_pct': result.contribution_in_pct,
            },
            extra={
                'band_names': list(result.band_names),
                'component_names': list(result.component_names),
                'n_pixels_analyzed': result.n_pixels_analyzed,
                'basis': result.basis.value,
            },
        )

    logger.debug("Saved fusion result to %s", directory)
    return {'components': components_path, 'statistics': stats_path}
