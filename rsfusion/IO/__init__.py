# -*- coding: utf-8 -*-
"""
IO Module - Raster readers, writers and fusion result persistence.

Provides GeoTIFF reading into ``RasterImage`` objects, GeoTIFF and NumPy
writers behind a small format registry, and ``save_fusion_result`` for
writing a complete fusion product.

Key Classes
-----------
``ImageReader``, ``ImageWriter``, ``ImageMetadata``,
``GeoTIFFReader``, ``GeoTIFFWriter``, ``NumpyWriter``

Usage
-----
    >>> from rsfusion.IO import read_raster, write_raster
    >>> optical = read_raster('optical.tif', modality=ImageModality.MSI)
    >>> write_raster(optical, 'copy.tif')

Dependencies
------------
rasterio (GeoTIFF)

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
import importlib
from pathlib import Path
from typing import Any, Dict, Optional, Union

# Third-party
import numpy as np

# rsfusion internal
from rsfusion.IO.base import ImageReader, ImageWriter
from rsfusion.IO.models import ImageMetadata
from rsfusion.IO.geotiff import GeoTIFFReader, GeoTIFFWriter
from rsfusion.IO.numpy_io import NumpyWriter
from rsfusion.IO.results import save_fusion_result
from rsfusion.raster import RasterImage
from rsfusion.vocabulary import ImageModality, OutputFormat


# Writer registry: maps format to (module_path, class_name)
_WRITER_REGISTRY: Dict[OutputFormat, tuple] = {
    OutputFormat.GEOTIFF: ('rsfusion.IO.geotiff', 'GeoTIFFWriter'),
    OutputFormat.NUMPY: ('rsfusion.IO.numpy_io', 'NumpyWriter'),
}

# Extension-to-format mapping for auto-detection
_EXTENSION_MAP: Dict[str, OutputFormat] = {
    '.tif': OutputFormat.GEOTIFF,
    '.tiff': OutputFormat.GEOTIFF,
    '.geotiff': OutputFormat.GEOTIFF,
    '.npy': OutputFormat.NUMPY,
}


def get_writer(
    format: Union[str, OutputFormat],
    filepath: Union[str, Path],
    metadata: Optional[ImageMetadata] = None,
) -> ImageWriter:
    """Create an ImageWriter for the given format.

    Parameters
    ----------
    format : str or OutputFormat
        ``'geotiff'`` or ``'numpy'``.
    filepath : str or Path
        Output file path.
    metadata : ImageMetadata, optional
        Passed to the writer constructor.

    Returns
    -------
    ImageWriter

    Raises
    ------
    ValueError
        If *format* is not a recognized format.
    """
    try:
        key = OutputFormat(format.lower() if isinstance(format, str) else format)
    except ValueError:
        raise ValueError(
            f"Unknown writer format: {format!r}. Supported formats: "
            f"{sorted(f.value for f in _WRITER_REGISTRY)}"
        ) from None
    module_path, class_name = _WRITER_REGISTRY[key]
    module = importlib.import_module(module_path)
    writer_cls = getattr(module, class_name)
    return writer_cls(filepath, metadata=metadata)


def _format_from_path(path: Path, format: Optional[str]) -> Union[str, OutputFormat]:
    if format is not None:
        return format
    ext = path.suffix.lower()
    if ext not in _EXTENSION_MAP:
        raise ValueError(
            f"Cannot determine writer format from extension '{ext}'. "
            f"Supported extensions: {sorted(_EXTENSION_MAP.keys())}. "
            f"Provide an explicit format= argument."
        )
    return _EXTENSION_MAP[ext]


def write(
    data: np.ndarray,
    path: Union[str, Path],
    metadata: Optional[ImageMetadata] = None,
    format: Optional[str] = None,
    geolocation: Optional[Dict[str, Any]] = None,
) -> None:
    """Write array data to a file, auto-detecting format from extension.

    Raises
    ------
    ValueError
        If *format* is None and the extension is not recognized.
    """
    path = Path(path)
    fmt = _format_from_path(path, format)
    with get_writer(fmt, path, metadata=metadata) as writer:
        writer.write(data, geolocation=geolocation)


def read_raster(
    filepath: Union[str, Path],
    modality: Optional[ImageModality] = None,
) -> RasterImage:
    """Read a GeoTIFF into a ``RasterImage``.

    Parameters
    ----------
    filepath : str or Path
        Path to the raster file.
    modality : ImageModality, optional
        Sensor modality to tag the raster with.

    Returns
    -------
    RasterImage
    """
    with GeoTIFFReader(filepath) as reader:
        return reader.to_raster(modality=modality)


def write_raster(raster: RasterImage, path: Union[str, Path]) -> None:
    """Write a ``RasterImage`` to GeoTIFF with its extent and band names."""
    with GeoTIFFWriter(path) as writer:
        writer.write_raster(raster)


__all__ = [
    'ImageReader',
    'ImageWriter',
    'ImageMetadata',
    'GeoTIFFReader',
    'GeoTIFFWriter',
    'NumpyWriter',
    'get_writer',
    'write',
    'read_raster',
    'write_raster',
    'save_fusion_result',
]
