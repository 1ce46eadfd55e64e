# -*- coding: utf-8 -*-
"""
GeoTIFF IO - Read and write GeoTIFF rasters.

``GeoTIFFReader`` opens any GeoTIFF (optical, SAR GRD, multi-band
stacks, COGs) and converts it into a ``RasterImage`` with extent,
no-data sentinel and band names taken from the file. ``GeoTIFFWriter``
writes arrays or ``RasterImage`` objects, including fused component
rasters, back to GeoTIFF.

Dependencies
------------
rasterio

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
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

# Third-party
import numpy as np

try:
    import rasterio
    from rasterio.errors import RasterioIOError
    from rasterio.transform import from_bounds
    from rasterio.windows import Window
    _HAS_RASTERIO = True
except ImportError:
    _HAS_RASTERIO = False

# rsfusion internal
from rsfusion.exceptions import DependencyError
from rsfusion.IO.base import ImageReader, ImageWriter
from rsfusion.IO.models import ImageMetadata
from rsfusion.raster import RasterImage
from rsfusion.vocabulary import ImageModality


def _require_rasterio(what: str) -> None:
    if not _HAS_RASTERIO:
        raise DependencyError(
            f"rasterio is required for {what}. "
            "Install with: pip install rasterio"
        )


class GeoTIFFReader(ImageReader):
    """Read GeoTIFF and Cloud-Optimized GeoTIFF imagery.

    Parameters
    ----------
    filepath : str or Path
        Path to the GeoTIFF file.

    Attributes
    ----------
    filepath : Path
        Path to the image file.
    metadata : ImageMetadata
        Format, shape, dtype, CRS, no-data, band names, plus
        ``transform``, ``bounds`` and ``resolution`` in extras.
    dataset : rasterio.DatasetReader
        Open rasterio dataset.

    Raises
    ------
    DependencyError
        If rasterio is not installed.
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file cannot be opened as a GeoTIFF.

    Examples
    --------
    >>> from rsfusion.IO.geotiff import GeoTIFFReader
    >>> with GeoTIFFReader('optical.tif') as reader:
    ...     optical = reader.to_raster(modality=ImageModality.MSI)
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        _require_rasterio("GeoTIFF reading")
        self.dataset = None
        super().__init__(filepath)

    def _load_metadata(self) -> None:
        try:
            self.dataset = rasterio.open(str(self.filepath))
        except RasterioIOError as e:
            raise ValueError(f"Failed to open GeoTIFF: {e}") from e

        ds = self.dataset
        descriptions = list(ds.descriptions)
        if all(descriptions) and len(set(descriptions)) == len(descriptions):
            band_names = list(descriptions)
        else:
            band_names = [f"B{i + 1}" for i in range(ds.count)]

        self.metadata = ImageMetadata(
            format='GeoTIFF',
            rows=ds.height,
            cols=ds.width,
            dtype=str(ds.dtypes[0]),
            bands=ds.count,
            crs=str(ds.crs) if ds.crs else None,
            nodata=ds.nodata,
            band_names=band_names,
            extras={
                'transform': ds.transform,
                'bounds': ds.bounds,
                'resolution': ds.res,
            },
        )

    def read_chip(
        self,
        row_start: int,
        row_end: int,
        col_start: int,
        col_end: int,
        bands: Optional[List[int]] = None,
    ) -> np.ndarray:
        """Read a spatial chip from the GeoTIFF.

        Parameters
        ----------
        row_start, row_end : int
            Row range, start inclusive, end exclusive.
        col_start, col_end : int
            Column range, start inclusive, end exclusive.
        bands : Optional[List[int]]
            Band indices to read (0-based). If None, read all bands.

        Returns
        -------
        np.ndarray
            ``(rows, cols)`` for one band, ``(bands, rows, cols)``
            otherwise.

        Raises
        ------
        ValueError
            If indices are out of bounds.
        """
        if row_start < 0 or col_start < 0:
            raise ValueError("Start indices must be non-negative")
        if row_end > self.metadata.rows or col_end > self.metadata.cols:
            raise ValueError("End indices exceed image dimensions")

        window = Window(
            col_start, row_start,
            col_end - col_start, row_end - row_start,
        )
        if bands is None:
            data = self.dataset.read(window=window)
        else:
            data = self.dataset.read([b + 1 for b in bands], window=window)

        if data.shape[0] == 1:
            return data[0]
        return data

    def read_full(self, bands: Optional[List[int]] = None) -> np.ndarray:
        """Read the entire GeoTIFF image."""
        if bands is None:
            data = self.dataset.read()
        else:
            data = self.dataset.read([b + 1 for b in bands])

        if data.shape[0] == 1:
            return data[0]
        return data

    def get_shape(self) -> Tuple[int, ...]:
        if self.metadata.bands == 1:
            return (self.metadata.rows, self.metadata.cols)
        return (self.metadata.rows, self.metadata.cols, self.metadata.bands)

    def get_dtype(self) -> np.dtype:
        return np.dtype(self.metadata.dtype)

    def get_geolocation(self) -> Optional[Dict[str, Any]]:
        if self.metadata.crs is None:
            return None
        return {
            'crs': self.metadata.crs,
            'transform': self.metadata['transform'],
            'bounds': self.metadata['bounds'],
            'resolution': self.metadata['resolution'],
        }

    def get_extent(self) -> Tuple[float, float, float, float]:
        """``(xmin, ymin, xmax, ymax)`` from the file bounds.

        Files without a geotransform report a flipped pixel-space box;
        it is normalized so that min < max on both axes.
        """
        b = self.metadata['bounds']
        return (
            min(b.left, b.right), min(b.bottom, b.top),
            max(b.left, b.right), max(b.bottom, b.top),
        )

    def to_raster(
        self,
        modality: Optional[ImageModality] = None,
    ) -> RasterImage:
        """Read all bands into a ``RasterImage``.

        Parameters
        ----------
        modality : ImageModality, optional
            Sensor modality to tag the raster with.

        Returns
        -------
        RasterImage
        """
        return RasterImage(
            self.dataset.read(),
            extent=self.get_extent(),
            band_names=self.metadata.band_names,
            nodata=self.metadata.nodata,
            crs=self.metadata.crs,
            modality=modality,
        )

    def close(self) -> None:
        """Close the rasterio dataset."""
        if self.dataset is not None:
            self.dataset.close()
            self.dataset = None


class GeoTIFFWriter(ImageWriter):
    """Write arrays and rasters to GeoTIFF.

    Parameters
    ----------
    filepath : str or Path
        Output path.
    metadata : ImageMetadata, optional
        ``nodata`` and ``band_names`` are written to the file when
        present.

    Raises
    ------
    DependencyError
        If rasterio is not installed.

    Examples
    --------
    >>> from rsfusion.IO.geotiff import GeoTIFFWriter
    >>> with GeoTIFFWriter('fused.tif') as writer:
    ...     writer.write_raster(result.fused_images)
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        metadata: Optional[ImageMetadata] = None,
    ) -> None:
        _require_rasterio("GeoTIFF writing")
        super().__init__(filepath, metadata)

    def write(
        self,
        data: np.ndarray,
        geolocation: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Write a 2-D or ``(bands, rows, cols)`` array.

        Parameters
        ----------
        data : np.ndarray
            Pixel data.
        geolocation : Dict[str, Any], optional
            ``'crs'`` and ``'transform'`` for the file.

        Raises
        ------
        ValueError
            If *data* is not 2D or 3D.
        """
        if data.ndim == 2:
            data = data[np.newaxis, :, :]
        elif data.ndim != 3:
            raise ValueError(
                f"data must be 2D or 3D (bands, rows, cols), got {data.ndim}D"
            )
        geolocation = geolocation or {}

        profile: Dict[str, Any] = {
            'driver': 'GTiff',
            'height': data.shape[1],
            'width': data.shape[2],
            'count': data.shape[0],
            'dtype': str(data.dtype),
        }
        if geolocation.get('crs') is not None:
            profile['crs'] = geolocation['crs']
        if geolocation.get('transform') is not None:
            profile['transform'] = geolocation['transform']
        nodata = self.metadata.nodata if self.metadata is not None else None
        if nodata is not None:
            profile['nodata'] = nodata

        with rasterio.open(str(self.filepath), 'w', **profile) as ds:
            ds.write(data)
            names = self.metadata.band_names if self.metadata else None
            if names and len(names) == data.shape[0]:
                for i, name in enumerate(names, start=1):
                    ds.set_band_description(i, name)

    def write_raster(self, raster: RasterImage) -> None:
        """Write a ``RasterImage`` with its extent, CRS, no-data and names."""
        if self.metadata is None:
            self.metadata = ImageMetadata.from_raster(raster, format='GeoTIFF')
        ext = raster.extent
        transform = from_bounds(
            ext.xmin, ext.ymin, ext.xmax, ext.ymax, raster.cols, raster.rows,
        )
        self.write(raster.data, geolocation={
            'crs': raster.crs,
            'transform': transform,
        })

    def write_chip(
        self,
        data: np.ndarray,
        row_start: int,
        col_start: int,
        geolocation: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Overwrite a window of an existing GeoTIFF.

        Raises
        ------
        FileNotFoundError
            If the file has not been written yet.
        ValueError
            If the chip does not fit in the file.
        """
        if not self.filepath.exists():
            raise FileNotFoundError(
                f"write_chip needs an existing file: {self.filepath}"
            )
        if data.ndim == 2:
            data = data[np.newaxis, :, :]
        with rasterio.open(str(self.filepath), 'r+') as ds:
            if (row_start < 0 or col_start < 0
                    or row_start + data.shape[1] > ds.height
                    or col_start + data.shape[2] > ds.width):
                raise ValueError("Chip extends beyond image dimensions")
            if data.shape[0] != ds.count:
                raise ValueError(
                    f"Chip has {data.shape[0]} bands, file has {ds.count}"
                )
            window = Window(col_start, row_start, data.shape[2], data.shape[1])
            ds.write(data, window=window)
