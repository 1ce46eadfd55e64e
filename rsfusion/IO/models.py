# -*- coding: utf-8 -*-
"""
IO Models - Typed metadata container for raster readers and writers.

Provides ``ImageMetadata``, a dataclass that stores universal image
metadata (format, rows, cols, dtype) as typed attributes, keeps
format-specific fields in an ``extras`` dict, and supports dict-like
access to both.

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
from dataclasses import dataclass, field, fields as dc_fields
from typing import Any, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from rsfusion.raster import RasterImage


@dataclass
class ImageMetadata:
    """Typed metadata for rasters read or written by rsfusion IO.

    Parameters
    ----------
    format : str
        Format identifier (e.g., ``'GeoTIFF'``, ``'NumPy'``).
    rows : int
        Number of image rows.
    cols : int
        Number of image columns.
    dtype : str
        NumPy dtype string (e.g., ``'float32'``).
    bands : int, optional
        Number of bands.
    crs : str, optional
        Coordinate reference system string.
    nodata : float, optional
        No-data sentinel value.
    band_names : List[str], optional
        Band names in band order.
    extras : Dict[str, Any]
        Format-specific metadata, reachable through dict-like access.

    Examples
    --------
    >>> meta = ImageMetadata(format='GeoTIFF', rows=100, cols=200,
    ...                      dtype='float32', bands=3,
    ...                      extras={'resolution': (10.0, 10.0)})
    >>> meta['resolution']
    (10.0, 10.0)
    >>> 'crs' in meta
    False
    """

    format: str
    rows: int
    cols: int
    dtype: str

    bands: Optional[int] = None
    crs: Optional[str] = None
    nodata: Optional[float] = None
    band_names: Optional[List[str]] = None

    extras: Dict[str, Any] = field(default_factory=dict)

    def _typed_names(self) -> List[str]:
        return [f.name for f in dc_fields(self) if f.name != 'extras']

    def __getitem__(self, key: str) -> Any:
        """Access metadata by key, checking typed fields then extras.

        Raises
        ------
        KeyError
            If key is not found in typed fields or extras.
        """
        if key in self._typed_names():
            return getattr(self, key)
        if key in self.extras:
            return self.extras[key]
        raise KeyError(key)

    def __setitem__(self, key: str, value: Any) -> None:
        if key in self._typed_names():
            setattr(self, key, value)
        else:
            self.extras[key] = value

    def __contains__(self, key: str) -> bool:
        """True if the key exists and, for typed fields, is not None."""
        if key in self._typed_names():
            return getattr(self, key) is not None
        return key in self.extras

    def get(self, key: str, default: Any = None) -> Any:
        """Get value by key with a default, like ``dict.get()``."""
        try:
            val = self[key]
        except KeyError:
            return default
        return default if val is None else val

    def to_dict(self) -> Dict[str, Any]:
        """Flat dictionary; None-valued typed fields are left out."""
        result: Dict[str, Any] = {
            name: getattr(self, name) for name in self._typed_names()
            if getattr(self, name) is not None
        }
        result.update(self.extras)
        return result

    @classmethod
    def from_raster(cls, raster: 'RasterImage', format: str) -> 'ImageMetadata':
        """Describe an in-memory raster for a writer."""
        extras: Dict[str, Any] = {'extent': tuple(raster.extent)}
        if raster.modality is not None:
            extras['modality'] = raster.modality.value
        return cls(
            format=format,
            rows=raster.rows,
            cols=raster.cols,
            dtype=str(raster.data.dtype),
            bands=raster.n_bands,
            crs=raster.crs,
            nodata=raster.nodata,
            band_names=list(raster.band_names),
            extras=extras,
        )
