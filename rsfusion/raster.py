# -*- coding: utf-8 -*-
"""
Raster Model - Georeferenced multi-band raster held in memory.

Defines ``Extent``, the bounding box of a raster in map coordinates, and
``RasterImage``, a dense ``(bands, rows, cols)`` array tied to an extent,
an ordered list of band names and an optional no-data sentinel. This is
the type the fusion pipeline accepts and produces; file readers in
:mod:`rsfusion.IO` build it from GeoTIFFs.

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
from typing import Any, Dict, Mapping, NamedTuple, Optional, Sequence, Tuple

# Third-party
import numpy as np

# rsfusion internal
from rsfusion.exceptions import ValidationError
from rsfusion.vocabulary import ImageModality


class Extent(NamedTuple):
    """Bounding box of a raster in map coordinates.

    Attributes
    ----------
    xmin : float
        Western edge.
    ymin : float
        Southern edge.
    xmax : float
        Eastern edge.
    ymax : float
        Northern edge.
    """

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    @property
    def width(self) -> float:
        """Extent width in map units."""
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        """Extent height in map units."""
        return self.ymax - self.ymin

    def matches(self, other: 'Extent', rel_tol: float = 1e-9) -> bool:
        """Whether two extents describe the same bounding box.

        Coordinates are compared with a tolerance of
        ``rel_tol * max(1, |coordinate|)`` so that round-tripping
        through a file format does not break equality.

        Parameters
        ----------
        other : Extent
            Extent to compare against.
        rel_tol : float
            Relative tolerance. Default ``1e-9``.

        Returns
        -------
        bool
        """
        for a, b in zip(self, other):
            tol = rel_tol * max(1.0, abs(a), abs(b))
            if abs(a - b) > tol:
                return False
        return True


class RasterImage:
    """Multi-band raster with a spatial extent and no-data sentinel.

    Parameters
    ----------
    data : np.ndarray
        Pixel values, shape ``(bands, rows, cols)``. A 2-D
        ``(rows, cols)`` array is treated as a single band.
    extent : Extent or tuple, optional
        ``(xmin, ymin, xmax, ymax)``. Defaults to the pixel grid
        ``(0, 0, cols, rows)``.
    band_names : Sequence[str], optional
        One unique name per band. Defaults to ``B1 .. Bn``.
    nodata : float, optional
        Sentinel marking missing values. NaN always counts as missing,
        whether or not a sentinel is set.
    crs : str, optional
        Coordinate reference system string (e.g. ``'EPSG:32718'``).
    modality : ImageModality, optional
        Sensor modality of the raster.

    Raises
    ------
    ValidationError
        If the data is not a 2-D/3-D numeric array, the extent is
        degenerate, or the band names do not match the band count.

    Examples
    --------
    >>> import numpy as np
    >>> from rsfusion import RasterImage
    >>> img = RasterImage(np.array([[1.0, 2.0], [3.0, 4.0]]),
    ...                   extent=(0, 0, 20, 20))
    >>> img.shape
    (1, 2, 2)
    """

    def __init__(
        self,
        data: np.ndarray,
        extent: Optional[Sequence[float]] = None,
        band_names: Optional[Sequence[str]] = None,
        nodata: Optional[float] = None,
        crs: Optional[str] = None,
        modality: Optional[ImageModality] = None,
    ) -> None:
        arr = np.asarray(data)
        if arr.ndim == 2:
            arr = arr[np.newaxis, :, :]
        if arr.ndim != 3:
            raise ValidationError(
                f"data must be 2D (rows, cols) or 3D (bands, rows, cols), "
                f"got {arr.ndim}D with shape {arr.shape}"
            )
        if not (np.issubdtype(arr.dtype, np.integer)
                or np.issubdtype(arr.dtype, np.floating)):
            raise ValidationError(
                f"data must be real-valued numeric, got {arr.dtype}"
            )
        if 0 in arr.shape:
            raise ValidationError(
                f"data must not be empty, got shape {arr.shape}"
            )

        if extent is None:
            extent = (0.0, 0.0, float(arr.shape[2]), float(arr.shape[1]))
        if len(extent) != 4:
            raise ValidationError(
                f"extent must have 4 values (xmin, ymin, xmax, ymax), "
                f"got {len(extent)}"
            )
        ext = Extent(*(float(v) for v in extent))
        if ext.xmax <= ext.xmin or ext.ymax <= ext.ymin:
            raise ValidationError(f"extent is empty or inverted: {ext}")

        if band_names is None:
            band_names = [f"B{i + 1}" for i in range(arr.shape[0])]
        band_names = [str(n) for n in band_names]
        if len(band_names) != arr.shape[0]:
            raise ValidationError(
                f"Got {len(band_names)} band names for "
                f"{arr.shape[0]} bands"
            )
        if len(set(band_names)) != len(band_names):
            raise ValidationError(f"Band names must be unique: {band_names}")

        self._data = arr
        self._extent = ext
        self._band_names: Tuple[str, ...] = tuple(band_names)
        self._nodata = None if nodata is None else float(nodata)
        self._crs = crs
        self._modality = modality

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_array(
        cls,
        array: np.ndarray,
        extent: Optional[Sequence[float]] = None,
        **kwargs: Any,
    ) -> 'RasterImage':
        """Build a raster from a 2-D or ``(bands, rows, cols)`` array.

        Parameters
        ----------
        array : np.ndarray
            Pixel values.
        extent : tuple, optional
            ``(xmin, ymin, xmax, ymax)``.
        **kwargs
            Forwarded to the constructor (``band_names``, ``nodata``,
            ``crs``, ``modality``).

        Returns
        -------
        RasterImage
        """
        return cls(array, extent=extent, **kwargs)

    @classmethod
    def from_bands(
        cls,
        bands: Mapping[str, np.ndarray],
        extent: Optional[Sequence[float]] = None,
        **kwargs: Any,
    ) -> 'RasterImage':
        """Build a raster from an ordered mapping of band name to 2-D array.

        Parameters
        ----------
        bands : Mapping[str, np.ndarray]
            Band name to ``(rows, cols)`` array. Insertion order is
            band order.
        extent : tuple, optional
            ``(xmin, ymin, xmax, ymax)``.

        Returns
        -------
        RasterImage

        Raises
        ------
        ValidationError
            If the mapping is empty or the arrays differ in shape.
        """
        if not bands:
            raise ValidationError("bands mapping must not be empty")
        arrays = [np.asarray(a) for a in bands.values()]
        shape = arrays[0].shape
        for name, arr in zip(bands, arrays):
            if arr.shape != shape:
                raise ValidationError(
                    f"All bands must have the same shape. First band has "
                    f"shape {shape}, but '{name}' has shape {arr.shape}"
                )
        return cls(np.stack(arrays), extent=extent,
                   band_names=list(bands), **kwargs)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def data(self) -> np.ndarray:
        """Pixel values, shape ``(bands, rows, cols)``."""
        return self._data

    @property
    def extent(self) -> Extent:
        """Spatial extent."""
        return self._extent

    @property
    def band_names(self) -> Tuple[str, ...]:
        """Ordered band names."""
        return self._band_names

    @property
    def nodata(self) -> Optional[float]:
        """No-data sentinel, or None when only NaN marks missing values."""
        return self._nodata

    @property
    def crs(self) -> Optional[str]:
        """Coordinate reference system string."""
        return self._crs

    @property
    def modality(self) -> Optional[ImageModality]:
        """Sensor modality."""
        return self._modality

    @property
    def n_bands(self) -> int:
        return self._data.shape[0]

    @property
    def rows(self) -> int:
        return self._data.shape[1]

    @property
    def cols(self) -> int:
        return self._data.shape[2]

    @property
    def shape(self) -> Tuple[int, int, int]:
        """``(bands, rows, cols)``."""
        return self._data.shape

    @property
    def grid_shape(self) -> Tuple[int, int]:
        """``(rows, cols)``."""
        return (self.rows, self.cols)

    @property
    def resolution(self) -> Tuple[float, float]:
        """Pixel size ``(x, y)`` in map units."""
        return (self._extent.width / self.cols,
                self._extent.height / self.rows)

    # ------------------------------------------------------------------
    # Missing data
    # ------------------------------------------------------------------

    def missing_mask(self) -> np.ndarray:
        """Boolean mask of missing values.

        Returns
        -------
        np.ndarray
            Shape ``(bands, rows, cols)``, True where a value is NaN or
            equals the no-data sentinel.
        """
        if np.issubdtype(self._data.dtype, np.floating):
            mask = np.isnan(self._data)
        else:
            mask = np.zeros(self._data.shape, dtype=bool)
        if self._nodata is not None and not np.isnan(self._nodata):
            mask |= self._data == self._nodata
        return mask

    def band(self, name: str) -> np.ndarray:
        """Return one band by name.

        Raises
        ------
        KeyError
            If no band has that name.
        """
        try:
            idx = self._band_names.index(name)
        except ValueError:
            raise KeyError(name) from None
        return self._data[idx]

    def to_dict(self) -> Dict[str, Any]:
        """Summary of the raster geometry (no pixel data)."""
        return {
            'bands': self.n_bands,
            'rows': self.rows,
            'cols': self.cols,
            'dtype': str(self._data.dtype),
            'extent': tuple(self._extent),
            'band_names': list(self._band_names),
            'nodata': self._nodata,
            'crs': self._crs,
            'modality': self._modality.value if self._modality else None,
        }

    def __repr__(self) -> str:
        return (
            f"RasterImage(bands={self.n_bands}, rows={self.rows}, "
            f"cols={self.cols}, extent={tuple(self._extent)}, "
            f"nodata={self._nodata})"
        )


def is_raster_image(obj: Any) -> bool:
    """Whether *obj* is a raster type the fusion pipeline accepts."""
    return isinstance(obj, RasterImage)
