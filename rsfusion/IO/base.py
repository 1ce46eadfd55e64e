# -*- coding: utf-8 -*-
"""
IO Base Classes - Abstract interfaces for raster readers and writers.

Defines abstract base classes for reading rasters into ``RasterImage``
objects and writing arrays or rasters back to disk. Concrete
implementations (GeoTIFF, NumPy) inherit from these classes.

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
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union, TYPE_CHECKING

# Third-party
import numpy as np

# rsfusion internal
from rsfusion.IO.models import ImageMetadata

if TYPE_CHECKING:
    from rsfusion.raster import RasterImage
    from rsfusion.vocabulary import ImageModality


class ImageReader(ABC):
    """
    Abstract base class for raster readers.

    Attributes
    ----------
    filepath : Path
        Path to the image file.
    metadata : ImageMetadata
        Image metadata extracted from the file.
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        """
        Open a raster file and load its metadata.

        Parameters
        ----------
        filepath : Union[str, Path]
            Path to the image file.

        Raises
        ------
        FileNotFoundError
            If the specified filepath does not exist.
        """
        self.filepath = Path(filepath)
        if not self.filepath.exists():
            raise FileNotFoundError(f"File not found: {self.filepath}")

        self.metadata: Optional[ImageMetadata] = None
        self._load_metadata()

    @abstractmethod
    def _load_metadata(self) -> None:
        """Populate ``self.metadata`` from the file."""
        pass

    @abstractmethod
    def read_chip(
        self,
        row_start: int,
        row_end: int,
        col_start: int,
        col_end: int,
        bands: Optional[List[int]] = None,
    ) -> np.ndarray:
        """
        Read a spatial subset (chip) of the image.

        Parameters
        ----------
        row_start : int
            Starting row index (inclusive).
        row_end : int
            Ending row index (exclusive).
        col_start : int
            Starting column index (inclusive).
        col_end : int
            Ending column index (exclusive).
        bands : Optional[List[int]], default=None
            Band indices to read (0-based). If None, read all bands.

        Returns
        -------
        np.ndarray
            ``(rows, cols)`` for a single band or
            ``(bands, rows, cols)`` for several.
        """
        pass

    def read_full(self, bands: Optional[List[int]] = None) -> np.ndarray:
        """
        Read the entire image.

        Loads the whole dataset into memory.
        """
        shape = self.get_shape()
        return self.read_chip(0, shape[0], 0, shape[1], bands=bands)

    @abstractmethod
    def get_shape(self) -> Tuple[int, ...]:
        """``(rows, cols)`` or ``(rows, cols, bands)``."""
        pass

    @abstractmethod
    def get_dtype(self) -> np.dtype:
        """NumPy data type of the image pixels."""
        pass

    @abstractmethod
    def get_geolocation(self) -> Optional[Dict[str, Any]]:
        """
        Get geolocation information for the image.

        Returns
        -------
        Optional[Dict[str, Any]]
            ``'crs'``, ``'transform'``, ``'bounds'`` and
            ``'resolution'``, or None if the image is not georeferenced.
        """
        pass

    @abstractmethod
    def to_raster(
        self,
        modality: Optional['ImageModality'] = None,
    ) -> 'RasterImage':
        """Read the whole image as a ``RasterImage``."""
        pass

    def close(self) -> None:
        """Release file handles. Default does nothing."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class ImageWriter(ABC):
    """
    Abstract base class for raster writers.

    Attributes
    ----------
    filepath : Path
        Path where the image will be written.
    metadata : ImageMetadata or None
        Metadata to be written alongside the data.
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        metadata: Optional[ImageMetadata] = None,
    ) -> None:
        self.filepath = Path(filepath)
        self.metadata = metadata

    @abstractmethod
    def write(
        self,
        data: np.ndarray,
        geolocation: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Write image data to file.

        Parameters
        ----------
        data : np.ndarray
            Image data to write.
        geolocation : Optional[Dict[str, Any]], default=None
            Geolocation information (``'crs'``, ``'transform'``).
        """
        pass

    @abstractmethod
    def write_chip(
        self,
        data: np.ndarray,
        row_start: int,
        col_start: int,
        geolocation: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Write a spatial subset into an existing file.

        Raises
        ------
        ValueError
            If the chip does not fit inside the file.
        """
        pass

    def close(self) -> None:
        """Release file handles. Default does nothing."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
