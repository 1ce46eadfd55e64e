# -*- coding: utf-8 -*-
"""
NumPy Writer - Write arrays to NumPy .npy and .npz formats.

Writes single arrays to ``.npy`` files and multiple named arrays (for
example the statistics of a fusion result) to ``.npz`` archives, with a
JSON sidecar holding shape, dtype and any metadata.

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
import json
from pathlib import Path
from typing import Any, Dict, Optional

# Third-party
import numpy as np

# rsfusion internal
from rsfusion.IO.base import ImageWriter


class NumpyWriter(ImageWriter):
    """Write arrays to NumPy .npy and .npz formats.

    Parameters
    ----------
    filepath : str or Path
        Output file path (``.npy`` or ``.npz``).
    metadata : ImageMetadata, optional
        Typed metadata merged into the JSON sidecar.

    Examples
    --------
    >>> from rsfusion.IO.numpy_io import NumpyWriter
    >>> with NumpyWriter('stats.npz') as writer:
    ...     writer.write_npz({'variance': var, 'proportion': pov},
    ...                      extra={'basis': 'correlation'})
    """

    def write(
        self,
        data: np.ndarray,
        geolocation: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Write a single array to a .npy file plus sidecar."""
        np.save(str(self.filepath), data)
        sidecar: Dict[str, Any] = {
            'shape': list(data.shape),
            'dtype': str(data.dtype),
        }
        self._write_sidecar(self.filepath.with_suffix(
            self.filepath.suffix + '.json'), sidecar, geolocation)

    def write_npz(
        self,
        arrays: Dict[str, np.ndarray],
        geolocation: Optional[Dict[str, Any]] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Write several named arrays to a .npz archive plus sidecar.

        Parameters
        ----------
        arrays : Dict[str, np.ndarray]
            Array name to data.
        geolocation : Dict[str, Any], optional
            Included in the sidecar.
        extra : Dict[str, Any], optional
            Additional JSON-serializable sidecar entries.

        Raises
        ------
        ValueError
            If *arrays* is empty.
        """
        if not arrays:
            raise ValueError("write_npz requires at least one array")
        np.savez(str(self.filepath), **arrays)
        sidecar: Dict[str, Any] = {
            'array_names': list(arrays.keys()),
            'shapes': {k: list(v.shape) for k, v in arrays.items()},
        }
        if extra:
            sidecar.update(extra)
        self._write_sidecar(
            Path(str(self.filepath) + '.json'), sidecar, geolocation,
        )

    def write_chip(
        self,
        data: np.ndarray,
        row_start: int,
        col_start: int,
        geolocation: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Not supported for NumPy format.

        Raises
        ------
        NotImplementedError
            Always raised; NumPy files do not support partial writes.
        """
        raise NotImplementedError(
            "NumPy .npy format does not support partial (chip) writes."
        )

    def _write_sidecar(
        self,
        path: Path,
        sidecar: Dict[str, Any],
        geolocation: Optional[Dict[str, Any]],
    ) -> None:
        if self.metadata is not None:
            sidecar.update(self.metadata.to_dict())
        if geolocation:
            sidecar['geolocation'] = geolocation
        with open(path, 'w') as f:
            json.dump(sidecar, f, indent=2, default=str)
