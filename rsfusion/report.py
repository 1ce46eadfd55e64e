# -*- coding: utf-8 -*-
"""
Fusion Report - Plain-text rendering of a ``FusionResult``.

Formats every field of a fusion result under fixed section headers:
the fused raster's geometry, then the variance, proportion of variance
and cumulative variance vectors, then the correlation and contribution
matrices labelled by band and component. Performs no computation.

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
from typing import List, Sequence

# Third-party
import numpy as np

# rsfusion internal
from rsfusion.fusion.result import FusionResult
from rsfusion.raster import RasterImage

_TITLE = (
    "******************** rsfusion - FUSION OF IMAGES "
    "********************"
)


def _section(title: str) -> str:
    return f"\n**** {title} ****"


def _fmt(value: float, precision: int) -> str:
    return f"{value:.{precision}f}"


def _format_raster(raster: RasterImage) -> List[str]:
    ext = raster.extent
    res_x, res_y = raster.resolution
    return [
        "class      : RasterImage",
        f"dimensions : {raster.rows}, {raster.cols}, "
        f"{raster.rows * raster.cols}, {raster.n_bands} "
        f"(nrow, ncol, ncell, nlayers)",
        f"resolution : {res_x:g}, {res_y:g}  (x, y)",
        f"extent     : {ext.xmin:g}, {ext.xmax:g}, {ext.ymin:g}, "
        f"{ext.ymax:g}  (xmin, xmax, ymin, ymax)",
        f"crs        : {raster.crs or 'NA'}",
        f"names      : {', '.join(raster.band_names)}",
    ]


def format_vector(
    labels: Sequence[str],
    values: np.ndarray,
    precision: int = 4,
) -> List[str]:
    """Two-line table: labels over values, right aligned."""
    cells = [_fmt(v, precision) for v in values]
    widths = [max(len(l), len(c)) for l, c in zip(labels, cells)]
    return [
        ' '.join(l.rjust(w) for l, w in zip(labels, widths)),
        ' '.join(c.rjust(w) for c, w in zip(cells, widths)),
    ]


def format_matrix(
    row_labels: Sequence[str],
    col_labels: Sequence[str],
    values: np.ndarray,
    precision: int = 4,
) -> List[str]:
    """Labelled matrix table, one line per row."""
    cells = [[_fmt(v, precision) for v in row] for row in values]
    label_w = max(len(r) for r in row_labels)
    widths = [
        max([len(col_labels[j])] + [len(row[j]) for row in cells])
        for j in range(len(col_labels))
    ]
    lines = [' ' * label_w + ' '
             + ' '.join(c.rjust(w) for c, w in zip(col_labels, widths))]
    for label, row in zip(row_labels, cells):
        lines.append(label.ljust(label_w) + ' '
                     + ' '.join(c.rjust(w) for c, w in zip(row, widths)))
    return lines


def present(result: FusionResult, precision: int = 4) -> str:
    """Render a fusion result as text.

    Parameters
    ----------
    result : FusionResult
        Output of ``fuse``.
    precision : int
        Decimal places for statistics. Default 4.

    Returns
    -------
    str
    """
    comps = result.component_names
    bands = result.band_names
    lines = [_TITLE]
    lines.append(_section('Fused images'))
    lines.extend(_format_raster(result.fused_images))
    lines.append(_section('Variance'))
    lines.extend(format_vector(comps, result.variance, precision))
    lines.append(_section('Proportion_of_variance'))
    lines.extend(format_vector(comps, result.proportion_of_variance, precision))
    lines.append(_section('Cumulative_variance'))
    lines.extend(format_vector(comps, result.cumulative_variance, precision))
    lines.append(_section('Correlation'))
    lines.extend(format_matrix(bands, comps, result.correlation, precision))
    lines.append(_section('Contribution_in_percentage'))
    lines.extend(format_matrix(bands, comps, result.contribution_in_pct, precision))
    return '\n'.join(lines) + '\n'
