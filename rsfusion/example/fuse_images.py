# -*- coding: utf-8 -*-
"""
Fuse Images - PCA fusion of an optical and a radar GeoTIFF.

Reads two co-registered GeoTIFFs that share an extent and pixel grid,
fuses their bands by principal component analysis, prints the variance,
correlation and contribution report, and writes the component raster
and statistics to an output directory.

Usage:
  python fuse_images.py optical.tif radar.tif out/
  python fuse_images.py optical.tif radar.tif out/ --no-standardize
  python fuse_images.py optical.tif radar.tif out/ --drop-incomplete --verbose
  python fuse_images.py --help

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
import argparse
import logging
import sys
from pathlib import Path

# rsfusion
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from rsfusion import ImageModality, fuse, present  # noqa: E402
from rsfusion.IO import read_raster, save_fusion_result  # noqa: E402


def parse_args():
    """Parse command-line arguments.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description=(
            "Fuse two co-registered GeoTIFFs (e.g. optical and radar) "
            "by principal component analysis."
        ),
    )
    parser.add_argument(
        "optical",
        type=Path,
        help="First input GeoTIFF (optical).",
    )
    parser.add_argument(
        "radar",
        type=Path,
        help="Second input GeoTIFF (radar).",
    )
    parser.add_argument(
        "output_dir",
        type=Path,
        help="Directory for the component raster and statistics.",
    )
    parser.add_argument(
        "--no-standardize",
        action="store_true",
        help="Decompose the covariance matrix instead of the correlation matrix.",
    )
    parser.add_argument(
        "--drop-incomplete",
        action="store_true",
        help="Exclude pixels with a missing value in any band.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print progress messages.",
    )
    parser.add_argument(
        "--prefix",
        type=str,
        default="fusion",
        help="Output file name prefix (default: fusion).",
    )
    return parser.parse_args()


def main():
    """Read both rasters, fuse them, print the report and save outputs."""
    args = parse_args()
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(message)s",
    )

    print(f"Loading: {args.optical}")
    optical = read_raster(args.optical, modality=ImageModality.MSI)
    print(f"  {optical}")
    print(f"Loading: {args.radar}")
    radar = read_raster(args.radar, modality=ImageModality.SAR)
    print(f"  {radar}")

    result = fuse(
        optical,
        radar,
        standardize=not args.no_standardize,
        drop_incomplete=args.drop_incomplete,
        verbose=args.verbose,
    )
    print(present(result))

    paths = save_fusion_result(result, args.output_dir, prefix=args.prefix)
    print(f"Components: {paths['components']}")
    print(f"Statistics: {paths['statistics']}")


if __name__ == "__main__":
    main()
