# -*- coding: utf-8 -*-
"""
Fusion Module - PCA fusion of two co-registered rasters.

Sub-modules
-----------
validation.py
    ``validate_compatibility`` -- type, extent and grid precondition gate.
stacking.py
    ``stack_bands`` -- structural merge of two rasters' bands.
features.py
    ``FeatureMatrix``, ``build_feature_matrix`` -- (pixels, bands) table
    with completeness mask and retained pixel positions.
pca.py
    ``PCAResult``, ``compute_pca`` -- eigendecomposition and variance,
    correlation and contribution statistics.
reconstruct.py
    ``reconstruct_components`` -- component scores back to raster form.
result.py
    ``FusionResult``, ``assemble_result`` -- the returned aggregate.
pipeline.py
    ``PCAFusion``, ``fuse`` -- the complete chain.
progress.py
    ``ProgressEmitter`` and concrete emitters for verbose runs.
base.py, params.py, versioning.py
    ``FusionProcessor`` base, ``Annotated`` parameter markers and the
    ``@processor_version`` / ``@processor_tags`` decorators.

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

from rsfusion.fusion.base import FusionProcessor
from rsfusion.fusion.features import FeatureMatrix, build_feature_matrix
from rsfusion.fusion.params import Desc, Options, ParamSpec
from rsfusion.fusion.pca import PCAResult, compute_pca, component_names
from rsfusion.fusion.pipeline import PCAFusion, fuse
from rsfusion.fusion.progress import (
    CollectingEmitter,
    LoggingEmitter,
    NullEmitter,
    ProgressEmitter,
)
from rsfusion.fusion.reconstruct import reconstruct_components
from rsfusion.fusion.result import FusionResult, assemble_result
from rsfusion.fusion.stacking import stack_bands
from rsfusion.fusion.validation import validate_compatibility
from rsfusion.fusion.versioning import processor_tags, processor_version

__all__ = [
    'FusionProcessor',
    'FeatureMatrix',
    'build_feature_matrix',
    'Desc',
    'Options',
    'ParamSpec',
    'PCAResult',
    'compute_pca',
    'component_names',
    'PCAFusion',
    'fuse',
    'CollectingEmitter',
    'LoggingEmitter',
    'NullEmitter',
    'ProgressEmitter',
    'reconstruct_components',
    'FusionResult',
    'assemble_result',
    'stack_bands',
    'validate_compatibility',
    'processor_tags',
    'processor_version',
]
