# -*- coding: utf-8 -*-
"""
Processor Infrastructure Tests - Tunable parameters, versioning, progress.

Tests ``Annotated`` parameter collection and validation, the generated
keyword-only ``__init__``, the ``@processor_version`` /
``@processor_tags`` decorators, the missing-version warning and the
progress emitters.

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

import inspect
import logging
import warnings
from typing import Annotated

import numpy as np
import pytest

from rsfusion import ImageModality, ValidationError
from rsfusion.fusion import (
    CollectingEmitter,
    Desc,
    FusionProcessor,
    LoggingEmitter,
    NullEmitter,
    Options,
    ParamSpec,
    processor_tags,
    processor_version,
)
from rsfusion.fusion.progress import ProgressEmitter, format_checkpoint


# ---------------------------------------------------------------------------
# Markers and ParamSpec
# ---------------------------------------------------------------------------

class TestParamSpec:
    """Type and choice validation of single parameters."""

    def _spec(self, param_type, choices=None):
        return ParamSpec('p', param_type, choices=choices)

    def test_options_requires_choice(self):
        with pytest.raises(ValueError):
            Options()

    def test_bool_accepts_numpy_bool(self):
        self._spec(bool).validate(np.bool_(True))

    def test_bool_rejects_int(self):
        with pytest.raises(ValidationError, match="must be bool"):
            self._spec(bool).validate(1)

    def test_float_accepts_int(self):
        self._spec(float).validate(3)

    def test_float_rejects_bool(self):
        with pytest.raises(ValidationError):
            self._spec(float).validate(True)

    def test_choices_enforced(self):
        spec = self._spec(str, choices=('a', 'b'))
        spec.validate('a')
        with pytest.raises(ValidationError, match="allowed choices"):
            spec.validate('c')

    def test_required(self):
        assert self._spec(int).required

    def test_repr(self):
        assert "choices=('a',)" in repr(self._spec(str, choices=('a',)))


# ---------------------------------------------------------------------------
# Collection and generated __init__
# ---------------------------------------------------------------------------

@processor_version('0.2.0')
class _Blend(FusionProcessor):
    weight: Annotated[float, Desc('Blend weight')] = 0.5
    mode: Annotated[str, Options('linear', 'max'), Desc('Blend mode')] = 'linear'
    tag: Annotated[str, Desc('Required label')]

    def fuse(self, x, y, **kwargs):
        self._reject_unknown(kwargs)
        return self._resolve_params(kwargs)


class TestParamCollection:
    """__init_subclass__ gathers Annotated fields."""

    def test_specs_in_declaration_order(self):
        names = [s.name for s in _Blend.__param_specs__]
        assert names == ['weight', 'mode', 'tag']

    def test_spec_details(self):
        mode = _Blend.__param_specs__[1]
        assert mode.choices == ('linear', 'max')
        assert mode.description == 'Blend mode'
        assert mode.default == 'linear'

    def test_generated_signature_is_keyword_only(self):
        sig = inspect.signature(_Blend.__init__)
        params = list(sig.parameters.values())[1:]
        assert all(p.kind is inspect.Parameter.KEYWORD_ONLY for p in params)

    def test_required_param_missing_raises(self):
        with pytest.raises(TypeError, match="tag"):
            _Blend()

    def test_init_validates(self):
        with pytest.raises(ValidationError):
            _Blend(tag='t', mode='min')

    def test_resolve_overrides(self):
        proc = _Blend(tag='t')
        assert proc.fuse(None, None, weight=2) == {
            'weight': 2, 'mode': 'linear', 'tag': 't',
        }
        assert proc.weight == 0.5

    def test_reject_unknown(self):
        with pytest.raises(ValidationError, match="unknown options: gamma"):
            _Blend(tag='t').fuse(None, None, gamma=1.0)


# ---------------------------------------------------------------------------
# Versioning and tags
# ---------------------------------------------------------------------------

class TestVersioning:
    """Decorators stamp class metadata; unversioned classes warn."""

    def test_version_stamped(self):
        assert _Blend.__processor_version__ == '0.2.0'

    def test_versioned_class_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            _Blend(tag='t')

    def test_unversioned_class_warns(self):
        class _Unversioned(FusionProcessor):
            def fuse(self, x, y, **kwargs):
                return None

        with pytest.warns(UserWarning, match="processor version"):
            _Unversioned()

    def test_default_version_is_string(self):
        @processor_version()
        class _Auto(FusionProcessor):
            def fuse(self, x, y, **kwargs):
                return None

        assert isinstance(_Auto.__processor_version__, str)

    def test_tags(self):
        @processor_tags(modalities=[ImageModality.SAR], description='demo')
        class _Tagged:
            pass

        assert _Tagged.__processor_tags__ == {
            'modalities': (ImageModality.SAR,),
            'description': 'demo',
        }

    def test_tags_reject_non_modality(self):
        with pytest.raises(TypeError, match="ImageModality"):
            processor_tags(modalities=['SAR'])


# ---------------------------------------------------------------------------
# Progress emitters
# ---------------------------------------------------------------------------

class TestProgress:
    """Emitters and checkpoint framing."""

    def test_format_checkpoint(self):
        assert (format_checkpoint('Standardizing variables')
                == '********** Standardizing variables **********')

    def test_collecting_emitter(self):
        emitter = CollectingEmitter()
        emitter.emit('a')
        emitter.emit('b')
        assert emitter.messages == ['a', 'b']

    def test_emitters_satisfy_protocol(self):
        for emitter in (CollectingEmitter(), NullEmitter(), LoggingEmitter()):
            assert isinstance(emitter, ProgressEmitter)

    def test_logging_emitter(self, caplog):
        log = logging.getLogger('rsfusion.test')
        with caplog.at_level(logging.INFO, logger='rsfusion.test'):
            LoggingEmitter(log).emit('hello')
        assert caplog.records[-1].message == 'hello'
        assert caplog.records[-1].levelno == logging.INFO

    def test_logging_emitter_custom_level(self, caplog):
        log = logging.getLogger('rsfusion.test')
        with caplog.at_level(logging.DEBUG, logger='rsfusion.test'):
            LoggingEmitter(log, level=logging.DEBUG).emit('quiet')
        assert caplog.records[-1].levelno == logging.DEBUG
