# -*- coding: utf-8 -*-
"""
Progress Emitters - Pluggable sinks for fusion progress messages.

The fusion pipeline reports three checkpoints (extent verification,
standardization, statistics) when run verbosely. Messages go to an
emitter object with a single ``emit(message)`` method, so library and
test callers can stay silent, collect messages, or route them to
``logging``.

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
import logging
from typing import List, Optional, Protocol, runtime_checkable


_BANNER = '*' * 10


@runtime_checkable
class ProgressEmitter(Protocol):
    """Anything with an ``emit(message)`` method."""

    def emit(self, message: str) -> None:
        ...


def format_checkpoint(title: str) -> str:
    """Frame a checkpoint title in asterisks.

    >>> format_checkpoint('Verifying the same extent')
    '********** Verifying the same extent **********'
    """
    return f"{_BANNER} {title} {_BANNER}"


class LoggingEmitter:
    """Emit progress messages through a ``logging.Logger``.

    Parameters
    ----------
    logger : logging.Logger, optional
        Target logger. Default is the ``rsfusion`` package logger.
    level : int
        Log level. Default ``logging.INFO``.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        level: int = logging.INFO,
    ) -> None:
        self._logger = logger or logging.getLogger('rsfusion')
        self._level = level

    def emit(self, message: str) -> None:
        self._logger.log(self._level, message)


class NullEmitter:
    """Discard all progress messages."""

    def emit(self, message: str) -> None:
        pass


class CollectingEmitter:
    """Keep progress messages in memory, in order.

    Useful in tests and notebooks.
    """

    def __init__(self) -> None:
        self.messages: List[str] = []

    def emit(self, message: str) -> None:
        self.messages.append(message)
