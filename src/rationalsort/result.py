# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Results of partial primitive operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from typing import Any, Union


__all__ = [
    'FALSE',
    'NoResult',
    'OVERFLOW',
    'Reason',
    'Result',
    'Some',
    'UNDEFINED',
    'UNIT',
    'UNSUPPORTED',
    'Unit',
]


@unique
class Reason(Enum):
    """Why an operation produced no result."""

    UNDEFINED = 'undefined'
    OVERFLOW = 'overflow'
    FALSE = 'false'
    UNSUPPORTED = 'unsupported'


@unique
class Unit(Enum):
    """Trivial payload of a relation that holds."""

    UNIT = 'unit'

    def __repr__(self) -> str:
        return "UNIT"


UNIT = Unit.UNIT


@dataclass(frozen=True)
class Some:
    """Successful result carrying `value`."""

    value: Any

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class NoResult:
    """Absence of a result, tagged with its `reason`."""

    reason: Reason

    def __bool__(self) -> bool:
        return False


Result = Union[Some, NoResult]

UNDEFINED = NoResult(Reason.UNDEFINED)
OVERFLOW = NoResult(Reason.OVERFLOW)
FALSE = NoResult(Reason.FALSE)
UNSUPPORTED = NoResult(Reason.UNSUPPORTED)
