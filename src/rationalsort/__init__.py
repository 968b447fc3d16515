# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Canonical rational values and primitive operations for rewrite engines."""

import logging

from .config import (
    UnsupportedPolicy, get_unsupported_policy, set_unsupported_policy)
from .errors import (
    HandleError, NotYetImplementedError, RationalSortError,
    RegistrationError, StoreCapacityError)
from .expr import Call, Expr, Lit
from .rational import INT_MAX, INT_MIN, Rational, fits_int
from .result import NoResult, Reason, Result, Some, UNIT
from .rounding import Rounding, get_dflt_rounding_mode, set_dflt_rounding_mode
from .sort import RATIONAL_SORT_NAME, RationalSort
from .store import CanonicalStore, Handle, default_store
from .table import F64, I64, UNIT_SORT, Primitive, PrimitiveTable, Value
from .version import version_tuple as __version__  # noqa: F401

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define public namespace
__all__ = [
    'CanonicalStore',
    'Call',
    'Expr',
    'F64',
    'Handle',
    'HandleError',
    'I64',
    'INT_MAX',
    'INT_MIN',
    'Lit',
    'NoResult',
    'NotYetImplementedError',
    'Primitive',
    'PrimitiveTable',
    'RATIONAL_SORT_NAME',
    'Rational',
    'RationalSort',
    'RationalSortError',
    'Reason',
    'RegistrationError',
    'Result',
    'Rounding',
    'Some',
    'StoreCapacityError',
    'UNIT',
    'UNIT_SORT',
    'UnsupportedPolicy',
    'Value',
    'default_store',
    'fits_int',
    'get_dflt_rounding_mode',
    'get_unsupported_policy',
    'set_dflt_rounding_mode',
    'set_unsupported_policy',
]
