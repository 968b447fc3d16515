# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Primitive operations on rational values.

All operations are pure functions returning a `Result`. Outcomes without a
value (division by zero, overflow, a relation that does not hold, ...) are
returned as `NoResult` tagged with the reason, never raised.
"""

from __future__ import annotations

from functools import wraps
import logging
import math
from typing import Any, Callable, Optional

from .config import UnsupportedPolicy, get_unsupported_policy
from .errors import NotYetImplementedError
from .rational import Rational, fits_int
from .result import (
    FALSE, OVERFLOW, UNDEFINED, UNIT, UNSUPPORTED, Result, Some)
from .rounding import Rounding, round_ratio

__all__ = [
    'absolute',
    'add',
    'cbrt',
    'ceil',
    'denom',
    'div',
    'floor',
    'ge',
    'gt',
    'le',
    'log',
    'lt',
    'maximum',
    'minimum',
    'mul',
    'neg',
    'numer',
    'pow_',
    'rational',
    'round_',
    'sqrt',
    'sub',
    'to_f64',
]

logger = logging.getLogger(__name__)

ZERO = Rational(0)
ONE = Rational(1)


def _checked(func: Callable[..., Rational]) -> Callable[..., Result]:
    """Turn arithmetic exceptions raised by `func` into tagged results."""

    @wraps(func)
    def checked(*args: Any) -> Result:
        try:
            return Some(func(*args))
        except ZeroDivisionError:
            return UNDEFINED
        except OverflowError:
            return OVERFLOW

    return checked


def _unsupported(op: str, x: Rational) -> Result:
    logger.warning("%s(%s) is not implemented.", op, x)
    if get_unsupported_policy() is UnsupportedPolicy.RAISE:
        raise NotYetImplementedError(f"{op}({x}) is not implemented.")
    return UNSUPPORTED


# arithmetic

@_checked
def add(a: Rational, b: Rational) -> Rational:
    """a + b"""
    return a + b


@_checked
def sub(a: Rational, b: Rational) -> Rational:
    """a - b"""
    return a - b


@_checked
def mul(a: Rational, b: Rational) -> Rational:
    """a * b"""
    return a * b


@_checked
def div(a: Rational, b: Rational) -> Rational:
    """a / b, undefined for b == 0"""
    return a / b


def minimum(a: Rational, b: Rational) -> Result:
    return Some(min(a, b))


def maximum(a: Rational, b: Rational) -> Result:
    return Some(max(a, b))


def neg(a: Rational) -> Result:
    return Some(-a)


def absolute(a: Rational) -> Result:
    return Some(abs(a))


# rounding

def floor(a: Rational) -> Result:
    """Greatest integer less than or equal to `a`."""
    return Some(Rational(math.floor(a)))


def ceil(a: Rational) -> Result:
    """Least integer greater than or equal to `a`."""
    return Some(Rational(math.ceil(a)))


def round_(a: Rational, rounding: Optional[Rounding] = None) -> Result:
    """Integer nearest to `a`.

    Ties are resolved by `rounding`, which defaults to the current default
    rounding mode (ROUND_HALF_UP unless changed).
    """
    num, den = a.as_integer_ratio()
    return Some(Rational(round_ratio(num, den, rounding)))


# construction and projection

@_checked
def rational(numerator: int, denominator: int) -> Rational:
    """numerator / denominator in lowest terms, undefined for a zero
    denominator"""
    return Rational(numerator, denominator)


def numer(a: Rational) -> Result:
    """Numerator of `a` as 64 bit integer."""
    if fits_int(a.numerator):
        return Some(a.numerator)
    return OVERFLOW


def denom(a: Rational) -> Result:
    """Denominator of `a` as 64 bit integer."""
    if fits_int(a.denominator):
        return Some(a.denominator)
    return OVERFLOW


def to_f64(a: Rational) -> Result:
    """Nearest float to `a`."""
    return Some(float(a))


# special domains

def _checked_pow(base: Rational, exp: int) -> Rational:
    # square-and-multiply, never squaring past the highest bit of `exp`
    result = ONE
    while True:
        if exp & 1:
            result *= base
        exp >>= 1
        if not exp:
            return result
        base *= base


def pow_(base: Rational, exponent: Rational) -> Result:
    """base ** exponent for non-negative integral exponents.

    0 ** 0 and all negative or fractional exponents are undefined.
    """
    if not base:
        return Some(ZERO) if exponent > 0 else UNDEFINED
    if not exponent:
        return Some(ONE)
    if exponent.is_integer() and exponent > 0:
        try:
            return Some(_checked_pow(base, exponent.numerator))
        except OverflowError:
            return OVERFLOW
    return UNDEFINED


def log(a: Rational) -> Result:
    """Natural logarithm, only implemented for 1."""
    if a == ONE:
        return Some(ZERO)
    if a <= 0:
        return UNDEFINED
    return _unsupported("log", a)


def sqrt(a: Rational) -> Result:
    """Square root, defined only where it is rational."""
    num, den = a.as_integer_ratio()
    if num < 0:
        return UNDEFINED
    root_num = math.isqrt(num)
    root_den = math.isqrt(den)
    if root_num * root_num != num or root_den * root_den != den:
        return UNDEFINED
    return Some(Rational(root_num, root_den))


def cbrt(a: Rational) -> Result:
    """Cube root, only implemented for 1."""
    if a == ONE:
        return Some(ONE)
    return _unsupported("cbrt", a)


# comparison

def lt(a: Rational, b: Rational) -> Result:
    return Some(UNIT) if a < b else FALSE


def gt(a: Rational, b: Rational) -> Result:
    return Some(UNIT) if a > b else FALSE


def le(a: Rational, b: Rational) -> Result:
    return Some(UNIT) if a <= b else FALSE


def ge(a: Rational, b: Rational) -> Result:
    return Some(UNIT) if a >= b else FALSE
