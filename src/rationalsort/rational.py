# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Rational numbers with fixed-width numerator and denominator."""

from __future__ import annotations

from fractions import Fraction
import math
from numbers import Integral
import operator
from typing import Any, Optional, Tuple

from .rounding import round_ratio

__all__ = ['INT_BITS', 'INT_MAX', 'INT_MIN', 'Rational', 'fits_int']


INT_BITS = 64
INT_MAX = 2 ** (INT_BITS - 1) - 1
INT_MIN = -2 ** (INT_BITS - 1)


def fits_int(i: int) -> bool:
    """Return True if `i` can be represented as signed 64 bit integer."""
    return INT_MIN <= i <= INT_MAX


class Rational:
    """Rational number with 64 bit numerator and denominator.

    Args:
        numerator (int): numerator of the fraction (default: 0)
        denominator (int): denominator of the fraction (default: 1)

    The fraction is always held in lowest terms with a positive
    denominator. After reduction numerator and denominator must lie in
    [-INT_MAX, INT_MAX], so that negation can never overflow.

    All arithmetic operations are exact. They raise instead of wrapping
    around when a result can not be represented.

    Raises:
        TypeError: `numerator` or `denominator` is not an integer
        ZeroDivisionError: `denominator` is 0
        OverflowError: the reduced fraction does not fit the fixed width
    """

    __slots__ = ('_num', '_den')

    _num: int
    _den: int

    def __new__(cls, numerator: Any = 0, denominator: Any = 1) -> Rational:
        num = operator.index(numerator)
        den = operator.index(denominator)
        if den == 0:
            raise ZeroDivisionError(f"Rational({num}, 0)")
        gcd = math.gcd(num, den)
        if den < 0:
            gcd = -gcd
        num //= gcd
        den //= gcd
        if not (-INT_MAX <= num <= INT_MAX and den <= INT_MAX):
            raise OverflowError(
                f"Rational({numerator}, {denominator}) exceeds "
                f"{INT_BITS} bits")
        self = object.__new__(cls)
        object.__setattr__(self, "_num", num)
        object.__setattr__(self, "_den", den)
        return self

    @classmethod
    def from_fraction(cls, fraction: Fraction) -> Rational:
        """Return the Rational equal to `fraction`."""
        return cls(fraction.numerator, fraction.denominator)

    @property
    def numerator(self) -> int:
        """Numerator of `self` in lowest terms."""
        return self._num

    @property
    def denominator(self) -> int:
        """Positive denominator of `self` in lowest terms."""
        return self._den

    def as_integer_ratio(self) -> Tuple[int, int]:
        """Return the pair numerator, denominator of `self`."""
        return self._num, self._den

    def as_fraction(self) -> Fraction:
        """Return `self` as `fractions.Fraction`."""
        return Fraction(self._num, self._den)

    def is_integer(self) -> bool:
        """Return True if `self` has no fractional part."""
        return self._den == 1

    # immutability

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(
            f"'{self.__class__.__name__}' object is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(
            f"'{self.__class__.__name__}' object is immutable")

    # pickle / copy

    def __reduce__(self) -> Tuple[type, Tuple[int, int]]:
        return self.__class__, (self._num, self._den)

    def __copy__(self) -> Rational:
        return self

    def __deepcopy__(self, memo: Any) -> Rational:
        return self

    # string representation

    def __repr__(self) -> str:
        if self._den == 1:
            return f"{self.__class__.__name__}({self._num})"
        return f"{self.__class__.__name__}({self._num}, {self._den})"

    def __str__(self) -> str:
        if self._den == 1:
            return str(self._num)
        return f"{self._num}/{self._den}"

    # comparison

    def __hash__(self) -> int:
        return hash(self.as_fraction())

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Rational):
            return self._num == other._num and self._den == other._den
        if isinstance(other, (Integral, Fraction)):
            return self.as_fraction() == other
        return NotImplemented

    def _cross(self, other: Any) -> Optional[Tuple[int, int]]:
        # both denominators are positive, so cross products keep the order
        if isinstance(other, Rational):
            return self._num * other._den, other._num * self._den
        if isinstance(other, Integral):
            return self._num, int(other) * self._den
        if isinstance(other, Fraction):
            return (self._num * other.denominator,
                    other.numerator * self._den)
        return None

    def __lt__(self, other: Any) -> bool:
        cross = self._cross(other)
        if cross is None:
            return NotImplemented
        return cross[0] < cross[1]

    def __le__(self, other: Any) -> bool:
        cross = self._cross(other)
        if cross is None:
            return NotImplemented
        return cross[0] <= cross[1]

    def __gt__(self, other: Any) -> bool:
        cross = self._cross(other)
        if cross is None:
            return NotImplemented
        return cross[0] > cross[1]

    def __ge__(self, other: Any) -> bool:
        cross = self._cross(other)
        if cross is None:
            return NotImplemented
        return cross[0] >= cross[1]

    def __bool__(self) -> bool:
        return self._num != 0

    # arithmetic

    @classmethod
    def _coerce(cls, other: Any) -> Optional[Rational]:
        if isinstance(other, Rational):
            return other
        if isinstance(other, Integral):
            return cls(other)
        return None

    def __add__(self, other: Any) -> Rational:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Rational(self._num * other._den + other._num * self._den,
                        self._den * other._den)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Rational:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Rational(self._num * other._den - other._num * self._den,
                        self._den * other._den)

    def __rsub__(self, other: Any) -> Rational:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other: Any) -> Rational:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Rational(self._num * other._num, self._den * other._den)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Rational:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Rational(self._num * other._den, self._den * other._num)

    def __rtruediv__(self, other: Any) -> Rational:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    def __pos__(self) -> Rational:
        return self

    def __neg__(self) -> Rational:
        return Rational(-self._num, self._den)

    def __abs__(self) -> Rational:
        if self._num < 0:
            return -self
        return self

    # conversion

    def __float__(self) -> float:
        # int / int is correctly rounded, even for huge operands
        return self._num / self._den

    def __int__(self) -> int:
        return self.__trunc__()

    def __trunc__(self) -> int:
        if self._num < 0:
            return -(-self._num // self._den)
        return self._num // self._den

    def __floor__(self) -> int:
        return self._num // self._den

    def __ceil__(self) -> int:
        return -(-self._num // self._den)

    def __round__(self) -> int:
        """Return `self` rounded to an integer, using the current default
        rounding mode."""
        return round_ratio(self._num, self._den)
