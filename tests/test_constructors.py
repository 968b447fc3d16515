#!/usr/bin/env python
# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2018 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Test driver for package 'rationalsort' (constructors)."""

import copy
from fractions import Fraction
import pickle

import pytest
from hypothesis import given, strategies

from rationalsort import INT_MAX, INT_MIN, Rational


class IntWrapper:

    def __init__(self, i):
        assert isinstance(i, int)
        self.i = i

    def __index__(self):
        return self.i


def test_rational_no_value():
    rn = Rational()
    assert rn.numerator == 0
    assert rn.denominator == 1


@pytest.mark.parametrize(("num", "den", "red_num", "red_den"),
                         ((6, 8, 3, 4),
                          (-6, 8, -3, 4),
                          (6, -8, -3, 4),
                          (-6, -8, 3, 4),
                          (0, -17, 0, 1),
                          (17, 1, 17, 1),
                          (INT_MAX, INT_MAX, 1, 1),
                          (INT_MIN, 2, INT_MIN // 2, 1),
                          (INT_MIN, -INT_MIN, -1, 1)),
                         ids=("pos", "neg_num", "neg_den", "neg_both",
                              "zero", "int", "max", "min_even", "min_min"))
def test_rational_reduced(num, den, red_num, red_den):
    rn = Rational(num, den)
    assert rn.numerator == red_num
    assert rn.denominator == red_den


@given(num=strategies.integers(min_value=-INT_MAX, max_value=INT_MAX),
       den=strategies.integers(min_value=-INT_MAX,
                               max_value=INT_MAX).filter(lambda d: d != 0))
def test_rational_reduced_hypo(num, den):
    rn = Rational(num, den)
    f = Fraction(num, den)
    assert rn.numerator == f.numerator
    assert rn.denominator == f.denominator


def test_rational_index_args():
    rn = Rational(IntWrapper(10), IntWrapper(4))
    assert rn.as_integer_ratio() == (5, 2)


@pytest.mark.parametrize("num", [1.5, "3", Fraction(1, 2), None],
                         ids=("num=1.5", "num='3'", "num=Fraction",
                              "num=None"))
def test_rational_wrong_num_type(num):
    with pytest.raises(TypeError):
        Rational(num)
    with pytest.raises(TypeError):
        Rational(1, num)


def test_rational_zero_denominator():
    with pytest.raises(ZeroDivisionError):
        Rational(5, 0)


@pytest.mark.parametrize(("num", "den"),
                         ((INT_MIN, 1),
                          (INT_MAX + 1, 1),
                          (1, INT_MAX + 1),
                          (1, INT_MIN),
                          (3 ** 50, 2 ** 3)),
                         ids=("min", "max+1", "den_max+1", "den_min",
                              "large"))
def test_rational_overflow(num, den):
    with pytest.raises(OverflowError):
        Rational(num, den)


def test_rational_large_args_reducible():
    rn = Rational(3 * 2 ** 100, 2 ** 101)
    assert rn == Rational(3, 2)


@pytest.mark.parametrize(("num", "den"),
                         ((-12, 18), (0, 1), (INT_MAX, 7)),
                         ids=("fraction", "zero", "large"))
def test_rational_from_fraction(num, den):
    f = Fraction(num, den)
    rn = Rational.from_fraction(f)
    assert rn.as_fraction() == f


def test_rational_immutable():
    rn = Rational(1, 3)
    with pytest.raises(AttributeError):
        rn.foo = 2
    with pytest.raises(AttributeError):
        rn._num = 5
    with pytest.raises(AttributeError):
        del rn._den
    assert rn.as_integer_ratio() == (1, 3)


def test_copy_pickle():
    rn = Rational(-7, 12)
    assert copy.copy(rn) is rn
    assert copy.deepcopy(rn) is rn
    assert pickle.loads(pickle.dumps(rn)) == rn
