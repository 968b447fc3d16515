# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Test driver for package 'rationalsort' (comparisons)."""

from fractions import Fraction
import operator

import pytest
from hypothesis import given

from rationalsort import INT_MAX, Rational, Reason, Some, UNIT
from rationalsort.primitives import ge, gt, le, lt, maximum, minimum

from conftest import rationals


EQUALITY_OPS = (operator.eq, operator.ne)
ORDERING_OPS = (operator.le, operator.lt, operator.ge, operator.gt)
CMP_OPS = EQUALITY_OPS + ORDERING_OPS

VALUES = ((17, 1), (INT_MAX, 3), (-14, 33333), (0, 1))
VALUE_IDS = ("int", "large", "fraction", "zero")


@pytest.mark.parametrize("y", VALUES, ids=VALUE_IDS)
@pytest.mark.parametrize("x", VALUES, ids=VALUE_IDS)
@pytest.mark.parametrize("op",
                         [op for op in CMP_OPS],
                         ids=[op.__name__ for op in CMP_OPS])
def test_cmp(op, x, y):
    x1 = Rational(*x)
    x2 = Fraction(*x)
    y1 = Rational(*y)
    y2 = Fraction(*y)
    assert op(x1, y1) == op(x2, y2)
    assert op(y1, x1) == op(y2, x2)
    assert op(-x1, y1) == op(-x2, y2)
    assert op(x1, -y1) == op(x2, -y2)


# noinspection PyMissingOrEmptyDocstring
def chk_eq(rn, equiv):
    assert rn == equiv
    assert equiv == rn
    assert not(rn != equiv)
    assert not(equiv != rn)
    # x == y  <=> hash(x) == hash (y)
    assert hash(rn) == hash(equiv)


@pytest.mark.parametrize("value", (0, -17, INT_MAX), ids=("0", "-17", "max"))
def test_eq_integral(value):
    chk_eq(Rational(value), value)


@pytest.mark.parametrize(("num", "den"),
                         ((1, 2), (-INT_MAX, 19), (0, 5)),
                         ids=("half", "large", "zero"))
def test_eq_fraction(num, den):
    chk_eq(Rational(num, den), Fraction(num, den))


def test_ordering_with_integral():
    q = Rational(7, 2)
    assert 3 < q < 4
    assert q > 3
    assert q >= 3
    assert q <= 4


@pytest.mark.parametrize(("x", "y"),
                         (((1, 2), (3, 4)),
                          ((-7, 3), (-2, 1)),
                          ((0, 1), (1, 3)),
                          ((5, 8), (5, 8))),
                         ids=("half", "neg", "zero", "equal"))
@pytest.mark.parametrize("op",
                         [op for op in CMP_OPS],
                         ids=[op.__name__ for op in CMP_OPS])
def test_cmp_fraction(op, x, y):
    rn = Rational(*x)
    f = Fraction(*y)
    assert op(rn, f) == op(Fraction(*x), f)
    assert op(f, rn) == op(f, Fraction(*x))


@pytest.mark.parametrize("other", ["1/2", 0.5, None],
                         ids=("str", "float", "None"))
def test_cmp_incompatible(other):
    q = Rational(1, 2)
    assert q != other
    with pytest.raises(TypeError):
        q < other


@pytest.mark.parametrize(("func", "holds"),
                         ((lt, True), (le, True), (gt, False), (ge, False)),
                         ids=("lt", "le", "gt", "ge"))
def test_relation_primitives(func, holds):
    small, large = Rational(1, 2), Rational(3, 4)
    if holds:
        assert func(small, large) == Some(UNIT)
        assert func(large, small).reason is Reason.FALSE
    else:
        assert func(large, small) == Some(UNIT)
        assert func(small, large).reason is Reason.FALSE


@pytest.mark.parametrize(("func", "holds"),
                         ((lt, False), (le, True), (gt, False), (ge, True)),
                         ids=("lt", "le", "gt", "ge"))
def test_relation_primitives_equal(func, holds):
    q = Rational(-5, 3)
    assert bool(func(q, Rational(-10, 6))) is holds


@given(a=rationals(), b=rationals())
def test_relation_primitives_hypo(a, b):
    assert bool(lt(a, b)) is (a.as_fraction() < b.as_fraction())
    assert bool(gt(a, b)) is (a.as_fraction() > b.as_fraction())
    assert bool(le(a, b)) is not bool(gt(a, b))
    assert bool(ge(a, b)) is not bool(lt(a, b))


@given(a=rationals(), b=rationals())
def test_min_max_hypo(a, b):
    lo = minimum(a, b).value
    hi = maximum(a, b).value
    assert lo <= hi
    assert {lo, hi} == {a, b}
