# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Author:      Michael Amrhein (michael@adrhinum.de)
#
# Copyright:   (c) 2021 ff. Michael Amrhein
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Shared pytest fixtures.."""

import pytest
from hypothesis import strategies

from rationalsort import (
    CanonicalStore, INT_MAX, PrimitiveTable, Rational, RationalSort,
    Rounding, UnsupportedPolicy, get_dflt_rounding_mode,
    get_unsupported_policy, set_dflt_rounding_mode, set_unsupported_policy)


@pytest.fixture(scope="session",
                params=[rnd.name for rnd in Rounding],
                ids=[rnd.name for rnd in Rounding])
def rnd(request) -> Rounding:
    return Rounding[request.param]


def dflt_round(rnd):
    @pytest.fixture()
    def closure():
        prev_rnd = get_dflt_rounding_mode()
        set_dflt_rounding_mode(rnd)
        yield
        set_dflt_rounding_mode(prev_rnd)
    return closure


with_round_half_up = dflt_round(Rounding.ROUND_HALF_UP)
with_round_half_even = dflt_round(Rounding.ROUND_HALF_EVEN)


@pytest.fixture()
def raise_unsupported():
    prev_policy = get_unsupported_policy()
    set_unsupported_policy(UnsupportedPolicy.RAISE)
    yield
    set_unsupported_policy(prev_policy)


@pytest.fixture()
def store() -> CanonicalStore:
    return CanonicalStore()


@pytest.fixture()
def sort() -> RationalSort:
    return RationalSort()


@pytest.fixture()
def table(sort) -> PrimitiveTable:
    table = PrimitiveTable()
    sort.register_primitives(table)
    return table


# rationals whose sums, differences and products always fit 64 bits
def small_rationals(bound: int = 2 ** 15):
    return strategies.builds(
        Rational,
        strategies.integers(min_value=-bound, max_value=bound),
        strategies.integers(min_value=1, max_value=bound))


def rationals():
    return strategies.builds(
        Rational,
        strategies.integers(min_value=-INT_MAX, max_value=INT_MAX),
        strategies.integers(min_value=1, max_value=INT_MAX))
