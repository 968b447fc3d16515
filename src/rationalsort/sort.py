# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""The rational sort as seen by the host engine."""

from __future__ import annotations

from typing import Optional, Tuple

from . import primitives as prims
from .expr import Call, Expr, Lit
from .rational import Rational
from .store import CanonicalStore, default_store
from .table import F64, I64, UNIT_SORT, PrimitiveTable, Value

__all__ = ['RATIONAL_SORT_NAME', 'RationalSort']


RATIONAL_SORT_NAME = "Rational"


class RationalSort:
    """Sort of exact rational numbers.

    Args:
        store (CanonicalStore): store holding the values of this sort
            (default: None, meaning a new store owned by the sort)
        name (str): name the sort is registered under
            (default: "Rational")

    Values of the sort are handles into `store`. Sorts sharing a store
    share their handles.
    """

    def __init__(self, store: Optional[CanonicalStore] = None,
                 name: str = RATIONAL_SORT_NAME) -> None:
        self.name = name
        self.values = CanonicalStore() if store is None else store

    @classmethod
    def shared(cls) -> RationalSort:
        """Return a sort bound to the process-wide default store."""
        return cls(default_store())

    def load(self, value: Value) -> Rational:
        """Return the Rational held by `value`."""
        self._check(value)
        return self.values.resolve(value.bits)

    def store(self, rational: Rational) -> Value:
        """Return the value holding `rational`."""
        return Value(self.name, self.values.intern(rational))

    def _check(self, value: Value) -> None:
        if value.sort != self.name:
            raise TypeError(f"{value!r} is not of sort {self.name!r}.")

    def register_primitives(self, table: PrimitiveTable) -> None:
        """Declare the sort in `table` and register its primitives."""
        table.add_sort(self)
        rat = self.name
        for name, func in (("+", prims.add),
                           ("-", prims.sub),
                           ("*", prims.mul),
                           ("/", prims.div),
                           ("min", prims.minimum),
                           ("max", prims.maximum),
                           ("pow", prims.pow_)):
            table.register(name, (rat, rat), rat, func)
        for name, func in (("neg", prims.neg),
                           ("abs", prims.absolute),
                           ("floor", prims.floor),
                           ("ceil", prims.ceil),
                           ("round", prims.round_),
                           ("log", prims.log),
                           ("sqrt", prims.sqrt),
                           ("cbrt", prims.cbrt)):
            table.register(name, (rat,), rat, func)
        table.register("rational", (I64, I64), rat, prims.rational)
        table.register("numer", (rat,), I64, prims.numer)
        table.register("denom", (rat,), I64, prims.denom)
        table.register("to-f64", (rat,), F64, prims.to_f64)
        for name, func in (("<", prims.lt),
                           (">", prims.gt),
                           ("<=", prims.le),
                           (">=", prims.ge)):
            table.register(name, (rat, rat), UNIT_SORT, func)

    def make_expr(self, value: Value) -> Tuple[int, Expr]:
        """Return cost and expression reconstructing `value`."""
        num, den = self.load(value).as_integer_ratio()
        return 1, Call("rational", (Lit(num), Lit(den)))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
