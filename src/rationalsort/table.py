# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Dispatch table of primitive operations, keyed by name and operand sorts.

The table is filled once at setup time. Sorts translate between the host
engine's generic `Value` slots and the objects the primitive functions
operate on.
"""

from __future__ import annotations

from dataclasses import dataclass
import inspect
import logging
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from .errors import RegistrationError
from .rational import fits_int
from .result import UNIT, Result

__all__ = [
    'F64',
    'F64Sort',
    'I64',
    'I64Sort',
    'Primitive',
    'PrimitiveTable',
    'UNIT_SORT',
    'UnitSort',
    'Value',
]

logger = logging.getLogger(__name__)

I64 = "i64"
F64 = "f64"
UNIT_SORT = "Unit"


@dataclass(frozen=True)
class Value:
    """Generic value slot of the host engine."""

    sort: str
    bits: Any


@dataclass(frozen=True)
class Primitive:
    """Named pure function with fixed operand and result sorts."""

    name: str
    arg_sorts: Tuple[str, ...]
    result_sort: str
    func: Callable[..., Result]

    @property
    def key(self) -> Tuple[str, Tuple[str, ...]]:
        return self.name, self.arg_sorts


class I64Sort:

    name = I64

    def load(self, value: Value) -> int:
        return value.bits

    def store(self, obj: int) -> Value:
        if not fits_int(obj):
            raise OverflowError(f"{obj} exceeds 64 bits.")
        return Value(self.name, obj)


class F64Sort:

    name = F64

    def load(self, value: Value) -> float:
        return value.bits

    def store(self, obj: float) -> Value:
        return Value(self.name, float(obj))


class UnitSort:

    name = UNIT_SORT

    def load(self, value: Value) -> Any:
        return UNIT

    def store(self, obj: Any) -> Value:
        return Value(self.name, None)


class PrimitiveTable:
    """Registry of sorts and of the primitives operating on them.

    The sorts 'i64', 'f64' and 'Unit' are always present.
    """

    def __init__(self) -> None:
        self._sorts: Dict[str, Any] = {}
        self._primitives: Dict[Tuple[str, Tuple[str, ...]], Primitive] = {}
        for sort in (I64Sort(), F64Sort(), UnitSort()):
            self.add_sort(sort)

    def add_sort(self, sort: Any) -> None:
        """Declare `sort`, an object with `name`, `load` and `store`.

        Raises:
            RegistrationError: a different sort with the same name exists
        """
        registered = self._sorts.get(sort.name)
        if registered is sort:
            return
        if registered is not None:
            raise RegistrationError(f"Sort {sort.name!r} already declared.")
        self._sorts[sort.name] = sort

    def sort(self, name: str) -> Any:
        try:
            return self._sorts[name]
        except KeyError:
            raise RegistrationError(f"Unknown sort: {name!r}") from None

    def register(self, name: str, arg_sorts: Tuple[str, ...],
                 result_sort: str, func: Callable[..., Result]) -> Primitive:
        """Register `func` as primitive `name` over `arg_sorts`.

        Raises:
            RegistrationError: a sort is undeclared, `func` can't be called
                with len(arg_sorts) arguments or the signature is taken
        """
        arg_sorts = tuple(arg_sorts)
        for sort_name in (*arg_sorts, result_sort):
            self.sort(sort_name)
        try:
            inspect.signature(func).bind(*arg_sorts)
        except TypeError:
            raise RegistrationError(
                f"{func.__name__} does not accept {len(arg_sorts)} "
                "arguments.") from None
        prim = Primitive(name, arg_sorts, result_sort, func)
        if prim.key in self._primitives:
            raise RegistrationError(
                f"Primitive {name!r} over {arg_sorts} already registered.")
        self._primitives[prim.key] = prim
        logger.debug("Registered %s(%s) -> %s.", name, ", ".join(arg_sorts),
                     result_sort)
        return prim

    def lookup(self, name: str, arg_sorts: Tuple[str, ...]) -> Primitive:
        try:
            return self._primitives[name, tuple(arg_sorts)]
        except KeyError:
            raise RegistrationError(
                f"No primitive {name!r} over {tuple(arg_sorts)}.") from None

    def call(self, name: str, *args: Value) -> Optional[Value]:
        """Apply primitive `name` to `args`.

        Returns:
            the result as host value, or None if the primitive produced
            no result

        Raises:
            RegistrationError: no primitive `name` accepts the sorts of
                `args`
        """
        prim = self.lookup(name, tuple(arg.sort for arg in args))
        objs = [self._sorts[arg.sort].load(arg) for arg in args]
        result = prim.func(*objs)
        if not result:
            return None
        return self._sorts[prim.result_sort].store(result.value)

    def signatures(self, name: str) -> List[Tuple[str, ...]]:
        """Return the operand sorts `name` is registered for."""
        return [prim.arg_sorts for prim in self._primitives.values()
                if prim.name == name]

    def __contains__(self, name: object) -> bool:
        return any(prim.name == name for prim in self._primitives.values())

    def __iter__(self) -> Iterator[Primitive]:
        return iter(list(self._primitives.values()))

    def __len__(self) -> int:
        return len(self._primitives)
