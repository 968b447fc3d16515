# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Symbolic expressions handed back to the host engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple, Union


__all__ = ['Call', 'Expr', 'Lit']


@dataclass(frozen=True)
class Lit:
    """Literal value."""

    value: Any

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Call:
    """Application of the function named `head` to `args`."""

    head: str
    args: Tuple[Expr, ...] = ()

    def __str__(self) -> str:
        return f"({' '.join([self.head, *map(str, self.args)])})"


Expr = Union[Lit, Call]
